"""Public high-level Python API for common annotation workflows.

This module provides convenience functions built on top of the attribute kinds
and the perception utilities. They operate on a
:class:`~molattr.structure.Structure` in place and return it.

"""

from __future__ import annotations

import logging
from typing import cast

import numpy as np

from .config import Config, load_config_from_file
from .kinds import DataKind
from .perception import find_angles, find_torsions
from .structure import Structure
from .unit_cell import UnitCell

logger = logging.getLogger(__name__)


def annotate_structure(structure: Structure, config: Config | None = None) -> Structure:
    """Perceive angles and torsions and attach them to ``structure``.

    Angle and torsion sets already attached to the structure are detached
    first, since they may refer to an older bond graph.

    Args:
        structure (Structure): Structure with atoms, coordinates and bonds.
        config (Config, optional): Config object controlling perception. If None,
            the configuration will be loaded from the default file.

    Returns:
        Structure: The same structure, with fresh :class:`~molattr.angle.AngleSet`
        and :class:`~molattr.torsion.TorsionSet` attributes attached.

    """
    if config is None:
        config = load_config_from_file()

    for kind in (DataKind.ANGLE, DataKind.TORSION):
        for stale in structure.get_data(kind):
            structure.detach(stale)

    structure.attach(find_angles(structure, config))
    structure.attach(find_torsions(structure, config))
    return structure


def wrap_into_cell(structure: Structure, config: Config | None = None) -> Structure:
    """Move every atom into the unit cell attached to ``structure``.

    Coordinates are converted to fractional coordinates, wrapped into
    ``[0, 1)`` using ``crystal.wrap_tolerance`` and converted back.

    Args:
        structure (Structure): Structure with a :class:`~molattr.unit_cell.UnitCell`
            attached.
        config (Config, optional): Config object. If None, the configuration will
            be loaded from the default file.

    Returns:
        Structure: The same structure with updated coordinates.

    Raises:
        ValueError: If no unit cell is attached to the structure, or if the
            attached cell is unset or degenerate. Coordinates are left untouched.

    """
    if config is None:
        config = load_config_from_file()

    cell = structure.get_first(DataKind.UNIT_CELL)
    if cell is None:
        raise ValueError("Structure has no unit cell attached")
    cell = cast(UnitCell, cell)

    if structure.n_atoms == 0:
        return structure

    if not np.all(np.isfinite(cell.get_fractional_matrix())):
        raise ValueError("Attached unit cell is unset or degenerate; cannot wrap coordinates")

    tolerance = float(config.crystal.wrap_tolerance)
    frac = cell.cartesian_to_fractional(structure.coordinates)
    wrapped = cell.wrap_fractional_coordinate(frac, tolerance)
    cart = cell.fractional_to_cartesian(wrapped)

    structure.coordinates = [(float(x), float(y), float(z)) for x, y, z in cart]
    logger.info("Wrapped %d atoms into the unit cell", structure.n_atoms)
    return structure
