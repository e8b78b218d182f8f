"""Angle and torsion perception from a structure's bond graph.

The functions here walk the bonds of a :class:`~molattr.structure.Structure`
and fill :class:`~molattr.angle.AngleSet` / :class:`~molattr.torsion.TorsionSet`
attributes. Ring perception is not part of this module.
"""

from __future__ import annotations

import logging

from .angle import Angle, AngleSet
from .config import Config, load_config_from_file
from .decorators import time_it
from .geometry import bond_angle, dihedral
from .structure import Structure
from .torsion import Torsion, TorsionSet

logger = logging.getLogger(__name__)


@time_it
def find_angles(structure: Structure, config: Config | None = None) -> AngleSet:
    """Collect every ``a-vertex-b`` angle of the bond graph.

    Parameters
    ----------
    structure:
        Structure whose bonds define the angles.
    config:
        Optional configuration. ``perception.skip_hydrogen_vertices`` skips
        hydrogen vertices and ``perception.measure_geometry`` measures each
        angle from the coordinates.

    Returns
    -------
    AngleSet
        A new, unattached angle set.

    """
    if config is None:
        config = load_config_from_file()
    skip_hydrogens = bool(config.perception.skip_hydrogen_vertices)
    measure = bool(config.perception.measure_geometry)

    angles = AngleSet()
    for vertex in structure.atoms:
        if skip_hydrogens and vertex.is_hydrogen:
            continue
        neighbors = vertex.neighbors
        for i, a in enumerate(neighbors):
            for b in neighbors[i + 1:]:
                angle = Angle(vertex, a, b)
                if measure:
                    angle.radians = bond_angle(a.position, vertex.position, b.position)
                angles.set_data(angle)

    logger.info("Found %d angles in structure with %d atoms", angles.size, structure.n_atoms)
    return angles


@time_it
def find_torsions(structure: Structure, config: Config | None = None) -> TorsionSet:
    """Collect the torsions around every bond of the structure.

    Bonds with a hydrogen at either end have no torsion. Each remaining bond
    contributes one :class:`~molattr.torsion.Torsion` holding every ``a-b-c-d``
    combination of neighbours around it.

    Parameters
    ----------
    structure:
        Structure whose bonds define the torsions.
    config:
        Optional configuration. ``perception.include_proton_rotors`` keeps
        torsions whose distal atoms are all hydrogens and
        ``perception.measure_geometry`` measures each dihedral.

    Returns
    -------
    TorsionSet
        A new, unattached torsion set.

    """
    if config is None:
        config = load_config_from_file()
    include_rotors = bool(config.perception.include_proton_rotors)
    measure = bool(config.perception.measure_geometry)

    torsions = TorsionSet()
    skipped = 0
    for bond in structure.bonds:
        b, c = bond.begin, bond.end
        if b.is_hydrogen or c.is_hydrogen:
            continue

        torsion = Torsion()
        for a in b.neighbors:
            if a is c:
                continue
            for d in c.neighbors:
                if d is b or d is a:
                    continue
                torsion.add_torsion(a, b, c, d)
                if measure:
                    torsion.set_angle(
                        dihedral(a.position, b.position, c.position, d.position),
                        torsion.size - 1,
                    )

        if torsion.empty:
            continue
        if not include_rotors and torsion.is_proton_rotor():
            skipped += 1
            continue
        torsions.set_data(torsion)

    logger.info(
        "Found %d torsions (%d proton rotors skipped) in structure with %d atoms",
        torsions.size,
        skipped,
        structure.n_atoms,
    )
    return torsions
