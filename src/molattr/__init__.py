"""molattr: strongly-typed annotations for molecular structures.

This package provides tagged attributes that attach auxiliary data to atoms,
bonds and whole structures without changing their definitions:
- Simple kinds: key/value pairs, comments, external and virtual bonds, ring sets
- Conformer data (energies, forces, velocities, displacements)
- Point/space-group symmetry and crystallographic unit cells with
  fractional/Cartesian coordinate transforms
- Torsion and bond-angle relationships for conformational analysis

Every attribute carries a :class:`DataKind` so a host :class:`Structure` can
look it up by kind as well as by name.
"""

from .angle import Angle, AngleSet
from .api import annotate_structure, wrap_into_cell
from .attributes import (
    CommentAttribute,
    ExternalBondRecord,
    ExternalBondSet,
    PairAttribute,
    RingSet,
    SymmetryInfo,
    VirtualBondRecord,
)
from .base import TaggedAttribute
from .config import Config, default_config, load_config_from_file, save_config_to_file
from .conformers import ConformerSet
from .decorators import time_it
from .kinds import DataKind
from .logging_utils import configure_logging
from .perception import find_angles, find_torsions
from .structure import Atom, Bond, Ring, Structure
from .torsion import Torsion, TorsionSet
from .unit_cell import CellRepresentation, LatticeType, UnitCell

__all__ = [
    # Attribute framework
    "DataKind",
    "TaggedAttribute",
    # Simple attribute kinds
    "PairAttribute",
    "CommentAttribute",
    "ExternalBondRecord",
    "ExternalBondSet",
    "VirtualBondRecord",
    "RingSet",
    "SymmetryInfo",
    "ConformerSet",
    # Crystallography
    "UnitCell",
    "CellRepresentation",
    "LatticeType",
    # Geometric relationships
    "Torsion",
    "TorsionSet",
    "Angle",
    "AngleSet",
    # Host structure
    "Atom",
    "Bond",
    "Ring",
    "Structure",
    # Perception and convenience functions
    "find_angles",
    "find_torsions",
    "annotate_structure",
    "wrap_into_cell",
    # Configuration
    "Config",
    "default_config",
    "load_config_from_file",
    "save_config_to_file",
    # Logging and decorators
    "configure_logging",
    "time_it",
]
