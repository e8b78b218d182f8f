import math

import pytest

from molattr.config import Config
from molattr.structure import Structure


def _ring_positions(radius, z, angles_deg):
    return [
        (radius * math.cos(math.radians(t)), radius * math.sin(math.radians(t)), z)
        for t in angles_deg
    ]


@pytest.fixture
def sample_structure():
    """Methane with its four C-H bonds."""
    structure = Structure(
        symbols=["C", "H", "H", "H", "H"],
        coordinates=[
            (0.0, 0.0, 0.0),
            (0.63, 0.63, 0.63),
            (-0.63, -0.63, 0.63),
            (-0.63, 0.63, -0.63),
            (0.63, -0.63, -0.63),
        ],
        charge=0,
        multiplicity=1,
        comment="Methane",
    )
    for i in range(1, 5):
        structure.add_bond(0, i)
    return structure


@pytest.fixture
def ethane():
    """Staggered ethane: atoms 0-1 are carbons, 2-4 bonded to 0, 5-7 bonded to 1."""
    coords = [(0.0, 0.0, 0.765), (0.0, 0.0, -0.765)]
    coords += _ring_positions(1.02, 1.165, [0, 120, 240])
    coords += _ring_positions(1.02, -1.165, [60, 180, 300])
    structure = Structure(["C", "C"] + ["H"] * 6, coords, comment="Ethane")
    structure.add_bond(0, 1)
    for h in (2, 3, 4):
        structure.add_bond(0, h)
    for h in (5, 6, 7):
        structure.add_bond(1, h)
    return structure


@pytest.fixture
def butane_skeleton():
    """Four carbons in a planar anti arrangement with right-angle bends."""
    structure = Structure(
        symbols=["C", "C", "C", "C"],
        coordinates=[(0.0, 1.0, 0.0), (0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (1.0, -1.0, 0.0)],
    )
    structure.add_bond(0, 1)
    structure.add_bond(1, 2)
    structure.add_bond(2, 3)
    return structure


@pytest.fixture
def default_cfg():
    return Config()
