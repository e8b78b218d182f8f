import math

import pytest

from molattr.geometry import bond_angle, dihedral


def test_bond_angle():
    assert bond_angle((1.0, 0.0, 0.0), (0.0, 0.0, 0.0), (0.0, 2.0, 0.0)) == pytest.approx(math.pi / 2)
    assert bond_angle((1.0, 0.0, 0.0), (0.0, 0.0, 0.0), (-3.0, 0.0, 0.0)) == pytest.approx(math.pi)
    assert bond_angle((1.0, 0.0, 0.0), (0.0, 0.0, 0.0), (2.0, 0.0, 0.0)) == pytest.approx(0.0)


def test_dihedral_reference_geometries():
    b, c = (0.0, 0.0, 0.0), (1.0, 0.0, 0.0)
    a = (0.0, 1.0, 0.0)
    assert dihedral(a, b, c, (1.0, 1.0, 0.0)) == pytest.approx(0.0)
    assert dihedral(a, b, c, (1.0, -1.0, 0.0)) == pytest.approx(math.pi)
    assert abs(dihedral(a, b, c, (1.0, 0.0, 1.0))) == pytest.approx(math.pi / 2)


def test_dihedral_sign_flips_with_mirror_image():
    b, c = (0.0, 0.0, 0.0), (1.0, 0.0, 0.0)
    a = (0.0, 1.0, 0.0)
    left = dihedral(a, b, c, (1.0, 0.0, 1.0))
    right = dihedral(a, b, c, (1.0, 0.0, -1.0))
    assert left == pytest.approx(-right)
    d = (1.0, 0.0, 1.0)
    assert dihedral(d, c, b, a) == pytest.approx(dihedral(a, b, c, d))
