import math

import numpy as np
import pytest

from molattr.api import annotate_structure, wrap_into_cell
from molattr.attributes import CommentAttribute
from molattr.kinds import DataKind
from molattr.structure import Structure
from molattr.unit_cell import UnitCell


def test_annotate_structure_attaches_angles_and_torsions(ethane, default_cfg):
    ethane.attach(CommentAttribute("keep me"))
    result = annotate_structure(ethane, default_cfg)

    assert result is ethane
    assert len(ethane.get_data(DataKind.ANGLE)) == 1
    assert len(ethane.get_data(DataKind.TORSION)) == 1
    assert ethane.get_first(DataKind.ANGLE).size == 12
    assert ethane.get_first(DataKind.COMMENT).data == "keep me"


def test_annotate_structure_replaces_stale_sets(butane_skeleton, default_cfg):
    annotate_structure(butane_skeleton, default_cfg)
    butane_skeleton.add_bond(0, 3)
    annotate_structure(butane_skeleton, default_cfg)

    assert len(butane_skeleton.get_data(DataKind.ANGLE)) == 1
    assert len(butane_skeleton.get_data(DataKind.TORSION)) == 1
    assert butane_skeleton.get_first(DataKind.ANGLE).size == 4


def test_wrap_into_cell(default_cfg):
    s = Structure(["Na", "Cl"], [(11.0, -1.0, 5.0), (2.0, 3.0, 4.0)])
    cell = UnitCell()
    cell.set_data(10.0, 10.0, 10.0, math.pi / 2, math.pi / 2, math.pi / 2)
    s.attach(cell)

    wrap_into_cell(s, default_cfg)
    np.testing.assert_allclose(s.coordinates, [(1.0, 9.0, 5.0), (2.0, 3.0, 4.0)], atol=1e-9)
    assert all(isinstance(x, float) for x in s.coordinates[0])


def test_wrap_into_cell_requires_cell(sample_structure, default_cfg):
    with pytest.raises(ValueError, match="no unit cell"):
        wrap_into_cell(sample_structure, default_cfg)


@pytest.mark.parametrize("gamma", [0.0, None])
def test_wrap_into_cell_rejects_unusable_cell(default_cfg, gamma):
    original = [(11.0, -1.0, 5.0), (2.0, 3.0, 4.0)]
    s = Structure(["Na", "Cl"], list(original))
    cell = UnitCell()
    if gamma is not None:
        cell.set_data(5.0, 5.0, 5.0, math.pi / 2, math.pi / 2, gamma)
    s.attach(cell)

    with pytest.raises(ValueError, match="unset or degenerate"):
        wrap_into_cell(s, default_cfg)
    assert s.coordinates == original
