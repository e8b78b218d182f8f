import numpy as np
import pytest

from molattr.attributes import CommentAttribute, PairAttribute
from molattr.kinds import DataKind
from molattr.structure import Structure
from molattr.unit_cell import UnitCell


def test_structure_initialization(sample_structure):
    s = sample_structure
    assert s.symbols == ["C", "H", "H", "H", "H"]
    assert len(s.coordinates) == 5
    assert s.charge == 0
    assert s.multiplicity == 1
    assert s.comment == "Methane"
    assert s.energy is None
    assert s.metadata == {}
    assert s.data == []


def test_structure_n_atoms(sample_structure):
    assert sample_structure.n_atoms == 5
    assert len(sample_structure.atoms) == 5


def test_structure_with_energy(sample_structure):
    s = sample_structure
    s2 = s.with_energy(-100.0)
    assert s2 is s
    assert s.energy == -100.0


def test_atomic_numbers_become_symbols():
    s = Structure(np.array([8, 1, 1]), [(0.0, 0.0, 0.0), (0.96, 0.0, 0.0), (-0.24, 0.93, 0.0)])
    assert s.symbols == ["O", "H", "H"]
    assert s.atoms[0].atomic_number == 8
    assert s.atoms[1].is_hydrogen


def test_invalid_structures():
    with pytest.raises(ValueError):
        Structure(["H", "H"], [(0.0, 0.0, 0.0)])
    with pytest.raises(ValueError):
        Structure([0], [(0.0, 0.0, 0.0)])


def test_atoms_and_bonds(sample_structure):
    c, h1, h2, _, _ = sample_structure.atoms
    assert not c.is_hydrogen
    assert h1.is_hydrogen
    np.testing.assert_allclose(h1.position, [0.63, 0.63, 0.63])

    assert len(sample_structure.bonds) == 4
    bond = sample_structure.get_bond(0, 1)
    assert bond is c.bond_to(h1)
    assert bond.partner(c) is h1
    assert c.bond_to(c) is None
    assert h1.bond_to(h2) is None
    assert sample_structure.get_bond(1, 2) is None
    assert set(map(id, c.neighbors)) == {id(a) for a in sample_structure.atoms[1:]}


def test_add_bond_validation(sample_structure):
    with pytest.raises(IndexError):
        sample_structure.add_bond(0, 5)
    with pytest.raises(ValueError):
        sample_structure.add_bond(2, 2)


def test_attach_and_lookup(sample_structure):
    s = sample_structure
    author = s.attach(PairAttribute("Author", "Jane"))
    comment = s.attach(CommentAttribute("made by hand"))
    cell = s.attach(UnitCell())

    assert s.get_data() == [author, comment, cell]
    assert s.get_data(DataKind.PAIR) == [author]
    assert s.get_data("Author") == [author]
    assert s.get_data("Comment") == [comment]
    assert s.get_data(DataKind.SYMMETRY) == []
    assert s.get_first(DataKind.UNIT_CELL) is cell
    assert s.get_first("missing") is None
    assert s.has_data(DataKind.COMMENT)


def test_detach(sample_structure):
    s = sample_structure
    first = s.attach(PairAttribute("key", "1"))
    second = s.attach(PairAttribute("key", "1"))

    assert s.detach(second)
    assert s.get_data("key") == [first]
    assert not s.detach(second)
