"""Host structure, atom, bond and ring types used with molattr attributes.

The attribute kinds in this package only store back-references into a host
structure's atom/bond graph. :class:`Structure` provides that graph together
with a collection of attached attributes that can be looked up by kind or by
name.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from numbers import Integral
from typing import TYPE_CHECKING, Any

import numpy as np

if TYPE_CHECKING:
    from .base import TaggedAttribute
    from .kinds import DataKind

logger = logging.getLogger(__name__)


def _to_symbol_list(elements) -> list[str]:
    """Convert a sequence of element descriptors to a list of atomic symbols.

    Element symbols are kept as given, atomic numbers (:class:`int` or other
    :class:`numbers.Integral` types) are converted via :mod:`ase.data`. Numpy
    arrays are supported transparently.
    """
    from ase.data import chemical_symbols

    if hasattr(elements, "tolist"):
        elements = elements.tolist()

    symbols: list[str] = []
    for elem in elements:
        if isinstance(elem, str):
            symbols.append(elem)
        elif isinstance(elem, Integral):
            if not 0 < int(elem) < len(chemical_symbols):
                raise ValueError(f"Invalid atomic number: {elem}")
            symbols.append(chemical_symbols[int(elem)])
        else:
            symbols.append(str(elem))
    return symbols


@dataclass(eq=False)
class Atom:
    """An atom of a :class:`Structure`.

    Atoms compare by identity. ``index`` is the zero-based position of the atom
    in its structure and is expected to stay stable while attributes hold
    references to the atom.
    """

    index: int
    symbol: str
    structure: Structure | None = field(default=None, repr=False)
    bonds: list[Bond] = field(default_factory=list, repr=False)

    @property
    def atomic_number(self) -> int:
        from ase.data import atomic_numbers

        return atomic_numbers.get(self.symbol.strip().capitalize(), 0)

    @property
    def is_hydrogen(self) -> bool:
        return self.atomic_number == 1

    @property
    def position(self) -> np.ndarray | None:
        """Cartesian position taken from the owning structure, if any."""
        if self.structure is None:
            return None
        return np.asarray(self.structure.coordinates[self.index], dtype=float)

    @property
    def neighbors(self) -> list[Atom]:
        return [bond.partner(self) for bond in self.bonds]

    def bond_to(self, other: Atom) -> Bond | None:
        for bond in self.bonds:
            if bond.partner(self) is other:
                return bond
        return None


@dataclass(eq=False)
class Bond:
    """A bond between two atoms of a :class:`Structure`."""

    index: int
    begin: Atom
    end: Atom
    order: int = 1

    def partner(self, atom: Atom) -> Atom:
        """Return the atom at the other end of the bond."""
        return self.end if atom is self.begin else self.begin


@dataclass
class Ring:
    """A perceived ring, stored as the path of its atom indices.

    Ring perception itself happens elsewhere; :class:`~molattr.attributes.RingSet`
    only keeps the results.
    """

    path: list[int] = field(default_factory=list)

    @property
    def size(self) -> int:
        return len(self.path)

    def __contains__(self, index: int) -> bool:
        return index in self.path


@dataclass
class Structure:
    """Container for a molecular structure and its attached attributes.

    Attributes:
        symbols (list(str)): List of atomic symbols. Atomic numbers are
            converted to symbols on construction.
        coordinates (list(tuple(float, float, float))): ``N x 3`` list of floats for
            atomic positions in Angstrom.
        charge (int): Total charge of the system.
        multiplicity (int): Spin multiplicity of the system.
        energy (float | None): Optional energy value of the structure in eV.
        comment (str): Optional comment or metadata string.
        metadata (dict): Free-form metadata dictionary for additional information.
        atoms (list(Atom)): Atom objects, one per symbol, built on construction.
        bonds (list(Bond)): Bonds added through :meth:`add_bond`.
        data (list(TaggedAttribute)): Attached attributes in attachment order.

    """

    symbols: list[str]
    coordinates: list[tuple[float, float, float]]
    charge: int = 0
    multiplicity: int = 1
    energy: float | None = None
    comment: str = ""

    metadata: dict[str, Any] = field(default_factory=dict)
    data: list[TaggedAttribute] = field(default_factory=list, repr=False, compare=False)
    atoms: list[Atom] = field(init=False, repr=False, compare=False)
    bonds: list[Bond] = field(init=False, default_factory=list, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.symbols = _to_symbol_list(self.symbols)
        if len(self.symbols) != len(self.coordinates):
            raise ValueError(
                f"Got {len(self.symbols)} symbols but {len(self.coordinates)} coordinates"
            )
        self.atoms = [Atom(i, sym, structure=self) for i, sym in enumerate(self.symbols)]

    @property
    def n_atoms(self) -> int:
        """ Return the number of atoms in the structure.

        Returns:
            int: Number of atoms.
        """
        return len(self.symbols)

    def with_energy(self, energy: float | None) -> Structure:
        """ Set the energy of the structure and return the modified instance.

        Args:
            energy (float | None): Energy value in eV to assign to this structure.
                ``None`` clears the current energy.

        Returns:
            Structure: The same :class:`Structure` instance, to allow method chaining.
        """
        self.energy = energy
        return self

    # Bond graph

    def add_bond(self, begin: int, end: int, order: int = 1) -> Bond:
        """Connect the atoms at indices ``begin`` and ``end``.

        Raises:
            IndexError: If either index is out of range.
            ValueError: If both indices refer to the same atom.

        """
        for idx in (begin, end):
            if not 0 <= idx < self.n_atoms:
                raise IndexError(f"Atom index {idx} out of range for {self.n_atoms} atoms")
        if begin == end:
            raise ValueError(f"Cannot bond atom {begin} to itself")

        bond = Bond(len(self.bonds), self.atoms[begin], self.atoms[end], order)
        self.bonds.append(bond)
        bond.begin.bonds.append(bond)
        bond.end.bonds.append(bond)
        return bond

    def get_bond(self, begin: int, end: int) -> Bond | None:
        return self.atoms[begin].bond_to(self.atoms[end])

    # Attribute collection

    def attach(self, attribute: TaggedAttribute) -> TaggedAttribute:
        """Attach ``attribute`` to this structure and return it."""
        self.data.append(attribute)
        logger.debug("Attached %r", attribute)
        return attribute

    def get_data(self, key: DataKind | str | None = None) -> list[TaggedAttribute]:
        """Return attached attributes matching a kind or a name.

        Args:
            key: A :class:`~molattr.kinds.DataKind` to match on kind, a string to
                match on name, or ``None`` for all attributes.

        Returns:
            list: Matching attributes in attachment order (possibly empty).

        """
        if key is None:
            return list(self.data)
        if isinstance(key, str):
            return [attr for attr in self.data if attr.name == key]
        return [attr for attr in self.data if attr.kind == key]

    def get_first(self, key: DataKind | str) -> TaggedAttribute | None:
        matches = self.get_data(key)
        return matches[0] if matches else None

    def has_data(self, key: DataKind | str) -> bool:
        return bool(self.get_data(key))

    def detach(self, attribute: TaggedAttribute) -> bool:
        """Remove ``attribute`` (matched by identity). Returns ``False`` if absent."""
        for i, attr in enumerate(self.data):
            if attr is attribute:
                del self.data[i]
                logger.debug("Detached %r", attribute)
                return True
        return False
