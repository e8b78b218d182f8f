"""Torsion (dihedral) relationships around rotatable bonds.

A :class:`Torsion` groups every ``A-B-C-D`` dihedral that shares the same
central ``B-C`` bond; a :class:`TorsionSet` holds one torsion per central bond
of a structure.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .base import TaggedAttribute
from .kinds import DataKind

if TYPE_CHECKING:
    from .structure import Atom, Bond

logger = logging.getLogger(__name__)


class Torsion:
    """All dihedrals around one central bond.

    The central pair ``(b, c)`` is stored in a single orientation. Each distal
    observation is a list ``[a, d, radians]``. Atoms are non-owning references
    into the host structure.
    """

    def __init__(self, a: Atom | None = None, b: Atom | None = None,
                 c: Atom | None = None, d: Atom | None = None) -> None:
        self._bc: tuple[Atom | None, Atom | None] = (None, None)
        self._ads: list[list] = []
        if not any(atom is None for atom in (a, b, c, d)):
            self.add_torsion(a, b, c, d)

    @property
    def empty(self) -> bool:
        return self._bc[0] is None and self._bc[1] is None

    def clear(self) -> None:
        self._bc = (None, None)
        self._ads = []

    def add_torsion(self, a: Atom, b: Atom, c: Atom, d: Atom) -> bool:
        """Add the dihedral ``a-b-c-d`` with an angle of ``0.0``.

        On an empty torsion ``(b, c)`` becomes the central pair. Otherwise
        ``b`` and ``c`` must be exactly the stored pair, in the stored order;
        a reversed or different pair is rejected without modifying anything.

        Returns:
            bool: ``True`` if the dihedral was added.

        """
        if self.empty:
            self._bc = (b, c)
        elif self._bc[0] is not b or self._bc[1] is not c:
            return False
        self._ads.append([a, d, 0.0])
        return True

    def set_data(self, bond: Bond) -> bool:
        """Seed the central pair from ``bond``. Only valid on an empty torsion."""
        if not self.empty:
            return False
        self._bc = (bond.begin, bond.end)
        return True

    def set_angle(self, radians: float, index: int = 0) -> bool:
        if not 0 <= index < len(self._ads):
            return False
        self._ads[index][2] = float(radians)
        return True

    def get_angle(self, index: int = 0) -> float | None:
        """Angle of the ``index``-th dihedral in radians, or ``None`` if out of range."""
        if not 0 <= index < len(self._ads):
            return None
        return self._ads[index][2]

    @property
    def central_pair(self) -> tuple[Atom | None, Atom | None]:
        return self._bc

    @property
    def distal(self) -> list[tuple[Atom, Atom, float]]:
        """Copy of the ``(a, d, radians)`` observations in insertion order."""
        return [(a, d, radians) for a, d, radians in self._ads]

    def get_torsions(self) -> list[tuple[Atom, Atom, Atom, Atom]]:
        b, c = self._bc
        return [(a, b, c, d) for a, d, _ in self._ads]

    def get_bond_index(self) -> int | None:
        """Index of the bond joining the central pair, if the atoms are bonded."""
        b, c = self._bc
        if b is None or c is None:
            return None
        bond = b.bond_to(c)
        return bond.index if bond is not None else None

    @property
    def size(self) -> int:
        return len(self._ads)

    def __len__(self) -> int:
        return len(self._ads)

    def is_proton_rotor(self) -> bool:
        """True when every distal atom (all ``a`` and all ``d``) is a hydrogen.

        A torsion without observations is vacuously a proton rotor.
        """
        return all(a.is_hydrogen and d.is_hydrogen for a, d, _ in self._ads)

    def copy(self) -> Torsion:
        duplicate = Torsion()
        duplicate._bc = self._bc
        duplicate._ads = [list(entry) for entry in self._ads]
        return duplicate

    def __repr__(self) -> str:
        b, c = self._bc
        indices = (getattr(b, "index", None), getattr(c, "index", None))
        return f"Torsion(central={indices}, size={len(self._ads)})"


class TorsionSet(TaggedAttribute):
    """Torsions of a structure, one per central bond."""

    kind_tag = DataKind.TORSION

    def __init__(self, name: str | None = None) -> None:
        super().__init__(name)
        self._torsions: list[Torsion] = []

    def set_data(self, torsion: Torsion) -> None:
        """Store a copy of ``torsion``."""
        self._torsions.append(torsion.copy())

    @property
    def torsions(self) -> list[Torsion]:
        return list(self._torsions)

    def clear(self) -> None:
        self._torsions = []

    @property
    def size(self) -> int:
        return len(self._torsions)

    def __len__(self) -> int:
        return len(self._torsions)

    def fill_torsion_array(self) -> list[tuple[int, int, int, int]]:
        """Atom-index quadruples ``(a, b, c, d)`` for every stored dihedral.

        Torsions without observations contribute nothing; an empty list means
        there is nothing to report.
        """
        quads: list[tuple[int, int, int, int]] = []
        for torsion in self._torsions:
            for a, b, c, d in torsion.get_torsions():
                quads.append((a.index, b.index, c.index, d.index))
        logger.debug("Filled torsion array with %d entries", len(quads))
        return quads

    def _clone_payload(self) -> None:
        self._torsions = [torsion.copy() for torsion in self._torsions]
