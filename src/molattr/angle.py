"""Bond angles: three atoms sharing a vertex, and the set of all angles."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .base import TaggedAttribute
from .kinds import DataKind

if TYPE_CHECKING:
    from .structure import Atom

logger = logging.getLogger(__name__)


class Angle:
    """The angle ``a-vertex-b`` in radians.

    Termini are kept sorted by atom index, so two angles over the same three
    atoms compare equal regardless of the order the termini were given in.
    """

    def __init__(self, vertex: Atom | None = None, a: Atom | None = None,
                 b: Atom | None = None) -> None:
        self._vertex = vertex
        self._termini = (a, b)
        self._radians = 0.0
        if a is not None and b is not None:
            self.sort_by_index()

    def set_atoms(self, vertex: Atom, a: Atom, b: Atom) -> None:
        self._vertex = vertex
        self._termini = (a, b)
        self.sort_by_index()

    def sort_by_index(self) -> None:
        """Order the termini by ascending atom index."""
        a, b = self._termini
        if a is not None and b is not None and a.index > b.index:
            self._termini = (b, a)

    def get_atoms(self) -> tuple[Atom | None, Atom | None, Atom | None]:
        return (self._vertex, *self._termini)

    @property
    def vertex(self) -> Atom | None:
        return self._vertex

    @property
    def termini(self) -> tuple[Atom | None, Atom | None]:
        return self._termini

    @property
    def radians(self) -> float:
        return self._radians

    @radians.setter
    def radians(self, value: float) -> None:
        self._radians = float(value)

    def clear(self) -> None:
        self._vertex = None
        self._termini = (None, None)
        self._radians = 0.0

    def copy(self) -> Angle:
        duplicate = Angle()
        duplicate._vertex = self._vertex
        duplicate._termini = self._termini
        duplicate._radians = self._radians
        return duplicate

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        return (
            self._vertex is other._vertex
            and self._termini[0] is other._termini[0]
            and self._termini[1] is other._termini[1]
        )

    __hash__ = None

    def __repr__(self) -> str:
        indices = tuple(getattr(atom, "index", None) for atom in self.get_atoms())
        return f"Angle(atoms={indices}, radians={self._radians:.4f})"


class AngleSet(TaggedAttribute):
    """All bond angles of a structure."""

    kind_tag = DataKind.ANGLE

    def __init__(self, name: str | None = None) -> None:
        super().__init__(name)
        self._angles: list[Angle] = []

    def set_data(self, angle: Angle) -> None:
        """Store a copy of ``angle``."""
        self._angles.append(angle.copy())

    @property
    def angles(self) -> list[Angle]:
        return list(self._angles)

    def clear(self) -> None:
        self._angles = []

    @property
    def size(self) -> int:
        return len(self._angles)

    def __len__(self) -> int:
        return len(self._angles)

    def fill_angle_array(self) -> list[tuple[int, int, int]]:
        """Atom-index triples ``(vertex, terminus1, terminus2)``, one per angle."""
        triples = [
            (angle.vertex.index, angle.termini[0].index, angle.termini[1].index)
            for angle in self._angles
        ]
        logger.debug("Filled angle array with %d entries", len(triples))
        return triples

    def _clone_payload(self) -> None:
        self._angles = [angle.copy() for angle in self._angles]
