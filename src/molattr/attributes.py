"""Simple attribute kinds: key/value pairs, comments, bonds and rings.

These kinds extend :class:`~molattr.base.TaggedAttribute` with a small payload.
Setters replace the payload wholesale and never validate it.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .base import TaggedAttribute
from .kinds import DataKind

if TYPE_CHECKING:
    from .structure import Atom, Bond, Ring

logger = logging.getLogger(__name__)


def trim(text: str) -> str:
    """Strip leading and trailing whitespace (spaces, tabs, newlines)."""
    return text.strip()


class PairAttribute(TaggedAttribute):
    """Arbitrary key/value data; the key is the attribute name."""

    kind_tag = DataKind.PAIR

    def __init__(self, name: str | None = None, value: str = "") -> None:
        super().__init__(name)
        self._value = str(value)

    @property
    def value(self) -> str:
        return self._value

    @value.setter
    def value(self, value: str) -> None:
        self._value = str(value)


class CommentAttribute(TaggedAttribute):
    """A free-text comment, possibly spanning multiple lines.

    The text is trimmed every time it is set, so ``"  hello  "`` is stored as
    ``"hello"``.
    """

    kind_tag = DataKind.COMMENT

    def __init__(self, data: str = "", name: str | None = None) -> None:
        super().__init__(name)
        self._data = trim(data)

    @property
    def data(self) -> str:
        return self._data

    @data.setter
    def data(self, text: str) -> None:
        self._data = trim(text)


@dataclass(eq=False)
class ExternalBondRecord:
    """One fragment attachment point (e.g. a SMILES ring-closure digit).

    ``atom`` and ``bond`` are non-owning references into the host structure,
    which must not delete or reindex them while the record is alive.
    """

    atom: Atom | None
    bond: Bond | None
    index: int


class ExternalBondSet(TaggedAttribute):
    """Ordered external bond records; order is the order attachment points appear."""

    kind_tag = DataKind.EXTERNAL_BOND

    def __init__(self, name: str | None = None) -> None:
        super().__init__(name)
        self._records: list[ExternalBondRecord] = []

    def add(self, atom: Atom | None, bond: Bond | None, index: int) -> ExternalBondRecord:
        """Append a record. Duplicate atoms, bonds or indices are accepted."""
        record = ExternalBondRecord(atom, bond, index)
        self._records.append(record)
        logger.debug("Added external bond record for index %s", index)
        return record

    @property
    def records(self) -> list[ExternalBondRecord]:
        """The live list of records, in insertion order."""
        return self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[ExternalBondRecord]:
        return iter(self._records)

    def _clone_payload(self) -> None:
        self._records = [copy.copy(record) for record in self._records]


class VirtualBondRecord(TaggedAttribute):
    """A bond to an atom that has not been added to the structure yet.

    ``begin`` and ``end`` are atom indices. The record is read-only; it is
    consumed once both atoms exist and the real bond has been created.
    """

    kind_tag = DataKind.VIRTUAL_BOND

    def __init__(self, begin: int, end: int, order: int, stereo: int = 0,
                 name: str | None = None) -> None:
        super().__init__(name)
        self._begin = int(begin)
        self._end = int(end)
        self._order = int(order)
        self._stereo = int(stereo)

    @property
    def begin(self) -> int:
        return self._begin

    @property
    def end(self) -> int:
        return self._end

    @property
    def order(self) -> int:
        return self._order

    @property
    def stereo(self) -> int:
        return self._stereo

    def __repr__(self) -> str:
        return (
            f"VirtualBondRecord(begin={self._begin}, end={self._end}, "
            f"order={self._order}, stereo={self._stereo})"
        )


class RingSet(TaggedAttribute):
    """Holds perceived rings (e.g. the SSSR). The rings are owned by this set."""

    kind_tag = DataKind.RING_SET

    def __init__(self, rings: Iterable[Ring] | None = None, name: str | None = None) -> None:
        super().__init__(name)
        self._rings: list[Ring] = list(rings or [])

    def set_data(self, rings: Iterable[Ring]) -> None:
        self._rings = list(rings)
        logger.debug("Ring set now holds %d rings", len(self._rings))

    def push_back(self, ring: Ring) -> None:
        self._rings.append(ring)

    @property
    def rings(self) -> list[Ring]:
        return list(self._rings)

    def clear(self) -> None:
        self._rings = []

    def __len__(self) -> int:
        return len(self._rings)

    def __iter__(self) -> Iterator[Ring]:
        return iter(self._rings)

    def _clone_payload(self) -> None:
        self._rings = [copy.deepcopy(ring) for ring in self._rings]


class SymmetryInfo(TaggedAttribute):
    """Point-group and space-group symbols. Neither symbol is validated."""

    kind_tag = DataKind.SYMMETRY

    def __init__(self, point_group: str = "", space_group: str = "",
                 name: str | None = None) -> None:
        super().__init__(name)
        self.point_group = point_group
        self.space_group = space_group

    def set_data(self, point_group: str, space_group: str = "") -> None:
        self.point_group = point_group
        self.space_group = space_group
