"""Data-kind discriminants for molattr attributes.

Every :class:`~molattr.base.TaggedAttribute` carries one :class:`DataKind`
fixed by its concrete type. The kind allows fast lookup of a category of data
on a host structure without comparing attribute names.
"""

from __future__ import annotations

from enum import IntEnum


class DataKind(IntEnum):
    """Classification of data stored as a tagged attribute.

    ``CUSTOM0`` through ``CUSTOM15`` are free slots for downstream code that
    needs its own kinds of data.
    """

    UNDEFINED = 0
    PAIR = 1
    ENERGY = 2
    COMMENT = 3
    CONFORMER = 4
    EXTERNAL_BOND = 5
    ROTAMER_LIST = 6
    VIRTUAL_BOND = 7
    RING_SET = 8
    TORSION = 9
    ANGLE = 10
    SERIAL_NUMS = 11
    UNIT_CELL = 12
    SPIN = 13
    CHARGE = 14
    SYMMETRY = 15
    CHIRAL = 16
    OCCUPATION = 17
    DENSITY = 18
    ELECTRONIC = 19
    VIBRATION = 20
    ROTATION = 21
    NUCLEAR = 22
    CUSTOM0 = 23
    CUSTOM1 = 24
    CUSTOM2 = 25
    CUSTOM3 = 26
    CUSTOM4 = 27
    CUSTOM5 = 28
    CUSTOM6 = 29
    CUSTOM7 = 30
    CUSTOM8 = 31
    CUSTOM9 = 32
    CUSTOM10 = 33
    CUSTOM11 = 34
    CUSTOM12 = 35
    CUSTOM13 = 36
    CUSTOM14 = 37
    CUSTOM15 = 38

    @property
    def label(self) -> str:
        """Human-readable description used as the default attribute name."""
        return _LABELS.get(self, f"Custom data {self.value - DataKind.CUSTOM0.value}")

    @property
    def is_custom(self) -> bool:
        return self >= DataKind.CUSTOM0


_LABELS: dict[DataKind, str] = {
    DataKind.UNDEFINED: "Undefined",
    DataKind.PAIR: "Key/value pair",
    DataKind.ENERGY: "Energy",
    DataKind.COMMENT: "Comment",
    DataKind.CONFORMER: "Conformers",
    DataKind.EXTERNAL_BOND: "External bonds",
    DataKind.ROTAMER_LIST: "Rotamer list",
    DataKind.VIRTUAL_BOND: "Virtual bond",
    DataKind.RING_SET: "Ring set",
    DataKind.TORSION: "Torsions",
    DataKind.ANGLE: "Angles",
    DataKind.SERIAL_NUMS: "Serial numbers",
    DataKind.UNIT_CELL: "Unit cell",
    DataKind.SPIN: "Spin",
    DataKind.CHARGE: "Charge",
    DataKind.SYMMETRY: "Symmetry",
    DataKind.CHIRAL: "Chirality",
    DataKind.OCCUPATION: "Occupation",
    DataKind.DENSITY: "Density",
    DataKind.ELECTRONIC: "Electronic levels",
    DataKind.VIBRATION: "Vibrational modes",
    DataKind.ROTATION: "Rotational levels",
    DataKind.NUCLEAR: "Nuclear transitions",
}
