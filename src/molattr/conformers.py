"""Per-conformer data such as energies, forces and trajectories."""

from __future__ import annotations

from collections.abc import Sequence

from .base import TaggedAttribute
from .kinds import DataKind


Vector3 = tuple[float, float, float]


def _copy_atom_vectors(values: Sequence[Sequence[Sequence[float]]]) -> list[list[Vector3]]:
    return [[(float(v[0]), float(v[1]), float(v[2])) for v in per_atom] for per_atom in values]


class ConformerSet(TaggedAttribute):
    """Data on conformers or geometry optimization steps.

    Each array is indexed by conformer number; ``forces``, ``velocities`` and
    ``displacements`` are additionally indexed by atom. The arrays are not
    checked against each other: callers must keep the outer lengths equal to
    the number of conformers and the inner lengths equal to the atom count.

    Setters store a copy of their input and getters return a copy, so the set
    never shares lists with its callers.

    Attributes:
        dimensions (list(int)): Dimensionality of each conformer.
        energies (list(float)): Relative energy of each conformer
            (preferably kJ/mol).
        forces (list(list(tuple))): Atomic forces for each conformer.
        velocities (list(list(tuple))): Atomic velocities for each conformer,
            e.g. from a trajectory.
        displacements (list(list(tuple))): Atomic displacements for each
            conformer, e.g. RMS distances.
        data (list(str)): Additional free-form strings per conformer.

    """

    kind_tag = DataKind.CONFORMER

    def __init__(self, name: str | None = None) -> None:
        super().__init__(name)
        self._dimensions: list[int] = []
        self._energies: list[float] = []
        self._forces: list[list[Vector3]] = []
        self._velocities: list[list[Vector3]] = []
        self._displacements: list[list[Vector3]] = []
        self._data: list[str] = []

    @property
    def dimensions(self) -> list[int]:
        return list(self._dimensions)

    @dimensions.setter
    def dimensions(self, values: Sequence[int]) -> None:
        self._dimensions = [int(v) & 0xFFFF for v in values]

    @property
    def energies(self) -> list[float]:
        return list(self._energies)

    @energies.setter
    def energies(self, values: Sequence[float]) -> None:
        self._energies = [float(v) for v in values]

    @property
    def forces(self) -> list[list[Vector3]]:
        return [list(per_atom) for per_atom in self._forces]

    @forces.setter
    def forces(self, values: Sequence[Sequence[Sequence[float]]]) -> None:
        self._forces = _copy_atom_vectors(values)

    @property
    def velocities(self) -> list[list[Vector3]]:
        return [list(per_atom) for per_atom in self._velocities]

    @velocities.setter
    def velocities(self, values: Sequence[Sequence[Sequence[float]]]) -> None:
        self._velocities = _copy_atom_vectors(values)

    @property
    def displacements(self) -> list[list[Vector3]]:
        return [list(per_atom) for per_atom in self._displacements]

    @displacements.setter
    def displacements(self, values: Sequence[Sequence[Sequence[float]]]) -> None:
        self._displacements = _copy_atom_vectors(values)

    @property
    def data(self) -> list[str]:
        return list(self._data)

    @data.setter
    def data(self, values: Sequence[str]) -> None:
        self._data = [str(v) for v in values]

    @property
    def n_conformers(self) -> int:
        """Largest outer length over all per-conformer arrays."""
        return max(
            len(self._dimensions),
            len(self._energies),
            len(self._forces),
            len(self._velocities),
            len(self._displacements),
            len(self._data),
        )

    def _clone_payload(self) -> None:
        self._dimensions = list(self._dimensions)
        self._energies = list(self._energies)
        self._forces = [list(per_atom) for per_atom in self._forces]
        self._velocities = [list(per_atom) for per_atom in self._velocities]
        self._displacements = [list(per_atom) for per_atom in self._displacements]
        self._data = list(self._data)
