"""Crystallographic unit cell with fractional/Cartesian coordinate transforms.

A :class:`UnitCell` is populated either from lattice parameters
(``a, b, c, alpha, beta, gamma``) or from three translation vectors. The other
representation, and all transform matrices, are derived on every call.

Conventions
-----------
- Angles are in radians everywhere. Passing degrees silently gives wrong
  results.
- :meth:`UnitCell.get_cell_matrix` has the cell vectors as rows.
- :meth:`UnitCell.get_ortho_matrix` has them as columns, so
  ``cartesian = ortho @ fractional + offset``.
- :meth:`UnitCell.get_fractional_matrix` is the inverse of the ortho matrix.

Lattice parameters must describe a real parallelepiped (``sin(gamma) != 0``
and a non-negative volume term). Infeasible parameters are not rejected; they
produce ``inf``/``nan`` entries.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from enum import Enum

import numpy as np

from .base import TaggedAttribute
from .kinds import DataKind

logger = logging.getLogger(__name__)

_RIGHT_ANGLE = math.pi / 2
_HEX_ANGLE = 2 * math.pi / 3
_ANGLE_TOLERANCE = 1e-4
_LENGTH_TOLERANCE = 1e-6


class CellRepresentation(Enum):
    """Which representation of the cell was set last and is authoritative."""

    UNSET = "unset"
    PARAMETERS = "parameters"
    VECTORS = "vectors"


class LatticeType(Enum):
    TRICLINIC = "triclinic"
    MONOCLINIC = "monoclinic"
    ORTHORHOMBIC = "orthorhombic"
    TETRAGONAL = "tetragonal"
    RHOMBOHEDRAL = "rhombohedral"
    HEXAGONAL = "hexagonal"
    CUBIC = "cubic"


def _vector(values: Sequence[float]) -> np.ndarray:
    vec = np.asarray(values, dtype=float).reshape(3)
    return vec.copy()


def _angle_between(u: np.ndarray, v: np.ndarray) -> float:
    cos_theta = np.dot(u, v) / (np.linalg.norm(u) * np.linalg.norm(v))
    return float(np.arccos(np.clip(cos_theta, -1.0, 1.0)))


def cell_vectors_from_parameters(a, b, c, alpha, beta, gamma) -> list[np.ndarray]:
    """Cell vectors in the standard orientation: ``v1`` along x, ``v2`` in the xy plane.

    Angle arguments must be in radians.
    """
    a, b, c, alpha, beta, gamma = (np.float64(x) for x in (a, b, c, alpha, beta, gamma))
    ca, cb, cg = np.cos(alpha), np.cos(beta), np.cos(gamma)
    sg = np.sin(gamma)

    with np.errstate(divide="ignore", invalid="ignore"):
        v1 = np.array([a, 0.0, 0.0])
        v2 = np.array([b * cg, b * sg, 0.0])
        v3 = np.array(
            [
                c * cb,
                c * (ca - cb * cg) / sg,
                c * np.sqrt(1.0 - ca * ca - cb * cb - cg * cg + 2.0 * ca * cb * cg) / sg,
            ]
        )
    return [v1, v2, v3]


class UnitCell(TaggedAttribute):
    """Periodic boundary conditions of a crystal structure.

    Attributes:
        representation (CellRepresentation): The representation set last.
        offset (numpy.ndarray): Cartesian origin of the cell.
        space_group (str): Space-group symbol. It is not validated and does not
            create a :class:`~molattr.attributes.SymmetryInfo`.

    Example:
    -------
    >>> cell = UnitCell()
    >>> cell.set_data(5.0, 5.0, 5.0, math.pi / 2, math.pi / 2, math.pi / 2)
    >>> frac = cell.cartesian_to_fractional([2.5, 0.0, 0.0])

    """

    kind_tag = DataKind.UNIT_CELL

    def __init__(self, name: str | None = None) -> None:
        super().__init__(name)
        self.representation = CellRepresentation.UNSET
        self._parameters = (0.0, 0.0, 0.0, 0.0, 0.0, 0.0)
        self._vectors = [np.zeros(3), np.zeros(3), np.zeros(3)]
        self._offset = np.zeros(3)
        self.space_group = ""

    # Setters

    def set_data(self, a: float, b: float, c: float,
                 alpha: float, beta: float, gamma: float) -> None:
        """Set lengths and angles (radians). Vectors are derived on demand."""
        self._parameters = tuple(float(x) for x in (a, b, c, alpha, beta, gamma))
        self.representation = CellRepresentation.PARAMETERS
        logger.debug("Unit cell set from parameters %s", self._parameters)

    def set_vectors(self, v1: Sequence[float], v2: Sequence[float], v3: Sequence[float]) -> None:
        """Set the three translation vectors. Lengths and angles are derived on demand."""
        self._vectors = [_vector(v1), _vector(v2), _vector(v3)]
        self.representation = CellRepresentation.VECTORS
        logger.debug("Unit cell set from vectors %s", [v.tolist() for v in self._vectors])

    @property
    def offset(self) -> np.ndarray:
        return self._offset.copy()

    @offset.setter
    def offset(self, value: Sequence[float]) -> None:
        self._offset = _vector(value)

    # Lattice parameters

    def get_cell_parameters(self) -> tuple[float, float, float, float, float, float]:
        """Return ``(a, b, c, alpha, beta, gamma)`` with angles in radians."""
        if self.representation is CellRepresentation.VECTORS:
            v1, v2, v3 = self._vectors
            return (
                float(np.linalg.norm(v1)),
                float(np.linalg.norm(v2)),
                float(np.linalg.norm(v3)),
                _angle_between(v2, v3),
                _angle_between(v1, v3),
                _angle_between(v1, v2),
            )
        return self._parameters

    @property
    def a(self) -> float:
        return self.get_cell_parameters()[0]

    @property
    def b(self) -> float:
        return self.get_cell_parameters()[1]

    @property
    def c(self) -> float:
        return self.get_cell_parameters()[2]

    @property
    def alpha(self) -> float:
        return self.get_cell_parameters()[3]

    @property
    def beta(self) -> float:
        return self.get_cell_parameters()[4]

    @property
    def gamma(self) -> float:
        return self.get_cell_parameters()[5]

    # Derived matrices

    def get_cell_vectors(self) -> list[np.ndarray]:
        """Return ``[v1, v2, v3]``.

        Vectors set through :meth:`set_vectors` are returned as given. Otherwise
        they are built from the lattice parameters with ``v1`` along x and
        ``v2`` in the xy plane. An unset cell yields three zero vectors.
        """
        if self.representation is CellRepresentation.VECTORS:
            return [v.copy() for v in self._vectors]
        if self.representation is CellRepresentation.UNSET:
            return [np.zeros(3), np.zeros(3), np.zeros(3)]
        return cell_vectors_from_parameters(*self._parameters)

    def get_cell_matrix(self) -> np.ndarray:
        """3x3 matrix whose rows are ``v1, v2, v3``."""
        return np.vstack(self.get_cell_vectors())

    def get_ortho_matrix(self) -> np.ndarray:
        """Matrix converting fractional to Cartesian coordinates (vectors as columns)."""
        return self.get_cell_matrix().T

    def get_fractional_matrix(self) -> np.ndarray:
        """Matrix converting Cartesian to fractional coordinates.

        A singular (degenerate) cell logs a warning and yields a NaN-filled
        matrix.
        """
        ortho = self.get_ortho_matrix()
        if not np.all(np.isfinite(ortho)):
            logger.warning("Unit cell has non-finite cell vectors, cannot fractionalize")
            return np.full((3, 3), np.nan)
        try:
            return np.linalg.inv(ortho)
        except np.linalg.LinAlgError as exc:
            logger.warning("Unit cell is degenerate, cannot fractionalize: %s", exc)
            return np.full((3, 3), np.nan)

    def get_cell_volume(self) -> float:
        return float(abs(np.linalg.det(self.get_cell_matrix())))

    # Coordinate conversion

    def fractional_to_cartesian(self, frac) -> np.ndarray:
        """Convert one 3-vector or an ``N x 3`` array of fractional coordinates."""
        frac = np.asarray(frac, dtype=float)
        return frac @ self.get_ortho_matrix().T + self._offset

    def cartesian_to_fractional(self, cart) -> np.ndarray:
        """Convert one 3-vector or an ``N x 3`` array of Cartesian coordinates."""
        cart = np.asarray(cart, dtype=float)
        return (cart - self._offset) @ self.get_fractional_matrix().T

    @staticmethod
    def wrap_fractional_coordinate(frac, tolerance: float = 1e-8) -> np.ndarray:
        """Map fractional coordinates into ``[0, 1)``.

        Accepts a scalar, a 3-vector or an ``N x 3`` array; a scalar comes back
        as a one-element array. Components within ``tolerance`` of ``1.0`` after
        wrapping become ``0.0``.
        """
        wrapped = np.mod(np.atleast_1d(np.asarray(frac, dtype=float)), 1.0)
        wrapped[np.abs(wrapped - 1.0) < tolerance] = 0.0
        return wrapped

    # Classification

    def get_lattice_type(self) -> LatticeType:
        """Classify the cell from its lattice parameters.

        Raises:
            ValueError: If neither parameters nor vectors have been set.

        """
        if self.representation is CellRepresentation.UNSET:
            raise ValueError("Cannot classify a unit cell that has not been set")
        a, b, c, alpha, beta, gamma = self.get_cell_parameters()

        def same_length(x, y):
            return math.isclose(x, y, rel_tol=_LENGTH_TOLERANCE, abs_tol=_LENGTH_TOLERANCE)

        def same_angle(x, y):
            return abs(x - y) < _ANGLE_TOLERANCE

        right = [same_angle(angle, _RIGHT_ANGLE) for angle in (alpha, beta, gamma)]

        if all(right):
            if same_length(a, b) and same_length(b, c):
                return LatticeType.CUBIC
            if same_length(a, b) or same_length(b, c) or same_length(a, c):
                return LatticeType.TETRAGONAL
            return LatticeType.ORTHORHOMBIC
        if sum(right) == 2:
            if right[0] and right[1] and same_angle(gamma, _HEX_ANGLE) and same_length(a, b):
                return LatticeType.HEXAGONAL
            return LatticeType.MONOCLINIC
        if (
            same_angle(alpha, beta)
            and same_angle(beta, gamma)
            and same_length(a, b)
            and same_length(b, c)
        ):
            return LatticeType.RHOMBOHEDRAL
        return LatticeType.TRICLINIC

    # ase interoperability

    def as_ase_cell(self):
        """Return the cell as an :class:`ase.cell.Cell`."""
        from ase.cell import Cell

        return Cell(self.get_cell_matrix())

    @classmethod
    def from_ase_cell(cls, cell, name: str | None = None) -> UnitCell:
        """Build a vector-backed :class:`UnitCell` from an ase cell or 3x3 array."""
        rows = np.asarray(cell, dtype=float).reshape(3, 3)
        unit_cell = cls(name)
        unit_cell.set_vectors(rows[0], rows[1], rows[2])
        return unit_cell

    def _clone_payload(self) -> None:
        self._vectors = [v.copy() for v in self._vectors]
        self._offset = self._offset.copy()
