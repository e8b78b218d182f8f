"""Geometric measurements on Cartesian coordinates (angles in radians)."""

from __future__ import annotations

import numpy as np


def bond_angle(a, vertex, b) -> float:
    """Angle ``a-vertex-b`` in radians, in ``[0, pi]``."""
    u = np.asarray(a, dtype=float) - np.asarray(vertex, dtype=float)
    v = np.asarray(b, dtype=float) - np.asarray(vertex, dtype=float)
    cos_theta = np.dot(u, v) / (np.linalg.norm(u) * np.linalg.norm(v))
    return float(np.arccos(np.clip(cos_theta, -1.0, 1.0)))


def dihedral(a, b, c, d) -> float:
    """Signed dihedral angle ``a-b-c-d`` in radians, in ``(-pi, pi]``.

    Uses the IUPAC sign convention: looking down ``b -> c``, a clockwise
    rotation of ``a`` onto ``d`` is positive.
    """
    p0, p1, p2, p3 = (np.asarray(p, dtype=float) for p in (a, b, c, d))
    b0 = p0 - p1
    b1 = p2 - p1
    b2 = p3 - p2

    b1 = b1 / np.linalg.norm(b1)
    v = b0 - np.dot(b0, b1) * b1
    w = b2 - np.dot(b2, b1) * b1

    x = np.dot(v, w)
    y = np.dot(np.cross(b1, v), w)
    return float(np.arctan2(y, x))
