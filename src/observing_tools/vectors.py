"""3-vector and 3x3 rotation primitives (thin wrappers on the SPICE toolkit).

Every function returns a new array; inputs are never modified in place.
"""

from __future__ import annotations

from typing import Sequence

import cspyce
import numpy as np

Vector3 = np.ndarray  # shape (3,)
RotationMatrix = np.ndarray  # shape (3, 3), row-major


def vector3(x: float, y: float, z: float) -> Vector3:
    """Build a 3-vector."""
    return np.array([x, y, z], dtype=np.float64)


def add(a: Sequence[float], b: Sequence[float]) -> Vector3:
    """Vector sum a + b (SPICE VADD)."""
    return np.asarray(cspyce.vadd(a, b), dtype=np.float64)


def scale(s: float, v: Sequence[float]) -> Vector3:
    """Scale vector: s * v (SPICE VSCL)."""
    return np.asarray(cspyce.vscl(s, v), dtype=np.float64)


def dot(a: Sequence[float], b: Sequence[float]) -> float:
    """Dot product of two 3-vectors (SPICE VDOT)."""
    return float(cspyce.vdot(a, b))


def apply(m: RotationMatrix, v: Sequence[float]) -> Vector3:
    """m * v (SPICE MXV)."""
    return np.asarray(cspyce.mxv(m, v), dtype=np.float64)


def apply_transpose(m: RotationMatrix, v: Sequence[float]) -> Vector3:
    """Transpose(m) * v (SPICE MTXV); the inverse rotation for orthogonal m."""
    return np.asarray(cspyce.mtxv(m, v), dtype=np.float64)


def unit_vector(ra: float, dec: float) -> Vector3:
    """Unit vector toward (ra, dec), both in radians (SPICE RADREC)."""
    return np.asarray(cspyce.radrec(1.0, ra, dec), dtype=np.float64)


def spherical(v: Sequence[float]) -> tuple[float, float]:
    """Right ascension in [0, 2pi) and declination (radians) of v (SPICE RECRAD)."""
    _, ra, dec = cspyce.recrad(v)
    return (float(ra), float(dec))
