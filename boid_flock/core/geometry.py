"""
core/geometry.py

Vector helpers for the steering law.

Positions are 3-vectors with z pinned at 0 so that turn direction can be
read off the z component of a cross product. Rotation is about +z.
"""

from __future__ import annotations
from typing import Sequence
import numpy as np

from .errors import InvalidConfiguration

# Reference axis a boid faces at orientation 0 ("up")
FORWARD_AXIS = np.array([0.0, 1.0, 0.0])
NORMAL_AXIS = np.array([0.0, 0.0, 1.0])


def as_vec3(position) -> np.ndarray:
    """Lift a 2D or 3D point to a float 3-vector with z = 0."""
    arr = np.asarray(position, dtype=np.float64).reshape(-1)
    if arr.shape[0] in (2, 3):
        return np.array([arr[0], arr[1], 0.0])
    raise InvalidConfiguration(f"expected a 2D or 3D position, got shape {arr.shape}")


def rotate_z(vector: np.ndarray, angle: float) -> np.ndarray:
    """Rotate a vector by `angle` radians about the normal axis."""
    c, s = np.cos(angle), np.sin(angle)
    x, y, z = vector
    return np.array([c * x - s * y, s * x + c * y, z])


def forward_direction(orientation: float) -> np.ndarray:
    """The reference axis turned by the boid's orientation, normalized."""
    return normalize_or_zero(rotate_z(FORWARD_AXIS, orientation))


def normalize_or_zero(vector: np.ndarray) -> np.ndarray:
    """
    Unit vector along `vector`, or the zero vector.

    Zero length (empty neighborhood, exact coincidence) and non-finite
    input both collapse to "no direction" instead of NaN.
    """
    vector = np.asarray(vector, dtype=np.float64)
    if not np.all(np.isfinite(vector)):
        return np.zeros(3)
    length = np.linalg.norm(vector)
    if length == 0.0:
        return np.zeros(3)
    return vector / length


def centroid(points: Sequence[np.ndarray]) -> np.ndarray:
    """Mean of the given points. Callers must not pass an empty set."""
    return np.mean(np.asarray(points, dtype=np.float64), axis=0)


def signed_angle_to(forward: np.ndarray, desired: np.ndarray) -> float:
    """
    Signed angle turning `forward` onto `desired`, in radians.

    The unsigned angle between the two is kept positive when
    cross(forward, desired).z > 0 and negated otherwise, so a
    positive result is a turn about +z. A zero `desired` means
    there is nothing to turn toward and yields 0.
    """
    if not np.any(desired):
        return 0.0

    denom = np.linalg.norm(forward) * np.linalg.norm(desired)
    cos_theta = np.clip(np.dot(forward, desired) / denom, -1.0, 1.0)
    delta = float(np.arccos(cos_theta))

    cross = np.cross(forward, desired)
    if np.dot(cross, NORMAL_AXIS) > 0.0:
        return delta
    return -delta


def wrap_angle(angle: float) -> float:
    """Wrap an angle into [-pi, pi)."""
    return float((angle + np.pi) % (2 * np.pi) - np.pi)
