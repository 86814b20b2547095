"""Vector / quaternion value types for placement transforms.

Coordinate convention follows the game data:
    - Y-up, right-handed
    - Quaternion component order is (x, y, z, w); identity is (0, 0, 0, 1)

The value types are plain NamedTuples so they hash and compare by value;
arithmetic goes through numpy.
"""

from __future__ import annotations

from typing import Iterable, NamedTuple

import numpy as np

__all__ = [
    "Vector3",
    "Quaternion",
    "ZERO",
    "IDENTITY",
    "offset_position",
    "bounding_sphere",
]


class Vector3(NamedTuple):
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def from_iterable(cls, values: Iterable[float]) -> "Vector3":
        arr = np.asarray(list(values), dtype=np.float64)
        if arr.shape != (3,):
            raise ValueError(f"Vector3 needs 3 components, got {arr.shape[0]}")
        return cls(*(float(v) for v in arr))

    def as_array(self) -> np.ndarray:
        return np.array(self, dtype=np.float64)


class Quaternion(NamedTuple):
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    @classmethod
    def from_iterable(cls, values: Iterable[float]) -> "Quaternion":
        arr = np.asarray(list(values), dtype=np.float64)
        if arr.shape != (4,):
            raise ValueError(f"Quaternion needs 4 components, got {arr.shape[0]}")
        return cls(*(float(v) for v in arr))

    def as_array(self) -> np.ndarray:
        return np.array(self, dtype=np.float64)


ZERO = Vector3()
IDENTITY = Quaternion()


def offset_position(position: Vector3, translation: Vector3) -> Vector3:
    """Return position + translation (world-axis offset, rotation ignored)."""
    return Vector3(*(float(v) for v in position.as_array() + translation.as_array()))


def bounding_sphere(points: Iterable[Vector3]) -> tuple[Vector3, float] | None:
    """
    Centre of the axis-aligned bounds and the radius that encloses every
    point. Returns None for an empty input.
    """
    arr = np.array([tuple(p) for p in points], dtype=np.float64)
    if arr.size == 0:
        return None
    arr = arr.reshape(-1, 3)
    centre = (arr.min(axis=0) + arr.max(axis=0)) / 2.0
    radius = float(np.linalg.norm(arr - centre, axis=1).max())
    return Vector3(*(float(v) for v in centre)), radius
