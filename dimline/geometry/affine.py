"""
Affine transforms of plane points (move, rotate, scale, mirror).

Each transform is a numpy operation on an (N, 2) array so several anchor
points can be moved as one unit and keep their relative geometry.
"""

from typing import Iterable, List, Sequence

import numpy as np
from numpy.typing import NDArray

from dimline.geometry.vector import Point


def _to_array(points: Iterable[Sequence[float]]) -> NDArray[np.float64]:
    arr = np.asarray(list(points), dtype=np.float64)
    if arr.size == 0:
        return arr.reshape(0, 2)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"Expected (N, 2) points, got shape {arr.shape}")
    return arr


def _to_points(arr: NDArray[np.float64]) -> List[Point]:
    return [(float(x), float(y)) for x, y in arr]


def rotation_matrix(angle: float) -> NDArray[np.float64]:
    """2x2 counter-clockwise rotation matrix."""
    c, s = np.cos(angle), np.sin(angle)
    return np.array([[c, -s], [s, c]])


def reflection_matrix(axis_point1: Point, axis_point2: Point) -> NDArray[np.float64]:
    """2x2 reflection across the direction of the given axis.

    A degenerate axis (coincident points) gives the identity.
    """
    d = np.asarray(axis_point2, dtype=np.float64) - np.asarray(axis_point1, dtype=np.float64)
    n = np.linalg.norm(d)
    if n == 0.0:
        return np.eye(2)
    d = d / n
    return 2.0 * np.outer(d, d) - np.eye(2)


def move_points(points: Iterable[Point], offset: Point) -> List[Point]:
    arr = _to_array(points)
    return _to_points(arr + np.asarray(offset, dtype=np.float64))


def rotate_points(points: Iterable[Point], center: Point, angle: float) -> List[Point]:
    arr = _to_array(points)
    c = np.asarray(center, dtype=np.float64)
    return _to_points((arr - c) @ rotation_matrix(angle).T + c)


def scale_points(points: Iterable[Point], center: Point, factor: Point) -> List[Point]:
    """Scale about center by a per-axis factor (sx, sy)."""
    arr = _to_array(points)
    c = np.asarray(center, dtype=np.float64)
    return _to_points((arr - c) * np.asarray(factor, dtype=np.float64) + c)


def mirror_points(points: Iterable[Point], axis_point1: Point, axis_point2: Point) -> List[Point]:
    """Reflect across the line through axis_point1 and axis_point2."""
    arr = _to_array(points)
    origin = np.asarray(axis_point1, dtype=np.float64)
    m = reflection_matrix(axis_point1, axis_point2)
    return _to_points((arr - origin) @ m.T + origin)
