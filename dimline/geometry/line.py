"""
Straight segments and strict segment/segment intersection.
"""

from dataclasses import dataclass, replace
from typing import Optional

from dimline.geometry.vector import Point, angle_to, distance, midpoint

# Parameter slack so that hits exactly on an endpoint still count.
_PARAM_EPS = 1e-9
# Cross products below this are treated as parallel.
_PARALLEL_EPS = 1e-12


@dataclass(frozen=True)
class LineSegment:
    """Segment in drawing coordinates.

    Attributes:
        start: start point (x, y).
        end: end point (x, y).
    """
    start: Point
    end: Point

    @property
    def length(self) -> float:
        return distance(self.start, self.end)

    @property
    def angle1(self) -> float:
        """Direction start -> end (radians)."""
        return angle_to(self.start, self.end)

    @property
    def angle2(self) -> float:
        """Direction end -> start (radians)."""
        return angle_to(self.end, self.start)

    @property
    def middle(self) -> Point:
        return midpoint(self.start, self.end)

    def with_start(self, start: Point) -> 'LineSegment':
        return replace(self, start=start)

    def with_end(self, end: Point) -> 'LineSegment':
        return replace(self, end=end)


def intersect_segments(a: LineSegment, b: LineSegment) -> Optional[Point]:
    """Intersection point of two segments, or None.

    Only a point lying on both segments counts. Parallel and collinear
    segments have no single intersection and yield None, as does any
    zero-length segment.
    """
    ax, ay = a.start
    rx, ry = a.end[0] - ax, a.end[1] - ay
    bx, by = b.start
    sx, sy = b.end[0] - bx, b.end[1] - by

    denom = rx * sy - ry * sx
    if abs(denom) < _PARALLEL_EPS:
        return None

    qx, qy = bx - ax, by - ay
    t = (qx * sy - qy * sx) / denom
    u = (qx * ry - qy * rx) / denom

    if -_PARAM_EPS <= t <= 1.0 + _PARAM_EPS and -_PARAM_EPS <= u <= 1.0 + _PARAM_EPS:
        return (ax + t * rx, ay + t * ry)
    return None
