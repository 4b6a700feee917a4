"""
Splitting the dimension line around a horizontal label.
"""

from typing import List, Sequence, Tuple

from dimline.geometry.line import LineSegment, intersect_segments
from dimline.geometry.vector import Point, distance

# Hits closer than this are the same point (a line through a box corner).
_SAME_POINT = 1e-9


def box_edges(lower_left: Point, upper_right: Point) -> Tuple[LineSegment, ...]:
    """The four edges of a box in scan order: bottom, right, top, left."""
    (x1, y1), (x2, y2) = lower_left, upper_right
    return (
        LineSegment((x1, y1), (x2, y1)),
        LineSegment((x2, y1), (x2, y2)),
        LineSegment((x2, y2), (x1, y2)),
        LineSegment((x1, y2), (x1, y1)),
    )


def first_two_hits(line: LineSegment, edges: Sequence[LineSegment]) -> List[Point]:
    """Up to two distinct intersections of line with edges, in edge order."""
    hits: List[Point] = []
    for edge in edges:
        point = intersect_segments(line, edge)
        if point is None:
            continue
        if any(distance(point, hit) < _SAME_POINT for hit in hits):
            continue
        hits.append(point)
        if len(hits) == 2:
            break
    return hits


def split_line(line: LineSegment, p1: Point, hits: Sequence[Point]) -> List[LineSegment]:
    """Cut the middle out of line between two hits.

    The hit nearer to p1 ends the first segment; the other starts the
    second one, which runs to the original end. With fewer than two hits
    the line is returned unchanged.
    """
    if len(hits) < 2:
        return [line]
    v1, v2 = hits[0], hits[1]
    if distance(p1, v1) < distance(p1, v2):
        near, far = v1, v2
    else:
        near, far = v2, v1
    return [line.with_end(near), line.with_start(far)]


def split_around_box(
    line: LineSegment,
    p1: Point,
    lower_left: Point,
    upper_right: Point,
) -> List[LineSegment]:
    return split_line(line, p1, first_two_hits(line, box_edges(lower_left, upper_right)))
