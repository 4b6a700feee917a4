"""Plane geometry primitives: points, angles, segments, affine transforms."""

from dimline.geometry.line import LineSegment, intersect_segments
from dimline.geometry.vector import (
    Point,
    correct_angle,
    make_angle_readable,
    text_display_angle,
)

__all__ = [
    "Point",
    "LineSegment",
    "intersect_segments",
    "correct_angle",
    "make_angle_readable",
    "text_display_angle",
]
