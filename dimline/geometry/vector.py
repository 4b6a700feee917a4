"""
Plane vector helpers and angle normalization.

Points are plain (x, y) tuples in drawing units; angles are radians,
counter-clockwise from +X.
"""

import math
from typing import Sequence, Tuple

Point = Tuple[float, float]

TWO_PI = 2.0 * math.pi

# Tolerance on the readable-angle quadrant boundaries (radians).
READABLE_TOLERANCE = 0.001


def as_point(value: Sequence[float]) -> Point:
    """Coerce a 2-sequence into a float tuple.

    Raises:
        ValueError: If value does not hold exactly two coordinates.
    """
    if len(value) != 2:
        raise ValueError(f"Expected a 2D point, got {len(value)} coordinates")
    return (float(value[0]), float(value[1]))


def add(a: Point, b: Point) -> Point:
    return (a[0] + b[0], a[1] + b[1])


def sub(a: Point, b: Point) -> Point:
    return (a[0] - b[0], a[1] - b[1])


def distance(a: Point, b: Point) -> float:
    return math.hypot(b[0] - a[0], b[1] - a[1])


def angle_to(a: Point, b: Point) -> float:
    """Direction from a to b in [0, 2*pi); 0 for coincident points."""
    return correct_angle(math.atan2(b[1] - a[1], b[0] - a[0]))


def polar(length: float, angle: float) -> Point:
    """Vector of given length pointing along angle."""
    return (length * math.cos(angle), length * math.sin(angle))


def midpoint(a: Point, b: Point) -> Point:
    return ((a[0] + b[0]) / 2.0, (a[1] + b[1]) / 2.0)


def correct_angle(angle: float) -> float:
    """Normalize an angle into [0, 2*pi)."""
    result = math.fmod(angle, TWO_PI)
    if result < 0.0:
        result += TWO_PI
    # fmod of a tiny negative value can round up to exactly 2*pi
    if result >= TWO_PI:
        result = 0.0
    return result


def is_angle_readable(angle: float) -> bool:
    """True if text at this angle reads left-to-right or bottom-to-top.

    Quadrants 1 and 4 are readable; the boundaries at pi/2 and 3*pi/2 are
    shifted by READABLE_TOLERANCE so exactly vertical text (pi/2) stays
    as-is and its opposite (3*pi/2) is turned.
    """
    angle = correct_angle(angle)
    return (angle > 1.5 * math.pi + READABLE_TOLERANCE
            or angle < 0.5 * math.pi + READABLE_TOLERANCE)


def make_angle_readable(angle: float, readable: bool = True) -> Tuple[float, bool]:
    """Turn an angle by pi when its readability differs from `readable`.

    Returns:
        (display_angle, corrected) where corrected tells whether the angle
        was turned; callers use it to pick the side of a text offset.
    """
    corrected = is_angle_readable(angle) != readable
    if corrected:
        return correct_angle(angle + math.pi), True
    return correct_angle(angle), False


def text_display_angle(line_angle: float, horizontal: bool) -> Tuple[float, bool]:
    """Text angle for a dimension line; horizontal text is always 0."""
    if horizontal:
        return 0.0, False
    return make_angle_readable(line_angle, True)
