"""
Label placement relative to the dimension line.
"""

import math
from typing import Optional, Tuple

from dimline.dimensions.label import DimensionLabel
from dimline.geometry.line import LineSegment
from dimline.geometry.vector import Point, add, polar


def auto_text_position(
    line: LineSegment,
    text_height: float,
    gap: float,
    horizontal: bool,
    corrected: bool,
) -> Point:
    """Automatic label anchor.

    Horizontal text sits on the middle of the line. Aligned text is moved
    off the line by gap + text_height / 2 along the line normal; the
    readable-angle correction decides which normal, so the label ends up
    above the line as the reader sees it.
    """
    middle = line.middle
    if horizontal:
        return middle
    angle = line.angle1
    normal = angle - math.pi / 2 if corrected else angle + math.pi / 2
    return add(middle, polar(gap + text_height / 2.0, normal))


def text_position(
    current: Optional[Point],
    force_auto_text: bool,
    line: LineSegment,
    text_height: float,
    gap: float,
    horizontal: bool,
    corrected: bool,
) -> Tuple[Point, bool]:
    """Anchor for this pass.

    Returns:
        (anchor, computed) where computed is True when the anchor was
        derived from the line and must be stored back on the dimension.
    """
    if current is not None and not force_auto_text:
        return current, False
    return auto_text_position(line, text_height, gap, horizontal, corrected), True


def shift_wide_label(label: DimensionLabel, distance: float, gap: float) -> DimensionLabel:
    """Move a label wider than the line beside it, along the text angle."""
    width = label.used_width()
    if width <= distance:
        return label
    return label.moved_along(width / 2.0 + distance / 2.0 + gap, label.angle)


def label_box(label: DimensionLabel, gap: float) -> Tuple[Point, Point]:
    """Axis-aligned box around the label, grown by gap on every side.

    Returns:
        (lower_left, upper_right)
    """
    w = label.used_width() / 2.0 + gap
    h = label.used_height() / 2.0 + gap
    x, y = label.anchor
    return (x - w, y - h), (x + w, y + h)
