"""
Constructed geometry of one linear dimension.

Types:
  - DimensionGeometry: the parts built by one layout pass: dimension
    line (one segment, or two when split around the label), terminators
    and the label
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

from dimline.dimensions.label import DimensionLabel
from dimline.dimensions.terminators import ArrowStyle, Terminator
from dimline.geometry.line import LineSegment

Entity = Union[LineSegment, Terminator, DimensionLabel]


@dataclass
class DimensionGeometry:
    """Geometry batch of one dimension.

    Attributes:
        lines: dimension line segments (1, or 2 after a split).
        terminators: arrowheads or ticks (0, 1 or 2).
        label: text entity.
        outside_arrows: arrows placed outside a short line.
        text_angle: label rotation (radians).
        flipped: readable-angle correction fired.
    """
    lines: List[LineSegment] = field(default_factory=list)
    terminators: List[Terminator] = field(default_factory=list)
    label: Optional[DimensionLabel] = None
    outside_arrows: bool = False
    text_angle: float = 0.0
    flipped: bool = False

    @property
    def is_split(self) -> bool:
        return len(self.lines) == 2

    def entities(self) -> List[Entity]:
        """All parts in the order they are attached to the dimension."""
        parts: List[Entity] = list(self.lines[:1])
        parts.extend(self.terminators)
        parts.extend(self.lines[1:])
        if self.label is not None:
            parts.append(self.label)
        return parts

    def bounding_box(self) -> Tuple[float, float, float, float]:
        """Axis-aligned bounds of lines, terminators and the label text.

        Returns:
            (x_min, y_min, x_max, y_max)
        """
        xs: List[float] = []
        ys: List[float] = []

        for line in self.lines:
            xs.extend([line.start[0], line.end[0]])
            ys.extend([line.start[1], line.end[1]])

        for term in self.terminators:
            if term.style is ArrowStyle.FILLED:
                points = term.outline()
            else:
                stroke = term.stroke()
                points = (stroke.start, stroke.end)
            xs.extend(p[0] for p in points)
            ys.extend(p[1] for p in points)

        # Label box ignores rotation
        if self.label is not None and self.label.content:
            tx, ty = self.label.anchor
            half_w = self.label.used_width() / 2.0
            half_h = self.label.used_height() / 2.0
            xs.extend([tx - half_w, tx + half_w])
            ys.extend([ty - half_h, ty + half_h])

        if not xs:
            return (0.0, 0.0, 0.0, 0.0)
        return (min(xs), min(ys), max(xs), max(ys))
