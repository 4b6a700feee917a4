"""
Terminators capping the ends of a dimension line.

  - ArrowStyle.FILLED: filled triangle, tip on the endpoint
  - ArrowStyle.TICK:   oblique stroke at 45° to the line, centred on the endpoint
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from dimline.geometry.line import LineSegment
from dimline.geometry.vector import Point, add, polar, sub

# Half opening angle of an arrowhead (radians, about 9.5°).
ARROW_HALF_ANGLE = 0.165

# Scaled tick sizes below this draw arrowheads instead of ticks.
TICK_THRESHOLD = 0.01


class ArrowStyle(Enum):
    FILLED = "filled"
    TICK = "tick"


def terminator_style(tick_size: float) -> ArrowStyle:
    """Ticks iff tick_size >= TICK_THRESHOLD."""
    return ArrowStyle.FILLED if tick_size < TICK_THRESHOLD else ArrowStyle.TICK


@dataclass(frozen=True)
class Terminator:
    """Arrowhead or tick at one end of the dimension line.

    Attributes:
        position: arrow tip, or tick centre.
        angle: direction the arrow points (radians).
        size: arrow length, or tick half-length.
        style: FILLED or TICK.
    """
    position: Point
    angle: float
    size: float
    style: ArrowStyle = ArrowStyle.FILLED

    def outline(self) -> Tuple[Point, Point, Point]:
        """Triangle corners of an arrowhead: tip first, base behind it."""
        side = self.size / math.cos(ARROW_HALF_ANGLE)
        return (
            self.position,
            sub(self.position, polar(side, self.angle + ARROW_HALF_ANGLE)),
            sub(self.position, polar(side, self.angle - ARROW_HALF_ANGLE)),
        )

    def stroke(self) -> LineSegment:
        """Tick segment, rotated 45° from the terminator angle."""
        v = polar(self.size, self.angle + math.pi * 0.25)
        return LineSegment(sub(self.position, v), add(self.position, v))


def make_terminator(position: Point, angle: float, arrow_size: float, tick_size: float) -> Terminator:
    style = terminator_style(tick_size)
    size = arrow_size if style is ArrowStyle.FILLED else tick_size
    return Terminator(position=position, angle=angle, size=size, style=style)
