"""
Persistent data of a dimension entity.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from dimline.geometry.vector import Point


class VAlign(Enum):
    """Vertical alignment of the label relative to its anchor."""
    TOP = "top"
    MIDDLE = "middle"
    BOTTOM = "bottom"


class HAlign(Enum):
    """Horizontal alignment of the label relative to its anchor."""
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class LineSpacingStyle(Enum):
    """Multi-line text spacing (passed through to the text entity)."""
    AT_LEAST = "at_least"
    EXACT = "exact"


class TextDirection(Enum):
    LEFT_TO_RIGHT = "left_to_right"
    TOP_TO_BOTTOM = "top_to_bottom"


@dataclass
class DimensionSpec:
    """Data owned by a dimension entity.

    Attributes:
        definition_point: primary geometric anchor of the dimension.
        middle_of_text: label anchor. None until computed by a build or
            placed by the user; once set, later builds reuse it unless
            they force automatic placement.
        valign, halign: label alignment.
        line_spacing_style, line_spacing_factor: multi-line text layout.
        text: label template. "" shows the measurement, " " suppresses
            the label, anything else is literal with "<>" replaced by the
            measurement.
        style: dimension style name.
        angle: cumulative rotation (radians, [0, 2*pi)).
    """
    definition_point: Point = (0.0, 0.0)
    middle_of_text: Optional[Point] = None
    valign: VAlign = VAlign.BOTTOM
    halign: HAlign = HAlign.LEFT
    line_spacing_style: LineSpacingStyle = LineSpacingStyle.EXACT
    line_spacing_factor: float = 0.0
    text: str = ""
    style: str = ""
    angle: float = 0.0

    @property
    def has_text_position(self) -> bool:
        return self.middle_of_text is not None
