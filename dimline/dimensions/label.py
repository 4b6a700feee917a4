"""
Dimension label text: template resolution, measurement formatting and the
text entity placed on the dimension.
"""

from dataclasses import dataclass, replace
from typing import Optional

from dimline.dimensions.spec import HAlign, LineSpacingStyle, TextDirection, VAlign
from dimline.geometry.vector import Point, add, polar

MEASUREMENT_TOKEN = "<>"
SUPPRESSED = " "


def resolve_label(template: str, measured: str) -> str:
    """Final label text.

    A single blank suppresses the label, an empty template shows the
    measurement, anything else is literal with every "<>" replaced by
    the measurement.
    """
    if template == SUPPRESSED:
        return ""
    if template == "":
        return measured
    return template.replace(MEASUREMENT_TOKEN, measured)


def format_measurement(value: float, decimals: Optional[int] = None) -> str:
    """Format a measured length.

    Whole numbers have no fractional part; others get `decimals` digits.

    Returns:
        "100", "12.5" etc.
    """
    if decimals is None:
        decimals = 1
    rounded = round(value, decimals)
    if abs(rounded - round(rounded)) < 0.5 * 10 ** -decimals:
        return str(int(round(rounded)))
    return f"{rounded:.{decimals}f}"


@dataclass(frozen=True)
class TextMetrics:
    """Estimated extent of single-line label text.

    Width is the character count times `char_width_factor` times the text
    height (an italic ISOCPEUR glyph is about 0.6 of its height wide).
    """
    char_width_factor: float = 0.6

    def width(self, content: str, height: float) -> float:
        return len(content) * height * self.char_width_factor

    def height(self, content: str, height: float) -> float:
        return height if content else 0.0


@dataclass(frozen=True)
class DimensionLabel:
    """Text entity of a dimension.

    Attributes:
        anchor: insertion point (label centre for MIDDLE/CENTER).
        height: text height in drawing units.
        width_hint: reference width of the text box.
        valign, halign: alignment relative to the anchor.
        direction: writing direction.
        line_spacing_style, line_spacing_factor: multi-line layout.
        content: resolved text.
        style: text style name.
        angle: rotation (radians).
        metrics: used to measure the text extent.
    """
    anchor: Point
    height: float
    width_hint: float
    valign: VAlign
    halign: HAlign
    direction: TextDirection
    line_spacing_style: LineSpacingStyle
    line_spacing_factor: float
    content: str
    style: str
    angle: float
    metrics: TextMetrics = TextMetrics()

    def used_width(self) -> float:
        return self.metrics.width(self.content, self.height)

    def used_height(self) -> float:
        return self.metrics.height(self.content, self.height)

    def moved(self, offset: Point) -> 'DimensionLabel':
        return replace(self, anchor=add(self.anchor, offset))

    def moved_along(self, length: float, angle: float) -> 'DimensionLabel':
        return self.moved(polar(length, angle))
