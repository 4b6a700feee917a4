"""
Construction of a linear dimension: dimension line, terminators, label.

One call to DimensionBuilder.build() is one layout pass. It reads the
style from the drawing variables, builds the line between the two
reference points, caps it with arrowheads or ticks, places the label and,
for horizontal text, cuts the line around the label.
"""

import logging
from pathlib import Path
from typing import Optional, Sequence, Union

from dimline.dimensions.geometry import DimensionGeometry
from dimline.dimensions.label import (
    DimensionLabel,
    TextMetrics,
    format_measurement,
    resolve_label,
)
from dimline.dimensions.placer import label_box, shift_wide_label, text_position
from dimline.dimensions.spec import DimensionSpec, HAlign, TextDirection, VAlign
from dimline.dimensions.splitter import split_around_box
from dimline.dimensions.style import StyleResolver, UnitConverter, VariableStore
from dimline.dimensions.terminators import make_terminator
from dimline.geometry.line import LineSegment
from dimline.geometry.vector import add, as_point, distance, polar, sub, text_display_angle
from dimline.project_config import ProjectConfig, load_config, merge_configs

logger = logging.getLogger(__name__)

# Arrows go outside when the line is shorter than this many arrow sizes.
OUTSIDE_ARROWS_RATIO = 2.5
# Line extension past each endpoint with outside arrows, in arrow sizes.
OUTSIDE_EXTENSION_RATIO = 2.0

DEFAULT_WIDTH_HINT = 30.0
DEFAULT_TEXT_STYLE = "standard"


def arrows_outside(distance_: float, arrow_size: float) -> bool:
    """Arrows point outward when they would overlap inside the line."""
    return distance_ < arrow_size * OUTSIDE_ARROWS_RATIO


class DimensionBuilder:
    """Builds the geometry batch of a linear dimension."""

    def __init__(
        self,
        resolver: StyleResolver,
        metrics: Optional[TextMetrics] = None,
        width_hint: float = DEFAULT_WIDTH_HINT,
        decimals: Optional[int] = None,
    ):
        self.resolver = resolver
        self.metrics = metrics or TextMetrics()
        self.width_hint = width_hint
        self.decimals = decimals

    @classmethod
    def from_config(
        cls,
        store: VariableStore,
        config: Optional[ProjectConfig] = None,
        converter: Optional[UnitConverter] = None,
        drawing_path: Optional[Union[str, Path]] = None,
        config_path: Optional[Union[str, Path]] = None,
    ) -> 'DimensionBuilder':
        """Builder whose defaults, text metrics and formatting come from config.

        Args:
            store: drawing variables.
            config: explicit configuration. Without it, the .dimline.json
                found by load_config() is used.
            converter: unit converter for inserted defaults.
            drawing_path: drawing whose directory is searched first.
            config_path: explicit configuration file.

        When a path is given together with config, the file is loaded and
        the non-default values of config override it.
        """
        if config is None:
            config = load_config(drawing_path, config_path)
        elif drawing_path or config_path:
            config = merge_configs(load_config(drawing_path, config_path), config)
        resolver = StyleResolver(store, converter, config.style)
        return cls(
            resolver,
            metrics=TextMetrics(config.text.char_width_factor),
            width_hint=config.text.width_hint,
            decimals=config.text.decimals,
        )

    def format_length(self, length: float, general_factor: Optional[float] = None) -> str:
        """Measured value of a length, scaled by $DIMLFAC."""
        if general_factor is None:
            general_factor = self.resolver.general_factor()
        return format_measurement(length * general_factor, self.decimals)

    def build(
        self,
        spec: DimensionSpec,
        p1: Sequence[float],
        p2: Sequence[float],
        arrow1: bool = True,
        arrow2: bool = True,
        force_auto_text: bool = False,
        measured: Optional[str] = None,
    ) -> DimensionGeometry:
        """Build line, terminators and label between p1 and p2.

        Args:
            spec: dimension data; its label anchor is stored back when it
                is computed here.
            p1, p2: ends of the dimension line.
            arrow1, arrow2: draw a terminator at p1 / p2.
            force_auto_text: recompute the label anchor even if set.
            measured: formatted measurement; defaults to the distance
                times $DIMLFAC.

        Returns:
            DimensionGeometry with all constructed parts.
        """
        style = self.resolver.resolve_style()
        p1 = as_point(p1)
        p2 = as_point(p2)

        base = LineSegment(p1, p2)
        length = base.length
        outside = arrows_outside(length, style.arrow_size)

        line = base
        if outside:
            angle_at_p1, angle_at_p2 = base.angle1, base.angle2
            ext = polar(style.arrow_size * OUTSIDE_EXTENSION_RATIO, base.angle2)
            line = LineSegment(add(p1, ext), sub(p2, ext))
        else:
            angle_at_p1, angle_at_p2 = base.angle2, base.angle1

        terminators = []
        if arrow1:
            terminators.append(
                make_terminator(p1, angle_at_p1, style.arrow_size, style.tick_size))
        if arrow2:
            terminators.append(
                make_terminator(p2, angle_at_p2, style.arrow_size, style.tick_size))

        horizontal = style.align_text
        text_angle, corrected = text_display_angle(base.angle1, horizontal)

        anchor, computed = text_position(
            spec.middle_of_text, force_auto_text, base,
            style.text_height, style.gap, horizontal, corrected)
        if computed:
            spec.middle_of_text = anchor

        if measured is None:
            measured = self.format_length(length, style.general_factor)

        label = DimensionLabel(
            anchor=anchor,
            height=style.text_height,
            width_hint=self.width_hint,
            valign=VAlign.MIDDLE,
            halign=HAlign.CENTER,
            direction=TextDirection.LEFT_TO_RIGHT,
            line_spacing_style=spec.line_spacing_style,
            line_spacing_factor=spec.line_spacing_factor,
            content=resolve_label(spec.text, measured),
            style=spec.style or DEFAULT_TEXT_STYLE,
            angle=text_angle,
            metrics=self.metrics,
        )
        label = shift_wide_label(label, length, style.gap)

        lines = [line]
        if horizontal:
            # Box is centred on the shifted label, not on the stored anchor,
            # so a wide label beside a sloped line leaves the line whole.
            lower_left, upper_right = label_box(label, style.gap)
            lines = split_around_box(line, p1, lower_left, upper_right)

        geometry = DimensionGeometry(
            lines=lines,
            terminators=terminators,
            label=label,
            outside_arrows=outside,
            text_angle=text_angle,
            flipped=corrected,
        )

        logger.debug("Dimension built", extra={
            "distance": length,
            "outside_arrows": outside,
            "terminator": terminators[0].style.value if terminators else "none",
            "split": geometry.is_split,
            "text_angle": text_angle,
            "label": label.content,
        })
        return geometry
