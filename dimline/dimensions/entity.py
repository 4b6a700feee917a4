"""
Dimension entity: owns its data and the parts of the last layout pass.

The parts are rebuilt wholesale by update_create_dimension_line();
transforms apply to the persistent anchors only, so a rebuild is needed
afterwards to bring the parts in line.
"""

import logging
import math
import numbers
from typing import Callable, List, Optional, Sequence

from dimline.dimensions.builder import DimensionBuilder
from dimline.dimensions.geometry import DimensionGeometry, Entity
from dimline.dimensions.label import resolve_label
from dimline.dimensions.spec import DimensionSpec
from dimline.geometry.affine import mirror_points, move_points, rotate_points, scale_points
from dimline.geometry.vector import Point, as_point, correct_angle, distance

logger = logging.getLogger(__name__)


class Dimension:
    """Linear dimension entity.

    Args:
        spec: persistent dimension data.
        builder: layout builder bound to the drawing variables.
        measurement: callable returning the formatted measured value;
            None lets the builder format the line length.
        layer, pen: visual attributes inherited by every part.
    """

    def __init__(
        self,
        spec: DimensionSpec,
        builder: DimensionBuilder,
        measurement: Optional[Callable[[], str]] = None,
        layer: Optional[str] = None,
        pen: Optional[str] = None,
    ):
        self.spec = spec
        self.builder = builder
        self.measurement = measurement
        self.layer = layer
        self.pen = pen
        self.entities: List[Entity] = []
        self.geometry: Optional[DimensionGeometry] = None
        self._measured = ""

    # ------------------------------------------------------------------
    # Children
    # ------------------------------------------------------------------

    def add_entity(self, entity: Entity) -> None:
        self.entities.append(entity)

    def clear(self) -> None:
        self.entities = []
        self.geometry = None

    def effective_layer(self, entity: Entity) -> Optional[str]:
        """Parts carry no layer of their own; they use the dimension's."""
        return getattr(entity, "layer", None) or self.layer

    def effective_pen(self, entity: Entity) -> Optional[str]:
        return getattr(entity, "pen", None) or self.pen

    # ------------------------------------------------------------------
    # Label
    # ------------------------------------------------------------------

    def get_label(self, resolve: bool = True) -> str:
        """Label text; the raw template when resolve is False."""
        if not resolve:
            return self.spec.text
        return resolve_label(self.spec.text, self.measured_label())

    def measured_label(self) -> str:
        """Measured value from the callback, else from the last layout.

        Without a callback this is "" until the first layout pass, so
        get_label() of an empty template is also "" at that point.
        """
        return self.measurement() if self.measurement else self._measured

    def set_label(self, text: str) -> None:
        self.spec.text = text

    # ------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------

    def update_create_dimension_line(
        self,
        p1: Sequence[float],
        p2: Sequence[float],
        arrow1: bool = True,
        arrow2: bool = True,
        force_auto_text: bool = False,
    ) -> DimensionGeometry:
        """Replace all parts with a fresh layout between p1 and p2."""
        if self.measurement:
            measured = self.measurement()
        else:
            measured = self.builder.format_length(distance(as_point(p1), as_point(p2)))
        self._measured = measured
        geometry = self.builder.build(
            self.spec, p1, p2, arrow1, arrow2, force_auto_text, measured)
        self.clear()
        for entity in geometry.entities():
            self.add_entity(entity)
        self.geometry = geometry
        logger.debug("Dimension parts replaced", extra={
            "entities": len(self.entities), "measured": measured,
        })
        return geometry

    # ------------------------------------------------------------------
    # Style variables
    # ------------------------------------------------------------------

    def general_scale(self) -> float:
        return self.builder.resolver.general_scale()

    def general_factor(self) -> float:
        return self.builder.resolver.general_factor()

    def text_height(self) -> float:
        return self.builder.resolver.text_height()

    def arrow_size(self) -> float:
        return self.builder.resolver.arrow_size()

    def tick_size(self) -> float:
        return self.builder.resolver.tick_size()

    def extension_line_extension(self) -> float:
        return self.builder.resolver.extension_line_extension()

    def extension_line_offset(self) -> float:
        return self.builder.resolver.extension_line_offset()

    def dimension_line_gap(self) -> float:
        return self.builder.resolver.dimension_line_gap()

    def align_text(self) -> bool:
        return self.builder.resolver.align_text()

    # ------------------------------------------------------------------
    # Transforms
    # ------------------------------------------------------------------

    def _anchors(self) -> List[Point]:
        points = [self.spec.definition_point]
        if self.spec.middle_of_text is not None:
            points.append(self.spec.middle_of_text)
        return points

    def _set_anchors(self, points: List[Point]) -> None:
        self.spec.definition_point = points[0]
        if self.spec.middle_of_text is not None:
            self.spec.middle_of_text = points[1]

    def move(self, offset: Sequence[float]) -> None:
        self._set_anchors(move_points(self._anchors(), as_point(offset)))

    def rotate(self, center: Sequence[float], angle) -> None:
        """Rotate about center by an angle (radians) or a direction vector."""
        if isinstance(angle, numbers.Real):
            angle = float(angle)
        else:
            vx, vy = as_point(angle)
            angle = math.atan2(vy, vx)
        self._set_anchors(rotate_points(self._anchors(), as_point(center), angle))
        self.spec.angle = correct_angle(self.spec.angle + angle)

    def scale(self, center: Sequence[float], factor) -> None:
        """Scale about center by a scalar or an (sx, sy) factor."""
        if isinstance(factor, numbers.Real):
            factor = (float(factor), float(factor))
        self._set_anchors(scale_points(self._anchors(), as_point(center), as_point(factor)))

    def mirror(self, axis_point1: Sequence[float], axis_point2: Sequence[float]) -> None:
        self._set_anchors(
            mirror_points(self._anchors(), as_point(axis_point1), as_point(axis_point2)))
