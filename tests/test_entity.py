"""
Unit tests for dimline.dimensions.entity module.

Tests:
- Rebuilding the child parts
- Label access
- Style getters
- Affine transforms of the persistent anchors
"""

import math

import numpy as np
import pytest

from dimline.dimensions.entity import Dimension
from dimline.dimensions.spec import DimensionSpec
from dimline.dimensions.style import DIMTIH, DIMASZ
from dimline.geometry.line import LineSegment


class TestUpdateCreateDimensionLine:

    def test_parts_added(self, dimension):
        geometry = dimension.update_create_dimension_line((0.0, 0.0), (100.0, 0.0))

        assert dimension.geometry is geometry
        assert dimension.entities == geometry.entities()
        assert len(dimension.entities) == 4

    def test_rebuild_replaces_parts(self, dimension):
        dimension.update_create_dimension_line((0.0, 0.0), (100.0, 0.0))
        dimension.update_create_dimension_line((0.0, 0.0), (40.0, 0.0))

        assert len(dimension.entities) == 4
        assert dimension.entities[0] == LineSegment((0.0, 0.0), (40.0, 0.0))

    def test_anchor_sticky_across_rebuilds(self, dimension):
        dimension.update_create_dimension_line((0.0, 0.0), (100.0, 0.0))
        geometry = dimension.update_create_dimension_line((0.0, 0.0), (40.0, 0.0))

        assert geometry.label.anchor == pytest.approx((50.0, 1.875))

    def test_force_auto_text_recomputes(self, dimension):
        dimension.update_create_dimension_line((0.0, 0.0), (100.0, 0.0))
        geometry = dimension.update_create_dimension_line(
            (0.0, 0.0), (40.0, 0.0), force_auto_text=True)

        assert geometry.label.anchor == pytest.approx((20.0, 1.875))
        assert dimension.spec.middle_of_text == pytest.approx((20.0, 1.875))

    def test_clear(self, dimension):
        dimension.update_create_dimension_line((0.0, 0.0), (100.0, 0.0))
        dimension.clear()
        assert dimension.entities == []
        assert dimension.geometry is None

    def test_add_entity(self, dimension):
        line = LineSegment((0.0, 0.0), (1.0, 0.0))
        dimension.add_entity(line)
        assert dimension.entities == [line]


class TestLabel:

    def test_measured_from_layout(self, dimension):
        dimension.update_create_dimension_line((0.0, 0.0), (100.0, 0.0))
        assert dimension.measured_label() == "100"
        assert dimension.get_label() == "100"

    def test_raw_template(self, dimension):
        dimension.set_label("<> mm")
        dimension.update_create_dimension_line((0.0, 0.0), (25.0, 0.0))

        assert dimension.get_label(resolve=False) == "<> mm"
        assert dimension.get_label() == "25 mm"
        assert dimension.geometry.label.content == "25 mm"

    def test_measurement_callback(self, builder):
        dimension = Dimension(DimensionSpec(), builder, measurement=lambda: "R12")
        geometry = dimension.update_create_dimension_line((0.0, 0.0), (100.0, 0.0))

        assert geometry.label.content == "R12"
        assert dimension.get_label() == "R12"

    def test_suppressed(self, dimension):
        dimension.set_label(" ")
        dimension.update_create_dimension_line((0.0, 0.0), (100.0, 0.0))
        assert dimension.get_label() == ""

    def test_empty_before_first_layout(self, dimension):
        assert dimension.measured_label() == ""
        assert dimension.get_label() == ""


class TestStyleGetters:

    def test_delegate_to_resolver(self, store, dimension):
        assert dimension.arrow_size() == 2.5
        assert dimension.text_height() == 2.5
        assert dimension.general_scale() == 1.0
        assert dimension.general_factor() == 1.0
        assert dimension.tick_size() == 0.0
        assert dimension.extension_line_extension() == 1.25
        assert dimension.extension_line_offset() == 0.625
        assert dimension.dimension_line_gap() == 0.625
        assert dimension.align_text() is False
        assert store.get_number(DIMASZ) == 2.5
        assert store.get_integer(DIMTIH) == 0


class TestVisualAttributes:

    def test_parts_inherit_layer_and_pen(self, builder):
        dimension = Dimension(DimensionSpec(), builder, layer="DIM", pen="thin")
        dimension.update_create_dimension_line((0.0, 0.0), (100.0, 0.0))

        for entity in dimension.entities:
            assert dimension.effective_layer(entity) == "DIM"
            assert dimension.effective_pen(entity) == "thin"


class TestTransforms:
    """Transforms move the definition point and the label anchor together."""

    def test_move(self, dimension):
        dimension.update_create_dimension_line((0.0, 0.0), (100.0, 0.0))
        dimension.move((1.0, -1.0))

        assert dimension.spec.definition_point == (11.0, 19.0)
        assert dimension.spec.middle_of_text == pytest.approx((51.0, 0.875))

    def test_move_round_trip(self, dimension):
        dimension.update_create_dimension_line((0.0, 0.0), (100.0, 0.0))
        before = (dimension.spec.definition_point, dimension.spec.middle_of_text)

        dimension.move((3.5, -7.25))
        dimension.move((-3.5, 7.25))

        assert dimension.spec.definition_point == pytest.approx(before[0])
        assert dimension.spec.middle_of_text == pytest.approx(before[1])

    def test_unset_anchor_stays_unset(self, dimension):
        dimension.move((1.0, 1.0))
        dimension.rotate((0.0, 0.0), 1.0)
        dimension.scale((0.0, 0.0), 2.0)
        dimension.mirror((0.0, 0.0), (1.0, 0.0))

        assert dimension.spec.middle_of_text is None

    def test_rotate_by_angle(self, dimension):
        dimension.rotate((0.0, 0.0), math.pi / 2)

        assert dimension.spec.definition_point == pytest.approx((-20.0, 10.0))
        assert dimension.spec.angle == pytest.approx(math.pi / 2)

    def test_rotate_by_vector(self, dimension):
        dimension.rotate((0.0, 0.0), (0.0, 2.0))

        assert dimension.spec.definition_point == pytest.approx((-20.0, 10.0))
        assert dimension.spec.angle == pytest.approx(math.pi / 2)

    def test_rotate_by_numpy_scalar(self, dimension):
        dimension.rotate((0.0, 0.0), np.float32(math.pi / 2))
        assert dimension.spec.definition_point == pytest.approx((-20.0, 10.0), abs=1e-5)

        dimension.rotate((0.0, 0.0), np.int64(0))
        assert dimension.spec.definition_point == pytest.approx((-20.0, 10.0), abs=1e-5)

    def test_rotation_angle_normalized(self, dimension):
        dimension.rotate((0.0, 0.0), 1.5 * math.pi)
        dimension.rotate((0.0, 0.0), math.pi)

        assert dimension.spec.angle == pytest.approx(0.5 * math.pi)

    def test_rotate_and_back(self, dimension):
        dimension.update_create_dimension_line((0.0, 0.0), (100.0, 0.0))
        before = dimension.spec.middle_of_text

        dimension.rotate((5.0, 5.0), 0.7)
        dimension.rotate((5.0, 5.0), -0.7)

        assert dimension.spec.definition_point == pytest.approx((10.0, 20.0))
        assert dimension.spec.middle_of_text == pytest.approx(before)
        assert dimension.spec.angle == pytest.approx(0.0, abs=1e-12)

    def test_scale_uniform(self, dimension):
        dimension.scale((0.0, 0.0), 2.0)

        assert dimension.spec.definition_point == (20.0, 40.0)
        assert dimension.spec.angle == 0.0

    def test_scale_by_numpy_scalar(self, dimension):
        dimension.scale((0.0, 0.0), np.int64(3))
        assert dimension.spec.definition_point == pytest.approx((30.0, 60.0))

    def test_scale_per_axis(self, dimension):
        dimension.scale((10.0, 0.0), (2.0, 3.0))
        assert dimension.spec.definition_point == pytest.approx((10.0, 60.0))

    def test_mirror(self, dimension):
        dimension.update_create_dimension_line((0.0, 0.0), (100.0, 0.0))
        dimension.mirror((0.0, 0.0), (1.0, 0.0))

        assert dimension.spec.definition_point == pytest.approx((10.0, -20.0))
        assert dimension.spec.middle_of_text == pytest.approx((50.0, -1.875))
        assert dimension.spec.angle == 0.0

    def test_rebuild_after_transform_uses_moved_anchor(self, dimension):
        dimension.update_create_dimension_line((0.0, 0.0), (100.0, 0.0))
        dimension.move((0.0, 10.0))
        geometry = dimension.update_create_dimension_line((0.0, 10.0), (100.0, 10.0))

        assert geometry.label.anchor == pytest.approx((50.0, 11.875))
