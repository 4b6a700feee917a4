"""
Unit tests for dimline.geometry.vector module.

Tests:
- Point helpers
- Angle normalization
- Readable-angle correction
"""

import math

import pytest

from dimline.geometry.vector import (
    TWO_PI,
    angle_to,
    as_point,
    correct_angle,
    distance,
    is_angle_readable,
    make_angle_readable,
    midpoint,
    polar,
    text_display_angle,
)


class TestPointHelpers:

    def test_as_point_converts_to_floats(self):
        assert as_point([1, 2]) == (1.0, 2.0)

    def test_as_point_rejects_wrong_length(self):
        with pytest.raises(ValueError):
            as_point((1.0, 2.0, 3.0))

    def test_distance_and_midpoint(self):
        assert distance((0, 0), (3, 4)) == 5.0
        assert midpoint((0, 0), (4, 2)) == (2.0, 1.0)

    def test_polar(self):
        assert polar(2.0, math.pi / 2) == pytest.approx((0.0, 2.0), abs=1e-12)

    def test_angle_to_in_range(self):
        assert angle_to((0, 0), (-1, 0)) == pytest.approx(math.pi)
        assert angle_to((0, 0), (0, -1)) == pytest.approx(1.5 * math.pi)
        assert angle_to((0, 0), (0, 0)) == 0.0


class TestCorrectAngle:
    """Normalization into [0, 2*pi)."""

    @pytest.mark.parametrize("angle, expected", [
        (0.0, 0.0),
        (-math.pi / 2, 1.5 * math.pi),
        (2.5 * math.pi, 0.5 * math.pi),
        (-4 * math.pi, 0.0),
    ])
    def test_values(self, angle, expected):
        assert correct_angle(angle) == pytest.approx(expected, abs=1e-12)

    def test_full_turn_is_zero(self):
        assert correct_angle(TWO_PI) == 0.0

    def test_tiny_negative_stays_in_range(self):
        result = correct_angle(-1e-20)
        assert 0.0 <= result < TWO_PI


class TestReadableAngle:
    """Quadrant test and pi turn."""

    @pytest.mark.parametrize("angle", [0.0, 0.3, math.pi / 2, 1.6 * math.pi])
    def test_readable(self, angle):
        assert is_angle_readable(angle)

    @pytest.mark.parametrize("angle", [math.pi, 0.75 * math.pi, 1.5 * math.pi])
    def test_unreadable(self, angle):
        assert not is_angle_readable(angle)

    def test_tolerance_boundary(self):
        """pi/2 plus the tolerance is the first unreadable angle."""
        assert is_angle_readable(math.pi / 2 + 0.0009)
        assert not is_angle_readable(math.pi / 2 + 0.0011)

    def test_make_readable_turns_by_pi(self):
        angle, corrected = make_angle_readable(math.pi)
        assert corrected is True
        assert angle == pytest.approx(0.0, abs=1e-12)

    def test_make_readable_keeps_readable_angle(self):
        angle, corrected = make_angle_readable(0.3)
        assert corrected is False
        assert angle == pytest.approx(0.3)

    def test_make_unreadable(self):
        angle, corrected = make_angle_readable(0.3, readable=False)
        assert corrected is True
        assert angle == pytest.approx(0.3 + math.pi)

    def test_result_is_readable_for_many_angles(self):
        for i in range(72):
            angle, _ = make_angle_readable(i * TWO_PI / 72)
            assert is_angle_readable(angle)

    def test_text_display_angle_horizontal(self):
        assert text_display_angle(math.pi, horizontal=True) == (0.0, False)

    def test_text_display_angle_aligned(self):
        angle, corrected = text_display_angle(math.pi, horizontal=False)
        assert corrected is True
        assert angle == pytest.approx(0.0, abs=1e-12)
