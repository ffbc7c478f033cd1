"""Tests for wind triangle solutions."""

import math

import pytest

from clearedtoplan.navigation import (
    crosswind_component,
    fuel_burn_gal,
    ground_speed,
    headwind_component,
    time_en_route_minutes,
    true_heading,
    wind_correction_angle,
)


class TestComponents:
    def test_wind_along_course(self) -> None:
        assert headwind_component(90.0, 20.0, 90.0) == pytest.approx(20.0)
        assert crosswind_component(90.0, 20.0, 90.0) == pytest.approx(0.0, abs=1e-9)

    def test_wind_from_the_right(self) -> None:
        assert crosswind_component(90.0, 20.0, 0.0) == pytest.approx(20.0)
        assert headwind_component(90.0, 20.0, 0.0) == pytest.approx(0.0, abs=1e-9)


class TestGroundSpeed:
    """Tests for ground_speed."""

    def test_zero_wind_equals_tas(self) -> None:
        assert ground_speed(110.0, 270.0, 0.0, 45.0) == pytest.approx(110.0)

    def test_wind_direction_equal_to_course_adds(self) -> None:
        assert ground_speed(110.0, 360.0, 20.0, 360.0) == pytest.approx(130.0)

    def test_opposite_wind_direction_subtracts(self) -> None:
        assert ground_speed(110.0, 180.0, 20.0, 360.0) == pytest.approx(90.0)

    def test_not_clamped(self) -> None:
        assert ground_speed(30.0, 180.0, 50.0, 0.0) == pytest.approx(-20.0)


class TestWindCorrectionAngle:
    """Tests for wind_correction_angle."""

    def test_no_crosswind(self) -> None:
        assert wind_correction_angle(110.0, 360.0, 20.0, 360.0) == pytest.approx(0.0, abs=1e-9)

    def test_direct_crosswind(self) -> None:
        expected = math.degrees(math.asin(20.0 / 100.0))
        assert wind_correction_angle(100.0, 90.0, 20.0, 0.0) == pytest.approx(expected)

    def test_crosswind_from_left_is_negative(self) -> None:
        assert wind_correction_angle(100.0, 270.0, 20.0, 0.0) < 0

    def test_crosswind_exceeding_tas_has_no_solution(self) -> None:
        assert wind_correction_angle(40.0, 90.0, 50.0, 0.0) is None

    def test_zero_tas_has_no_solution(self) -> None:
        assert wind_correction_angle(0.0, 90.0, 10.0, 0.0) is None


class TestHeadingTimeFuel:
    def test_true_heading_wraps(self) -> None:
        assert true_heading(355.0, 10.0) == pytest.approx(5.0)
        assert true_heading(5.0, -10.0) == pytest.approx(355.0)

    def test_time_en_route(self) -> None:
        assert time_en_route_minutes(60.0, 120.0) == pytest.approx(30.0)

    @pytest.mark.parametrize("gs", [0.0, -15.0])
    def test_time_en_route_without_ground_speed(self, gs) -> None:
        assert time_en_route_minutes(60.0, gs) == 0.0

    def test_fuel_burn(self) -> None:
        assert fuel_burn_gal(30.0, 8.0) == pytest.approx(4.0)
