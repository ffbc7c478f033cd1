"""Tests for navigation log legs and totals."""

import pytest

from clearedtoplan.navigation import NavigationLeg, NavigationLog


def make_leg(**overrides) -> NavigationLeg:
    values = dict(
        from_waypoint="kpao ",
        to_waypoint=" ksfo",
        altitude=3500.0,
        course=90.0,
        distance=60.0,
        wind_direction=90.0,
        wind_speed=0.0,
    )
    values.update(overrides)
    return NavigationLeg(**values)


class TestNavigationLeg:
    """Tests for NavigationLeg."""

    def test_waypoints_normalised(self) -> None:
        leg = make_leg()
        assert leg.from_waypoint == "KPAO"
        assert leg.to_waypoint == "KSFO"

    def test_recompute_calm_wind(self) -> None:
        leg = make_leg()
        leg.recompute(true_airspeed=120.0, burn_rate=8.0)

        assert leg.ground_speed == pytest.approx(120.0)
        assert leg.time_en_route == pytest.approx(30.0)
        assert leg.fuel_burn == pytest.approx(4.0)
        assert leg.wind_correction_angle == pytest.approx(0.0, abs=1e-9)
        assert leg.true_heading == pytest.approx(90.0)
        assert leg.has_wind_solution

    def test_recompute_without_solution(self) -> None:
        leg = make_leg(wind_direction=180.0, wind_speed=150.0)
        leg.recompute(true_airspeed=100.0, burn_rate=8.0)

        assert leg.wind_correction_angle is None
        assert leg.true_heading is None
        assert not leg.has_wind_solution

    def test_derived_values_follow_inputs(self) -> None:
        leg = make_leg()
        leg.recompute(true_airspeed=120.0, burn_rate=8.0)
        leg.distance = 120.0
        leg.recompute(true_airspeed=120.0, burn_rate=8.0)
        assert leg.time_en_route == pytest.approx(60.0)

    def test_ids_are_unique(self) -> None:
        assert make_leg().id != make_leg().id


class TestNavigationLog:
    """Tests for NavigationLog."""

    def test_totals(self) -> None:
        log = NavigationLog([make_leg(), make_leg(distance=30.0)])
        log.recompute_all(true_airspeed=120.0, burn_rate=8.0)

        assert len(log) == 2
        assert log.total_distance == pytest.approx(90.0)
        assert log.total_time == pytest.approx(45.0)
        assert log.total_fuel == pytest.approx(6.0)

    def test_empty_log(self) -> None:
        log = NavigationLog()
        assert log.total_distance == 0
        assert log.total_time == 0
        assert log.total_fuel == 0

    def test_add_and_remove_leg(self) -> None:
        log = NavigationLog()
        leg = make_leg()
        log.add_leg(leg)

        assert log.remove_leg(leg.id) is True
        assert log.remove_leg(leg.id) is False
        assert len(log) == 0

    def test_recompute_all_keeps_unsolved_legs(self) -> None:
        log = NavigationLog([make_leg(), make_leg(wind_direction=180.0, wind_speed=150.0)])
        log.recompute_all(true_airspeed=100.0, burn_rate=8.0)

        assert [leg.has_wind_solution for leg in log.legs] == [True, False]
