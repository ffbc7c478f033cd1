"""Navigation log legs and totals.

A leg holds what the pilot enters (waypoints, altitude, course, distance,
forecast wind) plus the values derived from it. Derived values are only
ever produced by recompute(), from the wind triangle functions.

Typical usage:
    log = NavigationLog()
    log.add_leg(NavigationLeg("KPAO", "KSFO", altitude=3500, course=340, distance=18))
    log.recompute_all(true_airspeed=110, burn_rate=8.5)
    print(log.total_time, log.total_fuel)
"""

import uuid
from dataclasses import dataclass, field

from clearedtoplan.core.logging_system import get_logger
from clearedtoplan.navigation.wind_triangle import (
    fuel_burn_gal,
    ground_speed,
    time_en_route_minutes,
    true_heading,
    wind_correction_angle,
)

logger = get_logger(__name__)


@dataclass
class NavigationLeg:
    """One leg of a navigation log.

    Attributes:
        from_waypoint: Departure fix identifier.
        to_waypoint: Destination fix identifier.
        altitude: Planned altitude (ft).
        course: True course (deg).
        distance: Leg distance (nm).
        wind_direction: Forecast wind direction (deg true).
        wind_speed: Forecast wind speed (kt).
        ground_speed: Derived ground speed (kt).
        time_en_route: Derived time (minutes).
        fuel_burn: Derived fuel (gal).
        wind_correction_angle: Derived WCA (deg), None if there is no solution.
        true_heading: Derived heading (deg true), None if there is no solution.
    """

    from_waypoint: str
    to_waypoint: str
    altitude: float = 0.0
    course: float = 0.0
    distance: float = 0.0
    wind_direction: float = 0.0
    wind_speed: float = 0.0
    ground_speed: float = 0.0
    time_en_route: float = 0.0
    fuel_burn: float = 0.0
    wind_correction_angle: float | None = None
    true_heading: float | None = None
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    def __post_init__(self) -> None:
        self.from_waypoint = self.from_waypoint.strip().upper()
        self.to_waypoint = self.to_waypoint.strip().upper()

    @property
    def has_wind_solution(self) -> bool:
        return self.wind_correction_angle is not None

    def recompute(self, true_airspeed: float, burn_rate: float) -> None:
        """Refresh every derived field from the current inputs.

        Args:
            true_airspeed: Planned true airspeed (kt).
            burn_rate: Planned fuel flow (gph).
        """
        self.ground_speed = ground_speed(
            true_airspeed, self.wind_direction, self.wind_speed, self.course
        )
        self.time_en_route = time_en_route_minutes(self.distance, self.ground_speed)
        self.fuel_burn = fuel_burn_gal(self.time_en_route, burn_rate)

        self.wind_correction_angle = wind_correction_angle(
            true_airspeed, self.wind_direction, self.wind_speed, self.course
        )
        if self.wind_correction_angle is None:
            self.true_heading = None
        else:
            self.true_heading = true_heading(self.course, self.wind_correction_angle)

        logger.debug(
            "Leg %s-%s: GS=%.1f kt, ETE=%.1f min, fuel=%.2f gal",
            self.from_waypoint,
            self.to_waypoint,
            self.ground_speed,
            self.time_en_route,
            self.fuel_burn,
        )


class NavigationLog:
    """Ordered list of legs with running totals."""

    def __init__(self, legs: list[NavigationLeg] | None = None) -> None:
        self.legs: list[NavigationLeg] = list(legs or [])

    def add_leg(self, leg: NavigationLeg) -> None:
        self.legs.append(leg)

    def remove_leg(self, leg_id: str) -> bool:
        """Remove a leg by id. Returns False if no leg matched."""
        for index, leg in enumerate(self.legs):
            if leg.id == leg_id:
                del self.legs[index]
                return True
        return False

    def recompute_all(self, true_airspeed: float, burn_rate: float) -> None:
        """Recompute every leg at one airspeed and fuel flow."""
        for leg in self.legs:
            leg.recompute(true_airspeed, burn_rate)

        unsolved = [
            f"{leg.from_waypoint}-{leg.to_waypoint}"
            for leg in self.legs
            if not leg.has_wind_solution
        ]
        if unsolved:
            logger.warning("Legs without a wind solution: %s", ", ".join(unsolved))

    @property
    def total_distance(self) -> float:
        """Total distance (nm)."""
        return sum(leg.distance for leg in self.legs)

    @property
    def total_time(self) -> float:
        """Total time en route (minutes)."""
        return sum(leg.time_en_route for leg in self.legs)

    @property
    def total_fuel(self) -> float:
        """Total fuel burn (gal)."""
        return sum(leg.fuel_burn for leg in self.legs)

    def __len__(self) -> int:
        return len(self.legs)
