"""Dead-reckoning navigation.

This package provides the wind triangle solutions and the navigation log
built on them.

Typical usage:
    from clearedtoplan.navigation import NavigationLeg, NavigationLog

    log = NavigationLog()
    log.add_leg(NavigationLeg("KPAO", "KSFO", course=340, distance=18))
    log.recompute_all(true_airspeed=110, burn_rate=8.5)
"""

from clearedtoplan.navigation.nav_log import NavigationLeg, NavigationLog
from clearedtoplan.navigation.wind_triangle import (
    crosswind_component,
    fuel_burn_gal,
    ground_speed,
    headwind_component,
    time_en_route_minutes,
    true_heading,
    wind_correction_angle,
)

__all__ = [
    "NavigationLeg",
    "NavigationLog",
    "crosswind_component",
    "fuel_burn_gal",
    "ground_speed",
    "headwind_component",
    "time_en_route_minutes",
    "true_heading",
    "wind_correction_angle",
]
