"""Wind triangle solutions for dead reckoning.

All angles are degrees true at the interface and converted to radians
internally. A wind direction is where the wind blows from.
"""

import math

from clearedtoplan.core.logging_system import get_logger

logger = get_logger(__name__)


def headwind_component(wind_direction: float, wind_speed: float, course: float) -> float:
    """Wind component along the course (kt). Positive values add to TAS."""
    return wind_speed * math.cos(math.radians(wind_direction - course))


def crosswind_component(wind_direction: float, wind_speed: float, course: float) -> float:
    """Wind component across the course (kt). Positive is wind from the right."""
    return wind_speed * math.sin(math.radians(wind_direction - course))


def ground_speed(
    true_airspeed: float, wind_direction: float, wind_speed: float, course: float
) -> float:
    """Ground speed along the course.

    Args:
        true_airspeed: True airspeed (kt).
        wind_direction: Wind direction (deg true).
        wind_speed: Wind speed (kt).
        course: True course (deg).

    Returns:
        TAS plus the along-course wind component. The result is not
        clamped; a value at or below zero means the leg cannot be flown
        with this wind.
    """
    gs = true_airspeed + headwind_component(wind_direction, wind_speed, course)
    if gs <= 0:
        logger.warning(
            "Non-positive ground speed %.1f kt (TAS %.0f, wind %03.0f/%.0f, course %03.0f)",
            gs,
            true_airspeed,
            wind_direction,
            wind_speed,
            course,
        )
    return gs


def wind_correction_angle(
    true_airspeed: float, wind_direction: float, wind_speed: float, course: float
) -> float | None:
    """Heading correction needed to hold the course.

    Returns:
        Correction angle in degrees (positive = turn right), or None when
        there is no solution: the crosswind exceeds the true airspeed, or
        the airspeed is not positive.
    """
    crosswind = crosswind_component(wind_direction, wind_speed, course)

    if true_airspeed <= 0 or abs(crosswind) > true_airspeed:
        logger.warning(
            "No wind correction solution: crosswind %.1f kt, TAS %.1f kt", crosswind, true_airspeed
        )
        return None

    return math.degrees(math.asin(crosswind / true_airspeed))


def true_heading(course: float, correction_angle: float) -> float:
    """Apply a wind correction angle to a course, normalised to [0, 360)."""
    return (course + correction_angle) % 360.0


def time_en_route_minutes(distance_nm: float, ground_speed_kt: float) -> float:
    """Time to fly a distance (minutes); 0 when ground speed is not positive."""
    if ground_speed_kt <= 0:
        return 0.0
    return (distance_nm / ground_speed_kt) * 60.0


def fuel_burn_gal(time_minutes: float, burn_rate_gph: float) -> float:
    """Fuel used over a time (gal) at a burn rate (gph)."""
    return (time_minutes / 60.0) * burn_rate_gph
