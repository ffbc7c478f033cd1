"""Unit conversions used in flight planning.

Examples:
    >>> gallons_to_pounds(40, 6.0)
    240.0
"""

STATUTE_MILES_PER_NAUTICAL_MILE = 1.15078
METERS_PER_FOOT = 0.3048


def nm_to_sm(nautical_miles: float) -> float:
    return nautical_miles * STATUTE_MILES_PER_NAUTICAL_MILE


def sm_to_nm(statute_miles: float) -> float:
    return statute_miles / STATUTE_MILES_PER_NAUTICAL_MILE


def celsius_to_fahrenheit(celsius: float) -> float:
    return celsius * 9.0 / 5.0 + 32.0


def fahrenheit_to_celsius(fahrenheit: float) -> float:
    return (fahrenheit - 32.0) * 5.0 / 9.0


def feet_to_meters(feet: float) -> float:
    return feet * METERS_PER_FOOT


def meters_to_feet(meters: float) -> float:
    return meters / METERS_PER_FOOT


def gallons_to_pounds(gallons: float, density: float) -> float:
    """Fuel weight for a volume.

    Args:
        gallons: Fuel volume (US gal).
        density: Fuel density (lb/gal), 6.0 for avgas.

    Returns:
        Weight in pounds.
    """
    return gallons * density
