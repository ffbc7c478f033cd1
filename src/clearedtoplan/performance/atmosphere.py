"""Pressure and density altitude rules of thumb.

These are the standard pilot approximations: 1000 ft per inch of mercury
below 29.92, a 2 deg C per 1000 ft standard lapse rate, and 120 ft of
density altitude per degree of deviation from ISA.
"""

STANDARD_ALTIMETER_INHG = 29.92
SEA_LEVEL_ISA_TEMP_C = 15.0
ISA_LAPSE_C_PER_1000FT = 2.0
DENSITY_ALTITUDE_FT_PER_DEG_C = 120.0
PRESSURE_ALTITUDE_FT_PER_INHG = 1000.0


def isa_temperature(pressure_altitude_ft: float) -> float:
    """Standard atmosphere temperature (deg C) at a pressure altitude."""
    return SEA_LEVEL_ISA_TEMP_C - ISA_LAPSE_C_PER_1000FT * (pressure_altitude_ft / 1000.0)


def density_altitude(pressure_altitude_ft: float, temp_c: float) -> float:
    """Calculate density altitude.

    Args:
        pressure_altitude_ft: Pressure altitude (ft).
        temp_c: Outside air temperature (deg C).

    Returns:
        Density altitude (ft).

    Examples:
        >>> density_altitude(0, 15)
        0.0
        >>> density_altitude(5000, 25)
        7400.0
    """
    deviation = temp_c - isa_temperature(pressure_altitude_ft)
    return pressure_altitude_ft + DENSITY_ALTITUDE_FT_PER_DEG_C * deviation


def pressure_altitude(field_elevation_ft: float, altimeter_inhg: float) -> float:
    """Calculate pressure altitude from field elevation and altimeter setting.

    Args:
        field_elevation_ft: Field elevation (ft MSL).
        altimeter_inhg: Altimeter setting (inches of mercury).

    Returns:
        Pressure altitude (ft).
    """
    return field_elevation_ft + (STANDARD_ALTIMETER_INHG - altimeter_inhg) * PRESSURE_ALTITUDE_FT_PER_INHG
