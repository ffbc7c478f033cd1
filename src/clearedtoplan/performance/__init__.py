"""Performance calculations.

This package provides:
- Piecewise-linear lookup over performance chart samples
- Pressure and density altitude
- Takeoff, landing and cruise lookups from POH data
"""

from clearedtoplan.performance.atmosphere import (
    density_altitude,
    isa_temperature,
    pressure_altitude,
)
from clearedtoplan.performance.interpolation import interpolate_linear, lookup
from clearedtoplan.performance.performance_calculator import (
    CruiseEstimate,
    DistanceEstimate,
    PerformanceCalculator,
)

__all__ = [
    "CruiseEstimate",
    "DistanceEstimate",
    "PerformanceCalculator",
    "density_altitude",
    "interpolate_linear",
    "isa_temperature",
    "lookup",
    "pressure_altitude",
]
