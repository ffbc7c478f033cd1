"""Aircraft profiles and profile stores."""

from clearedtoplan.aircraft.profile import (
    AircraftCategory,
    AircraftProfile,
    CruisePerformance,
    PerformanceData,
    PerformancePoint,
    Station,
)
from clearedtoplan.aircraft.store import (
    InMemoryProfileStore,
    ProfileError,
    ProfileStore,
    load_profile,
    load_profiles,
)

__all__ = [
    "AircraftCategory",
    "AircraftProfile",
    "CruisePerformance",
    "InMemoryProfileStore",
    "PerformanceData",
    "PerformancePoint",
    "ProfileError",
    "ProfileStore",
    "Station",
    "load_profile",
    "load_profiles",
]
