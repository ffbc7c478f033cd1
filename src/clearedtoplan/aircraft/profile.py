"""Aircraft profile data model.

An aircraft profile carries everything the calculators need about one
airframe: empty weight and moment, loading stations, CG envelopes, fuel
data, weight ceilings and performance data. Profiles are owned by an
external store and lent read-only to each calculation.

Typical usage:
    profile = AircraftProfile.from_dict(yaml.safe_load(f)["aircraft"])
    print(profile.empty_arm)
"""

import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from clearedtoplan.geometry.polygon import EnvelopePoint

DEFAULT_FUEL_DENSITY_LB_PER_GAL = 6.0


class AircraftCategory(Enum):
    """Aircraft class for the category and class rating."""

    SINGLE_ENGINE_LAND = "single_engine_land"
    MULTI_ENGINE_LAND = "multi_engine_land"
    SINGLE_ENGINE_SEA = "single_engine_sea"
    MULTI_ENGINE_SEA = "multi_engine_sea"


@dataclass
class Station:
    """A loading station (seat row, baggage area).

    Attributes:
        name: Station label (e.g., "Front seats").
        arm: Distance from datum in inches.
        max_weight: Structural limit for the station in pounds, if published.
    """

    name: str
    arm: float
    max_weight: float | None = None


@dataclass
class PerformancePoint:
    """One sample of a distance chart: distance (ft) at an altitude (ft)."""

    altitude: float
    distance: float


@dataclass
class CruisePerformance:
    """One row of a cruise performance table.

    Attributes:
        rpm: Power setting (engine RPM).
        altitude_ft: Pressure altitude for this row.
        tas_kt: True airspeed (knots).
        fuel_burn_gph: Fuel flow (gallons per hour).
    """

    rpm: float
    altitude_ft: float
    tas_kt: float
    fuel_burn_gph: float


@dataclass
class PerformanceData:
    """POH performance figures.

    Scalar distances are single published figures. Tables, when present,
    give the same distance against altitude and take precedence.
    """

    takeoff_ground_roll: float | None = None
    takeoff_over_50ft: float | None = None
    landing_ground_roll: float | None = None
    landing_over_50ft: float | None = None
    takeoff_ground_roll_table: list[PerformancePoint] = field(default_factory=list)
    takeoff_over_50ft_table: list[PerformancePoint] = field(default_factory=list)
    landing_ground_roll_table: list[PerformancePoint] = field(default_factory=list)
    landing_over_50ft_table: list[PerformancePoint] = field(default_factory=list)
    cruise: list[CruisePerformance] = field(default_factory=list)


_DISTANCE_FIELDS = (
    "takeoff_ground_roll",
    "takeoff_over_50ft",
    "landing_ground_roll",
    "landing_over_50ft",
)


@dataclass
class AircraftProfile:
    """Aircraft identity plus weight, balance and performance data.

    Attributes:
        id: Stable identifier used by stores and sessions.
        name: Make and model.
        registration: Tail number.
        type: ICAO type designator.
        category: Category and class.
        empty_weight: Basic empty weight (lbs).
        empty_moment: Basic empty moment (lb-in).
        usable_fuel: Usable fuel (gal).
        fuel_density: Fuel density (lb/gal).
        fuel_burn_rate: Default fuel flow (gph) when no cruise row applies.
        stations: Loading stations in POH order.
        normal_envelope: Normal category CG envelope corners.
        utility_envelope: Utility category envelope, if the type has one.
        max_ramp_weight: Maximum ramp weight (lbs), if published.
        max_takeoff_weight: Maximum takeoff weight (lbs), if published.
        max_landing_weight: Maximum landing weight (lbs), if published.
        performance: Takeoff, landing and cruise data.
    """

    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    name: str = ""
    registration: str = ""
    type: str = ""
    category: AircraftCategory = AircraftCategory.SINGLE_ENGINE_LAND
    empty_weight: float = 0.0
    empty_moment: float = 0.0
    usable_fuel: float = 0.0
    fuel_density: float = DEFAULT_FUEL_DENSITY_LB_PER_GAL
    fuel_burn_rate: float = 0.0
    stations: list[Station] = field(default_factory=list)
    normal_envelope: list[EnvelopePoint] = field(default_factory=list)
    utility_envelope: list[EnvelopePoint] | None = None
    max_ramp_weight: float | None = None
    max_takeoff_weight: float | None = None
    max_landing_weight: float | None = None
    performance: PerformanceData = field(default_factory=PerformanceData)

    @property
    def empty_arm(self) -> float:
        """Empty weight arm (inches), 0 when the empty weight is not set."""
        if self.empty_weight <= 0:
            return 0.0
        return self.empty_moment / self.empty_weight

    def get_station(self, name: str) -> Station | None:
        for station in self.stations:
            if station.name == name:
                return station
        return None

    @classmethod
    def from_dict(
        cls, data: dict[str, Any], default_fuel_density: float = DEFAULT_FUEL_DENSITY_LB_PER_GAL
    ) -> "AircraftProfile":
        """Build a profile from a plain mapping (e.g. a YAML document).

        Args:
            data: Profile mapping using the same keys as the attributes.
            default_fuel_density: Density used when the mapping omits it.

        Returns:
            New AircraftProfile.

        Raises:
            ValueError: If a required station/envelope key is missing or a
                value is not numeric.
        """
        try:
            perf = data.get("performance", {}) or {}
            performance = PerformanceData(
                cruise=[
                    CruisePerformance(
                        rpm=float(row["rpm"]),
                        altitude_ft=float(row["altitude_ft"]),
                        tas_kt=float(row["tas_kt"]),
                        fuel_burn_gph=float(row["fuel_burn_gph"]),
                    )
                    for row in perf.get("cruise", []) or []
                ],
            )
            for name in _DISTANCE_FIELDS:
                setattr(performance, name, _optional_float(perf.get(name)))
                setattr(
                    performance,
                    f"{name}_table",
                    [
                        PerformancePoint(float(p["altitude"]), float(p["distance"]))
                        for p in perf.get(f"{name}_table", []) or []
                    ],
                )

            utility = data.get("utility_envelope")

            profile = cls(
                name=str(data.get("name", "")),
                registration=str(data.get("registration", "")),
                type=str(data.get("type", "")),
                category=AircraftCategory(data.get("category", "single_engine_land")),
                empty_weight=float(data.get("empty_weight", 0.0)),
                empty_moment=float(data.get("empty_moment", 0.0)),
                usable_fuel=float(data.get("usable_fuel", 0.0)),
                fuel_density=float(data.get("fuel_density", default_fuel_density)),
                fuel_burn_rate=float(data.get("fuel_burn_rate", 0.0)),
                stations=[
                    Station(
                        name=s["name"],
                        arm=float(s["arm"]),
                        max_weight=_optional_float(s.get("max_weight")),
                    )
                    for s in data.get("stations", []) or []
                ],
                normal_envelope=_envelope(data.get("normal_envelope", []) or []),
                utility_envelope=_envelope(utility) if utility is not None else None,
                max_ramp_weight=_optional_float(data.get("max_ramp_weight")),
                max_takeoff_weight=_optional_float(data.get("max_takeoff_weight")),
                max_landing_weight=_optional_float(data.get("max_landing_weight")),
                performance=performance,
            )
        except (KeyError, TypeError) as e:
            raise ValueError(f"Invalid aircraft profile data: {e}") from e

        if data.get("id"):
            profile.id = str(data["id"])

        return profile

    def to_dict(self) -> dict[str, Any]:
        """Return the profile as a plain mapping accepted by from_dict()."""
        perf: dict[str, Any] = {
            "cruise": [
                {
                    "rpm": row.rpm,
                    "altitude_ft": row.altitude_ft,
                    "tas_kt": row.tas_kt,
                    "fuel_burn_gph": row.fuel_burn_gph,
                }
                for row in self.performance.cruise
            ]
        }
        for name in _DISTANCE_FIELDS:
            perf[name] = getattr(self.performance, name)
            perf[f"{name}_table"] = [
                {"altitude": p.altitude, "distance": p.distance}
                for p in getattr(self.performance, f"{name}_table")
            ]

        return {
            "id": self.id,
            "name": self.name,
            "registration": self.registration,
            "type": self.type,
            "category": self.category.value,
            "empty_weight": self.empty_weight,
            "empty_moment": self.empty_moment,
            "usable_fuel": self.usable_fuel,
            "fuel_density": self.fuel_density,
            "fuel_burn_rate": self.fuel_burn_rate,
            "stations": [
                {"name": s.name, "arm": s.arm, "max_weight": s.max_weight} for s in self.stations
            ],
            "normal_envelope": [{"weight": p.weight, "cg": p.cg} for p in self.normal_envelope],
            "utility_envelope": (
                [{"weight": p.weight, "cg": p.cg} for p in self.utility_envelope]
                if self.utility_envelope is not None
                else None
            ),
            "max_ramp_weight": self.max_ramp_weight,
            "max_takeoff_weight": self.max_takeoff_weight,
            "max_landing_weight": self.max_landing_weight,
            "performance": perf,
        }


def _optional_float(value: Any) -> float | None:
    return None if value is None else float(value)


def _envelope(points: list[dict[str, Any]]) -> list[EnvelopePoint]:
    return [EnvelopePoint(weight=float(p["weight"]), cg=float(p["cg"])) for p in points]
