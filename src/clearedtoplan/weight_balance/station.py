"""Weight items for weight and balance calculations.

A weight item is one load placed at an arm: a person in a seat, bags in a
baggage area, or the fuel on board. Items are built fresh for every
calculation.
"""

from dataclasses import dataclass

from clearedtoplan.aircraft.profile import AircraftProfile, Station

FUEL_ITEM_LABEL = "Fuel"


@dataclass(frozen=True)
class WeightItem:
    """A load at an arm.

    Attributes:
        label: Display label (usually the station name).
        weight: Weight in pounds.
        arm: Distance from datum in inches.

    Examples:
        >>> WeightItem("Front seats", 340.0, 37.0).calculate_moment()
        12580.0
    """

    label: str
    weight: float
    arm: float

    def calculate_moment(self) -> float:
        """Moment (weight x arm) in pound-inches."""
        return self.weight * self.arm

    @classmethod
    def from_station(cls, station: Station, weight: float) -> "WeightItem":
        return cls(label=station.name, weight=weight, arm=station.arm)

    def exceeds(self, station: Station) -> bool:
        """True if this load is heavier than the station's published limit."""
        return station.max_weight is not None and self.weight > station.max_weight


def fuel_arm(aircraft: AircraftProfile) -> float:
    """Arm used for the fuel load.

    Profiles carry no dedicated fuel tank arm, so the unweighted mean of the
    station arms stands in for it (0 with no stations).
    """
    if not aircraft.stations:
        return 0.0
    return sum(s.arm for s in aircraft.stations) / len(aircraft.stations)


def fuel_item(aircraft: AircraftProfile, gallons: float) -> WeightItem:
    """Build the fuel load for a quantity in gallons."""
    return WeightItem(
        label=FUEL_ITEM_LABEL,
        weight=gallons * aircraft.fuel_density,
        arm=fuel_arm(aircraft),
    )
