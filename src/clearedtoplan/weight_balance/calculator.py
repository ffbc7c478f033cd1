"""Weight and balance calculation.

Combines the empty aircraft with loaded items, derives total weight,
moment and CG, and checks the loading point against a CG envelope.

Typical usage:
    items = [WeightItem.from_station(front, 340.0), fuel_item(profile, 40.0)]
    result = compute(profile, items)
    if not result.within_limits:
        ...
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

from clearedtoplan.aircraft.profile import AircraftProfile
from clearedtoplan.core.logging_system import get_logger
from clearedtoplan.geometry.polygon import EnvelopePoint, envelope_contains
from clearedtoplan.weight_balance.station import FUEL_ITEM_LABEL, WeightItem, fuel_item

logger = get_logger(__name__)


class WeightBalanceError(Exception):
    """Raised when a weight and balance request cannot be answered."""


class EnvelopeNotDefinedError(WeightBalanceError):
    """Raised when the requested envelope category is not in the profile."""


class EnvelopeCategory(Enum):
    """Which certification envelope to check against."""

    NORMAL = "normal"
    UTILITY = "utility"


@dataclass(frozen=True)
class WeightBalanceResult:
    """Derived loading figures.

    Attributes:
        total_weight: Empty weight plus all items (lbs).
        total_moment: Empty moment plus all item moments (lb-in).
        center_of_gravity: total_moment / total_weight, 0 when weight <= 0.
        within_limits: Loading point inside the envelope (True if the
            envelope is empty).
        envelope: Envelope category that was checked.
        warnings: Station and weight ceiling overages. These are reported
            alongside, and never change within_limits.
    """

    total_weight: float
    total_moment: float
    center_of_gravity: float
    within_limits: bool
    envelope: EnvelopeCategory = EnvelopeCategory.NORMAL
    warnings: tuple[str, ...] = field(default_factory=tuple)


def select_envelope(aircraft: AircraftProfile, category: EnvelopeCategory) -> list[EnvelopePoint]:
    """Return the envelope for a category.

    Raises:
        EnvelopeNotDefinedError: If the utility envelope is requested but the
            profile has none.
    """
    if category is EnvelopeCategory.UTILITY:
        if aircraft.utility_envelope is None:
            raise EnvelopeNotDefinedError(
                f"Aircraft {aircraft.registration or aircraft.id} has no utility envelope"
            )
        return aircraft.utility_envelope
    return aircraft.normal_envelope


def compute(
    aircraft: AircraftProfile,
    items: Sequence[WeightItem],
    envelope: EnvelopeCategory = EnvelopeCategory.NORMAL,
    *,
    check_ceilings: bool = True,
) -> WeightBalanceResult:
    """Compute weight and balance for a loading.

    Args:
        aircraft: Aircraft profile (read only).
        items: Loaded items, fuel included.
        envelope: Envelope category to check.
        check_ceilings: Warn about max ramp and takeoff weight. Off for
            loadings that are not departing, such as at landing.

    Returns:
        WeightBalanceResult for this loading.

    Raises:
        EnvelopeNotDefinedError: If the requested envelope does not exist.
    """
    points = select_envelope(aircraft, envelope)

    total_weight = aircraft.empty_weight + sum(item.weight for item in items)
    total_moment = aircraft.empty_weight * aircraft.empty_arm + sum(
        item.calculate_moment() for item in items
    )
    cg = total_moment / total_weight if total_weight > 0 else 0.0

    within_limits = True if not points else envelope_contains(points, total_weight, cg)

    warnings = _station_warnings(aircraft, items)
    if check_ceilings:
        warnings += _ceiling_warnings(aircraft, total_weight)
    for message in warnings:
        logger.warning(message)

    if not within_limits:
        logger.warning(
            "Loading outside %s envelope: %.1f lbs at CG %.2f in",
            envelope.value,
            total_weight,
            cg,
        )

    logger.debug(
        "Weight and balance: total=%.1f lbs, moment=%.1f lb-in, CG=%.2f in",
        total_weight,
        total_moment,
        cg,
    )

    return WeightBalanceResult(
        total_weight=total_weight,
        total_moment=total_moment,
        center_of_gravity=cg,
        within_limits=within_limits,
        envelope=envelope,
        warnings=tuple(warnings),
    )


def check_landing_weight(aircraft: AircraftProfile, landing_weight: float) -> str | None:
    """Compare a landing weight with the published maximum.

    Returns:
        A warning message if over the maximum, otherwise None (including
        when no maximum is published).
    """
    if aircraft.max_landing_weight is None or landing_weight <= aircraft.max_landing_weight:
        return None
    return (
        f"Over max landing weight: {landing_weight:.0f} lbs > "
        f"{aircraft.max_landing_weight:.0f} lbs"
    )


def _station_warnings(aircraft: AircraftProfile, items: Sequence[WeightItem]) -> list[str]:
    messages = []
    for item in items:
        station = aircraft.get_station(item.label)
        if station is not None and item.exceeds(station):
            messages.append(
                f"Station '{station.name}' overloaded: {item.weight:.0f} lbs > "
                f"{station.max_weight:.0f} lbs"
            )
    return messages


def _ceiling_warnings(aircraft: AircraftProfile, total_weight: float) -> list[str]:
    messages = []
    if aircraft.max_ramp_weight is not None and total_weight > aircraft.max_ramp_weight:
        messages.append(
            f"Over max ramp weight: {total_weight:.0f} lbs > {aircraft.max_ramp_weight:.0f} lbs"
        )
    if aircraft.max_takeoff_weight is not None and total_weight > aircraft.max_takeoff_weight:
        messages.append(
            f"Over max takeoff weight: {total_weight:.0f} lbs > "
            f"{aircraft.max_takeoff_weight:.0f} lbs"
        )
    return messages


class WeightBalanceCalculator:
    """Loading sheet for one aircraft.

    Keeps station weights and fuel quantity as they are entered and
    produces a fresh result on every calculate() call.

    Examples:
        >>> sheet = WeightBalanceCalculator(profile)
        >>> sheet.set_station_weight("Front seats", 340.0)
        >>> sheet.set_fuel(40.0)
        >>> sheet.calculate().within_limits
        True
    """

    def __init__(self, aircraft: AircraftProfile) -> None:
        self.aircraft = aircraft
        self._station_weights: dict[str, float] = {}
        self.fuel_gallons: float = 0.0

        logger.info(
            "Loading sheet for %s: empty=%.0f lbs, empty arm=%.2f in, %d stations",
            aircraft.registration or aircraft.name,
            aircraft.empty_weight,
            aircraft.empty_arm,
            len(aircraft.stations),
        )

    def set_station_weight(self, name: str, weight: float) -> bool:
        """Set the load at a station.

        Returns:
            False if the station does not exist or the weight is negative.
        """
        if self.aircraft.get_station(name) is None:
            logger.warning("Station not found: %s", name)
            return False
        if weight < 0:
            return False

        self._station_weights[name] = weight
        return True

    def set_fuel(self, gallons: float) -> bool:
        """Set fuel on board. Returns False for a negative quantity."""
        if gallons < 0:
            return False
        if self.aircraft.usable_fuel > 0 and gallons > self.aircraft.usable_fuel:
            logger.warning(
                "Fuel %.1f gal exceeds usable capacity %.1f gal",
                gallons,
                self.aircraft.usable_fuel,
            )
        self.fuel_gallons = gallons
        return True

    def clear(self) -> None:
        self._station_weights.clear()
        self.fuel_gallons = 0.0

    def items(self) -> list[WeightItem]:
        """Current loading as weight items, stations in profile order, fuel last."""
        loaded = [
            WeightItem.from_station(station, self._station_weights[station.name])
            for station in self.aircraft.stations
            if self._station_weights.get(station.name, 0.0) > 0
        ]
        if self.fuel_gallons > 0:
            loaded.append(fuel_item(self.aircraft, self.fuel_gallons))
        return loaded

    def calculate(self, envelope: EnvelopeCategory = EnvelopeCategory.NORMAL) -> WeightBalanceResult:
        return compute(self.aircraft, self.items(), envelope)

    def landing_result(
        self, fuel_burned_gal: float, envelope: EnvelopeCategory = EnvelopeCategory.NORMAL
    ) -> WeightBalanceResult:
        """Weight and balance at landing after burning some fuel.

        Fuel remaining is clamped at zero. Ramp and takeoff ceilings do not
        apply; the landing maximum is checked instead.
        """
        remaining = max(self.fuel_gallons - fuel_burned_gal, 0.0)
        items = [item for item in self.items() if item.label != FUEL_ITEM_LABEL]
        if remaining > 0:
            items.append(fuel_item(self.aircraft, remaining))

        result = compute(self.aircraft, items, envelope, check_ceilings=False)
        landing_warning = check_landing_weight(self.aircraft, result.total_weight)
        if landing_warning:
            logger.warning(landing_warning)
            result = WeightBalanceResult(
                total_weight=result.total_weight,
                total_moment=result.total_moment,
                center_of_gravity=result.center_of_gravity,
                within_limits=result.within_limits,
                envelope=result.envelope,
                warnings=result.warnings + (landing_warning,),
            )
        return result
