"""Takeoff, landing and cruise performance lookups.

Figures come straight from the aircraft's POH data: a distance table keyed
by density altitude is interpolated when present, otherwise the single
published figure is used. Nothing is modelled from first principles.
"""

from dataclasses import dataclass

from clearedtoplan.aircraft.profile import CruisePerformance, PerformanceData, PerformancePoint
from clearedtoplan.core.logging_system import get_logger
from clearedtoplan.performance.interpolation import lookup

logger = get_logger(__name__)


@dataclass(frozen=True)
class DistanceEstimate:
    """Takeoff or landing distances.

    Attributes:
        ground_roll_ft: Ground roll (ft), None if the POH data is missing.
        over_50ft_ft: Total distance over a 50 ft obstacle (ft), None if missing.
    """

    ground_roll_ft: float | None
    over_50ft_ft: float | None


@dataclass(frozen=True)
class CruiseEstimate:
    """Cruise true airspeed and fuel flow at an altitude."""

    tas_kt: float
    fuel_burn_gph: float


class PerformanceCalculator:
    """Look up POH performance for one aircraft.

    Examples:
        >>> calc = PerformanceCalculator(profile.performance)
        >>> calc.takeoff_distances(density_altitude_ft=3200).ground_roll_ft
        1296.0
        >>> calc.cruise_performance(altitude_ft=6000, rpm=2500).tas_kt
        124.0
    """

    def __init__(self, performance: PerformanceData) -> None:
        self.performance = performance

    def takeoff_distances(self, density_altitude_ft: float) -> DistanceEstimate:
        """Takeoff ground roll and over-50-ft distance at a density altitude."""
        perf = self.performance
        estimate = DistanceEstimate(
            ground_roll_ft=self._distance(
                perf.takeoff_ground_roll_table, perf.takeoff_ground_roll, density_altitude_ft
            ),
            over_50ft_ft=self._distance(
                perf.takeoff_over_50ft_table, perf.takeoff_over_50ft, density_altitude_ft
            ),
        )
        logger.debug("Takeoff at DA %.0f ft: %s", density_altitude_ft, estimate)
        return estimate

    def landing_distances(self, density_altitude_ft: float) -> DistanceEstimate:
        """Landing ground roll and over-50-ft distance at a density altitude."""
        perf = self.performance
        estimate = DistanceEstimate(
            ground_roll_ft=self._distance(
                perf.landing_ground_roll_table, perf.landing_ground_roll, density_altitude_ft
            ),
            over_50ft_ft=self._distance(
                perf.landing_over_50ft_table, perf.landing_over_50ft, density_altitude_ft
            ),
        )
        logger.debug("Landing at DA %.0f ft: %s", density_altitude_ft, estimate)
        return estimate

    def cruise_performance(self, altitude_ft: float, rpm: float | None = None) -> CruiseEstimate | None:
        """Interpolate cruise TAS and fuel flow at an altitude.

        Args:
            altitude_ft: Cruise altitude (ft).
            rpm: Power setting. Only rows at the table RPM nearest to it
                are used. When None, the first RPM listed in the table is used.

        Returns:
            CruiseEstimate, or None if the profile has no cruise rows.
        """
        rows = self._rows_for_rpm(self.performance.cruise, rpm)
        if not rows:
            return None

        tas = lookup([(r.altitude_ft, r.tas_kt) for r in rows], altitude_ft)
        burn = lookup([(r.altitude_ft, r.fuel_burn_gph) for r in rows], altitude_ft)
        if tas is None or burn is None:
            return None

        return CruiseEstimate(tas_kt=tas, fuel_burn_gph=burn)

    @staticmethod
    def runway_margin(available_ft: float, required_ft: float | None) -> float | None:
        """Runway left over after the required distance.

        Returns:
            available - required (negative means the runway is too short),
            or None when the required distance is unknown.
        """
        if required_ft is None:
            return None

        margin = available_ft - required_ft
        if margin < 0:
            logger.warning(
                "Runway too short: %.0f ft available, %.0f ft required", available_ft, required_ft
            )
        return margin

    @staticmethod
    def _distance(
        table: list[PerformancePoint], scalar: float | None, density_altitude_ft: float
    ) -> float | None:
        if table:
            return lookup([(p.altitude, p.distance) for p in table], density_altitude_ft)
        return scalar

    @staticmethod
    def _rows_for_rpm(rows: list[CruisePerformance], rpm: float | None) -> list[CruisePerformance]:
        if not rows:
            return []
        if rpm is None:
            # One power setting only; curves at different RPMs must not be blended
            return [r for r in rows if r.rpm == rows[0].rpm]

        nearest = min((r.rpm for r in rows), key=lambda value: abs(value - rpm))
        return [r for r in rows if r.rpm == nearest]
