"""Piecewise-linear lookup over performance chart samples.

Performance charts (takeoff distance vs. altitude, cruise TAS vs. altitude)
are stored as small tables of (x, y) samples. Queries between samples are
linearly interpolated; queries outside the table are clamped to the nearest
end, never extrapolated.
"""

from collections.abc import Sequence

from clearedtoplan.core.logging_system import get_logger

logger = get_logger(__name__)


def interpolate_linear(x: float, x1: float, y1: float, x2: float, y2: float) -> float:
    """Linear interpolation between (x1, y1) and (x2, y2).

    Args:
        x: Query value.
        x1: Lower x.
        y1: Value at x1.
        x2: Upper x.
        y2: Value at x2.

    Returns:
        Interpolated y. When x1 == x2 the interval is degenerate and y1 is
        returned.
    """
    if x2 == x1:
        return y1
    return y1 + (x - x1) * (y2 - y1) / (x2 - x1)


def lookup(samples: Sequence[tuple[float, float]], x: float) -> float | None:
    """Look up a value in a sample table.

    Args:
        samples: (x, y) pairs in any order.
        x: Query value.

    Returns:
        Interpolated y, clamped to the first/last sample outside the table
        range, or None if the table is empty.

    Examples:
        >>> lookup([(0, 1000), (4000, 1400)], 2000)
        1200.0
        >>> lookup([(0, 1000), (4000, 1400)], 9000)
        1400
    """
    if not samples:
        return None

    # sorted() is stable, so the first of duplicate x values stays first
    ordered = sorted(samples, key=lambda s: s[0])
    lowest, highest = ordered[0], ordered[-1]

    if x <= lowest[0]:
        return lowest[1]
    if x >= highest[0]:
        return highest[1]

    for lower, upper in zip(ordered, ordered[1:]):
        if lower[0] <= x <= upper[0]:
            return interpolate_linear(x, lower[0], lower[1], upper[0], upper[1])

    # Unreachable for finite x: the clamps above cover everything else
    logger.warning("No bracketing samples for x=%s in %d samples", x, len(ordered))
    return None
