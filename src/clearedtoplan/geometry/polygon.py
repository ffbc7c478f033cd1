"""Point-in-polygon containment for CG envelopes.

A CG envelope is an ordered list of (CG, weight) corners describing a simple
polygon. The polygon is implicitly closed: the last corner connects back to
the first. No convexity or winding checks are made.

Typical usage example:
    from clearedtoplan.geometry import EnvelopePoint, envelope_contains

    envelope = [EnvelopePoint(2000, 40), EnvelopePoint(2000, 48),
                EnvelopePoint(1500, 48), EnvelopePoint(1500, 40)]
    envelope_contains(envelope, weight=1800, cg=44)  # True
"""

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from clearedtoplan.core.logging_system import get_logger

logger = get_logger(__name__)

MIN_POLYGON_VERTICES = 3


@dataclass(frozen=True)
class EnvelopePoint:
    """One corner of a CG envelope.

    Attributes:
        weight: Aircraft weight at this corner (lbs).
        cg: Center of gravity at this corner (inches aft of datum).
    """

    weight: float
    cg: float


def contains_point(polygon: Sequence[tuple[float, float]], point: tuple[float, float]) -> bool:
    """Test whether a point lies inside a polygon using ray casting.

    A horizontal ray is cast from the point towards +x. Every edge a->b
    (including the closing edge from the last vertex to the first) with
    (ya > py) != (yb > py) and px left of the edge's x-intercept at py
    counts as one crossing; an odd count means inside.

    Args:
        polygon: Ordered (x, y) vertices.
        point: (x, y) query point.

    Returns:
        True if the crossing count is odd. Always False for fewer than
        three vertices.

    Note:
        Points exactly on an edge may land either side depending on
        floating-point rounding. Self-intersecting polygons yield the raw
        parity result.
    """
    if len(polygon) < MIN_POLYGON_VERTICES:
        return False

    vertices = np.asarray(polygon, dtype=float)
    px, py = float(point[0]), float(point[1])

    xa, ya = vertices[:, 0], vertices[:, 1]
    # Previous vertex for every vertex, so edge 0 is the closing edge
    xb, yb = np.roll(xa, 1), np.roll(ya, 1)

    straddles = (ya > py) != (yb > py)

    # Only straddling edges are evaluated, so ya != yb there
    dy = np.where(straddles, yb - ya, 1.0)
    intercept = (xb - xa) * (py - ya) / dy + xa

    crossings = np.count_nonzero(straddles & (px < intercept))
    return bool(crossings % 2 == 1)


def envelope_contains(envelope: Sequence[EnvelopePoint], weight: float, cg: float) -> bool:
    """Check a loading point against a CG envelope.

    Args:
        envelope: Ordered envelope corners.
        weight: Loaded weight (lbs), the y axis.
        cg: Loaded center of gravity (inches), the x axis.

    Returns:
        True if (cg, weight) lies inside the envelope polygon.
    """
    inside = contains_point([(p.cg, p.weight) for p in envelope], (cg, weight))

    logger.debug(
        "Envelope check: weight=%.1f lbs, CG=%.2f in, %d corners -> %s",
        weight,
        cg,
        len(envelope),
        "inside" if inside else "outside",
    )

    return inside
