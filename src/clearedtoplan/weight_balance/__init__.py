"""Weight and balance for aircraft loading.

This module computes total weight, moment and center of gravity for a
loading and checks it against the aircraft's CG envelope.
"""

from clearedtoplan.weight_balance.calculator import (
    EnvelopeCategory,
    EnvelopeNotDefinedError,
    WeightBalanceCalculator,
    WeightBalanceError,
    WeightBalanceResult,
    check_landing_weight,
    compute,
    select_envelope,
)
from clearedtoplan.weight_balance.station import WeightItem, fuel_arm, fuel_item

__all__ = [
    "EnvelopeCategory",
    "EnvelopeNotDefinedError",
    "WeightBalanceCalculator",
    "WeightBalanceError",
    "WeightBalanceResult",
    "WeightItem",
    "check_landing_weight",
    "compute",
    "fuel_arm",
    "fuel_item",
    "select_envelope",
]
