"""
Legal ranges and rounding helpers shared by every calculator.

Each range is a (low, high) pair; calculators clamp with `clamp(value, *RANGE)`
so the bounds live in one place.
"""
import math
from typing import Tuple

Range = Tuple[float, float]

TIRE_PRESSURE_PSI: Range = (14.0, 55.0)
ARB: Range = (1.0, 65.0)
SPRING_RATE_LB_IN: Range = (50.0, 3000.0)
RIDE_HEIGHT_IN: Range = (1.0, 12.0)
DAMPING: Range = (1.0, 20.0)
CAMBER_DEG: Range = (-5.0, 5.0)
TOE_DEG: Range = (-5.0, 5.0)
CASTER_DEG: Range = (1.0, 7.0)
BRAKE_FRONT_BIAS_PCT: Range = (45.0, 70.0)
FINAL_DRIVE: Range = (2.5, 5.5)
DIFF_LOCK_PCT: Range = (0.0, 90.0)
CENTER_BALANCE_PCT: Range = (25.0, 75.0)
BALANCE_SLIDER: Range = (-100.0, 100.0)
STIFFNESS_SLIDER: Range = (0.0, 100.0)
AERO_UTILIZATION: Range = (0.0, 1.0)


def clamp(value: float, low: float, high: float) -> float:
    """Clamp value into [low, high]."""
    return max(low, min(high, value))


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer with halves going up (10.5 -> 11).
    Python's round() uses banker's rounding, which gives 10 there.
    """
    return int(math.floor(value + 0.5))


def round_to(value: float, digits: int = 1) -> float:
    """Half-up rounding to a number of decimal places."""
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor
