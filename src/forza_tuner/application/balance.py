"""
Balance/stiffness sliders applied on top of a calculated tune.

Positive balance stiffens the front and softens the rear; the game labels
that direction of the slider as oversteer. Stiffness scales both axles
together around the neutral value of 50.
"""
from typing import NamedTuple

from .limits import ARB, BALANCE_SLIDER, STIFFNESS_SLIDER, clamp, round_to

BALANCE_SHIFT = 0.25
MIN_STIFFNESS_PCT = 70.0
STIFFNESS_RANGE_PCT = 60.0


class BalanceStiffnessResult(NamedTuple):
    arb_front: float
    arb_rear: float
    springs_front: float
    springs_rear: float


def stiffness_scale(stiffness: float) -> float:
    """0.7 at stiffness 0, 1.0 at 50, 1.3 at 100."""
    return (MIN_STIFFNESS_PCT + STIFFNESS_RANGE_PCT * stiffness / 100) / 100


def apply_balance_stiffness(
    arb_front: float,
    arb_rear: float,
    springs_front: float,
    springs_rear: float,
    balance: float,
    stiffness: float,
) -> BalanceStiffnessResult:
    """
    Adjust ARBs and springs for the balance (-100..100) and stiffness (0..100) sliders.

    Out-of-range slider values are clamped first. ARBs stay within 1 - 65;
    springs are not clamped. (0, 50) leaves every value unchanged.
    """
    balance = clamp(balance, *BALANCE_SLIDER)
    stiffness = clamp(stiffness, *STIFFNESS_SLIDER)

    front_multiplier = 1 + BALANCE_SHIFT * balance / 100
    rear_multiplier = 1 - BALANCE_SHIFT * balance / 100
    scale = stiffness_scale(stiffness)

    return BalanceStiffnessResult(
        arb_front=round_to(clamp(arb_front * front_multiplier * scale, *ARB), 1),
        arb_rear=round_to(clamp(arb_rear * rear_multiplier * scale, *ARB), 1),
        springs_front=round_to(springs_front * front_multiplier * scale, 1),
        springs_rear=round_to(springs_rear * rear_multiplier * scale, 1),
    )
