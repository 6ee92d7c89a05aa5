import dataclasses
from typing import Dict

from ..domain.enums import PIClass


@dataclasses.dataclass(frozen=True)
class PIClassScale:
    """
    Per-class multipliers applied inside the stiffness-related calculators.
    """
    spring_scale: float
    arb_scale: float
    damping_scale: float
    power_multiplier: float
    pressure_trim_psi: float


# Every column is non-decreasing from D to X.
PI_CLASS_SCALES: Dict[PIClass, PIClassScale] = {
    PIClass.D: PIClassScale(0.85, 0.85, 0.90, 0.55, -0.50),
    PIClass.C: PIClassScale(0.90, 0.90, 0.93, 0.85, -0.25),
    PIClass.B: PIClassScale(0.95, 0.95, 0.97, 1.15, 0.00),
    PIClass.A: PIClassScale(1.00, 1.00, 1.00, 1.45, 0.25),
    PIClass.S1: PIClassScale(1.08, 1.05, 1.04, 1.75, 0.50),
    PIClass.S2: PIClassScale(1.16, 1.10, 1.08, 1.95, 0.75),
    PIClass.X: PIClassScale(1.25, 1.15, 1.12, 2.20, 1.00),
}


def get_pi_class_scale(pi_class: PIClass) -> PIClassScale:
    return PI_CLASS_SCALES[pi_class]


def frequency_position(pi_class: PIClass) -> float:
    """Position of the class along D..X, from 0.0 (D) to 1.0 (X)."""
    return pi_class.rank / (len(PIClass) - 1)
