"""
Springs, anti-roll bars, ride height and damping.

Springs come first: damping is derived from the final spring rate of each axle.
All values are imperial (lb/in, inches).
"""
import math
from typing import Dict, Tuple

from ..domain.enums import DriveType, TuneType
from ..domain.models import AxlePair, CarSpecs
from .limits import ARB, DAMPING, RIDE_HEIGHT_IN, SPRING_RATE_LB_IN, clamp, round_half_up, round_to
from .pi_scaling import PIClassScale, frequency_position
from .variants import VariantProfile

GRAVITY_FT_S2 = 32.174
DAMPING_COEFF_PER_STEP = 60.0
AERO_SPRING_THRESHOLD_LB = 100.0
AERO_SPRING_SHARE = 0.1

# Front ride frequency (Hz) at class D and class X, and rear/front ratio.
RIDE_FREQUENCIES: Dict[TuneType, Tuple[float, float, float]] = {
    TuneType.GRIP: (1.9, 2.6, 0.92),
    TuneType.STREET: (1.2, 1.6, 0.93),
    TuneType.RACE: (2.2, 3.0, 0.92),
    TuneType.DRIFT: (1.8, 2.3, 0.90),
    TuneType.DRAG: (2.2, 2.8, 0.57),
    TuneType.RALLY: (1.45, 1.85, 0.94),
    TuneType.OFFROAD: (1.15, 1.5, 0.93),
}

ARB_DRIVE_FACTORS: Dict[DriveType, AxlePair] = {
    DriveType.FWD: AxlePair(0.75, 1.15),
    DriveType.RWD: AxlePair(1.05, 0.95),
    DriveType.AWD: AxlePair(1.0, 1.0),
}

ARB_TUNE_FACTORS: Dict[TuneType, AxlePair] = {
    TuneType.GRIP: AxlePair(1.0, 1.0),
    TuneType.STREET: AxlePair(0.9, 0.9),
    TuneType.RACE: AxlePair(1.1, 1.1),
    TuneType.DRIFT: AxlePair(0.5, 1.2),
    TuneType.DRAG: AxlePair(1.0, 0.8),
    TuneType.RALLY: AxlePair(0.6, 0.6),
    TuneType.OFFROAD: AxlePair(0.6, 0.6),
}

RIDE_HEIGHTS_IN: Dict[TuneType, AxlePair] = {
    TuneType.GRIP: AxlePair(4.5, 4.8),
    TuneType.STREET: AxlePair(5.5, 5.8),
    TuneType.RACE: AxlePair(4.2, 4.5),
    TuneType.DRIFT: AxlePair(5.5, 5.0),
    TuneType.DRAG: AxlePair(4.0, 4.5),
    TuneType.RALLY: AxlePair(7.5, 8.0),
    TuneType.OFFROAD: AxlePair(9.0, 9.5),
}
AERO_RIDE_HEIGHT_IN = AxlePair(4.0, 4.2)
AERO_LOW_RIDE_TUNES = (TuneType.GRIP, TuneType.RACE, TuneType.STREET)

# Damping ratio and bump/rebound ratio per discipline.
DAMPING_RATIOS: Dict[TuneType, float] = {
    TuneType.RACE: 1.0,
    TuneType.GRIP: 0.85,
    TuneType.STREET: 0.7,
    TuneType.DRIFT: 0.75,
    TuneType.DRAG: 0.8,
    TuneType.RALLY: 0.55,
    TuneType.OFFROAD: 0.5,
}

BUMP_RATIOS: Dict[TuneType, float] = {
    TuneType.GRIP: 0.65,
    TuneType.RACE: 0.65,
    TuneType.STREET: 0.6,
    TuneType.DRIFT: 0.5,
    TuneType.DRAG: 0.6,
    TuneType.RALLY: 0.55,
    TuneType.OFFROAD: 0.5,
}


def corner_weights(specs: CarSpecs) -> AxlePair:
    """Weight on a single wheel of each axle (lb)."""
    return AxlePair(
        specs.weight * specs.front_weight_fraction / 2,
        specs.weight * specs.rear_weight_fraction / 2,
    )


def target_frequencies(specs: CarSpecs, tune_type: TuneType, profile: VariantProfile) -> AxlePair:
    low, high, rear_ratio = RIDE_FREQUENCIES[tune_type]
    front = (low + (high - low) * frequency_position(specs.pi_class)) * profile.frequency_scale
    return AxlePair(front, front * rear_ratio)


def spring_rate_for_frequency(corner_weight_lb: float, frequency_hz: float) -> float:
    """Unclamped wheel rate in lb/in giving the requested natural frequency."""
    sprung_mass = corner_weight_lb / GRAVITY_FT_S2
    rate_lb_ft = sprung_mass * (2 * math.pi * frequency_hz) ** 2
    return rate_lb_ft / 12


def calculate_springs(
    specs: CarSpecs,
    tune_type: TuneType,
    profile: VariantProfile,
    scale: PIClassScale,
) -> AxlePair:
    corners = corner_weights(specs)
    frequencies = target_frequencies(specs, tune_type, profile)
    rates = [
        spring_rate_for_frequency(corner, frequency) * scale.spring_scale
        for corner, frequency in zip(corners, frequencies)
    ]

    if specs.has_aero and specs.front_downforce > AERO_SPRING_THRESHOLD_LB:
        rates[0] += specs.front_downforce * AERO_SPRING_SHARE
        rates[1] += specs.rear_downforce * AERO_SPRING_SHARE

    return AxlePair(*(float(round_half_up(clamp(rate, *SPRING_RATE_LB_IN))) for rate in rates))


def base_anti_roll_bar(weight_percent: float) -> float:
    """Map the share of weight on an axle (%) to the 1..65 ARB scale."""
    return 64 * (weight_percent / 100) + 1


def calculate_anti_roll_bars(
    specs: CarSpecs,
    tune_type: TuneType,
    profile: VariantProfile,
    scale: PIClassScale,
) -> AxlePair:
    drive = ARB_DRIVE_FACTORS[specs.drive_type]
    tune = ARB_TUNE_FACTORS[tune_type]
    bases = AxlePair(
        base_anti_roll_bar(specs.weight_distribution),
        base_anti_roll_bar(100 - specs.weight_distribution),
    )
    return AxlePair(*(
        round_to(clamp(base * d * t * profile.arb_scale * scale.arb_scale, *ARB), 1)
        for base, d, t in zip(bases, drive, tune)
    ))


def calculate_ride_height(specs: CarSpecs, tune_type: TuneType, profile: VariantProfile) -> AxlePair:
    if specs.has_aero and tune_type in AERO_LOW_RIDE_TUNES:
        preset = AERO_RIDE_HEIGHT_IN
    else:
        preset = RIDE_HEIGHTS_IN[tune_type]
    return AxlePair(*(
        round_to(clamp(height + profile.ride_height_offset_in, *RIDE_HEIGHT_IN), 1)
        for height in preset
    ))


def calculate_damping(
    specs: CarSpecs,
    tune_type: TuneType,
    springs: AxlePair,
    scale: PIClassScale,
) -> Tuple[AxlePair, AxlePair]:
    """
    Rebound from the critical damping of each corner, bump as a share of rebound.

    Returns (rebound, bump). Bump never exceeds rebound on the same axle.
    """
    zeta = DAMPING_RATIOS[tune_type]
    bump_ratio = BUMP_RATIOS[tune_type]

    rebound = []
    bump = []
    for corner, rate_lb_in in zip(corner_weights(specs), springs):
        sprung_mass = corner / GRAVITY_FT_S2
        critical = 2 * math.sqrt(rate_lb_in * 12 * sprung_mass)
        axle_rebound = round_to(
            clamp(zeta * critical / DAMPING_COEFF_PER_STEP * scale.damping_scale, *DAMPING), 1
        )
        axle_bump = min(axle_rebound, round_to(clamp(axle_rebound * bump_ratio, *DAMPING), 1))
        rebound.append(axle_rebound)
        bump.append(axle_bump)

    return AxlePair(*rebound), AxlePair(*bump)
