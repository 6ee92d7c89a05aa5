"""
Brake pressure and balance.

Forza's brake balance slider is inverted: the value shown is the rear share,
so a lower slider value means more front braking. We compute the physical
front bias first and convert it to the slider value at the end.
"""
from typing import Dict, NamedTuple

from ..domain.enums import TuneType
from ..domain.models import CarSpecs
from .limits import BRAKE_FRONT_BIAS_PCT, clamp, round_half_up


class BrakePreset(NamedTuple):
    pressure: int
    front_bias: int


BRAKE_PRESETS: Dict[TuneType, BrakePreset] = {
    TuneType.GRIP: BrakePreset(100, 60),
    TuneType.STREET: BrakePreset(95, 58),
    TuneType.RACE: BrakePreset(100, 62),
    TuneType.DRIFT: BrakePreset(85, 50),
    TuneType.OFFROAD: BrakePreset(90, 55),
    TuneType.RALLY: BrakePreset(95, 55),
    TuneType.DRAG: BrakePreset(100, 55),
}

BIAS_PER_WEIGHT_PCT = 0.15


class BrakeSettings(NamedTuple):
    pressure: float
    balance_slider: float
    front_bias: float
    note: str


def front_bias_to_slider(front_bias: float) -> float:
    return 100 - front_bias


def brake_balance_note(slider: float, front_bias: float) -> str:
    return (
        f"Set slider to {slider:g}% to achieve {front_bias:g}% front bias "
        f"(FH5 slider is inverted)"
    )


def calculate_brakes(specs: CarSpecs, tune_type: TuneType) -> BrakeSettings:
    pressure, target_bias = BRAKE_PRESETS[tune_type]
    front_bias = target_bias + round_half_up((specs.weight_distribution - 50) * BIAS_PER_WEIGHT_PCT)
    front_bias = clamp(front_bias, *BRAKE_FRONT_BIAS_PCT)
    slider = front_bias_to_slider(front_bias)

    return BrakeSettings(
        pressure=float(pressure),
        balance_slider=float(slider),
        front_bias=float(front_bias),
        note=brake_balance_note(slider, front_bias),
    )
