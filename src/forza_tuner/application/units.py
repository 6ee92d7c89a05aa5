"""
Unit conversions between the imperial values the engine computes with and
the metric values the game can display.

The converters do not round; `convert_tune_to_units` rounds for display.
"""
from typing import Dict

from ..domain.enums import UnitSystem
from ..domain.models import TuneSettings
from .limits import round_half_up, round_to

PSI_PER_BAR = 14.5038
KG_MM_PER_LB_IN = 0.017858
KG_PER_LB = 0.453592
CM_PER_INCH = 2.54
KW_PER_HP = 0.7457
NEWTON_PER_LB = 4.44822


def psi_to_bar(psi: float) -> float:
    return psi / PSI_PER_BAR


def bar_to_psi(bar: float) -> float:
    return bar * PSI_PER_BAR


def lb_in_to_kg_mm(lb_in: float) -> float:
    return lb_in * KG_MM_PER_LB_IN


def kg_mm_to_lb_in(kg_mm: float) -> float:
    return kg_mm / KG_MM_PER_LB_IN


def lb_to_kg(lb: float) -> float:
    return lb * KG_PER_LB


def kg_to_lb(kg: float) -> float:
    return kg / KG_PER_LB


def inch_to_cm(inches: float) -> float:
    return inches * CM_PER_INCH


def cm_to_inch(cm: float) -> float:
    return cm / CM_PER_INCH


def hp_to_kw(hp: float) -> float:
    return hp * KW_PER_HP


def kw_to_hp(kw: float) -> float:
    return kw / KW_PER_HP


def lb_to_newton(lb: float) -> float:
    return lb * NEWTON_PER_LB


def newton_to_lb(newton: float) -> float:
    return newton / NEWTON_PER_LB


def convert_tune_to_units(tune: TuneSettings, unit_system: UnitSystem) -> TuneSettings:
    """
    Return a display copy of an imperial tune in the requested unit system.
    Unit-less settings (ARB, damping, differential, brakes, gearing) are untouched.
    """
    if unit_system == tune.unit_system:
        return tune
    if tune.unit_system != UnitSystem.IMPERIAL:
        raise ValueError("Only imperial tunes can be converted for display.")

    return tune.model_copy(update={
        "unit_system": unit_system,
        "tire_pressure_front": round_to(psi_to_bar(tune.tire_pressure_front), 2),
        "tire_pressure_rear": round_to(psi_to_bar(tune.tire_pressure_rear), 2),
        "springs_front": round_to(lb_in_to_kg_mm(tune.springs_front), 2),
        "springs_rear": round_to(lb_in_to_kg_mm(tune.springs_rear), 2),
        "ride_height_front": round_to(inch_to_cm(tune.ride_height_front), 1),
        "ride_height_rear": round_to(inch_to_cm(tune.ride_height_rear), 1),
        "aero_front": float(round_half_up(lb_to_newton(tune.aero_front))),
        "aero_rear": float(round_half_up(lb_to_newton(tune.aero_rear))),
    })


def unit_labels(unit_system: UnitSystem) -> Dict[str, str]:
    if unit_system == UnitSystem.IMPERIAL:
        return {
            "pressure": "PSI",
            "springs": "LB/IN",
            "ride_height": "IN",
            "aero": "LB",
            "weight": "lbs",
            "power": "HP",
        }
    return {
        "pressure": "BAR",
        "springs": "KG/MM",
        "ride_height": "CM",
        "aero": "N",
        "weight": "kg",
        "power": "kW",
    }
