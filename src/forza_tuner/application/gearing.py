from typing import Dict, List, NamedTuple

from ..domain.enums import TuneType
from ..domain.models import CarSpecs
from .limits import FINAL_DRIVE, clamp, round_to
from .pi_scaling import PIClassScale
from .variants import VariantProfile

# Reference power-to-weight (hp per 1000 lb) before the class power multiplier.
REFERENCE_HP_PER_1000_LB = 100.0
POWER_TO_WEIGHT_EXPONENT = 0.12


class GearingPreset(NamedTuple):
    first: float
    last: float
    final_drive: float
    note: str


GEARING_PRESETS: Dict[TuneType, GearingPreset] = {
    TuneType.GRIP: GearingPreset(
        3.40, 0.72, 3.80, "Balanced ratios for corner exit; top gear should just reach the longest straight."
    ),
    TuneType.STREET: GearingPreset(
        3.30, 0.68, 3.50, "Relaxed gearing for road use; tall top gear keeps cruising revs down."
    ),
    TuneType.RACE: GearingPreset(
        3.35, 0.70, 3.90, "Close ratios to keep the engine in its power band through the lap."
    ),
    TuneType.DRIFT: GearingPreset(
        3.80, 0.85, 4.20, "Short gearing so 2nd and 3rd hold the drift without hitting the limiter."
    ),
    TuneType.OFFROAD: GearingPreset(
        3.50, 0.78, 3.70, "Short low gears for climbing and loose surfaces."
    ),
    TuneType.RALLY: GearingPreset(
        3.45, 0.75, 3.65, "Mid-range ratios for mixed-surface stages."
    ),
    TuneType.DRAG: GearingPreset(
        2.90, 0.55, 2.90, "Long ratios to limit wheelspin and shifts; tune 1st for launch traction."
    ),
}


class GearingSettings(NamedTuple):
    final_drive: float
    ratios: List[float]
    note: str


def power_to_weight(specs: CarSpecs) -> float:
    """Horsepower per 1000 lb."""
    return specs.horsepower / specs.weight * 1000


def gear_ratios(first: float, last: float, count: int) -> List[float]:
    """
    Geometric progression from first to last gear, 2 dp.
    Absolute spacing narrows towards the top gears.
    """
    if count == 1:
        return [round_to(first, 2)]
    step = last / first
    return [round_to(first * step ** (n / (count - 1)), 2) for n in range(count)]


def calculate_gearing(
    specs: CarSpecs,
    tune_type: TuneType,
    profile: VariantProfile,
    scale: PIClassScale,
) -> GearingSettings:
    preset = GEARING_PRESETS[tune_type]
    reference = REFERENCE_HP_PER_1000_LB * scale.power_multiplier
    # More power for the class means a taller final drive.
    power_factor = (reference / power_to_weight(specs)) ** POWER_TO_WEIGHT_EXPONENT
    final_drive = clamp(preset.final_drive * profile.final_drive_scale * power_factor, *FINAL_DRIVE)

    return GearingSettings(
        final_drive=round_to(final_drive, 2),
        ratios=gear_ratios(preset.first, preset.last, specs.gear_count),
        note=preset.note,
    )
