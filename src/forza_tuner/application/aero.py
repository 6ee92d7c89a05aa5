from typing import Dict

from ..domain.enums import DriveType, TuneType
from ..domain.models import AxlePair, CarSpecs
from .limits import AERO_UTILIZATION, clamp, round_half_up
from .variants import VariantProfile

DEFAULT_DOWNFORCE_CAPACITY_LB = 400.0

# Share of the available downforce each discipline runs.
AERO_UTILIZATION_PRESETS: Dict[TuneType, AxlePair] = {
    TuneType.GRIP: AxlePair(0.65, 0.75),
    TuneType.STREET: AxlePair(0.40, 0.50),
    TuneType.RACE: AxlePair(0.75, 0.85),
    TuneType.DRIFT: AxlePair(0.15, 0.30),
    TuneType.OFFROAD: AxlePair(0.25, 0.35),
    TuneType.RALLY: AxlePair(0.35, 0.45),
    TuneType.DRAG: AxlePair(0.0, 0.0),
}

DRIVE_UTILIZATION_OFFSETS: Dict[DriveType, AxlePair] = {
    DriveType.FWD: AxlePair(-0.10, 0.15),
    DriveType.RWD: AxlePair(0.0, 0.10),
    DriveType.AWD: AxlePair(0.0, 0.0),
}


def calculate_aero(specs: CarSpecs, tune_type: TuneType, profile: VariantProfile) -> AxlePair:
    """Downforce per axle (lb). Zero without adjustable aero and for drag."""
    if not specs.has_aero or tune_type == TuneType.DRAG:
        return AxlePair(0.0, 0.0)

    preset = AERO_UTILIZATION_PRESETS[tune_type]
    offset = DRIVE_UTILIZATION_OFFSETS[specs.drive_type]
    front = preset.front + offset.front
    rear = preset.rear + offset.rear

    if specs.weight_distribution > 55:
        rear += 0.10
    elif specs.weight_distribution < 45:
        front += 0.10

    capacity = AxlePair(
        specs.front_downforce or DEFAULT_DOWNFORCE_CAPACITY_LB,
        specs.rear_downforce or DEFAULT_DOWNFORCE_CAPACITY_LB,
    )
    return AxlePair(*(
        float(round_half_up(clamp(share, *AERO_UTILIZATION) * cap * profile.aero_scale))
        for share, cap in zip((front, rear), capacity)
    ))
