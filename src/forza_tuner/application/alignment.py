import dataclasses
from typing import Dict

from ..domain.enums import DriveType, TuneType
from ..domain.models import CarSpecs
from .limits import CAMBER_DEG, CASTER_DEG, TOE_DEG, clamp, round_to

HEAVY_CAR_LB = 3500.0


@dataclasses.dataclass(frozen=True)
class Alignment:
    camber_front: float
    camber_rear: float
    toe_front: float
    toe_rear: float
    caster: float


ALIGNMENT_PRESETS: Dict[TuneType, Alignment] = {
    TuneType.GRIP: Alignment(-1.2, -0.8, 0.0, 0.1, 5.5),
    TuneType.STREET: Alignment(-1.0, -0.5, 0.0, 0.1, 5.0),
    TuneType.RACE: Alignment(-1.5, -1.0, 0.0, 0.1, 6.0),
    TuneType.DRIFT: Alignment(-5.0, -1.5, 2.0, 0.0, 7.0),
    TuneType.OFFROAD: Alignment(-0.5, -0.3, 0.0, 0.0, 5.0),
    TuneType.RALLY: Alignment(-0.8, -0.5, 0.0, 0.1, 5.5),
    TuneType.DRAG: Alignment(0.0, -0.5, 0.0, 0.0, 7.0),
}

# FWD fronts do the steering and the driving, so they get extra camber,
# and a touch of rear toe-out helps rotation.
DRIVE_OFFSETS: Dict[DriveType, Alignment] = {
    DriveType.FWD: Alignment(-0.2, 0.0, 0.0, -0.1, 0.0),
    DriveType.RWD: Alignment(0.0, 0.0, 0.0, 0.0, 0.0),
    DriveType.AWD: Alignment(0.0, 0.0, 0.0, 0.0, 0.0),
}


def calculate_alignment(specs: CarSpecs, tune_type: TuneType) -> Alignment:
    preset = ALIGNMENT_PRESETS[tune_type]
    offset = DRIVE_OFFSETS[specs.drive_type]

    camber_front = preset.camber_front + offset.camber_front
    camber_rear = preset.camber_rear + offset.camber_rear

    if specs.weight > HEAVY_CAR_LB:
        camber_front -= 0.2
        camber_rear -= 0.1

    # Extra negative camber on the loaded axle.
    if specs.weight_distribution > 55:
        camber_front -= 0.2
    elif specs.weight_distribution < 45:
        camber_rear -= 0.2

    return Alignment(
        camber_front=round_to(clamp(camber_front, *CAMBER_DEG), 1),
        camber_rear=round_to(clamp(camber_rear, *CAMBER_DEG), 1),
        toe_front=round_to(clamp(preset.toe_front + offset.toe_front, *TOE_DEG), 1),
        toe_rear=round_to(clamp(preset.toe_rear + offset.toe_rear, *TOE_DEG), 1),
        caster=round_to(clamp(preset.caster + offset.caster, *CASTER_DEG), 1),
    )
