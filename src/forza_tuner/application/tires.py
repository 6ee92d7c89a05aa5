from typing import Dict

from ..domain.enums import DriveType, TireCompound, TuneType
from ..domain.models import AxlePair, CarSpecs
from .limits import TIRE_PRESSURE_PSI, clamp, round_to
from .pi_scaling import PIClassScale
from .variants import VariantProfile

# Cold pressure (PSI) each compound starts from.
COMPOUND_BASE_PSI: Dict[TireCompound, float] = {
    TireCompound.STREET: 27.0,
    TireCompound.SPORT: 28.0,
    TireCompound.SEMI_SLICK: 29.0,
    TireCompound.SLICK: 30.0,
    TireCompound.RALLY: 22.0,
    TireCompound.OFFROAD: 19.0,
    TireCompound.DRAG: 16.0,
}

# Discipline deltas on top of the compound base.
# Drift runs a soft front for grip and a hard rear to break traction;
# drag runs a soft rear for launch and a hard front to cut rolling resistance.
TUNE_PRESSURE_DELTAS: Dict[TuneType, AxlePair] = {
    TuneType.GRIP: AxlePair(0.0, 0.0),
    TuneType.STREET: AxlePair(0.5, 0.5),
    TuneType.RACE: AxlePair(1.0, 1.0),
    TuneType.DRIFT: AxlePair(-8.0, 4.0),
    TuneType.DRAG: AxlePair(30.0, -6.0),
    TuneType.RALLY: AxlePair(-3.0, -3.0),
    TuneType.OFFROAD: AxlePair(-4.0, -4.0),
}

DRIVE_REAR_OFFSET_PSI: Dict[DriveType, float] = {
    DriveType.RWD: -0.5,
    DriveType.FWD: 0.5,
    DriveType.AWD: 0.0,
}

WEIGHT_OFFSET_PER_PCT = 0.03
NO_WEIGHT_OFFSET_TUNES = (TuneType.DRIFT, TuneType.DRAG)


def calculate_tire_pressure(
    specs: CarSpecs,
    tune_type: TuneType,
    profile: VariantProfile,
    scale: PIClassScale,
) -> AxlePair:
    """
    Cold tire pressure per axle (PSI, 1 dp), always within 14 - 55.
    The heavier axle gets slightly more pressure.
    """
    base = COMPOUND_BASE_PSI[specs.tire_compound] + scale.pressure_trim_psi + profile.pressure_offset_psi
    delta = TUNE_PRESSURE_DELTAS[tune_type]

    weight_offset = 0.0
    if tune_type not in NO_WEIGHT_OFFSET_TUNES:
        weight_offset = (specs.weight_distribution - 50) * WEIGHT_OFFSET_PER_PCT

    front = base + delta.front + weight_offset
    rear = base + delta.rear - weight_offset + DRIVE_REAR_OFFSET_PSI[specs.drive_type]

    return AxlePair(
        round_to(clamp(front, *TIRE_PRESSURE_PSI), 1),
        round_to(clamp(rear, *TIRE_PRESSURE_PSI), 1),
    )
