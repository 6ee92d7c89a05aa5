import dataclasses
from typing import Dict, List, Optional

from ..domain.enums import TuneType, TuneVariant


class UnsupportedVariantError(ValueError):
    """Raised when a variant is requested for a tune type it does not belong to."""

    def __init__(self, tune_type: TuneType, variant: TuneVariant):
        self.tune_type = tune_type
        self.variant = variant
        allowed = ", ".join(v.value for v in VARIANTS_BY_TUNE_TYPE[tune_type])
        super().__init__(
            f"Variant '{variant.value}' is not available for '{tune_type.value}' tunes. "
            f"Expected one of: {allowed}."
        )


@dataclasses.dataclass(frozen=True)
class VariantProfile:
    """Small nudges a variant applies on top of its discipline baseline."""
    tune_type: TuneType
    frequency_scale: float = 1.0
    arb_scale: float = 1.0
    ride_height_offset_in: float = 0.0
    pressure_offset_psi: float = 0.0
    aero_scale: float = 1.0
    final_drive_scale: float = 1.0


VARIANT_PROFILES: Dict[TuneVariant, VariantProfile] = {
    TuneVariant.CIRCUIT: VariantProfile(TuneType.GRIP),
    TuneVariant.TECHNICAL: VariantProfile(
        TuneType.GRIP, frequency_scale=0.96, arb_scale=0.95, aero_scale=1.1, final_drive_scale=1.05
    ),
    TuneVariant.HIGH_SPEED: VariantProfile(
        TuneType.GRIP, frequency_scale=1.04, arb_scale=1.05, aero_scale=0.85, final_drive_scale=0.94
    ),
    TuneVariant.DAILY: VariantProfile(TuneType.STREET),
    TuneVariant.CANYON: VariantProfile(
        TuneType.STREET, frequency_scale=1.08, arb_scale=1.1, ride_height_offset_in=-0.3, final_drive_scale=1.03
    ),
    TuneVariant.SPRINT: VariantProfile(TuneType.RACE),
    TuneVariant.ENDURANCE: VariantProfile(
        TuneType.RACE, frequency_scale=0.95, arb_scale=0.95, pressure_offset_psi=-0.5, final_drive_scale=0.97
    ),
    TuneVariant.TANDEM: VariantProfile(TuneType.DRIFT),
    TuneVariant.ANGLE: VariantProfile(
        TuneType.DRIFT, frequency_scale=1.05, arb_scale=1.1, pressure_offset_psi=1.0, final_drive_scale=1.04
    ),
    TuneVariant.STANDING_START: VariantProfile(TuneType.DRAG),
    TuneVariant.ROLL_RACE: VariantProfile(
        TuneType.DRAG, frequency_scale=1.03, pressure_offset_psi=2.0, final_drive_scale=0.92
    ),
    TuneVariant.GRAVEL: VariantProfile(TuneType.RALLY),
    TuneVariant.TARMAC: VariantProfile(
        TuneType.RALLY, frequency_scale=1.15, arb_scale=1.25, ride_height_offset_in=-1.5,
        pressure_offset_psi=5.0, aero_scale=1.15
    ),
    TuneVariant.SNOW: VariantProfile(
        TuneType.RALLY, frequency_scale=0.92, arb_scale=0.85, ride_height_offset_in=0.3,
        pressure_offset_psi=-1.5, final_drive_scale=1.04
    ),
    TuneVariant.CROSS_COUNTRY: VariantProfile(TuneType.OFFROAD),
    TuneVariant.TRAIL: VariantProfile(
        TuneType.OFFROAD, frequency_scale=0.94, arb_scale=0.9, ride_height_offset_in=0.5,
        pressure_offset_psi=-1.0, final_drive_scale=1.06
    ),
}

DEFAULT_VARIANTS: Dict[TuneType, TuneVariant] = {
    TuneType.GRIP: TuneVariant.CIRCUIT,
    TuneType.STREET: TuneVariant.DAILY,
    TuneType.RACE: TuneVariant.SPRINT,
    TuneType.DRIFT: TuneVariant.TANDEM,
    TuneType.DRAG: TuneVariant.STANDING_START,
    TuneType.RALLY: TuneVariant.GRAVEL,
    TuneType.OFFROAD: TuneVariant.CROSS_COUNTRY,
}

VARIANTS_BY_TUNE_TYPE: Dict[TuneType, List[TuneVariant]] = {
    tune_type: [v for v, profile in VARIANT_PROFILES.items() if profile.tune_type == tune_type]
    for tune_type in TuneType
}


def resolve_variant(tune_type: TuneType, variant: Optional[TuneVariant] = None) -> TuneVariant:
    """
    Default the variant for the tune type, or reject one from another discipline.
    """
    if variant is None:
        return DEFAULT_VARIANTS[tune_type]
    if VARIANT_PROFILES[variant].tune_type != tune_type:
        raise UnsupportedVariantError(tune_type, variant)
    return variant


def get_variant_profile(variant: TuneVariant) -> VariantProfile:
    return VARIANT_PROFILES[variant]
