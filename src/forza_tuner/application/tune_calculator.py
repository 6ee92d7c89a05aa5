"""
Tune orchestrator: runs every calculator for one car and discipline and
assembles the complete imperial TuneSettings.
"""
from typing import Optional

from ..domain.enums import DrivingStyle, TuneType, TuneVariant
from ..domain.models import CarSpecs, DifferentialSettings, TuneSettings
from .aero import calculate_aero
from .alignment import calculate_alignment
from .brakes import calculate_brakes
from .differential import (
    DISCIPLINE_DIFFERENTIALS,
    get_baseline_differential,
    scale_differential_for_driving_style,
)
from .gearing import calculate_gearing
from .pi_scaling import get_pi_class_scale
from .suspension import calculate_anti_roll_bars, calculate_damping, calculate_ride_height, calculate_springs
from .tires import calculate_tire_pressure
from .variants import get_variant_profile, resolve_variant


def tune_differential(specs: CarSpecs, tune_type: TuneType) -> DifferentialSettings:
    """
    Baseline setup where one exists, otherwise the discipline default,
    scaled for the car's driving style bias.
    """
    baseline = get_baseline_differential(specs.drive_type, tune_type)
    if baseline is not None:
        settings = baseline.settings
    else:
        settings = DISCIPLINE_DIFFERENTIALS[tune_type][specs.drive_type]
    style = DrivingStyle.from_bias(specs.driving_style)
    return scale_differential_for_driving_style(settings, specs.drive_type, style)


def calculate_tune(
    specs: CarSpecs,
    tune_type: TuneType,
    variant: Optional[TuneVariant] = None,
) -> TuneSettings:
    """
    Compute a complete tune in imperial units.

    Raises UnsupportedVariantError when the variant belongs to another tune type.
    """
    variant = resolve_variant(tune_type, variant)
    profile = get_variant_profile(variant)
    scale = get_pi_class_scale(specs.pi_class)

    pressure = calculate_tire_pressure(specs, tune_type, profile, scale)
    alignment = calculate_alignment(specs, tune_type)
    arb = calculate_anti_roll_bars(specs, tune_type, profile, scale)
    springs = calculate_springs(specs, tune_type, profile, scale)
    ride_height = calculate_ride_height(specs, tune_type, profile)
    rebound, bump = calculate_damping(specs, tune_type, springs, scale)
    aero = calculate_aero(specs, tune_type, profile)
    brakes = calculate_brakes(specs, tune_type)
    gearing = calculate_gearing(specs, tune_type, profile, scale)

    return TuneSettings(
        tune_type=tune_type,
        variant=variant,
        tire_pressure_front=pressure.front,
        tire_pressure_rear=pressure.rear,
        camber_front=alignment.camber_front,
        camber_rear=alignment.camber_rear,
        toe_front=alignment.toe_front,
        toe_rear=alignment.toe_rear,
        caster=alignment.caster,
        arb_front=arb.front,
        arb_rear=arb.rear,
        springs_front=springs.front,
        springs_rear=springs.rear,
        ride_height_front=ride_height.front,
        ride_height_rear=ride_height.rear,
        rebound_front=rebound.front,
        rebound_rear=rebound.rear,
        bump_front=bump.front,
        bump_rear=bump.rear,
        aero_front=aero.front,
        aero_rear=aero.rear,
        differential=tune_differential(specs, tune_type),
        brake_pressure=brakes.pressure,
        brake_balance=brakes.balance_slider,
        brake_balance_note=brakes.note,
        final_drive=gearing.final_drive,
        gear_ratios=gearing.ratios,
        gearing_note=gearing.note,
    )
