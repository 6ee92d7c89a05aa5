"""
Differential baselines per drivetrain and discipline, driving-style scaling
and validation.

Settings are a tagged union keyed by drive type: AWD carries a center split
plus front and rear differentials, RWD and FWD carry a single accel/decel pair.
"""
import dataclasses
from typing import Dict, List, Optional, Tuple

from ..domain.enums import DriveType, DrivingStyle, TuneType
from ..domain.models import (
    AwdDifferential,
    DifferentialBaseline,
    DifferentialRecommendation,
    DifferentialSettings,
    DifferentialValidation,
    FwdDifferential,
    RwdDifferential,
)
from .limits import CENTER_BALANCE_PCT, DIFF_LOCK_PCT, clamp, round_half_up

# Softer thresholds that only produce warnings
AWD_CENTER_ADVISORY = (35, 65)
AWD_FRONT_ACCEL_ADVISORY = 70
ACCEL_ADVISORY = 75
DECEL_ADVISORY = 60


@dataclasses.dataclass(frozen=True)
class DrivingStyleMultipliers:
    acceleration: float
    deceleration: float
    center_balance: float


DRIVING_STYLE_MULTIPLIERS: Dict[DrivingStyle, DrivingStyleMultipliers] = {
    # Less accel lock, more decel lock, balance toward the front
    DrivingStyle.STABLE: DrivingStyleMultipliers(0.8, 1.3, -5),
    DrivingStyle.BALANCED: DrivingStyleMultipliers(1.0, 1.0, 0),
    # More accel lock, less decel lock, balance toward the rear
    DrivingStyle.AGGRESSIVE: DrivingStyleMultipliers(1.3, 0.7, 5),
}


DIFFERENTIAL_BASELINES: List[DifferentialBaseline] = [
    DifferentialBaseline(
        drive_type=DriveType.AWD,
        tune_type=TuneType.STREET,
        settings=AwdDifferential(center_balance=55, front_accel=25, front_decel=15, rear_accel=35, rear_decel=25),
        description="Balanced street setup with good traction and stability",
        pros=["Good all-around traction", "Stable under braking", "Predictable handling"],
        cons=["Less rotation than race setup", "Moderate tire wear"],
    ),
    DifferentialBaseline(
        drive_type=DriveType.AWD,
        tune_type=TuneType.RACE,
        settings=AwdDifferential(center_balance=60, front_accel=30, front_decel=10, rear_accel=45, rear_decel=20),
        description="Aggressive race setup focused on maximum performance",
        pros=["Excellent corner exit traction", "Good rotation", "Fast lap times"],
        cons=["Less stable under braking", "Higher tire wear", "Requires more skill"],
    ),
    DifferentialBaseline(
        drive_type=DriveType.AWD,
        tune_type=TuneType.DRIFT,
        settings=AwdDifferential(center_balance=70, front_accel=15, front_decel=5, rear_accel=25, rear_decel=15),
        description="Drift-focused setup for controlled oversteer",
        pros=["Easy to initiate drifts", "Smooth angle transitions", "Good control"],
        cons=["Poor straight-line traction", "Unstable in normal driving"],
    ),
    DifferentialBaseline(
        drive_type=DriveType.RWD,
        tune_type=TuneType.STREET,
        settings=RwdDifferential(accel=45, decel=25),
        description="Balanced street setup for predictable handling",
        pros=["Good traction", "Stable under braking", "Easy to drive"],
        cons=["Less aggressive than race setup", "Moderate rotation"],
    ),
    DifferentialBaseline(
        drive_type=DriveType.RWD,
        tune_type=TuneType.RACE,
        settings=RwdDifferential(accel=65, decel=15),
        description="Performance-focused race setup",
        pros=["Maximum corner exit traction", "Good rotation", "Fast lap times"],
        cons=["Can be unstable under braking", "Requires precise throttle control"],
    ),
    DifferentialBaseline(
        drive_type=DriveType.RWD,
        tune_type=TuneType.DRIFT,
        settings=RwdDifferential(accel=20, decel=10),
        description="Drift setup for controlled oversteer",
        pros=["Easy to maintain drift angle", "Smooth transitions", "Good control"],
        cons=["Poor traction", "Unstable in normal driving"],
    ),
    DifferentialBaseline(
        drive_type=DriveType.FWD,
        tune_type=TuneType.STREET,
        settings=FwdDifferential(accel=35, decel=20),
        description="Balanced street setup for FWD cars",
        pros=["Good traction", "Stable", "Predictable"],
        cons=["Understeer tendency", "Less rotation"],
    ),
    DifferentialBaseline(
        drive_type=DriveType.FWD,
        tune_type=TuneType.RACE,
        settings=FwdDifferential(accel=50, decel=15),
        description="Performance race setup for FWD cars",
        pros=["Better corner exit traction", "Reduced understeer", "Faster lap times"],
        cons=["More wheel spin", "Requires throttle control"],
    ),
]

_BASELINE_INDEX: Dict[Tuple[DriveType, TuneType], DifferentialBaseline] = {
    (b.drive_type, b.tune_type): b for b in DIFFERENTIAL_BASELINES
}

# Discipline defaults used by the tune orchestrator when no baseline exists.
# Values above the 90% lock ceiling are clamped during style scaling.
DISCIPLINE_DIFFERENTIALS: Dict[TuneType, Dict[DriveType, DifferentialSettings]] = {
    TuneType.GRIP: {
        DriveType.RWD: RwdDifferential(accel=40, decel=20),
        DriveType.FWD: FwdDifferential(accel=35, decel=0),
        DriveType.AWD: AwdDifferential(center_balance=70, front_accel=25, front_decel=0, rear_accel=50, rear_decel=20),
    },
    TuneType.STREET: {
        DriveType.RWD: RwdDifferential(accel=35, decel=15),
        DriveType.FWD: FwdDifferential(accel=30, decel=0),
        DriveType.AWD: AwdDifferential(center_balance=60, front_accel=22, front_decel=0, rear_accel=40, rear_decel=15),
    },
    TuneType.RACE: {
        DriveType.RWD: RwdDifferential(accel=65, decel=15),
        DriveType.FWD: FwdDifferential(accel=50, decel=15),
        DriveType.AWD: AwdDifferential(center_balance=60, front_accel=30, front_decel=10, rear_accel=45, rear_decel=20),
    },
    TuneType.DRIFT: {
        DriveType.RWD: RwdDifferential(accel=100, decel=100),
        DriveType.FWD: FwdDifferential(accel=100, decel=0),
        DriveType.AWD: AwdDifferential(center_balance=95, front_accel=20, front_decel=0, rear_accel=100, rear_decel=100),
    },
    TuneType.OFFROAD: {
        DriveType.RWD: RwdDifferential(accel=35, decel=10),
        DriveType.FWD: FwdDifferential(accel=28, decel=0),
        DriveType.AWD: AwdDifferential(center_balance=50, front_accel=18, front_decel=0, rear_accel=40, rear_decel=15),
    },
    TuneType.RALLY: {
        DriveType.RWD: RwdDifferential(accel=45, decel=20),
        DriveType.FWD: FwdDifferential(accel=35, decel=0),
        DriveType.AWD: AwdDifferential(center_balance=55, front_accel=26, front_decel=0, rear_accel=50, rear_decel=20),
    },
    TuneType.DRAG: {
        DriveType.RWD: RwdDifferential(accel=100, decel=0),
        DriveType.FWD: FwdDifferential(accel=100, decel=0),
        DriveType.AWD: AwdDifferential(center_balance=70, front_accel=80, front_decel=0, rear_accel=100, rear_decel=0),
    },
}


def get_baseline_differential(drive_type: DriveType, tune_type: TuneType) -> Optional[DifferentialBaseline]:
    """
    Look up the reference setup for a drivetrain and discipline.
    Returns None when the combination has no baseline.
    """
    return _BASELINE_INDEX.get((drive_type, tune_type))


def _scale_lock(value: float, factor: float) -> int:
    return round_half_up(clamp(value * factor, *DIFF_LOCK_PCT))


def _shift_center(value: float, offset: float) -> int:
    return round_half_up(clamp(value + offset, *CENTER_BALANCE_PCT))


def scale_differential_for_driving_style(
    settings: DifferentialSettings,
    drive_type: DriveType,
    style: DrivingStyle,
) -> DifferentialSettings:
    """
    Apply the driving-style multipliers and clamp every field into its legal range.
    """
    if settings.drive_type != drive_type.value:
        raise ValueError(
            f"{settings.drive_type} differential settings cannot be scaled for a {drive_type.value} car."
        )

    multipliers = DRIVING_STYLE_MULTIPLIERS[style]

    if isinstance(settings, AwdDifferential):
        return AwdDifferential(
            center_balance=_shift_center(settings.center_balance, multipliers.center_balance),
            front_accel=_scale_lock(settings.front_accel, multipliers.acceleration),
            front_decel=_scale_lock(settings.front_decel, multipliers.deceleration),
            rear_accel=_scale_lock(settings.rear_accel, multipliers.acceleration),
            rear_decel=_scale_lock(settings.rear_decel, multipliers.deceleration),
        )

    return type(settings)(
        accel=_scale_lock(settings.accel, multipliers.acceleration),
        decel=_scale_lock(settings.decel, multipliers.deceleration),
    )


def calculate_differential(
    drive_type: DriveType,
    tune_type: TuneType,
    style: DrivingStyle = DrivingStyle.BALANCED,
) -> Optional[DifferentialSettings]:
    baseline = get_baseline_differential(drive_type, tune_type)
    if baseline is None:
        return None
    return scale_differential_for_driving_style(baseline.settings, drive_type, style)


def _style_tip(style: DrivingStyle) -> str:
    if style == DrivingStyle.STABLE:
        return "Focus on smooth inputs and consistent lines"
    if style == DrivingStyle.AGGRESSIVE:
        return "Be prepared for more responsive handling"
    return "Adjust based on track conditions and personal preference"


_DRIVETRAIN_TIPS: Dict[DriveType, List[str]] = {
    DriveType.AWD: [
        "Center balance affects overall handling characteristics",
        "Front differential primarily affects turn-in",
        "Rear differential primarily affects corner exit",
    ],
    DriveType.RWD: [
        "Acceleration setting affects traction on corner exit",
        "Deceleration setting affects stability under braking",
        "Higher accel settings can cause inside wheel spin",
    ],
    DriveType.FWD: [
        "FWD cars benefit from moderate accel settings for traction",
        "Too much accel can cause excessive wheel spin",
        "Decel settings help reduce understeer",
    ],
}

_STYLE_INTENT: Dict[DrivingStyle, str] = {
    DrivingStyle.STABLE: "prioritizes stability and predictability",
    DrivingStyle.BALANCED: "provides a balanced approach",
    DrivingStyle.AGGRESSIVE: "maximizes performance and rotation",
}


def get_differential_recommendation(
    drive_type: DriveType,
    tune_type: TuneType,
    driving_style: DrivingStyle = DrivingStyle.BALANCED,
) -> Optional[DifferentialRecommendation]:
    """
    Scaled settings plus the baseline they came from, an explanation and tips.
    Returns None when the combination has no baseline.
    """
    baseline = get_baseline_differential(drive_type, tune_type)
    if baseline is None:
        return None

    settings = scale_differential_for_driving_style(baseline.settings, drive_type, driving_style)
    explanation = (
        f"Based on {driving_style.value.lower()} driving style, this {drive_type.value} "
        f"{tune_type.value} setup {_STYLE_INTENT[driving_style]}."
    )
    tips = [
        _style_tip(driving_style),
        "Monitor tire temperatures to optimize the differential settings",
        "Consider weather conditions - wet weather may require more stable settings",
        *_DRIVETRAIN_TIPS[drive_type],
    ]
    return DifferentialRecommendation(
        settings=settings,
        baseline=baseline,
        explanation=explanation,
        tips=tips,
    )


def _check_lock(value: int, label: str, errors: List[str]) -> bool:
    low, high = DIFF_LOCK_PCT
    if value < low or value > high:
        errors.append(f"{label} must be between {low:.0f}% and {high:.0f}%")
        return False
    return True


def validate_differential_settings(
    settings: DifferentialSettings,
    drive_type: DriveType,
) -> DifferentialValidation:
    """
    Hard bounds are reported as errors and invalidate the settings;
    softer thresholds are reported as warnings only.
    """
    warnings: List[str] = []
    errors: List[str] = []

    if settings.drive_type != drive_type.value:
        errors.append(
            f"Settings are for a {settings.drive_type} differential but the car is {drive_type.value}"
        )
        return DifferentialValidation(valid=False, warnings=warnings, errors=errors)

    if isinstance(settings, AwdDifferential):
        low, high = CENTER_BALANCE_PCT
        if settings.center_balance < low or settings.center_balance > high:
            errors.append(f"Center balance must be between {low:.0f}% and {high:.0f}%")
        elif not AWD_CENTER_ADVISORY[0] <= settings.center_balance <= AWD_CENTER_ADVISORY[1]:
            warnings.append("Extreme center balance may cause unpredictable handling")

        if _check_lock(settings.front_accel, "Front acceleration", errors) \
                and settings.front_accel > AWD_FRONT_ACCEL_ADVISORY:
            warnings.append("Very high front acceleration may cause understeer")
        _check_lock(settings.front_decel, "Front deceleration", errors)
        if _check_lock(settings.rear_accel, "Rear acceleration", errors) \
                and settings.rear_accel > ACCEL_ADVISORY:
            warnings.append("Very high rear acceleration may reduce rotation")
        _check_lock(settings.rear_decel, "Rear deceleration", errors)
    else:
        if _check_lock(settings.accel, "Acceleration", errors) and settings.accel > ACCEL_ADVISORY:
            warnings.append("Very high acceleration may cause wheel spin")
        if _check_lock(settings.decel, "Deceleration", errors) and settings.decel > DECEL_ADVISORY:
            warnings.append("Very high deceleration may cause instability")

    return DifferentialValidation(valid=not errors, warnings=warnings, errors=errors)


def format_differential_settings(settings: DifferentialSettings) -> List[str]:
    if isinstance(settings, AwdDifferential):
        return [
            f"Center Balance: {settings.center_balance}% Rear",
            f"Front Accel: {settings.front_accel}%",
            f"Front Decel: {settings.front_decel}%",
            f"Rear Accel: {settings.rear_accel}%",
            f"Rear Decel: {settings.rear_decel}%",
        ]
    return [
        f"Acceleration: {settings.accel}%",
        f"Deceleration: {settings.decel}%",
    ]
