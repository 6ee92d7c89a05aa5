from typing import Annotated, List, Literal, NamedTuple, Optional, Union
from pydantic import BaseModel, Field, ConfigDict, field_validator, model_validator

from .enums import DriveType, PIClass, TireCompound, TuneType, TuneVariant, UnitSystem


class AxlePair(NamedTuple):
    """A per-axle value."""
    front: float
    rear: float


class BaseTuningModel(BaseModel):
    """Base immutable model for tuning inputs and outputs."""
    model_config = ConfigDict(frozen=True, extra="forbid")


class CarSpecs(BaseTuningModel):
    """Physical specification of the car being tuned."""
    weight: float = Field(
        ...,
        ge=1000.0,
        le=10000.0,
        description="Curb weight (lb). Range: 1000 - 10000."
    )
    weight_distribution: float = Field(
        ...,
        ge=35.0,
        le=65.0,
        description="Weight over the front axle (%). Range: 35 - 65."
    )
    drive_type: DriveType = Field(..., description="Drivetrain layout")
    pi_class: PIClass = Field(..., description="Performance Index class")
    tire_compound: TireCompound = Field(..., description="Tire compound")
    horsepower: float = Field(
        400.0,
        gt=0,
        description="Engine power (hp). Must be > 0."
    )
    gear_count: int = Field(
        6,
        ge=4,
        le=10,
        description="Number of forward gears. Range: 4 - 10."
    )
    has_aero: bool = Field(False, description="Adjustable aero fitted")
    front_downforce: float = Field(
        0.0,
        ge=0.0,
        description="Maximum front downforce (lb). Used only with aero."
    )
    rear_downforce: float = Field(
        0.0,
        ge=0.0,
        description="Maximum rear downforce (lb). Used only with aero."
    )
    driving_style: int = Field(
        0,
        ge=-2,
        le=2,
        description="Handling bias: -2 understeer .. +2 oversteer."
    )

    @property
    def front_weight_fraction(self) -> float:
        return self.weight_distribution / 100.0

    @property
    def rear_weight_fraction(self) -> float:
        return 1.0 - self.front_weight_fraction


# ==========================================
# Differential: one shape per drivetrain
# ==========================================

class AwdDifferential(BaseTuningModel):
    """AWD: center split plus front and rear differentials."""
    drive_type: Literal["AWD"] = "AWD"
    center_balance: int = Field(..., description="Torque sent to the rear axle (%)")
    front_accel: int = Field(..., description="Front accel lock (%)")
    front_decel: int = Field(..., description="Front decel lock (%)")
    rear_accel: int = Field(..., description="Rear accel lock (%)")
    rear_decel: int = Field(..., description="Rear decel lock (%)")


class RwdDifferential(BaseTuningModel):
    """RWD: single rear differential."""
    drive_type: Literal["RWD"] = "RWD"
    accel: int = Field(..., description="Accel lock (%)")
    decel: int = Field(..., description="Decel lock (%)")


class FwdDifferential(BaseTuningModel):
    """FWD: single front differential."""
    drive_type: Literal["FWD"] = "FWD"
    accel: int = Field(..., description="Accel lock (%)")
    decel: int = Field(..., description="Decel lock (%)")


DifferentialSettings = Annotated[
    Union[AwdDifferential, RwdDifferential, FwdDifferential],
    Field(discriminator="drive_type"),
]


class DifferentialBaseline(BaseTuningModel):
    """Reference differential setup for one drivetrain and discipline."""
    drive_type: DriveType
    tune_type: TuneType
    settings: DifferentialSettings
    description: str
    pros: List[str] = Field(default_factory=list)
    cons: List[str] = Field(default_factory=list)


class DifferentialRecommendation(BaseTuningModel):
    settings: DifferentialSettings
    baseline: DifferentialBaseline
    explanation: str
    tips: List[str]


class DifferentialValidation(BaseTuningModel):
    """Two-tier result: errors invalidate, warnings only advise."""
    valid: bool
    warnings: List[str] = Field(default_factory=list)
    errors: List[str] = Field(default_factory=list)


# ==========================================
# Complete tune
# ==========================================

class TuneSettings(BaseTuningModel):
    """
    Complete computed setup.
    A flat value object, recomputed from scratch on every calculation.
    """
    tune_type: TuneType
    variant: TuneVariant
    unit_system: UnitSystem = UnitSystem.IMPERIAL

    # Tires
    tire_pressure_front: float = Field(..., gt=0, description="Front cold pressure (PSI or BAR)")
    tire_pressure_rear: float = Field(..., gt=0, description="Rear cold pressure (PSI or BAR)")

    # Alignment
    camber_front: float = Field(..., ge=-5.0, le=5.0, description="Front camber (deg)")
    camber_rear: float = Field(..., ge=-5.0, le=5.0, description="Rear camber (deg)")
    toe_front: float = Field(..., ge=-5.0, le=5.0, description="Front toe (deg)")
    toe_rear: float = Field(..., ge=-5.0, le=5.0, description="Rear toe (deg)")
    caster: float = Field(..., ge=1.0, le=7.0, description="Caster (deg)")

    # Anti-roll bars
    arb_front: float = Field(..., ge=1.0, le=65.0, description="Front ARB. Range: 1 - 65.")
    arb_rear: float = Field(..., ge=1.0, le=65.0, description="Rear ARB. Range: 1 - 65.")

    # Springs
    springs_front: float = Field(..., gt=0, description="Front spring rate (LB/IN or KG/MM)")
    springs_rear: float = Field(..., gt=0, description="Rear spring rate (LB/IN or KG/MM)")
    ride_height_front: float = Field(..., gt=0, description="Front ride height (IN or CM)")
    ride_height_rear: float = Field(..., gt=0, description="Rear ride height (IN or CM)")

    # Damping
    rebound_front: float = Field(..., ge=1.0, le=20.0)
    rebound_rear: float = Field(..., ge=1.0, le=20.0)
    bump_front: float = Field(..., ge=1.0, le=20.0)
    bump_rear: float = Field(..., ge=1.0, le=20.0)

    # Aero
    aero_front: float = Field(..., ge=0.0, description="Front downforce (LB or N)")
    aero_rear: float = Field(..., ge=0.0, description="Rear downforce (LB or N)")

    # Differential
    differential: DifferentialSettings

    # Brakes
    brake_pressure: float = Field(..., ge=0.0, le=200.0, description="Brake pressure (%)")
    brake_balance: float = Field(
        ...,
        ge=0.0,
        le=100.0,
        description="Brake balance slider value (%). Inverted: lower means more front bias."
    )
    brake_balance_note: str

    # Gearing
    final_drive: float = Field(..., ge=2.5, le=5.5, description="Final drive ratio. Range: 2.5 - 5.5.")
    gear_ratios: List[float] = Field(..., min_length=1, description="Gear ratios (1st, 2nd, ...)")
    gearing_note: str

    @field_validator('gear_ratios')
    @classmethod
    def check_gears_positive(cls, v: List[float]) -> List[float]:
        """Ensure all gear ratios are positive."""
        if any(g <= 0 for g in v):
            raise ValueError("All gear ratios must be > 0.")
        return v

    @model_validator(mode="after")
    def check_damping_and_pressure(self) -> "TuneSettings":
        if self.bump_front > self.rebound_front or self.bump_rear > self.rebound_rear:
            raise ValueError("Bump damping must not exceed rebound on the same axle.")
        if self.unit_system == UnitSystem.IMPERIAL:
            for pressure in (self.tire_pressure_front, self.tire_pressure_rear):
                if not 14.0 <= pressure <= 55.0:
                    raise ValueError("Tire pressure must be within 14 - 55 PSI.")
        return self

    @property
    def drive_type(self) -> DriveType:
        return DriveType(self.differential.drive_type)


class TuneTypeDescription(BaseTuningModel):
    tune_type: TuneType
    title: str
    description: str
    tips: List[str]
    variants: List[TuneVariant] = Field(default_factory=list)
    default_variant: Optional[TuneVariant] = None


class TuneTemplate(BaseTuningModel):
    """Named balance/stiffness slider preset."""
    id: str
    name: str
    description: str
    category: Literal["starter", "meta", "specialty"]
    tune_types: List[TuneType]
    drive_types: List[DriveType]
    balance: float = Field(..., ge=-100.0, le=100.0)
    stiffness: float = Field(..., ge=0.0, le=100.0)
    tips: List[str] = Field(default_factory=list)
