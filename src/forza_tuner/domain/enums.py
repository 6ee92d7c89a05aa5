from enum import Enum


class DriveType(str, Enum):
    """Drivetrain layout."""
    RWD = "RWD"
    FWD = "FWD"
    AWD = "AWD"


class PIClass(str, Enum):
    """Performance Index class, declared in ascending performance order."""
    D = "D"
    C = "C"
    B = "B"
    A = "A"
    S1 = "S1"
    S2 = "S2"
    X = "X"

    @property
    def rank(self) -> int:
        """Zero-based position in the D..X ordering."""
        return list(PIClass).index(self)


class TireCompound(str, Enum):
    STREET = "street"
    SPORT = "sport"
    SEMI_SLICK = "semi-slick"
    SLICK = "slick"
    RALLY = "rally"
    OFFROAD = "offroad"
    DRAG = "drag"


class TuneType(str, Enum):
    """Tuning discipline."""
    GRIP = "grip"
    STREET = "street"
    RACE = "race"
    DRIFT = "drift"
    DRAG = "drag"
    RALLY = "rally"
    OFFROAD = "offroad"


class TuneVariant(str, Enum):
    """Discipline sub-preset. Each member belongs to exactly one TuneType."""
    # grip
    CIRCUIT = "circuit"
    TECHNICAL = "technical"
    HIGH_SPEED = "high_speed"
    # street
    DAILY = "daily"
    CANYON = "canyon"
    # race
    SPRINT = "sprint"
    ENDURANCE = "endurance"
    # drift
    TANDEM = "tandem"
    ANGLE = "angle"
    # drag
    STANDING_START = "standing_start"
    ROLL_RACE = "roll_race"
    # rally
    GRAVEL = "gravel"
    TARMAC = "tarmac"
    SNOW = "snow"
    # offroad
    CROSS_COUNTRY = "cross_country"
    TRAIL = "trail"


class DrivingStyle(str, Enum):
    """Differential aggression preset."""
    STABLE = "Stable"
    BALANCED = "Balanced"
    AGGRESSIVE = "Aggressive"

    @classmethod
    def from_bias(cls, bias: int) -> "DrivingStyle":
        """
        Map a CarSpecs driving style bias (-2 understeer .. +2 oversteer)
        onto a differential preset. Only the sign matters.
        """
        if bias < 0:
            return cls.STABLE
        if bias > 0:
            return cls.AGGRESSIVE
        return cls.BALANCED


class UnitSystem(str, Enum):
    IMPERIAL = "imperial"
    METRIC = "metric"
