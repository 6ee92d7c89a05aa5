from typing import Protocol, Optional
from .enums import DriveType, DrivingStyle, TuneType, TuneVariant, UnitSystem
from .models import (
    CarSpecs,
    DifferentialRecommendation,
    DifferentialSettings,
    DifferentialValidation,
    TuneSettings,
)


class ITuneService(Protocol):
    """
    Interface for the tune calculation facade.
    Decouples the HTTP adapter from the concrete engine.
    """
    def calculate(
        self,
        specs: CarSpecs,
        tune_type: TuneType,
        variant: Optional[TuneVariant] = None,
        balance: float = 0.0,
        stiffness: float = 50.0,
        unit_system: UnitSystem = UnitSystem.IMPERIAL,
        template_id: Optional[str] = None,
    ) -> TuneSettings:
        """
        Compute a complete tune with the balance/stiffness override applied.
        A template id replaces balance and stiffness with the template's values.
        """
        ...

    def differential_recommendation(
        self,
        drive_type: DriveType,
        tune_type: TuneType,
        driving_style: DrivingStyle = DrivingStyle.BALANCED,
    ) -> Optional[DifferentialRecommendation]:
        """
        Returns None when no baseline exists for the combination.
        """
        ...

    def validate_differential(
        self,
        settings: DifferentialSettings,
        drive_type: DriveType,
    ) -> DifferentialValidation:
        ...
