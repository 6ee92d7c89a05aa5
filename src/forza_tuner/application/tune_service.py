import dataclasses
from typing import Optional

import structlog

from ..domain.enums import DriveType, DrivingStyle, TuneType, TuneVariant, UnitSystem
from ..domain.events import DifferentialUnavailable, TuneCalculated
from ..domain.models import (
    CarSpecs,
    DifferentialRecommendation,
    DifferentialSettings,
    DifferentialValidation,
    TuneSettings,
)
from .balance import apply_balance_stiffness
from .catalog import get_template
from .differential import get_differential_recommendation, validate_differential_settings
from .tune_calculator import calculate_tune
from .units import convert_tune_to_units

logger = structlog.get_logger()


class UnknownTemplateError(ValueError):
    """Raised when a template id is not in the catalogue."""

    def __init__(self, template_id: str):
        self.template_id = template_id
        super().__init__(f"Unknown tune template '{template_id}'.")


class TuneService:
    """
    Facade over the calculation engine.

    Runs the orchestrator, applies the balance/stiffness sliders and converts
    the result for display. Stateless; safe to share between requests.
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
        if template_id is not None:
            template = get_template(template_id)
            if template is None:
                raise UnknownTemplateError(template_id)
            balance, stiffness = template.balance, template.stiffness

        tune = calculate_tune(specs, tune_type, variant)

        adjusted = apply_balance_stiffness(
            tune.arb_front, tune.arb_rear, tune.springs_front, tune.springs_rear, balance, stiffness
        )
        tune = tune.model_copy(update=adjusted._asdict())
        tune = convert_tune_to_units(tune, unit_system)

        event = TuneCalculated(
            tune_type=tune.tune_type.value,
            variant=tune.variant.value,
            drive_type=specs.drive_type.value,
            pi_class=specs.pi_class.value,
            unit_system=tune.unit_system.value,
            balance=balance,
            stiffness=stiffness,
            final_drive=tune.final_drive,
            template_id=template_id,
        )
        logger.info("tune_calculated", **dataclasses.asdict(event))
        return tune

    def differential_recommendation(
        self,
        drive_type: DriveType,
        tune_type: TuneType,
        driving_style: DrivingStyle = DrivingStyle.BALANCED,
    ) -> Optional[DifferentialRecommendation]:
        recommendation = get_differential_recommendation(drive_type, tune_type, driving_style)
        if recommendation is None:
            event = DifferentialUnavailable(drive_type=drive_type.value, tune_type=tune_type.value)
            logger.info("differential_unavailable", **dataclasses.asdict(event))
        return recommendation

    def validate_differential(
        self,
        settings: DifferentialSettings,
        drive_type: DriveType,
    ) -> DifferentialValidation:
        result = validate_differential_settings(settings, drive_type)
        if not result.valid:
            logger.debug("differential_invalid", errors=result.errors)
        return result
