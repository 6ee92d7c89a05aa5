from fastapi import FastAPI
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from typing import List, Optional

import structlog

from ..config import Settings, get_settings
from ..domain.enums import DriveType, DrivingStyle, TuneType
from ..domain.interfaces import ITuneService
from ..domain.models import (
    DifferentialRecommendation,
    DifferentialValidation,
    TuneSettings,
    TuneTemplate,
    TuneTypeDescription,
)
from ..application.catalog import (
    TUNE_TEMPLATES,
    describe_tune_type,
    get_compatible_templates,
    get_templates_for_drive_type,
    get_templates_for_tune_type,
)
from ..application.tune_service import UnknownTemplateError
from ..application.variants import UnsupportedVariantError
from .schemas import DifferentialValidateRequest, HealthResponse, OperationResponse, TuneRequest

logger = structlog.get_logger()


def _error(status_code: int, message: str) -> JSONResponse:
    body = OperationResponse(status="error", message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump())


def create_app(service: ITuneService, settings: Optional[Settings] = None) -> FastAPI:
    """
    Factory to create FastAPI app with injected dependencies.
    """
    settings = settings or get_settings()
    defaults = settings.tuning

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("api_startup", env=settings.env)
        yield
        logger.info("api_shutdown")

    app = FastAPI(title="Forza Tuner", lifespan=lifespan)

    @app.get("/health", response_model=HealthResponse)
    async def health():
        return HealthResponse(status="ok", env=settings.env.value)

    @app.post(
        "/tunes",
        response_model=TuneSettings,
        responses={422: {"model": OperationResponse}},
    )
    async def calculate_tune(request: TuneRequest):
        logger.info(
            "api_calculate_tune",
            tune_type=request.tune_type,
            variant=request.variant,
            drive_type=request.specs.drive_type,
            template_id=request.template_id,
        )
        try:
            return service.calculate(
                request.specs,
                request.tune_type,
                variant=request.variant,
                balance=defaults.balance if request.balance is None else request.balance,
                stiffness=defaults.stiffness if request.stiffness is None else request.stiffness,
                unit_system=request.unit_system or defaults.unit_system,
                template_id=request.template_id,
            )
        except (UnsupportedVariantError, UnknownTemplateError) as e:
            logger.warning("api_calculate_tune_rejected", error=str(e))
            return _error(422, str(e))

    @app.get(
        "/differential/recommendation",
        response_model=DifferentialRecommendation,
        responses={404: {"model": OperationResponse}},
    )
    async def differential_recommendation(
        drive_type: DriveType,
        tune_type: TuneType,
        driving_style: DrivingStyle = DrivingStyle.BALANCED,
    ):
        recommendation = service.differential_recommendation(drive_type, tune_type, driving_style)
        if recommendation is None:
            return _error(
                404,
                f"No differential baseline for {drive_type.value} {tune_type.value}",
            )
        return recommendation

    @app.post("/differential/validate", response_model=DifferentialValidation)
    async def validate_differential(request: DifferentialValidateRequest):
        return service.validate_differential(request.settings, request.drive_type)

    @app.get("/tune-types", response_model=List[TuneTypeDescription])
    async def tune_types():
        return [describe_tune_type(tune_type) for tune_type in TuneType]

    @app.get("/templates", response_model=List[TuneTemplate])
    async def templates(tune_type: Optional[TuneType] = None, drive_type: Optional[DriveType] = None):
        if tune_type is not None and drive_type is not None:
            return get_compatible_templates(tune_type, drive_type)
        if tune_type is not None:
            return get_templates_for_tune_type(tune_type)
        if drive_type is not None:
            return get_templates_for_drive_type(drive_type)
        return TUNE_TEMPLATES

    return app
