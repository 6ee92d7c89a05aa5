from pydantic import BaseModel, Field
from typing import Optional

from ..domain.enums import DriveType, TuneType, TuneVariant, UnitSystem
from ..domain.models import CarSpecs, DifferentialSettings


class TuneRequest(BaseModel):
    specs: CarSpecs
    tune_type: TuneType
    variant: Optional[TuneVariant] = None
    balance: Optional[float] = Field(default=None, ge=-100.0, le=100.0)
    stiffness: Optional[float] = Field(default=None, ge=0.0, le=100.0)
    unit_system: Optional[UnitSystem] = None
    template_id: Optional[str] = None


class DifferentialValidateRequest(BaseModel):
    drive_type: DriveType
    settings: DifferentialSettings


class OperationResponse(BaseModel):
    status: str
    message: str


class HealthResponse(BaseModel):
    status: str
    env: str
