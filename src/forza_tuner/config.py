from enum import Enum
from pathlib import Path
from functools import lru_cache
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .domain.enums import UnitSystem

BASE_DIR = Path(__file__).resolve().parent.parent.parent


#  Working modes
class AppEnvironment(str, Enum):
    """Working modes"""
    DEV = "development"
    PROD = "production"
    TEST = "testing"


#  HTTP adapter config
class ApiConfig(BaseModel):
    """HTTP API config"""
    host: str = Field(default="127.0.0.1", description="IP address to bind")
    port: int = Field(default=8000, ge=1, le=65535, description="HTTP port")


#  Logging config
class LoggingConfig(BaseModel):
    """Logging config"""
    level: str = Field(default="INFO", description="Root log level (DEBUG, INFO, WARNING...)")


#  Tuning request defaults
class TuningDefaults(BaseModel):
    """Defaults applied to tune requests that omit them"""
    unit_system: UnitSystem = Field(default=UnitSystem.IMPERIAL, description="Display unit system")
    balance: float = Field(default=0.0, ge=-100.0, le=100.0, description="Balance slider (-100..100)")
    stiffness: float = Field(default=50.0, ge=0.0, le=100.0, description="Stiffness slider (0..100)")


#  Main Settings
class Settings(BaseSettings):
    """
    Main Settings class.
    Reads configuration from .env file or environment variables.
    """
    model_config = SettingsConfigDict(
        env_file=BASE_DIR / ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore"
    )

    env: AppEnvironment = Field(default=AppEnvironment.DEV, alias="APP_ENV")

    # Compose configs
    api: ApiConfig = Field(default_factory=ApiConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    tuning: TuningDefaults = Field(default_factory=TuningDefaults)


@lru_cache
def get_settings() -> Settings:
    """
    Creates and returns a (cached) instance of settings.
    Used for Dependency Injection.
    """
    return Settings()
