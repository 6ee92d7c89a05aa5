import structlog
import logging
import sys
from enum import Enum
from typing import Any, MutableMapping


def _enum_values(logger: Any, method_name: str, event_dict: MutableMapping[str, Any]) -> MutableMapping[str, Any]:
    """
    Render enum members by value so JSON logs stay flat.
    """
    for key, value in event_dict.items():
        if isinstance(value, Enum):
            event_dict[key] = value.value
    return event_dict


def setup_logging(env: str, level: str = "INFO") -> None:
    """
    Configure structlog based on environment.
    """
    env = getattr(env, "value", env)
    processors = [
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.add_log_level,
        _enum_values,
    ]

    if env in ("local", "development"):
        # Development: Colored Console
        processors.append(structlog.dev.ConsoleRenderer())
    else:
        # Production: JSON
        processors.append(structlog.processors.JSONRenderer())

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # Route standard logging (uvicorn, fastapi) to stdout as well
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper(), logging.INFO),
    )
