import asyncio
import structlog
import uvicorn

from .config import get_settings
from .infrastructure.logging import setup_logging
from .application.tune_service import TuneService
from .api.server import create_app

logger = structlog.get_logger()


async def main():
    settings = get_settings()
    setup_logging(settings.env, settings.logging.level)

    service = TuneService()
    api_app = create_app(service, settings)
    http_config = uvicorn.Config(
        api_app,
        host=settings.api.host,
        port=settings.api.port,
        log_level=settings.logging.level.lower(),
    )
    http_server = uvicorn.Server(http_config)

    logger.info("api_server_starting", host=settings.api.host, port=settings.api.port)

    try:
        # Blocks until uvicorn receives a shutdown signal
        await http_server.serve()
    except asyncio.CancelledError:
        pass
    finally:
        logger.info("shutdown_complete")


def run() -> None:
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    run()
