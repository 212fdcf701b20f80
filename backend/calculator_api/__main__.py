"""Server entry point: `python -m calculator_api`."""

import logging

import uvicorn

from calculator_api.config import get_settings
from calculator_api.infrastructure.observability import setup_logging
from calculator_api.main import create_app

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info("API is listening on port %d", settings.port)
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
