"""Process entrypoint: `python -m docs_gateway` or the `docs-gateway` script."""

import logging
import sys

import uvicorn

from .core.config import load_settings
from .core.errors import ConfigurationError
from .core.logging import setup_logging
from .main import create_app

logger = logging.getLogger("docs_gateway")


def main() -> int:
    setup_logging()
    try:
        settings = load_settings()
    except ConfigurationError as e:
        logger.critical("Failed to load config: %s", e)
        return 1

    setup_logging(settings.log_level)
    app = create_app(settings)

    logger.info("Server starting on http://localhost:%d", settings.port)
    logger.info("Docs path: %s", settings.docs_path)
    logger.info("Config path: %s", settings.config_path)
    logger.info("CORS enabled for: %s", settings.allow_origin)

    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
    return 0


if __name__ == "__main__":
    sys.exit(main())
