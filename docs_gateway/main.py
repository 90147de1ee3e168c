"""App factory for the Document Store Gateway.

- Installs the CORS gate (single configured origin, OPTIONS short-circuit)
- Renders every error as a plain-text body
- Registers routers for health, documents, configuration and files
- Attaches the immutable settings and the storage engine to `app.state`

ASGI entrypoint (uvicorn): `uvicorn docs_gateway.main:create_app --factory`
"""

import logging
from typing import Optional

from fastapi import FastAPI

from . import __version__
from .core.config import Settings, load_settings
from .core.handlers import register_exception_handlers
from .middleware import CORSGateMiddleware
from .routers import docs, files, health, site_config
from .storage import DocumentStore

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the ASGI application.

    Args:
        settings: configuration to serve with; loaded from the environment
            (and validated) when omitted

    Raises:
        ConfigurationError: if settings are loaded here and the documents
            root does not exist
    """
    if settings is None:
        settings = load_settings()

    app = FastAPI(
        title="Document Store Gateway",
        version=__version__,
        description="Filesystem-backed JSON documents and configuration for the docs editor",
    )
    app.state.settings = settings
    app.state.store = DocumentStore(settings)

    app.add_middleware(CORSGateMiddleware, allow_origin=settings.allow_origin)
    register_exception_handlers(app)

    # Register routers
    app.include_router(health.router)
    app.include_router(docs.router)
    app.include_router(site_config.router)
    app.include_router(files.router)

    logger.debug("app created for docs root %s", settings.docs_path)
    return app
