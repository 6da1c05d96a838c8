"""
FastAPI application factory serving static files with directory listings.
"""

import logging
from typing import Optional

from fastapi import FastAPI

import dirserve
from dirserve.api.static_files import ListingStaticFiles
from dirserve.config.settings import Settings, get_settings
from dirserve.container import DependencyContainer

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    """Configure process-wide logging once at startup."""
    logging.basicConfig(level=level, format=LOG_FORMAT)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the application.

    Args:
        settings: Server settings. Defaults to settings read from the environment.

    Returns:
        FastAPI app with the static layer mounted at '/'
    """
    settings = settings or get_settings()
    container = DependencyContainer(settings)

    app = FastAPI(title="dirserve", version=dirserve.__version__)
    app.state.container = container
    app.mount(
        "/",
        ListingStaticFiles(
            directory=settings.serve_root,
            fallback=container.get_listing_responder(),
        ),
        name="files",
    )
    logger.info(f"Serving directory {settings.serve_root}")
    return app
