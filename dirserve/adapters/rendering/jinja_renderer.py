"""
Jinja2 adapter implementation for rendering directory listings.
"""

import logging
from pathlib import Path
from typing import Optional

from fastapi.templating import Jinja2Templates
from jinja2 import TemplateError
from starlette.requests import Request
from starlette.responses import Response
from typing_extensions import override

from dirserve.entities.listing_view import ListingView
from dirserve.exceptions import RenderError
from dirserve.ports.rendering.listing_renderer_port import ListingRendererPort

DEFAULT_TEMPLATES_DIR = str(Path(__file__).resolve().parents[2] / "templates")
DEFAULT_TEMPLATE_NAME = "directory.html"


def format_size(value: Optional[int]) -> str:
    """Human readable byte count, '-' for directories."""
    if value is None:
        return "-"
    if value < 1024:
        return f"{value} B"
    size = value / 1024
    for unit in ("KB", "MB"):
        if size < 1024:
            return f"{size:.1f} {unit}"
        size /= 1024
    return f"{size:.1f} GB"


class JinjaListingRenderer(ListingRendererPort):
    """Render listings to HTML with Jinja2 templates."""

    def __init__(
        self,
        templates_dir: Optional[str] = None,
        template_name: str = DEFAULT_TEMPLATE_NAME,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the renderer.

        Args:
            templates_dir: Directory holding the listing template. Defaults to the packaged templates.
            template_name: Name of the listing template inside ``templates_dir``
            logger: Logger instance to use for logging
        """
        self._templates = Jinja2Templates(directory=templates_dir or DEFAULT_TEMPLATES_DIR)
        self._templates.env.filters["format_size"] = format_size
        self._template_name = template_name
        self._logger = logger or logging.getLogger(__name__)

    @override
    def render(self, request: Request, view: ListingView) -> Response:
        """
        Render a listing view as an HTML page.

        Raises:
            RenderError: If the template is missing or fails to render
        """
        try:
            return self._templates.TemplateResponse(
                request,
                self._template_name,
                {
                    "directory_name": view.label,
                    "root_name": view.root_name,
                    "parent_href": view.parent_href,
                    "items": view.entries,
                },
            )
        except TemplateError as e:
            self._logger.error(f"Failed to render {self._template_name}: {e}")
            raise RenderError(str(e)) from e
        except Exception as e:
            self._logger.error(f"Error while rendering {self._template_name}: {e}")
            raise RenderError(str(e)) from e
