"""
Listing responder: turns a request that the static layer could not serve into
a directory listing or an error response.
"""

import logging
from typing import Optional

from starlette.concurrency import run_in_threadpool
from starlette.requests import Request
from starlette.responses import JSONResponse, PlainTextResponse, Response

from dirserve.api.schemas import ListingResponse
from dirserve.exceptions import (
    DirectoryNotFoundError,
    DirectoryReadError,
    ForbiddenPathError,
    MalformedPathError,
    RenderError,
)
from dirserve.ports.rendering.listing_renderer_port import ListingRendererPort
from dirserve.use_cases.listing.build_listing import BuildListingUseCase
from dirserve.utils.segment_codec import encode_segment


def raw_request_path(request: Request) -> str:
    """
    Get the request path as sent by the client, still percent-encoded.

    Falls back to re-encoding the decoded path when the server does not
    provide ``raw_path``.
    """
    raw = request.scope.get("raw_path")
    if raw:
        return raw.split(b"?", 1)[0].decode("utf-8", errors="replace")
    path = request.scope.get("path", "")
    if not path.startswith("/"):
        return path
    return "/" + "/".join(encode_segment(s) for s in path[1:].split("/"))


def wants_json(request: Request) -> bool:
    accept = request.headers.get("accept", "")
    return "application/json" in accept and "text/html" not in accept


class ListingResponder:
    """Fallback handler producing directory listings."""

    def __init__(
        self,
        build_listing: BuildListingUseCase,
        renderer: ListingRendererPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._build_listing = build_listing
        self._renderer = renderer
        self._logger = logger or logging.getLogger(__name__)

    async def __call__(self, request: Request) -> Response:
        return await self.respond(request)

    async def respond(self, request: Request) -> Response:
        """
        Build and render the listing for the request path.

        Args:
            request: Request the static layer could not serve as a file

        Returns:
            The rendered listing, or a plain-text error response
        """
        request_path = raw_request_path(request)
        try:
            view = await run_in_threadpool(self._build_listing.execute, request_path)
        except MalformedPathError as e:
            self._logger.warning(f"Malformed request path: {e}")
            return PlainTextResponse(str(e), status_code=400)
        except ForbiddenPathError as e:
            self._logger.warning(f"Rejected request path: {e}")
            return PlainTextResponse(str(e), status_code=403)
        except DirectoryNotFoundError as e:
            return PlainTextResponse(str(e), status_code=404)
        except DirectoryReadError as e:
            self._logger.error(f"Directory read failed: {e}")
            return PlainTextResponse(str(e), status_code=500)

        if wants_json(request):
            return JSONResponse(ListingResponse.from_view(view).model_dump())

        try:
            return await run_in_threadpool(self._renderer.render, request, view)
        except RenderError as e:
            return PlainTextResponse(
                f"Failed to render template. Error: {e}", status_code=500
            )
