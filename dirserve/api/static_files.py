"""
Static file serving with a fallback for paths that are not regular files.
"""

from typing import Awaitable, Callable

from starlette.exceptions import HTTPException
from starlette.requests import Request
from starlette.responses import Response
from starlette.staticfiles import StaticFiles
from starlette.types import Scope

Fallback = Callable[[Request], Awaitable[Response]]

# 401 is what StaticFiles raises for a PermissionError during lookup
FALLBACK_STATUSES = (401, 404)


class ListingStaticFiles(StaticFiles):
    """
    StaticFiles that hands paths it cannot serve over to a fallback handler.

    Regular files keep the full static semantics (content type, ranges,
    conditional requests). Directories, missing paths and paths whose lookup
    hit a permission error (401 from StaticFiles) go to ``fallback``.
    """

    def __init__(self, *, directory: str, fallback: Fallback, **kwargs):
        super().__init__(directory=directory, **kwargs)
        self.fallback = fallback

    async def get_response(self, path: str, scope: Scope) -> Response:
        try:
            return await super().get_response(path, scope)
        except HTTPException as exc:
            if exc.status_code not in FALLBACK_STATUSES:
                raise
        return await self.fallback(Request(scope))
