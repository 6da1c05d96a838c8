"""
Listing renderer port interface defining the contract for page rendering.
"""

from abc import ABC, abstractmethod

from starlette.requests import Request
from starlette.responses import Response

from dirserve.entities.listing_view import ListingView


class ListingRendererPort(ABC):
    """Port interface for turning a listing view into an HTTP response body."""

    @abstractmethod
    def render(self, request: Request, view: ListingView) -> Response:
        """
        Render a listing view.

        Args:
            request: The incoming request
            view: The listing to render

        Returns:
            The rendered response

        Raises:
            RenderError: If the page cannot be produced
        """
        pass
