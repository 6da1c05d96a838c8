"""
Custom exceptions for the application.
"""


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass


class ListingError(BaseAppError):
    """Base exception for failures that abort a directory listing."""

    pass


class MalformedPathError(ListingError):
    """Exception raised when a request path cannot be interpreted."""

    pass


class ForbiddenPathError(ListingError):
    """Exception raised when a request path escapes the served root."""

    pass


class DirectoryNotFoundError(ListingError):
    """Exception raised when the requested directory does not exist."""

    pass


class DirectoryReadError(ListingError):
    """Exception raised when a directory exists but cannot be read."""

    pass


class RenderError(BaseAppError):
    """Exception raised when a listing page cannot be rendered."""

    pass
