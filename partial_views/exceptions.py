"""Custom exceptions for partial view rendering with structured error codes."""

from collections.abc import Sequence
from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Error codes for structured error reporting."""

    # Generic errors
    VIEW_ERROR = "VIEW_ERROR"

    # Lookup errors
    VIEW_NOT_FOUND = "VIEW_NOT_FOUND"
    INVALID_VIEW_NAME = "INVALID_VIEW_NAME"

    # Configuration errors
    CONFIG_ERROR = "CONFIG_ERROR"
    CONFIG_INVALID = "CONFIG_INVALID"


class ViewRenderingException(Exception):
    """Base exception for view rendering errors.

    All custom exceptions should inherit from this class to ensure
    consistent error handling across the library.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.VIEW_ERROR,
        details: dict[str, Any] | None = None,
    ):
        """Initialize view rendering exception.

        Args:
            message: Human-readable error message
            code: Error code from ErrorCode enum
            details: Additional error context/details
        """
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(message)


class ViewNotFoundException(ViewRenderingException):
    """No lookup strategy could locate the requested view."""

    HEADER = "The {kind} '{name}' was not found. The following locations were searched:"
    FALLBACK_HEADER = (
        "In addition the fallback {kind} '{name}' was not found. The following locations were searched:"
    )

    def __init__(
        self,
        view_name: str,
        searched_locations: Sequence[str],
        fallback_name: str | None = None,
        fallback_searched_locations: Sequence[str] = (),
        kind: str = "partial view",
    ):
        self.view_name = view_name
        self.searched_locations = list(searched_locations)
        self.fallback_name = fallback_name
        self.fallback_searched_locations = list(fallback_searched_locations)

        lines = [self.HEADER.format(kind=kind, name=view_name), *self.searched_locations]
        details: dict[str, Any] = {
            "view_name": view_name,
            "searched_locations": self.searched_locations,
        }
        if fallback_name:
            lines += [self.FALLBACK_HEADER.format(kind=kind, name=fallback_name), *self.fallback_searched_locations]
            details["fallback_name"] = fallback_name
            details["fallback_searched_locations"] = self.fallback_searched_locations

        super().__init__("\n".join(lines), code=ErrorCode.VIEW_NOT_FOUND, details=details)


class InvalidViewNameException(ViewRenderingException):
    """View name is missing or blank."""

    def __init__(self, message: str = "View name must be a non-empty string", details: dict[str, Any] | None = None):
        super().__init__(message, code=ErrorCode.INVALID_VIEW_NAME, details=details)


class ConfigurationException(ViewRenderingException):
    """Configuration errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.CONFIG_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, details)
