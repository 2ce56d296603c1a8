"""
Exception Hierarchy for Space Flight News MCP.

Exception Hierarchy:
    SpaceflightNewsError (base)
    ├── APIError
    │   ├── NetworkError
    │   └── HTTPStatusError
    ├── DataError
    │   └── ParseError
    └── ConfigurationError

These are raised inside the fetch boundary and converted into
``FetchResult`` failures before they reach a tool.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCategory(Enum):
    """Categories for error classification."""

    API = "api"
    DATA = "data"
    CONFIGURATION = "config"
    NETWORK = "network"


class SpaceflightNewsError(Exception):
    """
    Base exception for all Space Flight News errors.

    Provides:
    - Category classification
    - Retry hint (informational only, nothing retries automatically)
    - Dict form for diagnostics
    """

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory = ErrorCategory.API,
        retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.category = category
        self.retryable = retryable

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        return {
            "error": str(self),
            "type": type(self).__name__,
            "category": self.category.value,
            "retryable": self.retryable,
        }


# =============================================================================
# API Errors
# =============================================================================


class APIError(SpaceflightNewsError):
    """Base class for upstream API errors."""

    def __init__(self, message: str, *, category: ErrorCategory = ErrorCategory.API, retryable: bool = True) -> None:
        super().__init__(message, category=category, retryable=retryable)


class NetworkError(APIError):
    """Raised for DNS, connection and timeout failures."""

    def __init__(self, message: str = "Network connection failed") -> None:
        super().__init__(message, category=ErrorCategory.NETWORK, retryable=True)


class HTTPStatusError(APIError):
    """Raised when the upstream API answers with a non-2xx status."""

    def __init__(self, status_code: int, message: str | None = None) -> None:
        super().__init__(
            message or f"HTTP error! status: {status_code}",
            retryable=status_code == 429 or status_code >= 500,
        )
        self.status_code = status_code

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["status_code"] = self.status_code
        return result


# =============================================================================
# Data Errors
# =============================================================================


class DataError(SpaceflightNewsError):
    """Base class for payload errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message, category=ErrorCategory.DATA, retryable=False)


class ParseError(DataError):
    """Raised when a response body is not valid JSON or has the wrong shape."""

    def __init__(self, message: str = "Invalid JSON response", *, source: str | None = None) -> None:
        super().__init__(f"{source}: {message}" if source else message)
        self.source = source


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(SpaceflightNewsError):
    """Raised for invalid server configuration."""

    def __init__(self, message: str) -> None:
        super().__init__(message, category=ErrorCategory.CONFIGURATION, retryable=False)


__all__ = [
    "APIError",
    "ConfigurationError",
    "DataError",
    "ErrorCategory",
    "HTTPStatusError",
    "NetworkError",
    "ParseError",
    "SpaceflightNewsError",
]
