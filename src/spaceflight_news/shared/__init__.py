"""
Shared module for Space Flight News MCP.

Provides:
- Exception hierarchy
- Fetch result type
"""

from .exceptions import (
    APIError,
    ConfigurationError,
    DataError,
    ErrorCategory,
    HTTPStatusError,
    NetworkError,
    ParseError,
    SpaceflightNewsError,
)
from .result import FetchResult

__all__ = [
    "APIError",
    "ConfigurationError",
    "DataError",
    "ErrorCategory",
    "FetchResult",
    "HTTPStatusError",
    "NetworkError",
    "ParseError",
    "SpaceflightNewsError",
]
