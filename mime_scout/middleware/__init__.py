"""mime-scout middleware components."""

from mime_scout.middleware.base import MimeScoutMiddleware
from mime_scout.middleware.errors import ErrorHandlingMiddleware
from mime_scout.middleware.logging import LoggingMiddleware

__all__ = [
    "ErrorHandlingMiddleware",
    "LoggingMiddleware",
    "MimeScoutMiddleware",
]
