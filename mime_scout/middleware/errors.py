"""Error logging middleware.

Lookups never raise, so anything that reaches this layer is either a bad
request from the client or a broken MIME database on the server side.
"""

import logging
from typing import Any

import pydantic
from fastmcp.exceptions import NotFoundError, ValidationError
from fastmcp.server.middleware import MiddlewareContext

from mime_scout.middleware.base import MimeScoutMiddleware
from mime_scout.services.database import DatabaseError

# Client mistakes: unknown tool/resource names or malformed arguments
CLIENT_ERRORS: tuple[type[Exception], ...] = (
    NotFoundError,
    ValidationError,
    pydantic.ValidationError,
)


class ErrorHandlingMiddleware(MimeScoutMiddleware):
    """Classifies and logs exceptions raised below it, then re-raises them.

    - client errors are logged at WARNING without a traceback,
    - ``DatabaseError`` is logged at ERROR with a pointer to the database setting,
    - anything else is logged at ERROR, with a traceback if requested.
    """

    def __init__(
        self,
        logger: logging.Logger | None = None,
        include_traceback: bool = False,
    ) -> None:
        """Initialize error handling middleware.

        Args:
            logger: Optional custom logger.
            include_traceback: Log the full traceback for unexpected errors.
        """
        super().__init__(logger=logger)
        self.include_traceback = include_traceback

    def _target(self, context: MiddlewareContext) -> str:
        """Tool name or resource URI the request was aimed at."""
        message = context.message
        target = getattr(message, "name", None) or getattr(message, "uri", None)
        return f"{context.method} {target}" if target else str(context.method)

    async def on_message(
        self,
        context: MiddlewareContext,
        call_next: Any,
    ) -> Any:
        """Run the next handler and log any exception it raises."""
        try:
            return await call_next(context)
        except CLIENT_ERRORS as e:
            self.logger.warning(
                "Rejected %s: %s: %s", self._target(context), type(e).__name__, e
            )
            raise
        except DatabaseError as e:
            self.logger.error(
                "MIME database unavailable during %s: %s "
                "(check MIME_SCOUT_DATABASE or unset it to use the bundled db)",
                self._target(context),
                e,
            )
            raise
        except Exception as e:
            self.logger.error(
                "Unexpected error in %s: %s: %s",
                self._target(context),
                type(e).__name__,
                e,
                exc_info=self.include_traceback,
            )
            raise
