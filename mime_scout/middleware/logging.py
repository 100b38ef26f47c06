"""Logging middleware for MIME query tracking."""

import logging
import time
from typing import Any

from fastmcp.server.middleware import MiddlewareContext

from mime_scout.middleware.base import MimeScoutMiddleware


class LoggingMiddleware(MimeScoutMiddleware):
    """Logs tool calls and resource reads with outcome and duration.

    Tool results are summarized as ``hit`` or ``miss`` depending on whether
    the lookup produced a value.

    Example:
        >>> mcp.add_middleware(LoggingMiddleware(include_payloads=True))
    """

    def __init__(
        self,
        logger: logging.Logger | None = None,
        include_payloads: bool = False,
        max_payload_length: int = 500,
        slow_threshold_ms: float = 1000.0,
    ) -> None:
        """Initialize logging middleware.

        Args:
            logger: Optional custom logger.
            include_payloads: Log result payloads at DEBUG.
            max_payload_length: Truncate logged payloads to this many chars.
            slow_threshold_ms: Calls slower than this are logged at WARNING.
        """
        super().__init__(logger=logger)
        self.include_payloads = include_payloads
        self.max_payload_length = max_payload_length
        self.slow_threshold_ms = slow_threshold_ms

    def _truncate(self, data: Any) -> str:
        text = str(data)
        if len(text) > self.max_payload_length:
            return text[: self.max_payload_length] + "... [truncated]"
        return text

    def _format_args(self, args: dict[str, Any] | None) -> str:
        if not args:
            return "()"
        return "(" + ", ".join(f"{k}={v!r}" for k, v in args.items()) + ")"

    def _summarize_result(self, result: Any) -> str:
        """Summarize a tool or resource result for the log line."""
        structured = getattr(result, "structured_content", None)
        if isinstance(structured, dict) and "result" in structured:
            return "miss" if structured["result"] is None else "hit"
        if isinstance(result, dict) and "result" in result:
            return "miss" if result["result"] is None else "hit"
        if isinstance(result, (list, tuple)):
            return f"{len(result)} item(s)"
        if isinstance(result, str):
            return f"{len(result)} chars"
        return type(result).__name__

    def _log_done(self, kind: str, name: str, result: Any, duration_ms: float) -> None:
        slow = duration_ms >= self.slow_threshold_ms
        self.logger.log(
            logging.WARNING if slow else logging.INFO,
            "<<< %s: %s -> %s [%.1fms%s]",
            kind,
            name,
            self._summarize_result(result),
            duration_ms,
            " SLOW" if slow else "",
        )
        if self.include_payloads and result is not None:
            self.logger.debug("    Result: %s", self._truncate(result))

    async def on_call_tool(
        self,
        context: MiddlewareContext,
        call_next: Any,
    ) -> Any:
        """Log tool calls with name, arguments, outcome, and timing."""
        start = time.perf_counter()
        tool_name = getattr(context.message, "name", "unknown")
        args = getattr(context.message, "arguments", None)

        self.logger.info(">>> TOOL: %s%s", tool_name, self._format_args(args))

        try:
            result = await call_next(context)
        except Exception as e:
            duration_ms = (time.perf_counter() - start) * 1000
            self.logger.error(
                "!!! TOOL: %s -> %s: %s [%.1fms]",
                tool_name,
                type(e).__name__,
                e,
                duration_ms,
            )
            raise

        self._log_done("TOOL", tool_name, result, (time.perf_counter() - start) * 1000)
        return result

    async def on_read_resource(
        self,
        context: MiddlewareContext,
        call_next: Any,
    ) -> Any:
        """Log resource reads with URI and timing."""
        start = time.perf_counter()
        uri = str(getattr(context.message, "uri", "unknown"))

        self.logger.info(">>> RESOURCE: %s", uri)

        try:
            result = await call_next(context)
        except Exception as e:
            duration_ms = (time.perf_counter() - start) * 1000
            self.logger.error(
                "!!! RESOURCE: %s -> %s: %s [%.1fms]",
                uri,
                type(e).__name__,
                e,
                duration_ms,
            )
            raise

        self._log_done("RESOURCE", uri, result, (time.perf_counter() - start) * 1000)
        return result
