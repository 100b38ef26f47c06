"""mime-scout FastMCP server.

Thin wrapper that exposes the MIME queries as MCP tools and resources.
All lookup logic lives in services/.
"""

import logging
import sys
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from fastmcp import FastMCP
from starlette.requests import Request
from starlette.responses import PlainTextResponse

from mime_scout.config import Settings
from mime_scout.middleware import ErrorHandlingMiddleware, LoggingMiddleware
from mime_scout.resources import (
    extensions_resource,
    type_record_resource,
    types_resource,
)
from mime_scout.services import get_mime_types, get_settings
from mime_scout.tools import (
    mime_charset,
    mime_content_type,
    mime_extension,
    mime_lookup,
)
from mime_scout.utils.console import ColorfulFormatter


def _configure_logging(settings: Settings) -> None:
    """Configure colorful logging for the mime_scout package.

    Called at module load time so loggers are ready however the server starts.
    """
    use_colors = settings.log_colors and sys.stderr.isatty()

    package_logger = logging.getLogger("mime_scout")
    package_logger.setLevel(getattr(logging, settings.log_level, logging.INFO))

    # Only add handler if not already configured
    if not package_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(ColorfulFormatter(use_colors=use_colors))
        package_logger.addHandler(handler)
        package_logger.propagate = False

    for noisy_logger in ["uvicorn", "uvicorn.access", "uvicorn.error", "fastmcp", "starlette"]:
        logging.getLogger(noisy_logger).setLevel(logging.WARNING)


_configure_logging(get_settings())

logger = logging.getLogger(__name__)


@asynccontextmanager
async def app_lifespan(server: FastMCP) -> AsyncIterator[dict[str, Any]]:
    """Make sure the MIME registry is built before serving requests.

    Args:
        server: The FastMCP server instance

    Yields:
        Dict with database statistics
    """
    logger.info("mime-scout server starting up")

    mime_types = get_mime_types()
    stats = {
        "types": len(mime_types.db),
        "extensions": len(mime_types.types),
    }
    logger.info(
        "MIME registry ready: %d type(s), %d extension(s)",
        stats["types"],
        stats["extensions"],
    )

    try:
        yield stats
    finally:
        logger.info("mime-scout server shutdown complete")


def configure_middleware(server: FastMCP, settings: Settings) -> None:
    """Add middleware in order: ErrorHandling -> Logging.

    Args:
        server: The FastMCP server to configure.
        settings: Logging options (payloads, slow threshold, tracebacks).
    """
    server.add_middleware(
        ErrorHandlingMiddleware(include_traceback=settings.include_traceback)
    )
    server.add_middleware(
        LoggingMiddleware(
            include_payloads=settings.log_payloads,
            slow_threshold_ms=settings.slow_threshold_ms,
        )
    )


def create_server() -> FastMCP:
    """Create the MCP server with middleware, tools and resources.

    Returns:
        Configured FastMCP server instance
    """
    settings = get_settings()
    server = FastMCP("mime_scout", lifespan=app_lifespan)

    configure_middleware(server, settings)

    server.tool()(mime_lookup)
    server.tool()(mime_extension)
    server.tool()(mime_charset)
    server.tool()(mime_content_type)

    server.resource("mime://types", mime_type="application/json")(types_resource)
    server.resource("mime://extensions", mime_type="application/json")(
        extensions_resource
    )
    server.resource("mime://type/{kind}/{subtype}", mime_type="application/json")(
        type_record_resource
    )

    @server.custom_route("/health", methods=["GET"])
    async def health_check(request: Request) -> PlainTextResponse:
        """Health check endpoint."""
        client_host = request.client.host if request.client else "unknown"
        logger.debug("Health check from %s", client_host)
        return PlainTextResponse("OK")

    return server


# Default server instance
mcp = create_server()
