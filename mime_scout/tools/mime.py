"""MIME lookup tools.

Each tool returns ``{"input": ..., "result": ...}`` where ``result`` is None
when there is no answer. Tools never raise for unknown or malformed input.
"""

import logging
from typing import Any

from mime_scout.services import get_mime_types

logger = logging.getLogger(__name__)


async def mime_lookup(path: str) -> dict[str, Any]:
    """Look up the MIME type for a file path or extension.

    Args:
        path: File path, filename, or bare extension ("html", ".html",
            "/var/www/index.html").

    Returns:
        Dict with the input and the MIME type, or None if unknown.
    """
    return {"input": path, "result": get_mime_types().lookup(path)}


async def mime_extension(mime_type: str) -> dict[str, Any]:
    """Get the default file extension for a MIME type.

    Args:
        mime_type: MIME type, optionally with parameters ("text/html; charset=utf-8").

    Returns:
        Dict with the input and the extension (no dot), or None if unknown.
    """
    return {"input": mime_type, "result": get_mime_types().extension(mime_type)}


async def mime_charset(mime_type: str) -> dict[str, Any]:
    """Get the default charset for a MIME type.

    Args:
        mime_type: MIME type such as "application/json".

    Returns:
        Dict with the input and the charset, or None if there is none.
    """
    return {"input": mime_type, "result": get_mime_types().charset(mime_type)}


async def mime_content_type(value: str) -> dict[str, Any]:
    """Build a full Content-Type header value.

    Args:
        value: MIME type ("text/html") or extension/path ("html", "a/b.json").

    Returns:
        Dict with the input and the header value, or None if unresolvable.
    """
    result = get_mime_types().content_type(value)
    if result is None:
        logger.debug("No content type for %r", value)
    return {"input": value, "result": result}
