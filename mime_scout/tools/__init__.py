"""MCP tools for mime-scout."""

from mime_scout.tools.mime import (
    mime_charset,
    mime_content_type,
    mime_extension,
    mime_lookup,
)

__all__ = ["mime_charset", "mime_content_type", "mime_extension", "mime_lookup"]
