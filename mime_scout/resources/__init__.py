"""MCP resources for mime-scout."""

from mime_scout.resources.types import (
    extensions_resource,
    type_record_resource,
    types_resource,
)

__all__ = ["extensions_resource", "type_record_resource", "types_resource"]
