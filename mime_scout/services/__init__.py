"""Services for mime-scout."""

from mime_scout.services.database import DatabaseError, load_database, parse_database
from mime_scout.services.lookup import MimeTypes
from mime_scout.services.state import (
    get_mime_types,
    get_settings,
    reset_state,
    set_mime_types,
    set_settings,
)
from mime_scout.services.type_map import (
    SOURCE_PREFERENCE,
    build_extensions_map,
    build_type_map,
    source_rank,
)

__all__ = [
    "DatabaseError",
    "MimeTypes",
    "SOURCE_PREFERENCE",
    "build_extensions_map",
    "build_type_map",
    "get_mime_types",
    "get_settings",
    "load_database",
    "parse_database",
    "reset_state",
    "set_mime_types",
    "set_settings",
    "source_rank",
]
