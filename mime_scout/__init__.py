"""mime-scout: MIME type lookups backed by a static type database.

Module-level functions query the process default registry, which is built
from the bundled database (or ``MIME_SCOUT_DATABASE``) when this package is
imported. Every query returns None when there is no answer.

The bundled database is a subset of mime-db covering common web, document,
media and archive types. Set ``MIME_SCOUT_DATABASE`` to the path of a full
mime-db ``db.json`` to resolve everything mime-db knows.

    >>> import mime_scout
    >>> mime_scout.lookup("report.json")
    'application/json'
    >>> mime_scout.content_type("html")
    'text/html; charset=utf-8'
"""

from typing import Any

from mime_scout.models import MimeRecord
from mime_scout.services import DatabaseError, MimeTypes, get_mime_types, load_database


def lookup(path: Any) -> str | None:
    """Look up the MIME type for a file path or extension."""
    return get_mime_types().lookup(path)


def extension(mime_type: Any) -> str | None:
    """Get the default extension for a MIME type."""
    return get_mime_types().extension(mime_type)


def charset(mime_type: Any) -> str | None:
    """Get the default charset for a MIME type."""
    return get_mime_types().charset(mime_type)


def content_type(value: Any) -> str | None:
    """Create a full Content-Type header value from a MIME type or extension."""
    return get_mime_types().content_type(value)


# Built eagerly so the map exists before the first query
types = get_mime_types().types
extensions = get_mime_types().extensions

__all__ = [
    "DatabaseError",
    "MimeRecord",
    "MimeTypes",
    "charset",
    "content_type",
    "extension",
    "extensions",
    "load_database",
    "lookup",
    "types",
]
