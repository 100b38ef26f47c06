"""MIME type queries over a built extension map."""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from mime_scout.models import MimeRecord
from mime_scout.services.type_map import build_extensions_map, build_type_map
from mime_scout.utils.extract import extract_type
from mime_scout.utils.path import extname

DEFAULT_TEXT_CHARSET = "UTF-8"


class MimeTypes:
    """MIME lookups against one database.

    The extension map is built once in the constructor and never changes,
    so an instance can be shared between threads without locking.

    Every query returns None for non-string input, empty input, and misses.

    Example:
        >>> mime = MimeTypes(load_database())
        >>> mime.lookup("index.html")
        'text/html'
        >>> mime.content_type("json")
        'application/json; charset=utf-8'
    """

    def __init__(self, db: Mapping[str, MimeRecord]) -> None:
        """Build the lookup maps.

        Args:
            db: MIME database keyed by ``type/subtype``.
        """
        self._db = MappingProxyType(dict(db))
        self._types = MappingProxyType(build_type_map(self._db))
        self._extensions = MappingProxyType(build_extensions_map(self._db))

    @property
    def db(self) -> Mapping[str, MimeRecord]:
        """Read-only view of the source database."""
        return self._db

    @property
    def types(self) -> Mapping[str, str]:
        """Read-only extension -> MIME type map."""
        return self._types

    @property
    def extensions(self) -> Mapping[str, tuple[str, ...]]:
        """Read-only MIME type -> extensions map."""
        return self._extensions

    def lookup(self, path: Any) -> str | None:
        """Look up the MIME type for a file path or extension.

        Accepts ``"html"``, ``".html"`` or ``"/var/www/index.HTML"``.
        """
        if not path or not isinstance(path, str):
            return None

        # "x." makes a bare extension look like a filename
        ext = extname("x." + path).lower()[1:]
        if not ext:
            return None
        return self._types.get(ext)

    def extension(self, mime_type: Any) -> str | None:
        """Get the default extension for a MIME type."""
        if not mime_type or not isinstance(mime_type, str):
            return None

        extracted = extract_type(mime_type)
        if extracted is None:
            return None

        record = self._db.get(extracted)
        if record is None or not record.extensions:
            return None
        return record.extensions[0] or None

    def charset(self, mime_type: Any) -> str | None:
        """Get the default charset for a MIME type.

        Explicit database charsets win; other ``text/*`` types default to UTF-8.
        """
        if not mime_type or not isinstance(mime_type, str):
            return None

        extracted = extract_type(mime_type)
        if extracted is None:
            return None

        record = self._db.get(extracted)
        if record is not None and record.charset:
            return record.charset

        if "text/" in extracted:
            return DEFAULT_TEXT_CHARSET

        return None

    def content_type(self, value: Any) -> str | None:
        """Build a Content-Type header value from a MIME type or extension.

        Values containing ``/`` are taken as MIME types as-is; anything else
        goes through lookup(). A charset parameter is appended when known.
        """
        if not value or not isinstance(value, str):
            return None

        mime = value if "/" in value else self.lookup(value)
        if not mime:
            return None

        if "charset" in mime:
            return mime

        charset = self.charset(mime)
        if charset:
            mime = f"{mime}; charset={charset.lower()}"

        return mime
