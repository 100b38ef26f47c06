"""MIME database record model."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class MimeRecord:
    """One entry of the MIME type database."""

    source: str | None = None
    extensions: tuple[str, ...] = field(default_factory=tuple)
    charset: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MimeRecord":
        """Build a record from a mime-db style JSON entry.

        Unknown keys (``compressible`` and friends) are ignored.

        Args:
            data: Raw entry, e.g. ``{"source": "iana", "extensions": ["html"]}``.

        Returns:
            Parsed MimeRecord.

        Raises:
            TypeError: If a known field has the wrong type.
        """
        source = data.get("source")
        if source is not None and not isinstance(source, str):
            raise TypeError(f"source must be a string, got {type(source).__name__}")

        extensions = data["extensions"] if "extensions" in data else []
        if extensions is None:
            extensions = []
        elif not isinstance(extensions, list) or not all(
            isinstance(ext, str) for ext in extensions
        ):
            raise TypeError("extensions must be a list of strings")

        charset = data.get("charset")
        if charset is not None and not isinstance(charset, str):
            raise TypeError(f"charset must be a string, got {type(charset).__name__}")

        return cls(source=source, extensions=tuple(extensions), charset=charset)
