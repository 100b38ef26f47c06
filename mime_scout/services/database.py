"""MIME database loading.

The database uses the mime-db JSON layout: one object keyed by
``type/subtype`` whose values carry ``source``, ``extensions`` and ``charset``.
"""

import json
import logging
from importlib import resources
from pathlib import Path

from mime_scout.models import MimeRecord

logger = logging.getLogger(__name__)

BUNDLED_DATABASE = "data/db.json"


class DatabaseError(ValueError):
    """MIME database could not be loaded."""

    pass


def _read_bundled() -> str:
    """Read the database shipped inside the package."""
    return resources.files("mime_scout").joinpath(BUNDLED_DATABASE).read_text(
        encoding="utf-8"
    )


def parse_database(text: str, origin: str = "<string>") -> dict[str, MimeRecord]:
    """Parse database JSON text into records.

    Args:
        text: JSON document.
        origin: Label used in error messages.

    Returns:
        Records keyed by MIME type, in document order.

    Raises:
        DatabaseError: If the document is not valid JSON or has the wrong shape.
    """
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as e:
        raise DatabaseError(f"Invalid JSON in MIME database {origin}: {e}") from e

    if not isinstance(raw, dict):
        raise DatabaseError(
            f"MIME database {origin} must be a JSON object, got {type(raw).__name__}"
        )

    db: dict[str, MimeRecord] = {}
    for mime_type, entry in raw.items():
        if not isinstance(entry, dict):
            raise DatabaseError(f"Entry {mime_type!r} in {origin} must be an object")
        try:
            db[mime_type] = MimeRecord.from_dict(entry)
        except TypeError as e:
            raise DatabaseError(f"Entry {mime_type!r} in {origin}: {e}") from e

    return db


def load_database(path: str | Path | None = None) -> dict[str, MimeRecord]:
    """Load the MIME database.

    Args:
        path: JSON file to load. Defaults to the bundled database.

    Returns:
        Records keyed by MIME type.

    Raises:
        DatabaseError: If the file cannot be read or parsed.
    """
    origin = "bundled database" if path is None else str(path)
    try:
        text = _read_bundled() if path is None else Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise DatabaseError(f"Cannot read MIME database {origin}: {e}") from e

    db = parse_database(text, origin=origin)
    logger.info("Loaded %d MIME type(s) from %s", len(db), origin)
    return db
