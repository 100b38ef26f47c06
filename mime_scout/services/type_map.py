"""Extension map construction with source preference resolution.

Many extensions are claimed by more than one MIME type (IANA registrations,
Apache and nginx vendor tables). Exactly one type wins per extension:

- a higher ranked source beats a lower ranked one,
- on a tie an ``application/*`` type that already holds the extension keeps it,
  otherwise the later type takes over,
- ``application/octet-stream`` never holds an extension against a newcomer.

The winner is a function of the two competing records only. Enumeration order
matters just for equal-rank ties within the same class and for competition with
``application/octet-stream``, so callers that need stable output must supply
the database in a stable order.
"""

import logging
from collections.abc import Mapping
from typing import Final

from mime_scout.models import MimeRecord

logger = logging.getLogger(__name__)

# Least to most preferred. None stands for records without a source.
SOURCE_PREFERENCE: Final[tuple[str | None, ...]] = ("nginx", "apache", None, "iana")

OCTET_STREAM: Final[str] = "application/octet-stream"


def source_rank(source: str | None) -> int:
    """Rank a source tag; unknown tags rank like a missing one."""
    if source in SOURCE_PREFERENCE:
        return SOURCE_PREFERENCE.index(source)
    return SOURCE_PREFERENCE.index(None)


def _keeps_existing(existing: str, current: str, db: Mapping[str, MimeRecord]) -> bool:
    """Whether the type already mapped to an extension beats the newcomer."""
    if existing == OCTET_STREAM:
        return False

    from_rank = source_rank(db[existing].source)
    to_rank = source_rank(db[current].source)

    return from_rank > to_rank or (from_rank == to_rank and "application/" in existing)


def build_type_map(db: Mapping[str, MimeRecord]) -> dict[str, str]:
    """Build the extension -> MIME type map.

    Args:
        db: MIME database keyed by ``type/subtype``.

    Returns:
        Dict mapping each extension to exactly one type from ``db``.
    """
    types: dict[str, str] = {}
    overrides = 0

    for mime_type, record in db.items():
        for ext in record.extensions:
            existing = types.get(ext)
            if existing is not None:
                if _keeps_existing(existing, mime_type, db):
                    continue
                overrides += 1

            types[ext] = mime_type

    logger.debug(
        "Built extension map: %d extension(s) from %d type(s), %d override(s)",
        len(types),
        len(db),
        overrides,
    )
    return types


def build_extensions_map(db: Mapping[str, MimeRecord]) -> dict[str, tuple[str, ...]]:
    """Build the MIME type -> extensions map, skipping types without extensions."""
    return {
        mime_type: record.extensions
        for mime_type, record in db.items()
        if record.extensions
    }
