"""MIME type string extraction."""

import re
from typing import Final

# type "/" subtype, each segment capped at 127 chars, followed by ";", space or end
EXTRACT_TYPE_REGEXP: Final[re.Pattern[str]] = re.compile(
    r"^\s*([A-Za-z0-9][A-Za-z0-9!#$&^_-]{0,126}/[A-Za-z0-9][A-Za-z0-9!#$&^_.+-]{0,126})(?:;|\s|$)"
)


def extract_type(value: str) -> str | None:
    """Extract the ``type/subtype`` token from a header-like string.

    Parameters after ``;`` are discarded. The input is lowercased first.

    Args:
        value: Raw string such as ``"Text/HTML; charset=utf-8"``.

    Returns:
        Lowercase ``type/subtype``, or None if the string does not start with one.
    """
    match = EXTRACT_TYPE_REGEXP.match(value.lower())
    if not match:
        return None
    return match.group(1)
