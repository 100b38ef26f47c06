"""Utilities for mime-scout."""

from mime_scout.utils.console import ColorfulFormatter
from mime_scout.utils.extract import EXTRACT_TYPE_REGEXP, extract_type
from mime_scout.utils.path import extname

__all__ = [
    "ColorfulFormatter",
    "EXTRACT_TYPE_REGEXP",
    "extname",
    "extract_type",
]
