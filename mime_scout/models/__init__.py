"""Data models for mime-scout."""

from mime_scout.models.record import MimeRecord

__all__ = ["MimeRecord"]
