"""Global state management for mime-scout."""

import logging

from mime_scout.config import Settings
from mime_scout.services.database import load_database
from mime_scout.services.lookup import MimeTypes

logger = logging.getLogger(__name__)

# Global state (initialized on first access)
_settings: Settings | None = None
_mime_types: MimeTypes | None = None


def get_settings() -> Settings:
    """Get or create settings."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def get_mime_types() -> MimeTypes:
    """Get or build the default MimeTypes instance.

    Uses the database at ``Settings.database_path``, or the bundled one.
    """
    global _mime_types
    if _mime_types is None:
        settings = get_settings()
        _mime_types = MimeTypes(load_database(settings.database_path))
        logger.debug(
            "Default MIME registry ready: %d extension(s)", len(_mime_types.types)
        )
    return _mime_types


def reset_state() -> None:
    """Reset global state for testing.

    Clears the singleton instances so the next access rebuilds them.
    Should only be used in test fixtures.
    """
    global _settings, _mime_types
    _settings = None
    _mime_types = None


def set_settings(settings: Settings) -> None:
    """Set the global settings instance.

    Args:
        settings: Settings instance to use globally.
    """
    global _settings
    _settings = settings


def set_mime_types(mime_types: MimeTypes) -> None:
    """Set the global MimeTypes instance.

    Allows tests to inject a registry built from a synthetic database.

    Args:
        mime_types: MimeTypes instance to use globally.
    """
    global _mime_types
    _mime_types = mime_types
