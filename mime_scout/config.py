"""Application settings from environment variables.

All variables use the MIME_SCOUT_* prefix.
"""

import logging
import os
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass
class Settings:
    """mime-scout settings.

    Handles parsing, validation, and defaults for all env vars.
    """

    # Database
    database_path: str | None = field(default=None)

    # Transport
    transport: str = field(default="http")
    http_host: str = field(default="0.0.0.0")
    http_port: int = field(default=8000)

    # Logging
    log_level: str = field(default="INFO")
    log_colors: bool = field(default=True)
    log_payloads: bool = field(default=False)
    slow_threshold_ms: int = field(default=1000)
    include_traceback: bool = field(default=False)

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from environment variables.

        Returns:
            Settings instance with values from environment
        """
        settings = cls(
            database_path=os.getenv("MIME_SCOUT_DATABASE", "").strip() or None,
            transport=cls._get_transport(),
            http_host=os.getenv("MIME_SCOUT_HTTP_HOST", "0.0.0.0"),
            http_port=cls._get_int("MIME_SCOUT_HTTP_PORT", 8000),
            log_level=os.getenv("MIME_SCOUT_LOG_LEVEL", "INFO").upper(),
            log_colors=cls._get_bool("MIME_SCOUT_LOG_COLORS", True),
            log_payloads=cls._get_bool("MIME_SCOUT_LOG_PAYLOADS", False),
            slow_threshold_ms=cls._get_int("MIME_SCOUT_SLOW_THRESHOLD_MS", 1000),
            include_traceback=cls._get_bool("MIME_SCOUT_INCLUDE_TRACEBACK", False),
        )
        logger.debug(
            "Settings loaded: database=%s, transport=%s, log_level=%s",
            settings.database_path or "(bundled)",
            settings.transport,
            settings.log_level,
        )
        return settings

    @staticmethod
    def _get_int(key: str, default: int) -> int:
        """Get integer from environment.

        Args:
            key: Environment variable key
            default: Default value if not set or invalid

        Returns:
            Integer value from environment or default
        """
        value = os.getenv(key)
        if value is None:
            return default

        try:
            return int(value)
        except ValueError:
            logger.warning("Invalid int for %s: %s, using default %d", key, value, default)
            return default

    @staticmethod
    def _get_bool(key: str, default: bool) -> bool:
        """Get boolean from environment."""
        value = os.getenv(key)
        if value is None:
            return default
        return value.lower() in ("1", "true", "yes", "on")

    @staticmethod
    def _get_transport() -> str:
        """Get transport ("http" or "stdio"), defaulting to http."""
        transport = os.getenv("MIME_SCOUT_TRANSPORT", "").lower()
        if transport in ("http", "stdio"):
            return transport
        return "http"
