"""Environment-based configuration for bookkeeper."""

import os
from dataclasses import dataclass

from bookkeeper.database.factories import DB_PATH_ENV, default_database_path

HOST_ENV = "BOOKKEEPER_HOST"
PORT_ENV = "BOOKKEEPER_PORT"
LOG_LEVEL_ENV = "BOOKKEEPER_LOG_LEVEL"

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080


@dataclass
class Settings:
    """Runtime settings for the API server and the CLI."""

    database_path: str
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = "WARNING"

    @classmethod
    def from_environment(cls, database_path: str | None = None) -> "Settings":
        """Create settings from environment variables.

        Args:
            database_path: Explicit database path; overrides BOOKKEEPER_DB_PATH

        Raises:
            ValueError: If BOOKKEEPER_PORT is not a valid port number
        """
        port_value = os.getenv(PORT_ENV, str(DEFAULT_PORT))
        try:
            port = int(port_value)
        except ValueError:
            raise ValueError(f"{PORT_ENV} must be an integer, got '{port_value}'") from None
        if not 0 < port < 65536:
            raise ValueError(f"{PORT_ENV} must be between 1 and 65535, got {port}")

        return cls(
            database_path=database_path or default_database_path(),
            host=os.getenv(HOST_ENV, DEFAULT_HOST),
            port=port,
            log_level=os.getenv(LOG_LEVEL_ENV, "WARNING").upper(),
        )


__all__ = ["Settings", "DB_PATH_ENV", "HOST_ENV", "PORT_ENV", "LOG_LEVEL_ENV"]
