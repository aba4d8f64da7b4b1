"""
Application Settings

Environment configuration for the application.
"""

import logging
import os
from dataclasses import dataclass

DEFAULT_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


@dataclass
class Settings:
    """Application settings from environment."""

    # Logging
    log_level: str = "WARNING"
    log_format: str = DEFAULT_LOG_FORMAT

    # Input files
    encoding: str = "utf-8"

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from environment variables."""
        return cls(
            log_level=os.getenv("NETVITALITY_LOG_LEVEL", "WARNING"),
            log_format=os.getenv("NETVITALITY_LOG_FORMAT", DEFAULT_LOG_FORMAT),
            encoding=os.getenv("NETVITALITY_ENCODING", "utf-8"),
        )

    def resolve_log_level(self) -> int:
        """Translate the configured level name into a logging constant."""
        level = logging.getLevelName(self.log_level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: '{self.log_level}'")
        return level
