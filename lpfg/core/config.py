"""
Configuration objects for ingestion and logging.
"""

from dataclasses import dataclass
from typing import Optional

from .exceptions import ConfigurationError


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class IngestConfig:
    """Configuration for reading spectrum record files."""

    encoding: str = "utf-8"
    parameter_delimiter: str = ","
    pairs_delimiter: str = ";"
    parameter_header: bool = True

    def validate(self) -> None:
        """Validate configuration parameters."""
        for name in ("parameter_delimiter", "pairs_delimiter"):
            value = getattr(self, name)
            if not isinstance(value, str) or len(value) != 1:
                raise ConfigurationError(f"{name} must be a single character")
            if value in ".+-eE0123456789":
                raise ConfigurationError(f"{name} cannot be part of a number: {value!r}")
        if not self.encoding:
            raise ConfigurationError("encoding must not be empty")


@dataclass
class LoggingConfig:
    """Configuration for console and optional file logging."""

    level: str = "WARNING"
    log_file: Optional[str] = None
    max_bytes: int = 10 * 1024 * 1024  # 10MB
    backup_count: int = 5

    def validate(self) -> None:
        """Validate configuration parameters."""
        if str(self.level).upper() not in LOG_LEVELS:
            raise ConfigurationError(
                f"log level must be one of {', '.join(LOG_LEVELS)}, got {self.level!r}"
            )
        if self.max_bytes < 1:
            raise ConfigurationError("max_bytes must be positive")
        if self.backup_count < 0:
            raise ConfigurationError("backup_count must be non-negative")
