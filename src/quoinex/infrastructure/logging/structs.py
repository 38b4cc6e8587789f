"""
Logging Configuration Structures

Structured configuration for the logging system using msgspec.Struct.
"""

from typing import Optional
from msgspec import Struct

VALID_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class BackendConfig(Struct, frozen=True):
    """
    Base configuration for all logging backends.

    Attributes:
        enabled: Whether this backend is active
        min_level: Minimum log level to process (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    enabled: bool = True
    min_level: str = "INFO"

    def validate(self) -> None:
        """Validate backend configuration."""
        if self.min_level.upper() not in VALID_LEVELS:
            raise ValueError(f"Invalid log level: {self.min_level}")


class ConsoleBackendConfig(BackendConfig, frozen=True):
    """
    Console backend configuration.

    Attributes:
        color: Enable colored output
        include_context: Include context information
        max_message_length: Maximum message length before truncation, 0 disables truncation
    """
    color: bool = False
    include_context: bool = True
    max_message_length: int = 0


class FileBackendConfig(BackendConfig, frozen=True):
    """
    File backend configuration.

    Attributes:
        path: Log file path
        format: Output format (text or json)
        max_size_mb: Maximum file size in MB before rotation
        backup_count: Number of backup files to keep
    """
    path: str = "logs/quoinex.log"
    format: str = "text"
    max_size_mb: int = 100
    backup_count: int = 5

    def validate(self) -> None:
        """Validate file backend configuration."""
        super().validate()
        if self.format not in {"text", "json"}:
            raise ValueError(f"Invalid format: {self.format}")
        if self.max_size_mb <= 0:
            raise ValueError("max_size_mb must be positive")
        if self.backup_count < 0:
            raise ValueError("backup_count cannot be negative")


class LoggingConfig(Struct, frozen=True):
    """
    Complete logging configuration.

    With no backend enabled, loggers write to a no-op backend.
    """
    console: Optional[ConsoleBackendConfig] = None
    file: Optional[FileBackendConfig] = None

    def validate(self) -> None:
        if self.console:
            self.console.validate()
        if self.file:
            self.file.validate()

    @classmethod
    def default(cls) -> 'LoggingConfig':
        """Diagnostics off."""
        return cls()

    @classmethod
    def default_development(cls) -> 'LoggingConfig':
        """Request/response dumps to the console."""
        return cls(console=ConsoleBackendConfig(min_level="DEBUG", color=True))
