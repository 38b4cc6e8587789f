"""
Core Logging Interfaces

Lightweight structured logging with pluggable backends. The client writes
request and response dumps here; where they end up is decided by the
backends attached to the logger.
"""

import logging
import time
from abc import ABC, abstractmethod
from enum import IntEnum
from typing import Any, Dict
from dataclasses import dataclass, field


class LogLevel(IntEnum):
    """Log levels with numeric values for fast comparison."""
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50


@dataclass
class LogRecord:
    """
    Log record passed to backends.

    Formatting happens in backends, not here.
    """
    timestamp: float
    level: LogLevel
    logger_name: str
    message: str
    context: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def create(cls, level: LogLevel, logger_name: str, message: str, **context) -> 'LogRecord':
        return cls(
            timestamp=time.time(),
            level=level,
            logger_name=logger_name,
            message=message,
            context=context
        )


class LogBackend(ABC):
    """
    Abstract base for all logging backends.

    Each backend handles its own formatting and output logic.
    """

    def __init__(self, name: str, min_level: LogLevel = LogLevel.DEBUG):
        self.name = name
        self.min_level = min_level
        self.enabled = True
        self._error_count = 0
        self._max_errors = 10  # Disable after too many failures

    def should_handle(self, record: LogRecord) -> bool:
        """Fast check if this backend should process the record."""
        return self.enabled and record.level >= self.min_level

    @abstractmethod
    def write(self, record: LogRecord) -> None:
        """
        Write log record to backend destination.

        Errors raised here are counted by the logger, never propagated to the caller.
        """
        pass

    @abstractmethod
    def flush(self) -> None:
        """Flush any buffered data."""
        pass

    async def drain(self) -> None:
        """Wait for buffered output. Synchronous backends have nothing pending."""
        self.flush()

    def close(self) -> None:
        """Release resources held by the backend."""
        self.flush()

    def disable(self) -> None:
        """Disable this backend."""
        self.enabled = False

    def enable(self) -> None:
        """Enable this backend."""
        self.enabled = True
        self._error_count = 0

    def _handle_error(self, error: Exception) -> None:
        """Handle backend errors gracefully."""
        self._error_count += 1
        if self._error_count >= self._max_errors:
            self.enabled = False
            logging.getLogger(__name__).warning(
                "Backend %s disabled after %d errors, last: %r", self.name, self._max_errors, error
            )


class ClientLoggerInterface(ABC):
    """
    Interface for the structured logger injected into clients.

    Context is passed as keyword arguments and rendered by the backends.
    """

    @abstractmethod
    def debug(self, msg: str, **context) -> None:
        pass

    @abstractmethod
    def info(self, msg: str, **context) -> None:
        pass

    @abstractmethod
    def warning(self, msg: str, **context) -> None:
        pass

    @abstractmethod
    def error(self, msg: str, **context) -> None:
        pass

    @abstractmethod
    def critical(self, msg: str, **context) -> None:
        pass

    @abstractmethod
    def set_context(self, **context) -> None:
        """Set persistent context for all logs from this logger."""
        pass

    @abstractmethod
    def flush(self) -> None:
        """Flush all backends."""
        pass

    @abstractmethod
    async def drain(self) -> None:
        """Wait until every backend has written its buffered records."""
        pass

    @abstractmethod
    def isEnabledFor(self, level: int) -> bool:
        """Check if any backend would accept the level (Python logging compatibility)."""
        pass
