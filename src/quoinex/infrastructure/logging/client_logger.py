"""
Client Logger Implementation

Dispatches records synchronously to its backends. Backend failures are
counted and contained here so a broken sink can never change the outcome
of the call that logged.
"""

import logging
from typing import List, Optional

from .interfaces import ClientLoggerInterface, LogBackend, LogRecord, LogLevel


class ClientLogger(ClientLoggerInterface):
    """
    Structured logger with multiple backends.

    Key features:
    - Keyword context on every call
    - Persistent context via set_context
    - WARNING and above propagated to the stdlib logger of the same name
    """

    def __init__(self, name: str, backends: List[LogBackend]):
        self.name = name
        self.backends = backends

        # Persistent context for all log messages
        self.context = {}

        # Python logging compatibility
        self._py_logger = logging.getLogger(name)

    def _convert_level_to_python(self, level: LogLevel) -> int:
        """Convert LogLevel to Python logging level."""
        mapping = {
            LogLevel.DEBUG: logging.DEBUG,
            LogLevel.INFO: logging.INFO,
            LogLevel.WARNING: logging.WARNING,
            LogLevel.ERROR: logging.ERROR,
            LogLevel.CRITICAL: logging.CRITICAL
        }
        return mapping.get(level, logging.INFO)

    def _log(self, level: LogLevel, msg: str, **context) -> None:
        full_context = {**self.context, **context}
        record = LogRecord.create(level, self.name, msg, **full_context)

        for backend in self.backends:
            if not backend.should_handle(record):
                continue
            try:
                backend.write(record)
            except Exception as e:
                backend._handle_error(e)

        if level >= LogLevel.WARNING:
            extra = f"\r\n{full_context}" if full_context else ""
            self._py_logger.log(self._convert_level_to_python(level), str(msg) + extra)

    def debug(self, msg: str, **context) -> None:
        self._log(LogLevel.DEBUG, msg, **context)

    def info(self, msg: str, **context) -> None:
        self._log(LogLevel.INFO, msg, **context)

    def warning(self, msg: str, **context) -> None:
        self._log(LogLevel.WARNING, msg, **context)

    def error(self, msg: str, **context) -> None:
        self._log(LogLevel.ERROR, msg, **context)

    def critical(self, msg: str, **context) -> None:
        self._log(LogLevel.CRITICAL, msg, **context)

    def set_context(self, **context) -> None:
        self.context.update(context)

    def flush(self) -> None:
        for backend in self.backends:
            try:
                backend.flush()
            except Exception as e:
                backend._handle_error(e)

    async def drain(self) -> None:
        for backend in self.backends:
            try:
                await backend.drain()
            except Exception as e:
                backend._handle_error(e)

    def isEnabledFor(self, level: int) -> bool:
        sample = LogRecord.create(self._convert_py_level(level), self.name, "")
        return any(backend.should_handle(sample) for backend in self.backends)

    def get_backend(self, name: str) -> Optional[LogBackend]:
        for backend in self.backends:
            if backend.name == name:
                return backend
        return None

    def _convert_py_level(self, py_level: int) -> LogLevel:
        """Convert Python logging level to our LogLevel."""
        if py_level >= logging.CRITICAL:
            return LogLevel.CRITICAL
        elif py_level >= logging.ERROR:
            return LogLevel.ERROR
        elif py_level >= logging.WARNING:
            return LogLevel.WARNING
        elif py_level >= logging.INFO:
            return LogLevel.INFO
        else:
            return LogLevel.DEBUG
