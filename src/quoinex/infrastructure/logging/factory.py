"""
Logging Factory

Creates and caches logger instances from struct-based configuration.
"""

import threading
from typing import Dict, List, Optional

from .interfaces import ClientLoggerInterface, LogBackend
from .client_logger import ClientLogger
from .backends import NullBackend, ConsoleBackend, FileBackend
from .structs import LoggingConfig


class LoggerFactory:
    """Logging factory - trust config, fail fast."""

    _cached_loggers: Dict[str, ClientLoggerInterface] = {}
    _default_config: Optional[LoggingConfig] = None
    _lock = threading.Lock()

    @classmethod
    def create_logger(cls, name: str, config: Optional[LoggingConfig] = None) -> ClientLoggerInterface:
        """Create logger instance, cached by name when built from the default config."""
        if config is not None:
            return ClientLogger(name, cls.create_backends(config))

        with cls._lock:
            if name not in cls._cached_loggers:
                cls._cached_loggers[name] = ClientLogger(name, cls.create_backends(cls.get_default_config()))
            return cls._cached_loggers[name]

    @staticmethod
    def create_backends(config: LoggingConfig) -> List[LogBackend]:
        config.validate()

        backends: List[LogBackend] = []
        if config.console and config.console.enabled:
            backends.append(ConsoleBackend(config.console))
        if config.file and config.file.enabled:
            backends.append(FileBackend(config.file))

        if not backends:
            backends.append(NullBackend())
        return backends

    @classmethod
    def get_default_config(cls) -> LoggingConfig:
        if cls._default_config is None:
            cls._default_config = LoggingConfig.default()
        return cls._default_config

    @classmethod
    def configure(cls, config: LoggingConfig) -> None:
        """Replace the default config. Cached loggers are dropped."""
        config.validate()
        with cls._lock:
            cls._default_config = config
            cls._cached_loggers.clear()

    @classmethod
    def clear_cache(cls) -> None:
        """Clear cached logger instances."""
        with cls._lock:
            cls._cached_loggers.clear()
            cls._default_config = None


def get_logger(name: str) -> ClientLoggerInterface:
    """Get logger instance. Simple, fast."""
    return LoggerFactory.create_logger(name)


def get_exchange_logger(exchange: str, component: Optional[str] = None) -> ClientLoggerInterface:
    """Get exchange logger with optional component."""
    name = f"quoinex.{exchange}.{component}" if component else f"quoinex.{exchange}"
    return get_logger(name)


def configure_logging(config: LoggingConfig) -> None:
    LoggerFactory.configure(config)
