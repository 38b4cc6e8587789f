"""
Logging System

Structured logger with pluggable backends. Loggers built from the default
config write to a NullBackend, so client diagnostics are off until a
console or file backend is configured.

Usage:
    from quoinex.infrastructure.logging import get_logger

    logger = get_logger('my.component')
    logger.debug("Request", dump="GET /products HTTP/1.1 ...")

    configure_logging(LoggingConfig.default_development())
"""

from .interfaces import (
    LogLevel,
    LogRecord,
    LogBackend,
    ClientLoggerInterface,
)

from .client_logger import ClientLogger

from .factory import (
    LoggerFactory,
    get_logger,
    get_exchange_logger,
    configure_logging,
)

from .structs import (
    LoggingConfig,
    BackendConfig,
    ConsoleBackendConfig,
    FileBackendConfig,
)

from .backends import NullBackend, ConsoleBackend, FileBackend

__all__ = [
    'LogLevel',
    'LogRecord',
    'LogBackend',
    'ClientLoggerInterface',

    'ClientLogger',

    'LoggerFactory',
    'get_logger',
    'get_exchange_logger',
    'configure_logging',

    'LoggingConfig',
    'BackendConfig',
    'ConsoleBackendConfig',
    'FileBackendConfig',

    'NullBackend',
    'ConsoleBackend',
    'FileBackend',
]
