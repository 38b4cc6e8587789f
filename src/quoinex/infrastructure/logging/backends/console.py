"""
Console Backend

Writes formatted records to a text stream, stderr by default.
"""

import sys
from datetime import datetime
from typing import Optional, TextIO

from ..interfaces import LogBackend, LogRecord, LogLevel
from ..structs import ConsoleBackendConfig


class ConsoleBackend(LogBackend):
    """
    Console logging backend.

    Accepts only ConsoleBackendConfig struct for configuration.
    """

    COLORS = {
        LogLevel.DEBUG: "\033[36m",
        LogLevel.INFO: "\033[32m",
        LogLevel.WARNING: "\033[33m",
        LogLevel.ERROR: "\033[31m",
        LogLevel.CRITICAL: "\033[35m",
    }
    RESET = "\033[0m"

    def __init__(self, config: ConsoleBackendConfig, name: str = "console", stream: Optional[TextIO] = None):
        if not isinstance(config, ConsoleBackendConfig):
            raise TypeError(f"Expected ConsoleBackendConfig, got {type(config)}")

        super().__init__(name, LogLevel[config.min_level.upper()])
        self.config = config
        self.enabled = config.enabled
        self.stream = stream or sys.stderr

    def write(self, record: LogRecord) -> None:
        self.stream.write(self._format(record) + "\n")

    def flush(self) -> None:
        self.stream.flush()

    def _format(self, record: LogRecord) -> str:
        ts = datetime.fromtimestamp(record.timestamp).strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
        level = record.level.name
        if self.config.color:
            level = f"{self.COLORS[record.level]}{level}{self.RESET}"

        message = record.message
        if self.config.max_message_length and len(message) > self.config.max_message_length:
            message = message[:self.config.max_message_length] + "..."

        line = f"{ts} {level} [{record.logger_name}] {message}"
        if self.config.include_context and record.context:
            rendered = []
            for key, value in record.context.items():
                # multi-line values (request/response dumps) go below the header line
                if isinstance(value, str) and "\n" in value:
                    rendered.append(f"\n{value}")
                else:
                    rendered.append(f" {key}={value}")
            line += "".join(rendered)
        return line
