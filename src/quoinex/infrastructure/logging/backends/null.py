from ..interfaces import LogBackend, LogRecord


class NullBackend(LogBackend):
    """Discards everything. Default sink for client diagnostics."""

    def __init__(self, name: str = "null"):
        super().__init__(name)

    def should_handle(self, record: LogRecord) -> bool:
        return False

    def write(self, record: LogRecord) -> None:
        pass

    def flush(self) -> None:
        pass
