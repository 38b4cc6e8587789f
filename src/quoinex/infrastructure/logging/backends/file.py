"""
File Backend for Persistent Logging

Appends text or JSON lines to a file with size-based rotation. File I/O is
async (aiofiles): write() only formats and buffers the record, a flush task
on the running loop does the disk work.
"""

import asyncio
from datetime import datetime
from pathlib import Path
from typing import List, Optional

import aiofiles
import aiofiles.os
import msgspec

from ..interfaces import LogBackend, LogRecord, LogLevel
from ..structs import FileBackendConfig


class FileBackend(LogBackend):
    """
    File logging backend.

    Features:
    - Async I/O, nothing blocks the caller's event loop
    - Configurable format (text/JSON)
    - Automatic directory creation
    - File rotation by size

    Without a running event loop (plain scripts) each write is flushed
    immediately on a short-lived loop.

    Accepts only FileBackendConfig struct for configuration.
    """

    def __init__(self, config: FileBackendConfig, name: str = "file"):
        if not isinstance(config, FileBackendConfig):
            raise TypeError(f"Expected FileBackendConfig, got {type(config)}")

        super().__init__(name, LogLevel[config.min_level.upper()])

        self.config = config
        self.file_path = Path(config.path)
        self.format_type = config.format  # 'text' or 'json'
        self.max_file_size = config.max_size_mb * 1024 * 1024
        self.backup_count = config.backup_count
        self.enabled = config.enabled

        self._encoder = msgspec.json.Encoder(enc_hook=str)
        self._write_buffer: List[str] = []
        self._flush_task: Optional[asyncio.Task] = None

        if self.enabled:
            self.file_path.parent.mkdir(parents=True, exist_ok=True)

    def write(self, record: LogRecord) -> None:
        if self.format_type == 'json':
            self._write_buffer.append(self._format_json(record))
        else:
            self._write_buffer.append(self._format_text(record))
        self._schedule_flush()

    def flush(self) -> None:
        if self._write_buffer:
            self._schedule_flush()

    async def drain(self) -> None:
        """Wait until every buffered line is on disk."""
        if self._flush_task is not None and not self._flush_task.done():
            await self._flush_task
        await self._flush_buffer()

    def _schedule_flush(self) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            asyncio.run(self._flush_buffer())
            return

        if self._flush_task is None or self._flush_task.done():
            self._flush_task = loop.create_task(self._flush_buffer())

    async def _flush_buffer(self) -> None:
        # lines appended while a batch is being written go out in the next pass
        while self._write_buffer:
            batch, self._write_buffer = self._write_buffer, []
            try:
                await self._check_rotation()
                async with aiofiles.open(self.file_path, 'a', encoding='utf-8') as f:
                    await f.write(''.join(line + '\n' for line in batch))
            except Exception as e:
                self._handle_error(e)

    def _backup_path(self, index: int) -> Path:
        return self.file_path.with_name(f"{self.file_path.name}.{index}")

    async def _check_rotation(self) -> None:
        if not await aiofiles.os.path.exists(self.file_path):
            return
        if await aiofiles.os.path.getsize(self.file_path) >= self.max_file_size:
            await self._rotate_file()

    async def _rotate_file(self) -> None:
        """Rotate log files when max size is reached."""
        if self.backup_count == 0:
            await aiofiles.os.remove(self.file_path)
            return

        for i in range(self.backup_count - 1, 0, -1):
            old_file = self._backup_path(i)
            if await aiofiles.os.path.exists(old_file):
                await self._move(old_file, self._backup_path(i + 1))

        await self._move(self.file_path, self._backup_path(1))

    async def _move(self, source: Path, target: Path) -> None:
        if await aiofiles.os.path.exists(target):
            await aiofiles.os.remove(target)
        await aiofiles.os.rename(source, target)

    def _format_text(self, record: LogRecord) -> str:
        """Format as readable text."""
        timestamp = datetime.fromtimestamp(record.timestamp).isoformat()
        message = f"[{timestamp}] {record.level.name} {record.logger_name}: {record.message}"

        if record.context:
            context_parts = [f"{k}={v}" for k, v in record.context.items()]
            message += f" | {', '.join(context_parts)}"

        return message

    def _format_json(self, record: LogRecord) -> str:
        """Format as JSON for structured logging."""
        data = {
            'timestamp': record.timestamp,
            'level': record.level.name,
            'logger': record.logger_name,
            'message': record.message
        }
        if record.context:
            data['context'] = record.context

        return self._encoder.encode(data).decode('utf-8')
