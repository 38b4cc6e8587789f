"""
Logging Backends

Available backends:
- NullBackend: discards everything (default)
- ConsoleBackend: formatted stream output
- FileBackend: text/JSON lines with rotation
"""

from .null import NullBackend
from .console import ConsoleBackend
from .file import FileBackend

__all__ = [
    'NullBackend',
    'ConsoleBackend',
    'FileBackend',
]
