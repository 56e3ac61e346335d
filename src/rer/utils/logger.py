"""
Provides structured logging with log levels.

This module provides a structured logging system with UTC timestamps, log levels,
and key-value pair formatting for better log parsing and analysis. Lines go
through tqdm so they do not break an active progress bar, and can optionally be
copied into a log file.
"""
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Any, Dict, TextIO

from tqdm import tqdm

_separator = " | "
_log_file: TextIO | None = None


class LogLevel(Enum):
    """Log level enumeration."""
    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4


_current_level = LogLevel.INFO


def set_log_level(level: LogLevel) -> None:
    """Set the current log level."""
    global _current_level
    _current_level = level


def get_log_level() -> LogLevel:
    """Get the current log level."""
    return _current_level


def set_log_file(path: Path | None) -> None:
    """Copy every log line into `path` (appending). Pass None to stop."""
    global _log_file
    if _log_file is not None:
        _log_file.close()
        _log_file = None
    if path is None:
        return
    path.parent.mkdir(parents=True, exist_ok=True)
    _log_file = open(path, "a", encoding="utf-8", errors="backslashreplace", buffering=1)


def _format_kv(data: Dict[str, Any]) -> str:
    """Format key-value pairs for logging."""
    parts = []
    for key, value in data.items():
        if isinstance(value, str):
            # Escape quotes and newlines to keep log entries single-line.
            escaped = value.replace("\r", "\\r").replace("\n", "\\n")
            escaped = escaped.replace('"', '\\"')
            parts.append(f'{key}="{escaped}"')
        elif value is None:
            parts.append(f'{key}=null')
        elif isinstance(value, bool):
            parts.append(f'{key}={str(value).lower()}')
        else:
            parts.append(f'{key}={value}')
    return _separator.join(parts)


def _printable(text: str) -> str:
    """Escape characters that cannot be encoded, such as undecodable bytes in filenames."""
    return text.encode("utf-8", "backslashreplace").decode("utf-8")


def _write_line(text: str) -> None:
    text = _printable(text)
    tqdm.write(text)
    if _log_file is not None:
        _log_file.write(text + "\n")


def _should_log(level: LogLevel) -> bool:
    """Check if a message at the given level should be logged."""
    return level.value >= _current_level.value


def log(event: str, level: LogLevel = LogLevel.INFO, **kwargs) -> None:
    """
    Structured logging function.

    Args:
        event: Event name (e.g., 'rename.propose', 'rename.summary')
        level: Log level (TRACE, DEBUG, INFO, WARN, ERROR)
        **kwargs: Key-value pairs to log
    """
    if not _should_log(level):
        return

    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S")
    header = f"{timestamp}{_separator}[{level.name}]{_separator}{event}"
    kv_str = _format_kv(kwargs) if kwargs else ""

    if kv_str:
        _write_line(f"{header}{_separator}{kv_str}")
    else:
        _write_line(header)


def safe_print(*args, sep: str = " ", end: str = "\n", file: TextIO | None = None) -> None:
    """
    Print plain user-facing output (listings, summaries).
    Use log() for structured logging instead.
    """
    text = _printable(sep.join(str(arg) for arg in args))
    print(text, end=end, file=file, flush=True)
    if _log_file is not None and file is None:
        _log_file.write(text + end)
