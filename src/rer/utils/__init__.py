"""
Shared constants, structured logging and filesystem helpers.

This package collects the default values and status labels used while renaming,
the key/value logger that reports every decision, and the small filesystem
helpers the batch renamer relies on.
"""

from .constants import (
    DEFAULT_CLARITY_LABEL,
    DEFAULT_ENCODE_LABEL,
    DEFAULT_EPISODE,
    DEFAULT_EXTENSION,
    DEFAULT_NAME,
    DEFAULT_PAD_WIDTH,
    DEFAULT_SEASON,
    DEFAULT_SOURCE_LABEL,
    DEFAULT_YEAR,
    EPISODE_GROUP,
    EXIT_FAILURES,
    EXIT_OK,
    EXIT_STARTUP_ERROR,
    MAX_CAPTURE_NUMBER,
    SEASON_GROUP,
    STATUS_DRY_RUN,
    STATUS_FAIL,
    STATUS_RENAMED,
    STATUS_SKIP,
)
from .logger import LogLevel

__all__ = [
    "DEFAULT_NAME",
    "DEFAULT_YEAR",
    "DEFAULT_SEASON",
    "DEFAULT_EPISODE",
    "DEFAULT_EXTENSION",
    "DEFAULT_PAD_WIDTH",
    "DEFAULT_SOURCE_LABEL",
    "DEFAULT_CLARITY_LABEL",
    "DEFAULT_ENCODE_LABEL",
    "MAX_CAPTURE_NUMBER",
    "SEASON_GROUP",
    "EPISODE_GROUP",
    "STATUS_RENAMED",
    "STATUS_SKIP",
    "STATUS_FAIL",
    "STATUS_DRY_RUN",
    "EXIT_OK",
    "EXIT_FAILURES",
    "EXIT_STARTUP_ERROR",
    "LogLevel",
]
