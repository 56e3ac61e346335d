"""
Module for matching filenames against the user pattern and turning the
captures into a `Resource`.

The pattern may define the named groups `season` and `ep`. Everything else in
the resulting Resource (title, year, source, clarity, encode) comes from the
run configuration.
"""

import re

from rer.rename.models import RenameConfig, Resource
from rer.utils import (
    DEFAULT_EPISODE,
    EPISODE_GROUP,
    MAX_CAPTURE_NUMBER,
    SEASON_GROUP,
    LogLevel,
    logger,
)

_NUMBER_RE = re.compile(r"[0-9]+")


class PatternError(ValueError):
    """The configured regular expression does not compile."""


class CaptureError(ValueError):
    """A `season` or `ep` capture is not a usable episode number."""

    def __init__(self, group: str, text: str):
        self.group = group
        self.text = text
        super().__init__(f"captured {group}={text!r} is not a number between 0 and {MAX_CAPTURE_NUMBER}")


def parse_number(group: str, text: str) -> int:
    """Convert captured digits to an int, raising CaptureError for anything else."""
    if not _NUMBER_RE.fullmatch(text):
        raise CaptureError(group, text)
    value = int(text)
    if value > MAX_CAPTURE_NUMBER:
        raise CaptureError(group, text)
    return value


class FilenameMatcher:
    """Applies one compiled pattern to filenames."""

    def __init__(self, config: RenameConfig):
        try:
            self.pattern = re.compile(config.regex)
        except re.error as e:
            raise PatternError(f"Invalid regex {config.regex!r}: {e}") from e
        self.config = config

    @property
    def groups(self) -> set[str]:
        """Named groups defined by the pattern."""
        return set(self.pattern.groupindex)

    def parse(self, filename: str) -> Resource | None:
        """
        Match `filename` and build its Resource.

        Returns None when the pattern does not match, or when the strict policy
        is on and the `ep` group did not capture anything. Raises CaptureError
        when a captured season/episode is not a small non-negative integer.
        """
        match = self.pattern.search(filename)
        if match is None:
            logger.log("parse.no_match", LogLevel.TRACE, file=filename)
            return None

        captures = match.groupdict()
        season_text = captures.get(SEASON_GROUP)
        episode_text = captures.get(EPISODE_GROUP)

        if episode_text is None and self.config.require_episode:
            logger.log("parse.no_episode", LogLevel.DEBUG, file=filename)
            return None

        season = self.config.season if season_text is None else parse_number(SEASON_GROUP, season_text)
        episode = DEFAULT_EPISODE if episode_text is None else parse_number(EPISODE_GROUP, episode_text)

        return Resource(
            name=self.config.name,
            year=self.config.year,
            season=season,
            episode=episode,
            source=self.config.source,
            clarity=self.config.clarity,
            encode=self.config.encode,
        )
