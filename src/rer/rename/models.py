"""
Value types shared by the matcher, formatter and batch renamer.

- `Source`, `Clarity`, `Encode`: release labels; each member's value is the
  label written into filenames.
- `Resource`: the metadata one filename resolves to.
- `RenameConfig`: everything a run needs, built once by the CLI and handed to
  the matcher and formatter.
"""
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from rer.utils.constants import (
    DEFAULT_EXTENSION,
    DEFAULT_NAME,
    DEFAULT_PAD_WIDTH,
    DEFAULT_SEASON,
    DEFAULT_YEAR,
)


class _LabelEnum(Enum):
    """Enum whose values are the labels used in filenames."""

    def __str__(self) -> str:
        return self.value

    @classmethod
    def labels(cls) -> list[str]:
        return [member.value for member in cls]

    @classmethod
    def from_label(cls, text: str):
        """Look up a member by label, ignoring case."""
        wanted = text.strip().lower()
        for member in cls:
            if member.value.lower() == wanted:
                return member
        raise ValueError(f"Invalid {cls.__name__.lower()} '{text}'. Choose from: {', '.join(cls.labels())}")


class Source(_LabelEnum):
    """Where the media was captured from."""
    WEB_DL = "WEB_DL"
    HDTV = "HDTV"
    DVD = "DVD"


class Clarity(_LabelEnum):
    """Resolution tier."""
    C720P = "720p"
    C1080P = "1080p"
    C2K = "2k"
    C4K = "4k"


class Encode(_LabelEnum):
    """Video codec."""
    H264 = "H264"
    H265 = "H265"
    HEVC = "HEVC"


@dataclass(frozen=True)
class Resource:
    """Metadata for one media file, parsed from its name plus configured defaults."""

    name: str
    year: int
    season: int
    episode: int
    source: Source
    clarity: Clarity
    encode: Encode

    def __str__(self) -> str:
        from rer.rename.formatter import format_resource

        return format_resource(self)


@dataclass(frozen=True)
class RenameConfig:
    """
    Settings for one renaming run.

    Only `regex` has no default. `require_episode` selects the strict policy
    (a match without an `ep` capture is skipped); with it off, a missing
    capture means episode 1. `pad_width` zero-pads season and episode digits;
    0 keeps them unpadded.
    """

    regex: str
    path: Path = field(default_factory=Path.cwd)
    name: str = DEFAULT_NAME
    year: int = DEFAULT_YEAR
    season: int = DEFAULT_SEASON
    source: Source = Source.WEB_DL
    clarity: Clarity = Clarity.C1080P
    encode: Encode = Encode.H264
    require_episode: bool = True
    pad_width: int = DEFAULT_PAD_WIDTH
    default_extension: str = DEFAULT_EXTENSION
    dry_run: bool = False
