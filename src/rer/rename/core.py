"""
Proposes the new name for a single file.

Functions:
- build_new_name: Joins a formatted Resource and an extension.
- propose_rename: Parses a file's name and returns the path it should be renamed to.
"""

from pathlib import Path

from rer.rename.formatter import ResourceFormatter
from rer.rename.models import Resource
from rer.rename.parser import FilenameMatcher
from rer.utils import DEFAULT_EXTENSION, LogLevel, file_util, logger


def build_new_name(resource: Resource, extension: str, formatter: ResourceFormatter) -> str:
    """Return `<formatted resource>.<extension>`."""
    return f"{formatter.format(resource)}.{extension}"


def propose_rename(
        file: Path,
        matcher: FilenameMatcher,
        formatter: ResourceFormatter,
        default_extension: str = DEFAULT_EXTENSION,
) -> Path | None:
    """
    Compute the target path for `file`, next to the original.

    Only the entry name is matched, never the parent folders. The original
    extension is kept; files without one get `default_extension`.

    Returns None when the file should be left alone. CaptureError from the
    matcher propagates so the caller can record a per-file failure.
    """
    resource = matcher.parse(file.name)
    if resource is None:
        return None

    _, extension = file_util.split_extension(file.name, default_extension)
    new_name = build_new_name(resource, extension, formatter)
    logger.log(
        "rename.propose",
        LogLevel.DEBUG,
        file=file.name,
        season=resource.season,
        episode=resource.episode,
        target=new_name,
    )
    return file.with_name(new_name)
