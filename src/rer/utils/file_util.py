"""
Directory listing and filename helpers used by the batch renamer.
"""
from pathlib import Path
from typing import List, Tuple

from rer.utils.constants import DEFAULT_EXTENSION


def list_files(directory: Path) -> List[Path]:
    """
    Return the regular files directly inside `directory`, sorted by name.

    Raises NotADirectoryError when `directory` is missing or not a folder, and
    lets OSError from an unreadable folder propagate.
    """
    if not directory.is_dir():
        raise NotADirectoryError(f"Not a directory: {directory}")
    return sorted(p for p in directory.iterdir() if p.is_file())


def split_extension(filename: str, default: str = DEFAULT_EXTENSION) -> Tuple[str, str]:
    """
    Split a filename into (stem, extension) without the dot.

    Names without an extension ("episode", ".hidden", "episode.") get `default`.
    """
    path = Path(filename)
    suffix = path.suffix
    if not suffix or suffix == ".":
        stem = filename[:-1] if filename.endswith(".") else filename
        return stem, default
    return path.stem, suffix[1:]
