"""
Filename parsing, formatting and batch renaming for episode files.

This package turns a filename into structured episode metadata using a
user-supplied regular expression, renders that metadata as a canonical dotted
filename, and renames the files of a directory accordingly.

Package organization:
- models: `Resource`, the `Source`/`Clarity`/`Encode` labels and `RenameConfig`.
- parser: `FilenameMatcher`, which applies the pattern (named groups `season`
  and `ep`) and fills the remaining fields from configuration.
- formatter: `ResourceFormatter` / `format_resource`, producing
  `<name>.<year>.S<season>E<episode>.<source>.<clarity>.<encode>`.
- core: Single-file proposals (parse, format, keep the extension).
- batch: Directory-wide renaming with collision checks and a summary.

Behavior notes:
- A file whose name does not match is skipped and left untouched. Under the
  strict policy (`require_episode=True`) a match without an `ep` capture is
  skipped too; otherwise the episode defaults to 1.
- Bad captures, collisions and failed renames are reported per file and do not
  stop the run.

Example:
    from pathlib import Path
    import rer.rename as rename
    config = rename.RenameConfig(regex=r"E(?P<ep>\\d+)", name="Show", year=2024)
    summary = rename.rename_files(
        Path("."), rename.FilenameMatcher(config), rename.ResourceFormatter(config)
    )
"""
from .models import (
    Clarity,
    Encode,
    RenameConfig,
    Resource,
    Source,
)

from .parser import (
    CaptureError,
    FilenameMatcher,
    PatternError,
)

from .formatter import (
    ResourceFormatter,
    format_resource,
)

from .core import (
    build_new_name,
    propose_rename,
)

from .batch import (
    RenameResult,
    RenameSummary,
    rename_files,
)

__all__ = [
    # Models
    "Clarity",
    "Encode",
    "RenameConfig",
    "Resource",
    "Source",
    # Parsing
    "CaptureError",
    "FilenameMatcher",
    "PatternError",
    # Formatting
    "ResourceFormatter",
    "format_resource",
    # Single file
    "build_new_name",
    "propose_rename",
    # Batch processing
    "RenameResult",
    "RenameSummary",
    "rename_files",
]
