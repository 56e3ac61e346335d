# python
"""Batch rename of the media files in one directory.

This module lists the files directly inside a folder, proposes a new name for
each one with the matcher and formatter, refuses any rename that would
overwrite another file, and then renames the rest one after the other. Every
file ends up with a `RenameResult`; nothing is raised for per-file problems.
"""
from collections import defaultdict
from dataclasses import dataclass, field
from pathlib import Path

from tqdm import tqdm

from rer.rename import core
from rer.rename.formatter import ResourceFormatter
from rer.rename.parser import FilenameMatcher
from rer.utils import (
    DEFAULT_EXTENSION,
    STATUS_DRY_RUN,
    STATUS_FAIL,
    STATUS_RENAMED,
    STATUS_SKIP,
    LogLevel,
    file_util,
    logger,
)


@dataclass
class RenameResult:
    """Outcome for one file: RENAMED, SKIP, FAIL or DRY-RUN, plus a reason when relevant."""

    source: Path
    target: Path | None
    status: str
    reason: str | None = None

    def __str__(self) -> str:
        return f"{self.status} ({self.reason})" if self.reason else self.status


@dataclass
class RenameSummary:
    """All per-file results of a run, in processing order."""

    results: list[RenameResult] = field(default_factory=list)

    def _count(self, status: str) -> int:
        return sum(1 for r in self.results if r.status == status)

    @property
    def processed(self) -> int:
        return len(self.results)

    @property
    def renamed(self) -> int:
        return self._count(STATUS_RENAMED)

    @property
    def skipped(self) -> int:
        return self._count(STATUS_SKIP)

    @property
    def failed(self) -> int:
        return self._count(STATUS_FAIL)

    @property
    def planned(self) -> int:
        return self._count(STATUS_DRY_RUN)

    @property
    def failures(self) -> list[RenameResult]:
        return [r for r in self.results if r.status == STATUS_FAIL]


def _mark_collisions(proposals: dict[Path, Path], results: dict[Path, RenameResult]) -> None:
    """Fail every proposal whose target is shared with another proposal or already exists."""
    by_target: dict[Path, list[Path]] = defaultdict(list)
    for source, target in proposals.items():
        by_target[target].append(source)

    for target, sources in by_target.items():
        if len(sources) > 1:
            names = ", ".join(s.name for s in sources)
            for source in sources:
                results[source] = RenameResult(source, target, STATUS_FAIL, f"collision: {names} -> {target.name}")
                logger.log("rename.collision", LogLevel.ERROR, file=source.name, target=target.name, sources=names)
        elif target.exists():
            source = sources[0]
            results[source] = RenameResult(source, target, STATUS_FAIL, "target exists")
            logger.log("rename.target_exists", LogLevel.ERROR, file=source.name, target=target.name)


def rename_files(
        directory: Path,
        matcher: FilenameMatcher,
        formatter: ResourceFormatter,
        dry_run: bool = False,
        default_extension: str = DEFAULT_EXTENSION,
) -> RenameSummary:
    """Rename the files directly under `directory` to their formatted names.

    The function:
    - Lists regular files (no recursion) in name order.
    - Proposes a target for each file; non-matching files are skipped.
    - Fails, without renaming, any file whose target another file also
      wants or which already exists on disk.
    - Renames the remaining files unless `dry_run=True`.

    Args:
        directory (Path): Folder to scan.
        matcher (FilenameMatcher): Turns a filename into a Resource.
        formatter (ResourceFormatter): Turns a Resource into a base filename.
        dry_run (bool): If True, only report the renames that would happen.
        default_extension (str): Extension for files that have none.

    Returns:
        RenameSummary: one result per file.

    Raises:
        NotADirectoryError: `directory` is missing or not a folder.
        OSError: `directory` cannot be read.
    """
    files = file_util.list_files(directory)
    results: dict[Path, RenameResult] = {}
    proposals: dict[Path, Path] = {}

    for file in tqdm(files, desc="Analyzing files", disable=not files):
        try:
            target = core.propose_rename(file, matcher, formatter, default_extension)
        except ValueError as e:
            results[file] = RenameResult(file, None, STATUS_FAIL, str(e))
            logger.log("rename.parse_error", LogLevel.ERROR, file=file.name, error=str(e))
            continue

        if target is None:
            results[file] = RenameResult(file, None, STATUS_SKIP, "no match")
        elif target == file:
            results[file] = RenameResult(file, target, STATUS_SKIP, "already named")
        else:
            proposals[file] = target

    _mark_collisions(proposals, results)
    pending = [(source, target) for source, target in proposals.items() if source not in results]

    if pending:
        logger.safe_print("\n📋 Proposed renames:")
        for old, new in pending:
            logger.safe_print(f"{old.name} → {new.name}")

    for old, new in tqdm(pending, desc="Renaming files", disable=dry_run or not pending):
        if dry_run:
            results[old] = RenameResult(old, new, STATUS_DRY_RUN)
            continue
        try:
            old.rename(new)
        except OSError as e:
            results[old] = RenameResult(old, new, STATUS_FAIL, f"rename error: {e}")
            logger.log("rename.error", LogLevel.ERROR, file=old.name, target=new.name, error=str(e))
            continue
        results[old] = RenameResult(old, new, STATUS_RENAMED)
        logger.log("rename.done", LogLevel.DEBUG, file=old.name, target=new.name)

    return RenameSummary([results[f] for f in files])
