#!/usr/bin/env python3
"""
Command line entry point: rename the episode files of a directory.

Every option can also be set through an environment variable (or a `.env`
file); flags given on the command line win.
"""

import argparse
import os
import sys
from pathlib import Path

import rer as rer_module
from rer.rename import (
    Clarity,
    Encode,
    FilenameMatcher,
    PatternError,
    RenameConfig,
    ResourceFormatter,
    Source,
    rename_files,
)
from rer.rename.batch import RenameSummary
from rer.utils import (
    DEFAULT_CLARITY_LABEL,
    DEFAULT_ENCODE_LABEL,
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
    LogLevel,
    constants,
    logger,
)

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid number: {value}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"Must not be negative: {value}")
    return number


def _extension(value: str) -> str:
    ext = value.strip().lstrip(".")
    if not ext:
        raise argparse.ArgumentTypeError("Extension must not be empty")
    return ext


def _label(enum_cls):
    """argparse `type=` converter for a label enum."""

    def convert(value: str):
        try:
            return enum_cls.from_label(value)
        except ValueError as e:
            raise argparse.ArgumentTypeError(str(e))

    convert.__name__ = enum_cls.__name__.lower()
    return convert


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in _TRUE_VALUES


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rer",
        description="Rename episode files using a regular expression with optional (?P<season>...) "
                    "and (?P<ep>...) groups plus default metadata.",
        epilog=r"Example: rer --path ./downloads --regex 'E(?P<ep>\d+)' --name Show --year 2024 --source HDTV",
    )
    parser.add_argument(
        "--path",
        type=Path,
        default=os.getenv(constants.ENV_PATH),
        help=f"Directory to scan (default: current directory or ${constants.ENV_PATH})",
    )
    parser.add_argument(
        "--regex",
        default=os.getenv(constants.ENV_REGEX),
        help=f"Pattern matched against each filename (required unless ${constants.ENV_REGEX} is set)",
    )
    parser.add_argument(
        "--name",
        default=os.getenv(constants.ENV_NAME, DEFAULT_NAME),
        help="Title written at the start of every new name (default: empty)",
    )
    parser.add_argument(
        "--year",
        type=_non_negative_int,
        default=os.getenv(constants.ENV_YEAR, str(DEFAULT_YEAR)),
        help=f"Year written into every new name (default: {DEFAULT_YEAR})",
    )
    parser.add_argument(
        "--season",
        type=_non_negative_int,
        default=os.getenv(constants.ENV_SEASON, str(DEFAULT_SEASON)),
        help=f"Season used when the pattern captures none (default: {DEFAULT_SEASON})",
    )
    parser.add_argument(
        "--source",
        type=_label(Source),
        default=os.getenv(constants.ENV_SOURCE, DEFAULT_SOURCE_LABEL),
        metavar="{" + ",".join(Source.labels()) + "}",
        help=f"Source label (default: {DEFAULT_SOURCE_LABEL})",
    )
    parser.add_argument(
        "--clarity",
        type=_label(Clarity),
        default=os.getenv(constants.ENV_CLARITY, DEFAULT_CLARITY_LABEL),
        metavar="{" + ",".join(Clarity.labels()) + "}",
        help=f"Clarity label (default: {DEFAULT_CLARITY_LABEL})",
    )
    parser.add_argument(
        "--encode",
        type=_label(Encode),
        default=os.getenv(constants.ENV_ENCODE, DEFAULT_ENCODE_LABEL),
        metavar="{" + ",".join(Encode.labels()) + "}",
        help=f"Encode label (default: {DEFAULT_ENCODE_LABEL})",
    )
    parser.add_argument(
        "--lenient",
        action=argparse.BooleanOptionalAction,
        default=_env_flag(constants.ENV_LENIENT),
        help=f"Accept matches without an 'ep' capture and use episode 1; --no-lenient skips them "
             f"(default: strict unless ${constants.ENV_LENIENT} is set)",
    )
    parser.add_argument(
        "--pad-width",
        type=_non_negative_int,
        default=os.getenv(constants.ENV_PAD_WIDTH, str(DEFAULT_PAD_WIDTH)),
        help="Zero-pad season/episode to this many digits, e.g. 2 for S02E05 (default: 0, unpadded)",
    )
    parser.add_argument(
        "--default-ext",
        type=_extension,
        default=os.getenv(constants.ENV_DEFAULT_EXT, DEFAULT_EXTENSION),
        help=f"Extension for files that have none (default: {DEFAULT_EXTENSION})",
    )
    parser.add_argument("--dry-run", action="store_true", help="Show proposed renames without applying them")
    parser.add_argument("--debug", action="store_true", help="Enable debug output")
    parser.add_argument(
        "--log-file",
        type=Path,
        default=os.getenv(constants.ENV_LOG_FILE),
        help=f"Also write log output to this file (or ${constants.ENV_LOG_FILE})",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {rer_module.__version__}")
    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments, falling back to environment variables."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.regex:
        parser.error(f"--regex is required (or set ${constants.ENV_REGEX})")
    if args.path is None:
        args.path = Path.cwd()
    return args


def build_config(args: argparse.Namespace) -> RenameConfig:
    return RenameConfig(
        regex=args.regex,
        path=Path(args.path).expanduser(),
        name=args.name,
        year=args.year,
        season=args.season,
        source=args.source,
        clarity=args.clarity,
        encode=args.encode,
        require_episode=not args.lenient,
        pad_width=args.pad_width,
        default_extension=args.default_ext,
        dry_run=args.dry_run,
    )


def _print_summary(summary: RenameSummary, dry_run: bool) -> None:
    for result in summary.failures:
        logger.safe_print(f"❌ {result.source.name}: {result}")

    if dry_run:
        logger.safe_print("\n🧪 Dry-run mode: no changes were made.")
    logger.safe_print(
        f"\nProcessed {summary.processed} files: {summary.renamed} renamed, "
        f"{summary.planned} planned, {summary.skipped} skipped, {summary.failed} failed."
    )


def run(args: argparse.Namespace) -> int:
    """Rename the configured directory and return the process exit code."""
    logger.set_log_level(LogLevel.DEBUG if args.debug else LogLevel.INFO)
    if args.log_file:
        log_path = Path(args.log_file).expanduser().resolve()
        try:
            logger.set_log_file(log_path)
        except OSError as e:
            logger.log("startup.error", LogLevel.ERROR, msg="Cannot open log file", path=str(log_path), error=str(e))
            return EXIT_STARTUP_ERROR

    config = build_config(args)

    try:
        matcher = FilenameMatcher(config)
    except PatternError as e:
        logger.log("startup.error", LogLevel.ERROR, msg="Invalid regex", regex=config.regex, error=str(e))
        return EXIT_STARTUP_ERROR
    formatter = ResourceFormatter(config)

    if config.require_episode and EPISODE_GROUP not in matcher.groups:
        logger.log(
            "startup.warning",
            LogLevel.WARN,
            msg="Pattern has no 'ep' group; every file will be skipped (use --lenient)",
            regex=config.regex,
        )

    logger.log(
        "rename.start",
        LogLevel.INFO,
        pid=os.getpid(),
        path=str(config.path),
        regex=config.regex,
        strict=config.require_episode,
        dry_run=config.dry_run,
    )

    try:
        summary = rename_files(
            config.path,
            matcher,
            formatter,
            dry_run=config.dry_run,
            default_extension=config.default_extension,
        )
    except OSError as e:
        logger.log("startup.error", LogLevel.ERROR, msg="Cannot read directory", path=str(config.path), error=str(e))
        return EXIT_STARTUP_ERROR

    _print_summary(summary, config.dry_run)
    logger.log(
        "rename.end",
        LogLevel.INFO,
        processed=summary.processed,
        renamed=summary.renamed,
        skipped=summary.skipped,
        failed=summary.failed,
        dry_run=summary.planned,
    )
    return EXIT_FAILURES if summary.failed else EXIT_OK


def main() -> None:
    args = parse_args()
    try:
        sys.exit(run(args))
    finally:
        logger.set_log_file(None)


if __name__ == "__main__":
    main()
