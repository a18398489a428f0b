"""Command-line front door for dirzip.

Parses CLI options, merges them with persisted defaults, and archives the
source directory atomically into the requested zip file.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import config
from .archive import create_archive_from_directory_atomic
from .compression import CompressionOptions, available_method_names
from .errors import DirzipError


def _nonnegative_int(value: str) -> int:
    """argparse type for non-negative integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return parsed


def _configure_logging(verbosity: int) -> None:
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _resolve_options(method_name: str | None, level: int | None) -> CompressionOptions:
    """Combine CLI flags with persisted defaults.

    A ``--level`` without ``--compression`` applies to the configured method.
    """
    if method_name is None and level is None:
        return config.load_compression_options()
    if method_name is None:
        method_name = config.load_compression_options().method.value
    return CompressionOptions.parse(method_name, level)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dirzip",
        description="Archive a directory tree into a zip file.",
    )
    parser.add_argument("source", help="Directory to archive.")
    parser.add_argument("archive", help="Path of the zip file to create.")
    parser.add_argument(
        "--include-dir",
        action="store_true",
        default=None,
        help="Store entries under the source directory's own name.",
    )
    parser.add_argument(
        "--compression",
        default=None,
        help=f"Compression method ({', '.join(available_method_names())}).",
    )
    parser.add_argument(
        "--level",
        type=_nonnegative_int,
        default=None,
        help="Compression level for deflated (0-9) or bzip2 (1-9).",
    )
    parser.add_argument("--force", action="store_true", help="Replace ARCHIVE if it already exists.")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on entries that are neither regular files nor directories.",
    )
    parser.add_argument(
        "--save-defaults",
        action="store_true",
        help="Remember the compression and include-dir settings used for this run.",
    )
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Log progress (repeat for per-entry output).")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and write the archive.

    Errors are reported through ``SystemExit`` with a one-line message.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    source = Path(args.source)
    archive = Path(args.archive)
    if not source.is_dir():
        raise SystemExit(f"Not a directory: {source}")

    try:
        options = _resolve_options(args.compression, args.level)
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc

    include_dir_in_path = args.include_dir if args.include_dir is not None else config.load_include_dir_in_path()
    if args.save_defaults:
        config.save_compression_options(options)
        config.save_include_dir_in_path(include_dir_in_path)

    try:
        summary = create_archive_from_directory_atomic(
            archive,
            source,
            include_dir_in_path,
            options,
            overwrite=args.force,
            strict=args.strict,
        )
    except DirzipError as exc:
        raise SystemExit(str(exc)) from exc
    except OSError as exc:
        raise SystemExit(f"Archiving failed: {exc}") from exc

    sys.stdout.write(
        f"{archive}: {summary.files} files, {summary.directories} directories, {summary.total_bytes} bytes\n"
    )
