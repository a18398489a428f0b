"""Public package surface for dirzip.

Re-exports the archiving entry points and path helpers. ``main`` is imported
lazily so library users never pay for CLI setup.
"""

from __future__ import annotations

from .archive import (
    ArchiveSummary,
    create_archive_from_directory,
    create_archive_from_directory_atomic,
    pack_directory,
)
from .compression import CompressionMethod, CompressionOptions
from .errors import AlreadyExistsError, DirzipError, NotSupportedEntryError
from .fs import file_write_all_bytes
from .paths import make_relative_path, relative_parts
from .writer import ArchiveWriter, ZipArchiveWriter


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "AlreadyExistsError",
    "ArchiveSummary",
    "ArchiveWriter",
    "CompressionMethod",
    "CompressionOptions",
    "DirzipError",
    "NotSupportedEntryError",
    "ZipArchiveWriter",
    "create_archive_from_directory",
    "create_archive_from_directory_atomic",
    "file_write_all_bytes",
    "main",
    "make_relative_path",
    "pack_directory",
    "relative_parts",
]
