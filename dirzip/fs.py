"""Filesystem helpers: child listing with entry kinds and whole-file I/O."""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .errors import AlreadyExistsError


class EntryKind(str, Enum):
    FILE = "file"
    DIRECTORY = "directory"
    OTHER = "other"


@dataclass(frozen=True)
class DirectoryChild:
    """One directory child plus the metadata the archiver stores with it."""

    name: str
    path: Path
    kind: EntryKind
    mode: int
    mtime: float

    @property
    def is_file(self) -> bool:
        return self.kind is EntryKind.FILE

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY


def entry_kind(mode: int) -> EntryKind:
    """Classify an ``st_mode`` value."""
    if stat.S_ISREG(mode):
        return EntryKind.FILE
    if stat.S_ISDIR(mode):
        return EntryKind.DIRECTORY
    return EntryKind.OTHER


def list_directory_children(directory: Path) -> list[DirectoryChild]:
    """List immediate children of ``directory`` sorted by name.

    Metadata follows symlinks, so a link to a file is listed as a file. Any
    ``OSError`` from scanning or stat-ing propagates, including entries that
    disappear between the scan and the stat.
    """
    children: list[DirectoryChild] = []
    with os.scandir(directory) as entries:
        for entry in entries:
            info = entry.stat(follow_symlinks=True)
            children.append(
                DirectoryChild(
                    name=entry.name,
                    path=Path(entry.path),
                    kind=entry_kind(info.st_mode),
                    mode=info.st_mode,
                    mtime=info.st_mtime,
                )
            )
    children.sort(key=lambda item: item.name)
    return children


def read_file_bytes(path: Path) -> bytes:
    """Read the whole file; the handle is closed before returning."""
    with open(path, "rb") as handle:
        return handle.read()


def file_write_all_bytes(path: Path, data: bytes, overwrite: bool) -> int:
    """Write ``data`` to ``path`` and return the number of bytes written.

    Raises :class:`AlreadyExistsError` without touching the file when it exists
    and ``overwrite`` is false. Otherwise the file is created or truncated, so
    shorter content never leaves trailing bytes from the old file.
    """
    path = Path(path)
    if path.exists() and not overwrite:
        raise AlreadyExistsError(f"The specified file already exists: {path}")
    with open(path, "wb") as handle:
        handle.write(data)
    return len(data)


__all__ = [
    "EntryKind",
    "DirectoryChild",
    "entry_kind",
    "list_directory_children",
    "read_file_bytes",
    "file_write_all_bytes",
]
