"""Archive-writer collaborators used by the directory packer.

The packer only needs the three operations of :class:`ArchiveWriter`;
:class:`ZipArchiveWriter` provides them on top of :mod:`zipfile`.
"""

from __future__ import annotations

import stat
import time
import zipfile
from pathlib import Path
from typing import BinaryIO, Protocol

from .compression import CompressionOptions

# Earliest timestamp the zip format can represent.
_MIN_DATE_TIME = (1980, 1, 1, 0, 0, 0)
_DEFAULT_FILE_MODE = stat.S_IFREG | 0o644
_DEFAULT_DIR_MODE = stat.S_IFDIR | 0o755
_MSDOS_DIRECTORY_FLAG = 0x10


class ArchiveWriter(Protocol):
    def write_file(
        self,
        name: str,
        data: bytes,
        options: CompressionOptions,
        mtime: float | None = None,
        mode: int | None = None,
    ) -> None: ...

    def add_directory(
        self,
        name: str,
        options: CompressionOptions,
        mtime: float | None = None,
        mode: int | None = None,
    ) -> None: ...

    def finish(self) -> None: ...


def _zip_date_time(mtime: float | None) -> tuple[int, int, int, int, int, int]:
    """Convert an epoch timestamp to a zip date tuple, clamped to 1980..2107."""
    if mtime is None:
        mtime = time.time()
    date_time = time.localtime(mtime)[:6]
    if date_time < _MIN_DATE_TIME:
        return _MIN_DATE_TIME
    if date_time[0] > 2107:
        return (2107, 12, 31, 23, 59, 59)
    return date_time


class ZipArchiveWriter:
    """Write entries into a zip container.

    ``target`` is a path or a seekable binary file object. The zip is opened
    in write mode (truncating) with ZIP64 extensions allowed. :meth:`finish`
    commits the central directory; calling it again is a no-op.
    """

    def __init__(self, target: str | Path | BinaryIO) -> None:
        self._zip = zipfile.ZipFile(target, mode="w", allowZip64=True)
        self._finished = False

    @property
    def finished(self) -> bool:
        return self._finished

    def write_file(
        self,
        name: str,
        data: bytes,
        options: CompressionOptions,
        mtime: float | None = None,
        mode: int | None = None,
    ) -> None:
        info = zipfile.ZipInfo(name, date_time=_zip_date_time(mtime))
        info.external_attr = ((mode if mode is not None else _DEFAULT_FILE_MODE) & 0xFFFF) << 16
        self._zip.writestr(info, data, **options.zipfile_kwargs())

    def add_directory(
        self,
        name: str,
        options: CompressionOptions,
        mtime: float | None = None,
        mode: int | None = None,
    ) -> None:
        """Add a directory marker; markers are always stored, so ``options`` is ignored."""
        if not name.endswith("/"):
            name += "/"
        info = zipfile.ZipInfo(name, date_time=_zip_date_time(mtime))
        info.external_attr = (((mode if mode is not None else _DEFAULT_DIR_MODE) & 0xFFFF) << 16) | _MSDOS_DIRECTORY_FLAG
        # Directory markers carry no data, so they are always stored.
        info.compress_type = zipfile.ZIP_STORED
        self._zip.writestr(info, b"")

    def finish(self) -> None:
        if self._finished:
            return
        self._finished = True
        self._zip.close()

    def __enter__(self) -> ZipArchiveWriter:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.finish()


__all__ = [
    "ArchiveWriter",
    "ZipArchiveWriter",
]
