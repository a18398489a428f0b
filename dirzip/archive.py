"""Pack a directory tree into an archive.

:func:`pack_directory` walks the tree with an explicit stack and hands each
entry to an :class:`~dirzip.writer.ArchiveWriter`. The ``create_*`` helpers
own the output file and the zip writer around it.
"""

from __future__ import annotations

import logging
import os
import shutil
import tempfile
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from .compression import CompressionOptions
from .errors import AlreadyExistsError, NotSupportedEntryError
from .fs import list_directory_children, read_file_bytes
from .paths import archive_name, relative_parts
from .writer import ArchiveWriter, ZipArchiveWriter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ArchiveSummary:
    """Counts collected while packing one directory tree."""

    files: int = 0
    directories: int = 0
    skipped: int = 0
    total_bytes: int = 0


def pack_directory(
    writer: ArchiveWriter,
    directory: Path,
    include_dir_in_path: bool,
    options: CompressionOptions | None = None,
    strict: bool = False,
    exclude: Iterable[Path] = (),
) -> ArchiveSummary:
    """Write every file and directory under ``directory`` into ``writer``.

    Stored names are relative to ``directory``; with ``include_dir_in_path``
    they start with the directory's own name (``/media/cd1`` -> ``cd1/...``).
    Entries that are neither files nor directories are skipped with a warning,
    or raise :class:`NotSupportedEntryError` when ``strict`` is set. Files in
    ``exclude`` (compared after resolving) are left out, which keeps an archive
    written inside ``directory`` from packing itself.

    ``writer.finish()`` is called once the tree is exhausted. Any ``OSError``
    or writer error aborts the walk and propagates unchanged.
    """
    if options is None:
        options = CompressionOptions.stored()
    directory = Path(directory)
    excluded = {Path(path).resolve() for path in exclude}

    files = directories = skipped = total_bytes = 0
    pending: list[Path] = [directory]
    while pending:
        current = pending.pop()
        for child in list_directory_children(current):
            if child.is_file:
                if excluded and child.path.resolve() in excluded:
                    logger.debug("skipping archive output %s", child.path)
                    continue
                data = read_file_bytes(child.path)
                name = archive_name(relative_parts(directory, child.path, include_dir_in_path))
                logger.debug("adding file %s (%d bytes)", name, len(data))
                writer.write_file(name, data, options, mtime=child.mtime, mode=child.mode)
                files += 1
                total_bytes += len(data)
            elif child.is_dir:
                name = archive_name(relative_parts(directory, child.path, include_dir_in_path), is_dir=True)
                logger.debug("adding directory %s", name)
                writer.add_directory(name, options, mtime=child.mtime, mode=child.mode)
                directories += 1
                pending.append(child.path)
            else:
                if strict:
                    raise NotSupportedEntryError(f"Unsupported filesystem entry: {child.path}")
                logger.warning("skipping unsupported filesystem entry %s", child.path)
                skipped += 1

    writer.finish()
    return ArchiveSummary(files=files, directories=directories, skipped=skipped, total_bytes=total_bytes)


def _apply_default_mode(tmp_path: Path, archive_path: Path) -> None:
    """Give a ``mkstemp`` file the mode a plain ``open(..., "wb")`` would.

    An existing target keeps its mode; a new one follows the process umask.
    """
    if archive_path.exists():
        shutil.copymode(archive_path, tmp_path)
        return
    umask = os.umask(0)
    os.umask(umask)
    os.chmod(tmp_path, 0o666 & ~umask)


def create_archive_from_directory(
    archive_path: Path,
    source_directory: Path,
    include_dir_in_path: bool,
    options: CompressionOptions | None = None,
    overwrite: bool = True,
    strict: bool = False,
    exclude: Iterable[Path] = (),
) -> ArchiveSummary:
    """Create a zip at ``archive_path`` holding the tree under ``source_directory``.

    The archive file is created or truncated. With ``overwrite=False`` an
    existing file raises :class:`AlreadyExistsError` and is left alone. The
    archive itself and any path in ``exclude`` are never packed. On failure
    the output is closed but may hold a partial, unusable archive; use
    :func:`create_archive_from_directory_atomic` to avoid that.
    """
    archive_path = Path(archive_path)
    if archive_path.exists() and not overwrite:
        raise AlreadyExistsError(f"The specified file already exists: {archive_path}")

    with open(archive_path, "wb") as handle:
        writer = ZipArchiveWriter(handle)
        try:
            summary = pack_directory(
                writer,
                source_directory,
                include_dir_in_path,
                options,
                strict=strict,
                exclude=[archive_path, *exclude],
            )
        except BaseException:
            try:
                writer.finish()
            except Exception:
                logger.debug("could not finalize %s after failure", archive_path, exc_info=True)
            raise

    logger.info(
        "wrote %s: %d files, %d directories, %d bytes",
        archive_path,
        summary.files,
        summary.directories,
        summary.total_bytes,
    )
    return summary


def create_archive_from_directory_atomic(
    archive_path: Path,
    source_directory: Path,
    include_dir_in_path: bool,
    options: CompressionOptions | None = None,
    overwrite: bool = True,
    strict: bool = False,
) -> ArchiveSummary:
    """Like :func:`create_archive_from_directory`, but all-or-nothing on disk.

    The zip is written to a temporary file beside ``archive_path`` and moved
    into place only after it is finalized; the temporary file is removed on
    failure so ``archive_path`` is never left half-written. Neither the
    temporary file nor a previous ``archive_path`` is packed when the target
    lies inside ``source_directory``.
    """
    archive_path = Path(archive_path)
    if archive_path.exists() and not overwrite:
        raise AlreadyExistsError(f"The specified file already exists: {archive_path}")

    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{archive_path.name}.",
        suffix=".tmp",
        dir=archive_path.parent,
    )
    os.close(fd)
    tmp_path = Path(tmp_name)
    try:
        _apply_default_mode(tmp_path, archive_path)
        summary = create_archive_from_directory(
            tmp_path,
            source_directory,
            include_dir_in_path,
            options,
            overwrite=True,
            strict=strict,
            exclude=[archive_path],
        )
        os.replace(tmp_path, archive_path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise
    return summary


__all__ = [
    "ArchiveSummary",
    "pack_directory",
    "create_archive_from_directory",
    "create_archive_from_directory_atomic",
]
