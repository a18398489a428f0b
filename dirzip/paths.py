"""Archive-relative path computation.

Relative paths are computed positionally: segment ``i`` of the current path is
compared to segment ``i`` of the root, and only segments beyond the root's
depth are kept. Paths are not normalized, so callers pass paths that share a
consistent form (both absolute, both resolved, or both relative).
"""

from __future__ import annotations

from pathlib import PurePath


def relative_parts(root: PurePath, current: PurePath, include_dir_in_path: bool) -> tuple[str, ...]:
    """Return the segments of ``current`` that lie beyond ``root``.

    With ``include_dir_in_path`` the root's own final segment is kept as the
    first element, so ``a/b`` + ``a/b/c/d.jpg`` gives ``("b", "c", "d.jpg")``.
    Stops at the first positional mismatch and returns what was collected,
    which is usually nothing when ``current`` is not under ``root``.
    """
    root_parts = PurePath(root).parts
    if include_dir_in_path:
        root_parts = root_parts[:-1]

    result: list[str] = []
    for index, part in enumerate(PurePath(current).parts):
        if index < len(root_parts):
            if root_parts[index] != part:
                break
        else:
            result.append(part)
    return tuple(result)


def make_relative_path(root: PurePath, current: PurePath, include_dir_in_path: bool) -> PurePath:
    """Return :func:`relative_parts` joined back into a path."""
    return PurePath(*relative_parts(root, current, include_dir_in_path))


def archive_name(parts: tuple[str, ...], is_dir: bool = False) -> str:
    """Join segments into a zip entry name; directory markers end with ``/``."""
    name = "/".join(parts)
    if is_dir and name:
        name += "/"
    return name


__all__ = [
    "relative_parts",
    "make_relative_path",
    "archive_name",
]
