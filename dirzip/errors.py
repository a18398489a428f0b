"""Exception types raised by dirzip.

Filesystem failures are not wrapped: they surface as the builtin ``OSError``
family so callers can keep matching on ``FileNotFoundError`` and friends.
"""

from __future__ import annotations


class DirzipError(Exception):
    """Base class for dirzip-specific failures."""


class AlreadyExistsError(DirzipError, FileExistsError):
    """Raised when a target file exists and overwriting was not allowed."""


class NotSupportedEntryError(DirzipError):
    """Raised in strict mode for entries that are neither files nor directories."""


__all__ = [
    "DirzipError",
    "AlreadyExistsError",
    "NotSupportedEntryError",
]
