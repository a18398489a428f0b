"""Per-entry compression settings forwarded to the zip writer."""

from __future__ import annotations

import zipfile
from dataclasses import dataclass
from enum import Enum


class CompressionMethod(str, Enum):
    STORED = "stored"
    DEFLATED = "deflated"
    BZIP2 = "bzip2"
    LZMA = "lzma"

    @property
    def zip_constant(self) -> int:
        return _ZIP_CONSTANTS[self]


_ZIP_CONSTANTS = {
    CompressionMethod.STORED: zipfile.ZIP_STORED,
    CompressionMethod.DEFLATED: zipfile.ZIP_DEFLATED,
    CompressionMethod.BZIP2: zipfile.ZIP_BZIP2,
    CompressionMethod.LZMA: zipfile.ZIP_LZMA,
}

# Inclusive level bounds accepted by ``zipfile`` for each method.
_LEVEL_RANGES: dict[CompressionMethod, tuple[int, int]] = {
    CompressionMethod.DEFLATED: (0, 9),
    CompressionMethod.BZIP2: (1, 9),
}


def available_method_names() -> list[str]:
    """Return method names accepted by :meth:`CompressionOptions.parse`."""
    return [method.value for method in CompressionMethod]


@dataclass(frozen=True)
class CompressionOptions:
    """Compression method plus optional level applied to every written entry.

    ``level`` of ``None`` lets the codec pick its default.
    """

    method: CompressionMethod = CompressionMethod.STORED
    level: int | None = None

    def __post_init__(self) -> None:
        if self.level is None:
            return
        if isinstance(self.level, bool) or not isinstance(self.level, int):
            raise ValueError(f"compression level must be an integer, got {self.level!r}")
        bounds = _LEVEL_RANGES.get(self.method)
        if bounds is None:
            raise ValueError(f"compression method {self.method.value!r} does not take a level")
        low, high = bounds
        if not low <= self.level <= high:
            raise ValueError(f"{self.method.value} level must be in {low}..{high}, got {self.level}")

    @classmethod
    def stored(cls) -> CompressionOptions:
        """Store entries without compression."""
        return cls(CompressionMethod.STORED)

    @classmethod
    def compressed(
        cls,
        method: CompressionMethod = CompressionMethod.DEFLATED,
        level: int | None = None,
    ) -> CompressionOptions:
        return cls(CompressionMethod(method), level)

    @classmethod
    def parse(cls, method_name: str, level: int | None = None) -> CompressionOptions:
        """Build options from a case-insensitive method name.

        Raises ``ValueError`` for unknown names or levels outside the method's range.
        """
        normalized = str(method_name).strip().lower()
        try:
            method = CompressionMethod(normalized)
        except ValueError as exc:
            choices = ", ".join(available_method_names())
            raise ValueError(f"unknown compression method {method_name!r} (choose from {choices})") from exc
        return cls(method, level)

    def zipfile_kwargs(self) -> dict[str, int | None]:
        """Keyword arguments for ``ZipFile.writestr``."""
        return {
            "compress_type": self.method.zip_constant,
            "compresslevel": self.level,
        }


__all__ = [
    "CompressionMethod",
    "CompressionOptions",
    "available_method_names",
]
