"""Tests for compression option parsing and validation."""

from __future__ import annotations

import unittest
import zipfile

from dirzip.compression import CompressionMethod, CompressionOptions, available_method_names


class CompressionOptionsTests(unittest.TestCase):
    def test_default_is_stored_without_level(self) -> None:
        options = CompressionOptions()
        self.assertEqual(options, CompressionOptions.stored())
        self.assertEqual(options.zipfile_kwargs(), {"compress_type": zipfile.ZIP_STORED, "compresslevel": None})

    def test_parse_is_case_insensitive(self) -> None:
        options = CompressionOptions.parse("  Deflated ", 6)
        self.assertEqual(options.method, CompressionMethod.DEFLATED)
        self.assertEqual(options.zipfile_kwargs(), {"compress_type": zipfile.ZIP_DEFLATED, "compresslevel": 6})

    def test_parse_unknown_method_lists_choices(self) -> None:
        with self.assertRaises(ValueError) as exc_info:
            CompressionOptions.parse("zstd")
        for name in available_method_names():
            self.assertIn(name, str(exc_info.exception))

    def test_level_ranges_are_enforced(self) -> None:
        CompressionOptions.compressed(CompressionMethod.DEFLATED, 0)
        CompressionOptions.compressed(CompressionMethod.BZIP2, 9)
        with self.assertRaises(ValueError):
            CompressionOptions.compressed(CompressionMethod.DEFLATED, 10)
        with self.assertRaises(ValueError):
            CompressionOptions.compressed(CompressionMethod.BZIP2, 0)

    def test_methods_without_levels_reject_them(self) -> None:
        with self.assertRaises(ValueError):
            CompressionOptions(CompressionMethod.STORED, 1)
        with self.assertRaises(ValueError):
            CompressionOptions.parse("lzma", 3)

    def test_boolean_level_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            CompressionOptions.compressed(CompressionMethod.DEFLATED, True)

    def test_method_zip_constants(self) -> None:
        self.assertEqual(CompressionMethod.BZIP2.zip_constant, zipfile.ZIP_BZIP2)
        self.assertEqual(CompressionMethod.LZMA.zip_constant, zipfile.ZIP_LZMA)


if __name__ == "__main__":
    unittest.main()
