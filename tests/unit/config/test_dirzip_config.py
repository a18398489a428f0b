"""Tests for config persistence and input sanitization.

Malformed config values must fall back to stored compression and
``include_dir_in_path=False``.
"""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from dirzip import config
from dirzip.compression import CompressionMethod, CompressionOptions


class ConfigBehaviorTests(unittest.TestCase):
    def test_missing_config_uses_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch("dirzip.config.CONFIG_PATH", Path(tmp) / "missing" / "config.json"):
                self.assertEqual(config.load_config(), {})
                self.assertEqual(config.load_compression_options(), CompressionOptions.stored())
                self.assertFalse(config.load_include_dir_in_path())

    def test_compression_options_round_trip(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "nested" / "config.json"
            with mock.patch("dirzip.config.CONFIG_PATH", config_path):
                expected = CompressionOptions.compressed(CompressionMethod.DEFLATED, 7)
                config.save_compression_options(expected)
                self.assertEqual(config.load_compression_options(), expected)

                config.save_compression_options(CompressionOptions.compressed(CompressionMethod.LZMA))
                self.assertNotIn("compression_level", config.load_config())

    def test_include_dir_round_trip_keeps_other_keys(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch("dirzip.config.CONFIG_PATH", Path(tmp) / "config.json"):
                config.save_compression_options(CompressionOptions.parse("bzip2", 3))
                config.save_include_dir_in_path(True)

                self.assertTrue(config.load_include_dir_in_path())
                self.assertEqual(config.load_config().get("compression"), "bzip2")

    def test_invalid_values_are_sanitized(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch("dirzip.config.CONFIG_PATH", Path(tmp) / "config.json"):
                config.save_config({"compression": "deflated", "compression_level": 42, "include_dir_in_path": "yes"})
                self.assertEqual(config.load_compression_options(), CompressionOptions.parse("deflated"))
                self.assertFalse(config.load_include_dir_in_path())

                config.save_config({"compression": "zstd", "compression_level": True})
                self.assertEqual(config.load_compression_options(), CompressionOptions.stored())

    def test_malformed_json_falls_back_to_empty(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text("{not json", encoding="utf-8")
            with mock.patch("dirzip.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})
            config_path.write_text("[1, 2]\n", encoding="utf-8")
            with mock.patch("dirzip.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})


if __name__ == "__main__":
    unittest.main()
