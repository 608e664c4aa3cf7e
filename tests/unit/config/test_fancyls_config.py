"""Tests for defensive config loading."""

from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from fancyls import config


class ConfigLoadingTests(unittest.TestCase):
    def _with_config(self, text: str | None):
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        config_path = Path(tmp.name) / "config.json"
        if text is not None:
            config_path.write_text(text, encoding="utf-8")
        patcher = mock.patch("fancyls.config.CONFIG_PATH", config_path)
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_missing_file_yields_defaults(self) -> None:
        self._with_config(None)
        self.assertEqual(config.load_config(), {})
        self.assertIsNone(config.load_theme_name())
        self.assertFalse(config.load_no_color())

    def test_malformed_json_yields_defaults(self) -> None:
        self._with_config("{not json")
        self.assertEqual(config.load_config(), {})

    def test_non_object_json_yields_defaults(self) -> None:
        self._with_config(json.dumps(["theme", "ocean"]))
        self.assertEqual(config.load_config(), {})

    def test_reads_theme_and_no_color(self) -> None:
        self._with_config(json.dumps({"theme": " ocean ", "no_color": True}))
        self.assertEqual(config.load_theme_name(), "ocean")
        self.assertTrue(config.load_no_color())

    def test_wrongly_typed_values_are_ignored(self) -> None:
        self._with_config(json.dumps({"theme": 3, "no_color": "yes"}))
        self.assertIsNone(config.load_theme_name())
        self.assertFalse(config.load_no_color())


if __name__ == "__main__":
    unittest.main()
