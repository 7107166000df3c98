from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from consoletools import config


class ConfigBehaviorTests(unittest.TestCase):
    def test_missing_or_malformed_config_loads_as_empty(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("consoletools.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})
                config_path.write_text("{not json", encoding="utf-8")
                self.assertEqual(config.load_config(), {})
                config_path.write_text("[1, 2]", encoding="utf-8")
                self.assertEqual(config.load_config(), {})

    def test_preferences_round_trip_under_distinct_keys(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "nested" / "config.json"
            with mock.patch("consoletools.config.CONFIG_PATH", config_path):
                config.save_theme_name(" ocean ")
                config.save_allow_directory_selection(True)
                config.save_last_directory(Path(tmp))

                saved = config.load_config()
                self.assertEqual(saved.get("theme"), "ocean")
                self.assertIs(saved.get("allow_directory_selection"), True)
                self.assertEqual(config.load_theme_name(), "ocean")
                self.assertTrue(config.load_allow_directory_selection())
                self.assertEqual(config.load_last_directory(), Path(tmp))

    def test_invalid_values_fall_back(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text(
                '{"theme": "  ", "allow_directory_selection": "yes", "last_directory": "%s"}'
                % (Path(tmp) / "gone").as_posix(),
                encoding="utf-8",
            )
            with mock.patch("consoletools.config.CONFIG_PATH", config_path):
                self.assertIsNone(config.load_theme_name())
                self.assertFalse(config.load_allow_directory_selection())
                self.assertIsNone(config.load_last_directory())

    def test_save_failure_is_not_fatal(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            blocker = Path(tmp) / "file"
            blocker.write_text("", encoding="utf-8")
            with mock.patch("consoletools.config.CONFIG_PATH", blocker / "config.json"):
                with self.assertLogs("consoletools.config", level="WARNING"):
                    config.save_theme_name("ocean")


if __name__ == "__main__":
    unittest.main()
