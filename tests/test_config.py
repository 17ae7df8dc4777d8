import os
import tempfile
import unittest
from pathlib import Path

from pydantic import ValidationError

from fuzip.config import FuzipSettings, env_log_level, find_config
from fuzip.execute import MissingPolicy


class TestFuzipSettings(unittest.TestCase):
    def test_defaults(self):
        settings = FuzipSettings.load(None)
        self.assertEqual(settings.log_level, "INFO")
        self.assertFalse(settings.full_only)
        self.assertIs(settings.missing, MissingPolicy.ERROR)
        self.assertFalse(settings.verbose)

    def test_load_yaml(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "fuzip.yaml"
            path.write_text(
                "log_level: debug\nfull_only: true\nmissing: empty\n",
                encoding="utf-8",
            )
            settings = FuzipSettings.load(path)
        self.assertEqual(settings.log_level, "DEBUG")
        self.assertTrue(settings.full_only)
        self.assertIs(settings.missing, MissingPolicy.EMPTY)

    def test_empty_file_gives_defaults(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "fuzip.yaml"
            path.write_text("", encoding="utf-8")
            self.assertEqual(FuzipSettings.load(path), FuzipSettings())

    def test_rejects_unknown_values(self):
        with self.assertRaises(ValidationError):
            FuzipSettings(log_level="chatty")
        with self.assertRaises(ValidationError):
            FuzipSettings(missing="ignore")

    def test_env_overrides_log_level(self):
        settings = FuzipSettings(full_only=True).with_env({"FUZIP_LOG": "warning"})
        self.assertEqual(settings.log_level, "WARNING")
        self.assertTrue(settings.full_only)

    def test_env_accepts_module_filters(self):
        settings = FuzipSettings().with_env({"FUZIP_LOG": "fuzip=debug"})
        self.assertEqual(settings.log_level, "DEBUG")

    def test_env_level_parsing(self):
        cases = {
            "warn": "WARNING",
            "error,fuzip=trace": "DEBUG",
            "fuzip.cli=info,warn": "info",
            "other=debug": None,
            "": None,
        }
        for value, expected in cases.items():
            with self.subTest(value=value):
                self.assertEqual(env_log_level(value), expected)

    def test_env_filter_for_other_modules_is_ignored(self):
        settings = FuzipSettings(log_level="ERROR")
        self.assertIs(settings.with_env({"FUZIP_LOG": "urllib3=debug"}), settings)

    def test_env_without_level_is_ignored(self):
        settings = FuzipSettings(log_level="ERROR")
        self.assertIs(settings.with_env({}), settings)


class TestFindConfig(unittest.TestCase):
    def setUp(self):
        self._cwd = os.getcwd()
        self._tmp = tempfile.TemporaryDirectory()
        os.chdir(self._tmp.name)

    def tearDown(self):
        os.chdir(self._cwd)
        self._tmp.cleanup()

    def test_explicit_path_wins(self):
        Path("fuzip.yaml").write_text("", encoding="utf-8")
        self.assertEqual(find_config(Path("other.yaml")), Path("other.yaml"))

    def test_finds_config_in_cwd(self):
        Path("fuzip.yml").write_text("", encoding="utf-8")
        self.assertEqual(find_config(None), Path.cwd() / "fuzip.yml")

    def test_config_is_optional(self):
        self.assertIsNone(find_config(None))


if __name__ == "__main__":
    unittest.main()
