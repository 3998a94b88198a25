"""Unit tests for the command-line interface."""

import json
import logging

import pytest
from typer.testing import CliRunner

from activitygen import __version__
from activitygen.cli import app
from activitygen.core.config import get_config

from tests.conftest import MANIFEST_PATH


runner = CliRunner()

CLASS_FILE = "app/src/main/java/com/app/view/activities/SettingsActivity.java"


def invoke_new(project, *args, input=None):
    return runner.invoke(
        app,
        ["new", *args, "--project-dir", str(project), "--app-package", "com.app"],
        input=input,
    )


@pytest.fixture(autouse=True)
def fresh_config():
    """Re-read the environment for every invocation and drop its log handlers."""
    get_config.cache_clear()
    yield
    get_config.cache_clear()
    logging.getLogger().handlers.clear()


class TestNewCommand:
    """Tests for `activitygen new`."""

    def test_all_arguments_given(self, android_project):
        """Test a non-interactive run with every value on the command line."""
        result = invoke_new(
            android_project,
            "empty",
            "SettingsActivity",
            "com.app.view.activities",
            "--no-launcher",
            "--no-input",
        )

        assert result.exit_code == 0, result.output
        assert (android_project / CLASS_FILE).is_file()
        assert (android_project / "app/src/main/res/layout/activity_settings.xml").is_file()
        assert "create" in result.output
        assert CLASS_FILE in result.output
        assert MANIFEST_PATH in result.output

    def test_settings_are_saved(self, android_project):
        invoke_new(android_project, "blank", "HomeActivity", "com.app.ui", "--no-input")

        saved = json.loads((android_project / ".activitygen.json").read_text(encoding="utf-8"))

        assert saved["activity_type"] == "blank"
        assert saved["activity_package"] == "com.app.ui"
        assert saved["app_package"] == "com.app"

    def test_stored_package_is_reused(self, android_project):
        """Test that the package answered last time becomes the default."""
        invoke_new(android_project, "empty", "FirstActivity", "com.app.ui", "--no-input")

        result = invoke_new(android_project, "empty", "SecondActivity", "--no-input")

        assert result.exit_code == 0, result.output
        assert (android_project / "app/src/main/java/com/app/ui/SecondActivity.java").is_file()

    def test_defaults_without_input(self, android_project):
        result = invoke_new(android_project, "fullscreen", "--no-input")

        assert result.exit_code == 0, result.output
        assert (
            android_project / "app/src/main/java/com/app/view/activities/FullscreenActivity.java"
        ).is_file()
        assert (android_project / "app/src/main/res/layout/activity_fullscreen.xml").is_file()

    def test_prompts_for_missing_values(self, android_project):
        """Test interactive collection of the missing answers.

        The type and name are typed in, the package and layout defaults are
        accepted and the launcher question is declined.
        """
        result = invoke_new(android_project, input="blank\nHomeActivity\n\n\nn\n")

        assert result.exit_code == 0, result.output
        assert "(1/5)" in result.output
        assert (android_project / "app/src/main/java/com/app/view/activities/HomeActivity.java").is_file()
        manifest = (android_project / MANIFEST_PATH).read_text(encoding="utf-8")
        assert "LAUNCHER" not in manifest

    def test_conflict_exits_with_one(self, android_project):
        args = ("empty", "SettingsActivity", "com.app.view.activities", "--no-input")
        invoke_new(android_project, *args)
        manifest = (android_project / MANIFEST_PATH).read_text(encoding="utf-8")

        result = invoke_new(android_project, *args)

        assert result.exit_code == 1
        assert "already exists" in result.output
        assert "Nothing was written" in result.output
        assert (android_project / MANIFEST_PATH).read_text(encoding="utf-8") == manifest

    def test_missing_manifest_exits_with_two(self, temp_dir):
        result = invoke_new(temp_dir, "empty", "SettingsActivity", "com.app", "--no-input")

        assert result.exit_code == 2
        assert "✗" in result.output
        assert not (temp_dir / "app/src/main/java").exists()

    def test_invalid_name_exits_with_two(self, android_project):
        result = invoke_new(android_project, "empty", "Not-Valid", "com.app", "--no-input")

        assert result.exit_code == 2
        assert "activity_name" in result.output
        assert not (android_project / ".activitygen.json").exists()

    def test_undecodable_value_file_exits_with_two(self, android_project):
        """Test that a value file that is not UTF-8 is reported as an error line."""
        strings = android_project / "app/src/main/res/values/strings.xml"
        strings.parent.mkdir(parents=True)
        strings.write_bytes(
            b'<?xml version="1.0" encoding="utf-8"?>\n'
            b'<resources>\n    <string name="x">\xff\xfe</string>\n</resources>\n'
        )

        result = invoke_new(android_project, "empty", "SettingsActivity", "com.app.view.activities", "--no-input")

        assert result.exit_code == 2
        assert "✗" in result.output
        assert "UTF-8" in result.output

    def test_invalid_environment_exits_with_two(self, android_project, monkeypatch):
        monkeypatch.setenv("ACTIVITYGEN_MANIFEST_POSITION", "middle")

        result = invoke_new(android_project, "empty", "SettingsActivity", "com.app", "--no-input")

        assert result.exit_code == 2
        assert "ACTIVITYGEN_MANIFEST_POSITION" in result.output
        assert not (android_project / "app/src/main/java").exists()

    def test_unknown_type_is_rejected(self, android_project):
        result = invoke_new(android_project, "tabbed", "TabActivity", "com.app", "--no-input")

        assert result.exit_code != 0
        assert not (android_project / "app/src/main/java").exists()


class TestOtherCommands:
    """Tests for the version option and the config command."""

    def test_version(self):
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert f"activitygen v{__version__}" in result.output

    def test_config(self):
        result = runner.invoke(app, ["config"])

        assert result.exit_code == 0
        assert "Current Configuration" in result.output
        assert "ACTIVITYGEN_LOG_LEVEL" in result.output

    def test_config_with_invalid_environment(self, monkeypatch):
        monkeypatch.setenv("ACTIVITYGEN_LOG_LEVEL", "verbose")

        result = runner.invoke(app, ["config"])

        assert result.exit_code == 2
        assert "ACTIVITYGEN_LOG_LEVEL" in result.output
        assert "Current Configuration" not in result.output
