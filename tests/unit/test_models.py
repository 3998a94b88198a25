"""Unit tests for core models."""

import pytest

from activitygen.core.exceptions import ValidationError
from activitygen.models.activity import (
    ActivityRequest,
    ActivityType,
    RunSettings,
    build_request,
)
from activitygen.models.report import ReportKind, ScaffoldReport
from activitygen.models.resources import (
    ManifestEntry,
    RequiredEntry,
    ResourceObligation,
)


class TestActivityRequest:
    """Tests for ActivityRequest and build_request."""

    def test_layout_name_is_derived(self):
        """Test default layout derivation.

        Verifies that a request built without a layout name gets the snake
        case form of the activity name, minus its Activity suffix.
        """
        request = build_request(ActivityType.EMPTY, "SettingsActivity", "com.app.view.activities")

        assert request.layout_name == "activity_settings"
        assert request.title_resource == "title_activity_settings"

    def test_explicit_layout_name_wins(self):
        request = build_request("blank", "HomeActivity", "com.app", layout_name="main_screen")

        assert request.layout_name == "main_screen"
        assert request.activity_type == ActivityType.BLANK

    def test_qualified_name(self):
        request = build_request(ActivityType.EMPTY, "SettingsActivity", "com.app.view.activities")

        assert request.qualified_name == "com.app.view.activities.SettingsActivity"

    def test_request_is_frozen(self):
        request = build_request(ActivityType.EMPTY, "SettingsActivity", "com.app")

        with pytest.raises(Exception):
            request.activity_name = "OtherActivity"

    @pytest.mark.parametrize("name", ["", "1Activity", "My Activity", "Foo-Bar"])
    def test_invalid_activity_name(self, name):
        with pytest.raises(ValidationError) as exc_info:
            build_request(ActivityType.EMPTY, name, "com.app", layout_name="activity_x")

        assert exc_info.value.field_name == "activity_name"

    @pytest.mark.parametrize("package", ["", "com..app", "com.1app", "com.app."])
    def test_invalid_package(self, package):
        with pytest.raises(ValidationError) as exc_info:
            build_request(ActivityType.EMPTY, "MainActivity", package)

        assert exc_info.value.field_name == "activity_package"

    @pytest.mark.parametrize("layout", ["Activity_main", "activity-main", "_main"])
    def test_invalid_layout_name(self, layout):
        with pytest.raises(ValidationError) as exc_info:
            build_request(ActivityType.EMPTY, "MainActivity", "com.app", layout_name=layout)

        assert exc_info.value.field_name == "layout_name"

    def test_unknown_activity_type(self):
        with pytest.raises(ValidationError):
            build_request("tabbed", "MainActivity", "com.app")

    def test_direct_construction_keeps_given_values(self):
        request = ActivityRequest(
            activity_name="MainActivity",
            activity_package="com.app",
            layout_name="activity_main",
            launcher=True,
        )

        assert request.activity_type == ActivityType.EMPTY
        assert request.launcher


class TestRunSettings:
    """Tests for RunSettings."""

    def test_from_request(self):
        request = build_request(ActivityType.BLANK, "HomeActivity", "com.app.ui", launcher=True)

        settings = RunSettings.from_request(request, "com.app")

        assert settings.activity_type == ActivityType.BLANK
        assert settings.activity_name == "HomeActivity"
        assert settings.layout_name == "activity_home"
        assert settings.launcher is True
        assert settings.app_package == "com.app"

    def test_as_defaults_skips_unset(self):
        settings = RunSettings(activity_package="com.app.ui")

        assert settings.as_defaults() == {"activity_package": "com.app.ui"}


class TestResourceModels:
    """Tests for resource merge models."""

    def test_obligation_defaults_to_resources_tag(self):
        obligation = ResourceObligation(
            target_file="app/src/main/res/values/strings.xml",
            stock_template="values/strings.xml",
            entries=[RequiredEntry(probe="title_main", fragment="x\n")],
        )

        assert obligation.enclosing_tag == "resources"
        assert obligation.probes == ["title_main"]

    def test_plain_manifest_entry(self):
        """Test rendering of a non-launcher entry."""
        entry = ManifestEntry(
            activity_qualified_name="com.app.SettingsActivity",
            label_ref="@string/title_activity_settings",
        )

        assert entry.render() == (
            "        <activity\n"
            '            android:name="com.app.SettingsActivity"\n'
            '            android:label="@string/title_activity_settings" >\n'
            "        </activity>\n"
        )

    def test_launcher_manifest_entry(self):
        """Test rendering of a launcher entry.

        Verifies that the launcher entry is exported and carries the
        MAIN/LAUNCHER intent-filter.
        """
        entry = ManifestEntry(
            activity_qualified_name="com.app.HomeActivity",
            label_ref="@string/title_activity_home",
            is_launcher=True,
        )

        rendered = entry.render(indent="    ")

        assert rendered.startswith("    <activity\n")
        assert 'android:exported="true"' in rendered
        assert '<action android:name="android.intent.action.MAIN" />' in rendered
        assert '<category android:name="android.intent.category.LAUNCHER" />' in rendered
        assert rendered.endswith("    </activity>\n")


class TestScaffoldReport:
    """Tests for ScaffoldReport."""

    def test_events_keep_order(self):
        report = ScaffoldReport()
        report.add(ReportKind.CREATE, "a.xml")
        report.add(ReportKind.UPDATE, "a.xml")
        report.add(ReportKind.CREATE, "b.xml")

        assert report.created == ["a.xml", "b.xml"]
        assert report.updated == ["a.xml"]
        assert [event.kind for event in report.events] == [
            ReportKind.CREATE,
            ReportKind.UPDATE,
            ReportKind.CREATE,
        ]

    def test_new_report_is_successful(self):
        report = ScaffoldReport()

        assert report.success
        assert report.errors == []
        assert report.warnings == []
