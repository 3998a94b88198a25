"""Test configuration for activitygen."""

import pytest
from pathlib import Path
import tempfile

from activitygen.core.paths import ProjectPaths
from activitygen.models.activity import ActivityType, build_request
from activitygen.services.templating import TemplateRenderer
from activitygen.storage import LocalStorageBackend


MANIFEST_PATH = "app/src/main/AndroidManifest.xml"

PLAIN_MANIFEST = """\
<?xml version="1.0" encoding="utf-8"?>
<manifest xmlns:android="http://schemas.android.com/apk/res/android"
    package="com.app">

    <application
        android:allowBackup="true"
        android:label="@string/app_name">
    </application>

</manifest>
"""

LAUNCHER_MANIFEST = """\
<?xml version="1.0" encoding="utf-8"?>
<manifest xmlns:android="http://schemas.android.com/apk/res/android"
    package="com.app">

    <application
        android:allowBackup="true"
        android:label="@string/app_name">
        <activity
            android:name="com.app.MainActivity"
            android:exported="true"
            android:label="@string/app_name" >
            <intent-filter>
                <action android:name="android.intent.action.MAIN" />

                <category android:name="android.intent.category.LAUNCHER" />
            </intent-filter>
        </activity>
    </application>

</manifest>
"""


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests.

    Yields:
        Path: A Path object pointing to the temporary directory.
            The directory is automatically cleaned up after the test.
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def android_project(temp_dir):
    """Create a minimal Android project with a manifest and nothing else.

    Returns:
        Path: The project directory.
    """
    manifest = temp_dir / MANIFEST_PATH
    manifest.parent.mkdir(parents=True)
    manifest.write_text(PLAIN_MANIFEST, encoding="utf-8")
    return temp_dir


@pytest.fixture
def storage(android_project):
    """Create a storage backend rooted at the Android project.

    Returns:
        LocalStorageBackend: Backend whose keys are project-relative paths.
    """
    return LocalStorageBackend(android_project)


@pytest.fixture
def renderer():
    return TemplateRenderer()


@pytest.fixture
def paths():
    return ProjectPaths()


@pytest.fixture
def settings_request():
    """The request of the SettingsActivity scenario."""
    return build_request(
        activity_type=ActivityType.EMPTY,
        activity_name="SettingsActivity",
        activity_package="com.app.view.activities",
    )
