"""
Manifest registration.

Adds the <activity> entry of a generated activity inside <application>.
A launcher request only gets the MAIN/LAUNCHER intent-filter when the manifest
does not already declare a launcher; otherwise it is registered as a plain
activity and the downgrade is reported.
"""

from __future__ import annotations

from ...core.exceptions import MissingResourceError
from ...core.logging import get_logger
from ...core.paths import ProjectPaths
from ...models.activity import ActivityRequest
from ...models.resources import InsertPosition, ManifestEntry, ManifestOutcome
from ...naming import contains
from ...storage import StorageBackend
from .inserter import insert_into_tag, locate_tag

logger = get_logger(__name__)

APPLICATION_TAG = "application"
LAUNCHER_MARKER = "LAUNCHER"


class ManifestRegistrar:
    """Registers activities in AndroidManifest.xml."""

    def __init__(self, storage: StorageBackend, paths: ProjectPaths | None = None) -> None:
        self.storage = storage
        self.paths = paths or ProjectPaths()

    @property
    def manifest_path(self) -> str:
        return self.paths.manifest

    def read(self) -> str:
        """Read the manifest text.

        Raises:
            MissingResourceError: If the manifest does not exist.
        """
        try:
            return self.storage.load_text(self.manifest_path)
        except FileNotFoundError as e:
            raise MissingResourceError(
                message="the project has no manifest to register the activity in",
                path=self.manifest_path,
                cause=e,
            ) from e

    def check(self) -> str:
        """Verify the manifest exists and has an <application> element.

        Returns:
            The manifest text, to be handed to register()

        Raises:
            MissingResourceError: If the manifest does not exist.
            TagNotFoundError: If <application>…</application> is missing.
        """
        text = self.read()
        locate_tag(text, APPLICATION_TAG, path=self.manifest_path)
        return text

    @staticmethod
    def build_entry(request: ActivityRequest, is_launcher: bool) -> ManifestEntry:
        return ManifestEntry(
            activity_qualified_name=request.qualified_name,
            label_ref=f"@string/{request.title_resource}",
            is_launcher=is_launcher,
        )

    def register(
        self,
        request: ActivityRequest,
        position: InsertPosition = InsertPosition.BEFORE_CLOSE,
        text: str | None = None,
    ) -> ManifestOutcome:
        """Insert the activity entry into <application>.

        Args:
            request: Activity being scaffolded
            position: Where inside <application> the entry goes
            text: Manifest text already read by check(); read here when None

        Returns:
            ManifestOutcome with the inserted entry and whether a launcher
            request had to be downgraded

        Raises:
            MissingResourceError: If the manifest does not exist.
            TagNotFoundError: If the manifest has no <application> element.
        """
        if text is None:
            text = self.read()

        has_launcher = contains(text, LAUNCHER_MARKER)
        downgraded = request.launcher and has_launcher
        entry = self.build_entry(request, is_launcher=request.launcher and not has_launcher)

        updated = insert_into_tag(
            text,
            APPLICATION_TAG,
            entry.render(),
            position,
            path=self.manifest_path,
        )
        self.storage.store_text(self.manifest_path, updated)

        if downgraded:
            logger.warning(
                "Launcher registration downgraded, manifest already declares a launcher",
                activity=request.qualified_name,
            )
        logger.info(
            "Registered activity in manifest",
            activity=request.qualified_name,
            launcher=entry.is_launcher,
            position=position.value,
        )
        return ManifestOutcome(file=self.manifest_path, entry=entry, downgraded=downgraded)
