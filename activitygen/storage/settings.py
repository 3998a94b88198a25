"""
Persisted run settings.

The answers of the last run are saved as JSON in the project directory and
offered as defaults the next time the generator runs there.
"""

from __future__ import annotations

from pydantic import ValidationError as PydanticValidationError

from ..core.exceptions import ConfigError
from ..core.logging import get_logger
from ..models.activity import RunSettings
from .interface import StorageBackend

logger = get_logger(__name__)


class RunSettingsStore:
    """Loads and saves RunSettings through a storage backend."""

    def __init__(self, storage: StorageBackend, key: str = ".activitygen.json") -> None:
        self.storage = storage
        self.key = key

    def load(self) -> RunSettings:
        """Load the stored settings.

        Returns:
            The stored settings, or empty settings when none were saved

        Raises:
            ConfigError: If the settings file exists but is not valid.
        """
        if not self.storage.exists(self.key):
            return RunSettings()
        try:
            return self.storage.load_model(self.key, RunSettings)
        except PydanticValidationError as e:
            raise ConfigError(
                message="stored run settings are not valid, fix or delete the file",
                setting=self.key,
                cause=e,
            ) from e

    def save(self, settings: RunSettings) -> None:
        self.storage.store_model(self.key, settings)
        logger.debug("Saved run settings", key=self.key)
