"""Storage abstraction for activitygen."""

from .interface import StorageBackend
from .local import LocalStorageBackend
from .settings import RunSettingsStore

__all__ = ["StorageBackend", "LocalStorageBackend", "RunSettingsStore"]
