"""
Storage backend interface.

Defines the abstract interface the generator uses to look at and change the
target project tree. Keys are project-relative, "/"-separated paths. All
operations are synchronous: a run is a single blocking pass.
"""

from __future__ import annotations

import hashlib
from abc import ABC, abstractmethod
from typing import TypeVar

from pydantic import BaseModel

from ..core.types import Hash, ProjectKey

T = TypeVar("T", bound=BaseModel)


class StorageBackend(ABC):
    """Abstract storage backend interface."""

    @abstractmethod
    def exists(self, key: ProjectKey) -> bool:
        """Check if a file exists at a key.

        Args:
            key: Storage key/path to check.

        Returns:
            True if a regular file exists at the key. False for a missing
            path and for a directory.
        """
        ...

    @abstractmethod
    def load_text(self, key: ProjectKey) -> str:
        """Load text content from storage.

        Args:
            key: Storage key/path to load from.

        Returns:
            The text content stored at the key.

        Raises:
            FileNotFoundError: If no file exists at the key.
            StructuralError: If the file is not valid text.
            StorageError: If the file exists but cannot be read.
        """
        ...

    @abstractmethod
    def store_text(self, key: ProjectKey, content: str) -> ProjectKey:
        """Store text content, creating parent directories as needed.

        Args:
            key: Storage key/path.
            content: Text content to store.

        Returns:
            The final storage key.
        """
        ...

    @abstractmethod
    def ensure_dir(self, key: ProjectKey) -> bool:
        """Create a directory and its parents.

        Args:
            key: Storage key/path of the directory.

        Returns:
            True if the directory had to be created.
        """
        ...

    def store_model(self, key: ProjectKey, model: BaseModel) -> ProjectKey:
        """Store a Pydantic model as JSON.

        Args:
            key: Storage key/path.
            model: Pydantic model instance to store.

        Returns:
            The final storage key.
        """
        return self.store_text(key, model.model_dump_json(indent=2, exclude_none=True) + "\n")

    def load_model(self, key: ProjectKey, model_type: type[T]) -> T:
        """Load a Pydantic model from storage.

        Args:
            key: Storage key/path to load from.
            model_type: The Pydantic model class to deserialize into.

        Returns:
            The deserialized Pydantic model instance.
        """
        return model_type.model_validate_json(self.load_text(key))

    @staticmethod
    def compute_hash(data: bytes) -> Hash:
        """Compute SHA-256 hash of data.

        Args:
            data: Raw bytes to hash.

        Returns:
            Hexadecimal string representation of the SHA-256 hash.
        """
        return hashlib.sha256(data).hexdigest()
