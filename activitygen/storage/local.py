"""
Local filesystem storage backend.

Provides the filesystem implementation of the storage interface, rooted at
the Android project directory the generator runs against.
"""

from __future__ import annotations

from pathlib import Path

from ..core.exceptions import StorageError, StructuralError
from ..core.logging import get_logger
from .interface import StorageBackend

logger = get_logger(__name__)


class LocalStorageBackend(StorageBackend):
    """Local filesystem storage backend."""

    def __init__(self, base_path: Path) -> None:
        """Initialize local storage.

        Args:
            base_path: Project directory all keys are relative to
        """
        self.base_path = Path(base_path).resolve()

    def _get_full_path(self, key: str) -> Path:
        """Get full filesystem path for a key.

        Normalizes the key to prevent path traversal and ensures the resulting
        path is within the project directory.

        Args:
            key: The storage key to convert to a filesystem path.

        Returns:
            The resolved absolute path within the project directory.
        """
        # Remove leading slashes and any parent directory references
        clean_key = key.lstrip("/\\").replace("..", "").replace(":", "")
        full_path = (self.base_path / clean_key).resolve()

        try:
            full_path.relative_to(self.base_path)
        except ValueError:
            clean_key = clean_key.replace("/", "_").replace("\\", "_")
            full_path = self.base_path / clean_key

        return full_path

    def exists(self, key: str) -> bool:
        """Check if a regular file exists at a key.

        Args:
            key: The storage key to check.

        Returns:
            True if a file exists, False if the path is missing or a directory.
        """
        return self._get_full_path(key).is_file()

    def load_text(self, key: str) -> str:
        """Load text content from filesystem.

        Args:
            key: The storage key to load content from.

        Returns:
            The text content stored at the given key.

        Raises:
            FileNotFoundError: If no file exists at the key.
            StructuralError: If the file is not valid UTF-8 text.
            StorageError: If the file exists but cannot be read.
        """
        full_path = self._get_full_path(key)

        if not full_path.is_file():
            raise FileNotFoundError(f"Key not found: {key}")

        try:
            # newline="" keeps CRLF files byte-for-byte on rewrite
            with open(full_path, "r", encoding="utf-8", newline="") as f:
                return f.read()
        except UnicodeDecodeError as e:
            raise StructuralError(
                message="file is not valid UTF-8 text",
                path=key,
                cause=e,
            ) from e
        except OSError as e:
            raise StorageError(message="file cannot be read", path=key, cause=e) from e

    def store_text(self, key: str, content: str) -> str:
        """Store text content to filesystem.

        Args:
            key: The storage key under which to store the content.
            content: The text content to store.

        Returns:
            The storage key where the content was stored.

        Raises:
            StorageError: If the file or its parent directories cannot be written.
        """
        full_path = self._get_full_path(key)

        try:
            full_path.parent.mkdir(parents=True, exist_ok=True)
            with open(full_path, "w", encoding="utf-8", newline="") as f:
                f.write(content)
        except OSError as e:
            raise StorageError(message="file cannot be written", path=key, cause=e) from e

        logger.debug(
            "Stored file",
            key=key,
            size_chars=len(content),
            hash=self.compute_hash(content.encode("utf-8")),
        )
        return key

    def ensure_dir(self, key: str) -> bool:
        """Create a directory and its parents.

        Args:
            key: The storage key of the directory.

        Returns:
            True if the directory did not exist before.

        Raises:
            StorageError: If the directory cannot be created, e.g. a file is in the way.
        """
        full_path = self._get_full_path(key)
        if full_path.is_dir():
            return False
        try:
            full_path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError(message="directory cannot be created", path=key, cause=e) from e
        logger.debug("Created directory", key=key)
        return True
