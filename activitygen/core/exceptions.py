"""
Custom exception hierarchy for activitygen.

All exceptions inherit from ActivityGenError so the CLI can catch one type and
turn any failure into a single error line. Each exception carries context for
debugging and logging.

Only ConflictError describes an expected situation (a target file already
exists); the scaffold service reports it as an error event instead of raising.
Every other error is fatal for the write phase.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class ActivityGenError(Exception):
    """Base exception for all activitygen errors."""

    message: str
    context: dict[str, Any] = field(default_factory=dict)
    cause: Exception | None = None

    def __str__(self) -> str:
        ctx = f" | context: {self.context}" if self.context else ""
        cause = f" | caused by: {self.cause}" if self.cause else ""
        return f"{self.message}{ctx}{cause}"


@dataclass
class ValidationError(ActivityGenError):
    """Raised when a request field is not a usable Java or resource name."""

    field_name: str | None = None
    actual_value: Any = None

    def __str__(self) -> str:
        base = super().__str__()
        if self.field_name:
            return f"Validation failed for '{self.field_name}': {base}"
        return f"Validation failed: {base}"


@dataclass
class ConflictError(ActivityGenError):
    """Raised when a file the generator must create already exists."""

    path: str = ""

    def __str__(self) -> str:
        return f"{self.path} already exists: {self.message}"


@dataclass
class StructuralError(ActivityGenError):
    """Raised when an existing file does not have the structure we merge into."""

    path: str = ""

    def __str__(self) -> str:
        base = super().__str__()
        where = f" in {self.path}" if self.path else ""
        return f"Malformed file{where}: {base}"


@dataclass
class TagNotFoundError(StructuralError):
    """Raised when the enclosing tag of an insertion cannot be located."""

    tag_name: str = ""


@dataclass
class MissingResourceError(ActivityGenError):
    """Raised when a file expected to be present cannot be read."""

    path: str = ""

    def __str__(self) -> str:
        base = super().__str__()
        return f"Missing file '{self.path}': {base}"


@dataclass
class StorageError(ActivityGenError):
    """Raised when a project file or directory cannot be read or written."""

    path: str = ""

    def __str__(self) -> str:
        base = super().__str__()
        return f"Cannot access '{self.path}': {base}"


@dataclass
class TemplateRenderError(ActivityGenError):
    """Raised when a packaged template is missing or fails to render."""

    template_name: str = ""

    def __str__(self) -> str:
        base = super().__str__()
        return f"[template: {self.template_name}] {base}"


@dataclass
class ConfigError(ActivityGenError):
    """Raised when configuration or stored run settings cannot be used."""

    setting: str = ""

    def __str__(self) -> str:
        base = super().__str__()
        if self.setting:
            return f"Configuration error in '{self.setting}': {base}"
        return f"Configuration error: {base}"
