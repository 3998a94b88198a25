"""
Activity request data models.

An ActivityRequest is built once per invocation, from arguments or prompts,
and is frozen afterwards. RunSettings is the persisted record of the answers
given last time, used only to offer them again as defaults.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from ..core.exceptions import ValidationError
from ..naming import default_layout_name

_JAVA_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")
_RESOURCE_NAME = re.compile(r"^[a-z][a-z0-9_]*$")


class ActivityType(str, Enum):
    """Kinds of activity the generator knows how to scaffold."""

    EMPTY = "empty"
    BLANK = "blank"
    FULLSCREEN = "fullscreen"


class ActivityRequest(BaseModel):
    """Everything needed to scaffold one activity."""

    activity_type: ActivityType = Field(default=ActivityType.EMPTY)
    activity_name: str = Field(description="Class name, e.g. SettingsActivity")
    activity_package: str = Field(description="Dot-delimited package of the class")
    layout_name: str = Field(description="Layout resource name, e.g. activity_settings")
    launcher: bool = Field(default=False, description="Register as the launcher activity")

    model_config = {"frozen": True}

    @field_validator("activity_name")
    @classmethod
    def _check_activity_name(cls, value: str) -> str:
        if not _JAVA_IDENTIFIER.match(value):
            raise ValueError(f"'{value}' is not a valid Java class name")
        return value

    @field_validator("activity_package")
    @classmethod
    def _check_activity_package(cls, value: str) -> str:
        parts = value.split(".")
        if not all(_JAVA_IDENTIFIER.match(part) for part in parts):
            raise ValueError(f"'{value}' is not a valid dot-delimited package")
        return value

    @field_validator("layout_name")
    @classmethod
    def _check_layout_name(cls, value: str) -> str:
        if not _RESOURCE_NAME.match(value):
            raise ValueError(f"'{value}' is not a valid Android resource name")
        return value

    @property
    def qualified_name(self) -> str:
        """Get fully qualified class name.

        Returns:
            str: The class name prefixed with its package.
        """
        return f"{self.activity_package}.{self.activity_name}"

    @property
    def title_resource(self) -> str:
        """Name of the string resource used as the activity title."""
        return f"title_{self.layout_name}"


def build_request(
    activity_type: ActivityType | str,
    activity_name: str,
    activity_package: str,
    layout_name: str | None = None,
    launcher: bool = False,
) -> ActivityRequest:
    """Build a request, deriving the layout name when none is given.

    Raises:
        ValidationError: If a field is not a usable name.
    """
    try:
        return ActivityRequest(
            activity_type=activity_type,
            activity_name=activity_name,
            activity_package=activity_package,
            layout_name=layout_name or default_layout_name(activity_name),
            launcher=launcher,
        )
    except PydanticValidationError as e:
        first = e.errors()[0]
        field_name = ".".join(str(part) for part in first["loc"])
        raise ValidationError(
            message=first["msg"],
            field_name=field_name or None,
            actual_value=first.get("input"),
        ) from e


class RunSettings(BaseModel):
    """Answers remembered between runs."""

    activity_type: ActivityType | None = None
    activity_name: str | None = None
    activity_package: str | None = None
    layout_name: str | None = None
    launcher: bool | None = None
    app_package: str | None = None

    model_config = {"extra": "ignore"}

    @classmethod
    def from_request(cls, request: ActivityRequest, app_package: str | None = None) -> RunSettings:
        """Snapshot the answers of a request."""
        return cls(app_package=app_package, **request.model_dump())

    def as_defaults(self) -> dict[str, Any]:
        """Get the stored answers that are actually set."""
        return self.model_dump(exclude_none=True)
