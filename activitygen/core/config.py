"""
Configuration management for activitygen.

Provides centralized, type-safe configuration with environment variable overrides
and sensible defaults for the Android project layout the generator writes into.
"""

from __future__ import annotations

import os
from functools import lru_cache
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from ..models.resources import InsertPosition
from .exceptions import ConfigError

# Load .env file if it exists (looks in cwd and parent directories)
load_dotenv()


class ProjectLayoutConfig(BaseModel):
    """Where the generated files live inside an Android project."""

    source_root: str = Field(default="app/src/main", description="Module source set root")
    java_dir: str = Field(default="java", description="Source directory under the source root")
    res_dir: str = Field(default="res", description="Resource directory under the source root")
    manifest_name: str = Field(default="AndroidManifest.xml", description="Manifest file name")
    class_extension: str = Field(default="java", description="Extension of the generated class")
    layout_extension: str = Field(default="xml", description="Extension of the generated layout")


class Config(BaseModel):
    """Root configuration for activitygen."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING", description="Logging level"
    )
    layout: ProjectLayoutConfig = Field(default_factory=ProjectLayoutConfig)
    settings_file: str = Field(
        default=".activitygen.json", description="Run settings file, relative to the project"
    )
    default_app_package: str = Field(
        default="com.example.app", description="App package used when none was stored"
    )
    manifest_position: InsertPosition | None = Field(
        default=None,
        description="Overrides the per-type manifest insertion position when set",
    )

    model_config = {"extra": "ignore"}

    @classmethod
    def from_env(cls) -> Config:
        """Create configuration from environment variables.

        Raises:
            ConfigError: If a variable holds a value the setting does not accept.
        """
        try:
            return cls(
                log_level=os.environ.get("ACTIVITYGEN_LOG_LEVEL", "WARNING").upper(),  # type: ignore
                layout=ProjectLayoutConfig(
                    source_root=os.environ.get("ACTIVITYGEN_SOURCE_ROOT", "app/src/main"),
                ),
                settings_file=os.environ.get("ACTIVITYGEN_SETTINGS_FILE", ".activitygen.json"),
                default_app_package=os.environ.get("ACTIVITYGEN_APP_PACKAGE", "com.example.app"),
                manifest_position=os.environ.get("ACTIVITYGEN_MANIFEST_POSITION") or None,
            )
        except PydanticValidationError as e:
            first = e.errors()[0]
            field_name = str(first["loc"][0]) if first["loc"] else ""
            setting = _ENV_VARS.get(field_name, field_name)
            raise ConfigError(
                message=f"invalid value {first.get('input')!r}: {first['msg']}",
                setting=setting,
                cause=e,
            ) from e


_ENV_VARS = {
    "log_level": "ACTIVITYGEN_LOG_LEVEL",
    "layout": "ACTIVITYGEN_SOURCE_ROOT",
    "settings_file": "ACTIVITYGEN_SETTINGS_FILE",
    "default_app_package": "ACTIVITYGEN_APP_PACKAGE",
    "manifest_position": "ACTIVITYGEN_MANIFEST_POSITION",
}


@lru_cache(maxsize=1)
def get_config() -> Config:
    """Get cached configuration instance."""
    return Config.from_env()
