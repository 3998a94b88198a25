"""Core infrastructure components for activitygen."""

from .config import Config, ProjectLayoutConfig, get_config
from .exceptions import (
    ActivityGenError,
    ConfigError,
    ConflictError,
    MissingResourceError,
    StorageError,
    StructuralError,
    TagNotFoundError,
    TemplateRenderError,
    ValidationError,
)
from .logging import get_logger, setup_logging
from .types import Hash, ProjectKey, ServiceResult

__all__ = [
    "Config",
    "ProjectLayoutConfig",
    "get_config",
    "ActivityGenError",
    "ConfigError",
    "ConflictError",
    "MissingResourceError",
    "StorageError",
    "StructuralError",
    "TagNotFoundError",
    "TemplateRenderError",
    "ValidationError",
    "get_logger",
    "setup_logging",
    "Hash",
    "ProjectKey",
    "ServiceResult",
]
