"""Services package for activitygen."""

from .merge import ManifestRegistrar, ResourceMergePlanner
from .scaffold import ScaffoldService
from .templating import TemplateRenderer

__all__ = [
    "ManifestRegistrar",
    "ResourceMergePlanner",
    "ScaffoldService",
    "TemplateRenderer",
]
