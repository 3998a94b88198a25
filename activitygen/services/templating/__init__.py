"""Template rendering for generated activity files."""

from .service import TemplateRenderer

__all__ = ["TemplateRenderer"]
