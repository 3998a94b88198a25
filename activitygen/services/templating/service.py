"""
Template Rendering Service.

Renders the activity class and layout from the Jinja2 templates packaged with
activitygen, and serves the stock value files copied into projects that do not
have them yet.
"""

from __future__ import annotations

from typing import Any

from jinja2 import Environment, PackageLoader, StrictUndefined, TemplateError, TemplateNotFound

from ...core.exceptions import TemplateRenderError
from ...core.logging import get_logger
from ...models.activity import ActivityRequest

logger = get_logger(__name__)

STOCK_PREFIX = "stock/"


class TemplateRenderer:
    """Jinja2 front-end over the packaged templates."""

    def __init__(self, environment: Environment | None = None) -> None:
        # StrictUndefined makes a missing variable an error instead of an empty string
        self.env = environment or Environment(
            loader=PackageLoader("activitygen", "templates"),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            autoescape=False,
        )

    @staticmethod
    def context_for(request: ActivityRequest, app_package: str) -> dict[str, Any]:
        """Build the template context of a request."""
        return {
            "activity_type": request.activity_type.value,
            "activity_name": request.activity_name,
            "activity_package": request.activity_package,
            "layout_name": request.layout_name,
            "title_resource": request.title_resource,
            "app_package": app_package,
        }

    def render(self, template_name: str, context: dict[str, Any]) -> str:
        """Render a template.

        Args:
            template_name: Template path relative to the templates directory
            context: Template variables

        Returns:
            Rendered text

        Raises:
            TemplateRenderError: If the template is missing or fails to render.
        """
        try:
            template = self.env.get_template(template_name)
            rendered = template.render(**context)
        except TemplateNotFound as e:
            raise TemplateRenderError(
                message="template not found",
                template_name=template_name,
                cause=e,
            ) from e
        except TemplateError as e:
            raise TemplateRenderError(
                message=f"error rendering template: {e}",
                template_name=template_name,
                context={"variables": sorted(context)},
                cause=e,
            ) from e

        logger.debug("Rendered template", template=template_name, size_chars=len(rendered))
        return rendered

    def stock(self, name: str) -> str:
        """Get a stock file verbatim, without rendering.

        Args:
            name: Stock file path, e.g. "values/dimens.xml"

        Raises:
            TemplateRenderError: If no such stock file is packaged.
        """
        try:
            source, _, _ = self.env.loader.get_source(self.env, STOCK_PREFIX + name)
        except TemplateNotFound as e:
            raise TemplateRenderError(
                message="stock file not found",
                template_name=STOCK_PREFIX + name,
                cause=e,
            ) from e
        return source
