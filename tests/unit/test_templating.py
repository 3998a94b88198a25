"""Unit tests for the template renderer."""

import pytest
from jinja2 import DictLoader, Environment, StrictUndefined

from activitygen.core.exceptions import TemplateRenderError
from activitygen.models.activity import ActivityType, build_request
from activitygen.services.merge import ACTIVITY_KINDS
from activitygen.services.templating import TemplateRenderer


class TestTemplateRenderer:
    """Tests for TemplateRenderer."""

    def test_context_for(self, settings_request):
        context = TemplateRenderer.context_for(settings_request, "com.app")

        assert context == {
            "activity_type": "empty",
            "activity_name": "SettingsActivity",
            "activity_package": "com.app.view.activities",
            "layout_name": "activity_settings",
            "title_resource": "title_activity_settings",
            "app_package": "com.app",
        }

    @pytest.mark.parametrize("activity_type", list(ActivityType))
    def test_every_kind_renders(self, renderer, activity_type):
        """Test that the class and layout templates of every type render.

        Verifies that the generated class declares the requested package and
        name and points at the requested layout.
        """
        request = build_request(activity_type, "SampleActivity", "com.app.ui")
        kind = ACTIVITY_KINDS[activity_type]
        context = renderer.context_for(request, "com.app")

        java = renderer.render(kind.class_template, context)
        layout = renderer.render(kind.layout_template, context)

        assert java.startswith("package com.app.ui;\n")
        assert "public class SampleActivity extends" in java
        assert "R.layout.activity_sample" in java
        assert "com.app.ui.SampleActivity" in layout
        assert java.endswith("\n")

    def test_missing_template(self, renderer):
        with pytest.raises(TemplateRenderError) as exc_info:
            renderer.render("java/TabbedActivity.java.j2", {})

        assert exc_info.value.template_name == "java/TabbedActivity.java.j2"

    def test_missing_variable(self, renderer):
        """Test that an undefined variable fails instead of rendering empty."""
        with pytest.raises(TemplateRenderError) as exc_info:
            renderer.render("java/EmptyActivity.java.j2", {"activity_package": "com.app"})

        assert "variables" in exc_info.value.context

    def test_stock_is_verbatim(self, renderer):
        source = renderer.stock("values/dimens.xml")

        assert source.startswith('<?xml version="1.0" encoding="utf-8"?>\n')
        assert '<dimen name="activity_horizontal_margin">16dp</dimen>' in source
        assert '<dimen name="activity_vertical_margin">16dp</dimen>' in source

    def test_wide_stock(self, renderer):
        source = renderer.stock("values-w820dp/dimens.xml")

        assert '<dimen name="activity_horizontal_margin">64dp</dimen>' in source

    def test_missing_stock(self, renderer):
        with pytest.raises(TemplateRenderError):
            renderer.stock("values/styles.xml")

    def test_custom_environment(self):
        env = Environment(
            loader=DictLoader({"hello.j2": "Hello {{ activity_name }}!"}),
            undefined=StrictUndefined,
        )
        renderer = TemplateRenderer(env)

        assert renderer.render("hello.j2", {"activity_name": "MainActivity"}) == "Hello MainActivity!"
