"""
Naming helpers used to derive default names from an activity name.

All functions are pure and total over strings.
"""

from __future__ import annotations

import re

_UPPER_RUN = re.compile(r"\.?([A-Z]+)")
_TRAILING_ACTIVITY = re.compile(r"Activity$")


def camel_case_to_snake_case(text: str) -> str:
    """Convert CamelCase to snake_case.

    Each run of uppercase letters (and a dot right before it) becomes an
    underscore followed by the lower-cased run, so ``"FooBarActivity"`` gives
    ``"foo_bar_activity"`` and ``"URLActivity"`` gives ``"urlactivity"``.
    """
    snake = _UPPER_RUN.sub(lambda m: "_" + m.group(1).lower(), text)
    return snake[1:] if snake.startswith("_") else snake


def capitalize_first(text: str) -> str:
    """Uppercase the first character only."""
    return text[:1].upper() + text[1:]


def remove_trailing_activity(text: str) -> str:
    """Strip a literal trailing "Activity"."""
    return _TRAILING_ACTIVITY.sub("", text)


def contains(haystack: str, needle: str) -> bool:
    return needle in haystack


def default_activity_name(activity_type: str) -> str:
    """Default class name for an activity type, e.g. "BlankActivity"."""
    return capitalize_first(activity_type) + "Activity"


def default_layout_name(activity_name: str) -> str:
    """Default layout name, e.g. "activity_settings" for "SettingsActivity"."""
    return "activity_" + camel_case_to_snake_case(remove_trailing_activity(activity_name))


def default_activity_package(app_package: str) -> str:
    return f"{app_package}.view.activities"


def package_to_path(package: str) -> str:
    """Turn a dotted package into a "/"-separated directory path."""
    return package.replace(".", "/")
