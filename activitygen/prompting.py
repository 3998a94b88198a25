"""
Interactive collection of an activity request.

Values given on the command line are used as-is. Every missing value is asked
for, in a fixed order, with a default derived from the answers so far and from
the settings stored by the previous run. When prompting is disabled the
defaults are taken without asking.
"""

from __future__ import annotations

from rich.console import Console
from rich.prompt import Confirm, Prompt

from .models.activity import ActivityRequest, ActivityType, RunSettings, build_request
from .naming import default_activity_name, default_activity_package, default_layout_name
from .services.merge import get_kind

QUESTIONS = 5


class RequestPrompter:
    """Asks for whatever the command line did not provide."""

    def __init__(
        self,
        console: Console,
        stored: RunSettings,
        app_package: str,
        interactive: bool = True,
    ) -> None:
        self.console = console
        self.stored = stored
        self.app_package = app_package
        self.interactive = interactive

    def _ask(self, number: int, message: str, default: str, choices: list[str] | None = None) -> str:
        if not self.interactive:
            return default
        return Prompt.ask(
            f"({number}/{QUESTIONS}) {message}",
            console=self.console,
            default=default,
            choices=choices,
        )

    def _confirm(self, number: int, message: str, default: bool) -> bool:
        if not self.interactive:
            return default
        return Confirm.ask(f"({number}/{QUESTIONS}) {message}", console=self.console, default=default)

    def collect(
        self,
        activity_type: ActivityType | None = None,
        activity_name: str | None = None,
        activity_package: str | None = None,
        layout_name: str | None = None,
        launcher: bool | None = None,
    ) -> ActivityRequest:
        """Fill in the missing fields and build the request.

        Raises:
            ValidationError: If an answer is not a usable name.
        """
        if activity_type is None:
            default_type = self.stored.activity_type or ActivityType.EMPTY
            activity_type = ActivityType(self._ask(
                1,
                "Which *type* of activity would you like to create?",
                default_type.value,
                choices=[member.value for member in ActivityType],
            ))

        if activity_name is None:
            activity_name = self._ask(
                2,
                "What are you calling your activity?",
                default_activity_name(activity_type.value),
            )
        activity_name = activity_name.strip()

        if activity_package is None:
            activity_package = self._ask(
                3,
                "Under which package do you want to create the activity?",
                self.stored.activity_package or default_activity_package(self.app_package),
            )

        if layout_name is None:
            layout_name = self._ask(
                4,
                "What are you calling the corresponding layout?",
                default_layout_name(activity_name),
            )

        if launcher is None:
            launcher = self._confirm(
                5,
                "Should this be the launcher activity?",
                get_kind(activity_type).default_launcher,
            )

        return build_request(
            activity_type=activity_type,
            activity_name=activity_name,
            activity_package=activity_package.strip(),
            layout_name=layout_name.strip(),
            launcher=launcher,
        )
