"""
Activity kind catalog.

Each activity type is one row of ACTIVITY_KINDS: which templates render its
class and layout, which shared value files it depends on, which entries must be
present in each of them, and how it registers in the manifest. Supporting a new
type means adding a row here.

The empty type probes dimens with bare names while blank probes the full
opening tag. Changing a probe changes which existing files a re-run touches.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from ...core.paths import ProjectPaths
from ...models.activity import ActivityRequest, ActivityType
from ...models.resources import InsertPosition, RequiredEntry, ResourceObligation

EntryBuilder = Callable[[ActivityRequest], RequiredEntry]


@dataclass(frozen=True)
class ValueFile:
    """A shared value file an activity type depends on."""

    file_name: str
    stock_template: str
    qualifier: str = ""
    entries: tuple[EntryBuilder, ...] = ()


@dataclass(frozen=True)
class ActivityKind:
    """Table row describing how one activity type is scaffolded."""

    activity_type: ActivityType
    class_template: str
    layout_template: str
    value_files: tuple[ValueFile, ...] = field(default_factory=tuple)
    default_launcher: bool = False
    manifest_position: InsertPosition = InsertPosition.BEFORE_CLOSE

    def obligations(self, request: ActivityRequest, paths: ProjectPaths) -> list[ResourceObligation]:
        """Derive the resource obligations of a request, in table order."""
        return [
            ResourceObligation(
                target_file=paths.values_file(value_file.file_name, value_file.qualifier),
                stock_template=value_file.stock_template,
                entries=[build(request) for build in value_file.entries],
            )
            for value_file in self.value_files
        ]


# -- entry builders --

def _title(request: ActivityRequest) -> RequiredEntry:
    name = request.title_resource
    return RequiredEntry(
        probe=name,
        fragment=f'    <string name="{name}">{request.activity_name}</string>\n',
    )


def _margin(axis: str, value: str, full_tag_probe: bool) -> EntryBuilder:
    def build(request: ActivityRequest) -> RequiredEntry:
        name = f"activity_{axis}_margin"
        opening = f'<dimen name="{name}">'
        return RequiredEntry(
            probe=opening if full_tag_probe else name,
            fragment=f"    {opening}{value}</dimen>\n",
        )

    return build


def _string(name: str, value: str) -> EntryBuilder:
    def build(request: ActivityRequest) -> RequiredEntry:
        opening = f'<string name="{name}">'
        return RequiredEntry(probe=opening, fragment=f"    {opening}{value}</string>\n")

    return build


def _color(name: str, value: str) -> EntryBuilder:
    def build(request: ActivityRequest) -> RequiredEntry:
        opening = f'<color name="{name}">'
        return RequiredEntry(probe=opening, fragment=f"    {opening}{value}</color>\n")

    return build


# Wide screens only need the file to exist; its margins come from the stock copy.
_WIDE_DIMENS = ValueFile(
    file_name="dimens.xml",
    qualifier="w820dp",
    stock_template="values-w820dp/dimens.xml",
)

ACTIVITY_KINDS: dict[ActivityType, ActivityKind] = {
    ActivityType.EMPTY: ActivityKind(
        activity_type=ActivityType.EMPTY,
        class_template="java/EmptyActivity.java.j2",
        layout_template="layout/activity_empty.xml.j2",
        value_files=(
            ValueFile("strings.xml", "values/strings.xml", entries=(_title,)),
            ValueFile(
                "dimens.xml",
                "values/dimens.xml",
                entries=(
                    _margin("horizontal", "16dp", full_tag_probe=False),
                    _margin("vertical", "16dp", full_tag_probe=False),
                ),
            ),
            _WIDE_DIMENS,
        ),
        default_launcher=False,
        manifest_position=InsertPosition.BEFORE_CLOSE,
    ),
    ActivityType.BLANK: ActivityKind(
        activity_type=ActivityType.BLANK,
        class_template="java/BlankActivity.java.j2",
        layout_template="layout/activity_blank.xml.j2",
        value_files=(
            ValueFile("strings.xml", "values/strings.xml", entries=(_title,)),
            ValueFile(
                "dimens.xml",
                "values/dimens.xml",
                entries=(
                    _margin("horizontal", "16dp", full_tag_probe=True),
                    _margin("vertical", "16dp", full_tag_probe=True),
                ),
            ),
            _WIDE_DIMENS,
        ),
        default_launcher=True,
        manifest_position=InsertPosition.AFTER_OPEN,
    ),
    ActivityType.FULLSCREEN: ActivityKind(
        activity_type=ActivityType.FULLSCREEN,
        class_template="java/FullscreenActivity.java.j2",
        layout_template="layout/activity_fullscreen.xml.j2",
        value_files=(
            ValueFile(
                "strings.xml",
                "values/strings.xml",
                entries=(
                    _title,
                    _string("dummy_content", "DUMMY\\nCONTENT"),
                    _string("dummy_button", "Dummy Button"),
                ),
            ),
            ValueFile(
                "colors.xml",
                "values/colors.xml",
                entries=(_color("black_overlay", "#66000000"),),
            ),
        ),
        default_launcher=False,
        manifest_position=InsertPosition.AFTER_OPEN,
    ),
}


def get_kind(activity_type: ActivityType | str) -> ActivityKind:
    """Look up the table row of an activity type."""
    return ACTIVITY_KINDS[ActivityType(activity_type)]
