"""
Resource merge data models.

These models describe what the merge engine must guarantee inside the shared
XML files of an Android project, and what it actually did. They are derived
on every run and never persisted.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class InsertPosition(str, Enum):
    """Where a fragment goes inside its enclosing tag."""

    BEFORE_CLOSE = "before-close"
    AFTER_OPEN = "after-open"


class RequiredEntry(BaseModel):
    """One entry a resource file must contain."""

    probe: str = Field(description="Substring whose presence means the entry exists")
    fragment: str = Field(description="Text inserted when the probe fails, newline-terminated")


class ResourceObligation(BaseModel):
    """A resource file and the entries it must contain."""

    target_file: str = Field(description="Project-relative path of the resource file")
    stock_template: str = Field(description="Packaged template copied when the file is absent")
    enclosing_tag: str = Field(default="resources", description="Tag the entries go into")
    entries: list[RequiredEntry] = Field(default_factory=list)

    @property
    def probes(self) -> list[str]:
        """Get the probe strings in catalog order."""
        return [entry.probe for entry in self.entries]


class MergeOutcome(BaseModel):
    """What applying one obligation did to its file."""

    file: str = Field(description="Project-relative path of the resource file")
    created: bool = Field(default=False, description="File was copied from its stock template")
    modified: bool = Field(default=False, description="At least one entry was inserted")
    inserted: list[str] = Field(default_factory=list, description="Probes of the inserted entries")


class ManifestEntry(BaseModel):
    """The <activity> registration for a generated activity."""

    activity_qualified_name: str = Field(description="Fully qualified activity class name")
    label_ref: str = Field(description="Resource reference used as the activity label")
    is_launcher: bool = Field(default=False, description="Whether an intent-filter is emitted")

    def render(self, indent: str = "        ") -> str:
        """Render the entry as a newline-terminated manifest fragment.

        Args:
            indent: Indentation of the <activity> line.

        Returns:
            str: The <activity> block, with a MAIN/LAUNCHER intent-filter
                when this entry is the launcher.
        """
        inner = indent + "    "
        lines = [
            f"{indent}<activity",
            f'{inner}android:name="{self.activity_qualified_name}"',
        ]
        if self.is_launcher:
            lines.append(f'{inner}android:exported="true"')
        lines.append(f'{inner}android:label="{self.label_ref}" >')
        if self.is_launcher:
            lines.extend([
                f"{inner}<intent-filter>",
                f'{inner}    <action android:name="android.intent.action.MAIN" />',
                "",
                f'{inner}    <category android:name="android.intent.category.LAUNCHER" />',
                f"{inner}</intent-filter>",
            ])
        lines.append(f"{indent}</activity>")
        return "\n".join(lines) + "\n"


class ManifestOutcome(BaseModel):
    """What registering an activity did to the manifest."""

    file: str = Field(description="Project-relative path of the manifest")
    entry: ManifestEntry
    downgraded: bool = Field(
        default=False,
        description="A launcher was requested but another launcher already exists",
    )
