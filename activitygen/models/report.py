"""
Scaffold report models.

A report is the chronological list of what happened to the project during a
run, in the order the events occurred. It is only used for console output.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class ReportKind(str, Enum):
    """Console status of a report line."""

    CREATE = "create"
    UPDATE = "update"
    ERROR = "error"
    WARN = "warn"


class ReportEvent(BaseModel):
    """One console line."""

    kind: ReportKind
    target: str = Field(description="Project-relative path, or a message for warnings")


class ScaffoldReport(BaseModel):
    """Outcome of one scaffold run."""

    success: bool = Field(default=True)
    events: list[ReportEvent] = Field(default_factory=list)

    def add(self, kind: ReportKind, target: str) -> None:
        self.events.append(ReportEvent(kind=kind, target=target))

    def of_kind(self, kind: ReportKind) -> list[str]:
        """Get the targets of every event of one kind, in order."""
        return [event.target for event in self.events if event.kind == kind]

    @property
    def created(self) -> list[str]:
        return self.of_kind(ReportKind.CREATE)

    @property
    def updated(self) -> list[str]:
        return self.of_kind(ReportKind.UPDATE)

    @property
    def errors(self) -> list[str]:
        return self.of_kind(ReportKind.ERROR)

    @property
    def warnings(self) -> list[str]:
        return self.of_kind(ReportKind.WARN)
