"""Data models for activitygen."""

from .activity import ActivityRequest, ActivityType, RunSettings, build_request
from .report import ReportEvent, ReportKind, ScaffoldReport
from .resources import (
    InsertPosition,
    ManifestEntry,
    ManifestOutcome,
    MergeOutcome,
    RequiredEntry,
    ResourceObligation,
)

__all__ = [
    "ActivityRequest",
    "ActivityType",
    "RunSettings",
    "build_request",
    "ReportEvent",
    "ReportKind",
    "ScaffoldReport",
    "InsertPosition",
    "ManifestEntry",
    "ManifestOutcome",
    "MergeOutcome",
    "RequiredEntry",
    "ResourceObligation",
]
