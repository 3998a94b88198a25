"""Idempotent merging of shared resource files and the manifest."""

from .catalog import ACTIVITY_KINDS, ActivityKind, ValueFile, get_kind
from .inserter import TagSpan, insert_into_tag, locate_tag
from .manifest import ManifestRegistrar
from .planner import ResourceMergePlanner

__all__ = [
    "ACTIVITY_KINDS",
    "ActivityKind",
    "ValueFile",
    "get_kind",
    "TagSpan",
    "insert_into_tag",
    "locate_tag",
    "ManifestRegistrar",
    "ResourceMergePlanner",
]
