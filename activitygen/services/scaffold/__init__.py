"""Scaffold orchestration."""

from .service import ScaffoldService

__all__ = ["ScaffoldService"]
