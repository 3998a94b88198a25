"""
Core type definitions for activitygen.

Provides type aliases and the result type threaded through the scaffold steps,
so a step can stop the run without raising.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar


# Type aliases
ProjectKey = str  # path relative to the project root, always "/"-separated
Hash = str  # SHA-256 hash
T = TypeVar("T")


@dataclass
class ServiceResult(Generic[T]):
    """Result wrapper for service operations.

    Carries the outcome of a step with its data, or a summary error and one
    error line per offending item.
    """

    success: bool
    data: T | None = None
    error: str | None = None
    errors: list[str] = field(default_factory=list)

    @classmethod
    def ok(cls, data: T) -> ServiceResult[T]:
        """Create a successful result."""
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: str, errors: list[str] | None = None) -> ServiceResult[T]:
        """Create a failed result.

        Args:
            error: Summary of the failure
            errors: Individual failure lines, one per offending item
        """
        return cls(success=False, error=error, errors=errors or [error])
