"""Compare subsystem exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from statepack.compare.models import ComparisonResult


class ComparisonError(Exception):
    """Base class for comparison faults (not containment mismatches)."""


class IntrospectionError(ComparisonError):
    """Raised when a value's attributes cannot be read during comparison."""


class ContainsStateError(AssertionError):
    """Raised by assertion helpers when actual does not contain expected."""

    def __init__(self, message: str, result: "ComparisonResult") -> None:
        super().__init__(message)
        self.result = result
