"""Containment comparison subsystem."""

from statepack.compare.assertion import assert_contains_state
from statepack.compare.engine import contains
from statepack.compare.exceptions import ComparisonError, ContainsStateError, IntrospectionError
from statepack.compare.formatting import render_result, render_summary, render_value
from statepack.compare.models import (
    FAILURE_KINDS,
    MESSAGE_TEMPLATES,
    ComparisonResult,
    FailureKind,
)

__all__ = [
    "FailureKind",
    "FAILURE_KINDS",
    "MESSAGE_TEMPLATES",
    "ComparisonResult",
    "ComparisonError",
    "IntrospectionError",
    "ContainsStateError",
    "contains",
    "assert_contains_state",
    "render_result",
    "render_summary",
    "render_value",
]
