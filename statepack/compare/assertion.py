"""Assertion helpers for state-based tests."""

from __future__ import annotations

from typing import Any

from statepack.compare.engine import contains
from statepack.compare.exceptions import ContainsStateError
from statepack.compare.formatting import render_result
from statepack.compare.models import ComparisonResult


def assert_contains_state(actual: Any, expected: Any) -> ComparisonResult:
    """Raise ``ContainsStateError`` unless ``actual`` contains ``expected``.

    ``expected`` is typically a ``dict`` literal or a small dataclass holding
    only the state the test cares about.
    """
    result = contains(actual, expected)
    if not result.success:
        raise ContainsStateError(
            f"Actual object does not contain expected state.\n{render_result(result)}",
            result,
        )
    return result
