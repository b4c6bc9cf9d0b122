"""Stable public API surface for statekit.

This module is the supported import path for library users.
"""

from __future__ import annotations

from typing import Any

from statepack.compare import (
    ComparisonResult,
    ContainsStateError,
    FailureKind,
    assert_contains_state as _assert_contains_state,
    contains as _contains,
)
from statepack.harness import (
    ComponentHarness,
    ComponentTestBase,
    ComponentWithInterfaceTestBase,
    DependencyContainerTestBase,
)

__version__ = "0.1.0"


def contains(actual: Any, expected: Any) -> ComparisonResult:
    """Check whether ``actual`` contains the state described by ``expected``.

    Args:
        actual: Object whose state is examined.
        expected: State to find within ``actual``. Usually a ``dict`` literal,
            a list, or a small object exposing only the attributes of interest.

    Returns:
        Successful result, or the first mismatch with its location.
    """
    return _contains(actual, expected)


def assert_contains_state(actual: Any, expected: Any) -> ComparisonResult:
    """Assert that ``actual`` contains ``expected``.

    Args:
        actual: Object whose state is examined.
        expected: State to find within ``actual``.

    Returns:
        The successful comparison result.

    Raises:
        ContainsStateError: With the located mismatch rendered in its message.
    """
    return _assert_contains_state(actual, expected)


__all__ = [
    "__version__",
    "FailureKind",
    "ComparisonResult",
    "ContainsStateError",
    "ComponentHarness",
    "ComponentTestBase",
    "ComponentWithInterfaceTestBase",
    "DependencyContainerTestBase",
    "contains",
    "assert_contains_state",
]
