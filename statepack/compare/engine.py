"""Recursive containment comparison with first-failure location tracking."""

from __future__ import annotations

import logging
from typing import Any

from statepack.compare.exceptions import IntrospectionError
from statepack.compare.models import ComparisonResult
from statepack.core.introspection import (
    MISSING,
    declared_attribute_type,
    iter_elements,
    public_attributes,
    read_attribute,
    value_kind,
)
from statepack.core.location import PathSegment
from statepack.core.types import is_atomic

_logger = logging.getLogger("statekit.compare")

_EXHAUSTED = object()


def contains(actual: Any, expected: Any) -> ComparisonResult:
    """Check that ``actual`` contains all of the state described by ``expected``.

    Comparison stops at the first mismatch, which is returned as a failed
    ``ComparisonResult`` located relative to the root path ``/``.
    """
    result = _contains(actual, expected, segments=(), declared_type=None)
    if not result.success:
        _logger.debug(
            "containment failed at %s (%s): %s",
            result.location,
            result.kind,
            result.formatted_message,
        )
    return result


def _contains(
    actual: Any,
    expected: Any,
    *,
    segments: tuple[PathSegment, ...],
    declared_type: Any,
) -> ComparisonResult:
    if _values_equal(actual, expected):
        return ComparisonResult.passed()

    if actual is None or expected is None:
        return _value_mismatch(actual, expected, segments)

    if is_atomic(declared_type):
        return _value_mismatch(actual, expected, segments)

    expected_kind = value_kind(expected)
    if expected_kind == "atomic":
        return _value_mismatch(actual, expected, segments)

    if expected_kind == "sequence":
        if value_kind(actual) != "sequence":
            return _value_mismatch(actual, expected, segments)
        return _contains_sequence(actual, expected, segments=segments)

    return _contains_record(actual, expected, segments=segments)


def _contains_sequence(
    actual: Any,
    expected: Any,
    *,
    segments: tuple[PathSegment, ...],
) -> ComparisonResult:
    actual_items = iter_elements(actual)
    index = 0

    for expected_item in iter_elements(expected):
        actual_item = next(actual_items, _EXHAUSTED)
        if actual_item is _EXHAUSTED:
            return ComparisonResult.failed("actual_too_short", segments, index)

        result = _contains(
            actual_item,
            expected_item,
            segments=segments + (index,),
            declared_type=None,
        )
        if not result.success:
            return result

        index += 1

    if next(actual_items, _EXHAUSTED) is not _EXHAUSTED:
        return ComparisonResult.failed("actual_too_long", segments, index)

    return ComparisonResult.passed()


def _contains_record(
    actual: Any,
    expected: Any,
    *,
    segments: tuple[PathSegment, ...],
) -> ComparisonResult:
    for name in public_attributes(expected):
        actual_value = read_attribute(actual, name)
        if actual_value is MISSING:
            return ComparisonResult.failed("missing_attribute", segments, name)

        expected_value = read_attribute(expected, name)
        if expected_value is MISSING:
            raise IntrospectionError(
                f"Expected attribute '{name}' of {type(expected).__name__} could not be read"
            )

        result = _contains(
            actual_value,
            expected_value,
            segments=segments + (name,),
            declared_type=declared_attribute_type(actual, name),
        )
        if not result.success:
            return result

    return ComparisonResult.passed()


def _values_equal(actual: Any, expected: Any) -> bool:
    if actual is expected:
        return True
    try:
        return bool(actual == expected)
    except ValueError:
        # element-wise equality (array-likes) has no single truth value
        return False


def _value_mismatch(
    actual: Any,
    expected: Any,
    segments: tuple[PathSegment, ...],
) -> ComparisonResult:
    return ComparisonResult.failed(
        "value_mismatch",
        segments,
        actual=actual,
        expected=expected,
    )
