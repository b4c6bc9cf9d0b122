"""Human-readable rendering for comparison results."""

from __future__ import annotations

import json
from typing import Any

from statepack.compare.models import ComparisonResult

_MAX_VALUE_CHARS = 200


def render_value(value: Any, *, max_chars: int = _MAX_VALUE_CHARS) -> str:
    try:
        rendered = json.dumps(value, ensure_ascii=True, sort_keys=True)
    except (TypeError, ValueError):
        rendered = repr(value)
    if len(rendered) > max_chars:
        return f"{rendered[: max_chars - 3]}..."
    return rendered


def render_summary(result: ComparisonResult) -> str:
    if result.success:
        return "actual contains expected"
    return f"containment failed: {result.kind} at {result.location}"


def render_result(result: ComparisonResult) -> str:
    if result.success:
        return render_summary(result)

    lines = [f"{result.location}: {result.formatted_message}"]
    if result.captures_values:
        lines.append(f"  expected={render_value(result.expected)}")
        lines.append(f"  actual={render_value(result.actual)}")
    return "\n".join(lines)
