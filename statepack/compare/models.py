"""Result model for containment comparisons."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

from statepack.core.location import PathSegment, render_location

FailureKind = Literal[
    "value_mismatch",
    "actual_too_short",
    "actual_too_long",
    "missing_attribute",
]

FAILURE_KINDS: tuple[str, ...] = (
    "value_mismatch",
    "actual_too_short",
    "actual_too_long",
    "missing_attribute",
)

MESSAGE_TEMPLATES: dict[str, str] = {
    "value_mismatch": "Actual value is not equal to expected value.",
    "actual_too_short": "Actual collection (size = {0}) is smaller than expected collection.",
    "actual_too_long": "Actual collection is larger than expected collection (size = {0}).",
    "missing_attribute": "Expected attribute '{0}' is missing in actual object.",
}


@dataclass(frozen=True, slots=True)
class ComparisonResult:
    """Outcome of a single containment comparison.

    A successful result carries nothing else. A failed result always carries
    a kind, a location and a message; ``actual`` and ``expected`` are only
    captured for ``value_mismatch`` failures.
    """

    success: bool
    kind: FailureKind | None = None
    segments: tuple[PathSegment, ...] = ()
    message: str | None = None
    args: tuple[Any, ...] = ()
    actual: Any = None
    expected: Any = None

    @classmethod
    def passed(cls) -> "ComparisonResult":
        return _PASSED

    @classmethod
    def failed(
        cls,
        kind: FailureKind,
        segments: tuple[PathSegment, ...],
        *args: Any,
        actual: Any = None,
        expected: Any = None,
    ) -> "ComparisonResult":
        if kind not in MESSAGE_TEMPLATES:
            raise ValueError(f"Unsupported failure kind: {kind}")
        return cls(
            success=False,
            kind=kind,
            segments=tuple(segments),
            message=MESSAGE_TEMPLATES[kind],
            args=args,
            actual=actual,
            expected=expected,
        )

    def __bool__(self) -> bool:
        return self.success

    @property
    def location(self) -> str | None:
        if self.success:
            return None
        return render_location(self.segments)

    @property
    def formatted_message(self) -> str | None:
        if self.message is None:
            return None
        return self.message.format(*self.args)

    @property
    def captures_values(self) -> bool:
        return self.kind == "value_mismatch"

    def to_dict(self) -> dict[str, Any]:
        if self.success:
            return {"success": True}

        payload: dict[str, Any] = {
            "success": False,
            "kind": self.kind,
            "location": self.location,
            "segments": [
                segment if isinstance(segment, int) else str(segment)
                for segment in self.segments
            ],
            "message": self.formatted_message,
        }
        if self.captures_values:
            payload["actual"] = self.actual
            payload["expected"] = self.expected
        return payload


_PASSED = ComparisonResult(success=True)
