"""Atomic type classification for containment comparison."""

from __future__ import annotations

from collections.abc import Set
from datetime import date, datetime, time, timedelta
from decimal import Decimal
import enum
from functools import lru_cache
import types
from typing import Any, Literal, Union, get_args, get_origin
from uuid import UUID

ValueKind = Literal["atomic", "sequence", "record"]

_NONE_TYPE = type(None)

_UNION_ORIGINS: tuple[Any, ...] = (Union, types.UnionType)


@lru_cache(maxsize=1)
def atomic_types() -> frozenset[type]:
    """Return the process-wide set of types compared by plain equality."""
    return frozenset(
        {
            bool,
            int,
            float,
            complex,
            str,
            bytes,
            bytearray,
            Decimal,
            UUID,
            datetime,
            date,
            time,
            timedelta,
            Set,
            type,
            types.FunctionType,
            types.BuiltinFunctionType,
            types.MethodType,
            types.ModuleType,
            _NONE_TYPE,
        }
    )


def is_atomic(type_hint: Any) -> bool:
    """Report whether a type (or typing hint) is an atomic leaf.

    ``Optional[X]`` and ``X | None`` are atomic when ``X`` is. Subclasses of
    atomic types (and every ``enum.Enum``) are atomic; unknown types are compound.
    """
    if type_hint is None:
        return False

    origin = get_origin(type_hint)
    if origin in _UNION_ORIGINS:
        members = [member for member in get_args(type_hint) if member is not _NONE_TYPE]
        return bool(members) and all(is_atomic(member) for member in members)

    if origin is not None:
        return is_atomic(origin)

    if not isinstance(type_hint, type):
        return False

    return issubclass(type_hint, (*atomic_types(), enum.Enum))
