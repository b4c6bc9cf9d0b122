from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from decimal import Decimal
import enum
from typing import Optional, Union
import uuid

import pytest

from statepack.core.types import atomic_types, is_atomic


class Color(enum.Enum):
    RED = "red"
    BLUE = "blue"


@dataclass
class Point:
    x: int
    y: int


@pytest.mark.parametrize(
    "type_hint",
    [
        bool,
        int,
        float,
        str,
        bytes,
        Decimal,
        uuid.UUID,
        datetime,
        timedelta,
        type(None),
        Color,
    ],
)
def test_leaf_types_are_atomic(type_hint: type) -> None:
    assert is_atomic(type_hint) is True


@pytest.mark.parametrize("type_hint", [Point, list, dict, tuple, object])
def test_container_and_record_types_are_compound(type_hint: type) -> None:
    assert is_atomic(type_hint) is False


def test_nullable_wrappers_of_atomic_types_are_atomic() -> None:
    assert is_atomic(Optional[int]) is True
    assert is_atomic(uuid.UUID | None) is True
    assert is_atomic(Union[int, str, None]) is True


def test_nullable_wrapper_of_compound_type_is_compound() -> None:
    assert is_atomic(Optional[Point]) is False
    assert is_atomic(Union[int, Point]) is False


def test_undeclared_and_non_type_hints_are_compound() -> None:
    assert is_atomic(None) is False
    assert is_atomic("int") is False
    assert is_atomic(list[int]) is False


def test_subclasses_of_atomic_types_are_atomic() -> None:
    class Name(str):
        pass

    assert is_atomic(Name) is True
    assert is_atomic(type(datetime.now(timezone.utc))) is True


def test_atomic_type_set_is_built_once() -> None:
    first = atomic_types()
    second = atomic_types()

    assert first is second
    assert isinstance(first, frozenset)
