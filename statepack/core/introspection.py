"""Runtime introspection of values for containment comparison.

Values are classified as one of three kinds:

- ``atomic``: compared by equality only (see ``statepack.core.types``).
- ``sequence``: ordered iterables, compared element by element.
- ``record``: anything else, compared attribute by attribute.

Mappings are records whose attribute names are their keys, which lets plain
``dict`` literals describe the expected state of arbitrary objects.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Set
import dataclasses
from functools import cached_property, lru_cache
from typing import Any, get_type_hints

from statepack.core.types import ValueKind, is_atomic

MISSING: Any = object()

_TEXT_TYPES = (str, bytes, bytearray)


def is_named_tuple(value: Any) -> bool:
    return isinstance(value, tuple) and hasattr(type(value), "_fields")


def is_sequence_like(value: Any) -> bool:
    """Return True for ordered iterables that are compared element-wise."""
    if isinstance(value, (_TEXT_TYPES, Mapping, Set)):
        return False
    if is_named_tuple(value):
        return False
    return isinstance(value, Iterable)


def value_kind(value: Any) -> ValueKind:
    if is_atomic(type(value)):
        return "atomic"
    if is_sequence_like(value):
        return "sequence"
    return "record"


def iter_elements(value: Any) -> Iterator[Any]:
    return iter(value)


def public_attributes(value: Any) -> tuple[Any, ...]:
    """List readable attribute names of a record value in a stable order."""
    if isinstance(value, Mapping):
        return tuple(value.keys())

    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return tuple(field.name for field in dataclasses.fields(value) if _is_public(field.name))

    if is_named_tuple(value):
        return tuple(name for name in type(value)._fields if _is_public(name))

    names: dict[str, None] = {}

    instance_dict = getattr(value, "__dict__", None)
    if isinstance(instance_dict, Mapping):
        for name in instance_dict:
            if isinstance(name, str) and _is_public(name):
                names[name] = None

    mro = tuple(reversed(type(value).__mro__))

    for klass in mro:
        slots = vars(klass).get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            # unset slots raise AttributeError and are not readable state
            if _is_public(name) and read_attribute(value, name) is not MISSING:
                names.setdefault(name, None)

    for klass in mro:
        for name, member in vars(klass).items():
            if _is_public(name) and _is_class_data(member):
                names.setdefault(name, None)

    for klass in mro:
        for name, member in vars(klass).items():
            if _is_public(name) and isinstance(member, (property, cached_property)):
                names.setdefault(name, None)

    return tuple(names)


def read_attribute(value: Any, name: Any) -> Any:
    """Read one attribute, returning ``MISSING`` when it does not exist."""
    if isinstance(value, Mapping):
        return value[name] if name in value else MISSING

    if not isinstance(name, str):
        return MISSING

    return getattr(value, name, MISSING)


def declared_attribute_type(value: Any, name: Any) -> Any:
    """Return the annotated type of ``name`` on ``value``'s class, if any."""
    if isinstance(value, Mapping) or not isinstance(name, str):
        return None

    declared = _class_type_hints(type(value)).get(name)
    if declared is not None:
        return declared

    member = getattr(type(value), name, None)
    if isinstance(member, property) and member.fget is not None:
        return _function_return_hint(member.fget)
    if isinstance(member, cached_property):
        return _function_return_hint(member.func)
    return None


def _is_public(name: str) -> bool:
    return not name.startswith("_")


def _is_class_data(member: Any) -> bool:
    # methods, nested classes and descriptors (slots, properties) are not data
    return not callable(member) and not hasattr(type(member), "__get__")


@lru_cache(maxsize=512)
def _class_type_hints(klass: type) -> dict[str, Any]:
    try:
        return get_type_hints(klass)
    except (NameError, TypeError):
        # unresolvable forward references leave attributes undeclared
        return {}


def _function_return_hint(function: Any) -> Any:
    try:
        return get_type_hints(function).get("return")
    except (NameError, TypeError):
        return None
