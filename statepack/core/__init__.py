"""Type classification, introspection and location primitives."""

from statepack.core.introspection import (
    MISSING,
    declared_attribute_type,
    is_sequence_like,
    public_attributes,
    read_attribute,
    value_kind,
)
from statepack.core.location import LOCATION_DELIMITER, ROOT_LOCATION, append, render_location
from statepack.core.types import ValueKind, atomic_types, is_atomic

__all__ = [
    "MISSING",
    "LOCATION_DELIMITER",
    "ROOT_LOCATION",
    "ValueKind",
    "atomic_types",
    "is_atomic",
    "is_sequence_like",
    "value_kind",
    "public_attributes",
    "read_attribute",
    "declared_attribute_type",
    "append",
    "render_location",
]
