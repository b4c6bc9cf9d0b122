"""Constructor-injection checks for components.

A component is a class whose collaborators are all passed to its
constructor. The harness drives that constructor from an ordered list of
dependency values.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta
from decimal import Decimal
import enum
import inspect
import logging
from typing import Any
from uuid import UUID

from statepack.core.introspection import MISSING, read_attribute
from statepack.harness.exceptions import (
    DependencyAssertionError,
    InvalidDependencyError,
    UnsupportedComponentError,
)

_logger = logging.getLogger("statekit.harness")

DEFAULT_MISSING_DEPENDENCY_ERRORS: tuple[type[BaseException], ...] = (ValueError, TypeError)

# dependencies passed by value; they are never replaced with None
VALUE_DEPENDENCY_TYPES: tuple[type, ...] = (
    bool,
    int,
    float,
    complex,
    Decimal,
    UUID,
    datetime,
    date,
    time,
    timedelta,
    enum.Enum,
)

_UNSUPPORTED_PARAMETER_KINDS = (
    inspect.Parameter.VAR_POSITIONAL,
    inspect.Parameter.VAR_KEYWORD,
    inspect.Parameter.KEYWORD_ONLY,
)


@dataclass(slots=True)
class ComponentHarness:
    """Drive a component constructor with an ordered set of dependencies."""

    component_type: type
    dependencies: Sequence[Any] | Callable[[], Iterable[Any]]
    missing_dependency_errors: tuple[type[BaseException], ...] = field(
        default=DEFAULT_MISSING_DEPENDENCY_ERRORS
    )

    def dependency_values(self) -> list[Any]:
        if callable(self.dependencies):
            return list(self.dependencies())
        return list(self.dependencies)

    def constructor_parameters(self) -> list[inspect.Parameter]:
        try:
            signature = inspect.signature(self.component_type)
        except (TypeError, ValueError) as error:
            raise UnsupportedComponentError(
                f"Cannot inspect constructor of {self.component_type.__name__}: {error}"
            ) from error

        parameters = list(signature.parameters.values())
        for parameter in parameters:
            if parameter.kind in _UNSUPPORTED_PARAMETER_KINDS:
                raise UnsupportedComponentError(
                    "Component constructor can only take positional dependency parameters; "
                    f"'{parameter.name}' is {parameter.kind.description}."
                )
        return parameters

    def dependency_parameters(self) -> dict[str, Any]:
        """Map constructor parameter names to the supplied dependency values."""
        parameters = self.constructor_parameters()
        values = self.dependency_values()

        if len(values) != len(parameters):
            raise UnsupportedComponentError(
                f"The number of dependency values ({len(values)}) does not match the number "
                f"of constructor parameters on the component ({len(parameters)})."
            )

        named: dict[str, Any] = {}
        for parameter, value in zip(parameters, values):
            if value is None:
                raise InvalidDependencyError(
                    f"Dependency value for parameter '{parameter.name}' cannot be None."
                )
            named[parameter.name] = value
        return named

    def create_target(self) -> Any:
        return self.component_type(*self.dependency_values())

    def check_requires_dependencies(self) -> None:
        """Require the constructor to reject each missing reference dependency."""
        parameters = self.dependency_parameters()
        names = list(parameters)

        for name in names:
            if isinstance(parameters[name], VALUE_DEPENDENCY_TYPES):
                continue

            args = [None if other == name else parameters[other] for other in names]
            _logger.debug(
                "constructing %s without dependency '%s'",
                self.component_type.__name__,
                name,
            )
            try:
                self.component_type(*args)
            except self.missing_dependency_errors:
                continue

            expected = ", ".join(error.__name__ for error in self.missing_dependency_errors)
            raise DependencyAssertionError(
                f"Component class has constructor parameter ('{name}') that does not raise "
                f"{expected} when passed None."
            )

    def check_implements(self, interface: type) -> None:
        if not issubclass(self.component_type, interface):
            raise DependencyAssertionError(
                f"{self.component_type.__name__} does not implement {interface.__name__}."
            )

    def check_exposes_dependencies(self) -> None:
        """Require every dependency to be exposed as an attribute of the same name."""
        parameters = self.dependency_parameters()
        if not parameters:
            raise UnsupportedComponentError(
                "A dependency container must have at least one parameter."
            )

        target = self.create_target()
        attribute_names = {name.lower(): name for name in _readable_names(target)}

        for parameter_name, value in parameters.items():
            attribute_name = attribute_names.get(parameter_name.lower())
            if attribute_name is None:
                raise DependencyAssertionError(
                    f"No matching attribute found for dependency parameter '{parameter_name}'."
                )

            exposed = read_attribute(target, attribute_name)
            if exposed is MISSING or exposed != value:
                raise DependencyAssertionError(
                    f"Attribute '{attribute_name}' did not return the same value as dependency "
                    f"parameter '{parameter_name}'."
                )


def _readable_names(target: Any) -> list[str]:
    return [name for name in dir(target) if not name.startswith("_")]
