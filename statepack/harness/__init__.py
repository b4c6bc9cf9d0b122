"""Constructor-injection harnesses for component tests."""

from statepack.harness.base import (
    ComponentTestBase,
    ComponentWithInterfaceTestBase,
    DependencyContainerTestBase,
)
from statepack.harness.component import DEFAULT_MISSING_DEPENDENCY_ERRORS, ComponentHarness
from statepack.harness.exceptions import (
    DependencyAssertionError,
    HarnessError,
    InvalidDependencyError,
    UnsupportedComponentError,
)

__all__ = [
    "DEFAULT_MISSING_DEPENDENCY_ERRORS",
    "ComponentHarness",
    "ComponentTestBase",
    "ComponentWithInterfaceTestBase",
    "DependencyContainerTestBase",
    "HarnessError",
    "UnsupportedComponentError",
    "InvalidDependencyError",
    "DependencyAssertionError",
]
