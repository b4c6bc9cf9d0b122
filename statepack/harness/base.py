"""pytest mixins for component test classes.

Subclass one of these in a ``Test*`` class, set ``component_type`` and
implement ``get_dependencies``; pytest then collects the inherited checks::

    class TestOrderService(ComponentTestBase):
        component_type = OrderService

        def get_dependencies(self):
            return [FakeRepository(), FakeClock()]
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, ClassVar

from statepack.harness.component import DEFAULT_MISSING_DEPENDENCY_ERRORS, ComponentHarness


class ComponentTestBase:
    component_type: ClassVar[type]
    missing_dependency_errors: ClassVar[tuple[type[BaseException], ...]] = (
        DEFAULT_MISSING_DEPENDENCY_ERRORS
    )

    def get_dependencies(self) -> Iterable[Any]:
        """Return the constructor dependency values, in parameter order."""
        raise NotImplementedError

    @property
    def harness(self) -> ComponentHarness:
        return ComponentHarness(
            component_type=self.component_type,
            dependencies=self.get_dependencies,
            missing_dependency_errors=self.missing_dependency_errors,
        )

    def create_target(self) -> Any:
        return self.harness.create_target()

    def get_dependency_parameters(self) -> dict[str, Any]:
        return self.harness.dependency_parameters()

    def test_instances_should_require_their_dependencies(self) -> None:
        self.harness.check_requires_dependencies()


class ComponentWithInterfaceTestBase(ComponentTestBase):
    interface_type: ClassVar[type]

    def test_class_should_implement_the_component_interface(self) -> None:
        self.harness.check_implements(self.interface_type)


class DependencyContainerTestBase(ComponentTestBase):
    """Checks for simple containers that expose each constructor argument."""

    def test_instances_should_expose_their_dependencies_as_attributes(self) -> None:
        self.harness.check_exposes_dependencies()
