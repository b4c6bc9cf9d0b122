from __future__ import annotations

import pytest

from statepack.harness import (
    ComponentTestBase,
    ComponentWithInterfaceTestBase,
    DependencyAssertionError,
    DependencyContainerTestBase,
)


class Gateway:
    pass


class Sender:
    def send(self, payload: bytes) -> None:
        raise NotImplementedError


class HttpSender(Sender):
    def __init__(self, gateway: Gateway, timeout: float) -> None:
        if gateway is None:
            raise ValueError("gateway is required")
        self.gateway = gateway
        self.timeout = timeout

    def send(self, payload: bytes) -> None:
        return None


class LenientSender(Sender):
    def __init__(self, gateway: Gateway) -> None:
        self.gateway = gateway


GATEWAY = Gateway()


class TestHttpSenderComponent(ComponentWithInterfaceTestBase):
    component_type = HttpSender
    interface_type = Sender

    def get_dependencies(self):
        return [GATEWAY, 2.5]

    def test_create_target_injects_dependencies(self) -> None:
        target = self.create_target()

        assert target.gateway is GATEWAY
        assert self.get_dependency_parameters() == {"gateway": GATEWAY, "timeout": 2.5}


class TestHttpSenderContainer(DependencyContainerTestBase):
    component_type = HttpSender

    def get_dependencies(self):
        return [GATEWAY, 2.5]


class _LenientSenderChecks(ComponentTestBase):
    component_type = LenientSender

    def get_dependencies(self):
        return [GATEWAY]


def test_mixin_check_fails_for_lenient_component() -> None:
    with pytest.raises(DependencyAssertionError):
        _LenientSenderChecks().test_instances_should_require_their_dependencies()


def test_base_requires_get_dependencies_override() -> None:
    class _Unconfigured(ComponentTestBase):
        component_type = Gateway

    with pytest.raises(NotImplementedError):
        _Unconfigured().create_target()
