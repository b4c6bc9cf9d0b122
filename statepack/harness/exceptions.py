"""Harness subsystem exceptions."""


class HarnessError(Exception):
    """Base class for component harness errors."""


class UnsupportedComponentError(HarnessError):
    """Raised when a component's constructor cannot be driven by the harness."""


class InvalidDependencyError(HarnessError):
    """Raised when the supplied dependency values are unusable."""


class DependencyAssertionError(AssertionError):
    """Raised when a component does not honour its constructor dependencies."""
