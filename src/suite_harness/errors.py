"""Harness infrastructure errors.

Assertion failures are never raised; they are recorded by
:func:`suite_harness.assertions.fail`. The exceptions below signal misuse of the
harness itself and are expected to propagate.
"""


class HarnessError(Exception):
    """Base class for harness infrastructure errors."""


class RegistryError(HarnessError):
    """Raised when something other than a suite is registered."""


class SuiteNotFoundError(HarnessError):
    """Raised when a suite is selected by a name nobody registered."""

    def __init__(self, name: str):
        super().__init__(f"No suite named '{name}' is registered")
        self.name = name


class SuiteConfigError(HarnessError):
    """Raised when a declarative suites file is malformed."""
