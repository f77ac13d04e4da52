"""Process-wide suite registry."""

from typing import TYPE_CHECKING, Iterator, List, Optional

from loguru import logger

from .errors import RegistryError, SuiteNotFoundError

if TYPE_CHECKING:
    from .suites.base import Suite


class SuiteRegistry:
    """Append-only, ordered collection of suites.

    Suites are kept in the order they were registered, which is the order
    they were constructed in. Nothing is ever removed.
    """

    def __init__(self) -> None:
        self._suites: List["Suite"] = []

    def register(self, suite: "Suite") -> "Suite":
        """
        Append a suite to the registry.

        Args:
            suite: Suite instance to register

        Returns:
            The suite, unchanged

        Raises:
            RegistryError: If ``suite`` is not a Suite
        """
        from .suites.base import Suite

        if not isinstance(suite, Suite):
            raise RegistryError(f"Only Suite instances can be registered, got {type(suite).__name__}")

        self._suites.append(suite)
        logger.debug(f"Registered {'automatic' if suite.automatic else 'manual'} suite {suite.name}")
        return suite

    def __iter__(self) -> Iterator["Suite"]:
        return iter(list(self._suites))

    def __len__(self) -> int:
        return len(self._suites)

    def __contains__(self, name: object) -> bool:
        return any(suite.name == name for suite in self._suites)

    @property
    def names(self) -> List[str]:
        return [suite.name for suite in self._suites]

    def get(self, name: str) -> "Suite":
        """
        Look up a suite by name. The first registration wins on duplicates.

        Raises:
            SuiteNotFoundError: If no suite has that name
        """
        for suite in self._suites:
            if suite.name == name:
                return suite
        raise SuiteNotFoundError(name)

    def automatic(self) -> List["Suite"]:
        return [suite for suite in self._suites if suite.automatic]

    def manual(self) -> List["Suite"]:
        return [suite for suite in self._suites if not suite.automatic]

    def select(self, name: Optional[str] = None) -> List["Suite"]:
        """
        Pick the suites for a run.

        Args:
            name: Suite to run regardless of its automatic flag. When omitted,
                every automatic suite is selected.

        Returns:
            Suites in registry order
        """
        if name is None:
            return self.automatic()
        return [self.get(name)]


_default_registry: Optional[SuiteRegistry] = None


def default_registry() -> SuiteRegistry:
    """Registry used when a suite is constructed without an explicit one."""
    global _default_registry
    if _default_registry is None:
        _default_registry = SuiteRegistry()
    return _default_registry
