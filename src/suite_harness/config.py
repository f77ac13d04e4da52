"""Suite configuration loading.

Suites can be declared in a YAML table instead of Python:

    suites:
      arithmetic:
        automatic: true
        before: mypkg.checks:reset
        tests:
          - mypkg.checks:addition
          - mypkg.checks:subtraction
      soak:
        automatic: false
        tests: !include soak_tests.yaml

Hooks and tests are ``module:function`` paths, imported when the file is loaded.
"""

import importlib
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Optional

import yaml
from loguru import logger

from .errors import SuiteConfigError
from .registry import SuiteRegistry
from .suites.declarative import FunctionSuite

HOOK_KEYS = ("before_all", "before", "after", "after_all")
SUITE_KEYS = {"automatic", "tests", *HOOK_KEYS}


class IncludeLoader(yaml.SafeLoader):
    """YAML loader that supports !include directive."""

    def __init__(self, stream):
        self._root = Path(stream.name).parent
        super().__init__(stream)


def include_constructor(loader: IncludeLoader, node: yaml.Node) -> Any:
    """Construct included YAML file."""
    filepath = loader._root / loader.construct_scalar(node)
    with open(filepath) as f:
        return yaml.load(f, IncludeLoader)


# Register the !include constructor
IncludeLoader.add_constructor("!include", include_constructor)


def resolve_callable(path: str) -> Callable[[], None]:
    """
    Import a ``module:function`` path.

    Args:
        path: Dotted module path and attribute, separated by a colon

    Returns:
        The callable

    Raises:
        SuiteConfigError: If the path is malformed or does not resolve to a callable
    """
    module_name, sep, attr = str(path).partition(":")
    if not sep or not module_name or not attr:
        raise SuiteConfigError(f"Expected 'module:function', got '{path}'")

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise SuiteConfigError(f"Cannot import module '{module_name}' for '{path}': {e}") from e

    target: Any = module
    for part in attr.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as e:
            raise SuiteConfigError(f"'{module_name}' has no attribute '{attr}'") from e

    if not callable(target):
        raise SuiteConfigError(f"'{path}' is not callable")
    return target


def suite_from_dict(
    name: str, suite_def: Optional[Dict[str, Any]], registry: Optional[SuiteRegistry] = None
) -> FunctionSuite:
    """
    Build and register a suite from one entry of a suites table.

    Args:
        name: Suite name (the table key)
        suite_def: Suite configuration
        registry: Registry to join (the process-wide one by default)

    Returns:
        The registered FunctionSuite
    """
    suite_def = suite_def or {}
    if not isinstance(suite_def, dict):
        raise SuiteConfigError(f"Suite '{name}' must be a mapping")

    unknown = set(suite_def) - SUITE_KEYS
    if unknown:
        raise SuiteConfigError(f"Suite '{name}' has unknown keys: {', '.join(sorted(unknown))}")

    automatic = suite_def.get("automatic", True)
    if not isinstance(automatic, bool):
        raise SuiteConfigError(f"Suite '{name}': 'automatic' must be true or false")

    tests = suite_def.get("tests") or []
    if not isinstance(tests, list):
        raise SuiteConfigError(f"Suite '{name}': 'tests' must be a list")

    hooks = {key: resolve_callable(suite_def[key]) for key in HOOK_KEYS if suite_def.get(key)}

    return FunctionSuite(
        name,
        tests=[resolve_callable(t) for t in tests],
        automatic=automatic,
        registry=registry,
        **hooks,
    )


def load_suites_file(path: str, registry: Optional[SuiteRegistry] = None) -> List[FunctionSuite]:
    """
    Register every suite declared in a YAML suites file, in file order.

    Args:
        path: Path to the suites file
        registry: Registry to join (the process-wide one by default)

    Returns:
        The registered suites
    """
    suites_path = Path(path)
    if not suites_path.exists():
        raise SuiteConfigError(f"Suites file not found: {suites_path}")

    with open(suites_path) as f:
        try:
            document = yaml.load(f, IncludeLoader) or {}
        except yaml.YAMLError as e:
            raise SuiteConfigError(f"Invalid YAML in {suites_path}: {e}") from e

    suite_defs = document.get("suites") if isinstance(document, dict) else None
    if not isinstance(suite_defs, dict):
        raise SuiteConfigError(f"{suites_path} must contain a 'suites' mapping")

    suites = [suite_from_dict(name, suite_def, registry) for name, suite_def in suite_defs.items()]
    logger.debug(f"Loaded {len(suites)} suite(s) from {suites_path}")
    return suites


def load_modules(module_names: Iterable[str]) -> None:
    """
    Import modules whose import registers suites.

    Args:
        module_names: Dotted module names

    Raises:
        SuiteConfigError: If a module cannot be imported
    """
    for module_name in module_names:
        try:
            importlib.import_module(module_name)
        except ImportError as e:
            raise SuiteConfigError(f"Cannot import suite module '{module_name}': {e}") from e
        logger.debug(f"Imported suite module {module_name}")
