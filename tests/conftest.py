"""Shared fixtures for suite harness tests."""

from typing import List, Tuple

import pytest
from loguru import logger

from suite_harness import SuiteRegistry, failure_signal
from suite_harness import registry as registry_module


class LogCapture:
    """Loguru sink that keeps (level, message) pairs in order."""

    def __init__(self) -> None:
        self.records: List[Tuple[str, str]] = []

    def __call__(self, message) -> None:
        record = message.record
        self.records.append((record["level"].name, record["message"]))

    def messages(self, level: str = None) -> List[str]:
        return [msg for lvl, msg in self.records if level is None or lvl == level]

    def starting_with(self, prefix: str) -> List[str]:
        return [msg for _, msg in self.records if msg.startswith(prefix)]


@pytest.fixture(autouse=True)
def clean_failure_signal():
    """Reset the process-wide failure signal around each test."""
    failure_signal.reset()
    yield
    failure_signal.reset()


@pytest.fixture
def registry() -> SuiteRegistry:
    """Provide an empty registry."""
    return SuiteRegistry()


@pytest.fixture
def process_registry(monkeypatch) -> SuiteRegistry:
    """Swap the process-wide registry for an empty one."""
    fresh = SuiteRegistry()
    monkeypatch.setattr(registry_module, "_default_registry", fresh)
    return fresh


@pytest.fixture
def logs() -> LogCapture:
    """Capture everything logged through loguru during a test."""
    capture = LogCapture()
    handler_id = logger.add(capture, level="DEBUG", format="{message}")
    yield capture
    logger.remove(handler_id)
