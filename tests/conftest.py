"""Pytest configuration and shared fixtures for result-ex tests."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from typing import Any

import pytest
import structlog

from result_ex._logging import clear_log_hooks


@pytest.fixture
def sample_ok():
    """Sample Ok value for testing."""
    from result_ex import Ok

    return Ok(42)


@pytest.fixture
def sample_err():
    """Sample Err value for testing."""
    from result_ex import Err

    return Err('Oops')


class Recorder:
    """Callable wrapper that records every argument it is called with."""

    def __init__(self, fn: Callable[[Any], Any]) -> None:
        self.fn = fn
        self.calls: list[Any] = []

    def __call__(self, value: Any) -> Any:
        self.calls.append(value)
        return self.fn(value)

    @property
    def called(self) -> bool:
        return bool(self.calls)


@pytest.fixture
def recorder() -> Callable[[Callable[[Any], Any]], Recorder]:
    """Factory for functions that record their invocations."""
    return Recorder


@pytest.fixture
def reset_logging() -> Iterator[None]:
    """Restore structlog, root logger and log hooks after a test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    clear_log_hooks()
    yield
    clear_log_hooks()
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)
