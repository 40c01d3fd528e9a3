"""Tests for logging configuration, hooks and the events the combinators emit."""

from __future__ import annotations

import logging
from typing import Any

import pytest

from result_ex import Err, Ok, UnknownShape, UnwrapError, appl, expect, flatten_enum, map, unwrap
from result_ex._logging import (
    add_log_hook,
    clear_log_hooks,
    configure_logging,
    get_logger,
    remove_log_hook,
)


@pytest.fixture(autouse=True)
def _reset(reset_logging) -> None:
    """Restore logging state around each test."""


@pytest.fixture
def captured() -> list[dict[str, Any]]:
    """Configure DEBUG logging and collect every event dict."""
    received: list[dict[str, Any]] = []
    configure_logging(level='DEBUG', json_output=True)
    add_log_hook(received.append)
    return received


def events(received: list[dict[str, Any]], name: str) -> list[dict[str, Any]]:
    return [entry for entry in received if entry.get('event') == name]


class TestLogHooks:
    """Tests for logging hooks functionality."""

    def test_hook_receives_log_events(self, captured) -> None:
        """Registered hooks receive log entry dicts."""
        get_logger('test').info('Test message', extra_field='extra_value')

        entries = events(captured, 'Test message')
        assert len(entries) == 1
        assert entries[0]['extra_field'] == 'extra_value'
        assert entries[0]['level'] == 'info'

    def test_multiple_hooks_all_called(self) -> None:
        """Multiple registered hooks are all called."""
        calls: list[str] = []

        configure_logging(level='DEBUG', json_output=True)
        add_log_hook(lambda _: calls.append('hook1'))
        add_log_hook(lambda _: calls.append('hook2'))

        get_logger('test').info('Test')

        assert calls == ['hook1', 'hook2']

    def test_remove_hook(self) -> None:
        """remove_log_hook() stops hook from being called."""
        calls: list[str] = []

        def hook(event_dict: dict[str, Any]) -> None:
            calls.append('called')

        configure_logging(level='DEBUG', json_output=True)
        add_log_hook(hook)

        logger = get_logger('test')
        logger.info('First')
        assert len(calls) == 1

        remove_log_hook(hook)
        logger.info('Second')
        assert len(calls) == 1

    def test_clear_hooks(self) -> None:
        """clear_log_hooks() removes all hooks."""
        calls: list[str] = []

        configure_logging(level='DEBUG', json_output=False)
        add_log_hook(lambda _: calls.append('hook'))

        logger = get_logger('test')
        logger.info('First')
        assert len(calls) == 1

        clear_log_hooks()
        logger.info('Second')
        assert len(calls) == 1

    def test_hook_receives_copy(self, captured) -> None:
        """Hooks cannot alter the event seen by later processors."""
        add_log_hook(lambda event_dict: event_dict.clear())

        get_logger('test').info('Copied')

        assert len(events(captured, 'Copied')) == 1

    def test_json_output(self, capsys) -> None:
        """JSON output renders the event as a JSON object on stderr."""
        configure_logging(level='INFO', json_output=True)

        get_logger('test').info('Json event', answer=42)

        err = capsys.readouterr().err
        assert '"event": "Json event"' in err
        assert '"answer": 42' in err


class TestCombinatorEvents:
    """Tests for the events the library emits."""

    def test_arity_error_logged(self, captured) -> None:
        """appl logs the arity error it returns."""
        appl(Ok(lambda: 1), Ok(1))

        entries = events(captured, 'appl_arity_error')
        assert len(entries) == 1
        assert entries[0]['arity'] == 0
        assert entries[0]['level'] == 'debug'

    def test_unknown_shape_logged(self, captured) -> None:
        """flatten_enum logs the unknown shape it returns."""
        flatten_enum('not a collection')

        entries = events(captured, 'flatten_enum_unknown_shape')
        assert len(entries) == 1
        assert entries[0]['type_name'] == 'str'

    def test_unwrap_failure_logged(self, captured) -> None:
        """unwrap logs a warning before raising."""
        with pytest.raises(UnwrapError):
            unwrap(Err('Oops'))

        entries = events(captured, 'unwrap_failed')
        assert len(entries) == 1
        assert entries[0]['reason'] == "'Oops'"
        assert entries[0]['level'] == 'warning'

    def test_expect_failure_logged(self, captured) -> None:
        """expect logs the message it raises with."""
        with pytest.raises(UnwrapError):
            expect(Err('Oops'), 'needed a value')

        assert events(captured, 'expect_failed')[0]['reason'] == "'needed a value'"

    def test_success_path_silent(self, captured) -> None:
        """Nothing is logged when every step succeeds."""
        map(Ok(1), lambda n: n + 1)
        appl(Ok(lambda n: n), Ok(1))
        flatten_enum([Ok(1)])
        unwrap(Ok(1))

        assert captured == []

    def test_failing_hook_does_not_escape(self, captured) -> None:
        """A hook that raises changes neither results nor later hooks."""

        def broken(event_dict: dict[str, Any]) -> None:
            raise RuntimeError('hook failed')

        later: list[dict[str, Any]] = []
        add_log_hook(broken)
        add_log_hook(later.append)

        assert isinstance(appl(Ok(lambda: 1), Ok(1)), Err)
        assert flatten_enum(42) == Err(UnknownShape('int'))
        with pytest.raises(UnwrapError):
            unwrap(Err('x'))

        assert [entry['event'] for entry in later] == [
            'appl_arity_error',
            'flatten_enum_unknown_shape',
            'unwrap_failed',
        ]


class _Recorder(logging.Handler):
    def __init__(self) -> None:
        super().__init__()
        self.records: list[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


class TestUnconfigured:
    """Tests for library logging before the application configures anything."""

    def test_package_logger_has_null_handler(self) -> None:
        handlers = logging.getLogger('result_ex').handlers
        assert any(isinstance(handler, logging.NullHandler) for handler in handlers)

    def test_unwrap_warning_not_printed(self, monkeypatch, capsys) -> None:
        """Without handlers the warning never reaches the last-resort handler."""
        last_resort = _Recorder()
        monkeypatch.setattr(logging.getLogger(), 'handlers', [])
        monkeypatch.setattr(logging, 'lastResort', last_resort)

        with pytest.raises(UnwrapError):
            unwrap(Err('x'))

        assert last_resort.records == []
        assert capsys.readouterr().err == ''
