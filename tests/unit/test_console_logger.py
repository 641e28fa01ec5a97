"""Unit tests for the loguru-backed console logger."""

from __future__ import annotations

import io

from pathenhance.logger import ConsoleLogger, format_log_line


def test_console_logger_is_silent_by_default() -> None:
    """A logger constructed without `enabled` should emit nothing."""

    sink = io.StringIO()
    logger = ConsoleLogger(sink=sink)

    logger.debug("hidden")
    logger.info("hidden")
    logger.warning("hidden")
    logger.error("hidden")
    logger.close()

    assert sink.getvalue() == ""
    assert logger.enabled is False


def test_console_logger_prefixes_levels_and_appends_args() -> None:
    """Enabled loggers should render `[LEVEL] message arg...` lines per level."""

    sink = io.StringIO()
    logger = ConsoleLogger(enabled=True, sink=sink)

    logger.debug("test debug message", {"data": "test"})
    logger.info("test info message", "extra")
    logger.warning("test warn message")
    logger.error("test error message", 42)
    logger.close()

    assert sink.getvalue().splitlines() == [
        "[DEBUG] test debug message {'data': 'test'}",
        "[INFO] test info message extra",
        "[WARN] test warn message",
        "[ERROR] test error message 42",
    ]


def test_console_logger_can_be_toggled_after_construction() -> None:
    """`set_enabled` should switch output on and off."""

    sink = io.StringIO()
    logger = ConsoleLogger(sink=sink)

    logger.set_enabled(True)
    logger.info("visible ${PATH}")
    logger.set_enabled(False)
    logger.info("hidden")
    logger.close()

    assert sink.getvalue() == "[INFO] visible ${PATH}\n"


def test_console_loggers_with_separate_sinks_do_not_share_output() -> None:
    """Each sink should only receive lines from its own logger."""

    first_sink = io.StringIO()
    second_sink = io.StringIO()
    first = ConsoleLogger(enabled=True, sink=first_sink)
    second = ConsoleLogger(enabled=True, sink=second_sink)

    first.info("first")
    second.info("second")
    first.close()
    second.close()

    assert first_sink.getvalue() == "[INFO] first\n"
    assert second_sink.getvalue() == "[INFO] second\n"


def test_format_log_line_without_args() -> None:
    assert format_log_line("DEBUG", "plain", ()) == "[DEBUG] plain"
