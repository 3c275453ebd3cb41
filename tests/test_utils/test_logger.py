from __future__ import annotations

import io
import logging
from typing import Generator
from unittest.mock import patch

import pytest

import verrange.utils.logger as logger_module
from verrange.utils.logger import (
    ColoredFormatter,
    disable_logging,
    get_logger,
    is_logging_configured,
    level_for_verbosity,
    setup_logging,
)


@pytest.fixture(autouse=True)
def clean_logger_state() -> Generator[None, None, None]:
    """Reset the verrange logger before and after each test."""
    root_logger = logging.getLogger("verrange")
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)
    logger_module._logging_configured = False

    yield

    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)
    root_logger.propagate = True
    logger_module._logging_configured = False


def _record(level: int = logging.WARNING) -> logging.LogRecord:
    return logging.LogRecord(
        name="verrange.test",
        level=level,
        pathname=__file__,
        lineno=1,
        msg="hello %s",
        args=("world",),
        exc_info=None,
    )


@pytest.mark.unit
class TestColoredFormatter:
    """Tests for ColoredFormatter ANSI color formatting."""

    def test_plain_when_color_disabled(self) -> None:
        formatter = ColoredFormatter("%(levelname)s: %(message)s", use_color=False)

        assert formatter.format(_record()) == "WARNING: hello world"

    def test_colored_on_tty(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.delenv("CI", raising=False)
        formatter = ColoredFormatter("%(levelname)s: %(message)s")

        with patch("verrange.utils.logger._stderr_supports_color", return_value=True):
            output = formatter.format(_record())

        assert output == "\033[33mWARNING\033[0m: hello world"

    def test_record_is_not_modified(self) -> None:
        formatter = ColoredFormatter("%(levelname)s")
        record = _record()

        with patch("verrange.utils.logger._stderr_supports_color", return_value=True):
            formatter.format(record)

        assert record.levelname == "WARNING"

    @pytest.mark.parametrize("env_var", ["NO_COLOR", "CI"])
    def test_env_disables_color(
        self, monkeypatch: pytest.MonkeyPatch, env_var: str
    ) -> None:
        monkeypatch.setenv(env_var, "1")

        assert logger_module._stderr_supports_color() is False


@pytest.mark.unit
class TestLevelForVerbosity:
    @pytest.mark.parametrize(
        "verbose,level",
        [(-1, logging.WARNING), (0, logging.WARNING), (1, logging.INFO),
         (2, logging.DEBUG), (5, logging.DEBUG)],
    )
    def test_mapping(self, verbose: int, level: int) -> None:
        assert level_for_verbosity(verbose) == level


@pytest.mark.unit
class TestSetupLogging:
    """Tests for setup_logging configuration."""

    def test_writes_to_stream(self) -> None:
        stream = io.StringIO()
        setup_logging(level=logging.INFO, stream=stream)

        get_logger("parser").info("parsed %s", "[1.0,2.0)")

        assert "INFO: parsed [1.0,2.0)" in stream.getvalue()
        assert is_logging_configured()

    def test_respects_level(self) -> None:
        stream = io.StringIO()
        setup_logging(level=logging.WARNING, stream=stream)

        get_logger("parser").debug("hidden")

        assert stream.getvalue() == ""

    def test_verbose_format_includes_logger_name(self) -> None:
        stream = io.StringIO()
        setup_logging(level=logging.DEBUG, verbose=True, stream=stream)

        get_logger("intersector").debug("detail")

        assert "verrange.intersector" in stream.getvalue()

    def test_repeated_setup_keeps_single_handler(self) -> None:
        setup_logging(stream=io.StringIO())
        setup_logging(stream=io.StringIO())

        assert len(logging.getLogger("verrange").handlers) == 1


@pytest.mark.unit
class TestGetLogger:
    @pytest.mark.parametrize(
        "name,expected",
        [
            (None, "verrange"),
            ("verrange", "verrange"),
            ("parser", "verrange.parser"),
            ("verrange.core.parser", "verrange.core.parser"),
        ],
    )
    def test_namespacing(self, name, expected: str) -> None:
        assert get_logger(name).name == expected

    def test_null_handler_when_unconfigured(self) -> None:
        logger = get_logger("unconfigured")

        assert any(isinstance(h, logging.NullHandler) for h in logger.handlers)


@pytest.mark.unit
class TestDisableLogging:
    def test_disable(self) -> None:
        stream = io.StringIO()
        setup_logging(stream=stream)

        disable_logging()
        get_logger("parser").error("should not appear")

        assert stream.getvalue() == ""
        assert not is_logging_configured()
