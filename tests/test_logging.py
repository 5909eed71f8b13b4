"""
Tests for the shared logging configuration.

Output is read back from stderr to check the rendered logfmt lines.
"""

import logging
from collections.abc import Generator

import pytest
import structlog

from greeter.shared.logging import configure_logging, escape_control_characters


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None, None, None]:
    """Restore root logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_structlog_line_is_logfmt(self, capfd: pytest.CaptureFixture[str]) -> None:
        """structlog records render as key=value pairs in a fixed key order."""
        configure_logging("INFO")
        structlog.get_logger("greeter.test").info("HTTP", addr=":8080")

        line = capfd.readouterr().err.strip()
        assert line.startswith("timestamp=")
        assert " level=info logger=greeter.test event=HTTP addr=:8080" in line

    def test_stdlib_records_share_the_format(
        self, capfd: pytest.CaptureFixture[str]
    ) -> None:
        """Plain stdlib loggers are rendered through the same pipeline."""
        configure_logging("INFO")
        logging.getLogger("greeter.stdlib").warning("Decode error: %s", "bad")

        line = capfd.readouterr().err.strip()
        assert 'level=warning logger=greeter.stdlib event="Decode error: bad"' in line

    def test_level_filters_records(self, capfd: pytest.CaptureFixture[str]) -> None:
        """Records below the configured level are dropped."""
        configure_logging("WARNING")
        structlog.get_logger("greeter.test").info("quiet")
        assert capfd.readouterr().err == ""

    def test_unknown_level_falls_back_to_info(self) -> None:
        """An unrecognized level string configures INFO."""
        configure_logging("chatty")
        assert logging.getLogger().level == logging.INFO
        assert logging.getLogger("uvicorn.access").level == logging.WARNING

    def test_idempotent_calls(self) -> None:
        """Repeated configuration does not stack handlers."""
        configure_logging("INFO")
        configure_logging("DEBUG")
        assert len(logging.getLogger().handlers) == 1

    @pytest.mark.parametrize(
        "value", ["a\u2028b", "a\x0bb", "a\x0cb", "a\x1cb", "a\x85b", "a\nb", "a\x1b[2Jb", "a\x00b"]
    )
    def test_control_characters_stay_on_one_line(
        self, value: str, capfd: pytest.CaptureFixture[str]
    ) -> None:
        """Line breaks and control characters in values are escaped."""
        configure_logging("INFO")
        structlog.get_logger("greeter.test").info("hello", input=value)

        err = capfd.readouterr().err
        assert len(err.splitlines()) == 1
        assert all(char.isprintable() for char in err.rstrip("\n"))

    def test_exception_values_render_message(
        self, capfd: pytest.CaptureFixture[str]
    ) -> None:
        """Exceptions passed as values are rendered as their message."""
        configure_logging("INFO")
        structlog.get_logger("greeter.test").info("hello", err=ValueError("bad value"))
        assert 'err="bad value"' in capfd.readouterr().err


class TestEscapeControlCharacters:
    """Tests for the escape_control_characters processor."""

    def test_escapes_non_printable(self) -> None:
        """Non-printable characters become backslash escapes."""
        event = escape_control_characters(None, "info", {"input": "a\u2028b\x0bc\n"})
        assert event["input"] == "a\\u2028b\\x0bc\\n"

    def test_printable_values_untouched(self) -> None:
        """Printable strings, including spaces and accents, pass through."""
        event = escape_control_characters(None, "info", {"input": "élodie dupont"})
        assert event["input"] == "élodie dupont"

    def test_non_string_values_untouched(self) -> None:
        """Numbers and None are left for the renderer."""
        event = escape_control_characters(None, "info", {"count": 3, "err": None})
        assert event == {"count": 3, "err": None}
