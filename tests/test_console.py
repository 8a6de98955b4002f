import io
from unittest.mock import MagicMock

import pytest
from coreason_logqueue.console import RED, RESET_FOREGROUND, YELLOW, ConsoleSink
from coreason_logqueue.levels import Severity


def test_writes_plain_line_when_not_colorized() -> None:
    stream = io.StringIO()
    ConsoleSink(stream, colorize=False).write(Severity.ERROR, "[ERROR][1][t]: boom")
    assert stream.getvalue() == "[ERROR][1][t]: boom\n"


@pytest.mark.parametrize(
    "severity, prefix",
    [(Severity.ERROR, RED), (Severity.WARN, YELLOW)],
)
def test_styled_levels(severity: Severity, prefix: str) -> None:
    stream = io.StringIO()
    ConsoleSink(stream, colorize=True).write(severity, "line")
    assert stream.getvalue() == f"{prefix}line{RESET_FOREGROUND}\n"


@pytest.mark.parametrize("severity", [Severity.INFO, Severity.DEBUG])
def test_unstyled_levels(severity: Severity) -> None:
    stream = io.StringIO()
    ConsoleSink(stream, colorize=True).write(severity, "line")
    assert stream.getvalue() == "line\n"


def test_auto_colorize_follows_tty() -> None:
    sink = ConsoleSink()
    tty = MagicMock()
    tty.isatty.return_value = True
    assert sink.should_colorize(tty)
    assert not sink.should_colorize(io.StringIO())


def test_defaults_to_current_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    ConsoleSink().write(Severity.INFO, "to stdout")
    assert capsys.readouterr().out == "to stdout\n"


def test_closed_stream_does_not_raise(caplog: pytest.LogCaptureFixture) -> None:
    stream = io.StringIO()
    stream.close()
    ConsoleSink(stream, colorize=False).write(Severity.INFO, "line")
    assert "Console write failed" in caplog.text


def test_binary_stream_does_not_raise(caplog: pytest.LogCaptureFixture) -> None:
    stream = io.BytesIO()
    ConsoleSink(stream, colorize=True).write(Severity.ERROR, "line")  # type: ignore[arg-type]
    assert stream.getvalue() == b""
    assert "Console write failed" in caplog.text


def test_broken_isatty_means_no_color() -> None:
    stream = MagicMock()
    stream.isatty.side_effect = RuntimeError("detached")
    assert not ConsoleSink().should_colorize(stream)
