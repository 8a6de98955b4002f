import pytest
from coreason_logqueue.levels import Severity, SinkMode

RANKS = {"ERROR": 1, "WARN": 2, "INFO": 3, "DEBUG": 4}


def test_severity_ranks() -> None:
    for name, rank in RANKS.items():
        assert Severity[name].value == rank
        assert Severity[name].label == name


@pytest.mark.parametrize("threshold", list(Severity))
@pytest.mark.parametrize("severity", list(Severity))
def test_threshold_allows_iff_rank_not_above(threshold: Severity, severity: Severity) -> None:
    assert threshold.allows(severity) == (RANKS[severity.name] <= RANKS[threshold.name])


def test_warn_threshold() -> None:
    assert Severity.WARN.allows(Severity.ERROR)
    assert Severity.WARN.allows(Severity.WARN)
    assert not Severity.WARN.allows(Severity.INFO)
    assert not Severity.WARN.allows(Severity.DEBUG)


@pytest.mark.parametrize("raw", ["debug", "DEBUG", "Debug", "  debug "])
def test_severity_parse_case_insensitive(raw: str) -> None:
    assert Severity.parse(raw) is Severity.DEBUG


def test_severity_parse_passthrough() -> None:
    assert Severity.parse(Severity.INFO) is Severity.INFO


@pytest.mark.parametrize("raw", ["verbose", "", "WARNING", 3, None])
def test_severity_parse_rejects_unknown(raw: object) -> None:
    with pytest.raises(ValueError, match="Unknown log level"):
        Severity.parse(raw)  # type: ignore[arg-type]


def test_sink_mode_parse() -> None:
    assert SinkMode.parse("all") is SinkMode.ALL
    assert SinkMode.parse("File") is SinkMode.FILE
    assert SinkMode.parse(SinkMode.CONSOLE) is SinkMode.CONSOLE
    with pytest.raises(ValueError, match="Unknown log mode"):
        SinkMode.parse("syslog")


def test_sink_mode_selection() -> None:
    assert SinkMode.CONSOLE.writes_console and not SinkMode.CONSOLE.writes_file
    assert SinkMode.FILE.writes_file and not SinkMode.FILE.writes_console
    assert SinkMode.ALL.writes_console and SinkMode.ALL.writes_file
