import pytest
from pydantic import ValidationError

import shift_leaderboard.cli as cli
from shift_leaderboard.config import Settings


def test_log_level_is_case_insensitive() -> None:
    assert Settings(log_level="debug", _env_file=None).log_level == "DEBUG"


def test_unknown_log_level_is_rejected() -> None:
    with pytest.raises(ValidationError):
        Settings(log_level="LOUD", _env_file=None)


def test_negative_top_n_is_rejected() -> None:
    with pytest.raises(ValidationError):
        Settings(top_n=-1, _env_file=None)


def test_top_n_reads_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("SHIFT_LEADERBOARD_TOP_N", "5")
    assert Settings(_env_file=None).top_n == 5


def test_cli_reports_invalid_settings(monkeypatch, capsys) -> None:
    monkeypatch.setenv("SHIFT_LEADERBOARD_LOG_LEVEL", "loud")
    monkeypatch.setattr(cli, "get_settings", lambda: Settings(_env_file=None))

    with pytest.raises(SystemExit) as exc_info:
        cli.top_workers()

    out, err = capsys.readouterr()
    assert exc_info.value.code == 1
    assert out == ""
    assert err.startswith("Error: invalid settings")
