"""CLI flow: format command output, JSON mode, separators and exit codes."""
from __future__ import annotations

import json
from typing import Any

import pytest

from py_decfmt import __version__
from py_decfmt.infrastructure.config.settings import get_settings
from py_decfmt.presentation.cli.main import cli, main


def test_format_prints_one_line_per_value(capsys: Any) -> None:
    rc = cli(["format", "0.000032333", "14.00458", "1.232", "0.000032", "1.005", "1.001", "0.0000328103"])
    assert rc == 0
    assert capsys.readouterr().out.splitlines() == [
        "0.000032",
        "14.00",
        "1.23",
        "0.000032",
        "1.01",
        "1.00",
        "0.000033",
    ]


def test_format_negative_values_after_double_dash(capsys: Any) -> None:
    assert cli(["format", "--", "-0.000032333", "-9.995"]) == 0
    assert capsys.readouterr().out.splitlines() == ["-0.000032", "-10.00"]


def test_format_json_output(capsys: Any) -> None:
    assert cli(["format", "--json", "0.0995", "0"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload == [
        {"literal": "0.0995", "regime": "fractional", "fraction_digits": 2, "text": "0.10"},
        {"literal": "0", "regime": "zero", "fraction_digits": 2, "text": "0.00"},
    ]


def test_format_decimal_point_option(capsys: Any) -> None:
    assert cli(["format", "--decimal-point", ",", "14.00458"]) == 0
    assert capsys.readouterr().out.strip() == "14,00"


def test_format_decimal_point_from_env(monkeypatch: pytest.MonkeyPatch, capsys: Any) -> None:
    monkeypatch.setenv("DECIMAL_POINT", ",")
    get_settings.cache_clear()
    assert cli(["format", "1.005"]) == 0
    assert capsys.readouterr().out.strip() == "1,01"


@pytest.mark.parametrize("bad", ["", "1.2.3", "abc"])
def test_invalid_literal_exit_code_2(bad: str, capsys: Any) -> None:
    rc = cli(["format", "1.0", bad])
    captured = capsys.readouterr()
    assert rc == 2
    assert captured.out == ""
    assert captured.err.startswith("[ERROR]")


def test_invalid_separator_exit_code_2(capsys: Any) -> None:
    assert cli(["format", "--decimal-point", "7", "1.0"]) == 2
    assert "[ERROR]" in capsys.readouterr().err


def test_missing_argument_is_usage_error(capsys: Any) -> None:
    assert cli(["format"]) == 2
    assert "[ERROR]" in capsys.readouterr().err


def test_unknown_command_is_usage_error() -> None:
    assert cli(["nope"]) == 2


def test_logging_enabled_keeps_stdout_clean(monkeypatch: pytest.MonkeyPatch, capsys: Any) -> None:
    monkeypatch.setenv("LOGGING_ENABLED", "true")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    get_settings.cache_clear()
    assert cli(["format", "--json", "1.005"]) == 0
    captured = capsys.readouterr()
    assert json.loads(captured.out) == [
        {"literal": "1.005", "regime": "whole", "fraction_digits": 2, "text": "1.01"},
    ]
    assert "amount_formatted" in captured.err

    assert cli(["format", "0.0995", "14.00458"]) == 0
    captured = capsys.readouterr()
    assert captured.out.splitlines() == ["0.10", "14.00"]
    assert "amount_formatted" in captured.err


def test_version_and_help(capsys: Any) -> None:
    assert main(["version"]) == 0
    assert capsys.readouterr().out.strip() == __version__
    assert cli(["--help"]) == 0
    assert "format" in capsys.readouterr().out
