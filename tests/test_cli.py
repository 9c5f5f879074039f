"""Test the poemc command line tool."""

import json
import logging

import pytest

from poem import __version__
from poem.cli import cli


@pytest.fixture
def source_file(write_source):
    return write_source('fn sum a b: a+b\nprint "hi"\n', "sum.poem")


def test_version(runner):
    result = runner.invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_tokens_table(runner, source_file):
    result = runner.invoke(cli, ["tokens", str(source_file)])

    assert result.exit_code == 0
    assert "FN" in result.output
    assert "IDENTIFIER" in result.output
    assert "'sum'" in result.output
    assert "NEWLINE" in result.output


def test_tokens_json(runner, source_file):
    result = runner.invoke(cli, ["tokens", str(source_file), "--json"])

    assert result.exit_code == 0
    rows = json.loads(result.output)
    assert [row["type"] for row in rows[:3]] == ["FN", "IDENTIFIER", "IDENTIFIER"]
    assert rows[1] == {"type": "IDENTIFIER", "value": "sum", "line": 1, "column": 4}
    assert rows[-2]["value"] == "hi"
    assert rows[-1]["type"] == "NEWLINE"


def test_decode_escapes(runner, write_source):
    path = write_source('print "a\\tb"', "esc.poem")

    raw = json.loads(runner.invoke(cli, ["tokens", str(path), "--json"]).output)
    decoded = json.loads(
        runner.invoke(cli, ["tokens", str(path), "--json", "--decode-escapes"]).output
    )

    assert raw[1]["value"] == "a\\tb"
    assert decoded[1]["value"] == "a\tb"


def test_diagnostics_reports_skipped_input(runner, write_source):
    path = write_source("a # b\n", "bad.poem")

    result = runner.invoke(cli, ["tokens", str(path), "--diagnostics"])

    assert result.exit_code == 0
    assert "Skipped invalid character: '#'" in result.output


def test_strict_failure_exits_nonzero(runner, write_source):
    path = write_source("a # b\n", "bad.poem")

    result = runner.invoke(cli, ["tokens", str(path), "--strict"])

    assert result.exit_code == 1
    assert "L001" in result.output


def test_integer_overflow_exits_nonzero(runner, write_source):
    path = write_source("let x = 99999999999999999999\n", "big.poem")

    result = runner.invoke(cli, ["tokens", str(path)])

    assert result.exit_code == 1
    assert "L007" in result.output


def test_missing_file(runner, tmp_path):
    result = runner.invoke(cli, ["tokens", str(tmp_path / "nope.poem")])

    assert result.exit_code != 0


def test_very_long_integer_exits_nonzero(runner, write_source):
    path = write_source("let x = " + "9" * 5000 + "\n", "huge.poem")

    result = runner.invoke(cli, ["tokens", str(path)])

    assert result.exit_code == 1
    assert "L007" in result.output


def test_strict_and_diagnostics_are_exclusive(runner, write_source):
    path = write_source("a # b\n", "bad.poem")

    result = runner.invoke(cli, ["tokens", str(path), "--strict", "--diagnostics"])

    assert result.exit_code == 2
    assert "cannot be used together" in result.output


def test_read_is_logged_before_tokenizing(runner, write_source, caplog):
    path = write_source("let x = 99999999999999999999\n", "big.poem")

    with caplog.at_level(logging.DEBUG, logger="poem"):
        result = runner.invoke(cli, ["tokens", str(path)])

    assert result.exit_code == 1
    assert "Read 29 characters" in caplog.text
