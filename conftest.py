"""Shared pytest fixtures and configuration for all tests."""

import pytest
from click.testing import CliRunner


@pytest.fixture
def runner():
    """Click runner for invoking poemc in-process."""
    return CliRunner()


@pytest.fixture
def write_source(tmp_path):
    """Write a Poem source file into a temp directory and return its path."""

    def _write(text: str, name: str = "main.poem"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
