"""Tests for the command-line interface"""

import pytest
from typer.testing import CliRunner

from todoedit import __version__
from todoedit.cli import app
from todoedit.core.config import get_config_path, load_config

runner = CliRunner()


@pytest.fixture(autouse=True)
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_version():
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert f"todoedit version {__version__}" in result.output


def test_keys():
    """Test the key binding table"""
    result = runner.invoke(app, ["keys"])

    assert result.exit_code == 0
    assert "Key Bindings" in result.output
    assert "Move selection down" in result.output


def test_init_creates_config():
    result = runner.invoke(app, ["init", "--title", "groceries"])

    assert result.exit_code == 0
    assert "Created" in result.output
    assert load_config().title == "groceries"


def test_init_keeps_existing_config_when_declined():
    """Test init asks before overwriting"""
    runner.invoke(app, ["init", "--title", "first"])

    result = runner.invoke(app, ["init", "--title", "second"], input="n\n")

    assert result.exit_code == 0
    assert load_config().title == "first"


def test_config_shows_defaults():
    result = runner.invoke(app, ["config"])

    assert result.exit_code == 0
    assert "built-in defaults" in result.output
    assert "default_title" in result.output


def test_config_reports_invalid_file():
    """Test a broken config file exits with an error"""
    path = get_config_path()
    path.parent.mkdir()
    path.write_text("log_level: chatty\n")

    result = runner.invoke(app, ["config"])

    assert result.exit_code == 1
    assert "Error" in result.output
