"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest
from click.testing import CliRunner

import conduit
from conduit.cli import cli

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def clear_registry():
    """Reset the process-wide plugin registry before and after each test.

    Plugin classes defined in one test would otherwise stay registered and
    leak into the next.
    """
    conduit.reset_registry()
    yield
    conduit.reset_registry()


@pytest.fixture
def fixture_plugins(monkeypatch):
    """Put the fixture external plugin packages on sys.path."""
    monkeypatch.syspath_prepend(str(FIXTURES_DIR / "plugins"))
    return FIXTURES_DIR / "plugins"


@pytest.fixture
def cli_runner():
    """Provide Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def invoke(cli_runner):
    """Helper to invoke the CLI with args."""

    def _invoke(args, **kwargs):
        return cli_runner.invoke(cli, args, **kwargs)

    return _invoke
