import pytest
from click.testing import CliRunner

from pathmodel import parse


@pytest.fixture
def runner():
    """Click runner for invoking the CLI in-process."""
    return CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep CLI defaults and console colors independent of the environment."""
    monkeypatch.delenv("PATHMODEL_SEPARATOR", raising=False)
    monkeypatch.delenv("PATHMODEL_THEME", raising=False)
    for name in ("FORCE_COLOR", "TTY_COMPATIBLE", "TTY_INTERACTIVE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def absolute_file():
    return parse("/a/b/c.txt")


@pytest.fixture
def windows_file():
    return parse("C:\\temp\\x", "\\")
