# File: tests/conftest.py
import logging
from pathlib import Path

import pytest

from favscout.config import FavScoutConfig
from favscout.logger import LOGGER_NAME, configure
from favscout.store import ResultStore


@pytest.fixture(autouse=True)
def project_logger():
    """
    Reset the FavScout logger and let its records reach caplog.
    """
    lg = configure(level="DEBUG")
    lg.propagate = True
    yield lg
    lg.propagate = False


@pytest.fixture()
def store(tmp_path) -> ResultStore:
    """
    Open a fresh result store with the schema in place.
    """
    s = ResultStore.open(tmp_path / "favicons.db")
    s.ensure_schema()
    yield s
    s.close()


@pytest.fixture()
def basic_config(tmp_path) -> FavScoutConfig:
    """
    Return a config pointing at a temporary database with a short timeout.
    """
    return FavScoutConfig(database=tmp_path / "favicons.db", timeout=2.0)


@pytest.fixture()
def write_targets(tmp_path):
    """
    Write the given lines to a targets file and return its path.
    """
    def _write(*lines: str) -> Path:
        path = tmp_path / "urls.txt"
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def error_messages(caplog):
    """
    Return a callable listing ERROR messages logged by FavScout so far.
    """
    def _errors() -> list[str]:
        return [r.getMessage() for r in caplog.records if r.name == LOGGER_NAME and r.levelno >= logging.ERROR]

    return _errors
