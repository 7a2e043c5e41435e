"""
tests/conftest.py
Shared fixtures for envv tests.
Provides an isolated working directory, in-memory stores and .env writers.
"""

import logging

import pytest

from envv.store import MemoryEnvStore


@pytest.fixture
def tmp_workdir(tmp_path, monkeypatch):
    """Run the test inside an empty temporary working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def store():
    """Empty in-memory environment store."""
    return MemoryEnvStore()


@pytest.fixture
def write_env(tmp_path):
    """Write *text* to a dotenv file under tmp_path and return its path.

    Bytes are written as-is so tests control line endings exactly.
    """
    def _write(text: str, name: str = ".env") -> str:
        path = tmp_path / name
        path.write_bytes(text.encode("utf-8"))
        return str(path)
    return _write


@pytest.fixture
def restore_logging():
    """Undo setup_logging() side effects on the root logger."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for h in root.handlers[:]:
        if h not in handlers:
            root.removeHandler(h)
            h.close()
    root.setLevel(level)
