"""Shared test fixtures for Code Scout."""

import os
from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def isolated_config(tmp_path_factory, monkeypatch):
    """Keep user config files and CODE_SCOUT_* variables out of every test."""
    home = tmp_path_factory.mktemp("home")
    monkeypatch.setenv("HOME", str(home))
    for key in list(os.environ):
        if key.startswith("CODE_SCOUT_"):
            monkeypatch.delenv(key)
    return home


@pytest.fixture
def write_file(tmp_path):
    """Write a text file under tmp_path and return its path."""

    def _write(relative: str, content: str = "") -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR
