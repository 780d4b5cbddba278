"""Shared fixtures for kinsenas tests."""

from pathlib import Path

import pytest

from kinsenas.store.schema import init_database


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    """Path to a freshly initialised database."""
    path = tmp_path / "kinsenas.db"
    init_database(path)
    return path


@pytest.fixture
def xdg_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG config and data directories at a temporary home."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    return tmp_path
