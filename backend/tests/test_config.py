"""Tests for environment-driven configuration."""
import importlib
from pathlib import Path

import pytest

import dataroom
from dataroom.core import config


@pytest.fixture
def reload_config(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "production")
    yield lambda: importlib.reload(config)
    monkeypatch.undo()
    importlib.reload(config)


def test_data_dir_defaults_to_working_directory(tmp_path, monkeypatch, reload_config):
    monkeypatch.delenv("DATAROOM_DATA_DIR", raising=False)
    monkeypatch.chdir(tmp_path)

    settings = reload_config()

    assert settings.DATA_DIR.resolve() == (tmp_path / "data").resolve()
    package_dir = Path(dataroom.__file__).resolve().parent
    assert package_dir not in settings.DATA_DIR.resolve().parents


def test_data_dir_from_environment(tmp_path, monkeypatch, reload_config):
    monkeypatch.setenv("DATAROOM_DATA_DIR", str(tmp_path / "room"))

    assert reload_config().DATA_DIR == tmp_path / "room"
