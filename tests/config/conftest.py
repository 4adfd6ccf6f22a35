"""Shared fixtures for config module tests."""

from pathlib import Path

import pytest

from template_gallery.config import ConfigManager


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    """Provide a temporary config directory (not created yet)."""
    return tmp_path / "config"


@pytest.fixture
def config_manager(config_dir: Path, monkeypatch) -> ConfigManager:
    """ConfigManager instance using a temporary config_dir."""
    monkeypatch.setenv("DOTNET_ROOT", str(config_dir.parent / "dotnet"))
    return ConfigManager(config_dir)
