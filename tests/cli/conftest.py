"""Fixtures for CLI tests."""

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from template_gallery.config import ConfigManager
from template_gallery.domain.package import CatalogRecord


@pytest.fixture
def config_manager(tmp_path: Path) -> ConfigManager:
    return ConfigManager(tmp_path / "config")


@pytest.fixture
def catalog() -> list[CatalogRecord]:
    return [
        CatalogRecord(
            id="Foo.Templates",
            version="1.3.0",
            is_installed=True,
            installed_version="1.2.0",
        ),
        CatalogRecord(
            id="Web.Templates",
            version="8.0.1",
            is_installed=True,
            installed_version="8.0.0",
            is_built_in=True,
        ),
        CatalogRecord(id="Other", version="1.0.0"),
    ]


@pytest.fixture
def mock_container(catalog) -> MagicMock:
    """Container whose packages service is fully mocked."""
    container = MagicMock()
    service = container.packages_service
    service.get_template_packages = AsyncMock(return_value=catalog)
    service.get_installed_templates = AsyncMock(return_value=[])
    service.install_template_package = AsyncMock()
    service.uninstall_template_package = AsyncMock()
    service.update_template_package = AsyncMock()
    return container
