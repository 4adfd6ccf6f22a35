"""Enumerators for template packages present on this machine.

Providers only list archive paths; names and versions are parsed by the
callers from the filenames.
"""

from pathlib import Path

from template_gallery.constants import PACKAGE_GLOB
from template_gallery.logger import get_logger

logger = get_logger(__name__)


class BuiltInTemplatePackageProvider:
    """Lists template packages bundled with the dotnet SDK.

    SDKs keep their templates under ``<dotnet root>/templates/<sdk version>/``,
    so the directory is searched recursively.
    """

    def __init__(self, templates_dir: Path) -> None:
        """Initialize provider.

        Args:
            templates_dir: The SDK ``templates`` directory
        """
        self.templates_dir = templates_dir

    def get_all_template_packages(self) -> list[str]:
        """Return all built-in package archive paths, sorted."""
        if not self.templates_dir.is_dir():
            logger.debug(
                "Built-in templates directory not found: %s",
                self.templates_dir,
            )
            return []

        paths = sorted(str(p) for p in self.templates_dir.rglob(PACKAGE_GLOB))
        logger.debug(
            "Found %d built-in template packages in %s",
            len(paths),
            self.templates_dir,
        )
        return paths


class InstalledTemplatePackageProvider:
    """Lists template packages installed with ``dotnet new install``."""

    def __init__(self, packages_dir: Path) -> None:
        """Initialize provider.

        Args:
            packages_dir: Template engine package cache directory
        """
        self.packages_dir = packages_dir

    def get_all_template_packages(self) -> list[str]:
        """Return all installed package archive paths, sorted."""
        if not self.packages_dir.is_dir():
            logger.debug(
                "Installed packages directory not found: %s",
                self.packages_dir,
            )
            return []

        paths = sorted(
            str(p) for p in self.packages_dir.glob(PACKAGE_GLOB) if p.is_file()
        )
        logger.debug(
            "Found %d installed template packages in %s",
            len(paths),
            self.packages_dir,
        )
        return paths
