"""Packages service: the single entry point for template package queries.

Combines the remote catalog, the built-in and installed package
enumerators, the reconciler and the dotnet CLI. The remote catalog is
fetched once per service through the injected single-flight cell; local
packages are enumerated fresh on every call since installs change them.
"""

import asyncio
from typing import Protocol

from template_gallery.core.inspector import extract_manifests
from template_gallery.core.reconciler import merge
from template_gallery.core.single_flight import SingleFlight
from template_gallery.domain.manifest import CompositeTemplateManifest
from template_gallery.domain.package import CatalogRecord
from template_gallery.logger import get_logger

logger = get_logger(__name__)


class CatalogClient(Protocol):
    """Source of the remote template catalog."""

    async def get_template_packages(self) -> list[CatalogRecord]: ...


class PackageProvider(Protocol):
    """Enumerator of package archive paths."""

    def get_all_template_packages(self) -> list[str]: ...


class PackageInstaller(Protocol):
    """Installs and uninstalls packages by id."""

    async def install_template_package(self, package_id: str) -> None: ...

    async def uninstall_template_package(self, package_id: str) -> None: ...


class PackagesService:
    """Service for template package business logic."""

    def __init__(
        self,
        catalog_client: CatalogClient,
        built_in_provider: PackageProvider,
        installed_provider: PackageProvider,
        installer: PackageInstaller,
        catalog_cache: SingleFlight[list[CatalogRecord]],
    ) -> None:
        """Initialize the service.

        Args:
            catalog_client: Remote catalog source
            built_in_provider: Lists SDK-bundled package archives
            installed_provider: Lists user-installed package archives
            installer: Performs install/uninstall
            catalog_cache: Single-flight cell memoizing the remote catalog

        """
        self.catalog_client = catalog_client
        self.built_in_provider = built_in_provider
        self.installed_provider = installed_provider
        self.installer = installer
        self.catalog_cache = catalog_cache

    async def get_template_packages(self) -> list[CatalogRecord]:
        """Get the remote catalog annotated with local installation status."""
        online_packages = await self.catalog_cache.get(
            self.catalog_client.get_template_packages
        )
        built_in_paths = self.built_in_provider.get_all_template_packages()
        installed_paths = self.installed_provider.get_all_template_packages()

        return merge(online_packages, built_in_paths, installed_paths)

    async def get_installed_templates(self) -> list[CompositeTemplateManifest]:
        """Get every template inside built-in and installed packages.

        Archives are read in worker threads; built-in packages come first.

        Raises:
            PackageArchiveError: If an archive cannot be opened
            ManifestDecodeError: If an archive holds a malformed manifest

        """
        jobs = [
            (path, True)
            for path in self.built_in_provider.get_all_template_packages()
        ]
        jobs += [
            (path, False)
            for path in self.installed_provider.get_all_template_packages()
        ]

        results = await asyncio.gather(
            *(
                asyncio.to_thread(extract_manifests, path, is_built_in)
                for path, is_built_in in jobs
            )
        )

        templates = [manifest for result in results for manifest in result]
        logger.debug(
            "Found %d templates in %d packages", len(templates), len(jobs)
        )
        return templates

    async def install_template_package(self, package_id: str) -> None:
        """Install a template package by catalog id."""
        await self.installer.install_template_package(package_id)

    async def uninstall_template_package(self, package_id: str) -> None:
        """Uninstall a template package by catalog id."""
        await self.installer.uninstall_template_package(package_id)

    async def update_template_package(self, package_id: str) -> None:
        """Update a template package to the latest catalog version.

        ``dotnet new install`` replaces an installed package in place.
        """
        await self.installer.install_template_package(package_id)
