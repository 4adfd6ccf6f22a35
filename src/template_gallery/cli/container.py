"""Dependency injection container for service wiring.

The container creates services lazily on first access and owns the HTTP
session, which must be closed with cleanup().

Usage:
    >>> config = ConfigManager()
    >>> container = ServiceContainer(config)
    >>> try:
    ...     packages = await container.packages_service.get_template_packages()
    ... finally:
    ...     await container.cleanup()
"""

from __future__ import annotations

import aiohttp

from template_gallery.config import ConfigManager
from template_gallery.core.packages import PackagesService
from template_gallery.core.providers import (
    BuiltInTemplatePackageProvider,
    InstalledTemplatePackageProvider,
)
from template_gallery.core.single_flight import SingleFlight
from template_gallery.domain.package import CatalogRecord
from template_gallery.infrastructure.dotnet_cli import DotNetCli
from template_gallery.infrastructure.http_session import create_http_session
from template_gallery.infrastructure.nuget_client import NuGetClient
from template_gallery.logger import get_logger

logger = get_logger(__name__)


class ServiceContainer:
    """Container for managing service lifecycle and dependencies.

    Thread Safety:
        Safe for use within a single asyncio event loop. Each CLI command
        execution uses its own container instance.
    """

    def __init__(
        self,
        config: ConfigManager,
        catalog_cache: SingleFlight[list[CatalogRecord]] | None = None,
    ) -> None:
        """Initialize container.

        Args:
            config: Configuration manager
            catalog_cache: Optional shared single-flight cell for the remote
                catalog; a fresh one is created when omitted

        """
        self.config = config
        self.global_config = config.load_global_config()
        self.catalog_cache: SingleFlight[list[CatalogRecord]] = (
            catalog_cache or SingleFlight("remote catalog")
        )

        self._session: aiohttp.ClientSession | None = None
        self._nuget_client: NuGetClient | None = None
        self._dotnet_cli: DotNetCli | None = None
        self._packages_service: PackagesService | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Shared aiohttp session (created on first access)."""
        if self._session is None:
            self._session = create_http_session(self.global_config)
        return self._session

    @property
    def nuget_client(self) -> NuGetClient:
        """Remote catalog client."""
        if self._nuget_client is None:
            self._nuget_client = NuGetClient(
                self.session,
                self.global_config["nuget"],
                self.global_config["network"],
            )
        return self._nuget_client

    @property
    def built_in_provider(self) -> BuiltInTemplatePackageProvider:
        """Enumerator of SDK-bundled packages."""
        return BuiltInTemplatePackageProvider(
            self.global_config["directory"]["builtin"]
        )

    @property
    def installed_provider(self) -> InstalledTemplatePackageProvider:
        """Enumerator of user-installed packages."""
        return InstalledTemplatePackageProvider(
            self.global_config["directory"]["installed"]
        )

    @property
    def dotnet_cli(self) -> DotNetCli:
        """dotnet CLI wrapper."""
        if self._dotnet_cli is None:
            self._dotnet_cli = DotNetCli()
        return self._dotnet_cli

    @property
    def packages_service(self) -> PackagesService:
        """Fully wired packages service."""
        if self._packages_service is None:
            self._packages_service = PackagesService(
                catalog_client=self.nuget_client,
                built_in_provider=self.built_in_provider,
                installed_provider=self.installed_provider,
                installer=self.dotnet_cli,
                catalog_cache=self.catalog_cache,
            )
        return self._packages_service

    async def cleanup(self) -> None:
        """Close the HTTP session if one was opened."""
        if self._session is not None and not self._session.closed:
            await self._session.close()
            logger.debug("HTTP session closed")
        self._session = None
        self._nuget_client = None
        self._packages_service = None
