"""Install, uninstall and update command handlers."""

from argparse import Namespace

from template_gallery.cli.commands.base import BaseCommandHandler
from template_gallery.logger import get_logger

logger = get_logger(__name__)


class InstallHandler(BaseCommandHandler):
    """Handler for the install command."""

    async def execute(self, args: Namespace) -> None:
        """Install each requested package id in order."""
        for package_id in args.package_ids:
            await self.container.packages_service.install_template_package(
                package_id
            )


class UninstallHandler(BaseCommandHandler):
    """Handler for the uninstall command."""

    async def execute(self, args: Namespace) -> None:
        """Uninstall each requested package id in order."""
        for package_id in args.package_ids:
            await self.container.packages_service.uninstall_template_package(
                package_id
            )


class UpdateHandler(BaseCommandHandler):
    """Handler for the update command.

    Without ids, every installed non-built-in package with a newer catalog
    version is updated.
    """

    async def execute(self, args: Namespace) -> None:
        """Update requested packages, or all outdated ones."""
        service = self.container.packages_service
        package_ids = list(args.package_ids)

        if not package_ids:
            packages = await service.get_template_packages()
            package_ids = [p.id for p in packages if p.has_update]
            if not package_ids:
                logger.info("All template packages are up to date")
                return

        for package_id in package_ids:
            await service.update_template_package(package_id)
