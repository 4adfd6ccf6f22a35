"""Packages command handler: list the template catalog with status."""

from argparse import Namespace

from template_gallery.cli.commands.base import BaseCommandHandler
from template_gallery.cli.commands.helpers import (
    describe_status,
    format_version_for_display,
)
from template_gallery.logger import get_logger

logger = get_logger(__name__)


class PackagesHandler(BaseCommandHandler):
    """Handler for the packages command."""

    async def execute(self, args: Namespace) -> None:
        """List catalog packages, optionally only installed ones."""
        if getattr(args, "refresh", False):
            self.container.catalog_cache.reset()

        packages = await self.container.packages_service.get_template_packages()
        if getattr(args, "installed", False):
            packages = [p for p in packages if p.is_installed]

        logger.info("Template packages (%d):", len(packages))
        logger.info("")

        if not packages:
            logger.info("  None found")
            return

        for package in packages:
            logger.info(
                "  %-48s %-16s %s",
                package.id,
                format_version_for_display(package.version),
                describe_status(package),
            )
