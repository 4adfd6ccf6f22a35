"""Templates command handler: list templates inside package archives."""

import asyncio
from argparse import Namespace
from pathlib import Path

from template_gallery.cli.commands.base import BaseCommandHandler
from template_gallery.cli.commands.helpers import describe_template
from template_gallery.core.inspector import extract_manifests
from template_gallery.logger import get_logger

logger = get_logger(__name__)


class TemplatesHandler(BaseCommandHandler):
    """Handler for the templates command."""

    async def execute(self, args: Namespace) -> None:
        """List templates of one archive or of all local packages."""
        archive = getattr(args, "archive", None)
        if archive:
            templates = await asyncio.to_thread(
                extract_manifests, Path(archive).expanduser(), False
            )
        else:
            service = self.container.packages_service
            templates = await service.get_installed_templates()

        logger.info("Templates (%d):", len(templates))
        logger.info("")

        if not templates:
            logger.info("  None found")
            return

        for template in templates:
            logger.info("  %s", describe_template(template))
