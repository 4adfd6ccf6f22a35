"""Command handlers for the template-gallery CLI."""

from template_gallery.cli.commands.base import BaseCommandHandler
from template_gallery.cli.commands.install import (
    InstallHandler,
    UninstallHandler,
    UpdateHandler,
)
from template_gallery.cli.commands.packages import PackagesHandler
from template_gallery.cli.commands.templates import TemplatesHandler

__all__ = [
    "BaseCommandHandler",
    "InstallHandler",
    "PackagesHandler",
    "TemplatesHandler",
    "UninstallHandler",
    "UpdateHandler",
]
