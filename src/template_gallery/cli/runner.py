"""CLI runner for template-gallery.

Orchestrates the execution of CLI commands by routing parsed
arguments to the appropriate command handlers.
"""

import sys
from argparse import Namespace
from collections.abc import Sequence

from template_gallery import __version__
from template_gallery.cli.commands import (
    BaseCommandHandler,
    InstallHandler,
    PackagesHandler,
    TemplatesHandler,
    UninstallHandler,
    UpdateHandler,
)
from template_gallery.cli.container import ServiceContainer
from template_gallery.cli.parser import CLIParser
from template_gallery.config import ConfigManager
from template_gallery.exceptions import TemplateGalleryError
from template_gallery.logger import (
    get_logger,
    restore_console_level,
    set_console_level,
    update_logger_from_config,
)

logger = get_logger(__name__)


class CLIRunner:
    """CLI command runner and orchestrator."""

    def __init__(self, config_manager: ConfigManager | None = None) -> None:
        """Initialize CLI runner with shared dependencies.

        Args:
            config_manager: Optional configuration manager, mainly for tests

        """
        self.config_manager = config_manager or ConfigManager()
        self.container = ServiceContainer(self.config_manager)

        # Apply settings.conf log levels to the already running handlers
        update_logger_from_config(self.container.global_config)

        self._init_command_handlers()

    def _init_command_handlers(self) -> None:
        self.command_handlers: dict[str, BaseCommandHandler] = {
            "packages": PackagesHandler(self.container),
            "templates": TemplatesHandler(self.container),
            "install": InstallHandler(self.container),
            "uninstall": UninstallHandler(self.container),
            "update": UpdateHandler(self.container),
        }

    async def run(self, argv: Sequence[str] | None = None) -> None:
        """Run the CLI application.

        Parses arguments, handles global flags, validates commands,
        and routes to the appropriate handler.

        Args:
            argv: Arguments to parse (defaults to sys.argv[1:])

        """
        try:
            args = CLIParser().parse_args(argv)

            if getattr(args, "version", False):
                print(__version__)
                return

            if not args.command:
                logger.error("No command specified. Use --help.")
                sys.exit(1)

            await self._execute_command(args)

        except TemplateGalleryError as e:
            logger.error("%s", e)
            sys.exit(1)
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            sys.exit(1)
        except Exception as e:
            logger.exception("Unexpected error: %s", e)
            sys.exit(1)
        finally:
            await self.container.cleanup()

    async def _execute_command(self, args: Namespace) -> None:
        """Execute the specified command with the appropriate handler.

        Args:
            args: Parsed command-line arguments namespace.

        """
        command = args.command

        if command not in self.command_handlers:
            logger.error("Unknown command: %s", command)
            sys.exit(1)

        handler = self.command_handlers[command]

        previous_level = None
        if getattr(args, "verbose", False):
            previous_level = set_console_level("DEBUG")

        try:
            await handler.execute(args)
        finally:
            restore_console_level(previous_level)
