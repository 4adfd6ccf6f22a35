"""Main CLI entry point for template-gallery.

Minimal entry point delegating to the CLI runner and command handlers.
"""

import sys

import uvloop

from template_gallery.cli import CLIRunner
from template_gallery.logger import get_logger

logger = get_logger(__name__)


async def async_main() -> None:
    """Build the CLI runner and execute the requested command."""
    logger.debug("CLI started")
    runner = CLIRunner()
    await runner.run()
    logger.debug("CLI completed successfully")


def main() -> None:
    """Run the CLI application on the uvloop event loop."""
    try:
        uvloop.run(async_main())
    except KeyboardInterrupt:
        logger.info("CLI cancelled by user")
        sys.exit(1)


if __name__ == "__main__":
    main()
