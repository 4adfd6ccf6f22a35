"""Base command handler for template-gallery CLI commands."""

from abc import ABC, abstractmethod
from argparse import Namespace

from template_gallery.cli.container import ServiceContainer
from template_gallery.logger import get_logger

logger = get_logger(__name__)


class BaseCommandHandler(ABC):
    """Abstract base class for all command handlers.

    CLIRunner acts as the composition root: it builds the ServiceContainer
    and injects it into each handler.
    """

    def __init__(self, container: ServiceContainer) -> None:
        """Initialize the command handler with shared dependencies.

        Args:
            container: Service container for this CLI invocation

        """
        self.container = container

    @abstractmethod
    async def execute(self, args: Namespace) -> None:
        """Execute the command with the given arguments.

        Args:
            args: Parsed command-line arguments

        """
