"""Install and uninstall template packages through the dotnet CLI."""

import asyncio

from template_gallery.constants import DOTNET_EXECUTABLE
from template_gallery.exceptions import InstallationError
from template_gallery.logger import get_logger

logger = get_logger(__name__)


class DotNetCli:
    """Thin async wrapper around ``dotnet new install|uninstall``."""

    def __init__(self, executable: str = DOTNET_EXECUTABLE) -> None:
        """Initialize wrapper.

        Args:
            executable: dotnet executable name or path
        """
        self.executable = executable

    async def _run(self, *args: str) -> str:
        """Run dotnet with arguments and return its stdout.

        Raises:
            InstallationError: If dotnet is missing or exits non-zero

        """
        logger.debug("Running %s %s", self.executable, " ".join(args))
        try:
            process = await asyncio.create_subprocess_exec(
                self.executable,
                *args,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            raise InstallationError(
                f"cannot run '{self.executable}': {e}"
            ) from e

        stdout, stderr = await process.communicate()
        output = stdout.decode("utf-8", errors="replace")
        if process.returncode != 0:
            detail = stderr.decode("utf-8", errors="replace").strip()
            raise InstallationError(
                detail or output.strip() or f"exit code {process.returncode}",
                target=args[-1],
            )
        return output

    async def install_template_package(self, package_id: str) -> None:
        """Install (or upgrade) a template package by id."""
        await self._run("new", "install", package_id)
        logger.info("Installed template package %s", package_id)

    async def uninstall_template_package(self, package_id: str) -> None:
        """Uninstall a template package by id."""
        await self._run("new", "uninstall", package_id)
        logger.info("Uninstalled template package %s", package_id)
