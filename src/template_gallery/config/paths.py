"""Path constants and utilities for template-gallery configuration."""

import os
from pathlib import Path

from template_gallery.constants import (
    CONFIG_DIR_NAME,
    DEFAULT_CONFIG_SUBDIR,
    DEFAULT_DOTNET_ROOT,
    DOTNET_ROOT_ENV,
    TEMPLATE_ENGINE_PACKAGES_SUBPATH,
)


class Paths:
    """Application paths and directory structure."""

    HOME_DIR = Path.home()
    CONFIG_DIR = HOME_DIR / CONFIG_DIR_NAME / DEFAULT_CONFIG_SUBDIR

    INSTALLED_PACKAGES_DIR = HOME_DIR.joinpath(
        *TEMPLATE_ENGINE_PACKAGES_SUBPATH
    )

    @classmethod
    def dotnet_root(cls) -> Path:
        """Get the dotnet installation root.

        Returns:
            $DOTNET_ROOT when set, otherwise the default system location
        """
        return Path(os.getenv(DOTNET_ROOT_ENV) or DEFAULT_DOTNET_ROOT)

    @classmethod
    def builtin_templates_dir(cls) -> Path:
        """Get the directory holding SDK-bundled template packages.

        Returns:
            ``<dotnet root>/templates``
        """
        return cls.dotnet_root() / "templates"

    @classmethod
    def expand_path(cls, path_str: str | Path) -> Path:
        """Expand and resolve path with ~ and relative path support.

        Example:
            >>> Paths.expand_path("~/Documents")
            Path('/home/user/Documents')
        """
        return Path(path_str).expanduser().resolve(strict=False)

    @classmethod
    def ensure_directories(cls, config_dir: Path | None = None) -> None:
        """Create the configuration and log directories if missing.

        The built-in and installed package directories belong to dotnet and
        are never created here.
        """
        config_dir = config_dir or cls.CONFIG_DIR
        for directory in (config_dir, config_dir / "logs"):
            directory.mkdir(parents=True, exist_ok=True)
