"""Top-level package for template-gallery."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("template-gallery")
except PackageNotFoundError:
    # Fallback for development environments where package isn't installed
    __version__ = "dev"
