"""Command-line interface for template-gallery."""

from template_gallery.cli.runner import CLIRunner

__all__ = ["CLIRunner"]
