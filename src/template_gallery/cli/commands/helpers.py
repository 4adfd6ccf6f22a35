"""Formatting helpers shared by command handlers."""

from template_gallery.constants import MAX_VERSION_DISPLAY_LENGTH
from template_gallery.domain.manifest import CompositeTemplateManifest
from template_gallery.domain.package import CatalogRecord


def format_version_for_display(
    version: str | None, max_length: int = MAX_VERSION_DISPLAY_LENGTH
) -> str:
    """Truncate long versions for column output.

    Examples:
        >>> format_version_for_display("1.2.3")
        '1.2.3'
        >>> format_version_for_display("1.0.0-preview.7.21377.19", 16)
        '1.0.0-preview...'
    """
    if not version:
        return "-"
    if len(version) > max_length:
        return version[: max_length - 3] + "..."
    return version


def describe_status(record: CatalogRecord) -> str:
    """Human-readable installation status of a catalog record."""
    if not record.is_installed:
        return "not installed"
    installed = format_version_for_display(record.installed_version)
    if record.is_built_in:
        return f"built-in {installed}"
    if record.has_update:
        return f"installed {installed} (update available)"
    return f"installed {installed}"


def describe_template(template: CompositeTemplateManifest) -> str:
    """One-line summary of a discovered template."""
    manifest = template.template_manifest
    name = manifest.name or manifest.identity or "<unnamed>"
    short_name = ", ".join(manifest.short_name) or "-"
    origin = f"{template.package_name} {template.package_version}".strip()
    flags = []
    if template.is_built_in:
        flags.append("built-in")
    if template.base64_icon:
        flags.append("icon")
    suffix = f" [{', '.join(flags)}]" if flags else ""
    return f"{name:<40} {short_name:<20} {origin}{suffix}"
