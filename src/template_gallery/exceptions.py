"""Exception classes for template-gallery operations."""


class TemplateGalleryError(Exception):
    """Base exception for template-gallery operations."""

    error_prefix: str = "Operation failed"

    def __init__(self, message: str, target: str | None = None) -> None:
        """Initialize error with message and optional target.

        Args:
            message: Error message describing the failure.
            target: Optional name of the package or archive that failed.

        """
        super().__init__(message)
        self.message = message
        self.target = target

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.target:
            return f"{self.error_prefix} for '{self.target}': {self.message}"
        return f"{self.error_prefix}: {self.message}"


class PackageArchiveError(TemplateGalleryError):
    """Raised when a package archive or one of its entries cannot be read."""

    error_prefix = "Cannot open package archive"


class ManifestDecodeError(TemplateGalleryError):
    """Raised when a template or IDE host manifest cannot be decoded."""

    error_prefix = "Invalid template manifest"


class CatalogFetchError(TemplateGalleryError):
    """Raised when the remote template catalog cannot be retrieved."""

    error_prefix = "Catalog fetch failed"


class InstallationError(TemplateGalleryError):
    """Raised when installing or uninstalling a template package fails."""

    error_prefix = "Installation failed"
