"""Pure domain types for template packages and manifests."""

from template_gallery.domain.identity import PackageIdentity, parse_identity
from template_gallery.domain.manifest import (
    CompositeTemplateManifest,
    IdeHostManifest,
    TemplateManifest,
)
from template_gallery.domain.package import CatalogRecord

__all__ = [
    "CatalogRecord",
    "CompositeTemplateManifest",
    "IdeHostManifest",
    "PackageIdentity",
    "TemplateManifest",
    "parse_identity",
]
