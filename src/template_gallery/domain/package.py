"""Catalog record for template packages."""

from dataclasses import dataclass
from typing import Any

from packaging.version import InvalidVersion, Version


@dataclass(frozen=True)
class CatalogRecord:
    """Template package as listed by the remote catalog.

    The three status fields (``is_installed``, ``installed_version`` and
    ``is_built_in``) are filled in by reconciliation, which always returns a
    new record instead of mutating this one.
    """

    id: str
    version: str = ""
    description: str = ""
    authors: tuple[str, ...] = ()
    icon_url: str | None = None
    total_downloads: int = 0
    verified: bool = False
    tags: tuple[str, ...] = ()
    is_installed: bool = False
    installed_version: str | None = None
    is_built_in: bool = False

    @classmethod
    def from_search_result(cls, data: dict[str, Any]) -> "CatalogRecord":
        """Create record from a NuGet search API result item.

        Args:
            data: One element of the ``data`` array of a search response

        Returns:
            Catalog record with status fields at their defaults

        Raises:
            KeyError: If the item has no ``id``

        """
        authors = data.get("authors") or ()
        if isinstance(authors, str):
            authors = (authors,)
        tags = data.get("tags") or ()
        if isinstance(tags, str):
            tags = tuple(tags.split())

        return cls(
            id=str(data["id"]),
            version=str(data.get("version", "")),
            description=str(data.get("description") or ""),
            authors=tuple(str(a) for a in authors),
            icon_url=data.get("iconUrl") or None,
            total_downloads=int(data.get("totalDownloads") or 0),
            verified=bool(data.get("verified", False)),
            tags=tuple(str(t) for t in tags),
        )

    @property
    def has_update(self) -> bool:
        """Whether the catalog offers a newer version than installed.

        Built-in packages are serviced with the SDK and never report updates.
        Versions that do not parse as PEP 440 report no update.
        """
        if not self.is_installed or self.is_built_in:
            return False
        if not self.installed_version or not self.version:
            return False
        try:
            return Version(self.version) > Version(self.installed_version)
        except InvalidVersion:
            return False

