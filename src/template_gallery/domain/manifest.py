"""Template manifest types.

These are pure domain types built from the decoded JSON documents found
inside template package archives. Only the fields the gallery consumes are
lifted into attributes; the full document is kept in ``raw``.
"""

from dataclasses import dataclass, field
from typing import Any


def _as_str(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)


def _fold_keys(data: dict[str, Any]) -> dict[str, Any]:
    """Index a document by casefolded property name.

    Manifest property names are matched case-insensitively, so ``Icon`` and
    ``icon`` are the same property.
    """
    return {str(key).casefold(): value for key, value in data.items()}


@dataclass(frozen=True)
class TemplateManifest:
    """Decoded ``.template.config/template.json`` document."""

    identity: str | None = None
    name: str | None = None
    short_name: tuple[str, ...] = ()
    author: str | None = None
    description: str | None = None
    group_identity: str | None = None
    classifications: tuple[str, ...] = ()
    tags: dict[str, str] = field(default_factory=dict)
    raw: dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TemplateManifest":
        """Create manifest from decoded template.json content.

        ``shortName`` may be a single string or a list of aliases.
        """
        fields = _fold_keys(data)
        short_name = fields.get("shortname") or ()
        if isinstance(short_name, str):
            short_name = (short_name,)

        tags = fields.get("tags") or {}
        if not isinstance(tags, dict):
            tags = {}

        return cls(
            identity=_as_str(fields.get("identity")),
            name=_as_str(fields.get("name")),
            short_name=tuple(str(s) for s in short_name),
            author=_as_str(fields.get("author")),
            description=_as_str(fields.get("description")),
            group_identity=_as_str(fields.get("groupidentity")),
            classifications=tuple(
                str(c) for c in fields.get("classifications") or ()
            ),
            tags={str(k): str(v) for k, v in tags.items()},
            raw=data,
        )

    @property
    def language(self) -> str | None:
        """Language tag declared by the template, if any."""
        return self.tags.get("language")


@dataclass(frozen=True)
class IdeHostManifest:
    """Decoded ``.template.config/ide.host.json`` document."""

    icon: str | None = None
    raw: dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "IdeHostManifest":
        """Create IDE host manifest from decoded ide.host.json content."""
        icon = _fold_keys(data).get("icon")
        return cls(icon=str(icon) if icon else None, raw=data)


@dataclass(frozen=True)
class CompositeTemplateManifest:
    """A template found in a package, ready for display.

    Combines the template's own manifest with its optional IDE hints and the
    icon resolved to a ``data:`` URI.
    """

    package_name: str
    package_version: str
    base64_icon: str | None
    is_built_in: bool
    template_manifest: TemplateManifest
    ide_host_manifest: IdeHostManifest | None = None
