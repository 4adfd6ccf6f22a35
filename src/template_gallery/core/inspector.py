"""Template discovery inside package archives.

A template package is a zip archive holding one or more templates laid out
as::

    [content/]<template root>/.template.config/template.json
    [content/]<template root>/.template.config/ide.host.json   (optional)

``ide.host.json`` may point at an icon, which is returned as a ``data:`` URI
so consumers never have to open the archive themselves.
"""

import base64
import posixpath
import zipfile
import zlib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import json5

from template_gallery.constants import (
    CONTENT_DIR,
    ICON_DATA_URI_TEMPLATE,
    IDE_HOST_MANIFEST_FILE,
    TEMPLATE_CONFIG_DIR,
    TEMPLATE_MANIFEST_FILE,
)
from template_gallery.domain.identity import parse_identity
from template_gallery.domain.manifest import (
    CompositeTemplateManifest,
    IdeHostManifest,
    TemplateManifest,
)
from template_gallery.exceptions import ManifestDecodeError, PackageArchiveError
from template_gallery.logger import get_logger

logger = get_logger(__name__)

_MANIFEST_SUFFIX = [TEMPLATE_CONFIG_DIR, TEMPLATE_MANIFEST_FILE]


@dataclass(frozen=True)
class TemplateEntryPath:
    """Location of a template manifest inside an archive.

    Attributes:
        entry_name: Full archive entry name of template.json
        template_root: Template root without the ``content/`` prefix
        root_directory: Template root as stored in the archive
        config_directory: Directory holding template.json
    """

    entry_name: str
    template_root: str
    root_directory: str
    config_directory: str


def match_template_manifest(entry_name: str) -> TemplateEntryPath | None:
    """Match an archive entry name against the template manifest layout.

    The name is split on ``/``; it matches when it ends with
    ``.template.config/template.json`` and has at least one template root
    segment before that. A leading ``content`` segment is not part of the
    template root unless it is the only segment.

    Args:
        entry_name: Archive entry name (forward slashes)

    Returns:
        Parsed location, or None when the entry is not a template manifest

    """
    parts = entry_name.split("/")
    if len(parts) < len(_MANIFEST_SUFFIX) + 1:
        return None
    if parts[-len(_MANIFEST_SUFFIX) :] != _MANIFEST_SUFFIX:
        return None

    root_parts = parts[: -len(_MANIFEST_SUFFIX)]
    template_parts = root_parts
    if root_parts[0] == CONTENT_DIR and len(root_parts) > 1:
        template_parts = root_parts[1:]

    return TemplateEntryPath(
        entry_name=entry_name,
        template_root="/".join(template_parts),
        root_directory="/".join(root_parts),
        config_directory="/".join(parts[:-1]),
    )


def resolve_entry_path(directory: str, relative_path: str) -> str:
    """Join a relative path onto an archive directory.

    Backslashes are converted to the archive's forward slashes and ``.``/``..``
    segments are collapsed.
    """
    joined = posixpath.join(directory, relative_path.replace("\\", "/"))
    return posixpath.normpath(joined)


def icon_data_uri(icon_path: str, data: bytes) -> str:
    """Wrap icon bytes as a ``data:image/<ext>;base64,...`` URI.

    The mime subtype is the file extension without its dot.
    """
    extension = posixpath.splitext(icon_path)[1][1:]
    payload = base64.b64encode(data).decode("ascii")
    return ICON_DATA_URI_TEMPLATE.format(ext=extension, payload=payload)


class _PackageArchive:
    """Read-only view over an open package archive."""

    def __init__(self, archive: zipfile.ZipFile, archive_path: Path) -> None:
        self.archive = archive
        self.archive_path = archive_path
        self.entries = archive.infolist()
        self._by_name: dict[str, zipfile.ZipInfo] = {}
        for info in self.entries:
            # First entry wins when an archive repeats a name
            self._by_name.setdefault(info.filename, info)

    def find(self, name: str) -> zipfile.ZipInfo | None:
        return self._by_name.get(name)

    def read(self, info: zipfile.ZipInfo) -> bytes:
        try:
            with self.archive.open(info) as stream:
                return stream.read()
        except (
            zipfile.BadZipFile,
            zlib.error,
            EOFError,
            OSError,
            RuntimeError,
        ) as e:
            # Encrypted entries and unknown compression methods raise
            # RuntimeError subclasses
            raise PackageArchiveError(
                f"corrupt entry '{info.filename}': {e}",
                target=str(self.archive_path),
            ) from e

    def read_json(self, info: zipfile.ZipInfo) -> dict[str, Any]:
        """Decode an entry as a JSON object.

        Manifests are read leniently: comments and trailing commas are
        accepted, as the dotnet template engine does.

        Raises:
            ManifestDecodeError: If the entry is not valid JSON or not an
                object

        """
        data = self.read(info)
        try:
            document = json5.loads(data.decode("utf-8-sig"))
        except ValueError as e:
            raise ManifestDecodeError(
                f"'{info.filename}' is not valid JSON: {e}",
                target=str(self.archive_path),
            ) from e

        if not isinstance(document, dict):
            raise ManifestDecodeError(
                f"'{info.filename}' must contain a JSON object",
                target=str(self.archive_path),
            )
        return document


def _read_ide_host_manifest(
    package: _PackageArchive, location: TemplateEntryPath
) -> IdeHostManifest | None:
    ide_host_path = resolve_entry_path(
        location.config_directory, IDE_HOST_MANIFEST_FILE
    )
    info = package.find(ide_host_path)
    if info is None:
        return None
    return IdeHostManifest.from_dict(package.read_json(info))


def _read_icon(
    package: _PackageArchive,
    location: TemplateEntryPath,
    relative_icon_path: str | None,
) -> str | None:
    if not relative_icon_path:
        return None

    # Icons are declared relative to .template.config; templates that keep
    # the icon beside their content are found through the template root.
    for directory in (location.config_directory, location.root_directory):
        icon_path = resolve_entry_path(directory, relative_icon_path)
        info = package.find(icon_path)
        if info is not None:
            return icon_data_uri(icon_path, package.read(info))

    logger.debug(
        "Icon '%s' declared by %s not found in %s",
        relative_icon_path,
        location.entry_name,
        package.archive_path.name,
    )
    return None


def _open_archive(archive_path: Path) -> zipfile.ZipFile:
    try:
        return zipfile.ZipFile(archive_path)
    except (OSError, zipfile.BadZipFile) as e:
        raise PackageArchiveError(str(e), target=str(archive_path)) from e


def extract_manifests(
    archive_path: str | Path, is_built_in: bool
) -> list[CompositeTemplateManifest]:
    """Extract every template manifest from a package archive.

    Templates are returned in archive entry order. An archive without
    templates yields an empty list.

    Args:
        archive_path: Path to a ``.nupkg`` archive
        is_built_in: Whether the package ships with the SDK

    Returns:
        One composite manifest per template found

    Raises:
        PackageArchiveError: If the archive is missing or not a zip file
        ManifestDecodeError: If a template.json or ide.host.json is malformed

    """
    archive_path = Path(archive_path)
    identity = parse_identity(archive_path)

    manifests: list[CompositeTemplateManifest] = []
    with _open_archive(archive_path) as archive:
        package = _PackageArchive(archive, archive_path)

        for info in package.entries:
            location = match_template_manifest(info.filename)
            if location is None:
                continue

            template_manifest = TemplateManifest.from_dict(
                package.read_json(info)
            )
            ide_host_manifest = _read_ide_host_manifest(package, location)
            base64_icon = _read_icon(
                package,
                location,
                ide_host_manifest.icon if ide_host_manifest else None,
            )

            manifests.append(
                CompositeTemplateManifest(
                    package_name=identity.name,
                    package_version=identity.version,
                    base64_icon=base64_icon,
                    is_built_in=is_built_in,
                    template_manifest=template_manifest,
                    ide_host_manifest=ide_host_manifest,
                )
            )

    logger.debug(
        "Found %d template(s) in %s", len(manifests), archive_path.name
    )
    return manifests
