"""Reconciliation of remote, built-in and installed template packages.

The remote catalog lists what can be installed. Built-in and installed
packages only arrive as archive paths, so their identities come from the
archive filenames. Reconciliation annotates each catalog record with its
installation status; built-in always takes precedence over installed.
"""

import dataclasses
from collections.abc import Iterable, Sequence
from pathlib import PurePath

from template_gallery.domain.identity import parse_identity
from template_gallery.domain.package import CatalogRecord
from template_gallery.logger import get_logger

logger = get_logger(__name__)


def latest_versions_by_name(
    archive_paths: Iterable[str | PurePath],
) -> dict[str, str]:
    """Map lower-cased package names to their highest version.

    Versions are compared as plain strings, so ``"10.0.0"`` sorts below
    ``"2.0.0"``. Paths that do not follow the package filename convention
    collapse into the empty name and never match a catalog id.

    Args:
        archive_paths: Package archive paths

    Returns:
        Dictionary of lower-cased name to maximum version string

    """
    versions: dict[str, str] = {}
    for path in archive_paths:
        identity = parse_identity(path)
        key = identity.name.lower()
        current = versions.get(key)
        if current is None or identity.version > current:
            versions[key] = identity.version
    return versions


def merge(
    remote_catalog: Sequence[CatalogRecord],
    built_in_paths: Iterable[str | PurePath],
    installed_paths: Iterable[str | PurePath],
) -> list[CatalogRecord]:
    """Annotate catalog records with built-in and installed status.

    Records keep the catalog's order; packages missing from the catalog are
    not added. Input records are never modified.

    Args:
        remote_catalog: Records from the remote catalog
        built_in_paths: Archive paths of SDK-bundled packages
        installed_paths: Archive paths of user-installed packages

    Returns:
        New records with ``is_installed``, ``installed_version`` and
        ``is_built_in`` set

    """
    built_in_versions = latest_versions_by_name(built_in_paths)
    installed_versions = latest_versions_by_name(installed_paths)

    merged: list[CatalogRecord] = []
    for record in remote_catalog:
        key = record.id.lower()
        if key in built_in_versions:
            merged.append(
                dataclasses.replace(
                    record,
                    is_installed=True,
                    installed_version=built_in_versions[key],
                    is_built_in=True,
                )
            )
        elif key in installed_versions:
            merged.append(
                dataclasses.replace(
                    record,
                    is_installed=True,
                    installed_version=installed_versions[key],
                )
            )
        else:
            merged.append(dataclasses.replace(record, is_installed=False))

    logger.debug(
        "Merged %d catalog records with %d built-in and %d installed packages",
        len(merged),
        len(built_in_versions),
        len(installed_versions),
    )
    return merged
