"""Pytest configuration and fixtures for template-gallery tests."""

import logging
import os
import tempfile
import zipfile
from collections.abc import Callable
from pathlib import Path
from typing import Any

import orjson
import pytest

# Keep log files out of the user's config directory; must be set before the
# first template_gallery import creates the file handler.
os.environ.setdefault(
    "TEMPLATE_GALLERY_LOG_DIR",
    tempfile.mkdtemp(prefix="template-gallery-test-logs-"),
)

EntryContent = bytes | str | dict[str, Any]
PackageFactory = Callable[..., Path]


@pytest.fixture(autouse=True)
def enable_log_propagation():
    """Enable log propagation for all loggers during tests.

    This allows pytest's caplog fixture to capture logs from all loggers,
    even those created with propagate=False in production code.
    """
    original_propagation = {}
    for name in list(logging.Logger.manager.loggerDict.keys()):
        if name.startswith("template_gallery"):
            logger = logging.getLogger(name)
            original_propagation[name] = logger.propagate
            logger.propagate = True

    yield

    for name, propagate_value in original_propagation.items():
        logger = logging.getLogger(name)
        logger.propagate = propagate_value


def _encode(content: EntryContent) -> bytes:
    if isinstance(content, dict):
        return orjson.dumps(content)
    if isinstance(content, str):
        return content.encode("utf-8")
    return content


@pytest.fixture
def make_package(tmp_path: Path) -> PackageFactory:
    """Build a zip archive from a mapping of entry name to content.

    Dict contents are written as JSON, strings as UTF-8. Entries are
    written in mapping order.
    """

    def _make(
        file_name: str,
        entries: dict[str, EntryContent],
        directory: Path | None = None,
    ) -> Path:
        target_dir = directory or tmp_path
        target_dir.mkdir(parents=True, exist_ok=True)
        archive_path = target_dir / file_name
        with zipfile.ZipFile(archive_path, "w") as archive:
            for name, content in entries.items():
                archive.writestr(name, _encode(content))
        return archive_path

    return _make


@pytest.fixture
def sample_search_page() -> dict[str, Any]:
    """One page of a NuGet search response with two template packages."""
    return {
        "totalHits": 2,
        "data": [
            {
                "id": "Foo.Templates",
                "version": "1.3.0",
                "description": "Foo project templates",
                "authors": ["Foo Team"],
                "iconUrl": "https://example.org/foo.png",
                "totalDownloads": 1200,
                "verified": True,
                "tags": ["templates", "foo"],
            },
            {
                "id": "Bar.Templates",
                "version": "2.0.0",
                "description": "Bar templates",
                "authors": "Bar Inc",
                "totalDownloads": 5,
                "tags": "bar web",
            },
        ],
    }
