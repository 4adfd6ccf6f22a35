"""Tests for template discovery inside package archives."""

import base64
import codecs
import zipfile
import zlib

import pytest

from template_gallery.core.inspector import (
    extract_manifests,
    icon_data_uri,
    match_template_manifest,
    resolve_entry_path,
)
from template_gallery.exceptions import (
    ManifestDecodeError,
    PackageArchiveError,
)

ICON_BYTES = b"\x89PNG\r\n\x1a\nfake-icon"


class TestMatchTemplateManifest:
    """Tests for archive entry name matching."""

    def test_content_prefixed_entry(self):
        location = match_template_manifest(
            "content/bar/.template.config/template.json"
        )

        assert location is not None
        assert location.template_root == "bar"
        assert location.root_directory == "content/bar"
        assert location.config_directory == "content/bar/.template.config"

    def test_entry_without_content_prefix(self):
        location = match_template_manifest(
            "templates/console/.template.config/template.json"
        )

        assert location is not None
        assert location.template_root == "templates/console"
        assert location.root_directory == "templates/console"

    def test_content_as_only_root_segment(self):
        """A lone content segment is the template root itself."""
        location = match_template_manifest(
            "content/.template.config/template.json"
        )

        assert location is not None
        assert location.template_root == "content"

    @pytest.mark.parametrize(
        "entry_name",
        [
            ".template.config/template.json",
            "content/bar/template.json",
            "content/bar/.template.config/ide.host.json",
            "content/bar/.template.config/template.json/extra",
            "content/bar/.Template.Config/template.json",
            "Foo.nuspec",
        ],
    )
    def test_non_manifest_entries(self, entry_name):
        assert match_template_manifest(entry_name) is None


def test_resolve_entry_path_normalizes_separators():
    """Backslashes and parent references resolve inside the archive."""
    assert (
        resolve_entry_path("content/bar/.template.config", "..\\icon.png")
        == "content/bar/icon.png"
    )
    assert (
        resolve_entry_path("content/bar/.template.config", "./icon.png")
        == "content/bar/.template.config/icon.png"
    )


def test_icon_data_uri_uses_extension_as_subtype():
    uri = icon_data_uri("content/bar/icon.png", ICON_BYTES)

    assert uri == (
        "data:image/png;base64," + base64.b64encode(ICON_BYTES).decode()
    )


class TestExtractManifests:
    """Tests for extract_manifests."""

    def test_single_template_with_icon(self, make_package):
        """Package identity, manifest and icon are combined."""
        archive = make_package(
            "Foo.Templates.1.2.3.nupkg",
            {
                "content/bar/.template.config/template.json": {
                    "identity": "Foo.Bar",
                    "name": "Bar App",
                    "shortName": "bar",
                },
                "content/bar/.template.config/ide.host.json": {
                    "icon": "icon.png"
                },
                "content/bar/icon.png": ICON_BYTES,
            },
        )

        manifests = extract_manifests(archive, is_built_in=False)

        assert len(manifests) == 1
        manifest = manifests[0]
        assert manifest.package_name == "Foo.Templates"
        assert manifest.package_version == "1.2.3"
        assert manifest.is_built_in is False
        assert manifest.template_manifest.identity == "Foo.Bar"
        assert manifest.template_manifest.name == "Bar App"
        assert manifest.template_manifest.short_name == ("bar",)
        assert manifest.ide_host_manifest is not None
        assert manifest.ide_host_manifest.icon == "icon.png"
        assert manifest.base64_icon == icon_data_uri(
            "content/bar/icon.png", ICON_BYTES
        )

    def test_icon_beside_template_config_wins(self, make_package):
        """Icons inside .template.config are preferred."""
        other_bytes = b"other-icon"
        archive = make_package(
            "Foo.Templates.1.2.3.nupkg",
            {
                "content/bar/.template.config/template.json": {"name": "Bar"},
                "content/bar/.template.config/ide.host.json": {
                    "icon": "icon.png"
                },
                "content/bar/.template.config/icon.png": ICON_BYTES,
                "content/bar/icon.png": other_bytes,
            },
        )

        [manifest] = extract_manifests(archive, is_built_in=True)

        assert manifest.is_built_in is True
        assert manifest.base64_icon == icon_data_uri("icon.png", ICON_BYTES)

    def test_missing_icon_is_tolerated(self, make_package):
        archive = make_package(
            "Foo.Templates.1.2.3.nupkg",
            {
                "content/bar/.template.config/template.json": {"name": "Bar"},
                "content/bar/.template.config/ide.host.json": {
                    "icon": "missing.png"
                },
            },
        )

        [manifest] = extract_manifests(archive, is_built_in=False)

        assert manifest.ide_host_manifest is not None
        assert manifest.base64_icon is None

    def test_without_ide_host_manifest(self, make_package):
        archive = make_package(
            "Foo.Templates.1.2.3.nupkg",
            {"content/bar/.template.config/template.json": {"name": "Bar"}},
        )

        [manifest] = extract_manifests(archive, is_built_in=False)

        assert manifest.ide_host_manifest is None
        assert manifest.base64_icon is None

    def test_multiple_templates_in_archive_order(self, make_package):
        archive = make_package(
            "Foo.Templates.1.2.3.nupkg",
            {
                "content/web/.template.config/template.json": {"name": "Web"},
                "content/lib/readme.md": "# lib",
                "content/lib/.template.config/template.json": {"name": "Lib"},
                "content/console/.template.config/template.json": {
                    "name": "Console"
                },
            },
        )

        manifests = extract_manifests(archive, is_built_in=False)

        assert [m.template_manifest.name for m in manifests] == [
            "Web",
            "Lib",
            "Console",
        ]

    def test_each_template_resolves_its_own_icon(self, make_package):
        """Icons are looked up per template root, not shared."""
        svg_bytes = b"<svg xmlns='http://www.w3.org/2000/svg'/>"
        archive = make_package(
            "Foo.Templates.1.2.3.nupkg",
            {
                "content/web/.template.config/template.json": {"name": "Web"},
                "content/web/.template.config/ide.host.json": {
                    "icon": "web.png"
                },
                "content/web/.template.config/web.png": ICON_BYTES,
                "content/lib/.template.config/template.json": {"name": "Lib"},
                "content/lib/.template.config/ide.host.json": {
                    "icon": "lib.svg"
                },
                "content/lib/.template.config/lib.svg": svg_bytes,
            },
        )

        web, lib = extract_manifests(archive, is_built_in=False)

        assert web.base64_icon == icon_data_uri("web.png", ICON_BYTES)
        assert lib.base64_icon == icon_data_uri("lib.svg", svg_bytes)
        assert web.base64_icon != lib.base64_icon
        assert web.ide_host_manifest.icon == "web.png"
        assert lib.ide_host_manifest.icon == "lib.svg"
        for manifest in (web, lib):
            assert manifest.package_name == "Foo.Templates"
            assert manifest.package_version == "1.2.3"

    def test_archive_without_templates(self, make_package):
        archive = make_package(
            "Foo.Templates.1.2.3.nupkg",
            {"Foo.Templates.nuspec": "<package />", "content/readme.md": ""},
        )

        assert extract_manifests(archive, is_built_in=False) == []

    def test_non_conforming_filename_gives_empty_identity(self, make_package):
        archive = make_package(
            "templates.zip",
            {"content/bar/.template.config/template.json": {"name": "Bar"}},
        )

        [manifest] = extract_manifests(archive, is_built_in=False)

        assert manifest.package_name == ""
        assert manifest.package_version == ""

    def test_utf8_bom_is_accepted(self, make_package):
        archive = make_package(
            "Foo.Templates.1.2.3.nupkg",
            {
                "content/bar/.template.config/template.json": (
                    codecs.BOM_UTF8 + b'{"name": "Bar"}'
                ),
            },
        )

        [manifest] = extract_manifests(archive, is_built_in=False)

        assert manifest.template_manifest.name == "Bar"

    def test_comments_and_trailing_commas_are_accepted(self, make_package):
        archive = make_package(
            "Foo.Templates.1.2.3.nupkg",
            {
                "content/bar/.template.config/template.json": (
                    "{\n"
                    "  // shown in the new project dialog\n"
                    '  "name": "Bar",\n'
                    '  /* aliases */ "shortName": ["bar",],\n'
                    "}\n"
                ),
                "content/bar/.template.config/ide.host.json": (
                    '{\n  "icon": "icon.png", // 32x32\n}\n'
                ),
                "content/bar/.template.config/icon.png": ICON_BYTES,
            },
        )

        [manifest] = extract_manifests(archive, is_built_in=False)

        assert manifest.template_manifest.name == "Bar"
        assert manifest.template_manifest.short_name == ("bar",)
        assert manifest.base64_icon == icon_data_uri("icon.png", ICON_BYTES)

    def test_property_names_are_case_insensitive(self, make_package):
        archive = make_package(
            "Foo.Templates.1.2.3.nupkg",
            {
                "content/bar/.template.config/template.json": {
                    "Identity": "Foo.Bar",
                    "Name": "Bar",
                    "ShortName": "bar",
                },
                "content/bar/.template.config/ide.host.json": {
                    "Icon": "icon.png"
                },
                "content/bar/.template.config/icon.png": ICON_BYTES,
            },
        )

        [manifest] = extract_manifests(archive, is_built_in=False)

        assert manifest.template_manifest.identity == "Foo.Bar"
        assert manifest.template_manifest.name == "Bar"
        assert manifest.template_manifest.short_name == ("bar",)
        assert manifest.ide_host_manifest.icon == "icon.png"
        assert manifest.base64_icon == icon_data_uri("icon.png", ICON_BYTES)

    def test_malformed_template_json_raises(self, make_package):
        archive = make_package(
            "Foo.Templates.1.2.3.nupkg",
            {"content/bar/.template.config/template.json": "{not json"},
        )

        with pytest.raises(ManifestDecodeError) as exc_info:
            extract_manifests(archive, is_built_in=False)

        assert exc_info.value.target == str(archive)

    def test_non_object_template_json_raises(self, make_package):
        archive = make_package(
            "Foo.Templates.1.2.3.nupkg",
            {"content/bar/.template.config/template.json": "[1, 2]"},
        )

        with pytest.raises(ManifestDecodeError):
            extract_manifests(archive, is_built_in=False)

    def test_malformed_ide_host_json_raises(self, make_package):
        archive = make_package(
            "Foo.Templates.1.2.3.nupkg",
            {
                "content/bar/.template.config/template.json": {"name": "Bar"},
                "content/bar/.template.config/ide.host.json": "{",
            },
        )

        with pytest.raises(ManifestDecodeError):
            extract_manifests(archive, is_built_in=False)

    def test_missing_archive_raises(self, tmp_path):
        with pytest.raises(PackageArchiveError):
            extract_manifests(
                tmp_path / "Missing.1.0.0.nupkg", is_built_in=False
            )

    def test_non_zip_archive_raises(self, tmp_path):
        archive = tmp_path / "Broken.1.0.0.nupkg"
        archive.write_bytes(b"definitely not a zip file")

        with pytest.raises(PackageArchiveError) as exc_info:
            extract_manifests(archive, is_built_in=False)

        assert "Broken.1.0.0.nupkg" in str(exc_info.value)

    @pytest.mark.parametrize(
        "error",
        [
            zlib.error("invalid stored block lengths"),
            RuntimeError("File is encrypted, password required"),
            NotImplementedError("That compression method is not supported"),
            EOFError(),
        ],
    )
    def test_unreadable_entry_raises_archive_error(
        self, make_package, mocker, error
    ):
        archive = make_package(
            "Foo.Templates.1.2.3.nupkg",
            {"content/bar/.template.config/template.json": {"name": "Bar"}},
        )
        mocker.patch.object(zipfile.ZipFile, "open", side_effect=error)

        with pytest.raises(PackageArchiveError) as exc_info:
            extract_manifests(archive, is_built_in=False)

        assert exc_info.value.target == str(archive)
        assert "template.json" in str(exc_info.value)
