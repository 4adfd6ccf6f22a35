"""Tests for CLI argument parsing."""

import pytest

from template_gallery.cli.parser import CLIParser


@pytest.fixture
def parser() -> CLIParser:
    return CLIParser()


def test_version_flag(parser):
    args = parser.parse_args(["--version"])

    assert args.version is True
    assert args.command is None


def test_packages_defaults(parser):
    args = parser.parse_args(["packages"])

    assert args.command == "packages"
    assert args.installed is False
    assert args.refresh is False
    assert args.verbose is False


def test_packages_flags(parser):
    args = parser.parse_args(["packages", "--installed", "--refresh", "-v"])

    assert args.installed is True
    assert args.refresh is True
    assert args.verbose is True


def test_templates_archive(parser):
    args = parser.parse_args(["templates", "--archive", "Foo.1.0.0.nupkg"])

    assert args.command == "templates"
    assert args.archive == "Foo.1.0.0.nupkg"


def test_install_requires_ids(parser):
    with pytest.raises(SystemExit):
        parser.parse_args(["install"])


@pytest.mark.parametrize("command", ["install", "uninstall"])
def test_install_and_uninstall_accept_many_ids(parser, command):
    args = parser.parse_args([command, "Foo", "Bar"])

    assert args.command == command
    assert args.package_ids == ["Foo", "Bar"]


def test_update_ids_are_optional(parser):
    assert parser.parse_args(["update"]).package_ids == []
    assert parser.parse_args(["update", "Foo"]).package_ids == ["Foo"]
