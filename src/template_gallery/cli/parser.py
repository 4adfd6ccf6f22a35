"""CLI argument parser for template-gallery."""

import argparse
from argparse import Namespace
from collections.abc import Sequence


class CLIParser:
    """Command-line argument parser for template-gallery."""

    def parse_args(self, argv: Sequence[str] | None = None) -> Namespace:
        """Parse command-line arguments.

        Args:
            argv: Arguments to parse (defaults to sys.argv[1:])

        Returns:
            Parsed arguments namespace.

        """
        parser = self.create_parser()
        return parser.parse_args(argv)

    def create_parser(self) -> argparse.ArgumentParser:
        """Build the main parser with global options and subcommands."""
        parser = argparse.ArgumentParser(
            prog="template-gallery",
            description="Browse and manage dotnet new template packages",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  # Browse the template catalog with installation status
  %(prog)s packages
  %(prog)s packages --installed

  # Show templates inside installed and built-in packages
  %(prog)s templates
  %(prog)s templates --archive ./Foo.Templates.1.2.3.nupkg

  # Manage template packages
  %(prog)s install Foo.Templates
  %(prog)s uninstall Foo.Templates
  %(prog)s update
            """,
        )
        # Long form only, -v is kept free for subcommand verbosity flags
        parser.add_argument(
            "--version",
            action="store_true",
            help="Show template-gallery version and exit",
        )
        self._add_subcommands(parser)
        return parser

    def _add_subcommands(self, parser: argparse.ArgumentParser) -> None:
        subparsers = parser.add_subparsers(
            dest="command", help="Available commands"
        )

        self._add_packages_command(subparsers)
        self._add_templates_command(subparsers)
        self._add_install_commands(subparsers)

    @staticmethod
    def _add_verbose(parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            "-v",
            "--verbose",
            action="store_true",
            help="Show debug output on the console",
        )

    def _add_packages_command(self, subparsers) -> None:
        packages_parser = subparsers.add_parser(
            "packages",
            help="List catalog template packages with installation status",
        )
        packages_parser.add_argument(
            "--installed",
            action="store_true",
            help="Only show built-in and installed packages",
        )
        packages_parser.add_argument(
            "--refresh",
            action="store_true",
            help="Fetch the catalog again instead of using the cached copy",
        )
        self._add_verbose(packages_parser)

    def _add_templates_command(self, subparsers) -> None:
        templates_parser = subparsers.add_parser(
            "templates",
            help="List templates inside local template packages",
        )
        templates_parser.add_argument(
            "--archive",
            metavar="PATH",
            help="Inspect a single .nupkg archive instead",
        )
        self._add_verbose(templates_parser)

    def _add_install_commands(self, subparsers) -> None:
        install_parser = subparsers.add_parser(
            "install", help="Install template packages by id"
        )
        install_parser.add_argument(
            "package_ids", nargs="+", metavar="ID", help="Package id"
        )
        self._add_verbose(install_parser)

        uninstall_parser = subparsers.add_parser(
            "uninstall", help="Uninstall template packages by id"
        )
        uninstall_parser.add_argument(
            "package_ids", nargs="+", metavar="ID", help="Package id"
        )
        self._add_verbose(uninstall_parser)

        update_parser = subparsers.add_parser(
            "update",
            help="Update template packages (all outdated ones by default)",
        )
        update_parser.add_argument(
            "package_ids", nargs="*", metavar="ID", help="Package id"
        )
        self._add_verbose(update_parser)
