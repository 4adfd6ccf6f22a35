"""Package identity parsing from conventional archive filenames.

Template packages are distributed as ``<name>.<version>.nupkg`` files, so the
name and version of a built-in or installed package can be recovered from the
filename alone without opening the archive.
"""

import re
from dataclasses import dataclass
from pathlib import PurePath

# Name is greedy so dotted package ids keep all their segments; the version
# needs major.minor.patch and may carry a "-" prerelease/trailing suffix.
_PACKAGE_FILE_RE = re.compile(
    r"""
    ^
    (?P<name>.*)
    \.
    (?P<version>\d*\.\d*\.\d*-?.*)
    \.nupkg
    $
    """,
    re.VERBOSE,
)


@dataclass(frozen=True)
class PackageIdentity:
    """Name and version of a template package."""

    name: str = ""
    version: str = ""

    @property
    def is_empty(self) -> bool:
        """Whether the filename did not follow the package convention."""
        return not self.name and not self.version


def parse_identity(file_path: str | PurePath) -> PackageIdentity:
    """Parse package name and version from an archive path.

    Only the final path component is inspected. Filenames that do not follow
    the ``<name>.<major>.<minor>.<patch>[-suffix].nupkg`` convention yield an
    empty identity instead of raising.

    Examples:
        >>> parse_identity("/tmp/Foo.Templates.1.2.3.nupkg")
        PackageIdentity(name='Foo.Templates', version='1.2.3')
        >>> parse_identity("readme.txt")
        PackageIdentity(name='', version='')

    Args:
        file_path: Archive path or bare filename

    Returns:
        Parsed identity, empty when the filename does not match

    """
    file_name = PurePath(file_path).name
    match = _PACKAGE_FILE_RE.match(file_name)
    if not match:
        return PackageIdentity()

    return PackageIdentity(
        name=match.group("name"), version=match.group("version")
    )
