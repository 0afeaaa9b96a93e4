"""
Release splitter.

A release identifies a build as ``package@version``. The package is
optional and the version part is kept verbatim even when it is not a valid
version, since release names are often free-form strings.
"""

import logging
import re
from typing import Optional

from releaseparser.constants import MAX_RELEASE_LENGTH, RESTRICTED_RELEASE_NAMES

from .describe import describe_release, format_release
from .exceptions import InvalidRelease, InvalidReleaseReason, InvalidVersion
from .hashes import is_build_hash
from .version import Version

logger = logging.getLogger(__name__)

# The package may start with a single "@"; it ends at the next "@".
RELEASE_PATTERN = re.compile(r"(@?[^@]+)@(.*)", re.DOTALL)
BAD_CHARACTERS_PATTERN = re.compile(r"[/\r\n]")


class Release:
    """
    A parsed release.

    Instances are immutable and only created through :meth:`parse`.
    """

    __slots__ = ("_raw", "_package", "_version_raw", "_version")

    def __init__(
        self,
        raw: str,
        package: str,
        version_raw: str,
        version: Optional[Version] = None,
    ):
        self._raw = raw
        self._package = package
        self._version_raw = version_raw
        self._version = version

    @classmethod
    def parse(cls, release: str) -> "Release":
        """
        Parse a release string.

        Args:
            release: Release string, surrounding whitespace is ignored

        Returns:
            Release object

        Raises:
            InvalidRelease: If the release is too long, uses a restricted
                name or contains ``/`` or line breaks
        """
        release = release.strip()
        if len(release.encode("utf-8")) > MAX_RELEASE_LENGTH:
            raise InvalidRelease(release, InvalidReleaseReason.TOO_LONG)
        elif release in RESTRICTED_RELEASE_NAMES:
            raise InvalidRelease(release, InvalidReleaseReason.RESTRICTED_NAME)
        elif BAD_CHARACTERS_PATTERN.search(release):
            raise InvalidRelease(release, InvalidReleaseReason.BAD_CHARACTERS)

        match = RELEASE_PATTERN.fullmatch(release)
        if match is not None:
            package, version_raw = match.group(1), match.group(2)
        else:
            package, version_raw = "", release

        return cls(
            raw=release,
            package=package,
            version_raw=version_raw,
            version=_parse_version_part(version_raw),
        )

    @property
    def raw(self) -> str:
        """The trimmed input. Prefer ``str()`` which normalizes."""
        return self._raw

    @property
    def package(self) -> Optional[str]:
        """Package name, if any."""
        return self._package or None

    @property
    def version_raw(self) -> str:
        """
        The version part of the release as given.

        This is set even if it is not a valid version (for instance
        because it is a hash).
        """
        return self._version_raw

    @property
    def version(self) -> Optional[Version]:
        """The parsed version, if the version part is a valid version."""
        return self._version

    @property
    def build_hash(self) -> Optional[str]:
        """
        Build hash of the release, if any.

        Taken from the build metadata of the version, or from the version
        part itself when the whole version part is a hash.
        """
        if self._version is not None:
            build_code = self._version.build_code
            if build_code is not None and is_build_hash(build_code):
                return build_code
        if is_build_hash(self._version_raw):
            return self._version_raw
        return None

    def describe(self) -> str:
        """
        Return a short description.

        The package is dropped and build hashes are abbreviated.
        """
        return describe_release(self)

    def _key(self):
        return (self._raw, self._package, self._version_raw, self._version)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Release):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        return format_release(self)

    def __repr__(self) -> str:
        return f"Release('{self}')"


def _parse_version_part(version_raw: str) -> Optional[Version]:
    if is_build_hash(version_raw):
        logger.debug(f"Version part '{version_raw}' is a build hash")
        return None
    try:
        return Version.parse(version_raw)
    except InvalidVersion:
        logger.debug(f"Version part '{version_raw}' is not a valid version")
        return None


def parse_release(release: str) -> Release:
    """
    Parse a release string into a Release object.

    Args:
        release: Release string to parse

    Returns:
        Release object

    Raises:
        InvalidRelease: If release string is invalid
    """
    return Release.parse(release)
