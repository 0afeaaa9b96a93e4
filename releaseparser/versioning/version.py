"""
Version grammar parser.

Versions follow a relaxed semantic versioning grammar: the minor and patch
components may be left out, a pre-release tag may start with a lowercase
letter instead of ``-`` and build metadata may be a commit hash.
"""

import logging
import re
from typing import Optional, Tuple

from releaseparser.constants import MAX_COMPONENT_VALUE

from .describe import format_version
from .exceptions import InvalidVersion

logger = logging.getLogger(__name__)

VERSION_PATTERN = re.compile(
    r"""
    (?P<major>0|[1-9][0-9]*)
    (?:\.(?P<minor>0|[1-9][0-9]*))?
    (?:\.(?P<patch>0|[1-9][0-9]*))?
    (?:
        (?P<prerelease>
            (?:-|[a-z])
            (?:0|[1-9][0-9]*|[0-9]*[a-zA-Z-][0-9a-zA-Z-]*)?
            (?:\.(?:0|[1-9][0-9]*|[0-9]*[a-zA-Z-][0-9a-zA-Z-]*))*
        )
    )?
    (?:\+(?P<build_code>[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?
    """,
    re.VERBOSE,
)


def _parse_component(text: Optional[str]) -> int:
    """Parse a numeric component, falling back to 0 outside the u64 range."""
    if text is None:
        return 0
    value = int(text)
    if value > MAX_COMPONENT_VALUE:
        logger.debug(f"Version component {text} exceeds 64 bits, using 0")
        return 0
    return value


class Version:
    """
    A parsed version.

    Instances are immutable and only created through :meth:`parse`.
    ``str(version)`` returns the normalized form, :attr:`raw` the text
    that was parsed.
    """

    __slots__ = (
        "_raw",
        "_major",
        "_minor",
        "_patch",
        "_pre",
        "_build_code",
        "_components",
    )

    def __init__(
        self,
        raw: str,
        major: int,
        minor: int,
        patch: int,
        pre: str = "",
        build_code: str = "",
        components: int = 3,
    ):
        self._raw = raw
        self._major = major
        self._minor = minor
        self._patch = patch
        self._pre = pre
        self._build_code = build_code
        self._components = components

    @classmethod
    def parse(cls, version_string: str) -> "Version":
        """
        Parse a version string.

        Args:
            version_string: Text to parse, matched as a whole

        Returns:
            Version object

        Raises:
            InvalidVersion: If the string does not match the version grammar
        """
        match = VERSION_PATTERN.fullmatch(version_string)
        if match is None:
            raise InvalidVersion(version_string)

        minor = match.group("minor")
        patch = match.group("patch")
        components = 1 + (minor is not None) + (patch is not None)

        pre = match.group("prerelease") or ""
        if pre.startswith("-"):
            pre = pre[1:]

        return cls(
            raw=version_string,
            major=_parse_component(match.group("major")),
            minor=_parse_component(minor),
            patch=_parse_component(patch),
            pre=pre,
            build_code=match.group("build_code") or "",
            components=components,
        )

    @property
    def raw(self) -> str:
        """The exact text that was parsed. Prefer ``str()`` which normalizes."""
        return self._raw

    @property
    def major(self) -> int:
        """Major version component."""
        return self._major

    @property
    def minor(self) -> int:
        """Minor version component (0 if not specified)."""
        return self._minor

    @property
    def patch(self) -> int:
        """Patch version component (0 if not specified)."""
        return self._patch

    @property
    def pre(self) -> Optional[str]:
        """Pre-release identifier, if any."""
        return self._pre or None

    @property
    def build_code(self) -> Optional[str]:
        """Build metadata, if any."""
        return self._build_code or None

    @property
    def components(self) -> int:
        """Number of numeric components present in the original string."""
        return self._components

    def triple(self) -> Tuple[int, int, int]:
        """Return (major, minor, patch)."""
        return (self._major, self._minor, self._patch)

    def quad(self) -> Tuple[int, int, int, Optional[str]]:
        """Return (major, minor, patch, pre)."""
        return (self._major, self._minor, self._patch, self.pre)

    def _key(self):
        return (
            self._raw,
            self._major,
            self._minor,
            self._patch,
            self._pre,
            self._build_code,
            self._components,
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        return format_version(self)

    def __repr__(self) -> str:
        return f"Version('{self}')"


def parse_version(version_string: str) -> Version:
    """
    Parse a version string into a Version object.

    Args:
        version_string: Version string to parse

    Returns:
        Version object

    Raises:
        InvalidVersion: If version string is invalid
    """
    return Version.parse(version_string)
