"""
Conversion of parsed versions into ``semver.Version`` objects.

Requires the optional ``semver`` dependency (``pip install releaseparser[semver]``).
"""

import re
from typing import List, Optional, Union

import semver

from releaseparser.constants import MAX_COMPONENT_VALUE

from .version import Version

NUMERIC_IDENTIFIER = re.compile(r"[0-9]+")

Identifier = Union[int, str]


def split_identifiers(text: str) -> List[Identifier]:
    """
    Split dot separated identifiers.

    Segments that are unsigned 64-bit integers become ``int``, all others
    stay alphanumeric ``str`` identifiers.
    """
    identifiers: List[Identifier] = []
    for item in text.split("."):
        if NUMERIC_IDENTIFIER.fullmatch(item) and int(item) <= MAX_COMPONENT_VALUE:
            identifiers.append(int(item))
        else:
            identifiers.append(item)
    return identifiers


def _join_identifiers(text: Optional[str]) -> Optional[str]:
    if text is None:
        return None
    return ".".join(str(identifier) for identifier in split_identifiers(text))


def as_semver(version: Version) -> semver.Version:
    """
    Convert a version into a ``semver.Version``.

    Missing minor and patch components become 0 and numeric identifiers in
    the pre-release and build parts lose their leading zeros.
    """
    return semver.Version(
        major=version.major,
        minor=version.minor,
        patch=version.patch,
        prerelease=_join_identifiers(version.pre),
        build=_join_identifiers(version.build_code),
    )
