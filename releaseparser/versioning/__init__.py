"""
Versioning module for releaseparser.

All parsing, validation and rendering of release identifiers lives here.

LAYERS:
=======

1. **Version grammar** (version.py):
   - Version: immutable parsed version (major, minor, patch, pre-release,
     build metadata and the number of components given)
   - parse_version: full-string match against the relaxed grammar

2. **Build hashes** (hashes.py):
   - is_build_hash: recognizes commit ids and digests by length and charset

3. **Releases** (release.py):
   - Release: immutable ``package@version`` value
   - parse_release: validation and splitting at the first ``@``

4. **Rendering** (describe.py):
   - Canonical and abbreviated string forms

5. **Exception hierarchy** (exceptions.py)

The optional semver conversion (semantic.py) is not imported here so that
the ``semver`` package stays an optional dependency.
"""

from .describe import describe_release, format_release, format_version
from .exceptions import (
    InvalidRelease,
    InvalidReleaseReason,
    InvalidVersion,
    ReleaseParserError,
)
from .hashes import is_build_hash
from .release import Release, parse_release
from .version import Version, parse_version

__all__ = [
    # Values
    "Version",
    "Release",
    # Parsing
    "parse_version",
    "parse_release",
    "is_build_hash",
    # Rendering
    "format_version",
    "format_release",
    "describe_release",
    # Exceptions
    "ReleaseParserError",
    "InvalidVersion",
    "InvalidRelease",
    "InvalidReleaseReason",
]
