"""Parse and normalize ``package@version`` release identifiers."""

try:
    from importlib.metadata import version

    __version__ = version("releaseparser")

except Exception:
    __version__ = "0.0.0"  # Fallback version for development

from releaseparser.versioning import (
    InvalidRelease,
    InvalidReleaseReason,
    InvalidVersion,
    Release,
    ReleaseParserError,
    Version,
    describe_release,
    format_release,
    format_version,
    is_build_hash,
    parse_release,
    parse_version,
)

__all__ = [
    "__version__",
    "Version",
    "Release",
    "parse_version",
    "parse_release",
    "is_build_hash",
    "format_version",
    "format_release",
    "describe_release",
    "ReleaseParserError",
    "InvalidVersion",
    "InvalidRelease",
    "InvalidReleaseReason",
]
