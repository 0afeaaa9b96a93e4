"""
Exception classes for the versioning module.
"""

from enum import Enum


class ReleaseParserError(ValueError):
    """Base exception for all release and version parsing errors."""

    pass


class InvalidVersion(ReleaseParserError):
    """Raised when a string does not match the version grammar."""

    def __init__(self, version_string: str):
        self.version_string = version_string
        super().__init__(f"invalid version: '{version_string}'")


class InvalidReleaseReason(Enum):
    """Why a release string was rejected."""

    TOO_LONG = "release name too long"
    RESTRICTED_NAME = "restricted release name"
    BAD_CHARACTERS = "bad characters in release name"

    def __str__(self) -> str:
        return self.value


class InvalidRelease(ReleaseParserError):
    """Raised when a release string fails validation."""

    def __init__(self, release: str, reason: InvalidReleaseReason):
        self.release = release
        self.reason = reason
        super().__init__(f"invalid release: {reason}")
