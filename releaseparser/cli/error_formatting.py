"""Error formatting for CLI output."""

from releaseparser.constants import MAX_RELEASE_LENGTH
from releaseparser.versioning import (
    InvalidRelease,
    InvalidReleaseReason,
    InvalidVersion,
)
from releaseparser.versioning.release import BAD_CHARACTERS_PATTERN


def pretty_print_release_error(error: InvalidRelease) -> str:
    """Format an InvalidRelease to present useful information to the user.

    Args:
        error: The InvalidRelease to format

    Returns:
        A formatted error message with the offending input and, for bad
        characters, a marker under the first one

    Example output:
        invalid release: bad characters in release name
            --> a/b@1.0.0
                 ^
    """
    message_parts = [str(error)]
    shown = error.release.encode("unicode_escape").decode("ascii")

    if error.reason is InvalidReleaseReason.BAD_CHARACTERS:
        match = BAD_CHARACTERS_PATTERN.search(error.release)
        message_parts.append(f"    --> {shown}")
        if match is not None:
            # Escaped line breaks take two columns
            offset = len(
                error.release[: match.start()].encode("unicode_escape").decode("ascii")
            )
            message_parts.append("        " + " " * offset + "^")
    elif error.reason is InvalidReleaseReason.TOO_LONG:
        length = len(error.release.encode("utf-8"))
        message_parts.append(f"    length {length} exceeds {MAX_RELEASE_LENGTH}")
    else:
        message_parts.append(f"    --> {shown}")

    return "\n".join(message_parts)


def pretty_print_version_error(error: InvalidVersion) -> str:
    """Format an InvalidVersion for the user."""
    return "\n".join(
        [
            str(error),
            "    expected MAJOR[.MINOR[.PATCH]][-PRE][+BUILD], e.g. 1.2.3-rc.1+001",
        ]
    )
