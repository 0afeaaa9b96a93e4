"""Detection of source-control and content hashes used as build identifiers."""

import re

from releaseparser.constants import BUILD_HASH_LENGTHS

HEX_PATTERN = re.compile(r"[a-fA-F0-9]+")


def is_build_hash(value: str) -> bool:
    """
    Check whether a string looks like a build hash.

    Only the lengths of common short/full commit ids and digests are
    accepted, so a 7 character abbreviated commit is not a build hash.

    Args:
        value: Candidate string

    Returns:
        True if the string has a known hash length and is all hex digits
    """
    if len(value) not in BUILD_HASH_LENGTHS:
        return False
    return HEX_PATTERN.fullmatch(value) is not None
