"""
Rendering of parsed versions and releases.

All functions work on the public accessors only and never re-parse.
"""

from typing import TYPE_CHECKING

from releaseparser.constants import SHORT_HASH_LENGTH

if TYPE_CHECKING:
    from .release import Release
    from .version import Version


def _format_numeric(version: "Version") -> str:
    components = version.components
    if components == 3:
        return f"{version.major}.{version.minor}.{version.patch}"
    elif components == 2:
        return f"{version.major}.{version.minor}"
    elif components == 1:
        return f"{version.major}"
    raise AssertionError(f"unreachable: version has {components} components")


def _format_short(version: "Version") -> str:
    text = _format_numeric(version)
    if version.pre is not None:
        text += f"-{version.pre}"
    return text


def format_version(version: "Version") -> str:
    """
    Return the canonical form of a version.

    Only the components present in the input are emitted, so ``1.2``
    stays ``1.2`` instead of becoming ``1.2.0``.
    """
    text = _format_short(version)
    if version.build_code is not None:
        text += f"+{version.build_code}"
    return text


def format_release(release: "Release") -> str:
    """
    Return the canonical form of a release.

    An unparseable version portion is emitted exactly as it was given.
    """
    prefix = f"{release.package}@" if release.package is not None else ""
    if release.version is not None:
        return prefix + format_version(release.version)
    return prefix + release.version_raw


def describe_release(release: "Release") -> str:
    """
    Return a short human readable description of a release.

    The package is dropped and build hashes are abbreviated, e.g.
    ``myapp@1.0.0+4d5e6f7a8b9c0d1e2f3a4b5c6d7e8f9a0b1c2d3e`` is described
    as ``1.0.0 (4d5e6f7a8b9c)``.
    """
    build_hash = release.build_hash
    short_hash = build_hash[:SHORT_HASH_LENGTH] if build_hash is not None else None

    version = release.version
    if version is not None:
        text = _format_short(version)
        if short_hash is not None:
            text += f" ({short_hash})"
        elif version.build_code is not None:
            text += f" ({version.build_code})"
        return text
    if short_hash is not None:
        return short_hash
    return format_release(release)
