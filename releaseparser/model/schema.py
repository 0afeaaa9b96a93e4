"""Structured serialization of parsed versions and releases."""

from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, ConfigDict

from releaseparser.constants import OutputFormat
from releaseparser.versioning import Release, Version


class VersionModel(BaseModel):
    """Serialized form of a Version"""

    model_config = ConfigDict(frozen=True)

    major: int
    minor: int
    patch: int
    pre: Optional[str] = None
    build_code: Optional[str] = None
    components: int

    @classmethod
    def from_version(cls, version: Version) -> "VersionModel":
        return cls(
            major=version.major,
            minor=version.minor,
            patch=version.patch,
            pre=version.pre,
            build_code=version.build_code,
            components=version.components,
        )


class ReleaseModel(BaseModel):
    """Serialized form of a Release"""

    model_config = ConfigDict(frozen=True)

    package: Optional[str] = None
    version_raw: str
    version_parsed: Optional[VersionModel] = None
    build_hash: Optional[str] = None
    description: str

    @classmethod
    def from_release(cls, release: Release) -> "ReleaseModel":
        version = release.version
        return cls(
            package=release.package,
            version_raw=release.version_raw,
            version_parsed=(
                VersionModel.from_version(version) if version is not None else None
            ),
            build_hash=release.build_hash,
            description=release.describe(),
        )


def serialize_version(version: Version) -> Dict[str, Any]:
    return VersionModel.from_version(version).model_dump()


def serialize_release(release: Release) -> Dict[str, Any]:
    return ReleaseModel.from_release(release).model_dump()


def dump_model(model: BaseModel, fmt: OutputFormat = OutputFormat.YAML) -> str:
    """
    Render a model as JSON or YAML text.

    Args:
        model: Model to render
        fmt: Output format

    Returns:
        The rendered document, keys in field order
    """
    fmt = OutputFormat(fmt)
    if fmt is OutputFormat.JSON:
        return model.model_dump_json(indent=2)
    return yaml.safe_dump(model.model_dump(), sort_keys=False)


def dump_release(release: Release, fmt: OutputFormat = OutputFormat.YAML) -> str:
    return dump_model(ReleaseModel.from_release(release), fmt)


def dump_version(version: Version, fmt: OutputFormat = OutputFormat.YAML) -> str:
    return dump_model(VersionModel.from_version(version), fmt)
