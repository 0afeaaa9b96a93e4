from .schema import (
    ReleaseModel,
    VersionModel,
    dump_model,
    dump_release,
    dump_version,
    serialize_release,
    serialize_version,
)

__all__ = [
    "VersionModel",
    "ReleaseModel",
    "serialize_version",
    "serialize_release",
    "dump_model",
    "dump_release",
    "dump_version",
]
