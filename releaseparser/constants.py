from enum import Enum


class OutputFormat(str, Enum):
    YAML = "yaml"
    JSON = "json"


DEFAULT_OUTPUT_FORMAT = OutputFormat.YAML

# Release names
MAX_RELEASE_LENGTH = 250
RESTRICTED_RELEASE_NAMES = frozenset({".", "..", "latest"})

# Build hashes: short/full commit ids and common digest sizes
BUILD_HASH_LENGTHS = frozenset({12, 16, 20, 32, 40, 64})
SHORT_HASH_LENGTH = 12

# Numeric version components are unsigned 64-bit values
MAX_COMPONENT_VALUE = 2**64 - 1
