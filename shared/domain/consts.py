"""Constants to avoid string typos and magic numbers."""

import re
from enum import Enum


class Nsec3Hash:
    """NSEC3 hash constants."""
    LENGTH = 32  # unpadded base-32 of a 20-byte digest
    MAX_SALT_BYTES = 255

    # Lower-case RFC 4648 base-32 alphabet
    PATTERN = re.compile(r"^[a-z2-7]{32}\Z")


class HashDisplay:
    """Constants for hash display."""
    PREFIX_LENGTH = 8  # Number of characters to show in logs (e.g., "jd4pl3ap...")


class CacheFile:
    """Cache file naming constants."""
    PREFIX = "nsec3_"
    SUFFIX = ".json"
    KEY_SEPARATOR = "_"


class ReporterName(str, Enum):
    """Progress reporter name constants."""
    LOG = "log"
    NONE = "none"


class SizeUnits:
    """Byte size constants for reporting."""
    MEGABYTE = 1_048_576
