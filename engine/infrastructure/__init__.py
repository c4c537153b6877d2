"""Engine infrastructure layer."""

from engine.infrastructure.lookup_table import LookupTable

__all__ = ["LookupTable"]
