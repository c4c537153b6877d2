"""Generator infrastructure layer."""

from generator.infrastructure.cache_store import CacheStore, cache_key, cache_filename
from generator.infrastructure.wordlist import load_wordlist

__all__ = [
    "CacheStore",
    "cache_key",
    "cache_filename",
    "load_wordlist",
]
