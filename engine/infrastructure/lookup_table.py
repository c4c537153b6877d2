"""Reverse lookup table shared by hashing workers."""

import threading
import logging
from typing import Dict

from shared.domain.consts import HashDisplay

logger = logging.getLogger(__name__)


class LookupTable:
    """
    Thread-safe mapping of NSEC3 hash -> fully-qualified name.

    Owned by a single engine run. While the run is in progress, all worker
    threads insert through `insert()`, which holds one lock around the whole
    read-modify-write. After the workers have joined, `snapshot()` hands the
    finished mapping to the caller.

    Collision policy is last-write-wins: if two names produce the same hash,
    the later insertion replaces the earlier one and the collision counter
    is incremented.

    Example:
        table = LookupTable()
        table.insert("a" * 32, "www.example.com")
        table.insert("a" * 32, "mail.example.com")  # overwrites
        assert table.snapshot() == {"a" * 32: "mail.example.com"}
        assert table.collisions == 1
    """

    def __init__(self) -> None:
        self._entries: Dict[str, str] = {}
        self._collisions = 0
        self._lock = threading.Lock()

    def insert(self, hash_value: str, fqdn: str) -> bool:
        """
        Store fqdn under hash_value.

        Returns:
            True if an entry for a *different* name was overwritten.
        """
        with self._lock:
            previous = self._entries.get(hash_value)
            self._entries[hash_value] = fqdn
            if previous is not None and previous != fqdn:
                self._collisions += 1
                logger.debug(
                    f"Hash collision on {hash_value[:HashDisplay.PREFIX_LENGTH]}...: "
                    f"{previous} replaced by {fqdn}"
                )
                return True
            return False

    def snapshot(self) -> Dict[str, str]:
        """Copy of the current mapping."""
        with self._lock:
            return dict(self._entries)

    @property
    def collisions(self) -> int:
        with self._lock:
            return self._collisions

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
