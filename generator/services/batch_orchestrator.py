"""Batch generation across a fixed list of NSEC3 configurations."""

import logging
import time
from pathlib import Path
from typing import List, Optional, Sequence, Union

from shared.domain.models import BatchConfigEntry, ConfigRunResult
from shared.domain.presets import COMMON_CONFIGS
from shared.domain.status import RunStatus
from engine.services.hash_engine import Nsec3HashEngine
from generator.infrastructure.cache_store import CacheStore
from generator.infrastructure.wordlist import load_wordlist
from generator.services.config_runner import generate_for_config

logger = logging.getLogger(__name__)


class BatchOrchestrator:
    """
    Runs the hash/store pipeline for each configuration in order.

    The wordlist is loaded once and reused for every configuration.
    A failing configuration (typically a cache write error) is logged and
    recorded as FAILED; the remaining configurations still run. Partial
    success is a normal outcome, so run_all() itself only raises when the
    wordlist cannot be loaded.
    """

    def __init__(self, store: CacheStore, engine: Nsec3HashEngine) -> None:
        self.store = store
        self.engine = engine

    def run_all(
        self,
        domain: str,
        wordlist_path: Union[str, Path],
        configs: Optional[Sequence[BatchConfigEntry]] = None,
    ) -> List[ConfigRunResult]:
        """
        Generate one cache file per configuration.

        Returns:
            One ConfigRunResult per configuration, in input order.

        Raises:
            OSError: If the wordlist cannot be read (no hashing happens).
        """
        if configs is None:
            configs = COMMON_CONFIGS

        candidates = load_wordlist(wordlist_path)
        logger.info(
            f"Batch generation for {domain}: {len(configs)} configurations, "
            f"{len(candidates)} candidates"
        )

        results: List[ConfigRunResult] = []
        total = len(configs)
        batch_start = time.perf_counter()

        for index, entry in enumerate(configs, 1):
            logger.info(
                f"[{index}/{total}] {entry.name} "
                f"(salt={entry.salt or 'none'}, iterations={entry.iterations})"
            )
            results.append(self._run_entry(domain, entry, candidates))

        succeeded = sum(1 for r in results if r.succeeded())
        logger.info(
            f"Batch complete: {succeeded}/{total} configurations succeeded "
            f"in {time.perf_counter() - batch_start:.2f}s"
        )
        return results

    def _run_entry(
        self,
        domain: str,
        entry: BatchConfigEntry,
        candidates: Sequence[str],
    ) -> ConfigRunResult:
        """Run one configuration, converting its failure into a FAILED result."""
        start = time.perf_counter()
        try:
            result = generate_for_config(
                entry.to_hash_config(domain), candidates, self.store, self.engine
            )
            result.name = entry.name
            return result
        except Exception as e:
            logger.error(f"Configuration '{entry.name}' failed: {e}")
            return ConfigRunResult(
                domain=domain,
                salt=entry.salt,
                iterations=entry.iterations,
                name=entry.name,
                status=RunStatus.FAILED,
                elapsed_seconds=time.perf_counter() - start,
                error_message=str(e),
            )
