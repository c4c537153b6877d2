"""Parallel hash engine: fans a wordlist out over a worker pool."""

import logging
import time
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from typing import Dict, List, Optional, Sequence

from shared.config.config import config
from shared.domain.models import HashConfig, HashEngineStats
from shared.hashing.nsec3 import build_fqdn, nsec3_hash
from shared.interfaces.progress_reporter import ProgressReporter
from shared.implementations.reporters import NullProgressReporter
from engine.infrastructure.lookup_table import LookupTable

logger = logging.getLogger(__name__)


class Nsec3HashEngine:
    """
    Computes the reverse lookup table (hash -> fqdn) for a candidate list.

    The worker count is fixed when the engine is constructed and used for
    every run. Small wordlists (below the parallel threshold) or a single
    worker use a sequential loop; otherwise the candidate list is split into
    chunks and submitted to a ThreadPoolExecutor. Each worker inserts into a
    LookupTable shared by the whole run, one candidate at a time.

    The executor context is a full barrier: the table is only snapshotted
    after every chunk has finished.
    """

    def __init__(
        self,
        worker_threads: Optional[int] = None,
        reporter: Optional[ProgressReporter] = None,
        parallel_threshold: Optional[int] = None,
        chunk_min_size: Optional[int] = None,
    ) -> None:
        if worker_threads is None:
            worker_threads = config.WORKER_THREADS
        if worker_threads < 1:
            raise ValueError(f"worker_threads ({worker_threads}) must be >= 1")

        self.worker_threads = worker_threads
        self.reporter = reporter or NullProgressReporter()
        self.parallel_threshold = (
            config.PARALLEL_THRESHOLD if parallel_threshold is None else parallel_threshold
        )
        self.chunk_min_size = max(
            1, config.CHUNK_MIN_SIZE if chunk_min_size is None else chunk_min_size
        )
        self.last_stats: Optional[HashEngineStats] = None

    def run(self, candidates: Sequence[str], hash_config: HashConfig) -> Dict[str, str]:
        """
        Hash every candidate under hash_config.domain.

        Duplicate labels are simply recomputed. If two different names hash
        to the same value, the last insertion wins.

        Returns:
            Dict mapping 32-char hash -> fqdn. Statistics for the run are
            left in `self.last_stats`.
        """
        table = LookupTable()
        salt = hash_config.salt_bytes
        use_parallel = (
            self.worker_threads > 1 and
            len(candidates) >= self.parallel_threshold
        )

        self.reporter.start(len(candidates), f"Hashing {hash_config.domain}")
        start = time.perf_counter()

        if use_parallel:
            logger.debug(
                f"Using parallel mode (threads={self.worker_threads}, "
                f"candidates={len(candidates)})"
            )
            self._run_parallel(candidates, hash_config.domain, salt, hash_config.iterations, table)
        else:
            logger.debug(
                f"Using sequential mode (threads={self.worker_threads}, "
                f"candidates={len(candidates)})"
            )
            self._hash_chunk(candidates, hash_config.domain, salt, hash_config.iterations, table)

        elapsed = time.perf_counter() - start
        self.reporter.finish()

        hashes = table.snapshot()
        self.last_stats = HashEngineStats(
            candidates_processed=len(candidates),
            unique_hashes=len(hashes),
            collisions=table.collisions,
            elapsed_seconds=elapsed,
        )
        if table.collisions:
            logger.warning(
                f"{table.collisions} hash collision(s) for {hash_config.domain}; "
                f"later names replaced earlier ones"
            )
        logger.info(
            f"Computed {len(candidates)} hashes for {hash_config.domain} "
            f"in {elapsed:.2f}s ({self.last_stats.hashes_per_second:.0f} hashes/sec)"
        )
        return hashes

    def _hash_chunk(
        self,
        candidates: Sequence[str],
        domain: str,
        salt: bytes,
        iterations: int,
        table: LookupTable,
    ) -> int:
        """
        Hash a slice of candidates and insert each result into the shared table.

        Runs on a worker thread in parallel mode, and on the caller's thread
        in sequential mode.

        Returns:
            Number of candidates processed.
        """
        for label in candidates:
            fqdn = build_fqdn(label, domain)
            table.insert(nsec3_hash(fqdn, salt, iterations), fqdn)
            self.reporter.advance()
        return len(candidates)

    def _chunk_size(self, candidate_count: int) -> int:
        """At least chunk_min_size candidates per chunk, about one chunk per worker."""
        return max(self.chunk_min_size, candidate_count // self.worker_threads)

    def _submit_chunks(
        self,
        executor: ThreadPoolExecutor,
        candidates: Sequence[str],
        domain: str,
        salt: bytes,
        iterations: int,
        table: LookupTable,
    ) -> List[Future]:
        """
        Split candidates into contiguous chunks and submit them to the pool.

        Returns:
            List of futures, one per chunk.
        """
        chunk_size = self._chunk_size(len(candidates))
        futures = [
            executor.submit(
                self._hash_chunk,
                candidates[offset:offset + chunk_size],
                domain,
                salt,
                iterations,
                table,
            )
            for offset in range(0, len(candidates), chunk_size)
        ]
        logger.debug(f"Submitted {len(futures)} chunks of up to {chunk_size} candidates")
        return futures

    def _run_parallel(
        self,
        candidates: Sequence[str],
        domain: str,
        salt: bytes,
        iterations: int,
        table: LookupTable,
    ) -> None:
        """Hash all candidates on the worker pool; returns once every chunk is done."""
        with ThreadPoolExecutor(max_workers=self.worker_threads) as executor:
            futures = self._submit_chunks(executor, candidates, domain, salt, iterations, table)
            processed = 0
            for future in as_completed(futures):
                try:
                    processed += future.result()
                except Exception as e:
                    logger.error(f"Hashing chunk failed for {domain}: {e}", exc_info=True)
                    for f in futures:
                        f.cancel()
                    raise
        logger.debug(f"All chunks joined ({processed} candidates)")
