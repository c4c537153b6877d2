"""Single-configuration pipeline: hash a wordlist, then persist the table."""

import logging
import time
from typing import Sequence

from shared.domain.models import CacheArtifact, ConfigRunResult, HashConfig
from shared.domain.status import RunStatus
from engine.services.hash_engine import Nsec3HashEngine
from generator.infrastructure.cache_store import CacheStore

logger = logging.getLogger(__name__)


def generate_for_config(
    hash_config: HashConfig,
    candidates: Sequence[str],
    store: CacheStore,
    engine: Nsec3HashEngine,
) -> ConfigRunResult:
    """
    Run the engine for one configuration and write its cache artifact.

    The artifact is only built after the engine has joined all workers,
    so the table is no longer shared when it is serialized.

    Returns:
        ConfigRunResult with status SUCCEEDED, output path and file size.

    Raises:
        OSError: If the cache file cannot be written. The caller decides
        whether that is fatal.
    """
    start = time.perf_counter()
    logger.info(
        f"Generating {hash_config.domain} "
        f"(salt={hash_config.salt_display}, iterations={hash_config.iterations}, "
        f"candidates={len(candidates)})"
    )

    hashes = engine.run(candidates, hash_config)
    artifact = CacheArtifact.from_run(hash_config, len(candidates), hashes)
    output_path, file_size = store.save(artifact)

    return ConfigRunResult(
        domain=hash_config.domain,
        salt=hash_config.salt,
        iterations=hash_config.iterations,
        status=RunStatus.SUCCEEDED,
        output_path=str(output_path),
        file_size=file_size,
        hash_count=len(hashes),
        elapsed_seconds=time.perf_counter() - start,
    )
