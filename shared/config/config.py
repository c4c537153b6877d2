"""Configuration loaded from environment variables."""

import os


def _get_env_int(key: str, default: str) -> int:
    """Get integer environment variable with validation."""
    try:
        return int(os.getenv(key, default))
    except ValueError:
        raise ValueError(f"Invalid integer value for {key}")


def _default_worker_threads() -> str:
    """Available parallelism as a string default (at least 1)."""
    return str(max(1, os.cpu_count() or 1))


class Config:
    """Centralized configuration from environment variables."""

    # Performance: default size of the hashing worker pool
    # CLI --threads overrides this; the value is passed into the engine explicitly
    WORKER_THREADS: int = _get_env_int("NSEC3_WORKER_THREADS", _default_worker_threads())

    # Below this many candidates the engine hashes sequentially
    # (thread start-up cost outweighs the work for tiny wordlists)
    PARALLEL_THRESHOLD: int = _get_env_int("NSEC3_PARALLEL_THRESHOLD", "1000")

    # Minimum number of candidates per chunk submitted to the pool
    # Larger values = fewer futures (less overhead, coarser load balancing)
    CHUNK_MIN_SIZE: int = _get_env_int("NSEC3_CHUNK_MIN_SIZE", "250")

    # Advisory progress reporting interval (candidates)
    PROGRESS_EVERY: int = _get_env_int("NSEC3_PROGRESS_EVERY", "10000")

    # Output
    OUTPUT_DIR: str = os.getenv("NSEC3_OUTPUT_DIR", "output")

    # Logging
    LOG_LEVEL: str = os.getenv("NSEC3_LOG_LEVEL", "INFO").upper()


config = Config()
