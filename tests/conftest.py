"""Pytest configuration and fixtures."""

import pytest
from engine.services.hash_engine import Nsec3HashEngine
from generator.infrastructure.cache_store import CacheStore


@pytest.fixture
def wordlist_file(tmp_path):
    """Small wordlist with blank lines and surrounding whitespace."""
    path = tmp_path / "subdomains.txt"
    path.write_text("www\n\n  mail  \nftp\n   \napi\n", encoding="utf-8")
    return path


@pytest.fixture
def store(tmp_path):
    """Cache store writing into a per-test directory."""
    return CacheStore(tmp_path / "output")


@pytest.fixture
def sequential_engine():
    """Single-threaded engine for deterministic ordering."""
    return Nsec3HashEngine(worker_threads=1)


@pytest.fixture
def parallel_engine():
    """
    Engine that always uses the worker pool.

    A zero threshold and tiny chunks force parallel mode even for the
    small wordlists used in tests.
    """
    return Nsec3HashEngine(worker_threads=4, parallel_threshold=0, chunk_min_size=1)
