"""Tests for the cache key and CacheStore."""

import hashlib
import json
import os
import stat
import pytest
from unittest.mock import patch
from generator.infrastructure.cache_store import CacheStore, cache_filename, cache_key
from shared.domain.models import CacheArtifact
from shared.domain.presets import COMMON_CONFIGS


def _artifact(domain="example.com", salt="", iterations=0, hashes=None):
    hashes = hashes if hashes is not None else {"a" * 32: f"www.{domain}"}
    return CacheArtifact(
        domain=domain,
        salt=salt,
        iterations=iterations,
        wordlist_size=len(hashes),
        hashes=hashes,
    )


class TestCacheKey:
    """Tests for cache key derivation."""

    def test_md5_of_salt_and_iterations(self):
        """Test that the key is the MD5 hex of "<salt>_<iterations>"."""
        assert cache_key("DEADBEEF", 5) == hashlib.md5(b"DEADBEEF_5").hexdigest()
        assert cache_key("", 0) == hashlib.md5(b"_0").hexdigest()

    def test_filename_format(self):
        """Test that file names are nsec3_<md5>.json."""
        name = cache_filename("CAFEBABE", 10)
        assert name == f"nsec3_{hashlib.md5(b'CAFEBABE_10').hexdigest()}.json"

    def test_deterministic(self):
        """Test that the same pair always gives the same key."""
        assert cache_key("AABBCCDD", 3) == cache_key("AABBCCDD", 3)

    def test_salt_text_not_bytes(self):
        """Test that differently written but equal salts give different keys."""
        assert cache_key("ab", 1) != cache_key("AB", 1)

    def test_presets_have_distinct_filenames(self):
        """Test that all common presets map to different files."""
        names = {cache_filename(c.salt, c.iterations) for c in COMMON_CONFIGS}
        assert len(names) == len(COMMON_CONFIGS) == 8

    def test_distinct_pairs(self):
        """Test that iterations alone change the key."""
        keys = {cache_key("FFFFFFFF", i) for i in range(100)}
        assert len(keys) == 100


class TestCacheStore:
    """Tests for CacheStore save/load."""

    def test_save_creates_directory_and_file(self, tmp_path):
        """Test that save creates the output directory."""
        store = CacheStore(tmp_path / "nested" / "output")

        path, size = store.save(_artifact(salt="DEADBEEF", iterations=5))

        assert path == tmp_path / "nested" / "output" / cache_filename("DEADBEEF", 5)
        assert path.exists()
        assert size == path.stat().st_size
        assert size > 0

    def test_saved_json_layout(self, store):
        """Test the JSON fields written to disk."""
        path, _ = store.save(_artifact(salt="00", iterations=0))

        with open(path, encoding="utf-8") as f:
            data = json.load(f)

        assert data == {
            "domain": "example.com",
            "salt": "00",
            "iterations": 0,
            "wordlist_size": 1,
            "hashes": {"a" * 32: "www.example.com"},
        }

    def test_json_is_pretty_printed(self, store):
        """Test that output is human-diffable (indented, multi-line)."""
        path, _ = store.save(_artifact())
        text = path.read_text(encoding="utf-8")
        assert text.startswith("{\n  ")

    def test_load_reads_back_artifact(self, store):
        """Test that load returns an equal artifact."""
        artifact = _artifact(salt="FEDCBA98", iterations=10)
        path, _ = store.save(artifact)

        assert CacheStore.load(path) == artifact

    def test_same_config_different_domain_overwrites(self, store):
        """Test that the domain is not part of the file identity."""
        first, _ = store.save(_artifact(domain="example.com", salt="AB", iterations=1))
        second, _ = store.save(_artifact(domain="example.org", salt="AB", iterations=1))

        assert first == second
        assert CacheStore.load(second).domain == "example.org"
        assert len(list(store.directory.iterdir())) == 1

    def test_write_failure_propagates_and_cleans_up(self, store):
        """Test that an I/O error is raised and no temp file is left behind."""
        with patch("generator.infrastructure.cache_store.os.replace", side_effect=OSError("disk full")):
            with pytest.raises(OSError, match="disk full"):
                store.save(_artifact())

        assert list(store.directory.iterdir()) == []

    def test_directory_is_a_file(self, tmp_path):
        """Test that an unusable output path raises OSError."""
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        store = CacheStore(blocker)

        with pytest.raises(OSError):
            store.save(_artifact())

    def test_load_missing_file(self, tmp_path):
        """Test that loading a missing file raises OSError."""
        with pytest.raises(OSError):
            CacheStore.load(tmp_path / "missing.json")

    def test_path_for(self, store):
        """Test that path_for uses the cache file name."""
        assert store.path_for("", 0).name == cache_filename("", 0)
        assert os.path.dirname(store.path_for("", 0)) == str(store.directory)

    @pytest.mark.parametrize("umask, expected_mode", [(0o022, 0o644), (0o077, 0o600)])
    def test_file_mode_follows_umask(self, store, umask, expected_mode):
        """Test that saved files get the usual 0666 & ~umask permissions."""
        previous = os.umask(umask)
        try:
            path, _ = store.save(_artifact())
        finally:
            os.umask(previous)

        assert stat.S_IMODE(path.stat().st_mode) == expected_mode
