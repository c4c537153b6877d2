"""Integration tests for batch generation across common configurations."""

import json
import pytest
from unittest.mock import patch
from generator.infrastructure.cache_store import CacheStore, cache_filename
from generator.services.batch_orchestrator import BatchOrchestrator
from generator.services.config_runner import generate_for_config
from shared.domain.models import BatchConfigEntry, HashConfig
from shared.domain.presets import COMMON_CONFIGS
from shared.domain.status import RunStatus
from shared.hashing.nsec3 import nsec3_hash


class TestGenerateForConfig:
    """Tests for the single-configuration pipeline."""

    def test_writes_artifact(self, store, sequential_engine):
        """Test that one run writes a complete artifact and reports it."""
        hash_config = HashConfig(domain="example.com", salt="", iterations=0)

        result = generate_for_config(hash_config, ["www", "mail"], store, sequential_engine)

        assert result.status == RunStatus.SUCCEEDED
        assert result.hash_count == 2
        assert result.output_path == str(store.path_for("", 0))
        artifact = CacheStore.load(result.output_path)
        assert artifact.wordlist_size == 2
        assert artifact.hashes == {
            nsec3_hash("www.example.com", b"", 0): "www.example.com",
            nsec3_hash("mail.example.com", b"", 0): "mail.example.com",
        }

    def test_wordlist_size_counts_duplicates(self, store, sequential_engine):
        """Test that wordlist_size is the number of loaded lines, not unique hashes."""
        hash_config = HashConfig(domain="example.com", salt="00", iterations=1)

        result = generate_for_config(hash_config, ["www", "www"], store, sequential_engine)

        artifact = CacheStore.load(result.output_path)
        assert artifact.wordlist_size == 2
        assert len(artifact.hashes) == 1

    def test_write_error_raises(self, store, sequential_engine):
        """Test that a cache write error is raised to the caller."""
        hash_config = HashConfig(domain="example.com", salt="", iterations=0)
        with patch.object(store, "save", side_effect=PermissionError("read-only")):
            with pytest.raises(OSError):
                generate_for_config(hash_config, ["www"], store, sequential_engine)


class TestBatchOrchestrator:
    """Tests for BatchOrchestrator.run_all."""

    def test_generates_one_file_per_preset(self, store, parallel_engine, wordlist_file):
        """Test that every common configuration produces its own cache file."""
        orchestrator = BatchOrchestrator(store, parallel_engine)

        results = orchestrator.run_all("example.com", wordlist_file)

        assert len(results) == len(COMMON_CONFIGS)
        assert all(r.succeeded() for r in results)
        assert [r.name for r in results] == [c.name for c in COMMON_CONFIGS]
        files = sorted(p.name for p in store.directory.glob("*.json"))
        assert files == sorted(cache_filename(c.salt, c.iterations) for c in COMMON_CONFIGS)

    def test_artifacts_match_their_configuration(self, store, sequential_engine, wordlist_file):
        """Test that each file holds hashes for its own salt and iterations."""
        configs = [BatchConfigEntry("a", "", 0), BatchConfigEntry("b", "DEADBEEF", 5)]
        BatchOrchestrator(store, sequential_engine).run_all("example.com", wordlist_file, configs)

        for entry in configs:
            artifact = CacheStore.load(store.path_for(entry.salt, entry.iterations))
            assert artifact.salt == entry.salt
            assert artifact.iterations == entry.iterations
            assert artifact.wordlist_size == 4
            expected = nsec3_hash("www.example.com", bytes.fromhex(entry.salt), entry.iterations)
            assert artifact.hashes[expected] == "www.example.com"

    def test_failed_write_does_not_stop_batch(self, store, sequential_engine, wordlist_file):
        """Test that one failing configuration is recorded and the rest still run."""
        real_save = store.save
        failing_salt = "CAFEBABE"

        def save(artifact):
            if artifact.salt == failing_salt:
                raise PermissionError("read-only output directory")
            return real_save(artifact)

        with patch.object(store, "save", side_effect=save):
            results = BatchOrchestrator(store, sequential_engine).run_all("example.com", wordlist_file)

        failed = [r for r in results if not r.succeeded()]
        assert len(failed) == 1
        assert failed[0].salt == failing_salt
        assert failed[0].status == RunStatus.FAILED
        assert "read-only" in failed[0].error_message
        assert failed[0].output_path is None

        for entry in COMMON_CONFIGS:
            path = store.path_for(entry.salt, entry.iterations)
            if entry.salt == failing_salt:
                assert not path.exists()
                continue
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
            assert data["iterations"] == entry.iterations
            assert len(data["hashes"]) == 4

    def test_invalid_preset_is_recorded(self, store, sequential_engine, wordlist_file):
        """Test that a preset that cannot be built fails alone."""
        configs = [BatchConfigEntry("bad", "", -1), BatchConfigEntry("good", "", 0)]

        results = BatchOrchestrator(store, sequential_engine).run_all("example.com", wordlist_file, configs)

        assert [r.status for r in results] == [RunStatus.FAILED, RunStatus.SUCCEEDED]
        assert results[0].name == "bad"

    def test_wordlist_loaded_once(self, store, sequential_engine, wordlist_file):
        """Test that the wordlist is read once for the whole batch."""
        with patch(
            "generator.services.batch_orchestrator.load_wordlist",
            return_value=["www"],
        ) as loader:
            BatchOrchestrator(store, sequential_engine).run_all("example.com", wordlist_file)

        loader.assert_called_once_with(wordlist_file)

    def test_missing_wordlist_raises(self, store, sequential_engine, tmp_path):
        """Test that an unreadable wordlist aborts before any hashing."""
        with pytest.raises(OSError):
            BatchOrchestrator(store, sequential_engine).run_all("example.com", tmp_path / "missing.txt")
        assert not store.directory.exists()
