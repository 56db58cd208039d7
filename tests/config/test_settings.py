"""
Tests for TreeFSConfig.

Covers defaults, environment overrides, explicit overrides and the stores the
configuration builds.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from treefs.config import TreeFSConfig
from treefs.storage import DEFAULT_STORAGE_KEY, DirectoryStore, MemoryStore


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("STORAGE_DIR", "STORAGE_KEY", "SEED_SAMPLES", "LOG_LEVEL"):
        monkeypatch.delenv(f"TREEFS_{name}", raising=False)


class TestDefaults:
    def test_defaults(self):
        config = TreeFSConfig()
        assert config.storage_dir is None
        assert config.storage_key == DEFAULT_STORAGE_KEY
        assert config.seed_samples is True
        assert config.log_level == "WARNING"

    def test_memory_store_by_default(self):
        assert isinstance(TreeFSConfig().build_store(), MemoryStore)


class TestOverrides:
    """Test layering of environment and explicit values."""

    def test_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("TREEFS_STORAGE_DIR", str(tmp_path))
        monkeypatch.setenv("TREEFS_STORAGE_KEY", "snap")
        monkeypatch.setenv("TREEFS_SEED_SAMPLES", "no")
        monkeypatch.setenv("TREEFS_LOG_LEVEL", "debug")

        config = TreeFSConfig.from_env()

        assert config.storage_dir == tmp_path
        assert config.storage_key == "snap"
        assert config.seed_samples is False
        assert config.log_level == "DEBUG"

    def test_explicit_beats_environment(self, monkeypatch):
        monkeypatch.setenv("TREEFS_STORAGE_KEY", "from_env")
        assert TreeFSConfig(storage_key="explicit").storage_key == "explicit"

    def test_unknown_option(self):
        with pytest.raises(ValueError, match="Unknown configuration option"):
            TreeFSConfig(colour="blue")

    def test_invalid_boolean_environment(self, monkeypatch):
        monkeypatch.setenv("TREEFS_SEED_SAMPLES", "maybe")
        with pytest.raises(ValueError):
            TreeFSConfig()

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            TreeFSConfig(log_level="chatty")

    def test_empty_storage_key(self):
        with pytest.raises(ValidationError):
            TreeFSConfig(storage_key="")


class TestBuilders:
    def test_directory_store(self, tmp_path):
        store = TreeFSConfig(storage_dir=tmp_path).build_store()
        assert isinstance(store, DirectoryStore)
        assert store.root_dir == Path(tmp_path)

    def test_gateway_uses_configured_key(self, tmp_path):
        gateway = TreeFSConfig(storage_dir=tmp_path, storage_key="snap").build_gateway()
        assert gateway.key == "snap"
        assert isinstance(gateway.store, DirectoryStore)
