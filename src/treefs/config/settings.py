"""
TreeFSConfig - Configuration Management

Sensible defaults with full override capability.

Example:
    >>> # Use defaults (reads from environment)
    >>> config = TreeFSConfig()

    >>> # Explicit configuration
    >>> config = TreeFSConfig(storage_dir="./vfs", seed_samples=False)
    >>> gateway = config.build_gateway()

Environment Variables:
    TREEFS_STORAGE_DIR - Directory for the snapshot store (unset: in-memory)
    TREEFS_STORAGE_KEY - Key the snapshot record is stored under
    TREEFS_SEED_SAMPLES - Seed sample content into a fresh namespace (true/false)
    TREEFS_LOG_LEVEL - Logging level name for the shell
"""

import logging
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from treefs.storage import (
    DEFAULT_STORAGE_KEY,
    DirectoryStore,
    KeyValueStore,
    MemoryStore,
    PersistenceGateway,
)

ENV_PREFIX = "TREEFS_"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


class TreeFSConfig(BaseModel):
    """
    Configuration for treefs.

    Priority (highest to lowest): explicit keyword arguments, ``TREEFS_*``
    environment variables, built-in defaults.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    storage_dir: Path | None = None
    """Directory backing the snapshot store; None keeps snapshots in memory"""

    storage_key: str = DEFAULT_STORAGE_KEY
    """Fixed key the snapshot record is stored under"""

    seed_samples: bool = True
    """Populate sample content when no snapshot could be restored"""

    log_level: str = "WARNING"
    """Logging level name"""

    def __init__(self, **kwargs: Any) -> None:
        for key in kwargs:
            if key not in type(self).model_fields:
                raise ValueError(f"Unknown configuration option: {key}")
        super().__init__(**{**self._load_from_env(), **kwargs})

    @staticmethod
    def _load_from_env() -> dict[str, Any]:
        """Collect configuration values from environment variables."""
        values: dict[str, Any] = {}
        if storage_dir := os.getenv(f"{ENV_PREFIX}STORAGE_DIR"):
            values["storage_dir"] = storage_dir
        if storage_key := os.getenv(f"{ENV_PREFIX}STORAGE_KEY"):
            values["storage_key"] = storage_key
        if seed := os.getenv(f"{ENV_PREFIX}SEED_SAMPLES"):
            values["seed_samples"] = _parse_bool(seed, f"{ENV_PREFIX}SEED_SAMPLES")
        if level := os.getenv(f"{ENV_PREFIX}LOG_LEVEL"):
            values["log_level"] = level
        return values

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @field_validator("storage_key")
    @classmethod
    def _check_storage_key(cls, value: str) -> str:
        if not value:
            raise ValueError("storage_key must not be empty")
        return value

    @classmethod
    def from_env(cls) -> "TreeFSConfig":
        """Load configuration from environment variables only."""
        return cls()

    def build_store(self) -> KeyValueStore:
        """Create the key-value store described by this configuration."""
        if self.storage_dir is None:
            return MemoryStore()
        return DirectoryStore(self.storage_dir)

    def build_gateway(self) -> PersistenceGateway:
        return PersistenceGateway(self.build_store(), key=self.storage_key)


def _parse_bool(value: str, name: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean, got {value!r}")
