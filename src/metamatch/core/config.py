"""Configuration management for metamatch."""

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

from .exceptions import ConfigError

DEFAULT_METADATA_TYPE = "metamatch.api.MetaData"
BUILTIN_NAMESPACE = "metamatch.annotations.builtin."


@dataclass
class MatchConfig:
    """Metadata discovery and matching configuration.

    Attributes:
        metadata_type: Qualified name of the annotation type that carries
            metadata. Discovery stops at the first instance of it.
        reserved_prefixes: Qualified-name prefixes of annotation types that
            discovery never descends into.
        max_depth: Maximum number of annotation-type levels searched below
            an entity.
        log_level: Level used when the CLI configures logging.
    """

    metadata_type: str = DEFAULT_METADATA_TYPE
    reserved_prefixes: tuple[str, ...] = (BUILTIN_NAMESPACE,)
    max_depth: int = 64
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if isinstance(self.reserved_prefixes, str):
            self.reserved_prefixes = (self.reserved_prefixes,)
        else:
            self.reserved_prefixes = tuple(self.reserved_prefixes)
        if not isinstance(self.max_depth, int) or self.max_depth < 1:
            raise ConfigError(f"max_depth must be a positive integer, got {self.max_depth!r}")
        self.log_level = str(self.log_level).upper()

    def is_reserved(self, qualified_name: str) -> bool:
        """Check whether a qualified name lies in a reserved namespace."""
        return any(qualified_name.startswith(prefix) for prefix in self.reserved_prefixes)

    @classmethod
    def from_env(cls) -> "MatchConfig":
        """Load configuration from environment variables."""
        return cls()._apply_env()

    @classmethod
    def from_file(cls, path: Path | str) -> "MatchConfig":
        """Load configuration from a YAML file, then apply env overrides.

        Args:
            path: YAML document whose top-level keys are field names.

        Raises:
            ConfigError: If the file cannot be read or has unknown keys.
        """
        path = Path(path)
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        except OSError as e:
            raise ConfigError(f"Cannot read config file {path}: {e}") from e
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in config file {path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"Config file {path} must contain a mapping")

        return cls._from_mapping(data)._apply_env()

    @classmethod
    def from_env_or_file(cls, path: Path | str | None = None) -> "MatchConfig":
        """Load from an explicit path, ``METAMATCH_CONFIG``, or the environment."""
        if path is None:
            path = os.environ.get("METAMATCH_CONFIG") or None
        if path is not None:
            return cls.from_file(path)
        return cls.from_env()

    @classmethod
    def _from_mapping(cls, data: dict[str, Any]) -> "MatchConfig":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")
        return cls(**data)

    def _apply_env(self) -> "MatchConfig":
        if metadata_type := os.environ.get("METAMATCH_METADATA_TYPE"):
            self.metadata_type = metadata_type

        if prefixes := os.environ.get("METAMATCH_RESERVED_PREFIXES"):
            self.reserved_prefixes = tuple(p.strip() for p in prefixes.split(",") if p.strip())

        if max_depth := os.environ.get("METAMATCH_MAX_DEPTH"):
            try:
                depth = int(max_depth)
            except ValueError as e:
                raise ConfigError(f"METAMATCH_MAX_DEPTH must be an integer, got {max_depth!r}") from e
            if depth < 1:
                raise ConfigError(f"max_depth must be a positive integer, got {depth}")
            self.max_depth = depth

        if level := os.environ.get("METAMATCH_LOG_LEVEL"):
            self.log_level = level.upper()

        return self
