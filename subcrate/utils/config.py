"""
Configuration System for the Subcrate toolkit.

This module provides a single configuration interface backed by a JSON or
YAML file, with a small set of environment variable overrides.
"""

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .constants import (
    CONFIG_FILE_NAMES,
    DEFAULT_EDITION,
    DEFAULT_LOG_FILE,
    DEFAULT_LOG_LEVEL,
    MAX_SUBCRATE_DEPTH,
    SUBCRATE_DELIMITER,
    PackageKind,
)
from .exceptions import ConfigError
from .logging import get_logger

logger = get_logger(__name__)

_TRUTHY = ("1", "true", "yes")


@dataclass
class NamingConfig:
    """Namespace delimiter configuration."""

    delimiter: str = SUBCRATE_DELIMITER
    max_depth: Optional[int] = MAX_SUBCRATE_DEPTH


@dataclass
class ScaffoldConfig:
    """New package scaffolding configuration."""

    default_kind: str = PackageKind.BIN.value
    strict: bool = False
    edition: str = DEFAULT_EDITION


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = DEFAULT_LOG_LEVEL
    enable_file_logging: bool = False
    log_file: str = DEFAULT_LOG_FILE


class SubcrateConfig:
    """
    Unified configuration manager for the Subcrate toolkit.

    Values are read from a single JSON or YAML file. ``SUBCRATE_MAX_DEPTH``
    and ``SUBCRATE_STRICT`` override the file.
    """

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to configuration file. If None, ``SUBCRATE_CONFIG``
                or the default location is used.
        """
        self.config_file = self._get_config_file_path(config_file)
        self._config_data = self._load_config()

        self.naming = self._create_naming_config()
        self.scaffold = self._create_scaffold_config()
        self.logging = self._create_logging_config()

    def _get_config_file_path(self, config_file: Optional[str]) -> Path:
        """Get the configuration file path."""
        if config_file:
            return Path(config_file)

        env_file = os.getenv("SUBCRATE_CONFIG")
        if env_file:
            return Path(env_file)

        config_dir = Path(__file__).parent
        for file_name in CONFIG_FILE_NAMES:
            candidate = config_dir / file_name
            if candidate.exists():
                return candidate
        return config_dir / CONFIG_FILE_NAMES[-1]

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from file (JSON or YAML)."""
        if not self.config_file.exists():
            logger.debug(f"Configuration file {self.config_file} not found, using defaults")
            return {}

        try:
            with open(self.config_file, "r", encoding="utf-8") as f:
                if self.config_file.suffix.lower() in [".yaml", ".yml"]:
                    config_data = yaml.safe_load(f)
                else:
                    config_data = json.load(f)
        except (OSError, ValueError, yaml.YAMLError) as e:
            raise ConfigError(
                f"Failed to load configuration: {e}", {"config_file": str(self.config_file)}
            ) from e

        if config_data is None:
            return {}
        if not isinstance(config_data, dict):
            raise ConfigError(
                "Configuration root must be a mapping", {"config_file": str(self.config_file)}
            )
        logger.info(f"Loaded configuration from {self.config_file}")
        return config_data

    def _create_naming_config(self) -> NamingConfig:
        """Create naming configuration from loaded data."""
        naming_data = self._config_data.get("naming", {})

        delimiter = naming_data.get("delimiter", SUBCRATE_DELIMITER)
        if not isinstance(delimiter, str) or not delimiter:
            raise ConfigError(f"naming.delimiter must be a non-empty string, got {delimiter!r}")

        max_depth = naming_data.get("max_depth", MAX_SUBCRATE_DEPTH)
        env_depth = os.getenv("SUBCRATE_MAX_DEPTH")
        if env_depth:
            max_depth = None if env_depth.lower() == "none" else env_depth

        if max_depth is not None:
            try:
                max_depth = int(max_depth)
            except (TypeError, ValueError) as e:
                raise ConfigError(f"naming.max_depth must be an integer, got {max_depth!r}") from e
            if max_depth < 0:
                raise ConfigError(f"naming.max_depth must not be negative, got {max_depth}")

        return NamingConfig(delimiter=delimiter, max_depth=max_depth)

    def _create_scaffold_config(self) -> ScaffoldConfig:
        """Create scaffolding configuration from loaded data."""
        scaffold_data = self._config_data.get("scaffold", {})

        default_kind = scaffold_data.get("default_kind", PackageKind.BIN.value)
        if default_kind not in {kind.value for kind in PackageKind}:
            raise ConfigError(f"scaffold.default_kind must be 'bin' or 'lib', got {default_kind!r}")

        env_strict = os.getenv("SUBCRATE_STRICT", "").lower() in _TRUTHY
        strict = env_strict or bool(scaffold_data.get("strict", False))

        return ScaffoldConfig(
            default_kind=default_kind,
            strict=strict,
            edition=str(scaffold_data.get("edition", DEFAULT_EDITION)),
        )

    def _create_logging_config(self) -> LoggingConfig:
        """Create logging configuration from loaded data."""
        log_data = self._config_data.get("logging", {})

        return LoggingConfig(
            level=log_data.get("level", DEFAULT_LOG_LEVEL),
            enable_file_logging=log_data.get("enable_file_logging", False),
            log_file=log_data.get("log_file", DEFAULT_LOG_FILE),
        )

    @property
    def package_kind(self) -> PackageKind:
        return PackageKind(self.scaffold.default_kind)

    def to_dict(self) -> Dict[str, Any]:
        """Return the configuration as plain data."""
        return {
            "naming": {
                "delimiter": self.naming.delimiter,
                "max_depth": self.naming.max_depth,
            },
            "scaffold": {
                "default_kind": self.scaffold.default_kind,
                "strict": self.scaffold.strict,
                "edition": self.scaffold.edition,
            },
            "logging": {
                "level": self.logging.level,
                "enable_file_logging": self.logging.enable_file_logging,
                "log_file": self.logging.log_file,
            },
        }

    def save_config(self) -> None:
        """Save current configuration to file."""
        config_data = {"version": "1.0", **self.to_dict()}

        with open(self.config_file, "w", encoding="utf-8") as f:
            if self.config_file.suffix.lower() in [".yaml", ".yml"]:
                yaml.safe_dump(config_data, f, sort_keys=False)
            else:
                json.dump(config_data, f, indent=2)
        logger.info(f"Configuration saved to {self.config_file}")


# Global configuration instance
_global_config: Optional[SubcrateConfig] = None


def get_config() -> SubcrateConfig:
    """Get the global configuration instance."""
    global _global_config
    if _global_config is None:
        _global_config = SubcrateConfig()
    return _global_config


def set_config(config: Optional[SubcrateConfig]) -> None:
    """Set the global configuration instance (None resets to defaults)."""
    global _global_config
    _global_config = config


def load_config(config_file: str) -> SubcrateConfig:
    """Load configuration from a specific file."""
    return SubcrateConfig(config_file)
