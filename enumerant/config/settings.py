"""
File-backed Configuration for Enumerant.

This module loads generation and logging settings from a single JSON or
YAML file, with a small set of environment variable overrides.
"""

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Any, Optional

import yaml

from ..codegen.config import (
    GenerationConfig,
    create_config_from_dict,
    config_to_dict,
    validate_config,
)
from ..utils.exceptions import ConfigurationError
from ..utils.logging import get_logger

logger = get_logger(__name__)

CONFIG_FILE_NAMES = ["enumerant_config.yaml", "enumerant_config.yml", "enumerant_config.json"]


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    enable_file_logging: bool = False
    log_file: str = "enumerant.log"


class EnumerantConfig:
    """
    Unified configuration manager for Enumerant.

    Reads the ``generation`` and ``logging`` sections of a configuration
    file. Without an explicit file, the first of CONFIG_FILE_NAMES found
    in the working directory is used, and defaults apply when none exists.
    """

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to configuration file. If None, searches the
                working directory for a default file name.
        """
        self._explicit = config_file is not None
        self.config_file = self._get_config_file_path(config_file)
        self._config_data = self._load_config()

        self.generation = self._create_generation_config()
        self.logging = self._create_logging_config()

    def _get_config_file_path(self, config_file: Optional[str]) -> Path:
        """Get the configuration file path."""
        if config_file:
            return Path(config_file)

        for name in CONFIG_FILE_NAMES:
            candidate = Path.cwd() / name
            if candidate.exists():
                return candidate
        return Path.cwd() / CONFIG_FILE_NAMES[-1]

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from file (JSON or YAML)."""
        if not self.config_file.exists():
            if self._explicit:
                raise ConfigurationError(f"Configuration file {self.config_file} not found")
            logger.debug(f"Configuration file {self.config_file} not found, using defaults")
            return {}

        try:
            with open(self.config_file, "r", encoding="utf-8") as f:
                if self.config_file.suffix.lower() in [".yaml", ".yml"]:
                    config_data = yaml.safe_load(f)
                else:
                    config_data = json.load(f)
        except (yaml.YAMLError, json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ConfigurationError(f"Failed to load configuration from {self.config_file}: {e}") from e

        if config_data is None:
            config_data = {}
        if not isinstance(config_data, dict):
            raise ConfigurationError(f"Configuration in {self.config_file} must be a mapping")

        logger.info(f"Loaded configuration from {self.config_file}")
        return config_data

    def _create_generation_config(self) -> GenerationConfig:
        """Create generation configuration from loaded data."""
        gen_data = dict(self._config_data.get("generation", {}) or {})

        # Check environment variable override
        env_target = os.getenv("ENUMERANT_TARGET")
        if env_target:
            gen_data["target_dialect"] = env_target

        config = create_config_from_dict(gen_data)
        validate_config(config)
        return config

    def _create_logging_config(self) -> LoggingConfig:
        """Create logging configuration from loaded data."""
        log_data = self._config_data.get("logging", {}) or {}

        return LoggingConfig(
            level=os.getenv("ENUMERANT_LOG_LEVEL", log_data.get("level", "INFO")),
            enable_file_logging=log_data.get("enable_file_logging", False),
            log_file=log_data.get("log_file", "enumerant.log"),
        )

    @property
    def target_dialect(self) -> str:
        return self.generation.target_dialect

    def save_config(self) -> None:
        """Save current configuration to file."""
        config_data = {
            "version": "1.0",
            "description": "Enumerant Configuration",
            "generation": config_to_dict(self.generation),
            "logging": {
                "level": self.logging.level,
                "enable_file_logging": self.logging.enable_file_logging,
                "log_file": self.logging.log_file,
            },
        }

        with open(self.config_file, "w") as f:
            if self.config_file.suffix.lower() in [".yaml", ".yml"]:
                yaml.safe_dump(config_data, f, sort_keys=False)
            else:
                json.dump(config_data, f, indent=2)
        logger.info(f"Configuration saved to {self.config_file}")


# Global configuration instance
_global_config: Optional[EnumerantConfig] = None


def get_config() -> EnumerantConfig:
    """Get the global configuration instance."""
    global _global_config
    if _global_config is None:
        _global_config = EnumerantConfig()
    return _global_config


def set_config(config: Optional[EnumerantConfig]) -> None:
    """Set the global configuration instance."""
    global _global_config
    _global_config = config


def load_config(config_file: str) -> EnumerantConfig:
    """Load configuration from a specific file."""
    return EnumerantConfig(config_file)
