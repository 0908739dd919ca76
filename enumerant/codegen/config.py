"""
Configuration Management for Variant Iterator Generation.

This module provides utilities for creating, validating, and converting
generation configurations. It supports both programmatic configuration
and loading from external sources.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Any

from ..utils.exceptions import ConfigurationError
from .naming import DEFAULT_ITERATOR_PREFIX, IDENTIFIER_PATTERN, is_identifier

SUPPORTED_DIALECTS = ("rust", "python")


@dataclass(frozen=True)
class GenerationConfig:
    """Configuration for variant iterator generation."""
    capability_name: str = "EnumIterator"
    iterator_prefix: str = DEFAULT_ITERATOR_PREFIX
    entry_name: str = "enum_iter"
    mapping_name: str = "get"
    counter_name: str = "idx"
    target_dialect: str = "rust"


def create_default_config() -> GenerationConfig:
    """Create a default generation configuration."""
    return GenerationConfig()


def create_config_from_dict(config_dict: Dict[str, Any]) -> GenerationConfig:
    """Create a configuration from a dictionary."""
    config = create_default_config()

    kwargs = {}
    for key in ("capability_name", "iterator_prefix", "entry_name", "mapping_name", "counter_name"):
        if key in config_dict:
            kwargs[key] = str(config_dict[key])

    if "target_dialect" in config_dict:
        kwargs["target_dialect"] = str(config_dict["target_dialect"]).lower()

    unknown = set(config_dict) - set(config.__dict__)
    if unknown:
        raise ConfigurationError(f"Unknown generation options: {sorted(unknown)}", key=sorted(unknown)[0])

    return GenerationConfig(**{
        **config.__dict__,
        **kwargs
    })


def validate_config(config: GenerationConfig) -> None:
    """Validate a generation configuration."""
    if not config.capability_name:
        raise ConfigurationError("Capability name cannot be empty", key="capability_name")

    if IDENTIFIER_PATTERN.match(config.iterator_prefix) is None:
        raise ConfigurationError(
            f"Iterator prefix {config.iterator_prefix!r} is not an identifier start",
            key="iterator_prefix",
        )

    for key in ("entry_name", "mapping_name", "counter_name"):
        if not is_identifier(getattr(config, key)):
            raise ConfigurationError(f"{key} must be an identifier", key=key)

    if config.target_dialect not in SUPPORTED_DIALECTS:
        raise ConfigurationError(f"Unsupported target dialect: {config.target_dialect}", key="target_dialect")


def config_to_dict(config: GenerationConfig) -> Dict[str, Any]:
    """Convert a configuration to a dictionary."""
    return {
        "capability_name": config.capability_name,
        "iterator_prefix": config.iterator_prefix,
        "entry_name": config.entry_name,
        "mapping_name": config.mapping_name,
        "counter_name": config.counter_name,
        "target_dialect": config.target_dialect,
    }
