"""
Enumerant Configuration Module.

This module provides the file-backed configuration system: generation
settings and logging settings loaded from a JSON or YAML file.
"""

from .settings import (
    EnumerantConfig,
    LoggingConfig,
    CONFIG_FILE_NAMES,
    get_config,
    set_config,
    load_config
)

__all__ = [
    'EnumerantConfig',
    'LoggingConfig',
    'CONFIG_FILE_NAMES',
    'get_config',
    'set_config',
    'load_config'
]
