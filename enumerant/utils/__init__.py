"""
Utils package for Enumerant.

This module provides the exception hierarchy and logging helpers shared
by the generator, the printers and the pipeline.
"""

from .exceptions import (
    EnumerantError,
    InputShapeError,
    DescriptorError,
    RenderError,
    ConfigurationError,
)
from .logging import setup_logging, get_logger, EnumerantLogger

__all__ = [
    # Exceptions
    "EnumerantError",
    "InputShapeError",
    "DescriptorError",
    "RenderError",
    "ConfigurationError",

    # Logging
    "setup_logging",
    "get_logger",
    "EnumerantLogger",
]
