"""
Logging configuration and utilities.

This module provides centralized logging configuration for the
Enumerant package with appropriate formatting and levels.
"""

import logging
import os
from typing import Optional


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """
    Configure logging for the Enumerant package.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path for log output
    """
    if level is None:
        level = os.environ.get("ENUMERANT_LOG_LEVEL", "INFO")

    log_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger("enumerant")
    logger.setLevel(log_level)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the given module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    if name == "enumerant" or name.startswith("enumerant."):
        return logging.getLogger(name)
    return logging.getLogger(f"enumerant.{name}")


class EnumerantLogger:
    """
    Logging helpers for the generation pipeline.

    Wraps a component logger with methods for the events worth
    tracing while a sum type is turned into iterator code.
    """

    def __init__(self, name: str):
        """
        Initialize logger for specific component.

        Args:
            name: Component name for logging context
        """
        self.logger = get_logger(name)

    def log_generation_start(self, type_name: str, variant_count: int) -> None:
        """
        Log beginning of generation for one annotated type.

        Args:
            type_name: Name of the sum type being processed
            variant_count: Number of declared variants
        """
        self.logger.debug(f"Generating variant iterator for {type_name} ({variant_count} variants)")

    def log_branch(self, index: int, variant_name: str, shape: str) -> None:
        """
        Log a synthesized mapping branch.

        Args:
            index: Declaration ordinal of the variant
            variant_name: Variant name
            shape: Payload shape kind
        """
        self.logger.debug(f"Branch {index}: {variant_name} ({shape})")

    def log_generation_failure(self, type_name: str, reason: str) -> None:
        """
        Log a type whose generation was rejected.

        Args:
            type_name: Name of the rejected type
            reason: Error message
        """
        self.logger.error(f"Generation failed for {type_name}: {reason}")

    def log_render(self, type_name: str, dialect: str, length: int) -> None:
        """
        Log printing of a generated fragment.

        Args:
            type_name: Name of the sum type
            dialect: Target dialect used by the printer
            length: Size of the printed text in characters
        """
        self.logger.debug(f"Rendered {type_name} as {dialect} ({length} chars)")


# Initialize logging on module import
setup_logging()
