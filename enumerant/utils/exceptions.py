"""
Custom exception definitions.

This module defines the exception hierarchy for Enumerant-specific
errors raised while reading descriptors, generating fragments and
printing them.
"""

from typing import Optional


class EnumerantError(Exception):
    """
    Base exception for all Enumerant-related errors.

    This is the root exception class for all Enumerant-specific
    errors, providing common functionality and error handling.
    """

    def __init__(self, message: str, details: Optional[dict] = None):
        """
        Initialize Enumerant error.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error context
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message


class InputShapeError(EnumerantError):
    """
    Raised when the annotated type is not a sum type.

    The message has a fixed format that host pipelines may match on,
    so it never carries a details suffix.
    """

    def __init__(self, capability: str, observed_kind: str):
        """
        Initialize input shape error.

        Args:
            capability: Name of the derived capability
            observed_kind: Plural name of the shape actually received
        """
        super().__init__(f"{capability} is only defined for sum types, not {observed_kind}")
        self.capability = capability
        self.observed_kind = observed_kind


class DescriptorError(EnumerantError):
    """
    Raised when a type descriptor document is malformed.

    This covers parse-level problems in the descriptor input, such as
    missing names or payloads that are neither positional nor named.
    """

    def __init__(self, message: str, type_name: Optional[str] = None):
        """
        Initialize descriptor error.

        Args:
            message: Error description
            type_name: Optional name of the offending type
        """
        details = {}
        if type_name is not None:
            details['type_name'] = type_name

        super().__init__(message, details)
        self.type_name = type_name


class RenderError(EnumerantError):
    """
    Raised when a printer cannot turn a fragment into source text.
    """

    def __init__(self, message: str, dialect: Optional[str] = None):
        """
        Initialize render error.

        Args:
            message: Error description
            dialect: Optional target dialect of the failing printer
        """
        details = {}
        if dialect is not None:
            details['dialect'] = dialect

        super().__init__(message, details)
        self.dialect = dialect


class ConfigurationError(EnumerantError):
    """
    Raised for invalid generation settings.
    """

    def __init__(self, message: str, key: Optional[str] = None):
        """
        Initialize configuration error.

        Args:
            message: Error description
            key: Optional configuration key that was rejected
        """
        details = {}
        if key is not None:
            details['key'] = key

        super().__init__(message, details)
        self.key = key
