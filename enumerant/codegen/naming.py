"""
Naming Strategies and Validation.

The iterator state type is emitted next to user code, so its name must not
collide with user-chosen identifiers. Names are derived by a pure,
injectable strategy so that repeated generation is reproducible and the
rules can be swapped when a target language's identifiers differ.
"""

from __future__ import annotations

import re
from typing import Optional

from ..utils.exceptions import DescriptorError, ConfigurationError

IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")

# Empty (private), `pub`, or a restricted form such as `pub(crate)` or `pub(in a::b)`.
VISIBILITY_PATTERN = re.compile(r"^(pub(\((crate|super|self|in [A-Za-z_][A-Za-z0-9_]*(::[A-Za-z_][A-Za-z0-9_]*)*)\))?)?$")

DEFAULT_ITERATOR_PREFIX = "_EnumIterator_"


def is_identifier(name: str) -> bool:
    """Check whether a string is a plain identifier."""
    return bool(name) and IDENTIFIER_PATTERN.match(name) is not None


def validate_identifier(name: str, type_name: Optional[str] = None) -> str:
    """Return ``name`` unchanged or raise DescriptorError."""
    if not isinstance(name, str) or not is_identifier(name):
        raise DescriptorError(f"Invalid identifier: {name!r}", type_name=type_name)
    return name


def validate_visibility(visibility: str, type_name: Optional[str] = None) -> str:
    """Return the normalized visibility qualifier or raise DescriptorError."""
    if not isinstance(visibility, str):
        raise DescriptorError(f"Invalid visibility: {visibility!r}", type_name=type_name)
    normalized = " ".join(visibility.split())
    if VISIBILITY_PATTERN.match(normalized) is None:
        raise DescriptorError(f"Invalid visibility: {visibility!r}", type_name=type_name)
    return normalized


class PrefixNamingStrategy:
    """Derive auxiliary names by prepending a reserved prefix."""

    def __init__(self, prefix: str = DEFAULT_ITERATOR_PREFIX):
        if not prefix or IDENTIFIER_PATTERN.match(prefix) is None:
            raise ConfigurationError(f"Iterator prefix {prefix!r} is not an identifier start", key="iterator_prefix")
        self._prefix = prefix

    @property
    def prefix(self) -> str:
        return self._prefix

    def iterator_name(self, type_name: str) -> str:
        """Get the iterator state type name for a sum type."""
        return f"{self._prefix}{type_name}"

    def __repr__(self) -> str:
        return f"PrefixNamingStrategy(prefix={self._prefix!r})"
