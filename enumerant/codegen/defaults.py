"""
Default-value synthesis.

Builds the construction expression for a variant with every field set to
its type's canonical default. The referenced types are never inspected:
whether a type actually has a default is decided by the downstream
compiler when the generated code is built.
"""

from __future__ import annotations

from typing import Tuple

from .types import (
    DefaultValue,
    Positional,
    Named,
    ShapeKind,
    TypeRef,
    VariantConstruction,
    VariantDescriptor,
)
from .shapes import classify, shape_kind


def default_value(type_ref: TypeRef) -> DefaultValue:
    """Expression invoking the default constructor of ``type_ref``."""
    if isinstance(type_ref, str):
        type_ref = TypeRef(type_ref)
    return DefaultValue(type_ref=type_ref)


def positional_defaults(shape: Positional) -> Tuple[DefaultValue, ...]:
    return tuple(default_value(type_ref) for type_ref in shape.types)


def named_defaults(shape: Named) -> Tuple[Tuple[str, DefaultValue], ...]:
    return tuple((name, default_value(type_ref)) for name, type_ref in shape.fields)


def build_construction(owner: str, variant: VariantDescriptor) -> VariantConstruction:
    """
    Build the default-populated construction of one variant.

    Args:
        owner: Name of the sum type the variant belongs to
        variant: Variant descriptor

    Returns:
        VariantConstruction whose arguments follow field declaration order
    """
    shape = classify(variant)
    kind = shape_kind(shape)

    if kind is ShapeKind.POSITIONAL:
        return VariantConstruction(
            owner=owner,
            variant=variant.name,
            kind=kind,
            positional=positional_defaults(shape),
        )

    if kind is ShapeKind.NAMED:
        return VariantConstruction(
            owner=owner,
            variant=variant.name,
            kind=kind,
            named=named_defaults(shape),
        )

    return VariantConstruction(owner=owner, variant=variant.name, kind=kind)
