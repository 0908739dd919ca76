"""
Variant payload classification.

Every variant of a sum type carries exactly one of three payload shapes,
so classification is a reinterpretation of the descriptor and cannot fail
for well-formed input.
"""

from __future__ import annotations

from typing import Tuple

from .types import (
    VariantDescriptor,
    PayloadShape,
    NoPayload,
    Positional,
    Named,
    ShapeKind,
    TypeRef,
)


def classify(variant: VariantDescriptor) -> PayloadShape:
    """Return the payload shape of a variant."""
    payload = variant.payload
    if payload is None:
        return NoPayload()
    return payload


def shape_kind(shape: PayloadShape) -> ShapeKind:
    """Map a payload shape onto its ShapeKind tag."""
    if isinstance(shape, NoPayload):
        return ShapeKind.NONE
    if isinstance(shape, Positional):
        return ShapeKind.POSITIONAL
    if isinstance(shape, Named):
        return ShapeKind.NAMED
    raise TypeError(f"Not a payload shape: {shape!r}")


def field_types(shape: PayloadShape) -> Tuple[TypeRef, ...]:
    """Field types of a payload in declaration order."""
    kind = shape_kind(shape)
    if kind is ShapeKind.POSITIONAL:
        return tuple(shape.types)
    if kind is ShapeKind.NAMED:
        return tuple(type_ref for _, type_ref in shape.fields)
    return ()
