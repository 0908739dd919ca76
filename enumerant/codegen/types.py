"""
Core Data Structures and Protocols for Variant Iterator Generation.

This module defines the descriptor types handed over by the structural
parser, the AST fragment produced by the generator, and the protocols
for the pluggable naming and printing components. All data structures
are immutable.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol, Any, Dict, Tuple, Union


class TypeKind(Enum):
    """Kind of type definition reported by the structural parser."""
    SUM = "sum"
    RECORD = "record"
    UNION = "union"

    @property
    def plural(self) -> str:
        """Plural noun used in diagnostics."""
        return _KIND_PLURALS[self]


_KIND_PLURALS = {
    TypeKind.SUM: "sum types",
    TypeKind.RECORD: "records",
    TypeKind.UNION: "unions",
}


class ShapeKind(Enum):
    """Structural kind of a variant payload."""
    NONE = "none"
    POSITIONAL = "positional"
    NAMED = "named"


@dataclass(frozen=True)
class TypeRef:
    """Opaque reference to a field type, emitted verbatim."""
    text: str

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class NoPayload:
    """Variant without fields."""

    @property
    def kind(self) -> ShapeKind:
        return ShapeKind.NONE


@dataclass(frozen=True)
class Positional:
    """Variant whose fields are identified by position."""
    types: Tuple[TypeRef, ...]

    @property
    def kind(self) -> ShapeKind:
        return ShapeKind.POSITIONAL


@dataclass(frozen=True)
class Named:
    """Variant whose fields are identified by name."""
    fields: Tuple[Tuple[str, TypeRef], ...]

    @property
    def kind(self) -> ShapeKind:
        return ShapeKind.NAMED


PayloadShape = Union[NoPayload, Positional, Named]


@dataclass(frozen=True)
class VariantDescriptor:
    """One named alternative of a sum type."""
    name: str
    payload: PayloadShape = field(default_factory=NoPayload)


@dataclass(frozen=True)
class TypeDescriptor:
    """Structured definition of an annotated type."""
    name: str
    variants: Tuple[VariantDescriptor, ...] = ()
    kind: TypeKind = TypeKind.SUM
    visibility: str = ""

    @property
    def is_sum_type(self) -> bool:
        return self.kind is TypeKind.SUM


# AST fragment nodes

@dataclass(frozen=True)
class DefaultValue:
    """Expression producing the canonical default of a type."""
    type_ref: TypeRef


@dataclass(frozen=True)
class VariantConstruction:
    """Expression constructing one variant of the owner type."""
    owner: str
    variant: str
    kind: ShapeKind
    positional: Tuple[DefaultValue, ...] = ()
    named: Tuple[Tuple[str, DefaultValue], ...] = ()


@dataclass(frozen=True)
class MappingBranch:
    """Branch of the index mapping: index -> constructed variant."""
    index: int
    construction: VariantConstruction


@dataclass(frozen=True)
class Unreachable:
    """Fallback branch that the iteration contract never reaches."""
    message: str


@dataclass(frozen=True)
class IteratorStateDecl:
    """Declaration of the iterator state type with its position counter."""
    name: str
    counter: str
    initial: int = 0
    visibility: str = ""


@dataclass(frozen=True)
class EntryOperation:
    """Operation on the original type returning a fresh iterator state."""
    owner: str
    name: str
    returns: str
    visibility: str = ""


@dataclass(frozen=True)
class IndexMapping:
    """Operation mapping a variant index to a constructed instance."""
    name: str
    owner: str
    param: str
    branches: Tuple[MappingBranch, ...]
    fallback: Unreachable


@dataclass(frozen=True)
class NextOperation:
    """The iterator's produce-next-element-or-end operation."""
    state: str
    owner: str
    counter: str
    mapping: str
    length: int


@dataclass(frozen=True)
class GeneratedFragment:
    """Complete output of one generation call."""
    type_name: str
    capability: str
    state: IteratorStateDecl
    entry: EntryOperation
    mapping: IndexMapping
    next_op: NextOperation
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def declarations(self) -> Tuple[Any, ...]:
        """Declarations in emission order."""
        return (self.state, self.entry, self.mapping, self.next_op)

    @property
    def variant_count(self) -> int:
        return len(self.mapping.branches)


# Protocols for interfaces

class NamingStrategy(Protocol):
    """Protocol for deriving collision-safe auxiliary names."""

    def iterator_name(self, type_name: str) -> str:
        """Get the iterator state type name for a sum type."""
        ...


class FragmentPrinter(Protocol):
    """Protocol for turning a generated fragment into source text."""

    def render(self, fragment: GeneratedFragment) -> str:
        """Render a fragment as target language source."""
        ...
