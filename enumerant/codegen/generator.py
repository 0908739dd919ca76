"""
Variant Iterator Generator.

Turns a sum type descriptor into a GeneratedFragment: an iterator state
type holding a single position counter, an entry operation on the sum
type, an index-to-variant mapping with one branch per variant, and the
iterator's next operation.

The iterator state and entry operation take the visibility of the sum
type itself, so a private type never leaks through a public interface.

Branch ``i`` of the mapping always constructs variant ``i`` in
declaration order; the variant list is never reordered or deduplicated.
"""

from __future__ import annotations

from typing import Optional

from ..utils.exceptions import InputShapeError
from ..utils.logging import EnumerantLogger
from .config import GenerationConfig, create_default_config, validate_config
from .defaults import build_construction
from .naming import PrefixNamingStrategy
from .types import (
    TypeDescriptor,
    GeneratedFragment,
    IteratorStateDecl,
    EntryOperation,
    IndexMapping,
    MappingBranch,
    NextOperation,
    NamingStrategy,
    Unreachable,
)

UNREACHABLE_MESSAGE = "variant index out of range"


class EnumerationGenerator:
    """Generates variant iterator fragments for sum types."""

    def __init__(self, config: Optional[GenerationConfig] = None, naming: Optional[NamingStrategy] = None):
        """
        Initialize the generator.

        Args:
            config: Generation configuration, defaults to create_default_config()
            naming: Strategy deriving the iterator state name; defaults to
                a PrefixNamingStrategy using ``config.iterator_prefix``
        """
        self._config = config or create_default_config()
        validate_config(self._config)
        self._naming = naming or PrefixNamingStrategy(self._config.iterator_prefix)
        self._log = EnumerantLogger(__name__)

    @property
    def config(self) -> GenerationConfig:
        return self._config

    @property
    def naming(self) -> NamingStrategy:
        return self._naming

    def generate(self, descriptor: TypeDescriptor) -> GeneratedFragment:
        """
        Generate the iterator fragment for one annotated type.

        Args:
            descriptor: Type descriptor produced by the structural parser

        Returns:
            GeneratedFragment for the sum type

        Raises:
            InputShapeError: If the descriptor is not a sum type
        """
        if not descriptor.is_sum_type:
            error = InputShapeError(self._config.capability_name, descriptor.kind.plural)
            self._log.log_generation_failure(descriptor.name, str(error))
            raise error

        owner = descriptor.name
        variant_count = len(descriptor.variants)
        self._log.log_generation_start(owner, variant_count)

        iterator_name = self._naming.iterator_name(owner)
        counter = self._config.counter_name

        branches = []
        for index, variant in enumerate(descriptor.variants):
            construction = build_construction(owner, variant)
            self._log.log_branch(index, variant.name, construction.kind.value)
            branches.append(MappingBranch(index=index, construction=construction))

        visibility = descriptor.visibility
        state = IteratorStateDecl(name=iterator_name, counter=counter, initial=0, visibility=visibility)
        entry = EntryOperation(
            owner=owner,
            name=self._config.entry_name,
            returns=iterator_name,
            visibility=visibility,
        )
        mapping = IndexMapping(
            name=self._config.mapping_name,
            owner=owner,
            param=counter,
            branches=tuple(branches),
            fallback=Unreachable(UNREACHABLE_MESSAGE),
        )
        next_op = NextOperation(
            state=iterator_name,
            owner=owner,
            counter=counter,
            mapping=self._config.mapping_name,
            length=variant_count,
        )

        return GeneratedFragment(
            type_name=owner,
            capability=self._config.capability_name,
            state=state,
            entry=entry,
            mapping=mapping,
            next_op=next_op,
            metadata={
                "generator": self.__class__.__name__,
                "variant_count": variant_count,
                "shapes": tuple(branch.construction.kind.value for branch in branches),
            },
        )


def generate(descriptor: TypeDescriptor, config: Optional[GenerationConfig] = None) -> GeneratedFragment:
    """Generate a fragment with a one-off EnumerationGenerator."""
    return EnumerationGenerator(config).generate(descriptor)
