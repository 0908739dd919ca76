"""
Enumerant: Variant Iterator Generation for Sum Types

Given the definition of a sum type, Enumerant synthesizes companion code
that enumerates every variant in declaration order, each populated with
default field values.

Usage:
    from enumerant import TypeDescriptor, VariantDescriptor, Positional, TypeRef
    from enumerant import EnumerationGenerator, create_printer

    descriptor = TypeDescriptor("Test", (
        VariantDescriptor("A"),
        VariantDescriptor("C", Positional((TypeRef("u32"), TypeRef("u32")))),
    ))
    fragment = EnumerationGenerator().generate(descriptor)
    print(create_printer("rust").render(fragment))
"""

__version__ = "0.1.0"
__author__ = "Enumerant Team"
__email__ = "enumerant@example.com"

# Public API exports
from .codegen import (
    TypeKind,
    TypeRef,
    NoPayload,
    Positional,
    Named,
    VariantDescriptor,
    TypeDescriptor,
    GeneratedFragment,
    GenerationConfig,
    EnumerationGenerator,
    generate,
    classify,
    create_printer,
    load_descriptors,
)

from .config import (
    get_config,
    EnumerantConfig
)

from .pipeline import GenerationPipeline, generate_all

from .utils.exceptions import EnumerantError, InputShapeError

__all__ = [
    "TypeKind",
    "TypeRef",
    "NoPayload",
    "Positional",
    "Named",
    "VariantDescriptor",
    "TypeDescriptor",
    "GeneratedFragment",
    "GenerationConfig",
    "EnumerationGenerator",
    "generate",
    "classify",
    "create_printer",
    "load_descriptors",
    "get_config",
    "EnumerantConfig",
    "GenerationPipeline",
    "generate_all",
    "EnumerantError",
    "InputShapeError",
]
