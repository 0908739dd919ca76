"""
Variant Iterator Code Generation.

This package synthesizes, for a sum type, companion code that enumerates
every variant in declaration order with each field default-populated.

Architecture Overview:
- types.py: Descriptors, AST fragment nodes and protocols
- shapes.py: Payload shape classification
- defaults.py: Default-value synthesis for variant construction
- naming.py: Collision-safe naming strategy and identifier validation
- config.py: Generation configuration
- generator.py: EnumerationGenerator orchestrator
- descriptors.py: Loading descriptors from JSON/YAML documents
- templates/: Jinja2 printers per target dialect
"""

from .types import (
    TypeKind,
    ShapeKind,
    TypeRef,
    NoPayload,
    Positional,
    Named,
    PayloadShape,
    VariantDescriptor,
    TypeDescriptor,
    DefaultValue,
    VariantConstruction,
    MappingBranch,
    Unreachable,
    IteratorStateDecl,
    EntryOperation,
    IndexMapping,
    NextOperation,
    GeneratedFragment,
    # Protocols
    NamingStrategy,
    FragmentPrinter,
)

from .shapes import classify, shape_kind, field_types
from .defaults import default_value, build_construction
from .naming import PrefixNamingStrategy, validate_identifier, validate_visibility, DEFAULT_ITERATOR_PREFIX

from .config import (
    GenerationConfig,
    SUPPORTED_DIALECTS,
    create_default_config,
    create_config_from_dict,
    validate_config,
    config_to_dict,
)

from .generator import EnumerationGenerator, generate

from .descriptors import (
    descriptor_from_dict,
    descriptors_from_document,
    load_descriptors,
)

from .templates import (
    JinjaFragmentPrinter,
    create_printer,
)

__all__ = [
    # Core types
    "TypeKind",
    "ShapeKind",
    "TypeRef",
    "NoPayload",
    "Positional",
    "Named",
    "PayloadShape",
    "VariantDescriptor",
    "TypeDescriptor",
    # Fragment nodes
    "DefaultValue",
    "VariantConstruction",
    "MappingBranch",
    "Unreachable",
    "IteratorStateDecl",
    "EntryOperation",
    "IndexMapping",
    "NextOperation",
    "GeneratedFragment",
    # Protocols
    "NamingStrategy",
    "FragmentPrinter",
    # Shapes and defaults
    "classify",
    "shape_kind",
    "field_types",
    "default_value",
    "build_construction",
    # Naming
    "PrefixNamingStrategy",
    "validate_identifier",
    "validate_visibility",
    "DEFAULT_ITERATOR_PREFIX",
    # Configuration
    "GenerationConfig",
    "SUPPORTED_DIALECTS",
    "create_default_config",
    "create_config_from_dict",
    "validate_config",
    "config_to_dict",
    # Generator
    "EnumerationGenerator",
    "generate",
    # Descriptors
    "descriptor_from_dict",
    "descriptors_from_document",
    "load_descriptors",
    # Printers
    "JinjaFragmentPrinter",
    "create_printer",
]
