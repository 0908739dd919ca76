"""
Descriptor loading.

Builds TypeDescriptor objects from plain mappings, or from JSON and YAML
documents, for callers that do not have a host compiler producing them.
A document either holds a single type mapping or a ``types`` list:

    types:
      - name: Test
        visibility: pub
        variants:
          - name: A
          - name: C
            positional: [u32, u32]
          - name: D
            named: {a: String, b: bool}

Variant order and named-field order are kept exactly as written.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, Mapping, Union

import yaml

from ..utils.exceptions import DescriptorError
from ..utils.logging import get_logger
from .naming import validate_identifier, validate_visibility
from .types import (
    TypeDescriptor,
    TypeKind,
    VariantDescriptor,
    PayloadShape,
    NoPayload,
    Positional,
    Named,
    TypeRef,
)

logger = get_logger(__name__)


def _type_ref(value: Any, type_name: str) -> TypeRef:
    if not isinstance(value, str) or not value.strip():
        raise DescriptorError(f"Field type must be a non-empty string, got {value!r}", type_name=type_name)
    return TypeRef(value.strip())


def _named_fields(value: Any, type_name: str) -> Named:
    if isinstance(value, Mapping):
        pairs = list(value.items())
    elif isinstance(value, list):
        pairs = []
        for item in value:
            if isinstance(item, Mapping) and "name" in item and "type" in item:
                pairs.append((item["name"], item["type"]))
            elif isinstance(item, (list, tuple)) and len(item) == 2:
                pairs.append((item[0], item[1]))
            else:
                raise DescriptorError(f"Named field must be a name/type pair, got {item!r}", type_name=type_name)
    else:
        raise DescriptorError("Named fields must be a mapping or a list of pairs", type_name=type_name)

    seen = set()
    fields = []
    for name, type_text in pairs:
        validate_identifier(name, type_name)
        if name in seen:
            raise DescriptorError(f"Duplicate field name {name!r}", type_name=type_name)
        seen.add(name)
        fields.append((name, _type_ref(type_text, type_name)))
    return Named(tuple(fields))


def _payload(data: Mapping[str, Any], type_name: str) -> PayloadShape:
    has_positional = "positional" in data
    has_named = "named" in data
    if has_positional and has_named:
        raise DescriptorError(f"Variant {data.get('name')!r} cannot be both positional and named", type_name=type_name)

    if has_positional:
        types = data["positional"]
        if not isinstance(types, list):
            raise DescriptorError("Positional fields must be a list of types", type_name=type_name)
        return Positional(tuple(_type_ref(item, type_name) for item in types))

    if has_named:
        return _named_fields(data["named"], type_name)

    return NoPayload()


def variant_from_dict(data: Union[str, Mapping[str, Any]], type_name: str = "") -> VariantDescriptor:
    """Create a VariantDescriptor; a bare string is a variant without payload."""
    if isinstance(data, str):
        return VariantDescriptor(name=validate_identifier(data, type_name))
    if not isinstance(data, Mapping) or "name" not in data:
        raise DescriptorError(f"Variant must be a name or a mapping with 'name', got {data!r}", type_name=type_name)

    return VariantDescriptor(
        name=validate_identifier(data["name"], type_name),
        payload=_payload(data, type_name),
    )


def descriptor_from_dict(data: Mapping[str, Any]) -> TypeDescriptor:
    """Create a TypeDescriptor from a mapping."""
    if not isinstance(data, Mapping) or "name" not in data:
        raise DescriptorError(f"Type entry must be a mapping with 'name', got {data!r}")

    type_name = validate_identifier(data["name"])

    kind_text = str(data.get("kind", TypeKind.SUM.value)).lower()
    try:
        kind = TypeKind(kind_text)
    except ValueError:
        raise DescriptorError(f"Unknown type kind {kind_text!r}", type_name=type_name) from None

    variants = data.get("variants", [])
    if not isinstance(variants, list):
        raise DescriptorError("Variants must be a list", type_name=type_name)

    return TypeDescriptor(
        name=type_name,
        variants=tuple(variant_from_dict(item, type_name) for item in variants),
        kind=kind,
        visibility=validate_visibility(data.get("visibility") or "", type_name),
    )


def descriptors_from_document(document: Any) -> List[TypeDescriptor]:
    """Create descriptors from a parsed JSON/YAML document."""
    if isinstance(document, Mapping) and "types" in document:
        entries = document["types"]
        if not isinstance(entries, list):
            raise DescriptorError("'types' must be a list")
        return [descriptor_from_dict(entry) for entry in entries]
    if isinstance(document, list):
        return [descriptor_from_dict(entry) for entry in document]
    if isinstance(document, Mapping):
        return [descriptor_from_dict(document)]
    raise DescriptorError(f"Unsupported descriptor document: {type(document).__name__}")


def load_descriptors(path: Union[str, Path]) -> List[TypeDescriptor]:
    """
    Load type descriptors from a JSON or YAML file.

    Args:
        path: Path to the document; ``.yaml``/``.yml`` files are read with
            PyYAML, everything else as JSON

    Returns:
        Descriptors in document order

    Raises:
        DescriptorError: If the file cannot be parsed or is malformed
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            if path.suffix.lower() in (".yaml", ".yml"):
                document = yaml.safe_load(f)
            else:
                document = json.load(f)
    except (yaml.YAMLError, json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DescriptorError(f"Failed to parse {path}: {e}") from e

    descriptors = descriptors_from_document(document)
    logger.info(f"Loaded {len(descriptors)} type descriptor(s) from {path}")
    return descriptors

