"""
Template Rendering Engine.

This module prints GeneratedFragment trees as source text using Jinja2
templates. Declarations are laid out by one template per dialect, and
expressions are printed by a dialect-specific ExpressionPrinter that is
registered with the template environment as custom filters.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, Optional

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError

from ...utils.exceptions import ConfigurationError, RenderError
from ...utils.logging import EnumerantLogger
from ..types import DefaultValue, GeneratedFragment, ShapeKind, VariantConstruction

TEMPLATE_ROOT = Path(os.path.dirname(__file__))
FRAGMENT_TEMPLATE = "fragment.j2"


class ExpressionPrinter:
    """Prints expression nodes for one target dialect."""

    dialect = ""

    def default_value(self, node: DefaultValue) -> str:
        raise NotImplementedError

    def construct(self, node: VariantConstruction) -> str:
        raise NotImplementedError

    def visibility(self, qualifier: str) -> str:
        """Visibility prefix for a declaration; empty for private items."""
        return ""


class RustExpressionPrinter(ExpressionPrinter):
    """Rust expressions: ``Owner::Variant``, tuple and struct literals."""

    dialect = "rust"

    def default_value(self, node: DefaultValue) -> str:
        return f"<{node.type_ref} as ::core::default::Default>::default()"

    def construct(self, node: VariantConstruction) -> str:
        path = f"{node.owner}::{node.variant}"
        if node.kind is ShapeKind.POSITIONAL:
            args = ", ".join(self.default_value(value) for value in node.positional)
            return f"{path}({args})"
        if node.kind is ShapeKind.NAMED:
            if not node.named:
                return f"{path} {{}}"
            fields = ", ".join(f"{name}: {self.default_value(value)}" for name, value in node.named)
            return f"{path} {{ {fields} }}"
        return path

    def visibility(self, qualifier: str) -> str:
        return f"{qualifier} " if qualifier else ""


class PythonExpressionPrinter(ExpressionPrinter):
    """
    Python expressions.

    Variants are callables nested in the owner class, so every shape is a
    call: ``Owner.A()``, ``Owner.C(int(), int())``, ``Owner.D(a=str())``.
    """

    dialect = "python"

    def default_value(self, node: DefaultValue) -> str:
        return f"{node.type_ref}()"

    def construct(self, node: VariantConstruction) -> str:
        path = f"{node.owner}.{node.variant}"
        if node.kind is ShapeKind.POSITIONAL:
            args = ", ".join(self.default_value(value) for value in node.positional)
        elif node.kind is ShapeKind.NAMED:
            args = ", ".join(f"{name}={self.default_value(value)}" for name, value in node.named)
        else:
            args = ""
        return f"{path}({args})"


EXPRESSION_PRINTERS: Dict[str, type] = {
    "rust": RustExpressionPrinter,
    "python": PythonExpressionPrinter,
}


class JinjaFragmentPrinter:
    """Jinja2-based printer for generated fragments."""

    def __init__(self, dialect: str = "rust", template_dir: Optional[str] = None):
        """
        Initialize the printer.

        Args:
            dialect: Target dialect, one of EXPRESSION_PRINTERS
            template_dir: Directory holding ``fragment.j2``; defaults to the
                bundled templates for the dialect
        """
        if dialect not in EXPRESSION_PRINTERS:
            raise ConfigurationError(f"Unsupported target dialect: {dialect}", key="target_dialect")

        if template_dir is None:
            template_dir = str(TEMPLATE_ROOT / dialect)

        self._dialect = dialect
        self._template_dir = Path(template_dir)
        self._expressions = EXPRESSION_PRINTERS[dialect]()
        self._log = EnumerantLogger(__name__)
        self._env = Environment(
            loader=FileSystemLoader(str(self._template_dir)),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )

        self._setup_custom_filters()

    @property
    def dialect(self) -> str:
        return self._dialect

    def _setup_custom_filters(self) -> None:
        """Register the dialect's expression printer as template filters."""

        def quote_filter(text: str) -> str:
            """Double-quoted string literal valid in both dialects."""
            escaped = text.replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'

        self._env.filters["construct"] = self._expressions.construct
        self._env.filters["default_value"] = self._expressions.default_value
        self._env.filters["visibility"] = self._expressions.visibility
        self._env.filters["quote"] = quote_filter

    def render(self, fragment: GeneratedFragment) -> str:
        """Render a fragment as target language source."""
        try:
            template = self._env.get_template(FRAGMENT_TEMPLATE)
            text = template.render(
                fragment=fragment,
                state=fragment.state,
                entry=fragment.entry,
                mapping=fragment.mapping,
                next_op=fragment.next_op,
            )
        except TemplateError as e:
            raise RenderError(f"Template rendering failed for {fragment.type_name}: {e}", dialect=self._dialect) from e

        self._log.log_render(fragment.type_name, self._dialect, len(text))
        return text


def create_printer(dialect: str = "rust", template_dir: Optional[str] = None) -> JinjaFragmentPrinter:
    """Create a fragment printer for a target dialect."""
    return JinjaFragmentPrinter(dialect, template_dir)
