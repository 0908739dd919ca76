"""
Template Rendering System.

This module prints generated fragments using Jinja2 templates.
It includes:
- JinjaFragmentPrinter: Main printing engine
- ExpressionPrinter subclasses: per-dialect expression syntax
- create_printer: factory keyed by target dialect

Templates are organized by target dialect:
- rust/: struct + Iterator impl
- python/: class implementing the iterator protocol
"""

from .renderer import (
    ExpressionPrinter,
    RustExpressionPrinter,
    PythonExpressionPrinter,
    JinjaFragmentPrinter,
    create_printer,
)

__all__ = [
    "ExpressionPrinter",
    "RustExpressionPrinter",
    "PythonExpressionPrinter",
    "JinjaFragmentPrinter",
    "create_printer",
]
