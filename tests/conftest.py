"""
Pytest configuration and shared fixtures for Enumerant tests.

This module provides common descriptors, generators, printers and
helpers for executing generated Python code.
"""

import pytest
import re
import tempfile
import shutil
from dataclasses import dataclass

from enumerant.codegen import (
    TypeDescriptor,
    TypeKind,
    VariantDescriptor,
    NoPayload,
    Positional,
    Named,
    TypeRef,
    EnumerationGenerator,
    create_default_config,
    create_printer,
)


@pytest.fixture(scope="session")
def temp_test_dir():
    """Create temporary directory for test artifacts."""
    temp_dir = tempfile.mkdtemp(prefix="enumerant_test_")
    yield temp_dir
    shutil.rmtree(temp_dir, ignore_errors=True)


# Descriptor fixtures
def make_descriptor(name, variants, kind=TypeKind.SUM):
    return TypeDescriptor(name=name, variants=tuple(variants), kind=kind)


@pytest.fixture
def rust_test_descriptor():
    """Test { A, B, C(u32, u32), D { a: String, b: bool } }"""
    return make_descriptor("Test", [
        VariantDescriptor("A", NoPayload()),
        VariantDescriptor("B", NoPayload()),
        VariantDescriptor("C", Positional((TypeRef("u32"), TypeRef("u32")))),
        VariantDescriptor("D", Named((("a", TypeRef("String")), ("b", TypeRef("bool"))))),
    ])


@pytest.fixture
def python_test_descriptor():
    """The same Test type with Python field types."""
    return make_descriptor("Test", [
        VariantDescriptor("A", NoPayload()),
        VariantDescriptor("B", NoPayload()),
        VariantDescriptor("C", Positional((TypeRef("int"), TypeRef("int")))),
        VariantDescriptor("D", Named((("a", TypeRef("str")), ("b", TypeRef("bool"))))),
    ])


@pytest.fixture
def record_descriptor():
    """A single-shape record, which must be rejected."""
    return make_descriptor("Point", [], kind=TypeKind.RECORD)


# Component fixtures
@pytest.fixture
def generator():
    """Create an EnumerationGenerator with default configuration."""
    return EnumerationGenerator(create_default_config())


@pytest.fixture
def rust_printer():
    return create_printer("rust")


@pytest.fixture
def python_printer():
    return create_printer("python")


# Python runtime fixtures
def make_python_test_type():
    """Python rendition of the Test sum type: one dataclass per variant."""

    class Test:
        @dataclass
        class A:
            pass

        @dataclass
        class B:
            pass

        @dataclass
        class C:
            first: int
            second: int

        @dataclass
        class D:
            a: str
            b: bool

    return Test


@pytest.fixture
def python_test_type():
    return make_python_test_type()


def load_generated(code, **namespace):
    """Execute generated Python code with the given names in scope."""
    exec(compile(code, "<enumerant>", "exec"), namespace)
    return namespace


def assert_code_contains_pattern(code: str, pattern: str, description: str = ""):
    """
    Assert that generated code contains a specific pattern.

    Args:
        code: Generated source text
        pattern: Regex pattern to match
        description: Description of what the pattern checks
    """
    if not re.search(pattern, code, re.MULTILINE):
        pytest.fail(f"Pattern check failed: {description}\nPattern: {pattern}\nCode:\n{code}")


def pytest_collection_modifyitems(config, items):
    """Add markers based on test path and skip tests missing external tools."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
        elif "filecheck" in str(item.fspath):
            item.add_marker(pytest.mark.filecheck)

        if "requires_rustc" in item.keywords and not shutil.which("rustc"):
            item.add_marker(pytest.mark.skip(reason="rustc not available"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests for individual components"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests for complete workflows"
    )
    config.addinivalue_line(
        "markers", "filecheck: FileCheck-style output validation tests"
    )
    config.addinivalue_line(
        "markers", "requires_rustc: Tests that compile generated Rust with rustc"
    )
