"""
Unit tests for naming strategies and identifier validation.
"""

import pytest

from enumerant.codegen import PrefixNamingStrategy, validate_identifier, validate_visibility, DEFAULT_ITERATOR_PREFIX
from enumerant.codegen.naming import is_identifier
from enumerant.utils.exceptions import ConfigurationError, DescriptorError


class TestPrefixNamingStrategy:
    """Test iterator name derivation."""

    def test_default_prefix(self):
        naming = PrefixNamingStrategy()
        assert naming.prefix == DEFAULT_ITERATOR_PREFIX
        assert naming.iterator_name("Test") == "_EnumIterator_Test"

    def test_deterministic(self):
        naming = PrefixNamingStrategy()
        assert naming.iterator_name("Color") == naming.iterator_name("Color")

    def test_distinct_types_get_distinct_names(self):
        naming = PrefixNamingStrategy()
        assert naming.iterator_name("A") != naming.iterator_name("B")

    def test_custom_prefix(self):
        naming = PrefixNamingStrategy("__Variants")
        assert naming.iterator_name("Shape") == "__VariantsShape"

    @pytest.mark.parametrize("prefix", ["", "1abc", "has space", "dash-ed"])
    def test_invalid_prefix_rejected(self, prefix):
        with pytest.raises(ConfigurationError):
            PrefixNamingStrategy(prefix)

    def test_repr(self):
        assert "_EnumIterator_" in repr(PrefixNamingStrategy())


class TestIdentifierValidation:
    """Test identifier checks used by the descriptor loader."""

    @pytest.mark.parametrize("name", ["A", "_hidden", "snake_case", "Camel2"])
    def test_valid(self, name):
        assert is_identifier(name)
        assert validate_identifier(name) == name

    @pytest.mark.parametrize("name", ["", "2fast", "with space", "a.b", None, 3])
    def test_invalid(self, name):
        with pytest.raises(DescriptorError):
            validate_identifier(name)

    def test_error_carries_type_name(self):
        with pytest.raises(DescriptorError) as exc_info:
            validate_identifier("bad name", type_name="Test")
        assert exc_info.value.type_name == "Test"
        assert "type_name=Test" in str(exc_info.value)


class TestVisibilityValidation:
    """Test visibility qualifiers accepted for the owner type."""

    @pytest.mark.parametrize("visibility", ["", "pub", "pub(crate)", "pub(super)", "pub(self)", "pub(in crate::a::b)"])
    def test_valid(self, visibility):
        assert validate_visibility(visibility) == visibility

    def test_whitespace_normalized(self):
        assert validate_visibility("  pub(in  crate::a) ") == "pub(in crate::a)"

    @pytest.mark.parametrize("visibility", ["public", "pub(everyone)", "pub crate", "pub(in )", None])
    def test_invalid(self, visibility):
        with pytest.raises(DescriptorError):
            validate_visibility(visibility, type_name="Test")
