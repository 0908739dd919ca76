"""
Integration tests for the batch generation pipeline.
"""

import pytest

from enumerant.codegen import (
    EnumerationGenerator,
    GenerationConfig,
    TypeDescriptor,
    TypeKind,
    VariantDescriptor,
    create_printer,
)
from enumerant.pipeline import GenerationPipeline, PipelineResult, generate_all
from enumerant.utils.exceptions import InputShapeError


@pytest.fixture
def mixed_descriptors(rust_test_descriptor, record_descriptor):
    color = TypeDescriptor("Color", (VariantDescriptor("Red"), VariantDescriptor("Green")))
    return [rust_test_descriptor, record_descriptor, color]


class TestGenerationPipeline:
    """Failure of one type does not stop the others."""

    def test_failure_is_isolated(self, mixed_descriptors):
        result = GenerationPipeline().run(mixed_descriptors)

        assert result.type_names == ["Test", "Color"]
        assert not result.succeeded
        assert len(result.failures) == 1
        failure = result.failures[0]
        assert failure.type_name == "Point"
        assert failure.message == "EnumIterator is only defined for sum types, not records"
        assert result.outputs_for("Point") == []

    def test_fail_fast(self, mixed_descriptors):
        pipeline = GenerationPipeline(fail_fast=True)
        with pytest.raises(InputShapeError):
            pipeline.run(mixed_descriptors)

    def test_all_succeed(self, rust_test_descriptor):
        result = GenerationPipeline().run([rust_test_descriptor])
        assert result.succeeded
        assert result.outputs_for("Test")[0].fragment.variant_count == 4

    def test_printer_follows_generator_dialect(self, python_test_descriptor):
        generator = EnumerationGenerator(GenerationConfig(target_dialect="python"))
        pipeline = GenerationPipeline(generator=generator)
        assert pipeline.printer.dialect == "python"
        output = pipeline.run([python_test_descriptor]).outputs[0].text
        assert "class _EnumIterator_Test:" in output

    def test_explicit_printer(self, rust_test_descriptor):
        pipeline = GenerationPipeline(printer=create_printer("python"))
        assert "def __next__(self):" in pipeline.run([rust_test_descriptor]).outputs[0].text

    def test_render_joins_outputs(self, mixed_descriptors):
        text = generate_all(mixed_descriptors).render()
        assert text.count("\nstruct _EnumIterator_") == 2
        assert text.endswith("}\n")

    def test_empty_result_renders_nothing(self):
        assert PipelineResult().render() == ""

    def test_generate_all_python(self, python_test_descriptor):
        result = generate_all([python_test_descriptor], dialect="python")
        compile(result.render(), "<generated>", "exec")

    def test_union_rejected(self):
        raw = TypeDescriptor("Raw", (), kind=TypeKind.UNION)
        result = generate_all([raw])
        assert result.failures[0].error.observed_kind == "unions"

    def test_types_sharing_a_name_are_all_kept(self):
        first = TypeDescriptor("T", (VariantDescriptor("A"),))
        second = TypeDescriptor("T", (VariantDescriptor("X"), VariantDescriptor("Y")))
        result = GenerationPipeline().run([first, second])

        assert result.type_names == ["T", "T"]
        assert [o.fragment.variant_count for o in result.outputs_for("T")] == [1, 2]
        text = result.render()
        assert "T::A" in text
        assert "T::X" in text
        assert text.index("T::A") < text.index("T::X")
