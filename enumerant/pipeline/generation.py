"""
Batch Generation Pipeline

Runs the generator and a printer over every annotated type of a build.
A type that is not a sum type fails on its own; the remaining types are
still generated unless the pipeline is asked to fail fast.
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from ..codegen.generator import EnumerationGenerator
from ..codegen.templates import create_printer
from ..codegen.types import FragmentPrinter, GeneratedFragment, TypeDescriptor
from ..utils.exceptions import InputShapeError
from ..utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class TypeFailure:
    """A type whose generation was rejected."""
    type_name: str
    error: InputShapeError

    @property
    def message(self) -> str:
        return str(self.error)


@dataclass(frozen=True)
class GeneratedOutput:
    """Fragment and printed text of one generated type."""
    type_name: str
    fragment: GeneratedFragment
    text: str


@dataclass
class PipelineResult:
    """
    Printed outputs and failures of one pipeline run, in input order.

    Types sharing a name (for example the same name declared in two
    modules) each keep their own entry.
    """
    outputs: List[GeneratedOutput] = field(default_factory=list)
    failures: List[TypeFailure] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return not self.failures

    @property
    def type_names(self) -> List[str]:
        return [output.type_name for output in self.outputs]

    def outputs_for(self, type_name: str) -> List[GeneratedOutput]:
        """All outputs generated for types named ``type_name``."""
        return [output for output in self.outputs if output.type_name == type_name]

    def render(self, separator: str = "\n\n") -> str:
        """Join all printed outputs."""
        if not self.outputs:
            return ""
        return separator.join(output.text.rstrip("\n") for output in self.outputs) + "\n"


class GenerationPipeline:
    """Generates and prints iterator code for many types."""

    def __init__(
        self,
        generator: Optional[EnumerationGenerator] = None,
        printer: Optional[FragmentPrinter] = None,
        fail_fast: bool = False,
    ):
        """
        Initialize the pipeline.

        Args:
            generator: Generator to use; a default one when omitted
            printer: Printer to use; defaults to the generator's target dialect
            fail_fast: Re-raise the first InputShapeError instead of recording it
        """
        self.generator = generator or EnumerationGenerator()
        self.printer = printer or create_printer(self.generator.config.target_dialect)
        self.fail_fast = fail_fast

    def run(self, descriptors: Iterable[TypeDescriptor]) -> PipelineResult:
        """
        Generate code for each descriptor independently.

        Args:
            descriptors: Type descriptors in build order

        Returns:
            PipelineResult with one entry per processed type

        Raises:
            InputShapeError: Only when ``fail_fast`` is set
        """
        result = PipelineResult()

        for descriptor in descriptors:
            try:
                fragment = self.generator.generate(descriptor)
            except InputShapeError as e:
                if self.fail_fast:
                    raise
                logger.warning(f"Skipping {descriptor.name}: {e}")
                result.failures.append(TypeFailure(descriptor.name, e))
                continue

            text = self.printer.render(fragment)
            result.outputs.append(GeneratedOutput(descriptor.name, fragment, text))

        logger.info(
            f"Pipeline finished: {len(result.outputs)} generated, {len(result.failures)} failed"
        )
        return result


def generate_all(
    descriptors: Iterable[TypeDescriptor],
    dialect: str = "rust",
    fail_fast: bool = False,
) -> PipelineResult:
    """Run a default pipeline for the given dialect."""
    printer = create_printer(dialect)
    return GenerationPipeline(printer=printer, fail_fast=fail_fast).run(descriptors)
