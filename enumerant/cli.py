"""
Command-line entry point.

``enumerant-gen`` reads type descriptors from a JSON or YAML document and
writes the generated iterator code for every sum type in it.
"""

import argparse
import sys
from typing import List, Optional

from .codegen.config import SUPPORTED_DIALECTS, GenerationConfig
from .codegen.descriptors import load_descriptors
from .codegen.generator import EnumerationGenerator
from .codegen.templates import create_printer
from .config import EnumerantConfig, LoggingConfig
from .pipeline import GenerationPipeline
from .utils.exceptions import EnumerantError, InputShapeError
from .utils.logging import setup_logging

EXIT_OK = 0
EXIT_TYPE_FAILED = 1
EXIT_BAD_INPUT = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="enumerant-gen",
        description="Generate variant iterators for sum types",
    )
    parser.add_argument("descriptors", help="JSON or YAML file with type descriptors")
    parser.add_argument("--target", choices=SUPPORTED_DIALECTS, help="Target dialect (default from config)")
    parser.add_argument("--out", help="Write generated code to this file instead of stdout")
    parser.add_argument("--config", help="Configuration file (JSON or YAML)")
    parser.add_argument("--fail-fast", action="store_true", help="Stop at the first type that is not a sum type")
    parser.add_argument("--log-level", help="Logging level (DEBUG, INFO, WARNING, ERROR)")
    return parser


def _configure_logging(args: argparse.Namespace, settings: LoggingConfig) -> None:
    level = args.log_level or settings.level
    log_file = settings.log_file if settings.enable_file_logging else None
    setup_logging(level=level, log_file=log_file)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the enumerant-gen command."""
    args = build_parser().parse_args(argv)

    try:
        config = EnumerantConfig(args.config)
        _configure_logging(args, config.logging)

        generation: GenerationConfig = config.generation
        dialect = args.target or generation.target_dialect
        pipeline = GenerationPipeline(
            generator=EnumerationGenerator(generation),
            printer=create_printer(dialect),
            fail_fast=args.fail_fast,
        )
        descriptors = load_descriptors(args.descriptors)
        result = pipeline.run(descriptors)
    except InputShapeError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_TYPE_FAILED
    except (EnumerantError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT

    text = result.render()
    if args.out:
        with open(args.out, "w", encoding="utf-8") as f:
            f.write(text)
    else:
        sys.stdout.write(text)

    for failure in result.failures:
        print(f"error: {failure.type_name}: {failure.message}", file=sys.stderr)

    return EXIT_OK if result.succeeded else EXIT_TYPE_FAILED


if __name__ == '__main__':
    sys.exit(main())
