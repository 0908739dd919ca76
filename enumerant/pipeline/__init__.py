"""
Generation Pipeline Module

Batch generation over every annotated type of a build.
"""

from .generation import (
    GenerationPipeline, GeneratedOutput, PipelineResult, TypeFailure, generate_all
)

__all__ = [
    'GenerationPipeline',
    'GeneratedOutput',
    'PipelineResult',
    'TypeFailure',
    'generate_all'
]
