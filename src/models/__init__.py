"""
Models package for mdweb

Contains data structures and type definitions for the classifier and the
tangle/weave pipeline.
"""

from .state import ProgramState, pipeline
from .classifier import LineMode, ClassifiedLine, ProcessorState
from .directives import Directive, DirectiveKind, EXAMPLE_MARKER, BOILERPLATE_MARKER

__all__ = [
    "ProgramState",
    "pipeline",
    "LineMode",
    "ClassifiedLine",
    "ProcessorState",
    "Directive",
    "DirectiveKind",
    "EXAMPLE_MARKER",
    "BOILERPLATE_MARKER",
]
