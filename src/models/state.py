"""
Program state model and pipeline helper

Defines ProgramState dataclass for the functional pipeline pattern and
the pipeline() helper for composing transformation stages.
"""

import dataclasses
from pathlib import Path
from argparse import Namespace
from typing import Any, Optional, Type, TypeVar, List, Dict, Callable
from dataclasses import dataclass, field


PS = TypeVar("PS", bound="ProgramState")


@dataclass
class ProgramState:
    """
    Central state container for the tangle/weave pipeline (state bus pattern).

    Each stage of the pipeline receives a ProgramState, copies it, and adds
    the fields it is responsible for.

    Pipeline stages and their state additions:
        - Initial: inputdir, outputdir, verbosity, pattern, tangle, weave
        - env_check: inputDocuments, envOK
        - documents_process: processResult
        - results_report: (no additions, terminal stage)

    Attributes:
        inputdir: Directory containing literate documents
        outputdir: Directory receiving code and documentation targets
        verbosity: Logging verbosity level (1-3)
        pattern: Glob patterns selecting documents (relative to inputdir)
        tangle: Write code targets
        weave: Write documentation targets
        envOK: Environment validation passed
        inputDocuments: Documents selected by the patterns, in processing order
        processResult: Processing summary (documents, lines, outputs)
    """

    # CLI arguments
    inputdir: Optional[Path] = field(default=None)
    outputdir: Optional[Path] = field(default=None)
    verbosity: int = field(default=1)
    pattern: Optional[List[str]] = field(default=None)
    tangle: bool = field(default=False)
    weave: bool = field(default=False)

    # Pipeline state
    envOK: bool = field(default=False)
    inputDocuments: List[Path] = field(default_factory=list)
    processResult: Optional[Dict[str, Any]] = field(default=None)

    @classmethod
    def state_createFromNamespace(
        cls: Type["ProgramState"], options: Namespace, inputdir: Path, outputdir: Path
    ) -> "ProgramState":
        """
        Create ProgramState from argparse Namespace and directory paths.

        Args:
            options: Parsed CLI arguments (pattern, tangle, weave, verbosity)
            inputdir: Directory containing literate documents
            outputdir: Directory for generated targets

        Returns:
            ProgramState instance with all CLI options as attributes
        """
        options_dict = vars(options)

        # Only keep options that are ProgramState fields
        valid_fields = {f.name for f in dataclasses.fields(cls)}
        filtered_options = {k: v for k, v in options_dict.items() if k in valid_fields}

        merged_args = {**filtered_options, "inputdir": inputdir, "outputdir": outputdir}
        return cls(**merged_args)

    def copy(self: PS) -> PS:
        """
        Creates a shallow copy of the ProgramState instance.

        Returns:
            A new ProgramState instance.
        """
        return type(self)(**self.__dict__)


def pipeline(
    initial_state: ProgramState, *stages: Callable[[ProgramState], ProgramState]
) -> ProgramState:
    """
    Execute a functional pipeline of state transformations.

    Each stage is a function (ProgramState) -> ProgramState that receives
    the output of the previous stage and returns a new state.

    Example:
        final_state = pipeline(
            initial_state,
            env_check,
            documents_process,
            results_report
        )

    This is equivalent to:
        results_report(documents_process(env_check(initial_state)))
    """
    from functools import reduce
    return reduce(lambda state, stage: stage(state), stages, initial_state)
