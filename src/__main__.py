#!/usr/bin/env python3
"""
mdweb - Literate programming for indented-code Markdown

Reads literate documents, prose interleaved with indented code blocks, and
splits them into code files ("tangle") and documentation ("weave").

As an aside, this codebase leverages the ChRIS "plugin" concept/pattern as
general purpose python app development framework.

Document conventions:
    - Indented lines (one tab or four spaces) are code
    - Blank lines inside a code block belong to the block
    - An indented <<file.ext>> line sends the following code to file.ext
    - An indented <<>> line returns to the default code target
    - <<#-->> marks boilerplate (code only), <<!-->> marks examples (docs only)

Default targets are derived from the document name: foo.cpp.md tangles to
foo.cpp and weaves to foo.md. Relative targets are resolved against the
document's directory, mirrored from inputdir into outputdir.

Usage:
    mdweb inputdir/ outputdir/ [--pattern GLOB ...] [--tangle] [--weave]

Examples:
    # Tangle and weave every Markdown document under inputdir
    mdweb docs/ build/

    # Only write code, from selected documents
    mdweb docs/ src/ --pattern '*.c.md' --pattern 'lib/**/*.h.md' --tangle

    # Verbose output
    mdweb docs/ build/ -vv
"""

import sys
from pathlib import Path
from argparse import ArgumentParser, Namespace, ArgumentDefaultsHelpFormatter

from chris_plugin import chris_plugin
from .config import appsettings
from .lib import (
    OutputTable,
    OutputError,
    document_classify,
    documents_find,
    __version__,
    LOG,
    state_connectToLogger,
)
from .models import ProgramState, pipeline


DISPLAY_TITLE = r"""
               _               _
  _ __ ___   __| |_      _____| |__
 | '_ ` _ \ / _` \ \ /\ / / _ \ '_ \
 | | | | | | (_| |\ V  V /  __/ |_) |
 |_| |_| |_|\__,_| \_/\_/ \___|_.__/

  Literate programming for indented-code Markdown
"""

parser = ArgumentParser(
    description="mdweb - tangle code and weave documentation from literate documents",
    formatter_class=ArgumentDefaultsHelpFormatter,
)

parser.add_argument(
    "--pattern",
    action="append",
    default=None,
    type=str,
    help=f"Glob selecting documents, relative to inputdir (repeatable; default '{appsettings.default_pattern}')",
)

parser.add_argument(
    "--tangle",
    action="store_true",
    help="Write code targets (if neither --tangle nor --weave is given, both are done)",
)

parser.add_argument(
    "--weave",
    action="store_true",
    help="Write documentation targets (if neither --tangle nor --weave is given, both are done)",
)

parser.add_argument(
    "-v",
    "--verbosity",
    action="count",
    default=1,
    help="Increase output verbosity (can be repeated: -v, -vv)",
)

parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")


def env_check(inputstate: ProgramState) -> ProgramState:
    """
    Validate the environment and select the documents to process.

    Args:
        inputstate: Initial program state with CLI options

    Returns:
        ProgramState with added fields:
            - pattern: Patterns in effect (settings default if none given)
            - tangle/weave: Both True if neither was requested
            - inputDocuments: Documents matched by the patterns
            - envOK: True if environment is valid

    Exits:
        1 if inputdir does not exist or outputdir cannot be created
    """
    state = inputstate.copy()

    if state.verbosity >= 2:
        LOG(DISPLAY_TITLE, level=2)

    LOG("Checking environment...", level=2)

    if state.inputdir is None or not state.inputdir.is_dir():
        print(f"Error: Input directory not found: {state.inputdir}", file=sys.stderr)
        state.envOK = False
        sys.exit(1)

    try:
        state.outputdir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        print(f"Error: Cannot create output directory {state.outputdir}: {e}", file=sys.stderr)
        state.envOK = False
        sys.exit(1)
    LOG(f"Output directory: {state.outputdir}", level=2)

    if not state.tangle and not state.weave:
        state.tangle = state.weave = True
    LOG(f"Tangle: {state.tangle}  Weave: {state.weave}", level=2)

    state.pattern = state.pattern or [appsettings.default_pattern]
    state.inputDocuments = documents_find(state.inputdir, state.pattern)
    LOG(f"Selected {len(state.inputDocuments)} document(s)", level=2)

    state.envOK = True
    return state


def documents_process(inputstate: ProgramState) -> ProgramState:
    """
    Classify every selected document and write its targets.

    Documents are processed in order, each with its own classifier; all of
    them share one output table so several documents can append to the same
    target.

    Args:
        inputstate: Program state with inputDocuments selected

    Returns:
        ProgramState with added field:
            - processResult: Dict containing:
                - status: bool
                - documents: int (documents processed)
                - lines: int (classified lines)
                - outputs: List[str] (targets written)

    Exits:
        1 on the first read or write failure
    """
    state = inputstate.copy()

    line_count = 0
    try:
        with OutputTable(state.inputdir, state.outputdir) as table:
            for document in state.inputDocuments:
                LOG(f"Processing {document}", level=1)
                for record in document_classify(document):
                    table.record_write(record, document, tangle=state.tangle, weave=state.weave)
                    line_count += 1
            outputs = [str(path) for path in table.paths()]
    except OutputError as e:
        print(f"Output error: {e}", file=sys.stderr)
        sys.exit(1)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error reading document: {e}", file=sys.stderr)
        sys.exit(1)

    state.processResult = {
        'status': True,
        'documents': len(state.inputDocuments),
        'lines': line_count,
        'outputs': outputs,
    }
    return state


def results_report(inputstate: ProgramState) -> ProgramState:
    """
    Display a summary of the run.

    Args:
        inputstate: Program state with processResult populated

    Returns:
        ProgramState unchanged (terminal pipeline stage)

    Exits:
        1 if processResult is None
    """
    state: ProgramState = inputstate.copy()
    if not state.processResult:
        print("Error: Processing failed", file=sys.stderr)
        sys.exit(1)

    LOG(f"Documents: {state.processResult['documents']}", level=1)
    LOG(f"Lines:     {state.processResult['lines']}", level=2)
    LOG(f"Targets:   {len(state.processResult['outputs'])}", level=1)
    for output in state.processResult['outputs']:
        LOG(f"  {output}", level=2)
    return state


@chris_plugin(
    parser=parser,
    title="mdweb - literate programming tangle/weave",
    category="Utility",
    min_memory_limit="100Mi",
    min_cpu_limit="500m",
)
def main(options: Namespace, inputdir: Path, outputdir: Path):
    """
    Main entry point - tangle and/or weave the selected literate documents.

    Orchestrates the pipeline:
        1. env_check: Validate directories and expand patterns
        2. documents_process: Classify documents and write targets
        3. results_report: Summarize the run

    Args:
        options: CLI arguments from argparse
            - pattern: Optional[List[str]] - document globs
            - tangle: bool - write code targets
            - weave: bool - write documentation targets
            - verbosity: int - logging verbosity (1-3)
        inputdir: Directory containing literate documents
        outputdir: Directory receiving the generated targets
    """

    state: ProgramState = ProgramState.state_createFromNamespace(
        options=options, inputdir=inputdir, outputdir=outputdir
    )

    state_connectToLogger(state)

    pipeline(state, env_check, documents_process, results_report)


if __name__ == "__main__":
    main()  # type: ignore  # @chris_plugin decorator transforms signature
