"""
Line classifier for literate documents

Splits each line of a literate document into a code stream and/or a
documentation stream. The classifier is a four-state machine:

    TEXT         prose; an indented line starts a code run
    CODE         indented and blank lines go to both streams
    BOILERPLATE  indented and blank lines go to code only
    EXAMPLE      indented and blank lines go to documentation only

A non-blank, non-indented line always returns the machine to TEXT. Blank
lines continue the current run. BOILERPLATE and EXAMPLE are only entered
through directives (see ``directives.py``), which are resolved before any
other classification and never emitted.

Example:
    >>> classifier = LineClassifier("foo.cpp.md")
    >>> [r.code for r in classifier.lines_classify(["text", "\\tint x;"])]
    [None, 'int x;']
"""

from typing import Iterable, Iterator, Optional, Tuple

from ..models.classifier import ClassifiedLine, LineMode, ProcessorState
from .directives import directive_parse, directive_resolve, line_unindent


def record_code(state: ProcessorState, line: str, code_line: str) -> ClassifiedLine:
    """Record feeding both the code and documentation streams"""
    return ClassifiedLine(
        code=code_line,
        codeTarget=state.currentTarget,
        text=line,
        textTarget=state.defaultTextTarget,
    )


def record_boilerplate(state: ProcessorState, line: str, code_line: str) -> ClassifiedLine:
    """Record feeding the code stream only"""
    return ClassifiedLine(code=code_line, codeTarget=state.currentTarget)


def record_text(state: ProcessorState, line: str, code_line: str) -> ClassifiedLine:
    """Record feeding the documentation stream only"""
    return ClassifiedLine(text=line, textTarget=state.defaultTextTarget)


# emitter for an indented or blank line inside a run
RUN_EMITTERS = {
    LineMode.CODE: record_code,
    LineMode.BOILERPLATE: record_boilerplate,
    LineMode.EXAMPLE: record_text,
}


def line_classify(
    inputstate: ProcessorState, line: str
) -> Tuple[ProcessorState, Optional[ClassifiedLine]]:
    """
    Classify one line and advance the state machine.

    Args:
        inputstate: State after all previous lines of the document
        line: Raw line (a trailing line ending is allowed)

    Returns:
        (new state, record); record is None for directive lines
    """
    directive = directive_parse(line)
    if directive is not None:
        return directive_resolve(inputstate, directive), None

    code_line, is_code = line_unindent(line)
    is_blank = line.strip() == ""

    state = inputstate.copy()

    if state.mode is LineMode.TEXT:
        if is_code:
            state.mode = LineMode.CODE
            return state, record_code(state, line, code_line)
        return state, record_text(state, line, code_line)

    if is_code or is_blank:
        return state, RUN_EMITTERS[state.mode](state, line, code_line)

    state.mode = LineMode.TEXT
    return state, record_text(state, line, code_line)


class LineClassifier:
    """
    Classifier for a single literate document

    Owns the document's ProcessorState. Instances are not shared between
    documents; independent documents may be classified concurrently with
    separate instances.
    """

    def __init__(self, name: str, text_extension: Optional[str] = None) -> None:
        """
        Args:
            name: Document name or path, used to derive the default targets
            text_extension: Documentation extension (defaults to settings)
        """
        self.name = name
        self.state = ProcessorState.state_createForDocument(name, text_extension)

    def classify(self, line: str) -> Optional[ClassifiedLine]:
        """Classify one line, returning its record (None for directives)"""
        self.state, record = line_classify(self.state, line)
        return record

    def lines_classify(self, lines: Iterable[str]) -> Iterator[ClassifiedLine]:
        """
        Lazily classify a sequence of lines in order.

        Yields one ClassifiedLine per non-directive line. The generator is
        finite and single-use.
        """
        for line in lines:
            record = self.classify(line)
            if record is not None:
                yield record
