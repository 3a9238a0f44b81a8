"""
Directive parsing and resolution

A directive is an indented line whose remainder is ``<<payload>>``,
optionally followed by whitespace. Directives are consumed by the
classifier and never written to any output.

    \t<<src/main.c>>    code from here on goes to src/main.c
    \t<<>>              code goes back to the document's default target
    \t<<#-->>           boilerplate: code output only
    \t<<!-->>           example: documentation only
"""

import re
from typing import Optional, Tuple

from ..models.classifier import LineMode, ProcessorState
from ..models.directives import Directive, DirectiveKind
from .log import LOG


DIRECTIVE_PATTERN = re.compile(r"^<<(.*)>>\s*$")


def line_unindent(line: str) -> Tuple[str, bool]:
    """
    Strip a single code indent from a line.

    The indent is one tab, or exactly four spaces. Longer runs of spaces
    lose only the first four.

    Returns:
        (unindented line, True) if an indent was stripped, else (line, False)

    Example:
        >>> line_unindent("\\tx = 1")
        ('x = 1', True)
        >>> line_unindent("      x = 1")
        ('  x = 1', True)
        >>> line_unindent("  x = 1")
        ('  x = 1', False)
    """
    if line.startswith("\t"):
        return line[1:], True
    if line.startswith("    "):
        return line[4:], True
    return line, False


def directive_parse(line: str) -> Optional[Directive]:
    """
    Parse a line as a directive.

    Args:
        line: Raw input line; a trailing line ending is allowed

    Returns:
        Directive with its trimmed payload, or None if the line is not
        an indented ``<<...>>`` line
    """
    remainder, indented = line_unindent(line)
    if not indented:
        return None

    match = DIRECTIVE_PATTERN.match(remainder)
    if match is None:
        return None

    return Directive(payload=match.group(1).strip())


def directive_resolve(inputstate: ProcessorState, directive: Directive) -> ProcessorState:
    """
    Apply a directive to the classifier state.

    ``!--`` enters Example mode and ``#--`` enters Boilerplate mode. Every
    other directive enters Code mode: an empty payload restores the default
    code target, anything else becomes the new code target.

    Args:
        inputstate: State before the directive line
        directive: Parsed directive

    Returns:
        New ProcessorState; ``inputstate`` is left untouched
    """
    state = inputstate.copy()
    kind = directive.kind

    if kind is DirectiveKind.EXAMPLE:
        state.mode = LineMode.EXAMPLE
    elif kind is DirectiveKind.BOILERPLATE:
        state.mode = LineMode.BOILERPLATE
    elif kind is DirectiveKind.DEFAULT_TARGET:
        state.mode = LineMode.CODE
        state.currentTarget = state.defaultCodeTarget
    else:
        state.mode = LineMode.CODE
        state.currentTarget = directive.payload

    LOG(f"Directive <<{directive.payload}>>: mode={state.mode.value} target={state.currentTarget}", level=3)
    return state
