"""
Directive models

A directive is an indented control line of the form ``<<payload>>``. It
never reaches either output stream; it only changes the classifier's mode
or code target.
"""

from enum import Enum
from dataclasses import dataclass


EXAMPLE_MARKER = "!--"
BOILERPLATE_MARKER = "#--"


class DirectiveKind(Enum):
    """Effect a directive has on the classifier"""
    EXAMPLE = "example"                # <<!-->>
    BOILERPLATE = "boilerplate"        # <<#-->>
    DEFAULT_TARGET = "default_target"  # <<>>
    TARGET = "target"                  # <<path/to/file.ext>>


@dataclass(frozen=True)
class Directive:
    """
    A parsed directive

    Attributes:
        payload: Text between ``<<`` and ``>>``, trimmed of whitespace

    Example:
        "\\t<< src/main.c >>" parses to Directive(payload="src/main.c")
    """
    payload: str

    @property
    def kind(self) -> DirectiveKind:
        if self.payload == EXAMPLE_MARKER:
            return DirectiveKind.EXAMPLE
        if self.payload == BOILERPLATE_MARKER:
            return DirectiveKind.BOILERPLATE
        if self.payload == "":
            return DirectiveKind.DEFAULT_TARGET
        return DirectiveKind.TARGET
