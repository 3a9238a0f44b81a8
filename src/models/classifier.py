"""
Classifier data models

Line classes, the per-line record emitted by the classifier, and the
per-document processor state threaded through every classification call.
"""

from enum import Enum
from dataclasses import dataclass, field
from pathlib import PurePath
from typing import Optional, Type, TypeVar


PST = TypeVar("PST", bound="ProcessorState")


class LineMode(Enum):
    """
    Classification mode of the line classifier

    The mode decides where the next indented or blank line is routed.
    """
    TEXT = "text"                # prose, documentation only
    CODE = "code"                # code and documentation
    BOILERPLATE = "boilerplate"  # code only
    EXAMPLE = "example"          # documentation only, even when indented


@dataclass
class ClassifiedLine:
    """
    One classified input line

    Attributes:
        code: Line with its leading indent stripped, if it feeds a code target
        codeTarget: Name of the code target receiving ``code``
        text: Raw original line, if it feeds the documentation target
        textTarget: Name of the documentation target receiving ``text``

    Example:
        For "\\tint x = 1;" in Code mode of foo.cpp.md:
        ClassifiedLine(
            code="int x = 1;", codeTarget="foo.cpp",
            text="\\tint x = 1;", textTarget="foo.md"
        )
    """
    code: Optional[str] = None
    codeTarget: Optional[str] = None
    text: Optional[str] = None
    textTarget: Optional[str] = None

    def code_has(self) -> bool:
        """True if this line is routed to a code target"""
        return self.codeTarget is not None

    def text_has(self) -> bool:
        """True if this line is routed to the documentation target"""
        return self.textTarget is not None


def extension_remove(filename: str) -> str:
    """Base name of ``filename`` with its final extension removed"""
    name = PurePath(filename).name
    suffix = PurePath(name).suffix
    return name[: len(name) - len(suffix)]


def extensions_remove(filename: str) -> str:
    """Base name of ``filename`` with every extension removed"""
    previous, current = filename, extension_remove(filename)
    while previous != current:
        previous, current = current, extension_remove(current)
    return current


@dataclass
class ProcessorState:
    """
    Mutable state of one line classifier

    Created once per document and owned by a single classifier; never shared
    between documents.

    Attributes:
        currentTarget: Code target currently receiving code lines
        defaultCodeTarget: Document name minus its final extension
        defaultTextTarget: Document name minus all extensions, plus the
                           documentation extension
        mode: Current classification mode
    """
    currentTarget: str
    defaultCodeTarget: str
    defaultTextTarget: str
    mode: LineMode = field(default=LineMode.TEXT)

    @classmethod
    def state_createForDocument(
        cls: Type[PST], name: str, text_extension: Optional[str] = None
    ) -> PST:
        """
        Create the initial state for a document.

        Args:
            name: Document name or path (only the base name is used)
            text_extension: Documentation extension; defaults to the
                            configured ``text_extension``

        Returns:
            ProcessorState in Text mode targeting the default code file

        Example:
            >>> state = ProcessorState.state_createForDocument("foo.cpp.md")
            >>> state.defaultCodeTarget, state.defaultTextTarget
            ('foo.cpp', 'foo.md')
        """
        if text_extension is None:
            from ..config import appsettings
            text_extension = appsettings.text_extension

        code_target = extension_remove(name)
        return cls(
            currentTarget=code_target,
            defaultCodeTarget=code_target,
            defaultTextTarget=extensions_remove(name) + text_extension,
        )

    def copy(self: PST) -> PST:
        """Shallow copy of this state"""
        return type(self)(**self.__dict__)
