"""
mdweb - Literate programming for indented-code Markdown

Splits literate documents into code targets and documentation.
"""

__version__ = "1.0.0"

from .classifier import LineClassifier, line_classify
from .directives import directive_parse, directive_resolve, line_unindent
from .document import document_classify, document_read, documents_find
from .writer import OutputTable, OutputError, target_resolve
from .log import LOG, state_connectToLogger

__all__ = [
    "LineClassifier",
    "line_classify",
    "directive_parse",
    "directive_resolve",
    "line_unindent",
    "document_classify",
    "document_read",
    "documents_find",
    "OutputTable",
    "OutputError",
    "target_resolve",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
