"""
mdweb - Literate programming for indented-code Markdown

Tangles code and weaves documentation out of literate documents.
"""

__version__ = "1.0.0"

from .lib import LineClassifier, OutputTable, LOG, state_connectToLogger
from .models import ClassifiedLine, LineMode, ProcessorState

__all__ = [
    "LineClassifier",
    "OutputTable",
    "ClassifiedLine",
    "LineMode",
    "ProcessorState",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
