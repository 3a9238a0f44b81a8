"""
Literate document sources

Reads documents line by line and feeds them through a LineClassifier.
Line endings are kept so that the emitted code and text fields can be
written back verbatim.
"""

import glob
from pathlib import Path
from typing import Iterable, Iterator, List, Optional

from ..config import appsettings
from ..models.classifier import ClassifiedLine
from .classifier import LineClassifier
from .log import LOG


def document_read(path: Path, encoding: Optional[str] = None) -> Iterator[str]:
    """
    Lazily yield the lines of a document, line endings included.

    Lines end at a newline only; a lone carriage return stays inside
    its line.

    Raises:
        OSError: If the document cannot be opened or read
        UnicodeDecodeError: If a line is not valid in ``encoding``
    """
    encoding = encoding or appsettings.encoding
    with open(path, "rb") as f:
        for raw in f:
            yield raw.decode(encoding)


def document_classify(path: Path, encoding: Optional[str] = None) -> Iterator[ClassifiedLine]:
    """
    Classify every line of a document.

    The document's name determines its default code and documentation
    targets. Records are produced lazily, in document order.
    """
    classifier = LineClassifier(str(path))
    LOG(
        f"Classifying {classifier.name} (code: {classifier.state.defaultCodeTarget}, "
        f"text: {classifier.state.defaultTextTarget})",
        level=2,
    )
    return classifier.lines_classify(document_read(path, encoding))


def documents_find(inputdir: Path, patterns: Iterable[str]) -> List[Path]:
    """
    Expand glob patterns into a list of documents.

    Patterns are relative to ``inputdir`` unless absolute, and ``**``
    matches across directories. Patterns are expanded in the order given;
    matches within a pattern are sorted, and a document matched by several
    patterns is listed once.

    Args:
        inputdir: Directory relative patterns are resolved against
        patterns: Glob patterns

    Returns:
        Matching regular files
    """
    documents: List[Path] = []
    seen = set()

    for pattern in patterns:
        matches = sorted(glob.glob(pattern, root_dir=inputdir, recursive=True))
        files = [inputdir / match for match in matches if (inputdir / match).is_file()]
        if not files:
            LOG(f"Pattern '{pattern}' matched no documents", level=1)
            continue

        for document in files:
            key = document.resolve()
            if key in seen:
                continue
            seen.add(key)
            documents.append(document)

    return documents
