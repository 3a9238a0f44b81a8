"""
Output table for code and documentation targets

Every destination is created (truncated) the first time a run writes to it
and appended to for the rest of the run, so several documents may route
code to the same target. Writes to one destination are serialized; the
order in which different documents reach a shared destination follows the
order they are processed in and is not otherwise guaranteed.
"""

import threading
from pathlib import Path
from typing import Dict, IO, List, Optional

from ..config import appsettings
from ..models.classifier import ClassifiedLine
from .log import LOG


class OutputError(Exception):
    """Raised when a target cannot be created or written"""
    pass


def target_resolve(target: str, document: Path, inputdir: Path, outputdir: Path) -> Path:
    """
    Resolve a target name to a destination path.

    Absolute targets are used as is. Relative targets are relative to the
    directory of the document that names them, rebased from ``inputdir``
    into ``outputdir``.

    Example:
        target "lib/util.c" named in inputdir/pkg/notes.md resolves to
        outputdir/pkg/lib/util.c
    """
    target_path = Path(target)
    if target_path.is_absolute():
        return target_path

    try:
        relative_dir = document.parent.relative_to(inputdir)
    except ValueError:
        # document outside inputdir (absolute pattern): write beside it
        return document.parent / target_path

    return outputdir / relative_dir / target_path


class OutputTable:
    """
    Table of open destination files for one run

    Use as a context manager so every handle is closed when the run ends:

        with OutputTable(inputdir, outputdir) as table:
            for record in document_classify(document):
                table.record_write(record, document, tangle=True, weave=False)
    """

    def __init__(
        self,
        inputdir: Path,
        outputdir: Path,
        encoding: Optional[str] = None,
    ) -> None:
        self.inputdir = Path(inputdir)
        self.outputdir = Path(outputdir)
        self.encoding = encoding or appsettings.encoding
        self.handles: Dict[Path, IO[str]] = {}
        self.locks: Dict[Path, threading.Lock] = {}
        self.created: List[Path] = []
        self.table_lock = threading.Lock()
        self.closed = False

    def __enter__(self) -> "OutputTable":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def handle_get(self, path: Path, kind: str) -> IO[str]:
        """
        Return the open handle for the normalized ``path``, creating the file
        on first use.

        Raises:
            OutputError: If the destination cannot be created or the table
                         is closed
        """
        with self.table_lock:
            if self.closed:
                raise OutputError(f"Cannot open {kind} target {path}: output table is closed")

            handle = self.handles.get(path)
            if handle is not None:
                return handle

            try:
                path.parent.mkdir(parents=True, exist_ok=True)
                handle = open(path, "w", encoding=self.encoding, newline="")
            except OSError as e:
                raise OutputError(f"Cannot create {kind} target {path}: {e}") from e

            self.handles[path] = handle
            self.created.append(path)
            self.locks[path] = threading.Lock()
            if appsettings.announce_outputs:
                LOG(f"Writing {kind} to {path}", level=1)
            return handle

    def write(self, path: Path, content: str, kind: str = "output") -> None:
        """
        Append ``content`` to the destination at ``path``.

        Paths naming the same file (e.g. through ``..``) share one handle.

        Raises:
            OutputError: If the destination cannot be created or written
        """
        path = Path(path).resolve()
        handle = self.handle_get(path, kind)
        with self.locks[path]:
            try:
                handle.write(content)
            except OSError as e:
                raise OutputError(f"Cannot write {kind} target {path}: {e}") from e

    def record_write(
        self,
        record: ClassifiedLine,
        document: Path,
        tangle: bool = True,
        weave: bool = True,
    ) -> None:
        """
        Route a classified line to its destinations.

        Args:
            record: Line emitted by the classifier for ``document``
            document: Source document, used to resolve relative targets
            tangle: Write the code part to its code target
            weave: Write the text part to the documentation target

        Raises:
            OutputError: If a destination would overwrite ``document`` or
                         cannot be written
        """
        if tangle and record.code_has():
            path = self.destination_resolve(record.codeTarget, document)
            self.write(path, record.code or "", kind="code")

        if weave and record.text_has():
            path = self.destination_resolve(record.textTarget, document)
            self.write(path, record.text or "", kind="documentation")

    def destination_resolve(self, target: str, document: Path) -> Path:
        """Resolve a target for ``document`` and refuse to overwrite the source"""
        path = target_resolve(target, document, self.inputdir, self.outputdir).resolve()
        if path == document.resolve():
            raise OutputError(f"Target {path} would overwrite its source document")
        return path

    def paths(self) -> List[Path]:
        """Destinations written during this run, in creation order"""
        return list(self.created)

    def close(self) -> None:
        """Close every open destination; the table accepts no writes afterwards"""
        with self.table_lock:
            self.closed = True
            for handle in self.handles.values():
                handle.close()
            self.handles.clear()
            self.locks.clear()
