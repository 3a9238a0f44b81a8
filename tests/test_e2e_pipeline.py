"""
End-to-end pipeline tests

Tests the full run: document discovery → classification → output table,
through the same stage functions the command line composes.
"""

from argparse import Namespace
from pathlib import Path

import pytest

from mdweb.__main__ import documents_process, env_check, results_report
from mdweb.lib.document import document_classify, document_read, documents_find
from mdweb.models import ProgramState, pipeline


HELLO = """\
# Hello

A tiny program.

\t<<#-->>
\t#include <stdio.h>

Entry point:

\t<<>>
\tint main(void)
\t{

\t    puts("hi");
\t}

Helpers live in their own header:

\t<<util.h>>
\tint helper(void);

Usage:

\t<<!-->>
\t$ ./hello
"""


def run(inputdir: Path, outputdir: Path, **options) -> ProgramState:
    state = ProgramState(inputdir=inputdir, outputdir=outputdir, verbosity=0, **options)
    return pipeline(state, env_check, documents_process, results_report)


@pytest.fixture
def inputdir(tmp_path):
    directory = tmp_path / "in"
    (directory / "pkg").mkdir(parents=True)
    (directory / "pkg" / "hello.c.md").write_text(HELLO)
    return directory


class TestDocuments:
    """Test document reading and discovery"""

    def test_read_keeps_line_endings(self, tmp_path):
        path = tmp_path / "a.md"
        path.write_bytes(b"one\r\ntwo\nthree")
        assert list(document_read(path)) == ["one\r\n", "two\n", "three"]

    def test_read_splits_on_newline_only(self, tmp_path):
        """A lone carriage return does not end a line"""
        path = tmp_path / "a.md"
        path.write_bytes(b"prose\r\tint x;\n")
        assert list(document_read(path)) == ["prose\r\tint x;\n"]

    def test_carriage_return_keeps_prose_out_of_code(self, tmp_path):
        path = tmp_path / "a.c.md"
        path.write_bytes(b"prose\r\tint x;\n")
        records = list(document_classify(path))
        assert len(records) == 1
        assert not records[0].code_has()

    def test_classify_names_targets_after_document(self, inputdir):
        records = list(document_classify(inputdir / "pkg" / "hello.c.md"))
        assert records[0].textTarget == "hello.md"
        assert any(r.codeTarget == "hello.c" for r in records)

    def test_find_recursive(self, inputdir):
        assert documents_find(inputdir, ["**/*.md"]) == [inputdir / "pkg" / "hello.c.md"]

    def test_find_deduplicates_in_pattern_order(self, inputdir):
        (inputdir / "a.md").write_text("a\n")
        found = documents_find(inputdir, ["pkg/*.md", "**/*.md"])
        assert found == [inputdir / "pkg" / "hello.c.md", inputdir / "a.md"]

    def test_find_skips_unmatched(self, inputdir):
        assert documents_find(inputdir, ["*.nothing"]) == []

    def test_find_ignores_directories(self, inputdir):
        (inputdir / "dir.md").mkdir()
        assert inputdir / "dir.md" not in documents_find(inputdir, ["*.md"])


class TestPipeline:
    """Test tangling and weaving a document tree"""

    def test_tangle_and_weave(self, inputdir, tmp_path):
        outputdir = tmp_path / "out"
        state = run(inputdir, outputdir)

        code = (outputdir / "pkg" / "hello.c").read_text()
        assert code == '#include <stdio.h>\n\nint main(void)\n{\n\n    puts("hi");\n}\n\n'

        assert (outputdir / "pkg" / "util.h").read_text() == "int helper(void);\n\n"

        woven = (outputdir / "pkg" / "hello.md").read_text()
        assert "<<" not in woven
        assert "#include" not in woven
        assert "\t$ ./hello\n" in woven
        assert "\tint main(void)\n" in woven

        assert state.processResult['status'] is True
        assert state.processResult['documents'] == 1
        assert len(state.processResult['outputs']) == 3

    def test_neither_flag_means_both(self, inputdir, tmp_path):
        state = env_check(ProgramState(inputdir=inputdir, outputdir=tmp_path / "out", verbosity=0))
        assert state.tangle and state.weave
        assert state.pattern == ["**/*.md"]

    def test_tangle_only(self, inputdir, tmp_path):
        outputdir = tmp_path / "out"
        run(inputdir, outputdir, tangle=True)
        assert (outputdir / "pkg" / "hello.c").exists()
        assert not (outputdir / "pkg" / "hello.md").exists()

    def test_weave_only(self, inputdir, tmp_path):
        outputdir = tmp_path / "out"
        run(inputdir, outputdir, weave=True)
        assert not (outputdir / "pkg" / "hello.c").exists()
        assert (outputdir / "pkg" / "hello.md").exists()

    def test_documents_share_a_target(self, tmp_path):
        inputdir = tmp_path / "in"
        inputdir.mkdir()
        (inputdir / "a.md").write_text("\t<<shared.txt>>\n\tfrom a\n")
        (inputdir / "b.md").write_text("\t<<shared.txt>>\n\tfrom b\n")

        run(inputdir, tmp_path / "out", tangle=True, pattern=["*.md"])
        assert (tmp_path / "out" / "shared.txt").read_text() == "from a\nfrom b\n"

    def test_shared_target_through_parent_dir(self, tmp_path):
        """Different spellings of one target append to the same file"""
        inputdir = tmp_path / "in"
        (inputdir / "docs").mkdir(parents=True)
        (inputdir / "a.md").write_text("\t<<shared.c>>\n\tint a;\n")
        (inputdir / "docs" / "b.md").write_text("\t<<../shared.c>>\n\tint b;\n")

        state = run(inputdir, tmp_path / "out", tangle=True, pattern=["a.md", "docs/b.md"])
        assert (tmp_path / "out" / "shared.c").read_text() == "int a;\nint b;\n"
        assert state.processResult["outputs"] == [str((tmp_path / "out" / "shared.c").resolve())]

    def test_absolute_target(self, tmp_path):
        inputdir = tmp_path / "in"
        inputdir.mkdir()
        target = tmp_path / "abs" / "x.txt"
        (inputdir / "a.md").write_text(f"\t<<{target}>>\n\tline\n")

        run(inputdir, tmp_path / "out", tangle=True)
        assert target.read_text() == "line\n"

    def test_missing_inputdir_exits(self, tmp_path):
        with pytest.raises(SystemExit) as exc:
            run(tmp_path / "missing", tmp_path / "out")
        assert exc.value.code == 1

    def test_write_failure_exits(self, tmp_path):
        inputdir = tmp_path / "in"
        inputdir.mkdir()
        (inputdir / "notes.md").write_text("prose\n")

        with pytest.raises(SystemExit) as exc:
            run(inputdir, inputdir, weave=True)
        assert exc.value.code == 1
        assert (inputdir / "notes.md").read_text() == "prose\n"

    def test_unreadable_document_exits(self, tmp_path):
        inputdir = tmp_path / "in"
        inputdir.mkdir()
        (inputdir / "bad.md").write_bytes(b"\xff\xfe\xfa\n")

        with pytest.raises(SystemExit):
            run(inputdir, tmp_path / "out")

    def test_state_from_namespace(self, tmp_path):
        options = Namespace(pattern=["*.md"], tangle=True, weave=False, verbosity=2, extra="ignored")
        state = ProgramState.state_createFromNamespace(options, tmp_path / "in", tmp_path / "out")
        assert state.pattern == ["*.md"]
        assert state.tangle is True
        assert state.verbosity == 2
        assert not hasattr(state, "extra")
