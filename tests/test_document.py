"""Tests for generated document writing."""
import pytest

from cppsetup.core.errors import ArtifactWriteError
from cppsetup.scaffold.document import Document


def test_render_joins_lines_with_trailing_newline(tmp_path):
    doc = Document(tmp_path / "out.txt").add("one", "two")
    assert doc.render() == "one\ntwo\n"


def test_write_truncates(tmp_path):
    path = tmp_path / "out.txt"
    path.write_text("a much longer previous file\n" * 10)

    Document(path).add("new").write()

    assert path.read_text() == "new\n"


def test_executable_flag(tmp_path):
    path = Document(tmp_path / "run.sh", executable=True).add("#!/bin/bash").write()
    assert path.stat().st_mode & 0o777 == 0o755


def test_write_failure_raises_artifact_error(tmp_path):
    doc = Document(tmp_path / "missing" / "out.txt").add("x")

    with pytest.raises(ArtifactWriteError) as exc_info:
        doc.write()

    assert exc_info.value.exit_code == 7
    assert exc_info.value.path == tmp_path / "missing" / "out.txt"
