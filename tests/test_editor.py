import os
import sys

from cmmlang.editor import edit


def _writer(content):
    script = f"import sys; open(sys.argv[1], 'w').write({content!r})"
    return [sys.executable, "-c", script]


def test_edit_returns_written_content(tmp_path):
    result = edit(_writer("int x = 1;\nprint(x);\n"), tmp_path)
    assert result == "int x = 1;\nprint(x);\n"


def test_edit_adds_final_newline(tmp_path):
    result = edit(_writer("a\nb"), tmp_path)
    assert result == "a\nb\n"


def test_edit_removes_temporary_file(tmp_path):
    edit(_writer("x"), tmp_path)
    assert os.listdir(tmp_path) == []


def test_edit_without_file_returns_empty(tmp_path):
    result = edit([sys.executable, "-c", "pass"], tmp_path)
    assert result == ""


def test_edit_missing_program_returns_empty(tmp_path):
    result = edit([str(tmp_path / "no-such-editor")], tmp_path)
    assert result == ""