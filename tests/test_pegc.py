from __future__ import annotations

from pathlib import Path

import pytest

from pegcomb import pegc


def test_render_text(capsys) -> None:
    assert pegc.main(["render", "--text", "'a' 'b' / 'c'"]) == 0
    assert capsys.readouterr().out == "((a + b) | c)\n"


def test_render_file_normalizes_newlines(tmp_path: Path, capsys) -> None:
    path = tmp_path / "expr.peg"
    path.write_bytes(b"'a' # c\r\n| [0-9]+\r\n")
    assert pegc.main(["render", str(path)]) == 0
    assert capsys.readouterr().out.strip() == "(a | [0-9]{1-})"


def test_check_summary(capsys) -> None:
    assert pegc.main(["check", "--text", "'a' / 'b' ."]) == 0
    out = capsys.readouterr().out.strip()
    assert out == "[CHECK OK] nodes=5 Choice=1 Sequence=1 String=2 Wildcard=1"


def test_debug_goes_to_stderr(capsys) -> None:
    assert pegc.main(["render", "--text", "'a'*", "-D"]) == 0
    captured = capsys.readouterr()
    assert captured.out == "a{0-}\n"
    assert "[DEBUG] tree ready" in captured.err
    assert "String a{0-} lookahead=NONE loop={0-}" in captured.err


def test_syntax_error_exit_code(capsys) -> None:
    assert pegc.main(["render", "--text", "'a"]) == 2
    err = capsys.readouterr().err
    assert "[SYNTAX ERROR]" in err
    assert "unterminated string" in err


def test_contract_violation_exit_code(capsys) -> None:
    assert pegc.main(["check", "--text", "'a'{3-1}"]) == 2
    assert "InvalidLoopRange" in capsys.readouterr().err


def test_missing_file(tmp_path: Path, capsys) -> None:
    assert pegc.main(["render", str(tmp_path / "nope.peg")]) == 2
    assert "[ERROR]" in capsys.readouterr().err


def test_source_is_required() -> None:
    with pytest.raises(SystemExit):
        pegc.main(["render"])
