from collections.abc import Iterator
from pathlib import Path

import pytest

from rsjj.cli import EXIT_DATA_ERROR, EXIT_NO_INPUT, EXIT_OK, main, run_prompt
from rsjj.scanner import ScannerOptions


def _lines_then_eof(lines: list[str]):
    remaining: Iterator[str] = iter(lines)
    prompts: list[str] = []

    def read_line(prompt: str) -> str:
        prompts.append(prompt)
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError from None

    return read_line, prompts


def test_main_scans_file_and_prints_tokens(tmp_path: Path, capsys) -> None:
    script = tmp_path / "ok.rsjj"
    script.write_text("let x = 5;\n", encoding="utf-8")

    code = main([str(script)])

    captured = capsys.readouterr()
    assert code == EXIT_OK
    assert captured.out.splitlines() == [
        "LET let",
        "IDENTIFIER x",
        "EQUAL =",
        "NUMBER 5",
        "SEMICOLON ;",
        "EOF ",
    ]
    assert captured.err == ""


def test_main_reports_errors_on_stderr_and_exits_65(tmp_path: Path, capsys) -> None:
    script = tmp_path / "bad.rsjj"
    script.write_text('a\n@\n"open', encoding="utf-8")

    code = main([str(script)])

    captured = capsys.readouterr()
    assert code == EXIT_DATA_ERROR
    assert captured.err.splitlines() == [
        "[line 2] Error at '@': Unexpected character.",
        "[line 3] Error: Unterminated string.",
    ]
    assert "STRING \"open" in captured.out


def test_main_missing_file_exits_66(tmp_path: Path, capsys) -> None:
    code = main([str(tmp_path / "nope.rsjj")])

    captured = capsys.readouterr()
    assert code == EXIT_NO_INPUT
    assert "cannot read" in captured.err


def test_main_debug_dump(tmp_path: Path, capsys) -> None:
    script = tmp_path / "dbg.rsjj"
    script.write_text("x", encoding="utf-8")

    assert main(["--debug", str(script)]) == EXIT_OK

    out = capsys.readouterr().out
    assert out.splitlines()[0].startswith("000 IDENTIFIER")
    assert "line=1 text='x'" in out


def test_main_first_line_and_multiline_flags(tmp_path: Path, capsys) -> None:
    script = tmp_path / "flags.rsjj"
    script.write_text('"a\nb"', encoding="utf-8")

    code = main(["--first-line", "0", "--no-multiline-strings", str(script)])

    captured = capsys.readouterr()
    assert code == EXIT_DATA_ERROR
    assert captured.err.splitlines() == [
        "[line 0] Error: Unterminated string.",
        "[line 1] Error: Unterminated string.",
    ]


def test_main_rejects_negative_first_line(capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--first-line", "-1"])

    assert excinfo.value.code == 2
    assert "--first-line cannot be negative" in capsys.readouterr().err


def test_prompt_scans_each_line_independently(capsys) -> None:
    read_line, prompts = _lines_then_eof(["let a = 1", "", 'print "unclosed', "@"])

    code = run_prompt(options=ScannerOptions(), read_line=read_line)

    captured = capsys.readouterr()
    assert code == EXIT_OK
    assert prompts == ["> "] * 5
    out_lines = captured.out.splitlines()
    assert out_lines[:5] == ["LET let", "IDENTIFIER a", "EQUAL =", "NUMBER 1", "EOF "]
    assert 'STRING "unclosed' in out_lines
    assert captured.err.splitlines() == [
        "[line 3] Error: Unterminated string.",
        "[line 4] Error at '@': Unexpected character.",
    ]


def test_prompt_exits_cleanly_on_immediate_eof(capsys) -> None:
    read_line, _ = _lines_then_eof([])

    assert run_prompt(options=ScannerOptions(), read_line=read_line) == EXIT_OK
    assert capsys.readouterr().out == "\n"


def test_prompt_exits_cleanly_on_keyboard_interrupt(capsys) -> None:
    lines = iter(["print 1"])

    def read_line(prompt: str) -> str:
        for line in lines:
            return line
        raise KeyboardInterrupt

    assert run_prompt(options=ScannerOptions(), read_line=read_line) == EXIT_OK
    assert capsys.readouterr().out.splitlines() == ["PRINT print", "NUMBER 1", "EOF ", ""]
