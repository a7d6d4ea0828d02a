#!/usr/bin/env python3
"""
Tests for the command-line entry point.
"""

import io
import sys

import pytest

from yabir.cli import main, should_print_usage


@pytest.fixture
def stdin_bytes(monkeypatch):
    def _set(data):
        monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(data)))
    return _set


def test_should_print_usage_returns_true_on_no_arguments():
    assert should_print_usage([])


def test_should_print_usage_returns_true_on_help_short_form():
    assert should_print_usage(["-h"])


def test_should_print_usage_returns_true_on_help_long_form():
    assert should_print_usage(["--help"])


def test_should_print_usage_returns_true_on_several_arguments():
    assert should_print_usage(["a.bf", "b.bf"])


def test_should_print_usage_returns_false_when_prog_is_given():
    assert not should_print_usage(["prog.bf"])


@pytest.mark.parametrize("argv", [[], ["-h"], ["--help"], ["a.bf", "b.bf"]])
def test_main_prints_usage_and_exits_with_zero(argv, capsys):
    assert main(argv) == 0
    assert capsys.readouterr().out == "usage: yabir PROG\n"


def test_main_runs_program_with_stdin_and_stdout(tmp_path, stdin_bytes, capsysbinary):
    prog = tmp_path / "upper.bf"
    prog.write_text(",[--------------------------------.[-],]", encoding="utf-8")
    stdin_bytes(b"abc")

    assert main([str(prog)]) == 0
    assert capsysbinary.readouterr().out == b"ABC"


def test_main_treats_unknown_option_as_path(stdin_bytes, capsys):
    stdin_bytes(b"")
    assert main(["--no-such-file"]) == 1
    assert capsys.readouterr().err.startswith("error: cannot load --no-such-file")


def test_main_reports_missing_file(tmp_path, stdin_bytes, capsys):
    stdin_bytes(b"")
    assert main([str(tmp_path / "missing.bf")]) == 1
    err = capsys.readouterr().err
    assert err.startswith("error: ")
    assert "missing.bf" in err


def test_main_reports_parse_error(tmp_path, stdin_bytes, capsys):
    stdin_bytes(b"")
    prog = tmp_path / "bad.bf"
    prog.write_text("+]", encoding="utf-8")
    assert main([str(prog)]) == 1
    assert capsys.readouterr().err == "error: missing start of a loop ended at index 1\n"


def test_main_reports_runtime_error(tmp_path, stdin_bytes, capsys):
    prog = tmp_path / "under.bf"
    prog.write_text("<", encoding="utf-8")
    stdin_bytes(b"")
    assert main([str(prog)]) == 1
    assert capsys.readouterr().err == "error: cannot decrement the data pointer because it is 0\n"


def test_main_treats_double_dash_as_path(stdin_bytes, capsys):
    stdin_bytes(b"")
    assert main(["--"]) == 1
    assert capsys.readouterr().err.startswith("error: cannot load --")


def test_main_reports_unknown_encoding(tmp_path, stdin_bytes, monkeypatch, capsys):
    prog = tmp_path / "prog.bf"
    prog.write_text("+", encoding="utf-8")
    stdin_bytes(b"")
    monkeypatch.setenv("YABIR_ENCODING", "no-such-codec")

    assert main([str(prog)]) == 1
    err = capsys.readouterr().err
    assert err.startswith("error: cannot load ")
    assert "no-such-codec" in err


class _BrokenPipe(io.RawIOBase):
    def writable(self):
        return True

    def write(self, b):
        return len(b)

    def flush(self):
        raise BrokenPipeError("Broken pipe")


class _BrokenStdout:
    buffer = _BrokenPipe()


def test_main_reports_failed_final_flush(tmp_path, stdin_bytes, monkeypatch, capsys):
    prog = tmp_path / "quiet.bf"
    prog.write_text("+", encoding="utf-8")
    stdin_bytes(b"")
    with monkeypatch.context() as m:
        m.setattr(sys, "stdout", _BrokenStdout())
        status = main([str(prog)])

    assert status == 1
    assert capsys.readouterr().err == "error: Broken pipe\n"
