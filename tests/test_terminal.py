"""Tests for terminal I/O."""

import io

import pytest

from simplecli.core.terminal import Terminal
from simplecli.utils.exceptions import InputClosed


def make_terminal(text: str = ""):
    stdout = io.StringIO()
    return Terminal(stdin=io.StringIO(text), stdout=stdout, color=False), stdout


def test_read_line_strips_newline():
    terminal, _ = make_terminal("hello\nworld\n")

    assert terminal.read_line() == "hello"
    assert terminal.read_line() == "world"


def test_read_line_strips_crlf():
    terminal, _ = make_terminal("hello\r\n")

    assert terminal.read_line() == "hello"


def test_read_line_last_line_without_newline():
    terminal, _ = make_terminal("last")

    assert terminal.read_line() == "last"


def test_blank_line_is_not_end_of_input():
    terminal, _ = make_terminal("\n")

    assert terminal.read_line() == ""
    with pytest.raises(InputClosed):
        terminal.read_line()


def test_read_line_raises_when_closed():
    terminal, _ = make_terminal("")

    with pytest.raises(InputClosed):
        terminal.read_line()


def test_write_terminates_line():
    terminal, stdout = make_terminal()

    terminal.write("first")
    terminal.write()
    terminal.write_lines(["a", "b"])

    assert stdout.getvalue() == "first\n\na\nb\n"


def test_error_writes_plain_line_without_color():
    terminal, stdout = make_terminal()

    terminal.error("Your input cannot be empty.")

    assert stdout.getvalue() == "Your input cannot be empty.\n"


def test_write_keeps_tabs_and_control_characters():
    terminal, stdout = make_terminal()

    terminal.write("a\tb")
    terminal.write("x\x07y")

    assert stdout.getvalue() == "a\tb\nx\x07y\n"


def test_long_lines_not_wrapped():
    terminal, stdout = make_terminal()
    long_line = "x" * 200

    terminal.write(long_line)

    assert stdout.getvalue() == long_line + "\n"


def test_defaults_to_process_streams(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("typed\n"))
    terminal = Terminal(color=False)

    assert terminal.read_line() == "typed"
    terminal.write("shown")
    assert capsys.readouterr().out == "shown\n"
