import io
import sys
from unittest import mock

from mindrun import terminal
from mindrun.terminal import clear_screen, get_input_char, pause


def test_get_input_char_reads_one_character():
    stream = io.StringIO("wasd")
    assert get_input_char(stream) == "w"
    assert stream.read() == "asd"


def test_get_input_char_reads_in_sequence():
    stream = io.StringIO("Mq")
    keys = [get_input_char(stream), get_input_char(stream)]
    assert keys == ["M", "q"]


def test_get_input_char_at_end_of_input():
    assert get_input_char(io.StringIO("")) == ""


def test_get_input_char_defaults_to_stdin(monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO("d"))
    assert get_input_char() == "d"


def test_pause_shows_default_prompt_and_returns_key(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("x"))
    assert pause() == "x"
    assert capsys.readouterr().out == "Press any key to continue..."


def test_pause_custom_prompt(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("y"))
    key = pause("Play Again? (Y/N): ")
    assert key == "y"
    assert capsys.readouterr().out == "Play Again? (Y/N): "


def test_clear_screen_runs_clear_command(capsys):
    with mock.patch.object(terminal.subprocess, "run") as run:
        clear_screen()
    assert run.call_count == 1
    command = run.call_args.args[0]
    assert command in (["clear"], "cls")
    assert capsys.readouterr().out == ""


def test_clear_screen_falls_back_to_escape_codes(capsys):
    with mock.patch.object(
        terminal.subprocess, "run", side_effect=FileNotFoundError("clear")
    ):
        clear_screen()
    assert capsys.readouterr().out == "\x1b[2J\x1b[H"