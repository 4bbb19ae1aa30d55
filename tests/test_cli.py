import io

import pytest

from mindrun.cli import main
from mindrun.game import Game


def test_main_finishes_at_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main(["--seed", "4"]) == 0
    text = capsys.readouterr().out
    assert "Final Score: 0" in text
    assert "Play Again? (Y/N): " in text
    assert text.rstrip().endswith("Thank you for playing!")


def test_main_uses_save_file(monkeypatch, capsys, tmp_path):
    path = tmp_path / "game.txt"
    monkeypatch.setattr("sys.stdin", io.StringIO("dm\nsave\n"))
    assert main(["--seed", "1", "--save-file", str(path)]) == 0
    saved = Game.load(path)
    assert saved.total_moves == 1
    assert f"Game saved to {path}" in capsys.readouterr().out


def test_main_same_seed_same_board(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    main(["--seed", "9"])
    first = capsys.readouterr().out
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    main(["--seed", "9"])
    assert capsys.readouterr().out == first


def test_main_rejects_bad_seed():
    with pytest.raises(SystemExit) as info:
        main(["--seed", "abc"])
    assert info.value.code == 2