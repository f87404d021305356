import pytest

from tictactoe import console
from tictactoe.board import Coordinate, Symbol
from tictactoe.config import DRAW_MESSAGE, WIN_MESSAGE


def feed(monkeypatch, lines):
    it = iter(lines)

    def fake_input(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    monkeypatch.setattr("builtins.input", fake_input)


def test_parse_move():
    assert console.parse_move("1,3") == Coordinate(1, 3)
    assert console.parse_move(" 2 , 2 ") == Coordinate(2, 2)


@pytest.mark.parametrize("text", ["", "1", "1,2,3", "a,b", "0,1", "3,4"])
def test_parse_move_rejects(text):
    with pytest.raises(ValueError):
        console.parse_move(text)


def test_render_board_puts_row_three_on_top(session):
    session.play(Coordinate(1, 3))
    session.play(Coordinate(3, 1))
    lines = console.render_board(session).splitlines()
    assert lines[1] == "3  X | . | ."
    assert lines[5] == "1  . | . | O"
    assert lines[6] == "   1   2   3"


def test_win_is_announced_and_new_game_starts(monkeypatch, capsys, session):
    feed(monkeypatch, ["1,1", "1,2", "2,1", "2,2", "3,1", "q"])
    assert console.play(session) == 1
    out = capsys.readouterr().out
    assert WIN_MESSAGE in out
    assert "Player 1 (X) wins!" in out
    assert not any(session.board.cells.values())


def test_draw_is_announced(monkeypatch, capsys, session):
    feed(monkeypatch, ["1,3", "2,3", "3,3", "2,2", "1,2", "3,2", "2,1", "1,1", "3,1", "quit"])
    assert console.play(session) == 1
    assert DRAW_MESSAGE in capsys.readouterr().out


def test_bad_and_repeated_moves_are_reported(monkeypatch, capsys, session):
    feed(monkeypatch, ["x,y", "5,5", "2,2", "2,2"])
    assert console.play(session) == 0   # ends on EOF
    out = capsys.readouterr().out
    assert out.count("!! Invalid input") == 2
    assert "cell taken" in out
    assert "Game interrupted." in out
    assert session.mark_at(Coordinate(2, 2)) is Symbol.X
    assert session.current_player.symbol is Symbol.O
