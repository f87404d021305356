import pytest

from tictactoe.board import Coordinate, Symbol, grid_coordinates
from tictactoe.game_logic import DEFAULT_PLAYERS, GameSession, Outcome

# X on top row of moves, O interleaved; X completes the bottom row
X_WINS = [(1, 1), (1, 2), (2, 1), (2, 2), (3, 1)]

# fills the board with no line of three
DRAW = [(1, 3), (2, 3), (3, 3), (2, 2), (1, 2), (3, 2), (2, 1), (1, 1), (3, 1)]


def play_all(session, moves):
    return [session.play(Coordinate(*m)) for m in moves]


def test_players_alternate_starting_with_first(session):
    assert session.current_player is DEFAULT_PLAYERS[0]
    assert session.current_player.symbol is Symbol.X
    res = session.play(Coordinate(2, 2))
    assert res.outcome is Outcome.CONTINUE
    assert res.player.name == "Player 1"
    assert session.current_player.symbol is Symbol.O
    session.play(Coordinate(1, 1))
    assert session.current_player.symbol is Symbol.X
    assert session.mark_at(Coordinate(1, 1)) is Symbol.O
    assert session.move_count == 2


def test_occupied_cell_is_a_no_op(session):
    session.play(Coordinate(2, 2))
    before = dict(session.board.cells)
    turn = session.turn
    res = session.play(Coordinate(2, 2))
    assert res.outcome is Outcome.INVALID
    assert res.player is None
    assert session.board.cells == before
    assert session.turn == turn
    assert session.move_count == 1


@pytest.mark.parametrize("coord", [(0, 0), (4, 1), (2, 4)])
def test_off_grid_move_is_invalid(session, coord):
    assert session.play(Coordinate(*coord)).outcome is Outcome.INVALID
    assert session.move_count == 0


def test_win_resets_board_and_turn(session):
    results = play_all(session, X_WINS)
    assert [r.outcome for r in results[:-1]] == [Outcome.CONTINUE] * 4
    last = results[-1]
    assert last.outcome is Outcome.WIN
    assert last.finished
    assert last.player.symbol is Symbol.X
    assert session.winner is last.player
    assert all(session.mark_at(c) is None for c in grid_coordinates())
    assert session.turn == 0
    assert session.move_count == 0


def test_second_player_can_win(session):
    # O takes the middle column
    results = play_all(session, [(1, 1), (2, 1), (3, 3), (2, 2), (1, 3), (2, 3)])
    assert results[-1].outcome is Outcome.WIN
    assert results[-1].player.symbol is Symbol.O
    assert session.current_player is DEFAULT_PLAYERS[0]


def test_full_board_without_line_is_a_draw(session):
    results = play_all(session, DRAW)
    assert [r.outcome for r in results[:-1]] == [Outcome.CONTINUE] * 8
    assert results[-1].outcome is Outcome.DRAW
    assert session.winner is None
    assert session.move_count == 0
    assert session.current_player is DEFAULT_PLAYERS[0]


def test_play_cell_id(session):
    res = session.play_cell_id("3-2")
    assert res.outcome is Outcome.CONTINUE
    assert res.coord == Coordinate(3, 2)
    assert session.mark_at(Coordinate(3, 2)) is Symbol.X


def test_reset(session):
    play_all(session, X_WINS)
    session.play(Coordinate(1, 1))
    session.reset()
    assert session.winner is None
    assert session.turn == 0
    assert not any(session.board.cells.values())


def test_sessions_do_not_share_state():
    a, b = GameSession(), GameSession()
    a.play(Coordinate(1, 1))
    assert b.mark_at(Coordinate(1, 1)) is None
    assert b.current_player.symbol is Symbol.X


@pytest.mark.parametrize("moves", [
    [(1, 1), (1, 2), (3, 1), (1, 3), (2, 1)],   # X fills the middle of row 1
    [(1, 1), (1, 2), (3, 3), (1, 3), (2, 2)],   # X takes the centre of a diagonal
    [(3, 1), (1, 1), (1, 3), (2, 1), (2, 2)],   # centre of the other diagonal
])
def test_winning_move_in_middle_of_line(session, moves):
    results = play_all(session, moves)
    assert [r.outcome for r in results[:-1]] == [Outcome.CONTINUE] * 4
    assert results[-1].outcome is Outcome.WIN
    assert results[-1].player.symbol is Symbol.X
    assert session.move_count == 0
