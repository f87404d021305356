"""
Console front end: two players share one terminal.
"""

import logging

from .board import Coordinate, grid_coordinates
from .config import DRAW_MESSAGE, GRID_SIZE, OCCUPIED_MESSAGE, WIN_MESSAGE
from .game_logic import GameSession, Outcome

logger = logging.getLogger(__name__)

QUIT_COMMANDS = ("q", "quit", "exit")


def render_board(session):
    """Board as text, row 3 on top, empty cells shown as '.'."""
    lines = ["-------------"]
    for row in range(GRID_SIZE, 0, -1):
        cells = []
        for column in range(1, GRID_SIZE + 1):
            mark = session.mark_at(Coordinate(column, row))
            cells.append(str(mark) if mark else ".")
        lines.append(f"{row}  {' | '.join(cells)}")
        if row > 1: lines.append("  -----------")
    lines.append("   " + "   ".join(str(c) for c in range(1, GRID_SIZE + 1)))  # column indices
    lines.append("-------------")
    return "\n".join(lines)


def parse_move(text):
    """
    "column,row" -> Coordinate
    raises ValueError on bad format or numbers outside 1-3
    """
    parts = text.split(",")
    if len(parts) != 2:
        raise ValueError("Use column,row (e.g. 1,3).")
    coord = Coordinate(int(parts[0]), int(parts[1]))
    if coord not in set(grid_coordinates()):
        raise ValueError(f"Column and row must be between 1 and {GRID_SIZE}.")
    return coord


def play(session=None):
    """
    Run games until the players quit. Returns the number of finished games.
    """
    session = session or GameSession()
    finished = 0
    print("--- Welcome to Tic-Tac-Toe ---")
    print(render_board(session))

    while True:
        player = session.current_player
        try:
            text = input(f"{player.name} ({player.symbol}), enter move (column,row) or q: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nGame interrupted.")
            break

        if text.lower() in QUIT_COMMANDS:
            break
        try:
            coord = parse_move(text)
        except ValueError as e:
            # int() failures land here too
            print(f"!! Invalid input: {e}")
            continue

        res = session.play(coord)
        if res.outcome is Outcome.INVALID:
            print(f"!! {OCCUPIED_MESSAGE}. Try again.")
            continue

        if res.outcome is Outcome.WIN:
            print(f"\n{WIN_MESSAGE} {res.player.name} ({res.player.symbol}) wins!")
        elif res.outcome is Outcome.DRAW:
            print(f"\n{DRAW_MESSAGE}")
        if res.finished:
            finished += 1
            logger.info("game %d over, starting a new one", finished)
            print("New game.")
        print(render_board(session))

    print("Exiting.")
    return finished
