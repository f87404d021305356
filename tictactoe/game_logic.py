import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .board import BoardState, Coordinate, Mark, Symbol, id_to_coord, in_bounds
from .config import PLAYER_LABELS
from .win_checker import WinChecker

logger = logging.getLogger(__name__)


class Outcome(Enum):
    WIN = "win"
    DRAW = "draw"
    CONTINUE = "continue"
    INVALID = "invalid"


@dataclass(frozen=True)
class Player:
    name: str
    symbol: Symbol


@dataclass(frozen=True)
class MoveResult:
    """what a single cell activation did"""
    outcome: Outcome
    player: Optional[Player]     # who moved, None when nothing was placed
    coord: Coordinate

    @property
    def finished(self):
        return self.outcome in (Outcome.WIN, Outcome.DRAW)


DEFAULT_PLAYERS = (
    Player(PLAYER_LABELS[0], Symbol.X),
    Player(PLAYER_LABELS[1], Symbol.O),
)


class GameSession:
    """
    tic-tac-toe rules and state for one pair of local players
    """
    def __init__(self, players: Tuple[Player, Player] = DEFAULT_PLAYERS):
        """
        init board, players and turn pointer
        """
        self.players = players
        self.board = BoardState()
        self.win_checker = WinChecker(self.board)
        self.turn = 0                  # index into players, next to move
        self.move_count = 0            # marks on the current board
        self.winner = None             # Player of the last finished game, if any

    @property
    def current_player(self) -> Player:
        return self.players[self.turn]

    def mark_at(self, coord: Coordinate) -> Mark:
        return self.board.mark_at(coord)

    def play(self, coord: Coordinate) -> MoveResult:
        """
        place the current player's mark at coord and check the result
        an occupied or off-grid cell is a no-op
        """
        coord = Coordinate(*coord)
        if not in_bounds(coord) or not self.board.is_empty(coord):
            return MoveResult(Outcome.INVALID, None, coord)

        player = self.current_player
        self.board.place(coord, player.symbol)
        self.move_count += 1
        logger.info("%s (%s) marks %s", player.name, player.symbol, coord)

        win = self.win_checker.check(coord, player.symbol)

        # flip flops between 0 and 1
        self.turn = (self.turn + 1) % len(self.players)

        if win:
            logger.info("%s wins", player.name)
            self.winner = player
            self._new_board()
            return MoveResult(Outcome.WIN, player, coord)
        if self.board.is_full():
            logger.info("board full, draw")
            self.winner = None
            self._new_board()
            return MoveResult(Outcome.DRAW, player, coord)
        return MoveResult(Outcome.CONTINUE, player, coord)

    def play_cell_id(self, cell_id: str) -> MoveResult:
        """same as play(), addressed by "column-row" cell id"""
        return self.play(id_to_coord(cell_id))

    def _new_board(self):
        # next game always opens with the first player
        self.board.reset()
        self.turn = 0
        self.move_count = 0

    def reset(self):
        """
        clear board and turn, forget the last winner
        """
        self._new_board()
        self.winner = None
