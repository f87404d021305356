"""
Win detection.

A move wins when the cell just played sits in a run of RUN_LENGTH
same-mark cells along one of four axes. Each axis is checked by a
depth-first walk that starts at the played cell and grows the chain
through the two opposite neighbours the axis defines. The length reached
on one side is carried into the other side's branch, so the played cell
may be at either end of the run or in its middle.
"""

import logging
from enum import Enum
from typing import List, Optional, Tuple

from .board import BoardState, Coordinate, Symbol, encode, in_bounds
from .config import GRID_SIZE, RUN_LENGTH

logger = logging.getLogger(__name__)


class Direction(Enum):
    """
    Axis along which a run is counted. The value holds the two
    opposite (column, row) offsets of a cell's neighbours on that axis.
    """
    HORIZONTAL = ((-1, 0), (1, 0))          # left, right
    VERTICAL = ((0, 1), (0, -1))            # top, bottom
    FORWARD_DIAGONAL = ((1, 1), (-1, -1))   # top right, bottom left
    BACK_DIAGONAL = ((-1, 1), (1, -1))      # top left, bottom right

    def neighbours(self, coord: Coordinate) -> Tuple[Coordinate, Coordinate]:
        column, row = coord
        first, second = self.value
        return (Coordinate(column + first[0], row + first[1]),
                Coordinate(column + second[0], row + second[1]))


# checked in this order, stopping at the first hit
DIRECTIONS = (
    Direction.HORIZONTAL,
    Direction.VERTICAL,
    Direction.FORWARD_DIAGONAL,
    Direction.BACK_DIAGONAL,
)


def new_visited() -> List[bool]:
    """one flag per cell, indexed by board.encode()"""
    return [False] * (GRID_SIZE * GRID_SIZE)


def walk_chain(board: BoardState, coord: Coordinate, direction: Direction,
               symbol: Symbol, length: int = 1,
               visited: Optional[List[bool]] = None) -> int:
    """
    Depth-first walk along one direction from coord.

    `length` counts the cells of the chain so far, coord included, and the
    walk returns the length it reached. Each branch continues from the
    length the previous sibling branch ended on.
    `visited` is shared by every branch of the walk: a cell seen from one
    neighbour is never entered again from its sibling.
    """
    logger.debug("walk %s at %s length=%d", direction.name, coord, length)

    if length == RUN_LENGTH:
        return length

    if visited is None:
        visited = new_visited()
    visited[encode(coord)] = True

    candidates = [n for n in direction.neighbours(coord)
                  if in_bounds(n) and not visited[encode(n)]]

    for neighbour in candidates:
        if board.mark_at(neighbour) != symbol:
            continue
        visited[encode(neighbour)] = True
        length = walk_chain(board, neighbour, direction, symbol, length + 1, visited)
        if length == RUN_LENGTH:
            break   # stop exploring once a run is found

    return length


def check_win(board: BoardState, coord: Coordinate, symbol: Symbol) -> bool:
    """
    true if the mark just placed at coord completes a run of three
    """
    for direction in DIRECTIONS:
        if walk_chain(board, coord, direction, symbol) == RUN_LENGTH:
            logger.debug("run of %d for %s through %s (%s)",
                         RUN_LENGTH, symbol, coord, direction.name)
            return True
    return False


class WinChecker:
    """
    checks a board for a run through the last move
    """
    def __init__(self, board: BoardState):
        self.board = board

    def check(self, coord: Coordinate, symbol: Symbol) -> bool:
        return check_win(self.board, coord, symbol)
