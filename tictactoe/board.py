"""
board cells, coordinates and marks
"""

from enum import Enum
from typing import Dict, Iterator, NamedTuple, Optional

from .config import GRID_SIZE


class Symbol(Enum):
    """The two marks a player can place."""
    X = "X"
    O = "O"

    def __str__(self):
        return self.value


# a cell holds a Symbol, or None while empty
Mark = Optional[Symbol]


class Coordinate(NamedTuple):
    """(column, row), both 1-indexed"""
    column: int
    row: int


def in_bounds(coord: Coordinate) -> bool:
    """true if coord lies on the 3x3 grid"""
    column, row = coord
    return 1 <= column <= GRID_SIZE and 1 <= row <= GRID_SIZE


def coord_to_id(coord: Coordinate) -> str:
    column, row = coord
    return f"{column}-{row}"


def id_to_coord(cell_id: str) -> Coordinate:
    """
    parse a "column-row" cell id back into a Coordinate
    raises ValueError on anything that is not two integers
    """
    parts = cell_id.split("-")
    if len(parts) != 2:
        raise ValueError(f"malformed cell id: {cell_id!r}")
    return Coordinate(int(parts[0]), int(parts[1]))


def encode(coord: Coordinate) -> int:
    """slot 0-8 of a coordinate, column-major"""
    column, row = coord
    return (column - 1) * GRID_SIZE + (row - 1)


def grid_coordinates() -> Iterator[Coordinate]:
    """every cell of the grid, column 1 rows 1..3 first"""
    for column in range(1, GRID_SIZE + 1):
        for row in range(1, GRID_SIZE + 1):
            yield Coordinate(column, row)


class BoardState:
    """
    mapping of cell id -> mark for the 9 cells
    """
    def __init__(self):
        self.cells: Dict[str, Mark] = {}
        self.reset()

    def reset(self):
        # fresh empty grid
        self.cells = {coord_to_id(coord): None for coord in grid_coordinates()}

    def mark_at(self, coord: Coordinate) -> Mark:
        return self.cells[coord_to_id(coord)]

    def is_empty(self, coord: Coordinate) -> bool:
        """true if coords valid and cell blank"""
        return in_bounds(coord) and self.mark_at(coord) is None

    def place(self, coord: Coordinate, symbol: Symbol) -> bool:
        """
        put symbol into an empty cell
        returns False and leaves the board alone if the cell is taken
        """
        if not self.is_empty(coord):
            return False
        self.cells[coord_to_id(coord)] = symbol
        return True

    def is_full(self) -> bool:
        return all(mark is not None for mark in self.cells.values())

    def __len__(self):
        return len(self.cells)

    def __repr__(self):
        marks = "".join(str(m) if m else "." for m in self.cells.values())
        return f"BoardState({marks})"
