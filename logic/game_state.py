"""
Game state for TicTacToe.
Markers, players, and the 3x3 board they play on.
"""

from enum import Enum
from typing import List, Tuple
from dataclasses import dataclass

import numpy as np


# TicTacToe is a 3x3 grid
N = 3


class Marker(str, Enum):
    """The value held by a board cell."""
    EMPTY = "_"
    X = "X"
    O = "O"

    def opposite(self) -> "Marker":
        """Get the other playing marker."""
        if self == Marker.EMPTY:
            raise ValueError("EMPTY has no opposite marker")
        return Marker.O if self == Marker.X else Marker.X

    def __str__(self) -> str:
        return self.value


@dataclass
class Player:
    """
    One of the two people at the board.
    Created once per session and kept across replays.
    """
    name: str
    marker: Marker


class Board:
    """
    The 3x3 grid, stored row-major as a numpy array of marker values.

    Cells only ever go from EMPTY to X or O. To start over,
    make a new Board.
    """

    def __init__(self):
        self.cells = np.full((N, N), Marker.EMPTY.value, dtype="<U1")

    def __getitem__(self, cell: Tuple[int, int]) -> Marker:
        row, col = cell
        return Marker(str(self.cells[row, col]))

    def rows(self) -> List[List[Marker]]:
        """The board as nested lists of markers."""
        return [[Marker(str(value)) for value in row] for row in self.cells]

    def can_fill_at_cell(self, row: int, col: int) -> bool:
        return bool(self.cells[row, col] == Marker.EMPTY.value)

    def fill_cell(self, row: int, col: int, marker: Marker):
        if marker == Marker.EMPTY:
            raise ValueError("cannot clear a cell")
        self.cells[row, col] = marker.value

    def cells_of(self, marker: Marker) -> np.ndarray:
        """
        Coordinates of every cell holding a marker.

        Args:
            marker: The marker to look for.

        Returns:
            (k, 2) integer array of (row, col) pairs in row-major order.
        """
        return np.argwhere(self.cells == marker.value)

    def filled_count(self) -> int:
        return int(np.count_nonzero(self.cells != Marker.EMPTY.value))

    def is_full(self) -> bool:
        return self.filled_count() == N * N
