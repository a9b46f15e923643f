"""
Win checker for TicTacToe.
Checks if a player has won or if the game is a tie.
"""

from typing import Callable, Optional, Sequence

import numpy as np

from .game_state import Board, Player, N


# A rule looks at one player's cells, a (k, 2) array of (row, col)
WinningRule = Callable[[np.ndarray], bool]


def row_match(cells: np.ndarray) -> bool:
    """N cells share a row."""
    return bool(np.bincount(cells[:, 0], minlength=N).max() >= N)


def column_match(cells: np.ndarray) -> bool:
    """N cells share a column."""
    return bool(np.bincount(cells[:, 1], minlength=N).max() >= N)


def diagonal_match(cells: np.ndarray) -> bool:
    """N cells on the main diagonal (row == col)."""
    return bool(np.count_nonzero(cells[:, 0] == cells[:, 1]) >= N)


def cross_diagonal_match(cells: np.ndarray) -> bool:
    """N cells on the anti-diagonal (row + col == N - 1)."""
    return bool(np.count_nonzero(cells.sum(axis=1) == N - 1) >= N)


WINNING_RULES = (cross_diagonal_match, row_match, column_match, diagonal_match)


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 of the same marker in a row
    (horizontally, vertically, or diagonally)
    """

    rules: Sequence[WinningRule] = WINNING_RULES

    def is_winner(self, cells: np.ndarray) -> bool:
        """
        Check one player's cells against every rule.

        Args:
            cells: (k, 2) array of the player's (row, col) cells.

        Returns:
            True if any rule matches.
        """
        cells = np.asarray(cells, dtype=int).reshape(-1, 2)
        if len(cells) < N:
            return False
        return any(rule(cells) for rule in self.rules)

    def check_winner(self, board: Board, players: Sequence[Player]) -> Optional[Player]:
        """
        Check if there's a winner.

        Args:
            board: The current board.
            players: The two players, first one checked first.

        Returns:
            The winning Player, or None if no winner yet.
        """
        for player in players:
            if self.is_winner(board.cells_of(player.marker)):
                return player
        return None

    def check_tie(self, board: Board) -> bool:
        """
        Check if the board is full.

        Only meaningful once check_winner has found no winner.
        """
        return board.is_full()
