"""
Move validator for TicTacToe.
Validates that a position can be marked.
"""

from typing import Optional
from dataclasses import dataclass
from .game_state import Board, N


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Position must be a cell index 0-8 (row-major)
    2. Can only place on empty cells
    """

    def validate_position(self, board: Board, position: int) -> ValidationResult:
        """
        Validate a move given as a linear position.

        Args:
            board: Current board.
            position: Cell index, row * 3 + col.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if not (0 <= position < N * N):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position {position}. Must be 0-{N * N - 1}."
            )

        row, col = divmod(position, N)
        return self.validate_move(board, row, col)

    def validate_move(self, board: Board, row: int, col: int) -> ValidationResult:
        """
        Validate a move given as (row, col).

        Args:
            board: Current board.
            row: Row to mark (0-2).
            col: Column to mark (0-2).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        # Check if row/col are in valid range
        if not (0 <= row < N and 0 <= col < N):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell ({row}, {col}). Must be 0-{N - 1}."
            )

        # Check if cell is empty
        if not board.can_fill_at_cell(row, col):
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell ({row}, {col}) is already occupied by {board[row, col]}"
            )

        return ValidationResult(is_valid=True)
