"""
A single TicTacToe match.
Applies moves, alternates turns, and declares the result.
"""

from enum import Enum
from typing import Optional, Sequence
from dataclasses import dataclass, field

from .game_state import Board, Player, N
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker


class MatchStatus(Enum):
    """Where a match currently stands."""
    AWAITING_MOVE = "awaiting_move"
    WINNER_DECLARED = "winner_declared"
    TIE_DECLARED = "tie_declared"


@dataclass
class TurnOutcome:
    """Result of playing one turn."""
    accepted: bool
    status: MatchStatus
    winner: Optional[Player] = None
    error_message: Optional[str] = None


@dataclass
class Game:
    """
    The complete state of one match between two players.

    Tracks:
    - The 3x3 board
    - Whose turn it is (player 1 always opens)
    - Match status (ongoing, won, tie)
    """

    players: Sequence[Player]
    board: Board = field(default_factory=Board)
    current_index: int = 0
    status: MatchStatus = MatchStatus.AWAITING_MOVE
    winner: Optional[Player] = None
    validator: MoveValidator = field(default_factory=MoveValidator, repr=False)
    win_checker: WinChecker = field(default_factory=WinChecker, repr=False)

    def __post_init__(self):
        if len(self.players) != 2:
            raise ValueError("a game needs exactly two players")
        if self.players[0].marker == self.players[1].marker:
            raise ValueError("players must use different markers")

    @property
    def current_player(self) -> Player:
        return self.players[self.current_index]

    @property
    def is_game_over(self) -> bool:
        return self.status != MatchStatus.AWAITING_MOVE

    def reset(self):
        """Start the next match: new board, player 1 to move."""
        self.board = Board()
        self.current_index = 0
        self.status = MatchStatus.AWAITING_MOVE
        self.winner = None

    def mark(self, player: Player, position: int) -> bool:
        """
        Place a player's marker at a linear position.

        Args:
            player: Who is moving.
            position: Cell index 0-8, row-major.

        Returns:
            True if the cell was marked, False if the move was rejected.
        """
        return self.try_mark(player, position).is_valid

    def try_mark(self, player: Player, position: int) -> ValidationResult:
        """Like mark(), but says why a move was rejected."""
        result = self.validator.validate_position(self.board, position)
        if result.is_valid:
            row, col = divmod(position, N)
            self.board.fill_cell(row, col, player.marker)
        return result

    def check_winner(self, players: Optional[Sequence[Player]] = None) -> Optional[Player]:
        """Return the player holding a full line, if any."""
        return self.win_checker.check_winner(self.board, players or self.players)

    def check_tie(self) -> bool:
        return self.win_checker.check_tie(self.board)

    def play_turn(self, position: int) -> TurnOutcome:
        """
        Play one move for the current player and advance the match.

        A rejected move leaves the board and the turn unchanged.
        """
        if self.is_game_over:
            return TurnOutcome(
                accepted=False, status=self.status, winner=self.winner,
                error_message="The match is already over."
            )

        result = self.try_mark(self.current_player, position)
        if not result.is_valid:
            return TurnOutcome(
                accepted=False, status=self.status, winner=self.winner,
                error_message=result.error_message
            )

        winner = self.check_winner()
        if winner is not None:
            self.winner = winner
            self.status = MatchStatus.WINNER_DECLARED
        elif self.check_tie():
            self.status = MatchStatus.TIE_DECLARED
        else:
            self.current_index = 1 - self.current_index

        return TurnOutcome(accepted=True, status=self.status, winner=self.winner)
