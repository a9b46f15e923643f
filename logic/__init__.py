"""
Logic module for TicTacToe.
Handles board state, move rules, and win/tie detection.
"""

from .game_state import Board, Marker, Player, N
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker
from .game import Game, MatchStatus, TurnOutcome
from .display import display_board

__version__ = "1.0.0"
