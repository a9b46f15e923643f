"""
Text rendering of the board and the players.
"""

from typing import Optional, Sequence

from .game_state import Board, Player, N

RULE = "-" * (4 * N + 1)


def display_board(board: Board, players: Optional[Sequence[Player]] = None) -> str:
    """
    Render the board as text.

    Example:

        Name: Ann Choice: X

        Name: Bob Choice: O

        -------------
        | X | _ | _ |
        -------------
        | _ | O | _ |
        -------------
        | _ | _ | _ |
        -------------
    """
    lines = [""]
    for player in players or ():
        lines += ["", f"Name: {player.name} Choice: {player.marker}"]
    lines += ["", RULE]
    for row in board.rows():
        lines.append("|" + "".join(f" {cell} |" for cell in row))
        lines.append(RULE)
    return "\n".join(lines) + "\n"
