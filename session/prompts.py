"""
Prompt helpers for TicTacToe sessions.
Every question a session asks goes through these functions.
"""

import re
import time
from typing import Tuple

from logic.game_state import Marker, Player
from .channel import Channel

AFFIRMATIVE = {"y", "Y", "yes"}
NEGATIVE = {"n", "N", "no"}

# Non-numeric position input; never a valid cell
INVALID_POSITION = -1

INTEGER = re.compile(r"[+-]?[0-9]+")


def read_string(channel: Channel, prompt: str) -> str:
    """Write the prompt and return the stripped reply."""
    channel.write(prompt)
    return channel.read_line().strip()


def read_int(channel: Channel, prompt: str) -> int:
    """
    Write the prompt and parse the reply as an integer.

    Returns:
        The number, or INVALID_POSITION if the reply isn't one.
    """
    reply = read_string(channel, prompt)
    if not INTEGER.fullmatch(reply):
        return INVALID_POSITION
    return int(reply)


def prompt_confirm(channel: Channel, prompt: str) -> bool:
    """Ask a yes/no question until the answer is recognised."""
    while True:
        reply = read_string(channel, prompt)
        if reply in AFFIRMATIVE:
            return True
        if reply in NEGATIVE:
            return False


def read_players(channel: Channel) -> Tuple[Player, Player]:
    """
    Ask for both names and player 1's marker.
    Player 2 gets whichever marker is left.
    """
    name1 = read_string(channel, "Enter Player1 Name: ")
    choice = read_string(channel, f"Enter Marker Choice For {name1} [X/O]: ")
    while choice not in (Marker.X.value, Marker.O.value):
        choice = read_string(channel, "Invalid Input, Please Enter Marker Choice [X/O]: ")
    name2 = read_string(channel, "Enter Player2 Name: ")

    player1 = Player(name1, Marker(choice))
    player2 = Player(name2, player1.marker.opposite())
    return player1, player2


def slow_print(channel: Channel, text: str, interval: float):
    """Write text one character at a time."""
    for char in text:
        channel.write(char)
        if interval > 0:
            time.sleep(interval)
