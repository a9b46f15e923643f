"""
Pytest fixtures for TicTacToe tests.
"""

from typing import List

import pytest

from logic.game import Game
from logic.game_state import Marker, Player
from session.channel import Channel, ChannelClosed
from session.config import SessionConfig


class ScriptedChannel(Channel):
    """
    In-memory channel: replies come from a list, output is collected.
    Runs out of replies the same way a closed connection does.
    """

    def __init__(self, replies: List[str], config=None):
        super().__init__(config)
        self.replies = list(replies)
        self.output: List[str] = []
        self.clears = 0

    def write(self, text: str):
        self.output.append(text)

    def read_line(self) -> str:
        if not self.replies:
            raise ChannelClosed("script exhausted")
        return self.replies.pop(0)

    def clear_screen(self):
        self.clears += 1

    @property
    def text(self) -> str:
        return "".join(self.output)


class QuietConfig(SessionConfig):
    """No animation delays."""
    ANIMATE = False


@pytest.fixture
def quiet_config() -> SessionConfig:
    return QuietConfig()


@pytest.fixture
def scripted():
    """Factory for scripted channels."""
    def make(*replies: str) -> ScriptedChannel:
        return ScriptedChannel(list(replies), QuietConfig())
    return make


@pytest.fixture
def players():
    """Ann plays X, Bob plays O."""
    return Player("Ann", Marker.X), Player("Bob", Marker.O)


@pytest.fixture
def game(players) -> Game:
    return Game(players)
