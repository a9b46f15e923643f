"""
Session module for TicTacToe.
Runs the prompt/turn loop over a console or socket channel.
"""

from .config import SessionConfig
from .channel import Channel, ChannelClosed, ConsoleChannel, SocketChannel
from .game_loop import GameSession
