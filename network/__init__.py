"""
Network module for TicTacToe.
Serves sessions to remote players over plain TCP.
"""

from .server import GameServer
