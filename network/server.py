"""
TCP server for TicTacToe.
Every accepted connection gets its own thread, game, and players.
"""

import logging
import socket
import threading
from typing import Optional, Tuple

from session.channel import ChannelClosed, SocketChannel
from session.config import SessionConfig
from session.game_loop import GameSession

logger = logging.getLogger(__name__)


class GameServer:
    """
    Line-oriented TicTacToe server.

    Connections share nothing, so no locking is needed. A client
    that never answers only blocks its own thread.
    """

    def __init__(
        self,
        host: Optional[str] = None,
        port: Optional[int] = None,
        config: Optional[SessionConfig] = None
    ):
        self.config = config or SessionConfig()
        self.host = self.config.SERVER_HOST if host is None else host
        self.port = self.config.SERVER_PORT if port is None else port
        self.server_socket: Optional[socket.socket] = None
        self._running = False

    @property
    def address(self) -> Tuple[str, int]:
        """Address actually bound (port 0 resolves to a real port)."""
        if self.server_socket is None:
            return self.host, self.port
        return self.server_socket.getsockname()[:2]

    def bind(self):
        """
        Open the listening socket.

        Raises:
            OSError: If the address can't be bound.
            OverflowError: If the port is outside 0-65535.
        """
        server = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        try:
            # allow reusing the address (helpful for quick restarts)
            server.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            server.bind((self.host, self.port))
            server.listen(self.config.LISTEN_BACKLOG)
        except (OSError, OverflowError):
            server.close()
            raise
        self.server_socket = server
        self._running = True

    def serve_forever(self):
        """Accept connections until shutdown() is called."""
        if self.server_socket is None:
            self.bind()
        server = self.server_socket

        while self._running:
            try:
                conn, addr = server.accept()
            except OSError as e:
                if not self._running:
                    break
                logger.warning("accept error: %s", e)
                continue

            logger.info("connection from %s:%s", addr[0], addr[1])
            threading.Thread(
                target=self.handle_connection,
                args=(conn, addr),
                name=f"game-{addr[0]}:{addr[1]}",
                daemon=True
            ).start()

    def handle_connection(self, conn: socket.socket, addr: Tuple[str, int]):
        """Run one session on an accepted connection, then close it."""
        channel = SocketChannel(conn, self.config)
        session = GameSession(channel, self.config)
        try:
            session.run()
            logger.info("%s:%s finished after %d match(es)", addr[0], addr[1], session.matches_played)
        except ChannelClosed as e:
            logger.info("%s:%s disconnected: %s", addr[0], addr[1], e)
        finally:
            channel.close()

    def shutdown(self):
        """Stop accepting; sessions already running keep going."""
        self._running = False
        server = self.server_socket
        self.server_socket = None
        if server is not None:
            try:
                server.shutdown(socket.SHUT_RDWR)
            except OSError:
                pass  # not connected; close() is enough
            server.close()
