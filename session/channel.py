"""
Text channels for TicTacToe sessions.
A session only ever talks to a Channel, so the same game loop
runs in a local terminal or over a TCP connection.
"""

import os
import socket
import subprocess
import sys
from abc import ABC, abstractmethod
from typing import Optional, TextIO

from .config import SessionConfig


class ChannelClosed(ConnectionError):
    """The other side stopped sending input."""


class Channel(ABC):
    """
    A bidirectional, line-oriented text stream.
    """

    def __init__(self, config: Optional[SessionConfig] = None):
        self.config = config or SessionConfig()

    @abstractmethod
    def write(self, text: str):
        """Send text as-is, no newline added."""

    @abstractmethod
    def read_line(self) -> str:
        """
        Read one line of input.

        Returns:
            The line without its line ending.

        Raises:
            ChannelClosed: If the input has ended.
        """

    @abstractmethod
    def clear_screen(self):
        """Clear the player's screen."""

    def close(self):
        pass


class ConsoleChannel(Channel):
    """
    Channel on the local terminal.
    """

    def __init__(
        self,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        config: Optional[SessionConfig] = None
    ):
        super().__init__(config)
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout

    def write(self, text: str):
        self.stdout.write(text)
        self.stdout.flush()

    def read_line(self) -> str:
        line = self.stdin.readline()
        if not line:
            raise ChannelClosed("end of console input")
        return line.rstrip("\r\n")

    def clear_screen(self):
        # Only a real terminal gets cleared
        if not self.stdout.isatty():
            return
        if os.name == "nt":
            # cls is a cmd.exe builtin
            subprocess.run(self.config.CLEAR_COMMAND_WINDOWS, shell=True, check=False)
        else:
            subprocess.run([self.config.CLEAR_COMMAND_POSIX], check=False)


class SocketChannel(Channel):
    """
    Channel on an accepted TCP connection.
    """

    def __init__(self, conn: socket.socket, config: Optional[SessionConfig] = None):
        super().__init__(config)
        self.conn = conn
        self.reader = conn.makefile("r", encoding=self.config.ENCODING, errors="replace", newline="\n")

    def write(self, text: str):
        try:
            self.conn.sendall(text.encode(self.config.ENCODING))
        except OSError as e:
            raise ChannelClosed(f"send failed: {e}") from e

    def read_line(self) -> str:
        try:
            line = self.reader.readline()
        except OSError as e:
            raise ChannelClosed(f"receive failed: {e}") from e
        if not line:
            raise ChannelClosed("client disconnected")
        return line.rstrip("\r\n")

    def clear_screen(self):
        self.write(self.config.CLEAR_SEQUENCE + "\n")

    def close(self):
        try:
            self.reader.close()
        finally:
            self.conn.close()
