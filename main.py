"""
Local TicTacToe for two players sharing one terminal.

This script ties together:
- Logic (board, moves, win/tie detection)
- Session (prompts, turn loop, replay)

Run this script to play TicTacToe in your terminal!
"""

import argparse
import sys

from session.channel import ChannelClosed, ConsoleChannel
from session.config import SessionConfig
from session.game_loop import GameSession


def main(argv=None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Two-player TicTacToe in the terminal"
    )
    parser.parse_args(argv)

    config = SessionConfig()
    session = GameSession(ConsoleChannel(config=config), config)

    try:
        session.run()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
        return 130
    except ChannelClosed:
        print()
    finally:
        print("Goodbye!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
