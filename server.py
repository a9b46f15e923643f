"""
TicTacToe server: play over TCP with any line-based client
(telnet, nc, ...). Each connection is a separate two-player game.
"""

import argparse
import logging
import sys

from network.server import GameServer
from session.config import SessionConfig


def main(argv=None) -> int:
    """Main entry point."""
    config = SessionConfig()

    parser = argparse.ArgumentParser(description="TicTacToe TCP server")
    parser.add_argument(
        "-p", "--port", "-port",
        type=int,
        default=config.SERVER_PORT,
        help=f"Port to listen on (default {config.SERVER_PORT})"
    )
    parser.add_argument(
        "--host",
        default=config.SERVER_HOST,
        help="Address to bind (default: all interfaces)"
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format=config.LOG_FORMAT)

    server = GameServer(args.host, args.port, config)
    try:
        server.bind()
    except (OSError, OverflowError) as e:
        print(f"Fatal error : {e}", file=sys.stderr)
        return 1

    host, port = server.address
    print(f"listening on {host}:{port}")

    try:
        server.serve_forever()
    except KeyboardInterrupt:
        print("\nServer interrupted by user.")
    finally:
        server.shutdown()
    return 0


if __name__ == "__main__":
    sys.exit(main())
