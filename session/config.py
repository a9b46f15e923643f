"""
Session configuration for TicTacToe.
All the settings for prompts, animation, and the network server.
"""


class SessionConfig:
    """
    Configuration class for terminal and network sessions.
    Change these values based on your setup!
    """

    # ==================== ANIMATION SETTINGS ====================
    # Slow-print the loading banner and empty board at session start
    ANIMATE = True

    # Seconds between characters
    LOADING_INTERVAL = 0.05  # Banner and "Game Started"
    BOARD_INTERVAL = 0.03    # First empty board

    LOADING_TEXT = "TIC TAC TOE LOADING " + "." * 50
    STARTED_TEXT = "\nGame Started\n"

    # ==================== TERMINAL SETTINGS ====================
    # ANSI "erase display", sent to remote clients
    CLEAR_SEQUENCE = "\033[2J"

    # Local terminals are cleared with the platform command instead
    CLEAR_COMMAND_POSIX = "clear"
    CLEAR_COMMAND_WINDOWS = "cls"

    # ==================== SERVER SETTINGS ====================
    SERVER_HOST = ""   # All interfaces
    SERVER_PORT = 8000
    LISTEN_BACKLOG = 16
    ENCODING = "utf-8"

    # ==================== LOGGING SETTINGS ====================
    LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
