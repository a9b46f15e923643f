"""
Game Loop - drives a TicTacToe session over a channel.

The loop:
1. Loading animation
2. Ask for both players
3. Players alternate turns until a win or a tie
4. Ask to play again; a new match keeps the same players
"""

from typing import Optional, Sequence

from logic.display import display_board
from logic.game import Game, MatchStatus
from logic.game_state import Board, Player
from .channel import Channel
from .config import SessionConfig
from .prompts import prompt_confirm, read_int, read_players, slow_print


class GameSession:
    """
    One session: a pair of players and any number of matches.

    Usage:
        session = GameSession(ConsoleChannel())
        session.run()
    """

    def __init__(self, channel: Channel, config: Optional[SessionConfig] = None):
        self.channel = channel
        self.config = config or SessionConfig()
        self.game: Optional[Game] = None
        self.matches_played = 0

    def run(self):
        """Play matches until the players decline a replay."""
        self.start_render()
        players = read_players(self.channel)
        self.game = Game(players)
        self.play_match()
        while prompt_confirm(self.channel, "Do you want to Play Again [y/n]: "):
            self.game.reset()
            self.play_match()

    def start_render(self):
        """Loading banner, then the empty board."""
        interval = self.config.LOADING_INTERVAL if self.config.ANIMATE else 0
        board_interval = self.config.BOARD_INTERVAL if self.config.ANIMATE else 0

        self.channel.clear_screen()
        slow_print(self.channel, self.config.LOADING_TEXT, interval)
        self.channel.clear_screen()
        slow_print(self.channel, self.config.STARTED_TEXT, interval)
        slow_print(self.channel, display_board(Board()), board_interval)

    def play_match(self) -> MatchStatus:
        """
        Alternate turns until the match ends.

        Returns:
            The terminal status (WINNER_DECLARED or TIE_DECLARED).
        """
        game = self.game
        while not game.is_game_over:
            player = game.current_player
            self.clear_and_print_board()
            position = read_int(self.channel, f"Enter Marker Position ({player.name}): ")
            while True:
                outcome = game.play_turn(position)
                if outcome.accepted:
                    break
                self.channel.write(f"{outcome.error_message}\n")
                position = read_int(
                    self.channel,
                    f"Invalid Position, Enter Correct Marker Position ({player.name}): "
                )

        self.clear_and_print_board()
        if game.status == MatchStatus.WINNER_DECLARED:
            self.channel.write(f"Congrats {game.winner.name} Wins\n")
        else:
            self.channel.write("Match Got Tie\n")
        self.matches_played += 1
        return game.status

    def clear_and_print_board(self):
        self.channel.clear_screen()
        self.channel.write(display_board(self.game.board, self.players) + "\n")

    @property
    def players(self) -> Sequence[Player]:
        return self.game.players if self.game else ()
