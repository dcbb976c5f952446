import enum
import logging
import random
import re
import time
from typing import Callable

from . import game_config
from . import ttt_board
from . import ttt_players

_DIGITS = re.compile(r"\+?[0-9]+")

_PROMPT = 'Enter comma separated move: ("row,column"): '


class ParseError(Exception):
    pass


def parse_move(text: str) -> tuple[int, int]:
    """Parses human input such as "1,2" into (row, column).

    Raises:
        ParseError: If a token is not a non-negative integer, or if there are
            not exactly two tokens.
    """
    values: list[int] = []
    for token in text.strip().split(","):
        token = token.strip()
        # ASCII digits only, with an optional leading "+".
        if not _DIGITS.fullmatch(token):
            raise ParseError(f"invalid digit found in string: {token!r}")
        values.append(int(token))
    if len(values) != 2:
        raise ParseError(f"expected row,column but got {len(values)} values")
    return values[0], values[1]


class GameState(enum.Enum):
    AWAITING_HUMAN_MOVE = enum.auto()
    AWAITING_COMPUTER_MOVE = enum.auto()
    GAME_OVER = enum.auto()


def _awaiting(player: ttt_board.Player) -> GameState:
    if player is ttt_board.Player.HUMAN:
        return GameState.AWAITING_HUMAN_MOVE
    return GameState.AWAITING_COMPUTER_MOVE


class Game:
    """One game between a human at the terminal and the computer.

    Input and output are injected so that the loop can be driven by scripts.
    `read_line` defaults to `input` and must raise EOFError when input is
    exhausted.
    """

    def __init__(
        self,
        config: game_config.GameConfig | None = None,
        read_line: Callable[[], str] | None = None,
        write: Callable[[str], None] = print,
        sleep: Callable[[float], None] = time.sleep,
        board: ttt_board.Board | None = None,
    ) -> None:
        self._config = config or game_config.GameConfig()
        self._read_line = read_line or input
        self._write = write
        self._sleep = sleep
        self.board = board or ttt_board.Board()
        self._computer = ttt_players.ComputerPlayer(random.Random(self._config.seed))
        self._current = self._config.first_player
        self.state = _awaiting(self._current)
        self.winner: ttt_board.Player | None = None

    def play(self) -> ttt_board.Player | None:
        """Runs the game to completion. Returns the winner, or None on a tie."""
        while self.state is not GameState.GAME_OVER:
            self.step()
        return self.winner

    def step(self) -> None:
        """Runs a single iteration of the turn loop."""
        self._write(self.board.render())
        winner = self.board.winner()
        if winner is not None:
            self._finish(winner)
            self._write(f"{winner} wins!")
            return
        if self.board.is_game_over():
            self._finish(None)
            self._write("a tie!")
            return

        if self._current is ttt_board.Player.HUMAN:
            self._human_turn()
        else:
            self._computer_turn()
        self._current = self._current.opponent()
        self.state = _awaiting(self._current)

    def _finish(self, winner: ttt_board.Player | None) -> None:
        self.winner = winner
        self.state = GameState.GAME_OVER
        logging.info(f"Game over, winner: {winner}, board: {self.board.as_string()}")

    def _human_turn(self) -> None:
        while True:
            self._write(_PROMPT)
            line = self._read_line()
            try:
                row, col = parse_move(line)
                self.board.apply_move(ttt_board.Move(row, col, ttt_board.Player.HUMAN))
            except (ParseError, ttt_board.OutOfBoundsError) as e:
                logging.debug(f"Rejected input {line!r}: {e}")
                self._write(str(e))
                continue
            return

    def _computer_turn(self) -> None:
        self._sleep(self._config.think_delay_secs)
        if self.board.is_empty():
            self._write("computer: playing random move")
        else:
            self._write("computer: thinking...")
        move = self._computer.choose_move(self.board)
        if self._computer.last_search_secs is not None:
            self._write(f"took {self._computer.last_search_secs:.3f} secs")
        self.board.apply_move(move)
