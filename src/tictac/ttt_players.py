import abc
import logging
import random
import time

from . import ttt_board
from . import ttt_minimax


class AbstractPlayer(abc.ABC):
    @abc.abstractmethod
    def choose_move(self, board: ttt_board.Board) -> ttt_board.Move:
        pass

    @abc.abstractmethod
    def description(self) -> str:
        pass


class ComputerPlayer(AbstractPlayer):
    """Random opening, exhaustive minimax afterwards."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()
        # Seconds spent in the last search. None if the last move was random.
        self.last_search_secs: float | None = None

    def choose_move(self, board: ttt_board.Board) -> ttt_board.Move:
        if board.is_empty():
            self.last_search_secs = None
            return board.choose_random_free_move(ttt_board.Player.COMPUTER, self._rng)

        start_time = time.perf_counter()
        best_move, score = ttt_minimax.minimax(
            board, board.count_free(), ttt_board.Player.COMPUTER
        )
        self.last_search_secs = time.perf_counter() - start_time
        # The caller only asks for a move on a non-terminal board.
        assert best_move is not None, f"No move found for {board.as_string()}"
        logging.debug(
            f"Search picked {best_move} with score {score} in {self.last_search_secs:.3f}s"
        )
        row, col = best_move
        return ttt_board.Move(row, col, ttt_board.Player.COMPUTER)

    def description(self) -> str:
        return "Minimax"


class RandomPlayer(AbstractPlayer):
    def __init__(
        self, player: ttt_board.Player, rng: random.Random | None = None
    ) -> None:
        self._player = player
        self._rng = rng or random.Random()

    def choose_move(self, board: ttt_board.Board) -> ttt_board.Move:
        return board.choose_random_free_move(self._player, self._rng)

    def description(self) -> str:
        return "Random"
