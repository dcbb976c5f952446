import logging
import sys

from . import ttt_board

# Terminal scores, always from the computer's point of view.
_SCORE_COMPUTER_WIN = 1
_SCORE_HUMAN_WIN = -1
_SCORE_NEUTRAL = 0


def terminal_score(winner: ttt_board.Player | None) -> int:
    if winner is ttt_board.Player.COMPUTER:
        return _SCORE_COMPUTER_WIN
    if winner is ttt_board.Player.HUMAN:
        return _SCORE_HUMAN_WIN
    return _SCORE_NEUTRAL


class _Search:
    def __init__(self) -> None:
        self.explored = 0

    def minimax(
        self, board: ttt_board.Board, depth: int, player: ttt_board.Player
    ) -> tuple[tuple[int, int] | None, int]:
        self.explored += 1
        winner = board.winner()
        if depth == 0 or winner is not None:
            return None, terminal_score(winner)

        maximizing = player is ttt_board.Player.COMPUTER
        best_score = -sys.maxsize - 1 if maximizing else sys.maxsize
        best_move: tuple[int, int] | None = None
        for row, col in board.free_cells():
            next_board = board.clone()
            next_board.apply_move(ttt_board.Move(row, col, player))
            _, score = self.minimax(next_board, depth - 1, player.opponent())
            # Strict comparison, so ties keep the earlier row-major move.
            if (maximizing and score > best_score) or (
                not maximizing and score < best_score
            ):
                best_score = score
                best_move = (row, col)
        return best_move, best_score


def minimax(
    board: ttt_board.Board, depth: int, player: ttt_board.Player
) -> tuple[tuple[int, int] | None, int]:
    """Exhaustive minimax search without pruning.

    Args:
        board: Position to search from. It is never mutated; every
            continuation is explored on a clone.
        depth: Number of plies left to explore. Callers pass the number of
            free cells so that the search always reaches the end of the game.
        player: Side to move in `board`.

    Returns:
        The chosen (row, col), or None if the position is terminal, and its
        backed-up score: +1 if the computer wins, -1 if the human wins, 0
        otherwise.
    """
    search = _Search()
    result = search.minimax(board, depth, player)
    logging.debug(
        f"Explored positions: {search.explored}, board: {board.as_string()}, result: {result}"
    )
    return result
