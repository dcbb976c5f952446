import logging
import random

import pydantic

from . import ttt_board
from . import ttt_players


class SimulationSummary(pydantic.BaseModel):
    # Number of games played.
    games: int = 0
    computer_wins: int = 0
    human_wins: int = 0
    ties: int = 0


def play_silent_game(
    computer: ttt_players.AbstractPlayer,
    human: ttt_players.AbstractPlayer,
    first_player: ttt_board.Player,
) -> ttt_board.Player | None:
    """Plays one game without any I/O. Returns the winner or None for a tie."""
    board = ttt_board.Board()
    current = first_player
    while True:
        winner = board.winner()
        if winner is not None:
            return winner
        if board.is_game_over():
            return None
        player = computer if current is ttt_board.Player.COMPUTER else human
        board.apply_move(player.choose_move(board))
        current = current.opponent()


def simulate_games(
    count: int, seed: int | None = None, computer_first: bool = True
) -> SimulationSummary:
    rng = random.Random(seed)
    computer = ttt_players.ComputerPlayer(rng)
    human = ttt_players.RandomPlayer(ttt_board.Player.HUMAN, rng)
    first_player = (
        ttt_board.Player.COMPUTER if computer_first else ttt_board.Player.HUMAN
    )
    logging.info(
        f"Simulating {count} games: {computer.description()} vs {human.description()}"
    )
    summary = SimulationSummary()
    for i in range(count):
        winner = play_silent_game(computer, human, first_player)
        summary.games += 1
        if winner is ttt_board.Player.COMPUTER:
            summary.computer_wins += 1
        elif winner is ttt_board.Player.HUMAN:
            summary.human_wins += 1
        else:
            summary.ties += 1
        logging.info(f"Game {i+1} of {count}: winner {winner}")
    return summary
