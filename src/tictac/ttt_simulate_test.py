import random
import unittest

from . import ttt_board
from . import ttt_players
from . import ttt_simulate


class SimulateTest(unittest.TestCase):

    def test_computer_first(self):
        summary = ttt_simulate.simulate_games(10, seed=1, computer_first=True)
        self.assertEqual(summary.games, 10)
        self.assertEqual(summary.human_wins, 0)
        self.assertEqual(summary.computer_wins + summary.ties, 10)

    def test_logs_matchup(self):
        with self.assertLogs(level="INFO") as logs:
            ttt_simulate.simulate_games(1, seed=6)
        self.assertIn("Simulating 1 games: Minimax vs Random", logs.output[0])

    def test_human_first(self):
        summary = ttt_simulate.simulate_games(4, seed=2, computer_first=False)
        self.assertEqual(summary.games, 4)
        self.assertEqual(summary.human_wins, 0)

    def test_summary_json(self):
        summary = ttt_simulate.SimulationSummary(games=2, computer_wins=1, ties=1)
        self.assertEqual(
            summary.model_dump_json(),
            '{"games":2,"computer_wins":1,"human_wins":0,"ties":1}',
        )

    def test_random_players_finish(self):
        rng = random.Random(5)
        for _ in range(20):
            winner = ttt_simulate.play_silent_game(
                ttt_players.RandomPlayer(ttt_board.Player.COMPUTER, rng),
                ttt_players.RandomPlayer(ttt_board.Player.HUMAN, rng),
                ttt_board.Player.HUMAN,
            )
            self.assertIn(winner, [None, *ttt_board.Player])


if __name__ == "__main__":
    unittest.main()
