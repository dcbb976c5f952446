import random
import unittest

from . import ttt_board
from . import ttt_players


class ComputerPlayerTest(unittest.TestCase):

    def test_opening_is_random(self):
        player = ttt_players.ComputerPlayer(random.Random(11))
        board = ttt_board.Board()
        move = player.choose_move(board)
        self.assertIs(move.player, ttt_board.Player.COMPUTER)
        self.assertTrue(0 <= move.row < 3 and 0 <= move.col < 3)
        self.assertIsNone(player.last_search_secs)
        # Choosing does not play.
        self.assertTrue(board.is_empty())

    def test_description(self):
        self.assertEqual(ttt_players.ComputerPlayer().description(), "Minimax")
        self.assertEqual(
            ttt_players.RandomPlayer(ttt_board.Player.HUMAN).description(), "Random"
        )

    def test_searches_after_opening(self):
        player = ttt_players.ComputerPlayer()
        board = ttt_board.Board.from_rows("XX.|OO.|O..")
        move = player.choose_move(board)
        self.assertEqual(move, ttt_board.Move(0, 2, ttt_board.Player.COMPUTER))
        self.assertIsNotNone(player.last_search_secs)


class RandomPlayerTest(unittest.TestCase):

    def test_plays_free_cell(self):
        player = ttt_players.RandomPlayer(ttt_board.Player.HUMAN, random.Random(0))
        board = ttt_board.Board.from_rows("OXO|XXO|.O.")
        for _ in range(10):
            move = player.choose_move(board)
            self.assertIn((move.row, move.col), [(2, 0), (2, 2)])
            self.assertIs(move.player, ttt_board.Player.HUMAN)


if __name__ == "__main__":
    unittest.main()
