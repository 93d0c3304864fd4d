import unittest

import numpy as np

from src.game.board import HEIGHT, WIDTH, Board
from src.game.pieces import Position
from src.game.spawner import PieceSpawner
from src.game.tetris import TetrisGame
from src.game.ticker import TickDriver
from tests.support import FixedSpawner, ScriptedSource


class TickDriverTests(unittest.TestCase):
    def setUp(self):
        self.game = TetrisGame(PieceSpawner(ScriptedSource("T")))
        self.ticker = TickDriver(interval_ms=1000)

    def test_rejects_non_positive_interval(self):
        with self.assertRaises(ValueError):
            TickDriver(interval_ms=0)

    def test_nothing_before_start(self):
        before = self.game.state
        self.assertEqual(self.ticker.update(self.game, 5000), 0)
        self.assertIs(self.game.state, before)

    def test_one_drop_per_interval(self):
        self.game.start()
        self.assertEqual(self.ticker.update(self.game, 999), 0)
        self.assertEqual(self.game.position.y, -2)
        self.assertEqual(self.ticker.update(self.game, 1), 1)
        self.assertEqual(self.game.position.y, -1)
        self.assertEqual(self.ticker.update(self.game, 2500), 2)
        self.assertEqual(self.game.position.y, 1)
        # 500 ms carried over
        self.assertEqual(self.ticker.update(self.game, 500), 1)

    def test_pause_releases_interval(self):
        self.game.start()
        self.ticker.update(self.game, 500)
        self.game.toggle_pause()
        before = self.game.state
        self.assertEqual(self.ticker.update(self.game, 10_000), 0)
        self.assertIs(self.game.state, before)

        self.game.toggle_pause()
        self.assertEqual(self.ticker.update(self.game, 600), 0)
        self.assertEqual(self.game.position.y, -2)
        self.assertEqual(self.ticker.update(self.game, 400), 1)

    def test_stops_at_game_over(self):
        grid = np.zeros((HEIGHT, WIDTH), dtype=np.int8)
        grid[2, 4:6] = 1
        game = TetrisGame(FixedSpawner("O", Position(4, 0)))
        game.start(Board.from_grid(grid))
        self.assertEqual(self.ticker.update(game, 10_000), 1)
        self.assertTrue(game.game_over)
        self.assertEqual(self.ticker.update(game, 10_000), 0)


if __name__ == "__main__":
    unittest.main()
