import unittest

import numpy as np

from src.game.board import HEIGHT, WIDTH, Board
from src.game.collision import collides
from src.game.pieces import Position, get_tetromino


class CollisionTests(unittest.TestCase):
    def setUp(self):
        self.board = Board.empty()
        self.i_piece = get_tetromino("I")
        self.o_piece = get_tetromino("O")

    def test_inside_empty_board(self):
        self.assertFalse(collides(self.o_piece, Position(0, 0), self.board))
        self.assertFalse(collides(self.i_piece, Position(WIDTH - 4, HEIGHT - 1), self.board))

    def test_horizontal_bounds(self):
        self.assertTrue(collides(self.o_piece, Position(-1, 5), self.board))
        self.assertTrue(collides(self.i_piece, Position(WIDTH - 3, 5), self.board))

    def test_floor(self):
        self.assertTrue(collides(self.o_piece, Position(4, HEIGHT - 1), self.board))

    def test_occupied_cell(self):
        grid = np.zeros((HEIGHT, WIDTH), dtype=np.int8)
        grid[10, 5] = 2
        board = Board.from_grid(grid)
        self.assertTrue(collides(self.o_piece, Position(4, 9), board))
        self.assertFalse(collides(self.o_piece, Position(6, 9), board))

    def test_rows_above_board_skip_occupancy(self):
        grid = np.ones((HEIGHT, WIDTH), dtype=np.int8)
        board = Board.from_grid(grid)
        self.assertFalse(collides(self.o_piece, Position(4, -2), board))
        self.assertTrue(collides(self.o_piece, Position(4, -1), board))

    def test_rows_above_board_keep_horizontal_bounds(self):
        self.assertTrue(collides(self.o_piece, Position(-1, -2), self.board))
        self.assertTrue(collides(self.o_piece, Position(WIDTH - 1, -2), self.board))


if __name__ == "__main__":
    unittest.main()
