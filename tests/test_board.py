import unittest

import numpy as np

from src.game.board import HEIGHT, WIDTH, Board
from src.game.pieces import COLOR_YELLOW, Position, get_tetromino


def _grid_with_full_rows(rows):
    grid = np.zeros((HEIGHT, WIDTH), dtype=np.int8)
    # Partial rows tagged with their own index so order can be checked
    for r in range(HEIGHT):
        grid[r, r % WIDTH] = (r % 7) + 1
    for r in rows:
        grid[r, :] = 3
    return grid


class BoardTests(unittest.TestCase):
    def test_empty_board_dimensions(self):
        board = Board.empty()
        self.assertEqual(board.grid.shape, (HEIGHT, WIDTH))
        self.assertFalse(board.grid.any())

    def test_wrong_shape_rejected(self):
        with self.assertRaises(ValueError):
            Board.from_grid(np.zeros((HEIGHT, WIDTH + 1)))

    def test_grid_is_read_only(self):
        board = Board.empty()
        with self.assertRaises(ValueError):
            board.grid[0, 0] = 1
        copy = board.get_grid()
        copy[0, 0] = 1
        self.assertFalse(board.is_occupied(0, 0))

    def test_merge_returns_new_board(self):
        board = Board.empty()
        merged = board.merge(get_tetromino("O"), Position(4, 18))
        self.assertFalse(board.grid.any())
        for x, y in [(4, 18), (5, 18), (4, 19), (5, 19)]:
            self.assertEqual(merged.grid[y, x], COLOR_YELLOW)
        self.assertEqual(int(np.count_nonzero(merged.grid)), 4)

    def test_merge_discards_cells_above_board(self):
        merged = Board.empty().merge(get_tetromino("O"), Position(0, -1))
        self.assertEqual(int(np.count_nonzero(merged.grid)), 2)
        self.assertTrue(merged.is_occupied(0, 0))
        self.assertTrue(merged.is_occupied(1, 0))

    def test_clear_nothing(self):
        board = Board.from_grid(_grid_with_full_rows([]))
        cleared_board, count = board.clear_full_rows()
        self.assertEqual(count, 0)
        self.assertEqual(cleared_board, board)

    def test_clear_non_adjacent_rows(self):
        grid = _grid_with_full_rows([2, 5, 6])
        board = Board.from_grid(grid)
        cleared_board, count = board.clear_full_rows()

        self.assertEqual(count, 3)
        self.assertEqual(cleared_board.grid.shape, (HEIGHT, WIDTH))
        self.assertFalse(cleared_board.grid[:3].any())
        kept = [r for r in range(HEIGHT) if r not in (2, 5, 6)]
        np.testing.assert_array_equal(cleared_board.grid[3:], grid[kept])
        # Original untouched
        np.testing.assert_array_equal(board.grid, grid)

    def test_clear_adjacent_bottom_rows(self):
        grid = np.zeros((HEIGHT, WIDTH), dtype=np.int8)
        grid[17, 0] = 4
        grid[18:, :] = 1
        cleared_board, count = Board.from_grid(grid).clear_full_rows()
        self.assertEqual(count, 2)
        self.assertEqual(cleared_board.grid[19, 0], 4)
        self.assertEqual(int(np.count_nonzero(cleared_board.grid)), 1)


if __name__ == "__main__":
    unittest.main()
