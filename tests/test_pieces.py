import unittest

from src.game.pieces import (
    COLOR_RGB,
    PIECE_TYPES,
    Kind,
    Position,
    get_tetromino,
)


class CatalogTests(unittest.TestCase):
    def test_seven_distinct_pieces(self):
        self.assertEqual(len(PIECE_TYPES), 7)
        self.assertEqual({p.kind for p in PIECE_TYPES}, set(Kind))
        self.assertEqual(len({p.color for p in PIECE_TYPES}), 7)

    def test_every_piece_has_four_cells(self):
        for piece in PIECE_TYPES:
            with self.subTest(piece=piece.name):
                self.assertEqual(len(piece.cells()), 4)

    def test_every_color_has_rgb(self):
        for piece in PIECE_TYPES:
            self.assertIn(piece.color, COLOR_RGB)

    def test_lookup_by_name_or_kind(self):
        self.assertIs(get_tetromino("T"), get_tetromino(Kind.T))
        self.assertEqual(get_tetromino("I").shape.shape, (1, 4))

    def test_shapes_are_read_only(self):
        shape = get_tetromino("O").shape
        with self.assertRaises(ValueError):
            shape[0, 0] = False

    def test_cells_at_offsets_by_position(self):
        t = get_tetromino("T")
        self.assertEqual(
            sorted(t.cells_at(Position(3, -1))),
            [(3, 0), (4, -1), (4, 0), (5, 0)],
        )


if __name__ == "__main__":
    unittest.main()
