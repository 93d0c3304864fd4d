"""Collision rules: is a piece at a position legal on a board?"""

from __future__ import annotations

from src.game.board import Board
from src.game.pieces import Piece, Position


def collides(piece: Piece, position: Position, board: Board) -> bool:
    """Check whether a piece at ``position`` overlaps walls, floor or settled cells.

    A position collides if any filled cell of the piece:
      - Is outside the horizontal bounds (col < 0 or col >= width).
      - Is at or below the floor (row >= height).
      - Is inside the board (row >= 0) and on an occupied cell.

    Rows above the board (row < 0) are exempt from the occupancy check
    so that a freshly spawned piece may hang partly off-screen.

    Args:
        piece: The piece to test.
        position: Top-left corner of the piece's mask.
        board: Settled cells to test against.

    Returns:
        True if the position is illegal, False otherwise.
    """
    for x, y in piece.cells_at(position):
        # Check boundaries
        if x < 0 or x >= board.width:
            return True
        if y >= board.height:
            return True
        # Check collision with existing blocks
        if y >= 0 and board.is_occupied(x, y):
            return True
    return False
