"""
Board logic for the fixed 10x20 grid.

The board is a 2D numpy array (height x width) of int8 values:
  - 0 = empty cell
  - 1-7 = color tag of the piece that locked there

Row 0 is the top of the visible board. There is no hidden buffer zone:
pieces above row 0 are simply not part of the grid yet.

Boards are copy-on-write. The backing array is read-only and every
operation that changes cells returns a new Board.
"""

from __future__ import annotations

import numpy as np

from src.game.pieces import Piece, Position

WIDTH = 10
HEIGHT = 20
EMPTY = 0


class Board:
    """Immutable Tetris board with merging and row clearing.

    Attributes:
        width: Number of columns (always WIDTH).
        height: Number of rows (always HEIGHT).
        grid: Read-only numpy array of shape (height, width), dtype int8.
    """

    width = WIDTH
    height = HEIGHT

    def __init__(self, grid: np.ndarray | None = None) -> None:
        """Wrap a grid, or create an empty board when none is given.

        Args:
            grid: Array of shape (HEIGHT, WIDTH). It is copied, so later
                changes by the caller do not leak into the board.

        Raises:
            ValueError: If the grid does not have shape (HEIGHT, WIDTH).
        """
        if grid is None:
            grid = np.zeros((HEIGHT, WIDTH), dtype=np.int8)
        else:
            grid = np.array(grid, dtype=np.int8)
            if grid.shape != (HEIGHT, WIDTH):
                raise ValueError(
                    f"Board grid must have shape {(HEIGHT, WIDTH)}, got {grid.shape}"
                )
        grid.setflags(write=False)
        self.grid = grid

    @classmethod
    def empty(cls) -> Board:
        """Return a board with every cell empty."""
        return cls()

    @classmethod
    def from_grid(cls, grid) -> Board:
        """Build a board from any (HEIGHT, WIDTH) array-like of color tags."""
        return cls(np.asarray(grid))

    def is_occupied(self, x: int, y: int) -> bool:
        """Return True if the cell at column ``x``, row ``y`` is filled."""
        return bool(self.grid[y, x] != EMPTY)

    def merge(self, piece: Piece, position: Position) -> Board:
        """Return a copy of the board with ``piece`` written at ``position``.

        Cells that fall above the visible board (y < 0) are discarded.
        Does NOT check validity first — caller must ensure the position
        does not collide.

        Args:
            piece: The piece being locked.
            position: Top-left corner of the piece's mask.

        Returns:
            A new Board; this board is left untouched.
        """
        grid = self.grid.copy()
        for x, y in piece.cells_at(position):
            if y >= 0:
                grid[y, x] = piece.color
        return Board(grid)

    def clear_full_rows(self) -> tuple[Board, int]:
        """Remove every fully filled row at once and pad with empty rows on top.

        Returns:
            (new_board, cleared_count). The remaining rows keep their
            relative order. When nothing is cleared the same board is
            returned with a count of 0.
        """
        full = np.all(self.grid != EMPTY, axis=1)
        cleared = int(full.sum())
        if cleared == 0:
            return self, 0

        remaining = self.grid[~full]
        empty_rows = np.zeros((cleared, self.width), dtype=np.int8)
        return Board(np.vstack([empty_rows, remaining])), cleared

    def get_grid(self) -> np.ndarray:
        """Return a writable copy of the board grid.

        Returns:
            A numpy array of shape (height, width), dtype int8.
        """
        return self.grid.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self.grid, other.grid))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        filled = int(np.count_nonzero(self.grid))
        return f"Board({self.width}x{self.height}, filled={filled})"
