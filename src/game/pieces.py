"""
Tetromino catalog: the seven canonical shapes and their color tags.

Shapes are stored in their single canonical orientation as read-only
boolean masks, using the smallest bounding box that fits the piece.

Coordinate convention:
  - Row 0 of a mask is its top and row increases downward.
  - Column 0 is the left edge and column increases rightward.
  - A piece's Position is the board coordinate of the mask's top-left
    corner, so an occupied mask cell (row, col) lands on the board at
    (x + col, y + row).
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import NamedTuple

import numpy as np

# =============================================================================
# Color tags — stored in settled board cells (0 is reserved for empty)
# =============================================================================

COLOR_CYAN = 1     # I
COLOR_YELLOW = 2   # O
COLOR_PURPLE = 3   # T
COLOR_GREEN = 4    # S
COLOR_RED = 5      # Z
COLOR_BLUE = 6     # J
COLOR_ORANGE = 7   # L

# Standard guideline colors (RGB) for presentation
COLOR_RGB: dict[int, tuple[int, int, int]] = {
    COLOR_CYAN: (0, 255, 255),
    COLOR_YELLOW: (255, 255, 0),
    COLOR_PURPLE: (128, 0, 128),
    COLOR_GREEN: (0, 255, 0),
    COLOR_RED: (255, 0, 0),
    COLOR_BLUE: (0, 0, 255),
    COLOR_ORANGE: (255, 165, 0),
}


class Kind(enum.Enum):
    """The seven tetromino identifiers."""
    I = "I"
    J = "J"
    L = "L"
    O = "O"
    S = "S"
    T = "T"
    Z = "Z"


class Position(NamedTuple):
    """Board offset of a piece's top-left corner. ``y`` may be negative."""
    x: int
    y: int


@dataclass(frozen=True, eq=False)
class Piece:
    """A tetromino instance: its kind, shape mask and color tag.

    Attributes:
        kind: Which of the seven tetrominoes this is.
        shape: Read-only boolean mask (rows x cols).
        color: Color tag written into board cells when the piece locks.
    """

    kind: Kind
    shape: np.ndarray
    color: int

    @property
    def name(self) -> str:
        return self.kind.value

    def cells(self) -> list[tuple[int, int]]:
        """Return the ``(dx, dy)`` offsets of every occupied mask cell."""
        return [(int(c), int(r)) for r, c in np.argwhere(self.shape)]

    def cells_at(self, position: Position) -> list[tuple[int, int]]:
        """Return the absolute ``(x, y)`` board coordinates at ``position``."""
        return [(position.x + dx, position.y + dy) for dx, dy in self.cells()]

    def __repr__(self) -> str:
        return f"Piece({self.name}, color={self.color})"


def _mask(rows: list[list[int]]) -> np.ndarray:
    mask = np.array(rows, dtype=bool)
    mask.setflags(write=False)
    return mask


# =============================================================================
# Tetromino Definitions
# =============================================================================

I_PIECE = Piece(Kind.I, _mask([[1, 1, 1, 1]]), COLOR_CYAN)

J_PIECE = Piece(Kind.J, _mask([
    [1, 0, 0],
    [1, 1, 1],
]), COLOR_BLUE)

L_PIECE = Piece(Kind.L, _mask([
    [0, 0, 1],
    [1, 1, 1],
]), COLOR_ORANGE)

O_PIECE = Piece(Kind.O, _mask([
    [1, 1],
    [1, 1],
]), COLOR_YELLOW)

S_PIECE = Piece(Kind.S, _mask([
    [0, 1, 1],
    [1, 1, 0],
]), COLOR_GREEN)

T_PIECE = Piece(Kind.T, _mask([
    [0, 1, 0],
    [1, 1, 1],
]), COLOR_PURPLE)

Z_PIECE = Piece(Kind.Z, _mask([
    [1, 1, 0],
    [0, 1, 1],
]), COLOR_RED)

# =============================================================================
# Ordered list of all piece types
# =============================================================================

PIECE_TYPES: list[Piece] = [I_PIECE, J_PIECE, L_PIECE, O_PIECE, S_PIECE, T_PIECE, Z_PIECE]

_CATALOG: dict[Kind, Piece] = {piece.kind: piece for piece in PIECE_TYPES}


def get_tetromino(kind: Kind | str) -> Piece:
    """Return the catalog piece for a tetromino identifier.

    Args:
        kind: A Kind member or its one-letter name ("I", "J", ...).

    Returns:
        The shared, immutable catalog Piece.
    """
    return _CATALOG[Kind(kind)]
