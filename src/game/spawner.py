"""
Piece spawner: uniform random piece selection and the canonical spawn position.

The random source is injectable. Anything with a ``choice(sequence)``
method works, so ``random.Random`` can be used directly and tests can
script the exact order of pieces.
"""

from __future__ import annotations

import random
from typing import Protocol, Sequence, TypeVar

from src.game.board import WIDTH
from src.game.pieces import PIECE_TYPES, Piece, Position

T = TypeVar("T")

# Two rows above the board so the tallest pieces are not clipped on entry
SPAWN_POSITION = Position(WIDTH // 2 - 1, -2)


class RandomSource(Protocol):
    """Minimal interface the spawner needs from a random number generator."""

    def choice(self, seq: Sequence[T]) -> T:
        ...


class PieceSpawner:
    """Selects each new piece uniformly at random from the catalog.

    Attributes:
        rng: The random source consulted on every spawn.
    """

    def __init__(self, rng: RandomSource | None = None, seed: int | None = None) -> None:
        """Initialize the spawner.

        Args:
            rng: Random source to draw from. Takes precedence over ``seed``.
            seed: Seed for a private ``random.Random`` when no rng is given.
        """
        self.rng: RandomSource = rng if rng is not None else random.Random(seed)

    def spawn(self) -> tuple[Piece, Position]:
        """Pick the next piece and return it with the spawn position.

        Returns:
            (piece, position) where position is always SPAWN_POSITION.
        """
        return self.rng.choice(PIECE_TYPES), SPAWN_POSITION
