"""Deterministic piece sources for tests."""

from __future__ import annotations

import itertools

from src.game.pieces import Kind, Piece, Position, get_tetromino


class ScriptedSource:
    """Random source that returns catalog pieces in a fixed, repeating order."""

    def __init__(self, *kinds: str) -> None:
        self._kinds = itertools.cycle(Kind(k) for k in kinds)
        self.calls = 0

    def choice(self, seq):
        self.calls += 1
        kind = next(self._kinds)
        return next(item for item in seq if item.kind == kind)


class FixedSpawner:
    """Spawner that always returns the same piece at the same position."""

    def __init__(self, kind: str, position: Position) -> None:
        self.piece: Piece = get_tetromino(kind)
        self.position = position

    def spawn(self) -> tuple[Piece, Position]:
        return self.piece, self.position
