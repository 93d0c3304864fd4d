"""
Tick driver — time-based source of automatic descend commands.

The driver is fed elapsed milliseconds by whatever loop owns the clock
(pygame's Clock in play mode, a fixed step in the terminal mode and in
tests). It only accumulates time while the game is running and unpaused;
leaving that condition releases the interval, so resuming waits a full
interval before the next drop.
"""

from __future__ import annotations

from src.game.tetris import TetrisGame

DEFAULT_INTERVAL_MS = 1000


class TickDriver:
    """Issues one descend() per elapsed interval while the game is running.

    Attributes:
        interval_ms: Milliseconds between automatic drops.
    """

    def __init__(self, interval_ms: int = DEFAULT_INTERVAL_MS) -> None:
        if interval_ms <= 0:
            raise ValueError(f"interval_ms must be positive, got {interval_ms}")
        self.interval_ms = interval_ms
        self._elapsed_ms: float = 0.0

    def reset(self) -> None:
        """Release the current interval."""
        self._elapsed_ms = 0.0

    def update(self, game: TetrisGame, elapsed_ms: float) -> int:
        """Advance the clock and drop the piece for every full interval.

        Stops early if a drop ends the game.

        Args:
            game: The game to drive.
            elapsed_ms: Time since the previous update.

        Returns:
            Number of descend() commands issued.
        """
        if not game.is_running:
            self.reset()
            return 0

        self._elapsed_ms += elapsed_ms
        drops = 0
        while self._elapsed_ms >= self.interval_ms:
            self._elapsed_ms -= self.interval_ms
            game.descend()
            drops += 1
            if not game.is_running:
                self.reset()
                break
        return drops
