"""
Play modes.

Provides two front-ends over the same engine:
  - play_manual: pygame window with keyboard controls.
  - play_text: line-based terminal mode, one command per line.

Both collect input and tick-driven drops in arrival order and apply them
one command at a time through TetrisGame.step().
"""

from __future__ import annotations

import sys
from typing import Any, TextIO

import numpy as np

try:
    import pygame
except ImportError:
    pygame = None  # type: ignore[assignment]

from src.game.board import EMPTY
from src.game.pieces import PIECE_TYPES
from src.game.tetris import TetrisGame, Action
from src.game.ticker import TickDriver


# ── Keyboard mapping for manual play ─────────────────────────────────────
# Arrow keys for movement, Space to pause, Enter to start / play again
KEY_MAP: dict[int, Action] = {}
if pygame is not None:
    KEY_MAP = {
        pygame.K_LEFT: Action.LEFT,
        pygame.K_RIGHT: Action.RIGHT,
        pygame.K_DOWN: Action.DOWN,
        pygame.K_SPACE: Action.PAUSE,
    }

# ── Terminal mode commands ───────────────────────────────────────────────
TEXT_COMMANDS: dict[str, Action] = {
    "a": Action.LEFT,
    "d": Action.RIGHT,
    "s": Action.DOWN,
    "p": Action.PAUSE,
    "n": Action.START,
}

COLOR_LETTERS: dict[int, str] = {piece.color: piece.name for piece in PIECE_TYPES}


def summary_line(game: TetrisGame) -> str:
    return f"Game over | Score: {game.score} | Lines: {game.total_lines}"


def play_manual(config: dict[str, Any]) -> None:
    """Run the game in a pygame window.

    Controls:
      - Left/Right arrow: move piece
      - Down arrow: drop one row
      - Space: pause / resume
      - Enter: start a new game (before the first game or after game over)
      - Escape / close window: quit

    Args:
        config: Config dict from load_config().
    """
    if pygame is None:
        raise ImportError("pygame is required for play mode. Install it: pip install pygame")

    from src.renderer import TetrisRenderer

    fps = config.get("fps", 60)
    game = TetrisGame(seed=config.get("seed"))
    ticker = TickDriver(config.get("tick_interval_ms", 1000))
    renderer = TetrisRenderer(game, cell_size=config.get("cell_size", 30))
    # Force renderer init before event loop (pygame must be initialized for event.get())
    elapsed_ms = renderer.render(fps)

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
                break
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                    break

                if event.key == pygame.K_RETURN:
                    if not game.game_started or game.game_over:
                        game.step(Action.START)
                        ticker.reset()
                    continue

                if event.key in KEY_MAP:
                    was_over = game.game_over
                    game.step(KEY_MAP[event.key])
                    if game.game_over and not was_over:
                        print(summary_line(game))

        if not running:
            break

        was_over = game.game_over
        ticker.update(game, elapsed_ms)
        if game.game_over and not was_over:
            print(summary_line(game))

        elapsed_ms = renderer.render(fps)

    renderer.close()


def format_grid(grid: np.ndarray) -> str:
    """Render a grid snapshot as text: '.' for empty, piece letters otherwise."""
    lines = []
    for row in grid:
        lines.append("|" + "".join(
            "." if cell == EMPTY else COLOR_LETTERS.get(int(cell), "#") for cell in row
        ) + "|")
    lines.append("+" + "-" * grid.shape[1] + "+")
    return "\n".join(lines)


def play_text(
    config: dict[str, Any],
    stdin: TextIO = sys.stdin,
    stdout: TextIO = sys.stdout,
) -> TetrisGame:
    """Run the game in the terminal, reading one command per line.

    Commands: a = left, d = right, s = down, p = pause, n = new game,
    q = quit. An empty line lets one tick interval pass. The board is
    printed after every line.

    Args:
        config: Config dict from load_config().
        stdin: Where commands are read from.
        stdout: Where the board is printed.

    Returns:
        The game, in whatever state it was left.
    """
    interval_ms = config.get("tick_interval_ms", 1000)
    game = TetrisGame(seed=config.get("seed"))
    ticker = TickDriver(interval_ms)

    print("Commands: a=left d=right s=down p=pause n=new game q=quit, "
          "empty line = wait one tick", file=stdout)
    for raw in stdin:
        command = raw.strip().lower()
        if command == "q":
            break

        was_over = game.game_over
        if command == "":
            ticker.update(game, interval_ms)
        elif command in TEXT_COMMANDS:
            action = TEXT_COMMANDS[command]
            if action == Action.START:
                ticker.reset()
            game.step(action)
        else:
            print(f"Unknown command: {command!r}", file=stdout)
            continue

        print(format_grid(game.render()), file=stdout)
        status = "paused" if game.is_paused else "running" if game.is_running else "stopped"
        print(f"Score: {game.score} | Lines: {game.total_lines} | {status}", file=stdout)
        if game.game_over and not was_over:
            print(summary_line(game), file=stdout)

    return game
