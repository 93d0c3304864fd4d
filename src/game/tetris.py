"""
Game engine — immutable game state, command transitions, and scoring.

Every command is a pure function that takes a GameState and returns a new
one; the input state is never modified. TetrisGame wraps those functions
in a small stateful facade that presentation code drives with discrete
commands and reads snapshots from.

State machine:
    NotStarted -> Running <-> Paused
    Running -> GameOver (terminal until the next start)

Commands issued outside their legal window are silently ignored.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, replace
from typing import Any, Protocol

import numpy as np

from src.game.board import Board
from src.game.collision import collides
from src.game.pieces import Piece, Position
from src.game.spawner import SPAWN_POSITION, PieceSpawner


class Action(enum.IntEnum):
    """Discrete commands accepted by the game."""
    LEFT = 0
    RIGHT = 1
    DOWN = 2
    PAUSE = 3
    START = 4


# Flat scoring: every cleared row is worth the same, simultaneous clears summed
POINTS_PER_ROW = 100


class Spawner(Protocol):
    def spawn(self) -> tuple[Piece, Position]:
        ...


@dataclass(frozen=True)
class GameState:
    """Snapshot of everything the engine owns.

    Attributes:
        board: Settled cells.
        piece: The falling piece, or None before the first start.
        position: Top-left corner of the falling piece.
        score: 100 points per cleared row.
        total_lines: Rows cleared since the game started.
        game_over: Terminal flag, cleared only by start().
        is_paused: Only meaningful while the game is started and not over.
        game_started: False until the first start().
    """

    board: Board = field(default_factory=Board.empty)
    piece: Piece | None = None
    position: Position = SPAWN_POSITION
    score: int = 0
    total_lines: int = 0
    game_over: bool = False
    is_paused: bool = False
    game_started: bool = False

    @property
    def is_running(self) -> bool:
        """True while the piece may move: started, not over, not paused."""
        return (
            self.game_started
            and not self.game_over
            and not self.is_paused
            and self.piece is not None
        )


def start(spawner: Spawner, board: Board | None = None) -> GameState:
    """Begin a new game.

    Always legal. Resets score and line count, spawns the first piece and
    enters Running. If the first piece already collides with the starting
    board the game is over immediately, the same rule used after a lock.

    Args:
        spawner: Source of the first piece and its position.
        board: Optional starting board of settled cells (empty by default).

    Returns:
        The new GameState.
    """
    if board is None:
        board = Board.empty()
    piece, position = spawner.spawn()
    return GameState(
        board=board,
        piece=piece,
        position=position,
        game_started=True,
        game_over=collides(piece, position, board),
    )


def toggle_pause(state: GameState) -> GameState:
    """Flip the pause flag. Ignored before start and after game over."""
    if not state.game_started or state.game_over:
        return state
    return replace(state, is_paused=not state.is_paused)


def shift(state: GameState, direction: int) -> GameState:
    """Move the piece one column left (-1) or right (+1) if the move is legal.

    Raises:
        ValueError: If direction is not -1 or +1.
    """
    if direction not in (-1, 1):
        raise ValueError(f"direction must be -1 or +1, got {direction!r}")
    if not state.is_running:
        return state

    candidate = Position(state.position.x + direction, state.position.y)
    if collides(state.piece, candidate, state.board):
        return state
    return replace(state, position=candidate)


def descend(state: GameState, spawner: Spawner) -> GameState:
    """Move the piece down one row, locking it when it cannot fall further.

    This is both the gravity tick and the manual soft-drop command.

    Args:
        state: Current state.
        spawner: Source of the replacement piece after a lock.

    Returns:
        The new GameState.
    """
    if not state.is_running:
        return state

    candidate = Position(state.position.x, state.position.y + 1)
    if not collides(state.piece, candidate, state.board):
        return replace(state, position=candidate)
    return _lock_piece(state, spawner)


def _lock_piece(state: GameState, spawner: Spawner) -> GameState:
    """Merge the piece at its current position, clear rows, and respawn.

    The game ends if the locked piece still sticks out above the board or
    if the replacement piece collides at its spawn position. On game over
    the stale piece and position are kept.
    """
    board = state.board.merge(state.piece, state.position)
    board, cleared = board.clear_full_rows()
    score = state.score + POINTS_PER_ROW * cleared
    total_lines = state.total_lines + cleared

    locked_out = any(y < 0 for _, y in state.piece.cells_at(state.position))
    piece, position = spawner.spawn()
    if locked_out or collides(piece, position, board):
        return replace(
            state,
            board=board,
            score=score,
            total_lines=total_lines,
            game_over=True,
        )

    return replace(
        state,
        board=board,
        piece=piece,
        position=position,
        score=score,
        total_lines=total_lines,
    )


def render(state: GameState) -> np.ndarray:
    """Return the settled board with the falling piece overlaid.

    Only piece cells inside the board are drawn. The overlay is built on a
    fresh copy each call and never written back into the board.

    Returns:
        A numpy array of shape (height, width), dtype int8.
    """
    grid = state.board.get_grid()
    if state.piece is not None:
        for x, y in state.piece.cells_at(state.position):
            if 0 <= y < state.board.height and 0 <= x < state.board.width:
                grid[y, x] = state.piece.color
    return grid


class TetrisGame:
    """Command facade over the pure engine functions.

    Holds the current GameState and the spawner. Each command replaces the
    state with the result of one transition, so commands are applied one at
    a time and completely.

    Attributes:
        spawner: Source of new pieces.
    """

    def __init__(self, spawner: Spawner | None = None, seed: int | None = None) -> None:
        """Initialize a game in the NotStarted state.

        Args:
            spawner: Piece source. Defaults to a uniform PieceSpawner.
            seed: Seed for the default spawner (ignored if spawner is given).
        """
        self.spawner: Spawner = spawner if spawner is not None else PieceSpawner(seed=seed)
        self._state = GameState()

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def board(self) -> Board:
        return self._state.board

    @property
    def current_piece(self) -> Piece | None:
        return self._state.piece

    @property
    def position(self) -> Position:
        return self._state.position

    @property
    def score(self) -> int:
        return self._state.score

    @property
    def total_lines(self) -> int:
        return self._state.total_lines

    @property
    def game_over(self) -> bool:
        return self._state.game_over

    @property
    def is_paused(self) -> bool:
        return self._state.is_paused

    @property
    def game_started(self) -> bool:
        return self._state.game_started

    @property
    def is_running(self) -> bool:
        return self._state.is_running

    def start(self, board: Board | None = None) -> GameState:
        self._state = start(self.spawner, board)
        return self._state

    def toggle_pause(self) -> GameState:
        self._state = toggle_pause(self._state)
        return self._state

    def shift_left(self) -> GameState:
        self._state = shift(self._state, -1)
        return self._state

    def shift_right(self) -> GameState:
        self._state = shift(self._state, 1)
        return self._state

    def descend(self) -> GameState:
        self._state = descend(self._state, self.spawner)
        return self._state

    def step(self, action: int) -> GameState:
        """Apply one command.

        Args:
            action: An Action enum value.

        Returns:
            The state after the command.

        Raises:
            ValueError: If action is not a known Action.
        """
        action = Action(action)
        if action == Action.LEFT:
            return self.shift_left()
        elif action == Action.RIGHT:
            return self.shift_right()
        elif action == Action.DOWN:
            return self.descend()
        elif action == Action.PAUSE:
            return self.toggle_pause()
        return self.start()

    def render(self) -> np.ndarray:
        return render(self._state)

    def get_state(self) -> dict[str, Any]:
        """Return a dict describing the observable game state.

        Returns:
            Dict with keys:
              - board_grid: np.ndarray (height x width, int8), piece overlaid
              - current_piece: Piece or None
              - score: int
              - total_lines: int
              - game_over: bool
              - is_paused: bool
              - game_started: bool
        """
        return {
            "board_grid": self.render(),
            "current_piece": self._state.piece,
            "score": self._state.score,
            "total_lines": self._state.total_lines,
            "game_over": self._state.game_over,
            "is_paused": self._state.is_paused,
            "game_started": self._state.game_started,
        }
