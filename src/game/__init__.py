"""Game logic: catalog, board, collision, spawner, engine, and tick driver."""

from src.game.pieces import PIECE_TYPES, COLOR_RGB, Kind, Piece, Position, get_tetromino
from src.game.board import Board, WIDTH, HEIGHT
from src.game.collision import collides
from src.game.spawner import PieceSpawner, SPAWN_POSITION
from src.game.tetris import TetrisGame, GameState, Action
from src.game.ticker import TickDriver

__all__ = [
    "PIECE_TYPES",
    "COLOR_RGB",
    "Kind",
    "Piece",
    "Position",
    "get_tetromino",
    "Board",
    "WIDTH",
    "HEIGHT",
    "collides",
    "PieceSpawner",
    "SPAWN_POSITION",
    "TetrisGame",
    "GameState",
    "Action",
    "TickDriver",
]
