# -*- coding: utf-8 -*-
"""
Rules engine for the 2048 sliding tile puzzle.
"""

from .config import GameConfig
from .core import Direction, initialize, is_game_over, move
from .envs import GameSession, GameStatus
from .errors import InvalidBoardSizeError, InvalidDirectionError, InvalidGridError, Merge2048Error

__all__ = [
    "GameConfig",
    "GameSession",
    "GameStatus",
    "Direction",
    "initialize",
    "move",
    "is_game_over",
    "Merge2048Error",
    "InvalidBoardSizeError",
    "InvalidGridError",
    "InvalidDirectionError",
]
