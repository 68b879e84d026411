# -*- coding: utf-8 -*-
"""
This module provides the rules of the 2048 game as pure functions over NumPy boards.

It includes functions for creating a board, spawning tiles, sliding and merging rows,
rotating the board, playing a move in any direction and checking if the game is over.
"""

from .gameboard import (
    has_won,
    initialize,
    is_game_over,
    move,
    place_random_tile,
    slide_and_merge,
    slide_row,
)
from .gamemove import Direction, can_move, illegal_directions, legal_directions, rotate_clockwise
from .grid import check_grid, empty_grid

__all__ = [
    "Direction",
    "initialize",
    "place_random_tile",
    "slide_row",
    "slide_and_merge",
    "rotate_clockwise",
    "move",
    "is_game_over",
    "has_won",
    "can_move",
    "legal_directions",
    "illegal_directions",
    "check_grid",
    "empty_grid",
]
