# -*- coding: utf-8 -*-
"""
Game configuration.
"""
from dataclasses import dataclass, field

from merge2048.errors import InvalidBoardSizeError, Merge2048Error

# ##: Board sizes offered to the player.
SUPPORTED_SIZES: tuple[int, ...] = (3, 4, 5, 6)
DEFAULT_SIZE = 4

# ##: Reaching this tile ends the game with a win.
WIN_TILE = 2048

# ##: Number of tiles placed on a fresh board.
INITIAL_TILES = 2

# ##>: Tile spawn probabilities (90% for 2, 10% for 4).
TILE_SPAWN_PROBS: dict[int, float] = {2: 0.9, 4: 0.1}


def check_size(size: int) -> int:
    """
    Ensure a board size is supported.

    Parameters
    ----------
    size : int
        The requested board size.

    Returns
    -------
    int
        The same size.

    Raises
    ------
    InvalidBoardSizeError
        If the size is not one of ``SUPPORTED_SIZES``.
    """
    if isinstance(size, bool) or size not in SUPPORTED_SIZES:
        raise InvalidBoardSizeError(size, SUPPORTED_SIZES)
    return int(size)


@dataclass
class GameConfig:
    """
    Settings of a game session.

    Attributes
    ----------
    size : int
        Width and height of the board.
    win_tile : int
        Tile value that ends the game with a win.
    initial_tiles : int
        Number of tiles placed on a new board.
    history_limit : int, optional
        Maximum number of undo steps kept; ``None`` keeps them all.
    spawn_probs : dict[int, float]
        Probability of each value for a spawned tile.
    """

    size: int = DEFAULT_SIZE
    win_tile: int = WIN_TILE
    initial_tiles: int = INITIAL_TILES
    history_limit: int | None = None
    spawn_probs: dict[int, float] = field(default_factory=lambda: dict(TILE_SPAWN_PROBS))

    def __post_init__(self):
        self.size = check_size(self.size)
        if self.win_tile < 4 or self.win_tile & (self.win_tile - 1):
            raise Merge2048Error(f'win_tile must be a power of two >= 4, got {self.win_tile}')
        if not 0 < self.initial_tiles <= self.size * self.size:
            raise Merge2048Error(f'initial_tiles must be in [1, {self.size * self.size}], got {self.initial_tiles}')
        if self.history_limit is not None and self.history_limit < 1:
            raise Merge2048Error(f'history_limit must be None or >= 1, got {self.history_limit}')
        if any(not isinstance(value, int) or value < 2 or value & (value - 1) for value in self.spawn_probs):
            raise Merge2048Error(f'spawned tiles must be powers of two >= 2, got {list(self.spawn_probs)}')
        if abs(sum(self.spawn_probs.values()) - 1.0) > 1e-9:
            raise Merge2048Error(f'spawn probabilities must sum to 1, got {self.spawn_probs}')
