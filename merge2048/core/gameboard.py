"""
Core functionality of the 2048 rules: board creation, tile spawning, sliding, merging and end of game.

Every function returns new arrays; boards passed in are never modified.
"""

from numpy import argwhere, array, array_equal, int64, ndarray, zeros_like
from numpy.random import PCG64DXSM, Generator, default_rng

from merge2048.config import INITIAL_TILES, TILE_SPAWN_PROBS, WIN_TILE
from merge2048.core.gamemove import Direction, orient, restore
from merge2048.core.grid import check_grid, empty_grid

# ##>: Module-level generator used when no generator or seed is given.
_GENERATOR = default_rng(PCG64DXSM())


def _generator(rng: Generator | None, seed: int | None) -> Generator:
    if rng is not None:
        return rng
    return default_rng(seed) if seed is not None else _GENERATOR


def place_random_tile(
    grid,
    rng: Generator | None = None,
    seed: int | None = None,
    spawn_probs: dict[int, float] | None = None,
) -> tuple[ndarray, bool]:
    """
    Put a new tile (2 or 4) in a random empty cell.

    Parameters
    ----------
    grid : array_like
        The current game board.
    rng : Generator, optional
        Random generator drawing the cell and the value.
    seed : int, optional
        Seed of a fresh generator, used when ``rng`` is not given.
    spawn_probs : dict[int, float], optional
        Probability of each tile value, by default 90% for 2 and 10% for 4.

    Returns
    -------
    new_grid : ndarray
        A copy of the board with the new tile.
    placed : bool
        False when the board had no empty cell; the copy is then unchanged.
    """
    board = check_grid(grid)
    probs = TILE_SPAWN_PROBS if spawn_probs is None else spawn_probs

    # ##: Empty cells in row-major order.
    empty_cells = argwhere(board == 0)
    if len(empty_cells) == 0:
        return board, False

    generator = _generator(rng, seed)
    cell = empty_cells[generator.integers(len(empty_cells))]
    board[tuple(cell)] = generator.choice(list(probs), p=list(probs.values()))
    return board, True


def initialize(
    size: int,
    rng: Generator | None = None,
    seed: int | None = None,
    initial_tiles: int = INITIAL_TILES,
    spawn_probs: dict[int, float] | None = None,
) -> ndarray:
    """
    Create a new board with two random tiles.

    Parameters
    ----------
    size : int
        Width and height of the board (3 to 6).
    rng : Generator, optional
        Random generator used for the placements.
    seed : int, optional
        Seed of a fresh generator, used when ``rng`` is not given.
    initial_tiles : int, optional
        Number of tiles to place, by default 2.
    spawn_probs : dict[int, float], optional
        Probability of each tile value.

    Returns
    -------
    ndarray
        The new board.

    Raises
    ------
    InvalidBoardSizeError
        If the size is not supported.
    """
    board = empty_grid(size)
    generator = _generator(rng, seed)
    for _ in range(initial_tiles):
        board, _ = place_random_tile(board, rng=generator, spawn_probs=spawn_probs)
    return board


def slide_row(row) -> tuple[ndarray, int]:
    """
    Slide a row to the left and merge adjacent equal tiles.

    Parameters
    ----------
    row : array_like
        One row of the game board.

    Returns
    -------
    new_row : ndarray
        The row after the move, padded with zeros to its original length.
    score : int
        Sum of the tiles created by merges.

    Notes
    -----
    - Zeros (empty cells) are removed before merging.
    - Merging happens in a single pass from the start of the row.
    - A merged tile cannot merge again in the same move: ``[2, 2, 2, 0]`` becomes ``[4, 2, 0, 0]``.
    """
    row = array(row, dtype=int64)
    tiles = row[row != 0].tolist()

    merged = []
    score = 0
    i = 0
    while i < len(tiles):
        if i + 1 < len(tiles) and tiles[i] == tiles[i + 1]:
            merged.append(tiles[i] * 2)
            score += tiles[i] * 2
            i += 2
        else:
            merged.append(tiles[i])
            i += 1

    new_row = zeros_like(row)
    new_row[: len(merged)] = merged
    return new_row, score


def slide_and_merge(board: ndarray) -> tuple[ndarray, int]:
    """
    Slide the whole board to the left.

    Parameters
    ----------
    board : ndarray
        The game board.

    Returns
    -------
    new_board : ndarray
        The board after sliding and merging every row.
    score : int
        Total score of all merges.

    Notes
    -----
    For other directions, rotate the board before calling this function.
    """
    result = zeros_like(board)
    score = 0

    for i, row in enumerate(board):
        result[i], row_score = slide_row(row)
        score += row_score

    return result, score


def move(
    grid,
    direction,
    rng: Generator | None = None,
    seed: int | None = None,
    spawn_probs: dict[int, float] | None = None,
) -> tuple[ndarray, int]:
    """
    Play a move and spawn a new tile if the board changed.

    Parameters
    ----------
    grid : array_like
        The current game board.
    direction : Direction or str
        The direction of the move.
    rng : Generator, optional
        Random generator used for the spawned tile.
    seed : int, optional
        Seed of a fresh generator, used when ``rng`` is not given.
    spawn_probs : dict[int, float], optional
        Probability of each tile value.

    Returns
    -------
    new_grid : ndarray
        The board after the move.
    score : int
        Sum of the tiles created by merges.

    Notes
    -----
    - The board is rotated so the move becomes a left slide, reduced, then rotated back.
    - A move that changes nothing returns an equal board, a score of 0 and spawns no tile.
    """
    board = check_grid(grid)
    direction = Direction.parse(direction)

    reduced, score = slide_and_merge(orient(board, direction))
    new_board = restore(reduced, direction)

    if array_equal(new_board, board):
        return new_board, 0

    new_board, _ = place_random_tile(new_board, rng=rng, seed=seed, spawn_probs=spawn_probs)
    return new_board, score


def has_won(grid, win_tile: int = WIN_TILE) -> bool:
    """
    Check if the winning tile is on the board.

    Parameters
    ----------
    grid : array_like
        The game board.
    win_tile : int, optional
        The tile to reach, by default 2048.

    Returns
    -------
    bool
        True if a cell holds ``win_tile``.
    """
    return bool((check_grid(grid) == win_tile).any())


def is_game_over(grid, win_tile: int = WIN_TILE) -> bool:
    """
    Check if the game has ended, either won or with no move left.

    Parameters
    ----------
    grid : array_like
        The game board.
    win_tile : int, optional
        The tile that wins the game, by default 2048.

    Returns
    -------
    bool
        True if the winning tile is reached or no move is possible.

    Notes
    -----
    A full board is still playable while two horizontally or vertically adjacent cells are equal.
    """
    board = check_grid(grid)
    if (board == win_tile).any():
        return True
    if (board == 0).any():
        return False
    return not ((board[:, :-1] == board[:, 1:]).any() or (board[:-1] == board[1:]).any())
