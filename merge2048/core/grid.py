"""
Construction and validation of game grids.
"""

from numpy import array, asarray, int64, ndarray, zeros
from numpy import all as np_all

from merge2048.config import check_size
from merge2048.errors import InvalidGridError


def empty_grid(size: int) -> ndarray:
    """
    Create a board with every cell empty.

    Parameters
    ----------
    size : int
        Width and height of the board.

    Returns
    -------
    ndarray
        A ``size`` x ``size`` array of zeros.
    """
    size = check_size(size)
    return zeros((size, size), dtype=int64)


def check_grid(grid, size: int | None = None) -> ndarray:
    """
    Validate a grid and return it as an integer array.

    Parameters
    ----------
    grid : array_like
        Nested sequences or an array describing the board.
    size : int, optional
        Expected board size. When omitted, any supported size is accepted.

    Returns
    -------
    ndarray
        A new ``int64`` array holding the grid. The input is never aliased.

    Raises
    ------
    InvalidGridError
        If the grid is not square, has an unsupported size, a negative cell
        or a non-zero cell that is not a power of two >= 2.
    """
    try:
        board = array(grid, dtype=int64)
    except (TypeError, ValueError, OverflowError) as error:
        raise InvalidGridError(f'grid is not a rectangular array of integers: {error}') from error

    if board.ndim != 2 or board.shape[0] != board.shape[1]:
        raise InvalidGridError(f'grid must be square, got shape {board.shape}')

    if size is not None and board.shape[0] != size:
        raise InvalidGridError(f'grid must be {size}x{size}, got {board.shape[0]}x{board.shape[1]}')
    try:
        check_size(board.shape[0])
    except ValueError as error:
        raise InvalidGridError(str(error)) from error

    # ##: Non-integer input silently truncates on conversion.
    if not np_all(asarray(grid) == board):
        raise InvalidGridError('grid cells must be integers')

    if (board < 0).any():
        raise InvalidGridError('grid cells must be non-negative')

    # ##>: A power of two shares no bit with its predecessor; 1 is excluded.
    tiles = board[board != 0]
    if ((tiles & (tiles - 1)) != 0).any() or (tiles == 1).any():
        raise InvalidGridError('tiles must be powers of two >= 2')
    return board
