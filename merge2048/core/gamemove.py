"""
Game move utilities for the 2048 game: move directions, board rotation and legal move detection.
"""

from enum import Enum

from numpy import ndarray, rot90

from merge2048.errors import InvalidDirectionError


class Direction(str, Enum):
    """
    Direction of a move.

    Every direction is played as a left move on a rotated board; ``rotations`` is the
    number of clockwise quarter turns that bring the direction onto the left edge.
    """

    LEFT = 'left'
    UP = 'up'
    RIGHT = 'right'
    DOWN = 'down'

    @property
    def rotations(self) -> int:
        return _ROTATIONS[self]

    @classmethod
    def parse(cls, value) -> 'Direction':
        """
        Convert a direction or its name to a ``Direction``.

        Parameters
        ----------
        value : Direction or str
            The direction, or its case-insensitive name.

        Returns
        -------
        Direction
            The matching direction.

        Raises
        ------
        InvalidDirectionError
            If the value names no direction.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise InvalidDirectionError(value)


_ROTATIONS = {Direction.LEFT: 0, Direction.UP: 3, Direction.RIGHT: 2, Direction.DOWN: 1}


def rotate_clockwise(board: ndarray) -> ndarray:
    """
    Rotate the board a quarter turn clockwise.

    Parameters
    ----------
    board : ndarray
        The game board to rotate.

    Returns
    -------
    ndarray
        A new board where the cell ``(r, c)`` of the input sits at ``(c, n - 1 - r)``.
    """
    return rot90(board, k=-1).copy()


def orient(board: ndarray, direction: Direction) -> ndarray:
    """
    Rotate the board so that ``direction`` becomes a left move.

    Parameters
    ----------
    board : ndarray
        The game board.
    direction : Direction
        The direction of the move.

    Returns
    -------
    ndarray
        A rotated copy of the board.
    """
    rotated = board.copy()
    for _ in range(direction.rotations):
        rotated = rotate_clockwise(rotated)
    return rotated


def restore(board: ndarray, direction: Direction) -> ndarray:
    """
    Undo the rotation applied by ``orient``.

    Parameters
    ----------
    board : ndarray
        A board oriented for ``direction``.
    direction : Direction
        The direction of the move.

    Returns
    -------
    ndarray
        A copy of the board in its original orientation.
    """
    restored = board.copy()
    for _ in range((4 - direction.rotations) % 4):
        restored = rotate_clockwise(restored)
    return restored


def can_move(board: ndarray) -> bool:
    """
    Tell whether sliding the board to the left would change it.

    Parameters
    ----------
    board : ndarray
        A board already oriented so the move is a left slide (see ``orient``).

    Returns
    -------
    bool
        True if some row has a gap before one of its tiles, or two equal tiles
        that become neighbours once the gaps are closed.
    """
    for row in board:
        tiles = row[row != 0]
        if (row[: len(tiles)] == 0).any():
            return True
        if (tiles[:-1] == tiles[1:]).any():
            return True
    return False


def legal_directions(board: ndarray) -> list[Direction]:
    """
    Determine the directions that change the board.

    Parameters
    ----------
    board : ndarray
        The current state of the game board.

    Returns
    -------
    list[Direction]
        Directions whose move slides or merges at least one tile, in ``Direction`` order.
    """
    return [direction for direction in Direction if can_move(orient(board, direction))]


def illegal_directions(board: ndarray) -> list[Direction]:
    """
    Determine the directions that leave the board unchanged.

    Parameters
    ----------
    board : ndarray
        The current state of the game board.

    Returns
    -------
    list[Direction]
        Directions whose move would be a no-op, in ``Direction`` order.
    """
    legal = legal_directions(board)
    return [direction for direction in Direction if direction not in legal]
