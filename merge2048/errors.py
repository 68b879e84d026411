"""
Exceptions raised when the game rules are called with arguments that break their contract.
"""


class Merge2048Error(ValueError):
    """Base class for every error raised by the game engine."""


class InvalidBoardSizeError(Merge2048Error):
    """The requested board size is not one of the supported sizes."""

    def __init__(self, size, supported):
        self.size = size
        self.supported = tuple(supported)
        super().__init__(f'board size must be one of {self.supported}, got {size!r}')


class InvalidGridError(Merge2048Error):
    """The grid is not a square board of empty cells and power-of-two tiles."""


class InvalidDirectionError(Merge2048Error):
    """The move direction is not one of left, up, right or down."""

    def __init__(self, direction):
        self.direction = direction
        super().__init__(f'unknown direction: {direction!r}')
