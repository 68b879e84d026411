"""2048 game session: the board, the score and the undo history of one player."""

import logging
from collections import deque
from dataclasses import replace
from enum import Enum

from numpy import array_equal, ndarray
from numpy.random import Generator, default_rng

from merge2048.config import GameConfig
from merge2048.core.gameboard import has_won, initialize, is_game_over, move
from merge2048.core.gamemove import Direction, legal_directions

logger = logging.getLogger(__name__)


class GameStatus(str, Enum):
    """State of a game session."""

    PLAYING = 'playing'
    WON = 'won'
    LOST = 'lost'


class GameSession:
    """
    2048 game session.

    This class keeps the mutable state of a game around the stateless rules: the current board,
    the cumulative score, the end-of-game flag and two parallel histories of boards and scores
    used for undo.
    """

    # ##: Current game state.
    _board: ndarray | None = None
    _score: int = 0
    _finished: bool = False

    def __init__(self, size: int | None = None, config: GameConfig | None = None, seed: int | None = None):
        """
        Initialize the game session and start a first game.

        Parameters
        ----------
        size : int, optional
            The size of the square grid, overriding ``config.size``.
        config : GameConfig, optional
            Settings of the game (default is ``GameConfig()``).
        seed : int, optional
            Seed of the random generator, for reproducible games.
        """
        # ##: Private copy, so resizing never changes the caller's configuration.
        self.config = replace(config) if config is not None else GameConfig()
        if size is not None:
            self.config = replace(self.config, size=size)

        self._rng: Generator = default_rng(seed)
        self._board_history: deque = deque(maxlen=self.config.history_limit)
        self._score_history: deque = deque(maxlen=self.config.history_limit)

        self.reset()

    @property
    def size(self) -> int:
        """Width and height of the board."""
        return self.config.size

    @property
    def board(self) -> ndarray:
        """
        Get a copy of the current game board.

        Returns
        -------
        ndarray
            The current board; changing it does not affect the session.
        """
        return self._board.copy()

    @property
    def score(self) -> int:
        """Cumulative score of the game."""
        return self._score

    @property
    def is_finished(self) -> bool:
        """
        Check if the game is finished.

        Returns
        -------
        bool
            True if the winning tile was reached or no move is possible.
        """
        return self._finished

    @property
    def status(self) -> GameStatus:
        """Whether the game is still running, won or lost."""
        if not self._finished:
            return GameStatus.PLAYING
        if has_won(self._board, win_tile=self.config.win_tile):
            return GameStatus.WON
        return GameStatus.LOST

    @property
    def legal_moves(self) -> list[Direction]:
        """Directions that would change the board."""
        return legal_directions(self._board)

    @property
    def history_size(self) -> int:
        """Number of moves that can be undone."""
        return len(self._board_history)

    @property
    def can_undo(self) -> bool:
        return self.history_size > 0

    def reset(self, seed: int | None = None) -> ndarray:
        """
        Start a new game on an empty board with two random tiles.

        Parameters
        ----------
        seed : int, optional
            Seed of a new random generator. The current generator is kept when omitted.

        Returns
        -------
        ndarray
            The new game board.
        """
        if seed is not None:
            self._rng = default_rng(seed)

        self._board = initialize(
            self.config.size,
            rng=self._rng,
            initial_tiles=self.config.initial_tiles,
            spawn_probs=self.config.spawn_probs,
        )
        self._score = 0
        self._finished = is_game_over(self._board, win_tile=self.config.win_tile)
        self._board_history.clear()
        self._score_history.clear()

        logger.info('New %dx%d game', self.config.size, self.config.size)
        return self.board

    def resize(self, size: int) -> ndarray:
        """
        Change the board size and start a new game.

        Parameters
        ----------
        size : int
            The new size of the square grid (3 to 6).

        Returns
        -------
        ndarray
            The new game board.

        Raises
        ------
        InvalidBoardSizeError
            If the size is not supported. The current game is then kept.
        """
        self.config = replace(self.config, size=size)
        return self.reset()

    def step(self, direction) -> tuple[ndarray, int, bool]:
        """
        Apply a move to the board.

        Parameters
        ----------
        direction : Direction or str
            The direction of the move.

        Returns
        -------
        tuple[ndarray, int, bool]
            A tuple containing:
            - The game board after the move (ndarray)
            - The score gained by this move (int)
            - Whether the game has finished after this move (bool)

        Notes
        -----
        - Moves are ignored once the game is finished.
        - A move that changes nothing is not recorded in the history.
        - The previous board and score are recorded before each accepted move.
        """
        direction = Direction.parse(direction)
        if self._finished:
            logger.debug('Game finished, ignoring move %s', direction.value)
            return self.board, 0, True

        new_board, gained = move(self._board, direction, rng=self._rng, spawn_probs=self.config.spawn_probs)
        if array_equal(new_board, self._board):
            logger.debug('Move %s left the board unchanged', direction.value)
            return self.board, 0, False

        self._board_history.append(self._board)
        self._score_history.append(self._score)
        self._board = new_board
        self._score += int(gained)

        self._finished = is_game_over(self._board, win_tile=self.config.win_tile)
        if self._finished:
            logger.info('Game over (%s) with score %d', self.status.value, self._score)
        return self.board, int(gained), self._finished

    def undo(self) -> bool:
        """
        Restore the board and score as they were before the last move.

        Returns
        -------
        bool
            True if a move was undone, False if the history was empty.
        """
        if not self._board_history:
            return False

        self._board = self._board_history.pop()
        self._score = self._score_history.pop()
        self._finished = is_game_over(self._board, win_tile=self.config.win_tile)
        logger.debug('Undo, %d moves left in history', len(self._board_history))
        return True

    def render(self) -> None:
        """
        Render the game board. This method prints the current state of the game board to the console.
        """
        for row in self._board.tolist():
            print(' \t'.join(map(str, row)))
