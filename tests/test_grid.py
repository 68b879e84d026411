"""
Tests for grid validation and game configuration.
"""

from unittest import TestCase, main

import numpy as np

from merge2048.config import SUPPORTED_SIZES, GameConfig, check_size
from merge2048.core.grid import check_grid, empty_grid
from merge2048.errors import InvalidBoardSizeError, InvalidGridError, Merge2048Error


class TestCheckGrid(TestCase):
    """Test grid validation."""

    def test_valid_grid(self):
        """A valid grid is returned as a new int64 array."""
        grid = [[0, 2, 4], [8, 0, 0], [0, 0, 2048]]
        board = check_grid(grid)
        self.assertEqual(board.dtype, np.int64)
        np.testing.assert_array_equal(board, grid)

    def test_no_aliasing(self):
        """The returned array never shares memory with the input."""
        grid = np.zeros((4, 4), dtype=np.int64)
        board = check_grid(grid)
        board[0, 0] = 2
        self.assertEqual(grid[0, 0], 0)

    def test_expected_size(self):
        """A grid of the wrong size is rejected."""
        with self.assertRaises(InvalidGridError):
            check_grid(np.zeros((3, 3)), size=4)

    def test_rejected_grids(self):
        """Malformed grids are rejected."""
        bad_grids = [
            [[0, 0, 0], [0, 0, 0]],
            [0, 2, 4],
            np.zeros((2, 2)),
            np.zeros((7, 7)),
            [[0, 0, 0], [0, -2, 0], [0, 0, 0]],
            [[0, 0, 0], [0, 6, 0], [0, 0, 0]],
            [[1, 0, 0], [0, 0, 0], [0, 0, 0]],
            [[2.5, 0, 0], [0, 0, 0], [0, 0, 0]],
            [[0, 0, 0], [0, 0], [0, 0, 0]],
            [[2**70, 0, 0], [0, 0, 0], [0, 0, 0]],
        ]
        for grid in bad_grids:
            with self.assertRaises(InvalidGridError):
                check_grid(grid)

    def test_empty_grid(self):
        """Empty grids have the requested size."""
        for size in SUPPORTED_SIZES:
            board = empty_grid(size)
            self.assertEqual(board.shape, (size, size))
            self.assertEqual(np.count_nonzero(board), 0)

    def test_errors_are_value_errors(self):
        """Contract violations can be caught as ValueError."""
        self.assertTrue(issubclass(InvalidGridError, ValueError))
        self.assertTrue(issubclass(InvalidBoardSizeError, Merge2048Error))


class TestGameConfig(TestCase):
    """Test the configuration dataclass."""

    def test_defaults(self):
        """Defaults describe the classic game."""
        config = GameConfig()
        self.assertEqual(config.size, 4)
        self.assertEqual(config.win_tile, 2048)
        self.assertEqual(config.initial_tiles, 2)
        self.assertIsNone(config.history_limit)
        self.assertEqual(config.spawn_probs, {2: 0.9, 4: 0.1})

    def test_check_size(self):
        """Only sizes 3 to 6 are supported."""
        for size in (3, 4, 5, 6):
            self.assertEqual(check_size(size), size)
        for size in (2, 7, True, '4'):
            with self.assertRaises(InvalidBoardSizeError):
                check_size(size)

    def test_invalid_values(self):
        """Invalid settings are rejected."""
        with self.assertRaises(InvalidBoardSizeError):
            GameConfig(size=9)
        with self.assertRaises(Merge2048Error):
            GameConfig(win_tile=1000)
        with self.assertRaises(Merge2048Error):
            GameConfig(history_limit=0)
        with self.assertRaises(Merge2048Error):
            GameConfig(size=3, initial_tiles=10)
        with self.assertRaises(Merge2048Error):
            GameConfig(spawn_probs={2: 0.5, 4: 0.2})
        with self.assertRaises(Merge2048Error):
            GameConfig(spawn_probs={3: 1.0})
        with self.assertRaises(Merge2048Error):
            GameConfig(spawn_probs={2.0: 1.0})


if __name__ == '__main__':
    main()
