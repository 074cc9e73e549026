# -*-  coding: utf-8 -*-
"""
Set of test for Board.
"""
from unittest import TestCase, main

import numpy as np

from g048.core.gameboard import Coordinate, Direction
from g048.envs import Board, Cell


def checkerboard() -> np.ndarray:
    return np.array([[2 if (row + col) % 2 == 0 else 4 for col in range(4)] for row in range(4)])


class TestBoard(TestCase):
    """
    Test for the Board class.
    This class tests the state and moves of a single game.
    """

    def setUp(self):
        """Initialize a new board before each test."""
        self.board = Board(seed=42)

    def test_init(self):
        """Test if the board starts with two tiles and no score."""
        grid = self.board.grid
        self.assertEqual(grid.shape, (4, 4))
        self.assertEqual(np.count_nonzero(grid), 2)
        self.assertTrue(np.all(np.isin(grid[grid != 0], [2, 4])))
        self.assertEqual(self.board.score, 0)
        self.assertFalse(self.board.is_end_game())

    def test_seed_reproducibility(self):
        """Same seed gives the same game."""
        other = Board(seed=42)
        np.testing.assert_array_equal(self.board.grid, other.grid)

        for board in (self.board, other):
            board.move_left()
            board.move_up()
            board.move_right()
        np.testing.assert_array_equal(self.board.grid, other.grid)
        self.assertEqual(self.board.score, other.score)

    def test_grid_is_a_copy(self):
        """Changing the returned grid does not touch the board."""
        grid = self.board.grid
        grid[:] = 0
        self.assertEqual(np.count_nonzero(self.board.grid), 2)

    def test_move_left_merges_and_spawns(self):
        """A merge doubles the tile, scores its value and a new tile is spawned."""
        self.board._grid = np.array([[2, 2, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        self.board.move_left()

        grid = self.board.grid
        self.assertEqual(grid[0, 0], 4)
        self.assertEqual(self.board.score, 4)
        self.assertEqual(np.count_nonzero(grid), 2)

    def test_each_move_method(self):
        """Each move method slides tiles towards its own edge."""
        corners = {
            'move_left': (1, 0),
            'move_right': (1, 3),
            'move_up': (0, 1),
            'move_down': (3, 1),
        }
        for method, corner in corners.items():
            board = Board(seed=1)
            board._grid = np.zeros((4, 4), dtype=np.int64)
            board._grid[1, 1] = 8
            getattr(board, method)()

            self.assertEqual(board.grid[corner], 8, method)
            self.assertEqual(np.count_nonzero(board.grid), 2, method)

    def test_step(self):
        """Step dispatches integer actions and returns the score gained."""
        self.board._grid = np.array([[2, 0, 0, 0], [2, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        reward = self.board.step(Board.ACTIONS['up'])

        self.assertEqual(reward, 4)
        self.assertEqual(self.board.grid[0, 0], 4)

    def test_step_invalid_action(self):
        """Unknown actions are rejected."""
        with self.assertRaises(ValueError):
            self.board.step(7)

    def test_blocked_move_on_full_board(self):
        """A blocked move on a full board changes nothing."""
        self.board._grid = np.array([[2, 4, 8, 16], [2, 4, 8, 16], [4, 8, 16, 32], [8, 16, 32, 64]])
        self.board._score = 100
        original = self.board.grid

        self.board.move_left()

        np.testing.assert_array_equal(self.board.grid, original)
        self.assertEqual(self.board.score, 100)
        self.assertFalse(self.board.is_end_game())

    def test_blocked_move_still_spawns(self):
        """A move that changes nothing still spawns on a non-full board."""
        self.board._grid = np.array([[2, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        self.board.move_left()

        self.assertEqual(self.board.grid[0, 0], 2)
        self.assertEqual(np.count_nonzero(self.board.grid), 2)
        self.assertEqual(self.board.score, 0)

    def test_random_play_invariants(self):
        """Score never decreases, tiles stay powers of two, at most one tile appears per move."""
        moves = [self.board.move_left, self.board.move_up, self.board.move_right, self.board.move_down]
        generator = np.random.default_rng(3)

        for _ in range(300):
            if self.board.is_end_game():
                break
            before_score = self.board.score
            before_count = np.count_nonzero(self.board.grid)

            moves[generator.integers(4)]()

            grid = self.board.grid
            self.assertGreaterEqual(self.board.score, before_score)
            self.assertLessEqual(np.count_nonzero(grid), before_count + 1)
            tiles = grid[grid != 0]
            self.assertTrue(np.all(tiles >= 2))
            self.assertTrue(np.all(tiles & (tiles - 1) == 0))

    def test_is_end_game(self):
        """Checkerboard ends the game, one hole keeps it alive."""
        self.board._grid = checkerboard()
        self.assertTrue(self.board.is_end_game())

        self.board._grid[1, 2] = 0
        self.assertFalse(self.board.is_end_game())

    def test_legal_actions(self):
        """Legal actions follow the grid."""
        self.board._grid = checkerboard()
        self.assertEqual(self.board.legal_actions, [])

        self.board._grid = np.array([[0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 2]])
        self.assertEqual(self.board.legal_actions, [Direction.LEFT, Direction.UP])

    def test_max_tile(self):
        self.board._grid = checkerboard()
        self.board._grid[3, 3] = 512
        self.assertEqual(self.board.max_tile, 512)

    def test_display_score(self):
        """Score is right-justified in a fixed width field."""
        self.board._score = 1234
        text = self.board.display_score()

        self.assertEqual(text, 'Score:       1234')
        self.assertEqual(int(text.split()[-1]), 1234)
        self.assertEqual(len(Board(seed=0).display_score()), len(text))


class TestRenderBoard(TestCase):
    """
    Test for the board traversal used by renderers.
    """

    def setUp(self):
        self.board = Board(seed=7)
        self.board._grid = np.arange(16).reshape(4, 4)

    def test_row_major_order(self):
        """Cells come row by row with the end-of-line flag on the last column."""
        cells = list(self.board.render_board())

        self.assertEqual(len(cells), 16)
        self.assertEqual(cells[0], Cell(Coordinate(0, 0), False, 0))
        self.assertEqual(cells[3], Cell(Coordinate(0, 3), True, 3))
        self.assertEqual(cells[4], Cell(Coordinate(1, 0), False, 4))
        self.assertEqual([cell.value for cell in cells], list(range(16)))
        self.assertEqual([cell.position.col for cell in cells if cell.is_eol], [3, 3, 3, 3])

    def test_restartable(self):
        """Two traversals without a move in between are identical."""
        self.assertEqual(list(self.board.render_board()), list(self.board.render_board()))

    def test_callback(self):
        """The callback sees the same cells as the iterator."""
        visited = []
        result = self.board.render_board(lambda position, is_eol, value: visited.append((position, is_eol, value)))

        self.assertIsNone(result)
        self.assertEqual(visited, [tuple(cell) for cell in self.board.render_board()])

    def test_no_mutation(self):
        original = self.board.grid
        list(self.board.render_board())
        np.testing.assert_array_equal(self.board.grid, original)


if __name__ == "__main__":
    main()
