"""2048 game board: grid, score and random source of a single game."""

import logging
from collections.abc import Callable, Iterator
from typing import NamedTuple

from numpy import int64, ndarray, zeros
from numpy.random import PCG64DXSM, default_rng

from g048.config import BOARD_SIZE, SCORE_WIDTH
from g048.core.gameboard import Coordinate, Direction, fill_cells, is_done, slide_and_merge
from g048.core.gamemove import legal_actions

logger = logging.getLogger(__name__)


class Cell(NamedTuple):
    """One cell of the board, as visited by ``Board.render_board``."""

    position: Coordinate
    is_eol: bool
    value: int


class Board:
    """
    2048 game board.

    This class owns the grid, the score and the random generator of one game. The four move
    methods are the only way to change the grid; a new board is built for every game.

    The board assumes a single caller: it does no locking and does not refuse moves once the
    game has ended, so callers must check ``is_end_game`` before accepting input.
    """

    # ##: All Actions.
    ACTIONS = {'left': Direction.LEFT, 'up': Direction.UP, 'right': Direction.RIGHT, 'down': Direction.DOWN}

    def __init__(self, seed: int | None = None):
        """
        Initialize an empty board and add two random tiles.

        Parameters
        ----------
        seed : int, optional
            Seed of the game's random generator. When omitted the generator is seeded from
            fresh OS entropy, so distinct games are independent.
        """
        self.size = BOARD_SIZE
        self._grid: ndarray = zeros((self.size, self.size), dtype=int64)
        self._score = 0
        self._generator = default_rng(PCG64DXSM(seed))

        # ##: Two tiles are randomly placed on the empty board.
        fill_cells(self._grid, self._generator)
        fill_cells(self._grid, self._generator)

    @property
    def score(self) -> int:
        """Sum of the values of every merge so far."""
        return self._score

    @property
    def grid(self) -> ndarray:
        """A copy of the current grid."""
        return self._grid.copy()

    @property
    def max_tile(self) -> int:
        """Largest value on the grid."""
        return int(self._grid.max())

    @property
    def legal_actions(self) -> list[Direction]:
        """Directions that would change the grid."""
        return legal_actions(self._grid)

    def _move(self, direction: Direction) -> int:
        """
        Slide and merge the tiles in one direction, then spawn a tile.

        Parameters
        ----------
        direction : Direction
            Direction to move the tiles to.

        Returns
        -------
        int
            Score gained by the move.

        Notes
        -----
        A spawn is attempted even if nothing moved; it does nothing on a full grid.
        """
        reward = slide_and_merge(self._grid, direction)
        self._score += reward

        spawned = fill_cells(self._grid, self._generator)
        logger.debug('Move %s: +%d (spawned at %s)', direction.name.lower(), reward, spawned)

        if is_done(self._grid):
            logger.info('Game over with score %d, max tile %d', self._score, self.max_tile)
        return reward

    def move_left(self) -> None:
        """Move tiles to the left."""
        self._move(Direction.LEFT)

    def move_right(self) -> None:
        """Move tiles to the right."""
        self._move(Direction.RIGHT)

    def move_up(self) -> None:
        """Move tiles up."""
        self._move(Direction.UP)

    def move_down(self) -> None:
        """Move tiles down."""
        self._move(Direction.DOWN)

    def step(self, action: int) -> int:
        """
        Apply the selected action to the board.

        Parameters
        ----------
        action : int
            The action to apply (0: left, 1: up, 2: right, 3: down).

        Returns
        -------
        int
            Score gained by the move.

        Raises
        ------
        ValueError
            If the action is not one of the four directions.
        """
        return self._move(Direction(action))

    def render_board(self, visit: Callable[[Coordinate, bool, int], None] | None = None) -> Iterator[Cell] | None:
        """
        Traverse every cell in row-major order.

        Parameters
        ----------
        visit : Callable, optional
            Called as ``visit(position, is_eol, value)`` once per cell. When omitted, the
            cells are returned as an iterator instead.

        Returns
        -------
        Iterator[Cell] | None
            A fresh iterator over the cells, or None when ``visit`` is given.

        Notes
        -----
        ``is_eol`` is True on the last column of each row.
        """
        if visit is None:
            return self._cells()

        for position, is_eol, value in self._cells():
            visit(position, is_eol, value)
        return None

    def _cells(self) -> Iterator[Cell]:
        for row in range(self.size):
            for col in range(self.size):
                yield Cell(Coordinate(row, col), col + 1 == self.size, int(self._grid[row, col]))

    def display_score(self) -> str:
        """Return the score as a displayable string."""
        return f'Score: {self._score:{SCORE_WIDTH}d}'

    def is_end_game(self) -> bool:
        """
        Check if the game has ended.

        Returns
        -------
        bool
            True if the grid is full and no two adjacent tiles have the same value.
        """
        return is_done(self._grid)
