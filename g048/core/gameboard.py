"""
Core functionality of the 2048 board: directional sweeps, sliding and merging tiles,
spawning new tiles and detecting the end of a game.

Every function works on a square NumPy grid where ``0`` is an empty cell and any other
value is a power of two.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import IntEnum
from typing import NamedTuple

from numpy import all as np_all
from numpy import any as np_any
from numpy import argwhere, ndarray, zeros
from numpy.random import Generator

from g048.config import TILE_SPAWN_PROBS


class Direction(IntEnum):
    """Directions tiles can be moved in."""

    LEFT = 0
    UP = 1
    RIGHT = 2
    DOWN = 3


class Coordinate(NamedTuple):
    """A (row, col) position on the board."""

    row: int
    col: int


@dataclass(frozen=True)
class Sweep:
    """
    Traversal of the board for one direction.

    Attributes
    ----------
    offset : tuple[int, int]
        Step (d_row, d_col) from a cell to its target, towards the edge tiles move to.
    """

    offset: tuple[int, int]

    def pairs(self, size: int) -> Iterator[tuple[Coordinate, Coordinate]]:
        """
        Yield (current, target) pairs in sweep order.

        Parameters
        ----------
        size : int
            Number of rows (and columns) of the board.

        Yields
        ------
        tuple[Coordinate, Coordinate]
            A cell and its neighbour one step closer to the moving edge.

        Notes
        -----
        - Cells on the moving edge have no target and are never yielded as current.
        - Within a line, cells nearest to the moving edge come first, so a target is
          always resolved before it is used again as a current cell.
        """
        d_row, d_col = self.offset
        steps = range(1, size) if d_row + d_col < 0 else range(size - 2, -1, -1)

        for line in range(size):
            for step in steps:
                current = Coordinate(line, step) if d_col else Coordinate(step, line)
                yield current, Coordinate(current.row + d_row, current.col + d_col)


# ##>: One sweep per direction, pointing towards the edge tiles slide to.
SWEEPS: dict[Direction, Sweep] = {
    Direction.LEFT: Sweep(offset=(0, -1)),
    Direction.UP: Sweep(offset=(-1, 0)),
    Direction.RIGHT: Sweep(offset=(0, 1)),
    Direction.DOWN: Sweep(offset=(1, 0)),
}


def slide_and_merge(state: ndarray, direction: int) -> int:
    """
    Slide the tiles of the board in one direction, merge equal neighbours and compute the score.

    Parameters
    ----------
    state : ndarray
        The game board. **Modified in-place.**
    direction : int
        The direction to move (0: left, 1: up, 2: right, 3: down).

    Returns
    -------
    int
        The total score obtained from all merges.

    Notes
    -----
    - The sweep is repeated ``size - 1`` times so a tile can cross the whole board.
    - A tile produced by a merge never merges again during the same call: the merge
      marks travel with the tiles and are only reset when the function is called again.
    """
    sweep = SWEEPS[Direction(direction)]
    size = state.shape[0]
    merged = zeros(state.shape, dtype=bool)
    score = 0

    for _ in range(size - 1):
        for current, target in sweep.pairs(size):
            value = state[current.row, current.col]
            if value == 0:
                continue

            # ##: Slide into an empty neighbour.
            if state[target.row, target.col] == 0:
                state[target.row, target.col] = value
                state[current.row, current.col] = 0
                merged[target.row, target.col] = merged[current.row, current.col]
                merged[current.row, current.col] = False

            # ##: Merge with an equal neighbour, once per tile.
            elif state[target.row, target.col] == value and not (
                merged[target.row, target.col] or merged[current.row, current.col]
            ):
                state[target.row, target.col] = value * 2
                state[current.row, current.col] = 0
                merged[target.row, target.col] = True
                score += int(value * 2)

    return score


def fill_cells(state: ndarray, generator: Generator) -> Coordinate | None:
    """
    Spawn one new tile (2 or 4) in a random empty cell.

    Parameters
    ----------
    state : ndarray
        The current state of the game board. **Modified in-place.**
    generator : Generator
        Random generator owned by the game.

    Returns
    -------
    Coordinate | None
        Where the tile was placed, or None if the board is full.

    Notes
    -----
    - The value is drawn from ``TILE_SPAWN_PROBS``: a 4 one time in four, a 2 otherwise.
    - The empty cell is drawn uniformly among all empty cells.
    """
    value = 4 if generator.random() < TILE_SPAWN_PROBS[4] else 2

    # ##: Only if there are still available places.
    available_cells = argwhere(state == 0)
    if len(available_cells) == 0:
        return None

    row, col = available_cells[generator.integers(len(available_cells))]
    state[row, col] = value
    return Coordinate(int(row), int(col))


def is_done(state: ndarray) -> bool:
    """
    Check if the game has ended.

    Parameters
    ----------
    state : ndarray
        The current state of the game board.

    Returns
    -------
    bool
        True if the game is over, False otherwise.

    Notes
    -----
    The game is over when there are no empty cells AND no adjacent cells (up, down, left, right)
    have the same value.
    """
    return bool(
        np_all(state != 0) and not np_any(state[:-1] == state[1:]) and not np_any(state[:, :-1] == state[:, 1:])
    )
