"""
Game move utilities for the 2048 board, providing functions for determining legal
and illegal moves.
"""

from numpy import ndarray

from g048.core.gameboard import Direction


def _neighbour_pairs(state: ndarray, direction: int) -> tuple[ndarray, ndarray]:
    """
    Split the board into aligned views of each cell and its target neighbour.

    Parameters
    ----------
    state : ndarray
        The game board.
    direction : int
        Direction of the move (0: left, 1: up, 2: right, 3: down).

    Returns
    -------
    tuple[ndarray, ndarray]
        ``(current, target)`` views of the same shape, where ``target`` is one step closer
        to the edge tiles move to.
    """
    direction = Direction(direction)
    if direction == Direction.LEFT:
        return state[:, 1:], state[:, :-1]
    if direction == Direction.UP:
        return state[1:, :], state[:-1, :]
    if direction == Direction.RIGHT:
        return state[:, :-1], state[:, 1:]
    return state[:-1, :], state[1:, :]


def can_move(state: ndarray, direction: int) -> bool:
    """
    Check if a move in the given direction would change the board.

    Parameters
    ----------
    state : ndarray
        The game board to check.
    direction : int
        Direction to check (0: left, 1: up, 2: right, 3: down).

    Returns
    -------
    bool
        True if the move is possible, False otherwise.

    Notes
    -----
    A move is possible if a tile has an empty target neighbour, or if two adjacent cells
    have the same non-zero value.
    """
    current, target = _neighbour_pairs(state, direction)

    # ##>: Condition 1: Non-empty cell next to an empty target (can slide).
    can_slide = (target == 0) & (current != 0)
    if can_slide.any():
        return True

    # ##>: Condition 2: Two adjacent equal non-zero values (can merge).
    can_merge = (current != 0) & (current == target)
    return bool(can_merge.any())


def legal_actions_mask(state: ndarray) -> tuple[bool, bool, bool, bool]:
    """
    Get a boolean mask for all four directions.

    Parameters
    ----------
    state : ndarray
        The current state of the game board.

    Returns
    -------
    tuple[bool, bool, bool, bool]
        Mask for (left, up, right, down) where True means the move is legal.
    """
    left, up, right, down = (can_move(state, direction) for direction in Direction)
    return left, up, right, down


def illegal_actions(state: ndarray) -> list[Direction]:
    """
    Determine the directions that would leave the board unchanged.

    Parameters
    ----------
    state : ndarray
        The current state of the game board.

    Returns
    -------
    list[Direction]
        Illegal directions, in (left, up, right, down) order.
    """
    mask = legal_actions_mask(state)
    return [direction for direction in Direction if not mask[direction]]


def legal_actions(state: ndarray) -> list[Direction]:
    """
    Determine the directions that would change the board.

    Parameters
    ----------
    state : ndarray
        The current state of the game board.

    Returns
    -------
    list[Direction]
        Legal directions, in (left, up, right, down) order.
    """
    mask = legal_actions_mask(state)
    return [direction for direction in Direction if mask[direction]]
