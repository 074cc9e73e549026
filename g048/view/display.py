"""
Controller seam between a display mode and the board: user actions, exit codes and
the action dispatcher.
"""

from collections.abc import Callable
from enum import Enum, IntEnum

from g048.envs.board import Board


class ExitCode(IntEnum):
    """Process exit statuses."""

    SUCCESS = 0
    USAGE = 2
    SCREEN_INIT = 3


class Action(Enum):
    """A user-caused event in the game."""

    ILLEGAL = 0
    LEFT = 1
    RIGHT = 2
    UP = 3
    DOWN = 4
    EXIT = 5


class ScreenInitError(RuntimeError):
    """The terminal screen could not be initialized."""


# ##>: Board method for each move action.
_MOVES: dict[Action, str] = {
    Action.LEFT: 'move_left',
    Action.RIGHT: 'move_right',
    Action.UP: 'move_up',
    Action.DOWN: 'move_down',
}


def action_handler(board: Board, action: Action, on_exit: Callable[[], None]) -> bool:
    """
    Perform the board operation of an action.

    Parameters
    ----------
    board : Board
        Board to modify.
    action : Action
        Action to interpret.
    on_exit : Callable
        Called on ``Action.EXIT``.

    Returns
    -------
    bool
        True if the board was moved and must be redrawn.
    """
    if action == Action.EXIT:
        on_exit()
        return False

    move = _MOVES.get(action)
    if move is None:
        return False

    getattr(board, move)()
    return True
