"""
Interactive text-based display of the 2048 game, running in a curses terminal.
"""

import curses
import logging

from g048.config import DisplayConfig
from g048.core.gameboard import Coordinate, Direction
from g048.envs.board import Board
from g048.view.display import Action, ScreenInitError, action_handler

logger = logging.getLogger(__name__)

# ##>: Two key bindings per direction (arrows and WASD), plus the exit keys.
KEY_ACTIONS: dict[int, Action] = {
    curses.KEY_UP: Action.UP,
    curses.KEY_LEFT: Action.LEFT,
    curses.KEY_DOWN: Action.DOWN,
    curses.KEY_RIGHT: Action.RIGHT,
    ord('w'): Action.UP,
    ord('a'): Action.LEFT,
    ord('s'): Action.DOWN,
    ord('d'): Action.RIGHT,
    ord('W'): Action.UP,
    ord('A'): Action.LEFT,
    ord('S'): Action.DOWN,
    ord('D'): Action.RIGHT,
    27: Action.EXIT,  # Esc
    ord('q'): Action.EXIT,
    ord('Q'): Action.EXIT,
}

RESTART_KEYS = (ord('r'), ord('R'))

_DIRECTIONS = {
    Action.LEFT: Direction.LEFT,
    Action.UP: Direction.UP,
    Action.RIGHT: Direction.RIGHT,
    Action.DOWN: Direction.DOWN,
}

# ##>: (foreground, background) per tile class: empty, 2, 4, ..., 4096, then everything above.
TILE_STYLES: list[tuple[int, int]] = [
    (curses.COLOR_BLACK, curses.COLOR_WHITE),
    (curses.COLOR_BLACK, curses.COLOR_CYAN),
    (curses.COLOR_WHITE, curses.COLOR_BLUE),
    (curses.COLOR_BLACK, curses.COLOR_GREEN),
    (curses.COLOR_WHITE, curses.COLOR_GREEN),
    (curses.COLOR_BLACK, curses.COLOR_YELLOW),
    (curses.COLOR_WHITE, curses.COLOR_YELLOW),
    (curses.COLOR_BLACK, curses.COLOR_RED),
    (curses.COLOR_WHITE, curses.COLOR_RED),
    (curses.COLOR_BLACK, curses.COLOR_MAGENTA),
    (curses.COLOR_WHITE, curses.COLOR_MAGENTA),
    (curses.COLOR_YELLOW, curses.COLOR_BLUE),
    (curses.COLOR_YELLOW, curses.COLOR_MAGENTA),
    (curses.COLOR_WHITE, curses.COLOR_BLACK),
]

GAME_OVER = 'Game over! Press R to play again, Esc or Q to quit.'
NO_MOVE = 'No tile can move that way.'


def tile_color_pair(value: int) -> int:
    """
    Get the curses colour pair number of a tile.

    Parameters
    ----------
    value : int
        Tile value, 0 for an empty cell.

    Returns
    -------
    int
        Pair number, starting at 1. Tiles above 4096 share the last pair.
    """
    if value == 0:
        return 1
    return min(value.bit_length(), len(TILE_STYLES))


def format_tile(value: int, width: int) -> str:
    """Center a tile's value in its block; empty cells stay blank."""
    if value == 0:
        return ' ' * width
    return f'{value:^{width}}'


class TextGame:
    """
    Renders the game in an interactive text-based UI.

    The screen is created on the first ``init_game`` and reused by the following games.
    Input handling and drawing share one loop: the board is redrawn right after each move.
    """

    def __init__(self, config: DisplayConfig | None = None, screen=None):
        self.config = config or DisplayConfig()
        self.board: Board | None = None
        self.screen = screen
        self._owns_screen = False
        self._colors = False
        self._exit_requested = False

    def _init_screen(self) -> None:
        try:
            self.screen = curses.initscr()
            self._owns_screen = True
            curses.noecho()
            curses.cbreak()
            self.screen.keypad(True)
            curses.set_escdelay(25)

            if self.config.use_color and curses.has_colors():
                curses.start_color()
                for pair, (foreground, background) in enumerate(TILE_STYLES, start=1):
                    curses.init_pair(pair, foreground, background)
                self._colors = True
        except curses.error as error:
            raise ScreenInitError(f'Unable to initialize the terminal: {error}') from error

        try:
            curses.curs_set(0)
        except curses.error:
            logger.debug('Terminal cannot hide the cursor')

        rows, cols = self.screen.getmaxyx()
        logger.info('Screen initialized (%dx%d, colors=%s)', cols, rows, self._colors)

    def _tile_style(self, value: int) -> int:
        if self._colors:
            return curses.color_pair(tile_color_pair(value))
        return curses.A_REVERSE if value else curses.A_NORMAL

    def _draw_str(self, x: int, y: int, text: str, style: int) -> None:
        """
        Draw a string, clipped to the screen.

        Parameters
        ----------
        x : int
            Column of the first character.
        y : int
            Line to draw on.
        text : str
            String to draw.
        style : int
            Curses attributes of the text.
        """
        rows, cols = self.screen.getmaxyx()
        if x < 0 or y < 0 or y >= rows:
            return

        # ##: The bottom-right cell cannot be written without moving the cursor off screen.
        limit = cols - x - 1 if y == rows - 1 else cols - x
        if limit <= 0:
            return
        self.screen.addstr(y, x, text[:limit], style)

    def _draw_board(self, status: str = '') -> None:
        """Draw the whole game screen: score, tiles and status line."""
        self.screen.erase()

        width, height = self.config.tile_width, self.config.tile_height
        rows, cols = self.screen.getmaxyx()
        x_board = cols // 2 - (width * self.board.size) // 2
        y_board = rows // 2 - (height * self.board.size) // 2

        # ##: Score above the board.
        score = self.board.display_score()
        self._draw_str(cols // 2 - len(score) // 2, y_board - 2, score, curses.A_BOLD)

        # ##: Tiles, advancing one block of lines at the end of each row.
        y = y_board
        middle = height // 2
        blank = ' ' * width

        def draw_tile(position: Coordinate, is_eol: bool, value: int) -> None:
            nonlocal y
            x = x_board + position.col * width
            style = self._tile_style(value)
            for line in range(height):
                text = format_tile(value, width) if line == middle else blank
                self._draw_str(x, y + line, text, style)
            if is_eol:
                y += height

        self.board.render_board(draw_tile)

        if status:
            self._draw_str(cols // 2 - len(status) // 2, y + 1, status, curses.A_NORMAL)
        self.screen.refresh()

    def _request_exit(self) -> None:
        self._exit_requested = True

    def _game_over(self) -> bool:
        """Wait for the player to restart (True) or quit (False)."""
        self._draw_board(GAME_OVER)
        while True:
            key = self.screen.getch()
            if key in RESTART_KEYS:
                return True
            if KEY_ACTIONS.get(key) == Action.EXIT:
                return False
            if key == curses.KEY_RESIZE:
                self._draw_board(GAME_OVER)

    def init_game(self, board: Board) -> None:
        """
        Attach a new board, initializing the screen on the first game.

        Raises
        ------
        ScreenInitError
            If the terminal cannot be set up.
        """
        self.board = board
        self._exit_requested = False
        if self.screen is None:
            self._init_screen()

    def render_game(self) -> bool:
        """
        Run the gameplay loop of the current board.

        Returns
        -------
        bool
            True to play again, False to quit.
        """
        self._draw_board()

        while not self.board.is_end_game():
            key = self.screen.getch()
            if key == curses.KEY_RESIZE:
                self._draw_board()
                continue

            action = KEY_ACTIONS.get(key, Action.ILLEGAL)
            blocked = action in _DIRECTIONS and _DIRECTIONS[action] not in self.board.legal_actions

            if action_handler(self.board, action, on_exit=self._request_exit):
                logger.debug('Action %s (score %d)', action.name.lower(), self.board.score)
                self._draw_board(NO_MOVE if blocked else '')
            if self._exit_requested:
                logger.info('Player left with score %d', self.board.score)
                return False

        return self._game_over()

    def exit_game(self) -> None:
        """Restore the terminal."""
        if self.screen is None or not self._owns_screen:
            return

        self.screen.keypad(False)
        curses.nocbreak()
        curses.echo()
        curses.endwin()
        self.screen = None
        self._owns_screen = False
        logger.info('Screen closed')
