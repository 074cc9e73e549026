# -*- coding: utf-8 -*-
"""
Play 2048 in a terminal.
"""
import logging
import sys
from argparse import ArgumentParser

from g048.config import DisplayConfig
from g048.envs import Board
from g048.view import ExitCode, ScreenInitError, TextGame

logger = logging.getLogger(__name__)

CONTROLS = """Controls
  * W/[Up]:         Move up
  * A/[Left]:       Move left
  * S/[Down]:       Move down
  * D/[Right]:      Move right
  * R:              Play again (once the game is over)
  * [Esc]/Q/[Ctrl-C]: Exit game"""


def build_parser() -> ArgumentParser:
    """Build the command line parser."""
    parser = ArgumentParser(prog="g048", description="G048: 2048 in a terminal.")
    parser.add_argument("command", nargs="?", choices=["help"], help="Show the controls and exit")
    parser.add_argument("--seed", type=int, default=None, help="Seed of the first game, for reproducible games")
    parser.add_argument("--no-color", action="store_true", help="Draw tiles without colours")
    parser.add_argument("--log-file", type=str, default=None, help="Write logs to this file")
    parser.add_argument(
        "--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level"
    )
    return parser


def setup_logging(log_file: str | None, level: str) -> None:
    """
    Configure logging for a session.

    Parameters
    ----------
    log_file : str | None
        Destination of the logs. The terminal belongs to curses, so without a file the logs are dropped.
    level : str
        Name of the logging level.
    """
    if log_file is None:
        logging.getLogger("g048").addHandler(logging.NullHandler())
        return

    logging.basicConfig(
        filename=log_file, level=level, format="%(asctime)s %(name)s %(levelname)s: %(message)s"
    )


def run(game: TextGame, seed: int | None = None) -> ExitCode:
    """
    Play games until the player quits.

    Parameters
    ----------
    game : TextGame
        Display mode to play with.
    seed : int, optional
        Seed of the first game; following games use the next integers.

    Returns
    -------
    ExitCode
        Exit status of the session.
    """
    index = 0
    play_again = True
    while play_again:
        # ##: New board per game.
        game.init_game(Board(seed=None if seed is None else seed + index))
        play_again = game.render_game()
        index += 1

    logger.info("Session over after %d game(s)", index)
    return ExitCode.SUCCESS


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point of the game.

    Parameters
    ----------
    argv : list[str], optional
        Command line arguments, ``sys.argv[1:]`` by default.

    Returns
    -------
    int
        Process exit status.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "help":
        print("G048: 2048 in a terminal\n")
        print(parser.format_usage())
        print(CONTROLS)
        return ExitCode.SUCCESS

    setup_logging(args.log_file, args.log_level)
    game = TextGame(DisplayConfig(use_color=not args.no_color))
    try:
        return run(game, seed=args.seed)
    except ScreenInitError as error:
        game.exit_game()
        print(error, file=sys.stderr)
        return ExitCode.SCREEN_INIT
    except KeyboardInterrupt:
        logger.info("Interrupted by the player")
        return ExitCode.SUCCESS
    finally:
        game.exit_game()


if __name__ == "__main__":
    sys.exit(main())
