# -*- coding: utf-8 -*-
"""
Display modes of the 2048 game.

It includes the user actions and their dispatch to the board, and a curses `TextGame` that
plays the game in a terminal.
"""

from .display import Action, ExitCode, ScreenInitError, action_handler
from .text_game import KEY_ACTIONS, TextGame

__all__ = ["Action", "ExitCode", "ScreenInitError", "action_handler", "KEY_ACTIONS", "TextGame"]
