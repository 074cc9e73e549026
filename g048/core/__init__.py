# -*- coding: utf-8 -*-
"""
This module provides the rules of the 2048 board.

It includes the move directions and their sweeps, sliding and merging tiles, spawning new
tiles, checking if the game is done, and finding which moves would change the board.
"""

from .gameboard import SWEEPS, Coordinate, Direction, Sweep, fill_cells, is_done, slide_and_merge
from .gamemove import can_move, illegal_actions, legal_actions, legal_actions_mask

__all__ = [
    "Coordinate",
    "Direction",
    "Sweep",
    "SWEEPS",
    "slide_and_merge",
    "fill_cells",
    "is_done",
    "can_move",
    "legal_actions",
    "illegal_actions",
    "legal_actions_mask",
]
