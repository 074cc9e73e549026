# -*- coding: utf-8 -*-
"""
A 2048 sliding-tile puzzle played in a terminal.
"""

from .core import Coordinate, Direction
from .envs import Board, Cell

__all__ = ["Board", "Cell", "Coordinate", "Direction"]
