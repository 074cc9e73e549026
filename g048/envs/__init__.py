# -*- coding: utf-8 -*-
"""
Python implementation of the 2048 game.

This module provides the `Board` class, which holds the state of one game and the moves to play it.
"""

from .board import Board, Cell

__all__ = ["Board", "Cell"]
