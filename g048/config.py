"""
Game constants and front-end configuration.
"""

from dataclasses import dataclass

# ##>: The board is always square with this many rows and columns.
BOARD_SIZE = 4

# ##>: Tile spawn probabilities (3 in 4 for a 2, 1 in 4 for a 4).
TILE_SPAWN_PROBS: dict[int, float] = {2: 0.75, 4: 0.25}

# ##>: Width of the right-justified score field.
SCORE_WIDTH = 10


@dataclass
class DisplayConfig:
    """Layout and style of the terminal front-end."""

    tile_width: int = 8  # Columns per tile
    tile_height: int = 3  # Lines per tile, value on the middle one
    use_color: bool = True  # Disabled anyway when the terminal has no colours
