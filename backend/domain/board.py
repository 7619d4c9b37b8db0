"""
Board geometry: a fixed BOARD_SIZE x BOARD_SIZE grid.
"""

from typing import Tuple

from .constants import BOARD_SIZE, MOVE_DELTAS

Coordinate = Tuple[int, int]


def in_bounds(cell: Coordinate) -> bool:
    """Return True if both axes lie in [0, BOARD_SIZE)."""
    x, y = cell
    return 0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE


def translate(cell: Coordinate, heading: str) -> Coordinate:
    """Return the cell one step away from `cell` in `heading`."""
    dx, dy = MOVE_DELTAS[heading]
    return (cell[0] + dx, cell[1] + dy)
