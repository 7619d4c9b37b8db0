"""
Food placement.
"""

import random
from typing import Iterable, Optional

from .board import Coordinate
from .constants import BOARD_SIZE


def place_food(
    occupied: Iterable[Coordinate],
    rng: Optional[random.Random] = None,
) -> Coordinate:
    """
    Return a uniformly random in-bounds cell that is not in `occupied`.

    Samples the whole board and keeps the first free cell. This never returns
    if `occupied` covers every cell (a BOARD_SIZE**2 - 1 long snake that just
    ate); that case is not handled.
    """
    rng = rng or random
    taken = set(occupied)
    while True:
        x = rng.randint(0, BOARD_SIZE - 1)
        y = rng.randint(0, BOARD_SIZE - 1)
        if (x, y) not in taken:
            return (x, y)
