"""
Domain entities for the Snake game engine.

This module contains the core game rules; it is independent of
infrastructure concerns (timers, threads, terminals).
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES,
    PAUSED, RUNNING, GAME_OVER,
    BOARD_SIZE, INITIAL_SPEED, MIN_SPEED, POINTS_PER_LEVEL, LEVEL_SPEED_INCREMENT,
)
from .board import in_bounds, translate
from .food import place_food
from .direction import propose_heading, normalize_heading
from .game_state import GameState
from . import engine

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES',
    'PAUSED', 'RUNNING', 'GAME_OVER',
    'BOARD_SIZE', 'INITIAL_SPEED', 'MIN_SPEED', 'POINTS_PER_LEVEL', 'LEVEL_SPEED_INCREMENT',
    'in_bounds', 'translate',
    'place_food',
    'propose_heading', 'normalize_heading',
    'GameState',
    'engine',
]
