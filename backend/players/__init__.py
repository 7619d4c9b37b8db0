"""
Player implementations that drive the snake without a keyboard.
"""

from .base import Player
from .random_player import RandomPlayer

__all__ = [
    'Player',
    'RandomPlayer',
]
