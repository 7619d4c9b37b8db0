"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List, Optional

from domain.board import in_bounds, translate
from domain.constants import VALID_MOVES
from domain.direction import is_reversal
from domain.game_state import GameState
from .base import Player


class RandomPlayer(Player):
    """
    A random AI that picks a heading that avoids walls, its own body and
    reversals, preferring to head for the food when that is safe.
    """

    def __init__(self, rng: Optional[random.Random] = None, greedy: bool = True):
        self.rng = rng or random.Random()
        self.greedy = greedy

    def safe_moves(self, game_state: GameState) -> List[str]:
        body = game_state.snake
        moves: List[str] = []
        for move in sorted(VALID_MOVES):
            if is_reversal(game_state.heading, move):
                continue
            target = translate(game_state.head, move)
            # Check wall collisions
            if not in_bounds(target):
                continue
            # The engine counts the tail cell as occupied, so we do too
            if target in body:
                continue
            moves.append(move)
        return moves

    def get_move(self, game_state: GameState) -> str:
        valid_moves = self.safe_moves(game_state)

        # If no valid moves, keep going (we'll die anyway)
        if not valid_moves:
            return game_state.heading

        if self.greedy:
            fx, fy = game_state.food
            hx, hy = game_state.head
            current = abs(fx - hx) + abs(fy - hy)
            closer = []
            for move in valid_moves:
                tx, ty = translate(game_state.head, move)
                if abs(fx - tx) + abs(fy - ty) < current:
                    closer.append(move)
            if closer:
                return self.rng.choice(closer)

        return self.rng.choice(valid_moves)
