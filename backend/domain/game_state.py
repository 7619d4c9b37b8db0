"""
GameState entity - an immutable snapshot of the game after a tick.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from .board import Coordinate, in_bounds
from .constants import (
    BOARD_SIZE,
    INITIAL_SPEED,
    RUN_STATUSES,
    PAUSED,
    RUNNING,
    GAME_OVER,
    VALID_MOVES,
)


@dataclass(frozen=True)
class GameState:
    """
    A snapshot of the game at a specific point in time.

    Attributes:
        snake: cells from head (index 0) to tail
        food: the single food cell, never on the snake
        heading: the heading the snake last moved in; reversals are judged
            against it
        next_heading: the heading the next step will use
        status: one of PAUSED, RUNNING, GAME_OVER
        score: food eaten since the last reset
        level: floor(score / POINTS_PER_LEVEL) + 1
        speed: tick interval in milliseconds for the current level
        tick: number of non-fatal steps since the last reset
        death_reason: 'wall' or 'self' once the game is over
    """

    snake: Tuple[Coordinate, ...]
    food: Coordinate
    heading: str
    next_heading: Optional[str] = None
    status: str = PAUSED
    score: int = 0
    level: int = 1
    speed: int = INITIAL_SPEED
    tick: int = 0
    death_reason: Optional[str] = None

    def __post_init__(self):
        if not self.snake:
            raise ValueError("Snake must have at least one cell.")
        if len(set(self.snake)) != len(self.snake):
            raise ValueError(f"Snake overlaps itself: {list(self.snake)}")
        for cell in self.snake:
            if not in_bounds(cell):
                raise ValueError(f"Snake cell out of bounds at {cell}.")
        if not in_bounds(self.food):
            raise ValueError(f"Food out of bounds at {self.food}.")
        if self.heading not in VALID_MOVES:
            raise ValueError(f"Unknown heading: {self.heading!r}")
        if self.next_heading is None:
            object.__setattr__(self, "next_heading", self.heading)
        elif self.next_heading not in VALID_MOVES:
            raise ValueError(f"Unknown heading: {self.next_heading!r}")
        if self.status not in RUN_STATUSES:
            raise ValueError(f"Unknown status: {self.status!r}")

    @property
    def head(self) -> Coordinate:
        """Return the head position (first element)."""
        return self.snake[0]

    @property
    def is_running(self) -> bool:
        return self.status == RUNNING

    @property
    def is_over(self) -> bool:
        return self.status == GAME_OVER

    def to_dict(self) -> Dict[str, Any]:
        """
        JSON-friendly view of the state handed to the presentation layer.
        Tuples become lists so json.dumps gives [x, y] pairs.
        """
        return {
            "snake": [list(cell) for cell in self.snake],
            "food": list(self.food),
            "heading": self.heading,
            "next_heading": self.next_heading,
            "status": self.status,
            "score": self.score,
            "level": self.level,
            "speed": self.speed,
            "tick": self.tick,
            "death_reason": self.death_reason,
        }

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        F = food
        H = snake head
        S = snake body
        Row 0 is printed first, matching screen coordinates.
        """
        board = [['.' for _ in range(BOARD_SIZE)] for _ in range(BOARD_SIZE)]

        fx, fy = self.food
        board[fy][fx] = 'F'

        for idx, (x, y) in enumerate(self.snake):
            board[y][x] = 'H' if idx == 0 else 'S'

        result = [f"{y:2d} {' '.join(row)}" for y, row in enumerate(board)]
        # Last digit only so the labels stay one column wide
        result.append("   " + " ".join(str(i % 10) for i in range(BOARD_SIZE)))

        return "\n".join(result)

    def __repr__(self):
        return (
            f"<GameState tick={self.tick}, status={self.status}, "
            f"length={len(self.snake)}, food={self.food}, "
            f"score={self.score}, level={self.level}>"
        )
