"""
Game constants for the Snake core.
"""

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# Screen coordinates: y grows downwards
MOVE_DELTAS = {
    UP: (0, -1),
    DOWN: (0, 1),
    LEFT: (-1, 0),
    RIGHT: (1, 0),
}

OPPOSITES = {
    UP: DOWN,
    DOWN: UP,
    LEFT: RIGHT,
    RIGHT: LEFT,
}

# Run status
PAUSED = "paused"
RUNNING = "running"
GAME_OVER = "game_over"
RUN_STATUSES = {PAUSED, RUNNING, GAME_OVER}

# Death reasons
DEATH_WALL = "wall"
DEATH_SELF = "self"

# Game settings (fixed, not runtime-tunable)
BOARD_SIZE = 20
INITIAL_SPEED = 200  # ms per tick
MIN_SPEED = 50
POINTS_PER_LEVEL = 5
LEVEL_SPEED_INCREMENT = 20  # ms shaved off per level

INITIAL_SNAKE_POSITION = ((10, 10), (9, 10), (8, 10))
INITIAL_HEADING = RIGHT
