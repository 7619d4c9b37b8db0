"""
Single-player game engine.

Every transition takes a GameState and returns a new one; nothing here holds
state of its own. The only side input is the random source used for food.
"""

import random
from dataclasses import replace
from typing import Optional

from .board import in_bounds, translate
from .constants import (
    INITIAL_HEADING,
    INITIAL_SNAKE_POSITION,
    INITIAL_SPEED,
    LEVEL_SPEED_INCREMENT,
    MIN_SPEED,
    POINTS_PER_LEVEL,
    PAUSED,
    RUNNING,
    GAME_OVER,
    DEATH_WALL,
    DEATH_SELF,
)
from .direction import propose_heading
from .food import place_food
from .game_state import GameState


def level_for_score(score: int) -> int:
    return score // POINTS_PER_LEVEL + 1


def speed_for_level(level: int) -> int:
    return max(MIN_SPEED, INITIAL_SPEED - (level - 1) * LEVEL_SPEED_INCREMENT)


def new_game(rng: Optional[random.Random] = None) -> GameState:
    """
    Return the start-of-run state: the fixed 3-cell snake heading right,
    a fresh food cell, score 0, level 1, paused.
    """
    snake = INITIAL_SNAKE_POSITION
    return GameState(
        snake=snake,
        food=place_food(snake, rng),
        heading=INITIAL_HEADING,
        status=PAUSED,
        score=0,
        level=1,
        speed=INITIAL_SPEED,
        tick=0,
        death_reason=None,
    )


def reset(rng: Optional[random.Random] = None) -> GameState:
    """Reinitialise everything. Nothing carries over from the previous run."""
    return new_game(rng)


def start(state: GameState) -> GameState:
    if state.status == PAUSED:
        return replace(state, status=RUNNING)
    return state


def pause(state: GameState) -> GameState:
    if state.status == RUNNING:
        return replace(state, status=PAUSED)
    return state


def change_heading(state: GameState, requested: str) -> GameState:
    """
    Arbitrate a directional input.

    The request is checked against the heading the snake last moved in, not
    against an earlier input queued since that move, so two quick turns can
    never fold the snake back onto its neck. A rejected request leaves the
    queued heading alone. Any directional input while paused also starts the
    run, even a rejected one. Input after game over is ignored.
    """
    if state.status == GAME_OVER:
        return state

    accepted = propose_heading(state.heading, requested) == requested
    next_heading = requested if accepted else state.next_heading
    status = RUNNING if state.status == PAUSED else state.status
    if next_heading == state.next_heading and status == state.status:
        return state
    return replace(state, next_heading=next_heading, status=status)


def step(state: GameState, rng: Optional[random.Random] = None) -> GameState:
    """
    Advance exactly one tick.

    Returns `state` unchanged unless it is running. A fatal move flips the
    status to GAME_OVER and keeps snake, food and score as they were; the
    fatal cell is never appended. Eating recomputes score, then level, then
    speed, so the caller can read the new interval off the returned state.
    """
    if state.status != RUNNING:
        return state

    heading = state.next_heading
    new_head = translate(state.head, heading)

    if not in_bounds(new_head):
        return replace(state, status=GAME_OVER, death_reason=DEATH_WALL)
    if new_head in state.snake:
        return replace(state, status=GAME_OVER, death_reason=DEATH_SELF)

    grown = (new_head,) + state.snake

    if new_head != state.food:
        # Normal move: drop the tail
        return replace(state, snake=grown[:-1], heading=heading, tick=state.tick + 1)

    # Grow: keep the tail and place food against the grown body
    score = state.score + 1
    level = state.level
    speed = state.speed
    new_level = level_for_score(score)
    if new_level > level:
        level = new_level
        speed = speed_for_level(level)

    return replace(
        state,
        snake=grown,
        heading=heading,
        food=place_food(grown, rng),
        score=score,
        level=level,
        speed=speed,
        tick=state.tick + 1,
    )
