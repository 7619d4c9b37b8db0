"""
Tests for domain/engine.py - the single-player game state machine.
"""

import random
import sys
import os

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain import engine
from domain.constants import (
    UP, DOWN, LEFT, RIGHT,
    PAUSED, RUNNING, GAME_OVER,
    INITIAL_SPEED, MIN_SPEED,
    INITIAL_SNAKE_POSITION,
)
from domain.game_state import GameState
from players import RandomPlayer


START_SNAKE = ((10, 10), (9, 10), (8, 10))


def running_state(snake=START_SNAKE, food=(15, 15), heading=RIGHT, **kwargs):
    return GameState(
        snake=tuple(snake),
        food=food,
        heading=heading,
        status=RUNNING,
        **kwargs
    )


class TestLevelAndSpeed:
    """Level and speed are computed directly from the score."""

    @pytest.mark.parametrize("score,level,speed", [
        (0, 1, 200),
        (4, 1, 200),
        (5, 2, 180),
        (9, 2, 180),
        (10, 3, 160),
    ])
    def test_formula(self, score, level, speed):
        assert engine.level_for_score(score) == level
        assert engine.speed_for_level(level) == speed

    def test_speed_is_floored(self):
        """Speed never drops below MIN_SPEED."""
        assert engine.speed_for_level(8) == 60
        assert engine.speed_for_level(9) == MIN_SPEED
        assert engine.speed_for_level(50) == MIN_SPEED


class TestNewGameAndReset:
    """Tests for the start-of-run state."""

    def test_new_game_defaults(self):
        """A new game is paused with the fixed 3-cell snake heading right."""
        state = engine.new_game(random.Random(0))

        assert state.snake == INITIAL_SNAKE_POSITION
        assert state.heading == RIGHT
        assert state.next_heading == RIGHT
        assert state.status == PAUSED
        assert state.score == 0
        assert state.level == 1
        assert state.speed == INITIAL_SPEED
        assert state.tick == 0
        assert state.death_reason is None
        assert state.food not in state.snake

    def test_reset_discards_a_finished_game(self):
        """Reset from game over returns to the start values."""
        over = engine.step(GameState(
            snake=((0, 5), (1, 5)), food=(9, 9), heading=LEFT, status=RUNNING,
            score=12, level=3, speed=160,
        ))
        assert over.status == GAME_OVER

        state = engine.reset(random.Random(5))

        assert state.status == PAUSED
        assert state.snake == INITIAL_SNAKE_POSITION
        assert (state.score, state.level, state.speed) == (0, 1, INITIAL_SPEED)

    def test_reset_twice_gives_identical_states(self):
        """Two resets agree on everything; with the same seed, food too."""
        first = engine.reset(rng=random.Random(11))
        second = engine.reset(random.Random(11))
        assert first == second

        unseeded = engine.reset()
        assert unseeded.snake == first.snake
        assert unseeded.heading == first.heading
        assert unseeded.status == first.status
        assert (unseeded.score, unseeded.level, unseeded.speed) == (0, 1, INITIAL_SPEED)


class TestStep:
    """Tests for one tick of movement."""

    def test_move_drops_the_tail(self):
        """Moving onto a free cell keeps the length."""
        state = engine.step(running_state())

        assert state.snake == ((11, 10), (10, 10), (9, 10))
        assert state.score == 0
        assert state.tick == 1
        assert state.status == RUNNING

    def test_eating_grows_and_scores(self):
        """Moving onto the food keeps the tail and scores one point."""
        state = engine.step(running_state(food=(11, 10)), random.Random(0))

        assert state.snake == ((11, 10), (10, 10), (9, 10), (8, 10))
        assert state.score == 1
        assert state.level == 1
        assert state.speed == INITIAL_SPEED
        assert state.food not in state.snake

    def test_level_up_recomputes_speed(self):
        """The fifth food moves to level 2 and a faster tick."""
        before = running_state(food=(11, 10), score=4)
        state = engine.step(before, random.Random(0))

        assert state.score == 5
        assert state.level == 2
        assert state.speed == 180

    def test_speed_only_changes_on_level_up(self):
        """Eating without a level change leaves speed as it was."""
        before = running_state(food=(11, 10), score=6, level=2, speed=180)
        state = engine.step(before, random.Random(0))

        assert state.level == 2
        assert state.speed == 180

    def test_wall_collision_ends_the_game(self):
        """Heading left from x=0 is fatal and nothing else changes."""
        before = running_state(snake=[(0, 5), (1, 5), (2, 5)], heading=LEFT, score=3)
        state = engine.step(before)

        assert state.status == GAME_OVER
        assert state.death_reason == "wall"
        assert state.snake == before.snake
        assert state.food == before.food
        assert state.score == 3
        assert state.tick == before.tick

    def test_top_wall_collision(self):
        before = running_state(snake=[(4, 0), (4, 1)], heading=UP)
        assert engine.step(before).death_reason == "wall"

    def test_self_collision_ends_the_game(self):
        """Running into the body is fatal and the snake is unchanged."""
        snake = [(5, 5), (6, 5), (6, 6), (5, 6), (4, 6)]
        before = running_state(snake=snake, heading=DOWN)
        state = engine.step(before)

        assert state.status == GAME_OVER
        assert state.death_reason == "self"
        assert state.snake == tuple(snake)

    def test_tail_cell_counts_as_occupied(self):
        """The tail is checked before it moves away."""
        snake = [(5, 5), (6, 5), (6, 6), (5, 6)]
        state = engine.step(running_state(snake=snake, heading=DOWN))

        assert state.status == GAME_OVER
        assert state.death_reason == "self"

    @pytest.mark.parametrize("status", [PAUSED, GAME_OVER])
    def test_step_is_a_no_op_unless_running(self, status):
        before = GameState(snake=START_SNAKE, food=(15, 15), heading=RIGHT, status=status)
        assert engine.step(before) is before

    def test_step_commits_the_queued_heading(self):
        state = engine.change_heading(running_state(), UP)
        state = engine.step(state)

        assert state.head == (10, 9)
        assert state.heading == UP
        assert state.next_heading == UP


class TestChangeHeading:
    """Tests for directional input."""

    def test_input_while_paused_starts_the_game(self):
        state = engine.new_game(random.Random(0))
        state = engine.change_heading(state, UP)

        assert state.status == RUNNING
        assert state.next_heading == UP

    def test_rejected_input_still_starts_the_game(self):
        """A reversal is ignored but the key press still starts the run."""
        state = engine.new_game(random.Random(0))
        state = engine.change_heading(state, LEFT)

        assert state.status == RUNNING
        assert state.next_heading == RIGHT

    def test_input_after_game_over_is_ignored(self):
        over = GameState(snake=START_SNAKE, food=(1, 1), heading=RIGHT, status=GAME_OVER)
        assert engine.change_heading(over, UP) is over

    def test_rapid_inputs_cannot_double_reverse(self):
        """UP then LEFT while moving right keeps UP; the snake never folds back."""
        state = running_state()
        state = engine.change_heading(state, UP)
        state = engine.change_heading(state, LEFT)

        assert state.next_heading == UP

        state = engine.step(state)
        assert state.status == RUNNING
        assert state.head == (10, 9)

    def test_last_valid_input_wins(self):
        """Of several valid inputs between ticks only the final one applies."""
        state = running_state()
        state = engine.change_heading(state, UP)
        state = engine.change_heading(state, DOWN)

        assert state.next_heading == DOWN
        assert engine.step(state).head == (10, 11)

    def test_unchanged_input_returns_same_state(self):
        state = running_state()
        assert engine.change_heading(state, RIGHT) is state


class TestStartAndPause:
    """Tests for explicit start and pause."""

    def test_start_from_paused(self):
        state = engine.start(engine.new_game(random.Random(0)))
        assert state.status == RUNNING
        assert state.next_heading == RIGHT

    def test_start_does_not_revive_a_finished_game(self):
        over = GameState(snake=START_SNAKE, food=(1, 1), heading=RIGHT, status=GAME_OVER)
        assert engine.start(over) is over

    def test_pause_and_resume(self):
        state = engine.pause(running_state())
        assert state.status == PAUSED
        assert engine.step(state) is state
        assert engine.start(state).status == RUNNING


class TestInvariants:
    """Play many seeded games and check the invariants on every tick."""

    @pytest.mark.parametrize("seed", range(10))
    def test_invariants_hold_over_a_whole_game(self, seed):
        rng = random.Random(seed)
        player = RandomPlayer(rng=random.Random(seed))
        state = engine.start(engine.new_game(rng))

        for _ in range(1500):
            state = engine.change_heading(state, player.get_move(state))
            after = engine.step(state, rng)

            assert after.score >= state.score
            assert after.level >= state.level
            assert after.speed <= state.speed
            assert after.speed >= MIN_SPEED

            if after.status == RUNNING:
                assert len(set(after.snake)) == len(after.snake)
                assert after.food not in after.snake
                growth = len(after.snake) - len(state.snake)
                assert growth == after.score - state.score
            else:
                assert after.snake == state.snake
                break

            state = after
