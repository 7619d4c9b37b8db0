#!/usr/bin/env python3
"""
Headless Snake runner.

Drives one game with the tick scheduler at real speed and lets the
RandomPlayer steer in place of a keyboard. Prints the board after every tick
and a JSON summary at the end.

Usage:
    python backend/cli/play.py [--seed 7] [--max-ticks 500] [--quiet]
"""

import argparse
import json
import logging
import os
import random
import sys
import threading
from typing import Any, Dict, List, Optional

# Add parent directory to path to import the game packages
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import config  # noqa: E402
from domain.game_state import GameState  # noqa: E402
from players import RandomPlayer  # noqa: E402
from services.game_controller import GameController  # noqa: E402
from services.tick_scheduler import TickScheduler  # noqa: E402

logger = logging.getLogger(__name__)

# How long the main loop waits for a tick before re-checking the limits
WAIT_SECONDS = 1.0


def summarize(state: GameState) -> Dict[str, Any]:
    return {
        "status": state.status,
        "score": state.score,
        "level": state.level,
        "speed": state.speed,
        "ticks": state.tick,
        "length": len(state.snake),
        "death_reason": state.death_reason,
    }


def run_game(
    seed: Optional[int] = None,
    max_ticks: Optional[int] = None,
    quiet: bool = False,
) -> Dict[str, Any]:
    """
    Play one game to game over (or `max_ticks`) and return a summary.
    """
    controller = GameController(rng=random.Random(seed))
    player = RandomPlayer(rng=random.Random(seed))
    scheduler = TickScheduler(controller)

    ticked = threading.Event()
    seen: List[int] = [controller.state.tick]

    def on_state(state: GameState) -> None:
        if state.tick != seen[-1] or state.is_over:
            seen.append(state.tick)
            if not quiet:
                print(f"\nTick {state.tick}  score={state.score}  level={state.level}")
                print(state.print_board())
            ticked.set()

    controller.subscribe(on_state)
    scheduler.start()

    try:
        # The first directional input starts the run
        controller.change_direction(player.get_move(controller.state))

        while True:
            ticked.wait(WAIT_SECONDS)
            ticked.clear()
            state = controller.state
            if state.is_over:
                break
            if max_ticks is not None and state.tick >= max_ticks:
                logger.info("Reached max ticks (%s); pausing", max_ticks)
                controller.pause()
                break
            controller.change_direction(player.get_move(state))
    finally:
        scheduler.stop()
        controller.unsubscribe(on_state)

    return summarize(controller.state)


def main():
    parser = argparse.ArgumentParser(
        description="Run a headless Snake game steered by the random player."
    )
    parser.add_argument("--seed", type=int, default=config.SEED,
                        help="Seed for food placement and the player (default: SNAKE_SEED)")
    parser.add_argument("--max-ticks", type=int, default=None,
                        help="Stop after this many ticks")
    parser.add_argument("--quiet", action="store_true",
                        help="Do not print the board each tick")
    parser.add_argument("--log-level", type=str, default=None,
                        help="Logging level (default: SNAKE_LOG_LEVEL or INFO)")

    args = parser.parse_args()
    config.configure_logging(args.log_level)

    try:
        result = run_game(seed=args.seed, max_ticks=args.max_ticks, quiet=args.quiet)
    except KeyboardInterrupt:
        logger.info("Cancelled by user")
        sys.exit(1)

    print("\nGame Summary:")
    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
