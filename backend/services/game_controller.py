"""
Game controller - the single owner of the live GameState.

Input handlers and the tick scheduler both go through this object. Every
transition commits under one lock so a step never sees a half-applied heading
change. Listeners are notified under a second, re-entrant lock taken before
the commit, so snapshots reach them in commit order and the last snapshot a
listener sees is always the current state.
"""

import logging
import random
import threading
from typing import Callable, List, Optional, Tuple

from domain import engine
from domain.constants import GAME_OVER
from domain.direction import normalize_heading
from domain.game_state import GameState

logger = logging.getLogger(__name__)

Listener = Callable[[GameState], None]
Transition = Callable[[GameState], GameState]


class GameController:
    """
    Holds the current snapshot and applies engine transitions to it.

    Args:
        rng: random source for food placement (seed it for repeatable games)
        state: optional starting state, mostly for tests
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        state: Optional[GameState] = None,
    ) -> None:
        self.rng = rng or random.Random()
        self._lock = threading.Lock()
        # Held from commit to the end of notification; re-entrant so a
        # listener may itself drive the controller
        self._emit_lock = threading.RLock()
        self._listeners: List[Listener] = []
        self._state = state if state is not None else engine.new_game(self.rng)

    @property
    def state(self) -> GameState:
        return self._state

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        try:
            self._listeners.remove(listener)
        except ValueError:
            pass

    def step(self) -> GameState:
        """Advance one tick and return the new state (its speed drives the next tick)."""
        with self._emit_lock:
            before, after = self._commit(lambda state: engine.step(state, self.rng))

            if after.level > before.level:
                logger.info(
                    "Level up: level=%s score=%s speed=%sms", after.level, after.score, after.speed
                )
            if after.status == GAME_OVER and before.status != GAME_OVER:
                logger.info(
                    "Game over (%s) at tick %s with score %s",
                    after.death_reason,
                    after.tick,
                    after.score,
                )
            logger.debug("Tick %s: head=%s heading=%s", after.tick, after.head, after.heading)

            self._emit(after)
        return after

    def change_direction(self, requested: str) -> GameState:
        """
        Feed one directional input through the arbiter.

        Accepts heading constants as well as key names such as "ArrowUp".
        """
        heading = normalize_heading(requested)
        with self._emit_lock:
            before, after = self._commit(lambda state: engine.change_heading(state, heading))

            if after.next_heading != heading and not after.is_over:
                logger.debug("Ignored reversal %s while heading %s", heading, before.heading)
            if after.is_running and not before.is_running:
                logger.info("Game started by %s input", heading)

            self._emit(after)
        return after

    def start(self) -> GameState:
        with self._emit_lock:
            before, after = self._commit(engine.start)
            if after is not before:
                logger.info("Game started")
            self._emit(after)
        return after

    def pause(self) -> GameState:
        with self._emit_lock:
            before, after = self._commit(engine.pause)
            if after is not before:
                logger.info("Game paused at tick %s", after.tick)
            self._emit(after)
        return after

    def reset(self) -> GameState:
        with self._emit_lock:
            _, after = self._commit(lambda state: engine.reset(self.rng))
            logger.info("Game reset; food at %s", after.food)
            self._emit(after)
        return after

    def _commit(self, transition: Transition) -> Tuple[GameState, GameState]:
        with self._lock:
            before = self._state
            after = transition(before)
            self._state = after
        return before, after

    def _emit(self, state: GameState) -> None:
        for listener in list(self._listeners):
            # A listener drove a newer transition, which has notified everyone
            if state is not self._state:
                return
            try:
                listener(state)
            except Exception:
                logger.exception("State listener %r failed", listener)
