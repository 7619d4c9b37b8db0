"""
Tick scheduler - fires GameController.step() every `speed` milliseconds.

Uses a private `schedule.Scheduler` holding at most one tagged job and runs
its loop on a daemon thread. The job is armed while the game is running and
cancelled on pause, game over and reset.

Interval changes: speed only changes inside a step, i.e. right after the wait
that fired it has completed. The job is then re-registered with the new
interval, so the following tick already uses it and no wait ever runs out on
a stale interval.

The job itself only marks a tick as due; the step runs after the scheduler
lock is released. The controller notifies listeners (including `sync`) while
holding its own emission lock, so stepping under the scheduler lock would
take the two locks in the opposite order to an input thread.
"""

import logging
import threading
from typing import Optional

import schedule

from domain.game_state import GameState
from services.game_controller import GameController

logger = logging.getLogger(__name__)

TICK_TAG = "tick"
# Longest single sleep of the loop, so stop() and new jobs are noticed quickly
IDLE_POLL_SECONDS = 0.05


class TickScheduler:
    """
    Drives a GameController at the cadence given by its current speed.

    Args:
        controller: the game to tick
        scheduler: optional schedule.Scheduler, a fresh one by default
    """

    def __init__(
        self,
        controller: GameController,
        scheduler: Optional[schedule.Scheduler] = None,
    ) -> None:
        self.controller = controller
        self._scheduler = scheduler or schedule.Scheduler()
        self._lock = threading.RLock()
        self._wake = threading.Event()
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self._interval_ms: Optional[int] = None
        self._due = False
        self._subscribed = False

    @property
    def interval_ms(self) -> Optional[int]:
        """Interval of the armed tick job, None when nothing is armed."""
        return self._interval_ms

    @property
    def is_armed(self) -> bool:
        return self._interval_ms is not None

    def tick(self) -> GameState:
        """Run one step and rearm from the speed the step returned."""
        state = self.controller.step()
        # When subscribed, the controller already called sync with this state
        if not self._subscribed:
            self.sync(state)
        return state

    def sync(self, state: Optional[GameState] = None) -> None:
        """
        Bring the tick job in line with the controller.

        Always reads the controller's current state so out-of-order
        notifications from other threads cannot leave a stale job behind.
        The argument is accepted so this can be used as a listener.
        """
        with self._lock:
            current = self.controller.state
            if not current.is_running:
                self._cancel()
            elif self._interval_ms != current.speed:
                self._arm(current.speed)

    def subscribe(self) -> None:
        """Follow the controller's status changes without starting the loop."""
        if not self._subscribed:
            self.controller.subscribe(self.sync)
            self._subscribed = True

    def unsubscribe(self) -> None:
        self.controller.unsubscribe(self.sync)
        self._subscribed = False

    def start(self) -> None:
        """Subscribe to the controller and start the background loop."""
        if self._thread is not None:
            return
        self._stop.clear()
        self.subscribe()
        self.sync()
        self._thread = threading.Thread(
            target=self._run_loop, name="tick-scheduler", daemon=True
        )
        self._thread.start()
        logger.info("Tick scheduler started")

    def stop(self, timeout: Optional[float] = 1.0) -> None:
        self.unsubscribe()
        with self._lock:
            self._cancel()
        self._stop.set()
        self._wake.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None
        logger.info("Tick scheduler stopped")

    def run_pending(self) -> Optional[float]:
        """
        Run the tick if its job is due.

        Returns the seconds until the next job, or None when nothing is armed.
        """
        with self._lock:
            self._scheduler.run_pending()
            due, self._due = self._due, False
            idle = self._scheduler.idle_seconds

        if due:
            self._run_tick()
        return idle

    def _arm(self, interval_ms: int) -> None:
        self._scheduler.clear(TICK_TAG)
        self._scheduler.every(interval_ms / 1000).seconds.do(self._mark_due).tag(TICK_TAG)
        previous = self._interval_ms
        self._interval_ms = interval_ms
        self._wake.set()
        if previous is None:
            logger.info("Tick armed every %sms", interval_ms)
        else:
            logger.info("Tick rearmed from %sms to %sms", previous, interval_ms)

    def _mark_due(self) -> None:
        self._due = True

    def _run_tick(self) -> None:
        try:
            self.tick()
        except Exception:
            logger.exception("Tick failed; keeping the scheduler running")

    def _cancel(self) -> None:
        if self._interval_ms is None:
            return
        self._scheduler.clear(TICK_TAG)
        self._interval_ms = None
        logger.info("Tick cancelled (status=%s)", self.controller.state.status)

    def _run_loop(self) -> None:
        while not self._stop.is_set():
            idle = self.run_pending()

            if idle is None:
                wait = IDLE_POLL_SECONDS
            else:
                wait = max(0.0, min(idle, IDLE_POLL_SECONDS))
            self._wake.wait(wait)
            self._wake.clear()
