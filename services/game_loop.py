"""
Fixed-rate loops for driving the simulation and the display.

TickScheduler calls the simulation tick on one background thread at a
fixed rate, so ticks are serialised by construction. RenderLoop polls a
snapshot provider at its own rate and hands each snapshot to a renderer.
The two loops are independent: a slow renderer never delays a tick.
"""

import logging
import threading
import time
from typing import Callable, Optional

logger = logging.getLogger(__name__)


def tick_period_seconds(rate_hz: float) -> float:
    """Period for *rate_hz*, rounded to whole milliseconds (30 Hz -> 0.033 s)."""
    if rate_hz <= 0:
        raise ValueError(f"Rate must be positive, got {rate_hz}")
    return max(1, round(1000 / rate_hz)) / 1000.0


class _FixedRateLoop:
    """
    Calls *step* every period on a daemon thread until stopped.

    Deadlines are computed from the start time, so a late step does not
    push every later step back. When the loop falls more than one period
    behind, missed steps are dropped instead of being run in a burst.
    """

    name = "fixed-rate-loop"

    def __init__(self, step: Callable[[], None], rate_hz: float):
        self.period = tick_period_seconds(rate_hz)
        self._step = step
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self.count = 0
        self.error: Optional[BaseException] = None

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self.is_running:
            return
        self._stop.clear()
        self.error = None
        self._thread = threading.Thread(target=self._run, name=self.name, daemon=True)
        self._thread.start()
        logger.debug(f"{self.name} started ({self.period * 1000:.0f} ms period)")

    def stop(self) -> None:
        """Ask the loop to stop. Safe to call from inside a step."""
        self._stop.set()
        if self._thread is not None and self._thread is not threading.current_thread():
            self._thread.join()

    def join(self, timeout: Optional[float] = None) -> None:
        if self._thread is not None:
            self._thread.join(timeout)

    def _run(self) -> None:
        next_deadline = time.monotonic()
        while not self._stop.is_set():
            try:
                self._step()
            except Exception as e:
                logger.error(f"{self.name} stopped after error: {e}")
                self.error = e
                self._stop.set()
                break
            self.count += 1

            next_deadline += self.period
            now = time.monotonic()
            if next_deadline < now - self.period:
                next_deadline = now
            self._stop.wait(max(0.0, next_deadline - now))


class TickScheduler(_FixedRateLoop):
    """Drives SimulationEngine.advance() (or a wrapper around it) at the tick rate."""

    name = "tick-scheduler"


class RenderLoop(_FixedRateLoop):
    """
    Hands the latest snapshot to *renderer* at the display rate.

    Args:
        snapshot: callable returning a GameState, e.g. engine.get_current_state
        renderer: callable taking that GameState
        fps: frames per second
    """

    name = "render-loop"

    def __init__(self, snapshot: Callable, renderer: Callable, fps: float):
        super().__init__(lambda: renderer(snapshot()), fps)
