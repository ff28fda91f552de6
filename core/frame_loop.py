"""
Self-rescheduling per-frame callback.

The loop hands its tick to a scheduler (``canvas.request_draw`` in the app)
and re-arms itself at the end of every tick. ``stop()`` turns any tick that is
already queued into a no-op, so a torn-down canvas is never drawn again.
"""

import logging
from typing import Callable

LOGGER = logging.getLogger(__name__)


class FrameLoop:
    def __init__(self, schedule: Callable[[Callable[[], None]], None], step: Callable[[], None]):
        self._schedule = schedule
        self._step = step
        self._running = False
        self.frames = 0

    @property
    def running(self) -> bool:
        return self._running

    def start(self) -> None:
        if self._running:
            return
        self._running = True
        LOGGER.debug("Frame loop started")
        self._schedule(self._tick)

    def stop(self) -> None:
        if self._running:
            LOGGER.debug("Frame loop stopped after %d frames", self.frames)
        self._running = False

    def _tick(self) -> None:
        if not self._running:
            return
        self._step()
        self.frames += 1
        # step() may have stopped the loop
        if self._running:
            self._schedule(self._tick)
