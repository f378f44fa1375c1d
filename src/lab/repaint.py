"""Coalescing of many same-turn store changes into one deferred repaint."""

from collections import deque
from typing import Callable

import structlog

logger = structlog.get_logger()


class TurnQueue:
    """Minimal task queue: callbacks enqueued now run when the turn is drained."""

    def __init__(self):
        self._pending: deque[Callable[[], None]] = deque()

    def call_soon(self, callback: Callable[[], None]) -> None:
        self._pending.append(callback)

    def drain(self) -> int:
        """Run queued callbacks, including any they enqueue. Returns how many ran."""
        ran = 0
        while self._pending:
            callback = self._pending.popleft()
            callback()
            ran += 1
        return ran

    def __len__(self) -> int:
        return len(self._pending)


class RepaintScheduler:
    """Schedules at most one render per turn.

    Starts in the pending state so nothing renders until the owner calls
    ``paint_now()`` once it has finished loading.
    """

    def __init__(self, render: Callable[[], None], queue: TurnQueue):
        self.render = render
        self.queue = queue
        self.pending = True
        self.paints = 0

    def schedule(self) -> None:
        if self.pending:
            return
        self.pending = True
        self.queue.call_soon(self.paint_now)

    def paint_now(self) -> None:
        self.pending = False
        self.paints += 1
        logger.debug("repaint", paints=self.paints)
        self.render()
