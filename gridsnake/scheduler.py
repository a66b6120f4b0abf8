"""Cooperative timer scheduler.

The game never owns a real timer. It registers periodic and one-shot
callbacks here and the frame loop calls :meth:`Scheduler.run_pending` once
per frame. Tests drive the same scheduler with a fake clock.
"""

import heapq
import itertools
import logging
import time

logger = logging.getLogger(__name__)


class Timer:
    """Cancellation handle for a scheduled callback."""

    def __init__(self, scheduler, callback, deadline, interval=None, name=None):
        self.scheduler = scheduler
        self.callback = callback
        self.deadline = deadline
        self.interval = interval
        self.name = name or getattr(callback, "__name__", "timer")
        self.cancelled = False

    @property
    def periodic(self):
        return self.interval is not None

    @property
    def remaining(self):
        return max(0.0, self.deadline - self.scheduler.now())

    def cancel(self):
        self.cancelled = True

    def __repr__(self):
        state = "cancelled" if self.cancelled else f"due={self.deadline:.3f}"
        return f"<Timer {self.name} {state}>"


class Scheduler:
    def __init__(self, clock=time.monotonic):
        self.clock = clock
        self._queue = []
        self._counter = itertools.count()

    def now(self):
        return self.clock()

    def _push(self, timer):
        heapq.heappush(self._queue, (timer.deadline, next(self._counter), timer))
        return timer

    def call_later(self, delay, callback, name=None):
        """Run callback once after delay seconds."""
        return self._push(Timer(self, callback, self.now() + delay, name=name))

    def call_every(self, interval, callback, name=None):
        """Run callback every interval seconds until cancelled."""
        if interval <= 0:
            raise ValueError("periodic interval must be positive")
        return self._push(Timer(self, callback, self.now() + interval, interval, name))

    def pending(self):
        return [t for _, _, t in self._queue if not t.cancelled]

    def run_pending(self):
        """Fire every timer that is due, in deadline order.

        A periodic timer fires at most once per call, so a stalled frame
        does not replay a burst of ticks. Returns the number of callbacks run.
        """
        now = self.now()
        fired = 0
        rescheduled = []
        try:
            while self._queue and self._queue[0][0] <= now:
                _, _, timer = heapq.heappop(self._queue)
                if timer.cancelled:
                    continue
                if timer.periodic:
                    timer.deadline = max(timer.deadline + timer.interval, now)
                    rescheduled.append(timer)
                else:
                    timer.cancelled = True
                timer.callback()
                fired += 1
        finally:
            # periodic timers survive a callback that raised
            for timer in rescheduled:
                if not timer.cancelled:
                    self._push(timer)
        return fired

    def cancel_all(self):
        for _, _, timer in self._queue:
            timer.cancel()
        self._queue.clear()
