"""
Task Scheduler
==============
Frame requests and interval timers driven by the host loop.

The game loop calls advance(dt) once per display refresh. Interval tasks
fire once for every full interval elapsed, then the frame callbacks that
were requested before this advance run. A frame requested while
advancing runs on the next advance, so frame steps never overlap.
"""

import logging
from typing import Callable, List, Optional

logger = logging.getLogger(__name__)


class TaskHandle:
    """Cancellation token for a scheduled callback"""

    def __init__(self, callback: Callable[[], None],
                 interval: Optional[float] = None, due: float = 0.0):
        self.callback = callback
        self.interval = interval
        self.due = due
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def is_interval(self) -> bool:
        return self.interval is not None

    def cancel(self):
        """The callback will never run again after this returns"""
        self._cancelled = True

    def __repr__(self) -> str:
        kind = f"interval={self.interval}" if self.is_interval else "frame"
        return f"TaskHandle({kind}, cancelled={self._cancelled})"


class Scheduler:
    """
    Single-threaded cooperative scheduler.
    """

    def __init__(self):
        self.now = 0.0
        self.frame_count = 0
        self._frame_requests: List[TaskHandle] = []
        self._intervals: List[TaskHandle] = []

    def request_frame(self, callback: Callable[[], None]) -> TaskHandle:
        """Run callback once on the next advance"""
        handle = TaskHandle(callback)
        self._frame_requests.append(handle)
        return handle

    def set_interval(self, callback: Callable[[], None], interval: float) -> TaskHandle:
        """Run callback every `interval` seconds until cancelled"""
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        handle = TaskHandle(callback, interval=interval, due=self.now + interval)
        self._intervals.append(handle)
        return handle

    def advance(self, dt: float):
        """Move the clock forward and run everything that is due"""
        self.now += dt
        self.frame_count += 1

        # Interval timers
        for handle in list(self._intervals):
            while not handle.cancelled and handle.due <= self.now:
                handle.due += handle.interval
                handle.callback()
        self._intervals = [h for h in self._intervals if not h.cancelled]

        # Frame requests queued before this advance
        pending, self._frame_requests = self._frame_requests, []
        for handle in pending:
            if not handle.cancelled:
                handle.callback()

    @property
    def active_intervals(self) -> List[TaskHandle]:
        return [h for h in self._intervals if not h.cancelled]

    @property
    def pending_frames(self) -> List[TaskHandle]:
        return [h for h in self._frame_requests if not h.cancelled]

    def cancel_all(self):
        for handle in self._intervals + self._frame_requests:
            handle.cancel()
        self._intervals.clear()
        self._frame_requests.clear()
