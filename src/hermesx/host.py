"""The minimal host.

Offers exactly what a small embedded engine gives a script: a
synchronous ``print``, one-shot ``setTimeout``/``clearTimeout``, a whole
millisecond ``Date.now()`` and a single-threaded event loop that runs
due timers one at a time. There is no repeating timer, no console object
and no process object; those come from the compatibility layer.
"""

import heapq
import logging
import sys
import time
from typing import Any, Callable, Dict, List, Optional, TextIO, Tuple

from .errors import TimeLimitError

LOGGER = logging.getLogger("hermesx.host")


def wall_clock_ms() -> float:
    return time.time() * 1000


class HostDate:
    """The host's ``Date`` global. Only ``Date.now()`` is supported."""

    def __init__(self, clock: Callable[[], int]):
        self._clock = clock

    def now(self) -> int:
        return self._clock()


class EventLoopHost:
    """Single-threaded host with one-shot timers."""

    def __init__(
        self,
        stdout: Optional[TextIO] = None,
        clock: Optional[Callable[[], float]] = None,
        sleep: Optional[Callable[[float], None]] = None,
        time_limit: Optional[float] = None,
    ):
        """Create a host.

        Args:
            stdout: Stream the print primitive writes to (default sys.stdout)
            clock: Wall clock in milliseconds (default time.time() * 1000)
            sleep: Blocking wait in seconds (default time.sleep)
            time_limit: Maximum run() duration in seconds
        """
        self._stdout = stdout
        self._clock = clock or wall_clock_ms
        self._sleep = sleep or time.sleep
        self.time_limit = time_limit
        # (due, id) min-heap; ids break ties in registration order
        self._queue: List[Tuple[int, int]] = []
        self._timers: Dict[int, Tuple[Callable[..., Any], Tuple[Any, ...]]] = {}
        self._next_id = 1

    def print(self, *args: Any) -> None:
        """The host's only output primitive."""
        stream = self._stdout if self._stdout is not None else sys.stdout
        stream.write(" ".join(str(a) for a in args) + "\n")
        stream.flush()

    def now(self) -> int:
        """Whole milliseconds; fractions are truncated."""
        return int(self._clock())

    def set_timeout(self, callback: Callable[..., Any], delay: Any = 0, *args: Any) -> int:
        """Run callback(*args) once, no sooner than delay milliseconds from now."""
        try:
            delay = max(0, int(delay or 0))
        except (TypeError, ValueError, OverflowError):
            delay = 0
        timer_id = self._next_id
        self._next_id += 1
        self._timers[timer_id] = (callback, args)
        heapq.heappush(self._queue, (self.now() + delay, timer_id))
        return timer_id

    def clear_timeout(self, timer_id: Any = None) -> None:
        if isinstance(timer_id, int) and not isinstance(timer_id, bool):
            self._timers.pop(timer_id, None)

    setTimeout = set_timeout
    clearTimeout = clear_timeout

    @property
    def pending(self) -> int:
        """Number of timers still waiting to fire."""
        return len(self._timers)

    def run(self) -> None:
        """Run timers in due order until none are left.

        Exceptions raised by a callback propagate to the caller.
        """
        deadline = None
        if self.time_limit is not None:
            deadline = self.now() + self.time_limit * 1000
        while self._queue:
            due, timer_id = heapq.heappop(self._queue)
            entry = self._timers.pop(timer_id, None)
            if entry is None:
                continue  # cleared

            if deadline is not None and max(due, self.now()) > deadline:
                # Never wait past the deadline for a timer that can't run
                remaining = deadline - self.now()
                if remaining > 0:
                    self._sleep(remaining / 1000)
                raise TimeLimitError(f"Event loop exceeded {self.time_limit}s time limit")

            wait = due - self.now()
            if wait > 0:
                self._sleep(wait / 1000)

            callback, args = entry
            LOGGER.debug("firing timer %d", timer_id)
            callback(*args)

    def globals(self) -> Dict[str, Any]:
        """Host primitives as they appear in a script's namespace."""
        return {
            "print": self.print,
            "setTimeout": self.set_timeout,
            "clearTimeout": self.clear_timeout,
            "Date": HostDate(self.now),
        }
