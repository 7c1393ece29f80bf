"""setInterval/clearInterval built from one-shot host timers.

The minimal host can only run a callback once after a delay. A repeating
timer is an IntervalHandle that schedules its next one-shot firing only
after the current callback has returned and only while it is still
active, so firings of one handle never overlap and a clearInterval()
from inside the callback stops the next one.
"""

import enum
from typing import Any, Callable, Dict, Optional, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from .console import Console


class IntervalState(enum.Enum):
    ACTIVE = "active"
    CANCELLED = "cancelled"


class IntervalHandle:
    """A registered repeating timer."""

    def __init__(self, handle_id: int, callback: Callable[..., Any], delay: float, args: Tuple[Any, ...]):
        self.id = handle_id
        self.callback = callback
        self.delay = delay
        self.args = args
        self.state = IntervalState.ACTIVE
        # Host token of the one-shot firing currently waiting, if any
        self.pending: Optional[int] = None

    @property
    def active(self) -> bool:
        return self.state is IntervalState.ACTIVE

    def cancel(self) -> None:
        self.state = IntervalState.CANCELLED

    def __repr__(self) -> str:
        return f"IntervalHandle(id={self.id}, delay={self.delay}, state={self.state.value})"


class IntervalScheduler:
    """Owns the interval registry for one runtime context."""

    def __init__(
        self,
        set_timeout: Callable[..., int],
        clear_timeout: Callable[[int], None],
        console: "Console",
    ):
        self._set_timeout = set_timeout
        self._clear_timeout = clear_timeout
        self._console = console
        self._intervals: Dict[int, IntervalHandle] = {}
        self._next_id = 1

    def set_interval(self, callback: Callable[..., Any], delay: float = 0, *args: Any) -> int:
        handle = IntervalHandle(self._next_id, callback, delay, args)
        self._next_id += 1
        self._intervals[handle.id] = handle
        self._schedule(handle)
        return handle.id

    def clear_interval(self, handle_id: Any = None) -> None:
        if isinstance(handle_id, bool) or not isinstance(handle_id, (int, float)):
            return
        handle = self._intervals.pop(handle_id, None)
        if handle is None:
            return
        handle.cancel()
        if handle.pending is not None:
            self._clear_timeout(handle.pending)
            handle.pending = None

    setInterval = set_interval
    clearInterval = clear_interval

    def __contains__(self, handle_id: int) -> bool:
        return handle_id in self._intervals

    def __len__(self) -> int:
        return len(self._intervals)

    def _schedule(self, handle: IntervalHandle) -> None:
        handle.pending = self._set_timeout(self._fire, handle.delay, handle)

    def _fire(self, handle: IntervalHandle) -> None:
        handle.pending = None
        if not handle.active:
            return
        try:
            handle.callback(*handle.args)
        except Exception as exc:
            self._console.error("Error in setInterval callback:", exc)
        if handle.active:
            self._schedule(handle)

