"""Console object for the minimal host.

Every entry point funnels through format_args() and the host's single
synchronous print primitive.
"""

import json
from typing import Any, Callable

from .performance import ElapsedTimers
from .values import UNDEFINED, NULL, function_name, to_json_value, to_string


def format_value(value: Any) -> str:
    """Format a single console argument."""
    if value is NULL:
        return "null"
    if value is UNDEFINED or value is None:
        return "undefined"
    if isinstance(value, str):
        return value
    if isinstance(value, (bool, int, float)):
        return to_string(value)
    if isinstance(value, BaseException):
        return to_string(value)
    if callable(value):
        return f"[Function: {function_name(value)}]"
    try:
        return json.dumps(to_json_value(value), indent=2, ensure_ascii=False)
    except (TypeError, ValueError, RecursionError):
        return "[object Object]"


def format_args(*args: Any) -> str:
    """Format console arguments into one line, separated by single spaces."""
    return " ".join(format_value(arg) for arg in args)


class Console:
    """The ``console`` global."""

    def __init__(self, write: Callable[[str], None], clock: Callable[[], int]):
        """Create a console.

        Args:
            write: The host's synchronous print primitive
            clock: Coarse clock used by time/timeEnd/timeLog
        """
        self._write = write
        self._labels = ElapsedTimers(clock, write)

    def log(self, *args: Any) -> None:
        self._write(format_args(*args))

    def error(self, *args: Any) -> None:
        self._write("ERROR: " + format_args(*args))

    def warn(self, *args: Any) -> None:
        self._write("WARN: " + format_args(*args))

    # The minimal host has no log levels
    info = log
    debug = log

    def time(self, label: str = "default") -> None:
        self._labels.start(label)

    def time_end(self, label: str = "default") -> None:
        self._labels.end(label)

    def time_log(self, label: str = "default", *data: Any) -> None:
        self._labels.log(label, *data)

    timeEnd = time_end
    timeLog = time_log
