"""Performance instrumentation on top of the coarse host clock.

The minimal host only exposes ``Date.now()``, a wall clock with whole
millisecond resolution. Everything here is built on that reading:
console elapsed-time labels, ``performance.now()``, marks and measures,
and the ``benchmark()`` helper. Sub-millisecond precision is not
available and is never fabricated; a caller of ``performance.now()``
expecting fractional milliseconds gets whole ones.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Union, TYPE_CHECKING

from .values import join, to_fixed, to_string

if TYPE_CHECKING:
    from .console import Console


Clock = Callable[[], int]


class ElapsedTimers:
    """Label -> start instant map behind console.time/timeEnd/timeLog."""

    def __init__(self, clock: Clock, write: Callable[[str], None]):
        self._clock = clock
        self._write = write
        self._starts: Dict[str, int] = {}

    def start(self, label: str = "default") -> None:
        # Restarting an active label overwrites it silently
        self._starts[label or "default"] = self._clock()

    def end(self, label: str = "default") -> Optional[int]:
        key = label or "default"
        duration = self._elapsed(key)
        if duration is not None:
            self._write(f"{key}: {duration}ms")
            del self._starts[key]
        return duration

    def log(self, label: str = "default", *data: Any) -> Optional[int]:
        key = label or "default"
        duration = self._elapsed(key)
        if duration is not None:
            message = " " + join(data, " ") if data else ""
            self._write(f"{key}: {duration}ms{message}")
        return duration

    def __contains__(self, label: str) -> bool:
        return label in self._starts

    def _elapsed(self, key: str) -> Optional[int]:
        start = self._starts.get(key)
        if start is None:
            self._write(f"Timer '{key}' does not exist")
            return None
        return self._clock() - start


@dataclass
class PerformanceMeasure:
    """Result of ``performance.measure()``."""

    name: str
    duration: int
    startTime: int
    entryType: str = "measure"
    detail: Any = None


class Performance:
    """The ``performance`` global."""

    def __init__(self, clock: Clock, console: "Console"):
        self._clock = clock
        self._console = console
        self._marks: Dict[str, int] = {}

    def now(self) -> int:
        """Current clock reading in whole milliseconds.

        A richer host returns fractional milliseconds here; this one cannot.
        """
        return self._clock()

    def mark(self, name: str) -> None:
        self._marks[name] = self._clock()

    def measure(self, name: str, start_mark: str, end_mark: str) -> Optional[PerformanceMeasure]:
        """Log and return the time between two marks.

        Returns None, after reporting on the error console, if either mark
        was never recorded.
        """
        start = self._marks.get(start_mark)
        end = self._marks.get(end_mark)
        if start is None or end is None:
            self._console.error(f"Performance marks '{start_mark}' or '{end_mark}' not found")
            return None
        duration = end - start
        self._console.log(f"{name}: {duration}ms")
        return PerformanceMeasure(name=name, duration=duration, startTime=start)

    # No entry buffer is kept; these exist so callers using the API work
    def get_entries(self) -> List[PerformanceMeasure]:
        return []

    def get_entries_by_type(self, type: str) -> List[PerformanceMeasure]:
        return []

    def get_entries_by_name(self, name: str) -> List[PerformanceMeasure]:
        return []

    getEntries = get_entries
    getEntriesByType = get_entries_by_type
    getEntriesByName = get_entries_by_name


@dataclass
class BenchmarkResult:
    """Report returned by ``benchmark()``."""

    name: str
    iterations: Union[int, float]
    total: int
    average: float
    min: Union[int, float]
    max: Union[int, float]
    results: List[int] = field(default_factory=list)


def benchmark(
    name: str,
    fn: Callable[[], Any],
    iterations: Union[int, float] = 1,
    *,
    clock: Clock,
    console: "Console",
) -> BenchmarkResult:
    """Run fn() iterations times in a row and report per-run timings."""
    results: List[int] = []
    # Same run count as `for (i = 0; i < iterations; i++)`
    runs = math.ceil(iterations) if iterations > 0 else 0
    for _ in range(runs):
        start = clock()
        fn()
        end = clock()
        results.append(end - start)

    total = sum(results)
    average = total / iterations if iterations != 0 else float("nan")
    fastest = min(results) if results else float("inf")
    slowest = max(results) if results else float("-inf")

    console.log(f"Benchmark: {name}")
    console.log(f"  Iterations: {to_string(iterations)}")
    console.log(f"  Total: {total}ms")
    console.log(f"  Average: {to_fixed(average, 2)}ms")
    console.log(f"  Min: {to_string(fastest)}ms")
    console.log(f"  Max: {to_string(slowest)}ms")

    return BenchmarkResult(
        name=name,
        iterations=iterations,
        total=total,
        average=average,
        min=fastest,
        max=slowest,
        results=results,
    )
