"""
hermesx - run scripts against a minimal single-threaded host

The host offers only a synchronous print, one-shot timers and a whole
millisecond clock. A compatibility layer installed before the script
runs adds console formatting, setInterval/clearInterval, performance
marks and measures, a benchmark helper and a process object.
"""

__version__ = "0.1.0"

from .context import RuntimeContext
from .errors import HermesXError, ProcessExit, TimeLimitError
from .host import EventLoopHost
from .runner import ScriptRunner
from .values import UNDEFINED, NULL

__all__ = [
    "EventLoopHost",
    "HermesXError",
    "ProcessExit",
    "RuntimeContext",
    "ScriptRunner",
    "TimeLimitError",
    "UNDEFINED",
    "NULL",
]
