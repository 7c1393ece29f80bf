"""Runtime compatibility context."""

import builtins
from typing import Any, Callable, Dict, Mapping, Optional

from .console import Console
from .errors import HermesXError
from .host import EventLoopHost
from .performance import BenchmarkResult, Performance, benchmark
from .process import ProcessDescriptor
from .timers import IntervalScheduler

# Builtins that would reach a filesystem, module system, terminal or
# debugger the minimal host does not have
HIDDEN_BUILTINS = frozenset(
    {
        "open",
        "__import__",
        "input",
        "exit",
        "quit",
        "breakpoint",
        "help",
        "print",
    }
)


def script_builtins() -> Dict[str, Any]:
    """Python builtins available to scripts, minus HIDDEN_BUILTINS."""
    return {
        name: value
        for name, value in vars(builtins).items()
        if name not in HIDDEN_BUILTINS
    }


class RuntimeContext:
    """Owns the compatibility layer's state for one script run.

    Builds the console, interval scheduler, performance object and process
    descriptor over a single host and installs them, together with the
    host's own primitives, into one namespace.
    """

    def __init__(self, host: EventLoopHost, env: Optional[Mapping[str, str]] = None):
        """Create a context.

        Args:
            host: Host providing print, setTimeout/clearTimeout and the clock
            env: Environment exposed as process.env (default os.environ)
        """
        self.host = host
        self.console = Console(host.print, host.now)
        self.scheduler = IntervalScheduler(host.set_timeout, host.clear_timeout, self.console)
        self.performance = Performance(host.now, self.console)
        self.process = ProcessDescriptor(env)
        self._installed = False

    @property
    def installed(self) -> bool:
        return self._installed

    def benchmark(self, name: str, fn: Callable[[], Any], iterations: int = 1) -> BenchmarkResult:
        return benchmark(name, fn, iterations, clock=self.host.now, console=self.console)

    def install(self, namespace: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Install host primitives and the compatibility globals.

        Returns the namespace, creating a new dict if none was given.
        """
        if self._installed:
            raise HermesXError("Runtime context is already installed", "ALREADY_INSTALLED")
        if namespace is None:
            namespace = {}

        namespace["__builtins__"] = script_builtins()
        namespace.update(self.host.globals())
        namespace.update(
            {
                "console": self.console,
                "setInterval": self.scheduler.set_interval,
                "clearInterval": self.scheduler.clear_interval,
                "performance": self.performance,
                "benchmark": self.benchmark,
                "process": self.process,
            }
        )
        self._installed = True
        return namespace
