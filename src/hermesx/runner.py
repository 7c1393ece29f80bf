"""Run a script against the minimal host with the compatibility layer installed."""

import logging
from pathlib import Path
from typing import Any, Callable, Mapping, Optional, Sequence, TextIO

from .context import RuntimeContext
from .errors import HermesXError, ProcessExit, TimeLimitError
from .host import EventLoopHost

LOGGER = logging.getLogger("hermesx.runner")


class ScriptRunner:
    """Executes scripts and turns their outcome into a process exit code."""

    def __init__(
        self,
        time_limit: Optional[float] = None,
        env: Optional[Mapping[str, str]] = None,
        stdout: Optional[TextIO] = None,
        clock: Optional[Callable[[], float]] = None,
        sleep: Optional[Callable[[float], None]] = None,
    ):
        self.time_limit = time_limit
        self.env = env
        self.stdout = stdout
        self.clock = clock
        self.sleep = sleep

    def run_file(self, path: Any, args: Sequence[str] = ()) -> int:
        """Run a script file.

        Raises:
            HermesXError: If the file does not exist
        """
        script = Path(path)
        if not script.is_file():
            raise HermesXError(f"Script file not found: {path}", "FILE_NOT_FOUND")
        return self.run_source(script.read_text(encoding="utf-8"), str(script), args)

    def run_source(self, source: str, script_name: str = "script.py", args: Sequence[str] = ()) -> int:
        """Run script source and drain the event loop.

        Returns 0 when the loop empties, the requested code on
        process.exit(), and 1 on an uncaught error or a time limit.
        """
        host = EventLoopHost(
            stdout=self.stdout,
            clock=self.clock,
            sleep=self.sleep,
            time_limit=self.time_limit,
        )
        context = RuntimeContext(host, self.env)
        namespace = context.install({"__name__": "__main__", "__file__": script_name})
        context.process.inject(script_name, args)
        LOGGER.debug("running %s with argv %s", script_name, context.process.argv)

        try:
            code = compile(source, script_name, "exec")
            exec(code, namespace)
            host.run()
        except ProcessExit as exc:
            LOGGER.debug("%s requested exit with code %s", script_name, exc.exit_code)
            return _exit_code(exc.exit_code)
        except TimeLimitError as exc:
            context.console.error(exc.message)
            return 1
        except Exception as exc:
            LOGGER.debug("uncaught exception in %s", script_name, exc_info=True)
            context.console.error("Uncaught", exc)
            return 1

        LOGGER.debug("%s finished, %d timers left", script_name, host.pending)
        return 0


def _exit_code(code: Any) -> int:
    try:
        return int(code)
    except (TypeError, ValueError):
        return 1
