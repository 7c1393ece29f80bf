"""Error types raised by the host, the shim and the runner."""


class HermesXError(Exception):
    """Base class for all hermesx errors."""

    def __init__(self, message: str = "", code: str = "HERMESX_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class TimeLimitError(HermesXError):
    """Raised when the event loop runs past its time limit."""

    def __init__(self, message: str = "Execution timeout"):
        super().__init__(message, "TIME_LIMIT_EXCEEDED")


class ProcessExit(SystemExit):
    """Raised by ``process.exit()``.

    The minimal host has no way to stop itself, so an exit request unwinds
    the stack like any other exception and the runner turns it into the
    real exit code. Deriving from SystemExit keeps it out of
    ``except Exception`` handlers.
    """

    def __init__(self, code: int = 0):
        self.exit_code = code
        super().__init__(code)

    def __str__(self) -> str:
        return f"Process exit: {self.exit_code}"
