"""The ``process`` global: argv, env and exit."""

import os
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Tuple

from .errors import HermesXError, ProcessExit

ENGINE_NAME = "hermes"


class ProcessDescriptor:
    """Static process record, filled in once by the runner before user code runs."""

    def __init__(self, env: Optional[Mapping[str, str]] = None):
        if env is None:
            env = os.environ
        self._env = MappingProxyType({str(k): str(v) for k, v in env.items()})
        self._argv: Tuple[str, ...] = (ENGINE_NAME, "script.js")
        self._injected = False

    @property
    def argv(self) -> Tuple[str, ...]:
        return self._argv

    @property
    def env(self) -> Mapping[str, str]:
        return self._env

    @property
    def injected(self) -> bool:
        return self._injected

    def inject(self, script_path: str, args: Iterable[str] = ()) -> None:
        """Set argv to the engine sentinel, the script base name and args."""
        if self._injected:
            raise HermesXError("Process arguments were already injected", "ALREADY_INJECTED")
        self._argv = (ENGINE_NAME, os.path.basename(script_path), *(str(a) for a in args))
        self._injected = True

    def exit(self, code: Optional[int] = 0) -> None:
        """Request termination. Always raises ProcessExit."""
        raise ProcessExit(code or 0)
