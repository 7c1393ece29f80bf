"""Host value model: sentinels and default conversions."""

import dataclasses
import math
from typing import Any, Iterable, Optional, Union
from collections.abc import Mapping


class JSUndefined:
    """Host undefined value (singleton)."""

    _instance: Optional["JSUndefined"] = None

    def __new__(cls) -> "JSUndefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "undefined"

    def __str__(self) -> str:
        return "undefined"

    def __bool__(self) -> bool:
        return False


class JSNull:
    """Host null value (singleton)."""

    _instance: Optional["JSNull"] = None

    def __new__(cls) -> "JSNull":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "null"

    def __str__(self) -> str:
        return "null"

    def __bool__(self) -> bool:
        return False


# Singleton instances
UNDEFINED = JSUndefined()
NULL = JSNull()


def is_nan(value: Any) -> bool:
    """Check if value is NaN."""
    return isinstance(value, float) and math.isnan(value)


def is_infinity(value: Any) -> bool:
    """Check if value is positive or negative infinity."""
    return isinstance(value, float) and math.isinf(value)


def function_name(fn: Any) -> str:
    """Name of a callable, or "anonymous" for lambdas and nameless callables."""
    name = getattr(fn, "__name__", "")
    if not isinstance(name, str) or not name or name == "<lambda>":
        return "anonymous"
    return name


def to_string(value: Any) -> str:
    """Convert a value to a string the way the host's String() does."""
    if value is UNDEFINED or value is None:
        return "undefined"
    if value is NULL:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if is_nan(value):
            return "NaN"
        if value == float("inf"):
            return "Infinity"
        if value == float("-inf"):
            return "-Infinity"
        # Handle -0
        if value == 0 and math.copysign(1, value) < 0:
            return "0"
        s = repr(value)
        if s.endswith(".0"):
            return s[:-2]
        return s
    if isinstance(value, str):
        return value
    if isinstance(value, BaseException):
        message = str(value)
        name = type(value).__name__
        return f"{name}: {message}" if message else name
    if isinstance(value, (list, tuple)):
        return join(value)
    if callable(value):
        return f"function {function_name(value)}() {{ [native code] }}"
    return "[object Object]"


def join(values: Iterable[Any], separator: str = ",") -> str:
    """Array.prototype.join: nullish elements become empty strings."""
    return separator.join(
        "" if elem is None or elem is UNDEFINED or elem is NULL else to_string(elem)
        for elem in values
    )


def to_fixed(value: Union[int, float], digits: int = 0) -> str:
    """Number.prototype.toFixed."""
    if is_nan(value) or is_infinity(value):
        return to_string(value)
    if value == 0:
        value = 0  # -0 prints as 0
    return f"{value:.{digits}f}"


def to_json_value(value: Any, _stack: Optional[set] = None) -> Any:
    """Convert a value into something json.dumps accepts.

    Follows JSON.stringify: functions and undefined are dropped from
    objects and become null inside arrays, non-finite numbers become null.
    Raises ValueError on a reference cycle.
    """
    if value is UNDEFINED or value is None or value is NULL:
        return None
    if isinstance(value, (bool, str)):
        return value
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if is_nan(value) or is_infinity(value):
            return None
        if value.is_integer():
            return int(value)
        return value

    if _stack is None:
        _stack = set()
    if id(value) in _stack:
        raise ValueError("Converting circular structure to JSON")
    _stack.add(id(value))
    try:
        if isinstance(value, Mapping):
            result = {}
            for key, val in value.items():
                if _is_omitted(val):
                    continue
                result[to_string(key)] = to_json_value(val, _stack)
            return result
        if isinstance(value, (list, tuple)):
            return [
                None if _is_omitted(elem) else to_json_value(elem, _stack)
                for elem in value
            ]
        if dataclasses.is_dataclass(value) and not isinstance(value, type):
            return to_json_value(
                {f.name: getattr(value, f.name) for f in dataclasses.fields(value)},
                _stack,
            )
        if hasattr(value, "__dict__"):
            return to_json_value(
                {k: v for k, v in vars(value).items() if not k.startswith("_")},
                _stack,
            )
        # Objects without own enumerable properties (sets, bytes, Decimal)
        return {}
    finally:
        _stack.discard(id(value))


def _is_omitted(value: Any) -> bool:
    return value is UNDEFINED or callable(value)
