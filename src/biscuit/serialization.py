"""JSON conversion for typed cookie values.

Plain ``str`` values never pass through here; everything else the store
writes (ints, bools, lists, dicts, dataclasses) is serialized to JSON
first, and ``get_as`` reads it back into a requested shape.
"""

import json as json_module
from dataclasses import asdict, fields, is_dataclass
from typing import Any, TypeVar, get_origin

from biscuit.errors import CookieParseError, CookieSerializationError

T = TypeVar("T")


def _default(value: Any) -> Any:
    if is_dataclass(value) and not isinstance(value, type):
        return asdict(value)
    if isinstance(value, (set, frozenset, tuple)):
        return list(value)
    msg = f"Object of type {type(value).__name__} is not JSON serializable"
    raise TypeError(msg)


class JsonSerializer:
    """Serialize and deserialize cookie values as compact JSON."""

    __slots__ = ()

    def serialize(self, value: Any) -> str:
        try:
            return json_module.dumps(value, default=_default, separators=(",", ":"))
        except (TypeError, ValueError) as exc:
            raise CookieSerializationError(str(exc)) from exc

    def deserialize(self, text: str, shape: type[T] | None = None) -> T:
        """Parse *text* as JSON and coerce it into *shape*.

        Dataclass shapes are built from a JSON object by keyword.
        Other shapes are checked with ``isinstance``. ``None`` or
        ``Any`` returns whatever JSON produced.
        """
        try:
            data = json_module.loads(text)
        except (TypeError, ValueError) as exc:
            raise CookieParseError(str(exc)) from exc

        if shape is None or shape is Any:
            return data
        if is_dataclass(shape):
            return _build_dataclass(shape, data)
        if shape is float and isinstance(data, int) and not isinstance(data, bool):
            return float(data)  # type: ignore[return-value]
        origin = get_origin(shape) or shape
        if not isinstance(data, origin):
            msg = f"Expected {shape.__name__}, got {type(data).__name__}"
            raise CookieParseError(msg)
        return data


def _build_dataclass(shape: Any, data: Any) -> Any:
    if not isinstance(data, dict):
        msg = f"Expected a JSON object for {shape.__name__}, got {type(data).__name__}"
        raise CookieParseError(msg)
    known = {f.name for f in fields(shape) if f.init}
    try:
        return shape(**{k: v for k, v in data.items() if k in known})
    except TypeError as exc:
        raise CookieParseError(str(exc)) from exc
