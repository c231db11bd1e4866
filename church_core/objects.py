# church_core/objects.py
"""
Objects as key -> value functions.

    EMPTY_OBJ       every key answers FALSE ("absent")
    SET(o)(k)(v)    new object: v when the requested key EQUALS k,
                    otherwise ask o; o itself is untouched
    GET(o)(k)       o(k)
    SEND(o)(k)      o(k)(o): the stored field receives the object as self

Keys are numerals. Fields read with SEND must be functions of self;
fields read with GET are plain values. Nothing in the encoding records
which is which.

Checked mode (config.CHECKED_OBJECTS_ENABLED) adds a debug-only guard:
fields wrapped with method(...) may only be SENT, everything else may
only be read with GET. Unchecked behaviour is identical for wrapped and
unwrapped fields.
"""

from __future__ import annotations

from typing import Any, Callable

from church_core import config
from church_core.core.booleans import FALSE, Fn
from church_core.core.combinators import IF
from church_core.core.numbers import EQUALS


class ObjectShapeError(TypeError):
    """A field was read with the wrong access pattern (checked mode only)."""


class Method:
    """Tag for a stored field that expects the enclosing object as self."""

    __slots__ = ("fn",)

    def __init__(self, fn: Callable[[Fn], Any]):
        self.fn = fn

    def __call__(self, obj: Fn) -> Any:
        return self.fn(obj)

    def __repr__(self) -> str:
        name = getattr(self.fn, "__name__", "<fn>")
        return f"Method({name})"


def method(fn: Callable[[Fn], Any]) -> Method:
    """Mark fn as a self-expecting field for use with SEND."""
    return fn if isinstance(fn, Method) else Method(fn)


EMPTY_OBJ: Fn = lambda k: FALSE

SET: Fn = lambda obj: lambda key: lambda value: lambda requested: (
    IF(EQUALS(requested)(key))
      (lambda: value)
      (lambda: obj(requested)))


def GET(obj: Fn) -> Fn:
    def get(key: Fn) -> Any:
        field = obj(key)
        if config.CHECKED_OBJECTS_ENABLED and isinstance(field, Method):
            raise ObjectShapeError(f"GET on a method field {field!r}; use SEND")
        return field
    return get


def SEND(obj: Fn) -> Fn:
    def send(key: Fn) -> Any:
        field = obj(key)
        if config.CHECKED_OBJECTS_ENABLED and not isinstance(field, Method):
            raise ObjectShapeError("SEND on a field not wrapped with method(); use GET")
        return field(obj)
    return send
