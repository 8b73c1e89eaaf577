"""Callbacks bound to an owner object."""

from __future__ import annotations

from typing import Any, Callable


class Callback:
    """Calls ``method(owner, *args)`` when invoked."""

    __slots__ = ("owner", "method")

    def __init__(self, owner: Any, method: Callable[..., Any]) -> None:
        if not callable(method):
            raise TypeError("method must be callable")
        self.owner = owner
        self.method = method

    def invoke(self, *args: Any) -> Any:
        """Call the method on the owner with ``args``."""
        return self.method(self.owner, *args)

    def __call__(self, *args: Any) -> Any:
        return self.invoke(*args)

    def __repr__(self) -> str:
        name = getattr(self.method, "__qualname__", repr(self.method))
        return f"Callback({self.owner!r}, {name})"