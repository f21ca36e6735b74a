"""Run a callable when a block is left, unless dismissed."""

from __future__ import annotations

from typing import Any, Callable


class OnLeavingScope:
    """Context manager that calls ``func`` once when its block is left.

    The call happens whether the block ends normally or by an exception,
    and exceptions are never suppressed. ``dismiss`` cancels the call.
    """

    def __init__(self, func: Callable[[], Any]) -> None:
        self._func = func
        self._active = True

    def __enter__(self) -> "OnLeavingScope":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._active:
            self._active = False
            self._func()

    def dismiss(self) -> None:
        """Cancel the pending call."""
        self._active = False


def on_leaving_scope(func: Callable[[], Any]) -> OnLeavingScope:
    """Return a guard that calls ``func`` when its ``with`` block ends."""
    return OnLeavingScope(func)