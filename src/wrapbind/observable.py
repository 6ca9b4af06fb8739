"""Observable values — state that notifies the bindings depending on it.

An Observable keeps an ordered list of Bindings (its dependents). Every
set_val() walks that list in registration order and hands the change to each
Binding, which decides for itself whether the change key concerns it.

Propagation is a plain synchronous call chain. A transfer function that sets
another Observable continues the chain depth-first before the next dependent
is notified. Cycles are not detected: a graph where A updates B and B updates A
recurses until a transfer function stops setting values or Python raises
RecursionError.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from wrapbind.path import get_path, set_path

if TYPE_CHECKING:
    from wrapbind.binding import Binding


class Observable:
    """A value that Observers can bind to."""

    def __init__(self, value: Any = None) -> None:
        self._value = value
        self.dependents: list[Binding] = []

    def get_val(self, change_key: str | None = None) -> Any:
        """Read the value, or the nested part of it at change_key ("outer.inner")."""
        return get_path(self._value, change_key)

    def set_val(self, new_val: Any, change_key: str | None = None) -> Any:
        """Write a value and notify dependents.

        With a change_key the existing container is mutated in place at that
        path; without one the whole value is replaced. Returns the whole
        value after the change, not new_val.
        """
        if change_key:
            set_path(self._value, change_key, new_val)
        else:
            self._value = new_val
        self.notify(new_val, change_key)
        return self._value

    def notify(self, new_val: Any, change_key: str | None = None) -> None:
        """Hand a change to every dependent binding, in registration order."""
        for binding in list(self.dependents):
            if binding.observable is self:
                binding.handle_change(new_val, change_key)

    notify_subscribers = notify

    def __repr__(self) -> str:
        return f"Observable({self._value!r})"
