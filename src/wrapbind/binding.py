"""Bindings — the directed edge between an Observer and an Observable.

A Binding is registered on both ends: in the Observable's ``dependents`` and
in the Observer's ``dependencies``. dispose() removes it from both.

Transfer functions have two modes:
- return a value: the Binding applies it to the Observer
  (``Observer.apply_result``; a Wrapper shows it as text).
- return None: the transfer function already did whatever it needed.
Only None means "handled". 0, "" and False are values and get applied.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Optional

from wrapbind.path import traverse

if TYPE_CHECKING:
    from wrapbind.observable import Observable
    from wrapbind.observer import Observer

TransferFunction = Callable[[Any, Optional[str]], Any]


class Binding:
    """Connects observer.bound_val (or a Wrapper facet) to observable's value."""

    __slots__ = ("observer", "observable", "change_key", "transfer")

    def __init__(
        self,
        observer: Observer,
        observable: Observable,
        change_key: str | None = None,
        transfer: TransferFunction | None = None,
    ) -> None:
        self.observer = observer
        self.observable = observable
        self.change_key = change_key
        self.transfer = transfer if transfer is not None else self._default_transfer

    def _default_transfer(self, new_val: Any, change_key: str | None = None) -> None:
        if self.change_key:
            self.observer.bound_val = traverse(self.observable.get_val(), self.change_key)
        else:
            self.observer.bound_val = self.observable.get_val()

    @property
    def is_active(self) -> bool:
        return self in self.observable.dependents and self in self.observer.dependencies

    def handle_change(self, new_val: Any, change_key: str | None = None) -> None:
        """Run the transfer function if change_key matches this binding's key exactly.

        Normally only called from Observable.notify().
        """
        if change_key != self.change_key:
            return
        result = self.transfer(new_val, change_key)
        if result is not None:
            self.observer.apply_result(result)

    def dispose(self) -> None:
        """Break the binding, removing it from both ends. Safe to call twice."""
        self.observer.dependencies[:] = [b for b in self.observer.dependencies if b is not self]
        self.observable.dependents[:] = [b for b in self.observable.dependents if b is not self]

    def __repr__(self) -> str:
        state = "active" if self.is_active else "disposed"
        return f"Binding({self.observer!r} -> {self.observable!r}, key={self.change_key!r}, {state})"
