"""Observers — hold a value derived from the Observables they are bound to."""

from __future__ import annotations

from typing import Any

from wrapbind.binding import Binding, TransferFunction
from wrapbind.errors import ConfigurationError
from wrapbind.observable import Observable


class Observer:
    """Watches Observables through Bindings and keeps the result in bound_val."""

    def __init__(self, bound_val: Any = None) -> None:
        self.bound_val = bound_val
        self.dependencies: list[Binding] = []

    def bind_to(
        self,
        target: Observable,
        change_key: str | None = None,
        transfer: TransferFunction | None = None,
    ):
        """Bind to target. Returns self for chaining.

        change_key limits the binding to set_val() calls made with exactly the
        same key. transfer(new_val, change_key) computes the update; without
        one, bound_val follows target's value (or the part at change_key).

        Binding twice creates two independent bindings; both fire. The new
        binding does not sync the current value, it waits for the next change.

        Usage:
            settings = Observable({"theme": "dark"})
            theme = Observer().bind_to(settings, "theme")
            settings.set_val("light", "theme")
            # theme.bound_val == "light"
        """
        if not isinstance(target, Observable):
            raise ConfigurationError(f"Cannot bind to {target!r}: not an Observable")
        if transfer is not None and not callable(transfer):
            raise ConfigurationError(f"Transfer function must be callable, got {transfer!r}")
        binding = Binding(self, target, change_key, transfer)
        target.dependents.append(binding)
        self.dependencies.append(binding)
        return self

    def get_bindings(self) -> list[Binding]:
        """The live list of bindings where this is the observer. Copy it before disposing in bulk."""
        return self.dependencies

    def break_binding(self, target: Observable, change_key: str | None = None):
        """Dispose every binding to target with exactly this change_key. Returns self."""
        for binding in list(self.dependencies):
            if binding.observable is target and binding.change_key == change_key:
                binding.dispose()
        return self

    def apply_result(self, result: Any) -> None:
        """Apply a transfer function's return value. Plain Observers store it."""
        self.bound_val = result

    def __repr__(self) -> str:
        return f"Observer({self.bound_val!r})"
