"""Wrapper — an element that is both Observable and Observer.

A Wrapper drives a Presenter (see wrapbind.element) and takes part in the
binding graph from both sides:

- As an Observable, its value is whatever the element presents. Setting text,
  style or value notifies dependents with change key "text", "style" or
  "value"; user edits reported by the element notify with "value".
- As an Observer, it binds to other Observables. Results are applied to the
  element's text by default, or to its style/value via bind_style_to and
  bind_value_to. Binding to another Wrapper tracks its "value" facet unless
  a change key is given.

All setters return the Wrapper, so calls chain:

    name = Observable("Ada")
    greeting = Wrapper("p").style("color: blue").bind_text_to(name)
"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Iterable, Optional, Sequence

from wrapbind.binding import TransferFunction
from wrapbind.element import Element, Item, Presenter
from wrapbind.errors import ConfigurationError
from wrapbind.events import Disposer
from wrapbind.observable import Observable
from wrapbind.observer import Observer
from wrapbind.path import traverse

logger = logging.getLogger("wrapbind.wrapper")


def _as_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value, default=str)


def _current_val(target: Observable, change_key: str | None) -> Any:
    """Value for the initial sync of a binding. A missing key warns instead of raising."""
    if not change_key or isinstance(target, Wrapper):
        return target.get_val(change_key)
    return traverse(target.get_val(), change_key)


def _check_lengths(texts: Sequence, other: Sequence, what: str) -> None:
    if len(texts) != len(other):
        raise ConfigurationError(f"text list and {what} list not the same length ({len(texts)} != {len(other)})")


class Wrapper(Observable, Observer):
    """Chainable handle on a presented element, bindable in both directions."""

    def __init__(
        self,
        element: Presenter | str,
        *,
        id: Optional[str] = None,
        name: Optional[str] = None,
        value: Any = None,
        text: Optional[str] = None,
        style: Optional[str] = None,
        classes: Optional[Iterable[str]] = None,
        input_type: Optional[str] = None,
        bind: Optional[Observable] = None,
    ) -> None:
        Observable.__init__(self)
        Observer.__init__(self)
        self.element: Presenter = Element(element) if isinstance(element, str) else element
        self._disposers: list[Disposer] = []

        if self.element.value_event is not None:
            self._disposers.append(
                self.element.listen(self.element.value_event, self._on_native_change)
            )

        if id is not None:
            self.element.set_attr("id", id)
        if name is not None:
            self.element.set_attr("name", name)
        if input_type is not None:
            self.element.set_attr("type", input_type)
        if value is not None:
            if not self.element.has_value:
                raise ConfigurationError(f"Attempted to set value on {self.element!r}, which doesn't support that")
            self.element.set_value(value)
        if text is not None:
            self.element.set_text(text)
        if classes is not None:
            self.element.add_class(*classes)
        if style is not None:
            self.element.set_style(style)
        if bind is not None:
            self.bind_to(bind, None, self._text_transfer)

    @classmethod
    def wrap(cls, element: Presenter, **initializers: Any) -> Wrapper:
        """Wrap an existing Presenter."""
        return cls(element, **initializers)

    def _on_native_change(self, event: Any = None) -> None:
        self.notify_subscribers(self.get_val(), "value")

    def detach(self) -> None:
        """Stop listening to the element's native events and release the element."""
        for dispose in self._disposers:
            dispose()
        self._disposers.clear()
        self.element.dispose()

    # --- facets (Observable side) ---

    def text(self, text: Any) -> Wrapper:
        """Set the presented text and notify dependents with key "text"."""
        self.element.set_text(_as_text(text))
        self.notify_subscribers(text, "text")
        return self

    set_text = text

    def get_text(self) -> str:
        return self.element.get_text()

    def style(self, css: str, append: bool = False) -> Wrapper:
        """Set (or append to) the style string and notify with key "style"."""
        style = ""
        if append:
            style = self.element.get_style().strip()
            if style and not style.endswith(";"):
                style += "; "
            elif style:
                style += " "
        self.element.set_style(style + css)
        self.notify_subscribers(self.get_style(), "style")
        return self

    def set_style(self, css: str) -> Wrapper:
        return self.style(css)

    def get_style(self) -> str:
        return self.element.get_style() or ""

    def get_val(self, change_key: str | None = None) -> Any:
        """The presented value (checked state for checkboxes). change_key is ignored."""
        return self.element.get_value()

    def set_val(self, new_val: Any, change_key: str | None = None) -> Wrapper:
        """Set the presented value and notify with key "value". Returns self."""
        self.element.set_value(new_val)
        self.notify_subscribers(new_val, "value")
        return self

    # --- attributes ---

    def attr(self, attribute: str, value: str) -> Wrapper:
        self.element.set_attr(attribute, value)
        return self

    set_attr = attr

    def get_attr(self, attribute: str) -> str | None:
        return self.element.get_attr(attribute)

    def name(self, name: str) -> Wrapper:
        return self.attr("name", name)

    def placehold(self, placeholder: str) -> Wrapper:
        return self.attr("placeholder", placeholder)

    def input_type(self, input_type: str) -> Wrapper:
        return self.attr("type", input_type)

    def add_class(self, classes: str | Iterable[str]) -> Wrapper:
        if isinstance(classes, str):
            classes = [classes]
        self.element.add_class(*classes)
        return self

    def remove_class(self, name: str) -> Wrapper:
        self.element.remove_class(name)
        return self

    def get_data(self, key: str) -> str | None:
        return self.element.data.get(key)

    def set_data(self, key: str, value: str) -> Wrapper:
        self.element.data[key] = value
        return self

    # --- events ---

    def on_event(self, event: str, fn: Callable[[Any], None]) -> Wrapper:
        self._disposers.append(self.element.listen(event, fn))
        return self

    def on_click(self, fn: Callable[[Any], None]) -> Wrapper:
        return self.on_event("click", fn)

    def on_input(self, fn: Callable[[Any], None]) -> Wrapper:
        return self.on_event("input", fn)

    def on_change(self, fn: Callable[[Any], None]) -> Wrapper:
        return self.on_event("change", fn)

    def on_enter_key(self, fn: Callable[[Any], None]) -> Wrapper:
        return self.on_event("submit", fn)

    # --- binding (Observer side) ---

    def _text_transfer(self, new_val: Any, change_key: str | None = None) -> None:
        self.text(new_val)

    def _style_transfer(self, new_val: Any, change_key: str | None = None) -> None:
        self.style(new_val)

    def _value_transfer(self, new_val: Any, change_key: str | None = None) -> None:
        self.set_val(new_val)

    def apply_result(self, result: Any) -> None:
        """Transfer results land in the presented text."""
        self.text(result)

    def bind_to(
        self,
        target: Observable,
        change_key: str | None = None,
        transfer: TransferFunction | None = None,
    ) -> Wrapper:
        """Bind this Wrapper's text to target. Returns self.

        Binding to another Wrapper defaults change_key to "value".
        """
        if transfer is None:
            transfer = self._text_transfer
        if not change_key and isinstance(target, Wrapper):
            change_key = "value"
        Observer.bind_to(self, target, change_key, transfer)
        return self

    def bind_text_to(
        self,
        target: Observable,
        change_key: str | None = None,
        transfer: TransferFunction | None = None,
    ) -> Wrapper:
        """Bind text to target, showing target's current value right away."""
        if isinstance(target, Wrapper) and change_key == "text":
            current = target.get_text()
        elif isinstance(target, Wrapper) and change_key == "style":
            current = target.get_style()
        else:
            current = _current_val(target, change_key)
        self.bind_to(target, change_key, transfer)
        return self.text(current)

    def bind_style_to(
        self,
        target: Observable,
        change_key: str | None = None,
        transfer: TransferFunction | None = None,
    ) -> Wrapper:
        if transfer is None:
            transfer = self._style_transfer
        return self.bind_to(target, change_key, transfer)

    def bind_value_to(
        self,
        target: Observable,
        change_key: str | None = None,
        transfer: TransferFunction | None = None,
    ) -> Wrapper:
        if transfer is None:
            transfer = self._value_transfer
        return self.bind_to(target, change_key, transfer)

    # --- generated items ---

    def _require_items(self, kind: str) -> None:
        if not self.element.accepts_items(kind):
            logger.error("Cannot generate %s items inside %r", kind, self.element)
            raise ConfigurationError(f"{kind.capitalize()} content must be generated inside a {kind} element")

    def list_content(self, texts: Sequence[Any], ids: Optional[Sequence[str]] = None) -> Wrapper:
        """Replace the element's list items with one per entry of texts."""
        self._require_items("list")
        if ids is not None:
            _check_lengths(texts, ids, "id")
        self.element.clear_items()
        self.element.add_items(
            [Item(_as_text(text), None, ids[i] if ids is not None else None) for i, text in enumerate(texts)]
        )
        return self

    def select_content(
        self,
        texts: Sequence[Any],
        values: Optional[Sequence[Any]] = None,
        ids: Optional[Sequence[str]] = None,
    ) -> Wrapper:
        """Append one option per entry of texts; values default to the texts."""
        self._require_items("select")
        if values is None:
            values = texts
        _check_lengths(texts, values, "value")
        if ids is not None:
            _check_lengths(texts, ids, "id")
        self.element.add_items(
            [
                Item(_as_text(text), values[i], ids[i] if ids is not None else None)
                for i, text in enumerate(texts)
            ]
        )
        return self

    def bind_list_to(self, target: Observable, change_key: str | None = None) -> Wrapper:
        """Regenerate list items from target's array value, now and on every change."""

        def _regenerate(new_val: Any, key: str | None = None) -> None:
            self.list_content(new_val)

        self._require_items("list")
        current = _current_val(target, change_key)
        self.bind_to(target, change_key, _regenerate)
        return self.list_content(current)

    def bind_select_to(self, target: Observable, change_key: str | None = None) -> Wrapper:
        """Regenerate select options from target's array value, now and on every change."""

        def _regenerate(new_val: Any, key: str | None = None) -> None:
            self.element.clear_items()
            self.select_content(new_val)

        self._require_items("select")
        current = _current_val(target, change_key)
        self.bind_to(target, change_key, _regenerate)
        self.element.clear_items()
        return self.select_content(current)

    def __repr__(self) -> str:
        return f"Wrapper({self.element!r})"
