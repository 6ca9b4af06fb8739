"""Textual integration for wrapbind. Opt-in — requires textual.

TextualElement adapts a Textual widget to the Presenter protocol so a Wrapper
can drive it. Capabilities are picked from what the widget offers:

- text: ``update()`` (Static, Label) or ``label`` (Button)
- style: ``set_styles()`` with an inline CSS string
- value: ``value`` (Input, Checkbox, Switch, Select)
- items: ``set_options()`` (Select), ``add_options()`` (OptionList),
  ``append()`` (ListView)

Textual delivers native events as messages to the app, not as callbacks on
the widget, so the app forwards them with relay():

    class Form(App):
        def on_input_changed(self, event):
            relay(event)

A TextualElement stays registered for relay() until its dispose() runs, which
Wrapper.detach() does.

Widget writes made from a background thread are marshaled with
``app.call_from_thread`` when the element was given its app.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable

from textual.css.query import NoMatches
from textual.widgets import Label, ListItem
from textual.widgets.option_list import Option

from wrapbind.element import Item
from wrapbind.errors import ConfigurationError
from wrapbind.events import Disposer, EventChannels

logger = logging.getLogger("wrapbind.textual")

# Message class name -> element event names it fires.
MESSAGE_EVENTS: dict[str, tuple[str, ...]] = {
    "Changed": ("change", "input"),
    "Pressed": ("click",),
    "Submitted": ("submit",),
}

# Module-owned registry, keyed by id(widget) so relay() can find the element.
# Entries live until TextualElement.dispose() (or Wrapper.detach()) removes them.
_elements: dict[int, TextualElement] = {}


class TextualElement:
    """Presenter over a single Textual widget."""

    def __init__(self, widget, app=None) -> None:
        self.widget = widget
        self.app = app
        self.data: dict[str, str] = {}
        self.events = EventChannels()
        self._main = threading.get_ident()
        self._text = ""
        self._style = ""
        self._options: list[tuple[str, Any]] = []
        _elements[id(widget)] = self

    @classmethod
    def query(cls, app, selector: str) -> TextualElement:
        """Wrap the single widget matching selector in app."""
        try:
            widget = app.query_one(selector)
        except NoMatches as exc:
            raise ConfigurationError(f"No widget matches {selector!r}") from exc
        return cls(widget, app)

    def _call(self, fn: Callable[..., Any], *args: Any) -> None:
        if self.app is not None and threading.get_ident() != self._main:
            self.app.call_from_thread(fn, *args)
        else:
            fn(*args)

    # --- facets ---

    @property
    def has_value(self) -> bool:
        return hasattr(self.widget, "value")

    @property
    def value_event(self) -> str | None:
        return "change" if self.has_value else None

    def get_text(self) -> str:
        return self._text

    def set_text(self, text: str) -> None:
        text = str(text)
        if hasattr(self.widget, "update"):
            self._call(self.widget.update, text)
        elif hasattr(self.widget, "label"):
            self._call(setattr, self.widget, "label", text)
        else:
            raise ConfigurationError(f"{type(self.widget).__name__} cannot display text")
        self._text = text

    def get_style(self) -> str:
        return self._style

    def set_style(self, css: str) -> None:
        self._call(self.widget.set_styles, css)
        self._style = css

    def get_value(self) -> Any:
        return getattr(self.widget, "value", None)

    def set_value(self, value: Any) -> None:
        if not self.has_value:
            raise ConfigurationError(f"{type(self.widget).__name__} does not support a value")
        self._call(setattr, self.widget, "value", value)

    def get_attr(self, attribute: str) -> str | None:
        value = getattr(self.widget, attribute, None)
        return None if value is None else str(value)

    def set_attr(self, attribute: str, value: str) -> None:
        try:
            setattr(self.widget, attribute, value)
        except AttributeError as exc:
            raise ConfigurationError(
                f"{type(self.widget).__name__} has no settable attribute {attribute!r}"
            ) from exc

    def add_class(self, *names: str) -> None:
        self._call(self.widget.add_class, *names)

    def remove_class(self, name: str) -> None:
        self._call(self.widget.remove_class, name)

    # --- events ---

    def listen(self, event: str, callback: Callable[[Any], None]) -> Disposer:
        return self.events.listen(event, callback)

    def dispose(self) -> None:
        """Unregister from relay(). Idempotent."""
        if _elements.get(id(self.widget)) is self:
            del _elements[id(self.widget)]

    # --- items ---

    def accepts_items(self, kind: str) -> bool:
        if kind == "select":
            return hasattr(self.widget, "set_options")
        if kind == "list":
            return hasattr(self.widget, "add_options") or (
                hasattr(self.widget, "append") and hasattr(self.widget, "clear")
            )
        return False

    def clear_items(self) -> None:
        if hasattr(self.widget, "set_options"):
            self._options = []
            self._call(self.widget.set_options, [])
        elif hasattr(self.widget, "clear_options"):
            self._call(self.widget.clear_options)
        else:
            self._call(self.widget.clear)

    def add_items(self, items: list[Item]) -> None:
        if hasattr(self.widget, "set_options"):
            # Select takes the whole option list at once.
            self._options.extend((i.text, i.value) for i in items)
            self._call(self.widget.set_options, list(self._options))
        elif hasattr(self.widget, "add_options"):
            self._call(self.widget.add_options, [Option(i.text, id=i.id) for i in items])
        else:
            for i in items:
                self._call(self.widget.append, ListItem(Label(i.text), id=i.id))

    def __repr__(self) -> str:
        return f"TextualElement({type(self.widget).__name__})"


def relay(message) -> bool:
    """Forward a Textual message to the TextualElement wrapping its control.

    Returns True if the message reached at least one listener.
    """
    control = getattr(message, "control", None)
    element = _elements.get(id(control)) if control is not None else None
    if element is None:
        return False
    handled = False
    for event in MESSAGE_EVENTS.get(type(message).__name__, ()):
        handled = element.events.dispatch(event, message) or handled
    if not handled:
        logger.debug("No listener for %s on %r", type(message).__name__, element)
    return handled
