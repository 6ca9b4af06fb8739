"""Presenters — the external element a Wrapper drives.

A Wrapper never touches a widget toolkit directly. It talks to a Presenter:
something that can show text, a style string and a value, hold list/select
items, and report native events. ``Element`` is a headless, tag-based
Presenter (tags follow HTML names: "ul", "select", "input", ...). The
Textual backend lives in ``wrapbind.textual``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, NamedTuple, Optional, Protocol, runtime_checkable

from wrapbind.errors import ConfigurationError
from wrapbind.events import Disposer, EventChannels

# Tags whose element carries a value attribute.
VALUE_TAGS = frozenset({"input", "textarea", "select", "option", "button", "li", "meter", "progress", "param"})
LIST_TAGS = frozenset({"ul", "ol"})
SELECT_TAGS = frozenset({"select"})


class Item(NamedTuple):
    """One generated list entry or select option."""

    text: str
    value: Any = None
    id: Optional[str] = None


@runtime_checkable
class Presenter(Protocol):
    """What a Wrapper needs from the presentation layer."""

    data: dict[str, str]

    @property
    def has_value(self) -> bool: ...

    @property
    def value_event(self) -> str | None:
        """Name of the event fired when the user changes the value, if any."""
        ...

    def get_text(self) -> str: ...

    def set_text(self, text: str) -> None: ...

    def get_style(self) -> str: ...

    def set_style(self, css: str) -> None: ...

    def get_value(self) -> Any: ...

    def set_value(self, value: Any) -> None: ...

    def get_attr(self, attribute: str) -> str | None: ...

    def set_attr(self, attribute: str, value: str) -> None: ...

    def add_class(self, *names: str) -> None: ...

    def remove_class(self, name: str) -> None: ...

    def listen(self, event: str, callback: Callable[[Any], None]) -> Disposer: ...

    def dispose(self) -> None:
        """Release whatever the presenter registered with its toolkit."""
        ...

    def accepts_items(self, kind: str) -> bool:
        """Whether "list" or "select" items can be generated inside this element."""
        ...

    def clear_items(self) -> None: ...

    def add_items(self, items: list[Item]) -> None: ...


@dataclass
class KeyEvent:
    """Minimal keyboard event for Element.dispatch("keyup", ...)."""

    key: str


class Element:
    """In-memory Presenter keyed by tag name.

    Usage:
        el = Element("input", type="checkbox")
        el.listen("input", lambda e: print(el.get_value()))
        el.checked = True
        el.dispatch("input")
    """

    def __init__(self, tag: str, **attrs: str) -> None:
        self.tag = tag.lower()
        self.text = ""
        self.value: Any = ""
        self.checked = False
        self.attrs: dict[str, str] = dict(attrs)
        self.classes: list[str] = []
        self.data: dict[str, str] = {}
        self.children: list[Element] = []
        self.events = EventChannels()

    # --- facets ---

    @property
    def has_value(self) -> bool:
        return self.tag in VALUE_TAGS

    @property
    def is_checkbox(self) -> bool:
        return self.tag == "input" and self.attrs.get("type") == "checkbox"

    @property
    def value_event(self) -> str | None:
        if self.tag in ("input", "textarea"):
            return "input"
        if self.tag == "select":
            return "change"
        return None

    def get_text(self) -> str:
        return self.text

    def set_text(self, text: str) -> None:
        self.text = str(text)

    def get_style(self) -> str:
        return self.attrs.get("style", "")

    def set_style(self, css: str) -> None:
        self.attrs["style"] = css

    def get_value(self) -> Any:
        if self.is_checkbox:
            return self.checked
        return self.value

    def set_value(self, value: Any) -> None:
        if not self.has_value:
            raise ConfigurationError(f"<{self.tag}> does not support a value")
        if self.is_checkbox and isinstance(value, bool):
            self.checked = value
        else:
            self.value = value

    def get_attr(self, attribute: str) -> str | None:
        return self.attrs.get(attribute)

    def set_attr(self, attribute: str, value: str) -> None:
        self.attrs[attribute] = value

    def add_class(self, *names: str) -> None:
        for name in names:
            if name not in self.classes:
                self.classes.append(name)

    def remove_class(self, name: str) -> None:
        if name in self.classes:
            self.classes.remove(name)

    # --- events ---

    def listen(self, event: str, callback: Callable[[Any], None]) -> Disposer:
        if event == "submit":
            # Enter in a text field submits.
            return self.events.listen(
                "keyup", lambda e: callback(e) if getattr(e, "key", None) == "Enter" else None
            )
        return self.events.listen(event, callback)

    def dispatch(self, event: str, payload: Any = None) -> bool:
        """Fire a native event, as the host toolkit would."""
        return self.events.dispatch(event, payload)

    def dispose(self) -> None:
        pass  # nothing registered outside the element

    # --- items ---

    def accepts_items(self, kind: str) -> bool:
        if kind == "list":
            return self.tag in LIST_TAGS
        if kind == "select":
            return self.tag in SELECT_TAGS
        return False

    def clear_items(self) -> None:
        self.children.clear()

    def add_items(self, items: list[Item]) -> None:
        child_tag = "option" if self.tag in SELECT_TAGS else "li"
        for item in items:
            child = Element(child_tag)
            if item.id is not None:
                child.set_attr("id", item.id)
            child.set_text(item.text)
            if item.value is not None:
                child.set_value(item.value)
            self.children.append(child)

    def __repr__(self) -> str:
        return f"Element({self.tag!r}, text={self.text!r})"
