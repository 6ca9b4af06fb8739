"""wrapbind: chainable UI element wrappers with two-way data binding."""

from importlib.metadata import version as _version

__version__ = _version("wrapbind")

from wrapbind.errors import WrapbindError, ConfigurationError, TraversalWarning
from wrapbind.path import get_path, set_path, traverse
from wrapbind.observable import Observable
from wrapbind.binding import Binding
from wrapbind.observer import Observer
from wrapbind.events import EventChannel
from wrapbind.element import Element, Item, Presenter
from wrapbind.wrapper import Wrapper
# textual backend NOT auto-imported — opt-in only

__all__ = [
    "Observable",
    "Observer",
    "Binding",
    "Wrapper",
    "Element",
    "Item",
    "Presenter",
    "EventChannel",
    "get_path",
    "set_path",
    "traverse",
    "WrapbindError",
    "ConfigurationError",
    "TraversalWarning",
]
