"""Exceptions for wrapbind."""


class WrapbindError(Exception):
    """Base exception for all wrapbind errors."""

    pass


class ConfigurationError(WrapbindError, ValueError):
    """A binding or element was set up in a way that can never work.

    Raised at the call site. These are programmer errors, not data issues.
    """

    pass


class TraversalWarning(UserWarning):
    """A bound path segment was missing while resolving a default transfer.

    Never raised; attached to the log record so handlers can filter on it.
    """

    def __init__(self, path: str, segment: str):
        self.path = path
        self.segment = segment
        super().__init__(f"Attempting to traverse bound path {path!r} failed at {segment!r}")
