"""Tests for Observable."""

from wrapbind import Observable, Observer


class TestObservable:
    def test_get_set(self):
        o = Observable(42)
        assert o.get_val() == 42
        o.set_val(100)
        assert o.get_val() == 100

    def test_default_value(self):
        assert Observable().get_val() is None

    def test_get_by_path(self):
        o = Observable({"outer": {"inner": "x"}})
        assert o.get_val("outer.inner") == "x"

    def test_set_by_path_mutates_in_place(self):
        data = {"a": 0}
        o = Observable(data)
        o.set_val(5, "a")
        assert o.get_val("a") == 5
        assert o.get_val() is data
        assert data == {"a": 5}

    def test_set_returns_whole_value(self):
        o = Observable({"a": {"b": 1}})
        assert o.set_val(2, "a.b") == {"a": {"b": 2}}
        assert o.set_val("plain") == "plain"

    def test_no_dedup(self):
        """Setting the same value still notifies."""
        o = Observable(1)
        calls = []
        Observer().bind_to(o, None, lambda nv, key=None: calls.append(nv))
        o.set_val(1)
        o.set_val(1)
        assert calls == [1, 1]

    def test_notify_in_registration_order(self):
        o = Observable(0)
        order = []
        Observer().bind_to(o, None, lambda nv, key=None: order.append("first"))
        Observer().bind_to(o, None, lambda nv, key=None: order.append("second"))
        Observer().bind_to(o, None, lambda nv, key=None: order.append("third"))
        o.set_val(1)
        assert order == ["first", "second", "third"]

    def test_notify_passes_new_value_and_key(self):
        o = Observable({"a": 0})
        seen = []
        Observer().bind_to(o, "a", lambda nv, key=None: seen.append((nv, key)))
        o.set_val(3, "a")
        assert seen == [(3, "a")]

    def test_notify_subscribers_alias(self):
        o = Observable(0)
        obs = Observer().bind_to(o)
        o.notify_subscribers(7)
        # default transfer reads the stored value, not the notified one
        assert obs.bound_val == 0

    def test_repr(self):
        assert "Observable(5)" in repr(Observable(5))
