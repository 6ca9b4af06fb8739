"""Tests for EventChannel and EventChannels."""

from wrapbind import EventChannel
from wrapbind.events import EventChannels


class TestEventChannel:
    def test_subscribe_receives_emitted_values(self):
        channel = EventChannel("click")
        received = []
        channel.subscribe(lambda e: received.append(e))
        channel.emit(1)
        channel.emit(2)
        assert received == [1, 2]

    def test_multiple_subscribers_in_order(self):
        channel = EventChannel("click")
        order = []
        channel.subscribe(lambda e: order.append("a"))
        channel.subscribe(lambda e: order.append("b"))
        channel.emit()
        assert order == ["a", "b"]

    def test_unsubscribe(self):
        channel = EventChannel("click")
        received = []
        unsub = channel.subscribe(lambda e: received.append(e))
        channel.emit(1)
        unsub()
        channel.emit(2)
        assert received == [1]
        assert len(channel) == 0

    def test_unsubscribe_idempotent(self):
        channel = EventChannel("click")
        unsub = channel.subscribe(lambda e: None)
        unsub()
        unsub()  # should not raise

    def test_unsubscribe_during_emit(self):
        channel = EventChannel("click")
        received = []
        unsubs = []

        def once(e):
            received.append(("once", e))
            unsubs[0]()

        unsubs.append(channel.subscribe(once))
        channel.subscribe(lambda e: received.append(("always", e)))
        channel.emit(1)
        channel.emit(2)
        assert received == [("once", 1), ("always", 1), ("always", 2)]

    def test_repr(self):
        assert "click" in repr(EventChannel("click"))


class TestEventChannels:
    def test_listen_and_dispatch(self):
        channels = EventChannels()
        received = []
        channels.listen("input", lambda e: received.append(e))
        assert channels.dispatch("input", "x") is True
        assert received == ["x"]

    def test_dispatch_without_listeners(self):
        channels = EventChannels()
        assert channels.dispatch("nothing") is False
        dispose = channels.listen("input", lambda e: None)
        dispose()
        assert channels.dispatch("input") is False

    def test_channels_are_independent(self):
        channels = EventChannels()
        received = []
        channels.listen("a", lambda e: received.append("a"))
        channels.listen("b", lambda e: received.append("b"))
        channels.dispatch("b")
        assert received == ["b"]
