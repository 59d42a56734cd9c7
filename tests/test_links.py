"""
Tests for the event link protocol.
"""

import queue

import pytest

import tkcompose
from tkcompose import (
    NO_TARGET,
    Callback,
    NoTarget,
    PlanError,
    QueueHandle,
    as_link,
    pass_event,
)


class TestAsLink:
    """Test normalization of builder results into event links."""

    def test_none_is_no_target(self):
        assert as_link(None) is NO_TARGET

    def test_no_target_is_singleton(self):
        assert NoTarget() is NO_TARGET

    def test_link_unchanged(self):
        link = QueueHandle()
        assert as_link(link) is link

    def test_queue_wrapped(self):
        q = queue.Queue()
        link = as_link(q)
        assert isinstance(link, QueueHandle)
        assert link.queue is q

    def test_callable_wrapped(self):
        def handler(event, origin):
            pass

        link = as_link(handler)
        assert isinstance(link, Callback)
        assert link.fn is handler

    def test_invalid_value_raises(self):
        with pytest.raises(PlanError):
            as_link(42)


class TestPassEvent:
    """Test the single dispatch point for events."""

    def test_no_target_is_noop(self):
        pass_event("event", NO_TARGET)
        pass_event("event", None)

    def test_callback_receives_payload_and_none(self):
        calls = []
        pass_event("event", Callback(lambda payload, origin: calls.append((payload, origin))))
        assert calls == [("event", None)]

    def test_bare_callable_accepted(self):
        calls = []
        pass_event(1, lambda payload, origin: calls.append(payload))
        assert calls == [1]

    def test_queue_handle_delivers_once(self):
        link = QueueHandle()
        pass_event({"x": 1}, link)
        assert link.queue.get_nowait() == {"x": 1}
        assert link.queue.empty()

    def test_callback_delivers_once(self):
        calls = []
        link = Callback(lambda payload, origin: calls.append(payload))
        pass_event("a", link)
        pass_event("b", link)
        assert calls == ["a", "b"]


class TestEventPayloads:
    """Test event payload values."""

    def test_widget_event_is_frozen(self):
        event = tkcompose.WidgetEvent(tkcompose.BUTTON_CLICKED, 3)
        with pytest.raises(Exception):
            event.id = 4

    def test_widget_event_equality(self):
        a = tkcompose.WidgetEvent("<Button-1>", 1)
        b = tkcompose.WidgetEvent("<Button-1>", 1)
        assert a == b
