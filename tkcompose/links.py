"""
Event link protocol: where a widget sends the events it produces.

An event link is one of three destinations:
- NoTarget: events are dropped (building UI without wiring is always legal)
- Callback: a two-argument function invoked as fn(payload, None)
- QueueHandle: a mailbox; the payload is put on the queue asynchronously

pass_event() is the single dispatch point used by every combinator.
"""

from __future__ import annotations

import queue
import tkinter as tk
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional

from .exceptions import PlanError
from .flags import BUTTON_CLICKED
from .sizers import get_widget_id

_CLICK_ATTR = "_tkcompose_click_links"


class EventLink:
    """Base class for event link destinations."""

    __slots__ = ()

    def send(self, payload: Any) -> None:
        raise NotImplementedError


class NoTarget(EventLink):
    """A link that drops every payload."""

    __slots__ = ()
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def send(self, payload: Any) -> None:
        pass

    def __repr__(self) -> str:
        return "NO_TARGET"

    def __bool__(self) -> bool:
        return False


NO_TARGET = NoTarget()


class Callback(EventLink):
    """A link that calls a two-argument function with each payload."""

    __slots__ = ("fn",)

    def __init__(self, fn: Callable[[Any, Any], Any]):
        self.fn = fn

    def send(self, payload: Any) -> None:
        self.fn(payload, None)

    def __repr__(self) -> str:
        name = getattr(self.fn, "__qualname__", repr(self.fn))
        return f"Callback({name})"


class QueueHandle(EventLink):
    """A link that delivers payloads to a mailbox queue."""

    __slots__ = ("queue",)

    def __init__(self, mailbox: Optional[queue.Queue] = None):
        self.queue = mailbox if mailbox is not None else queue.Queue()

    def send(self, payload: Any) -> None:
        self.queue.put(payload)

    def __repr__(self) -> str:
        return f"QueueHandle(pending={self.queue.qsize()})"


@dataclass(frozen=True)
class WidgetEvent:
    """A native event forwarded from a widget to its event link."""
    kind: str
    id: int
    widget: Any = None
    native: Any = None


@dataclass(frozen=True)
class CloseEvent:
    """The top-level window was asked to close."""
    window: Any = None


def as_link(value: Any) -> EventLink:
    """
    Normalize the result of a builder into an EventLink.

    None becomes NO_TARGET, queues become QueueHandle and other
    callables become Callback.
    """
    if value is None:
        return NO_TARGET
    if isinstance(value, EventLink):
        return value
    if isinstance(value, queue.Queue):
        return QueueHandle(value)
    if callable(value):
        return Callback(value)
    raise PlanError(value, f"Not an event link: {value!r}")


def pass_event(payload: Any, dest: Any) -> None:
    """Pass an event to an event link."""
    as_link(dest).send(payload)


def link_event(source: tk.Misc, dest: Any, kinds: Iterable[str]) -> None:
    """
    Forward native events of a widget to an event link.

    BUTTON_CLICKED registers a click link on the widget. Clicks of a button
    reach the click links of the nearest widget, starting at the button
    and walking up its masters, so a container catches the clicks of
    buttons inside it that have no link of their own. Any other kind is
    treated as a Tk event sequence such as "<Button-1>". Links are added,
    never replaced.
    """
    link = as_link(dest)
    if link is NO_TARGET:
        return

    for kind in kinds:
        if kind == BUTTON_CLICKED:
            links = getattr(source, _CLICK_ATTR, None)
            if links is None:
                links = []
                setattr(source, _CLICK_ATTR, links)
            links.append(link)
            if "command" in source.keys():
                route_clicks(source)
        else:
            def on_event(event, kind=kind):
                link.send(WidgetEvent(kind, get_widget_id(source), source, event))

            source.bind(kind, on_event, add="+")


def route_clicks(widget: tk.Misc) -> None:
    """Send clicks of a widget with a command option through dispatch_click()."""
    widget.configure(command=lambda: dispatch_click(widget))


def dispatch_click(widget: tk.Misc) -> bool:
    """
    Deliver a click of widget to the nearest click links.

    Returns False when neither the widget nor any of its masters has one.
    """
    event = WidgetEvent(BUTTON_CLICKED, get_widget_id(widget), widget)
    target = widget
    while target is not None:
        links = getattr(target, _CLICK_ATTR, None)
        if links:
            for link in links:
                link.send(event)
            return True
        target = target.master
    return False
