"""
Widget builders.

Each function returns a builder: a function taking a Context that creates
one Tk widget inside ctx.parent, adds it to the parent's sizer and returns
the widget's event link (or None when the widget consumes no events).
"""

from __future__ import annotations

import tkinter as tk
from typing import Any, Callable, Iterable, Optional, Union

from .compose import Builder, PlanLike, comp, rcomp
from .context import Context
from .flags import BUTTON_CLICKED, ID_ANY
from .links import Callback, EventLink, link_event, route_clicks
from .sizers import BoxSizer, GridSizer, add_self, fit, set_sizer, set_widget_id

Formatter = Callable[[Any], str]


def default_formatter(value: Any) -> str:
    """Default formatter: convert value to string."""
    if value is None:
        return ""
    if isinstance(value, float):
        # Format floats nicely
        if value == int(value):
            return str(int(value))
        return f"{value:.6g}"
    return str(value)


def _formatter(fmt: Union[str, Formatter, None]) -> Formatter:
    if fmt is None:
        return default_formatter
    if isinstance(fmt, str):
        return fmt.format
    return fmt


def panel(orientation: Union[int, PlanLike], plan: Optional[PlanLike] = None) -> Builder:
    """
    Create a panel laying out its subordinates in a row or a column.

    A negative orientation places subordinates in reverse order (right to
    left for HORIZONTAL, bottom to top for VERTICAL). Called with a plan
    only, the panel gets no sizer and its children sit at its origin.
    """
    if plan is None:
        return _bare_panel(orientation)

    def build(ctx: Context) -> EventLink:
        frame = tk.Frame(ctx.parent)
        set_sizer(frame, BoxSizer(abs(orientation)))
        compose = comp if orientation > 0 else rcomp
        link = compose(plan, ctx.with_parent(frame))
        add_self(ctx.parent, frame, ctx.sizer_flags)
        return link

    return build


def _bare_panel(plan: PlanLike) -> Builder:
    def build(ctx: Context) -> EventLink:
        frame = tk.Frame(ctx.parent)
        link = comp(plan, ctx.with_parent(frame))
        add_self(ctx.parent, frame, ctx.sizer_flags)
        return link

    return build


def grid(columns: int, plan: PlanLike) -> Builder:
    """
    Create a panel laying out its subordinates in a grid.

    The number of columns is fixed; rows are added automatically. Reverse
    placement is not supported.
    """
    def build(ctx: Context) -> EventLink:
        frame = tk.Frame(ctx.parent)
        set_sizer(frame, GridSizer(columns, frame))
        link = comp(plan, ctx.with_parent(frame))
        add_self(ctx.parent, frame, ctx.sizer_flags)
        return link

    return build


def button(label: str, id: int = ID_ANY) -> Builder:
    """
    Create a button with the given label and numeric id.

    Clicks pass a WidgetEvent of kind BUTTON_CLICKED to the event link.
    Without a link, clicks go to the nearest master that catches them.
    """
    def build(ctx: Context) -> None:
        widget = tk.Button(ctx.parent, text=label)
        set_widget_id(widget, id)
        add_self(ctx.parent, widget, ctx.sizer_flags)
        route_clicks(widget)
        link_event(widget, ctx.event_link, [BUTTON_CLICKED])

    return build


def text_label(fmt: Union[str, Formatter, None] = "{}", initial: str = "") -> Builder:
    """
    Create a text label that can be updated.

    Any event received is formatted with fmt (a str.format template or a
    formatter function) and displayed. initial is shown until then.
    """
    format_event = _formatter(fmt)

    def build(ctx: Context) -> EventLink:
        container = ctx.parent
        window = ctx.window
        label = tk.Label(container, text=initial)
        add_self(container, label, ctx.sizer_flags)

        def update(event: Any) -> None:
            label.config(text=format_event(event))
            fit(container)
            outer = container.master if container is not None else None
            if outer is not None:
                fit(outer)

        def link(event, _origin=None):
            if window is not None:
                window.call_soon(update, event)
            else:
                update(event)

        return Callback(link)

    return build


def catch_events(kinds: Iterable[str], id: Optional[int] = None) -> Builder:
    """
    Connect the parent widget to a list of events.

    Setting id is useful for panels created without an explicit id.
    Catching BUTTON_CLICKED on a container receives the clicks of buttons
    inside it that have no link of their own.
    No widget is created.
    """
    kinds = list(kinds)

    def build(ctx: Context) -> None:
        if id is not None:
            set_widget_id(ctx.parent, id)
        link_event(ctx.parent, ctx.event_link, kinds)

    return build
