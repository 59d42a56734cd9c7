"""
tkcompose - Declarative composition of Tkinter widget trees.

This framework provides:
- Functional composition of widgets: sequential (tuple), parallel (list)
  and grid layouts instead of imperative widget construction
- Event links routing widget events to callbacks, mailboxes or nowhere
- Event shaping combinators: map, maybe, map_state, always, never
- A top-level window with a small event loop

Basic Usage:
    from tkcompose import VERTICAL, button, map_state, text_label, top_frame

    top_frame("Counter", 300, 100, VERTICAL, (
        button("Click me", 1),
        map_state(lambda event, count: count + 1, 0),
        text_label("Clicked {} times", "Not clicked yet"),
    ))

Key Concepts:
    - Builder: a function from Context to event link, creating one widget
    - Plan: a builder, a tuple of plans (events flow left to right) or a
      list of plans (events fan out to all of them)
    - Event link: where a widget sends its events (pass_event)
    - Context: parent container, sizer flags and event link of a node
"""

from .actors import ActorFailed, MapStateActor
from .app import LoopState, TopFrame, top_frame
from .combinators import Just, always, map, map_state, maybe, mod_sizer_flags, never
from .compose import Parallel, Plan, Sequential, Single, as_plan, comp, rcomp
from .context import Context, merge_sizer_flags
from .exceptions import ActorError, PlanError, TkComposeError
from .flags import (
    ALIGN_BOTTOM,
    ALIGN_CENTER,
    ALIGN_CENTER_HORIZONTAL,
    ALIGN_CENTER_VERTICAL,
    ALIGN_RIGHT,
    ALL,
    BOTTOM,
    BUTTON_CLICKED,
    DEFAULT_SIZER_FLAGS,
    EXPAND,
    HORIZONTAL,
    ID_ANY,
    LEFT,
    RIGHT,
    TOP,
    VERTICAL,
    Flags,
)
from .links import (
    NO_TARGET,
    Callback,
    CloseEvent,
    EventLink,
    NoTarget,
    QueueHandle,
    WidgetEvent,
    as_link,
    dispatch_click,
    link_event,
    pass_event,
    route_clicks,
)
from .log import configure_logging, setup_logging
from .sizers import BoxSizer, GridSizer, add_self, fit, get_sizer, has_sizer
from .widgets import button, catch_events, default_formatter, grid, panel, text_label

__version__ = "0.1.0"

__all__ = [
    # Window
    "TopFrame",
    "top_frame",
    "LoopState",
    # Widgets
    "panel",
    "grid",
    "button",
    "text_label",
    "catch_events",
    "default_formatter",
    # Combinators
    "map",
    "maybe",
    "map_state",
    "always",
    "never",
    "mod_sizer_flags",
    "Just",
    # Composition
    "comp",
    "rcomp",
    "as_plan",
    "Plan",
    "Single",
    "Sequential",
    "Parallel",
    "Context",
    "merge_sizer_flags",
    # Event links
    "EventLink",
    "NoTarget",
    "NO_TARGET",
    "Callback",
    "QueueHandle",
    "WidgetEvent",
    "CloseEvent",
    "as_link",
    "pass_event",
    "link_event",
    "route_clicks",
    "dispatch_click",
    # Actors
    "MapStateActor",
    "ActorFailed",
    # Sizers
    "BoxSizer",
    "GridSizer",
    "add_self",
    "fit",
    "get_sizer",
    "has_sizer",
    # Flags
    "Flags",
    "HORIZONTAL",
    "VERTICAL",
    "LEFT",
    "RIGHT",
    "TOP",
    "BOTTOM",
    "ALL",
    "EXPAND",
    "ALIGN_RIGHT",
    "ALIGN_BOTTOM",
    "ALIGN_CENTER_HORIZONTAL",
    "ALIGN_CENTER_VERTICAL",
    "ALIGN_CENTER",
    "ID_ANY",
    "BUTTON_CLICKED",
    "DEFAULT_SIZER_FLAGS",
    # Logging
    "configure_logging",
    "setup_logging",
    # Exceptions
    "TkComposeError",
    "PlanError",
    "ActorError",
]
