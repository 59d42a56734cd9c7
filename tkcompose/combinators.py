"""
Event shaping combinators.

These builders create no widget. Placed in a sequential plan between a
widget and its outer link they transform or filter the events flowing
through:

    (button("Click", 1), map(lambda evt: evt.id), text_label("{}", ""))
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from .actors import MapStateActor, StateFunction
from .compose import Builder, PlanLike, comp
from .context import Context, FlagsLike
from .links import Callback, EventLink


@dataclass(frozen=True)
class Just:
    """A present value returned from a maybe() function."""
    value: Any


def map(f: Callable[[Any], Any]) -> Builder:
    """Apply f to any event received and send the result to the event link."""
    def build(ctx: Context) -> EventLink:
        outer = ctx.event_link

        def link(event, _origin=None):
            outer.send(f(event))

        return Callback(link)

    return build


def maybe(f: Callable[[Any], Any]) -> Builder:
    """
    Apply f to any event received, passing on only present values.

    The event link receives value when f returns Just(value); any other
    result suppresses the event.
    """
    def build(ctx: Context) -> EventLink:
        outer = ctx.event_link

        def link(event, _origin=None):
            result = f(event)
            if isinstance(result, Just):
                outer.send(result.value)

        return Callback(link)

    return build


def always() -> Builder:
    """Always pass any event received unchanged."""
    def build(ctx: Context) -> EventLink:
        return ctx.event_link

    return build


def never() -> Builder:
    """Never pass any event."""
    def build(ctx: Context) -> EventLink:
        def discard(event, _origin=None):
            pass

        return Callback(discard)

    return build


def map_state(f: StateFunction, state: Any) -> Builder:
    """
    Apply f to any event received and the encapsulated state.

    The state is kept between events by a dedicated actor; each new state
    f(event, state) is sent to the event link. The owning window stops the
    actor when it is torn down.
    """
    def build(ctx: Context) -> EventLink:
        actor = MapStateActor(f, state, ctx.event_link, window=ctx.window)
        if ctx.window is not None:
            ctx.window.adopt(actor)
        actor.start()
        return actor.handle

    return build


def mod_sizer_flags(flags: FlagsLike, plan: PlanLike) -> Builder:
    """
    Modify sizer flags for all subordinates of plan.

    Only normal placement order is supported; orientation is inherited
    from the parent.
    """
    def build(ctx: Context) -> EventLink:
        return comp(plan, ctx.with_sizer_flags(flags))

    return build
