"""
Composition operators: turn a plan into widgets and a combined event link.

A plan describes how subordinate builders are laid out:
- Single(builder): build one node directly
- Sequential(items): events flow from each item into the next one
- Parallel(items): every item gets the same context; events fan out

Implicit shapes are accepted too: a tuple is sequential (a one-element
tuple is its element), a list is parallel and a callable is a builder.
"""

from __future__ import annotations

import tkinter as tk
from dataclasses import dataclass
from typing import Any, Callable, List, Sequence, Union

from .context import Context
from .exceptions import PlanError
from .flags import HORIZONTAL, SEQUENCE_PANEL_FLAGS
from .links import Callback, EventLink, as_link
from .sizers import BoxSizer, add_self, set_sizer

Builder = Callable[[Context], Any]
PlanLike = Union["Plan", Builder, tuple, list]


class Plan:
    """Base class for explicit composition plans."""

    def build(self, ctx: Context, reverse: bool = False) -> EventLink:
        raise NotImplementedError


@dataclass(frozen=True)
class Single(Plan):
    """A single builder; direction has no effect."""
    builder: Builder

    def build(self, ctx: Context, reverse: bool = False) -> EventLink:
        return as_link(self.builder(ctx))


@dataclass(frozen=True)
class Sequential(Plan):
    """
    Items whose event links are chained left to right.

    Events received by the combined link enter the first item; the last
    item forwards to the outer link of the context.
    """
    items: Sequence[PlanLike]

    def build(self, ctx: Context, reverse: bool = False) -> EventLink:
        if not self.items:
            raise PlanError(self, "Sequential plan needs at least one item")
        if len(self.items) == 1:
            return comp(self.items[0], ctx)
        pending = list(reversed(self.items))
        if reverse:
            return _chain_reversed(pending, ctx)
        return _chain(pending, ctx)


@dataclass(frozen=True)
class Parallel(Plan):
    """Items sharing one context; the combined link feeds all of them."""
    items: Sequence[PlanLike]

    def build(self, ctx: Context, reverse: bool = False) -> EventLink:
        items = list(reversed(self.items)) if reverse else list(self.items)
        links = [comp(item, ctx) for item in items]
        return Callback(_fan_out(links))


def as_plan(plan: PlanLike) -> Plan:
    """Interpret an implicit plan shape as an explicit Plan."""
    if isinstance(plan, Plan):
        return plan
    if isinstance(plan, tuple):
        if len(plan) == 1:
            return as_plan(plan[0])
        if not plan:
            raise PlanError(plan, "Sequential plan needs at least one item")
        return Sequential(plan)
    if isinstance(plan, list):
        return Parallel(plan)
    if callable(plan):
        return Single(plan)
    raise PlanError(plan)


def comp(plan: PlanLike, ctx: Context) -> EventLink:
    """
    Compose a subordinate piece of GUI.

    This is meant to be called from the creation phase of a widget that
    has subordinates (e.g. a panel). Returns the combined event link.
    """
    return as_plan(plan).build(ctx)


def rcomp(plan: PlanLike, ctx: Context) -> EventLink:
    """Same as comp(), but subordinates are placed in reverse order."""
    return as_plan(plan).build(ctx, reverse=True)


def _chain(pending: List[PlanLike], ctx: Context) -> EventLink:
    """
    Build sequential items, last one first.

    All but the first item get an intermediate horizontal panel so each
    can lay out its own children. Panels left empty are destroyed; the
    others are added to the parent after the first item.
    """
    parent = ctx.parent
    panels: List[tk.Frame] = []
    link = ctx.event_link

    for item in pending[:-1]:
        holder = tk.Frame(parent)
        set_sizer(holder, BoxSizer(HORIZONTAL))
        link = comp(item, ctx.with_parent(holder).with_link(link))
        if holder.winfo_children():
            panels.insert(0, holder)
        else:
            holder.destroy()

    link = comp(pending[-1], ctx.with_link(link))
    for holder in panels:
        add_self(parent, holder, SEQUENCE_PANEL_FLAGS)
    return link


def _chain_reversed(pending: List[PlanLike], ctx: Context) -> EventLink:
    link = ctx.event_link
    for item in pending:
        link = comp(item, ctx.with_link(link))
    return link


def _fan_out(links: List[EventLink]) -> Callable[[Any, Any], None]:
    def fan_out(event, _origin=None):
        for link in links:
            link.send(event)

    return fan_out
