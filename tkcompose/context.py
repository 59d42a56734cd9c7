"""
Composition context threaded down the widget tree.

Each builder receives a Context naming the container to create widgets in,
the sizer flags to add them with and the event link to send events to.
Combinators derive modified copies for their subordinates; a context is
never changed in place.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Iterable, Mapping, Optional, Tuple, Union

from .flags import DEFAULT_SIZER_FLAGS, SizerFlags
from .links import NO_TARGET, EventLink, as_link

if TYPE_CHECKING:
    import tkinter as tk
    from .app import TopFrame

FlagsLike = Union[Mapping[str, Any], Iterable[Tuple[str, Any]]]


def _pairs(flags: FlagsLike) -> Tuple[Tuple[str, Any], ...]:
    if isinstance(flags, Mapping):
        return tuple(flags.items())
    return tuple((key, value) for key, value in flags)


def merge_sizer_flags(base: FlagsLike, overrides: FlagsLike) -> SizerFlags:
    """
    Merge two sizer flag lists.

    Keys present in overrides replace the ones in base; new keys are
    appended. The order in which keys first appear is kept.
    """
    merged = dict(_pairs(base))
    merged.update(_pairs(overrides))
    return tuple(merged.items())


@dataclass(frozen=True)
class Context:
    """
    Context for building one node of the widget tree.

    Attributes:
        parent: Tk container new widgets are created in
        sizer_flags: Ordered (key, value) layout options used by add_self
        event_link: Where events produced by this node go
        window: Owning TopFrame, the handle used to reach the GUI thread
    """
    parent: Optional[tk.Misc] = None
    sizer_flags: SizerFlags = DEFAULT_SIZER_FLAGS
    event_link: EventLink = field(default=NO_TARGET)
    window: Optional[TopFrame] = field(default=None, repr=False)

    def __post_init__(self):
        # Normalize so combinators can always call event_link.send()
        object.__setattr__(self, "event_link", as_link(self.event_link))
        object.__setattr__(self, "sizer_flags", _pairs(self.sizer_flags))

    def with_parent(self, parent: tk.Misc) -> Context:
        return dataclasses.replace(self, parent=parent)

    def with_link(self, link: Any) -> Context:
        return dataclasses.replace(self, event_link=as_link(link))

    def with_sizer_flags(self, flags: FlagsLike) -> Context:
        """Derive a context whose sizer flags are merged with flags."""
        return dataclasses.replace(
            self, sizer_flags=merge_sizer_flags(self.sizer_flags, flags)
        )
