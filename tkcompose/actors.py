"""
Actors folding an event stream over private state.

A MapStateActor owns a mailbox and a state value. Every message received
is folded into the state with f(message, state) and the new state is sent
to the actor's event link. Messages are processed strictly in arrival
order. The actor never touches Tk objects: it only exchanges payloads.
"""

from __future__ import annotations

import itertools
import logging
import queue
import threading
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Optional

from .flags import ACTOR_STOP_TIMEOUT
from .links import EventLink, QueueHandle, as_link

if TYPE_CHECKING:
    from .app import TopFrame

_LOG = logging.getLogger("tkcompose.actors")

StateFunction = Callable[[Any, Any], Any]

_counter = itertools.count(1)
_WAKE = object()  # Unblocks the mailbox when stopping


@dataclass(frozen=True)
class ActorFailed:
    """Sent to the owning window when an actor's state function raised."""
    actor: MapStateActor
    error: Exception


class MapStateActor(threading.Thread):
    """
    Thread holding mutable state that is updated by every event received.

    Example:
        actor = MapStateActor(lambda evt, n: n + 1, 0, label_link)
        actor.start()
        pass_event("click", actor.handle)   # label_link receives 1
        actor.stop()
    """

    def __init__(
        self,
        f: StateFunction,
        state: Any,
        link: Any,
        window: Optional[TopFrame] = None,
        name: Optional[str] = None,
    ):
        super().__init__(name=name or f"map_state-{next(_counter)}", daemon=True)
        self.f = f
        self.state = state
        self.link: EventLink = as_link(link)
        self.window = window
        self.handle = QueueHandle()
        self.error: Optional[Exception] = None
        self._stopping = threading.Event()

    @property
    def mailbox(self) -> queue.Queue:
        return self.handle.queue

    @property
    def stopping(self) -> bool:
        return self._stopping.is_set()

    def run(self) -> None:
        _LOG.debug("%s started", self.name)
        while not self._stopping.is_set():
            message = self.mailbox.get()
            if message is _WAKE:
                continue
            try:
                self.state = self.f(message, self.state)
                self.link.send(self.state)
            except Exception as exc:
                self._fail(exc)
                return
        _LOG.debug("%s stopped", self.name)

    def _fail(self, exc: Exception) -> None:
        self.error = exc
        self._stopping.set()
        _LOG.error("%s failed handling an event: %s", self.name, exc, exc_info=exc)
        if self.window is not None:
            self.window.post(ActorFailed(self, exc))

    def stop(self, timeout: Optional[float] = ACTOR_STOP_TIMEOUT) -> None:
        """Cancel the actor and wait for its thread to exit."""
        self._stopping.set()
        self.mailbox.put(_WAKE)
        if self.is_alive() and threading.current_thread() is not self:
            self.join(timeout)

    def __repr__(self) -> str:
        return f"<MapStateActor {self.name} state={self.state!r}>"
