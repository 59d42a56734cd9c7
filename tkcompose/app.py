"""
TopFrame: the top-level window and its event loop.

The window owns a mailbox. Events nobody else consumed, calls marshalled
from other threads and actor failures all arrive there and are handled on
the GUI thread.
"""

from __future__ import annotations

import logging
import queue
import threading
import tkinter as tk
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Callable, List, Optional, Tuple

from .actors import ActorFailed, MapStateActor
from .compose import PlanLike, comp, rcomp
from .context import Context
from .exceptions import ActorError
from .flags import DEFAULT_SIZER_FLAGS, POLL_INTERVAL_MS, VERTICAL
from .links import NO_TARGET, CloseEvent, EventLink, QueueHandle
from .log import setup_logging
from .sizers import BoxSizer, set_sizer

_LOG = logging.getLogger("tkcompose.app")


class LoopState(Enum):
    """State of a top frame's event loop."""
    RUNNING = auto()
    TERMINATED = auto()


@dataclass(frozen=True)
class _Deferred:
    """A call to run on the GUI thread."""
    fn: Callable[..., Any]
    args: Tuple[Any, ...]


class TopFrame:
    """
    Top-level window built from a composition plan.

    The sign of the orientation selects placement order: negative values
    place subordinates right to left (HORIZONTAL) or bottom to top
    (VERTICAL).

    Example:
        frame = TopFrame("Counter", 300, 100, VERTICAL)
        frame.build((button("Add", 1), map_state(lambda e, n: n + 1, 0),
                     text_label("Clicks: {}", "Clicks: 0")))
        frame.run()
    """

    def __init__(
        self,
        title: str = "tkcompose",
        width: int = 400,
        height: int = 300,
        orientation: int = VERTICAL,
        root: Optional[tk.Tk] = None,
        poll_interval: int = POLL_INTERVAL_MS,
    ):
        """
        Initialize the window.

        Args:
            title: Window title
            width: Initial window width
            height: Initial window height
            orientation: Signed orientation of the window's sizer
            root: Optional existing Tk root; the window becomes a Toplevel of it
            poll_interval: Milliseconds between mailbox pumps while running
        """
        if root is not None:
            self.root = root
            self._owns_root = False
            self.window: tk.Wm = tk.Toplevel(root)
        else:
            self.root = tk.Tk()
            self._owns_root = True
            self.window = self.root

        # Hidden until run() so the tree is built before it is shown
        self.window.withdraw()
        self.window.title(title)
        self.window.geometry(f"{width}x{height}")
        self.window.protocol("WM_DELETE_WINDOW", self._on_close)

        self.orientation = orientation
        self.poll_interval = poll_interval
        self.mailbox: queue.Queue = queue.Queue()
        self.link = QueueHandle(self.mailbox)
        self.event_link: EventLink = NO_TARGET
        self.state = LoopState.RUNNING
        self.failure: Optional[Exception] = None
        self._tick_id: Optional[str] = None

        self._actors: List[MapStateActor] = []
        self._gui_thread = threading.get_ident()

    @property
    def running(self) -> bool:
        return self.state is LoopState.RUNNING

    def build(self, plan: PlanLike) -> EventLink:
        """Build the widget tree described by plan inside the window."""
        set_sizer(self.window, BoxSizer(abs(self.orientation)))
        ctx = Context(
            parent=self.window,
            sizer_flags=DEFAULT_SIZER_FLAGS,
            event_link=self.link,
            window=self,
        )
        compose = comp if self.orientation > 0 else rcomp
        self.event_link = compose(plan, ctx)
        return self.event_link

    def adopt(self, actor: MapStateActor) -> None:
        """Stop actor when this window is torn down."""
        self._actors.append(actor)

    @property
    def actors(self) -> List[MapStateActor]:
        return self._actors.copy()

    def post(self, message: Any) -> None:
        """Send a message to the window's mailbox. Safe from any thread."""
        self.mailbox.put(message)

    def call_soon(self, fn: Callable[..., Any], *args: Any) -> None:
        """
        Run fn(*args) on the GUI thread.

        Runs immediately when called from the GUI thread, otherwise it is
        queued and executed by the next mailbox pump.
        """
        if threading.get_ident() == self._gui_thread:
            fn(*args)
        else:
            self.post(_Deferred(fn, args))

    def pump(self) -> int:
        """Handle every queued message. Returns how many were handled."""
        handled = 0
        while self.running:
            try:
                message = self.mailbox.get_nowait()
            except queue.Empty:
                break
            self.handle_message(message)
            handled += 1
        return handled

    def handle_message(self, message: Any) -> None:
        """Advance the loop state machine with one message."""
        if not self.running:
            return

        if isinstance(message, CloseEvent):
            self._terminate()
        elif isinstance(message, _Deferred):
            try:
                message.fn(*message.args)
            except Exception as exc:
                _LOG.error("deferred call %r failed: %s", message.fn, exc, exc_info=exc)
                self._fail(exc)
        elif isinstance(message, ActorFailed):
            error = ActorError(message.actor.name, message.error)
            error.__cause__ = message.error
            self._fail(error)
        else:
            _LOG.info("Got %r", message)

    def run(self) -> None:
        """
        Show the window and process events until it is closed.

        Raises:
            ActorError: if a map_state actor failed while running
            Exception: whatever a call marshalled onto the GUI thread raised
        """
        try:
            if self.running:
                self.window.deiconify()
                self._tick_id = self.window.after(self.poll_interval, self._tick)
                self.root.mainloop()
        finally:
            self._teardown()

        if self.failure is not None:
            raise self.failure

    def close(self) -> None:
        """Ask the window to close, as the window manager would."""
        self.post(CloseEvent(self.window))

    def _tick(self) -> None:
        self._tick_id = None
        try:
            self.pump()
        finally:
            if self.running:
                self._tick_id = self.window.after(self.poll_interval, self._tick)

    def _on_close(self) -> None:
        self.handle_message(CloseEvent(self.window))

    def _fail(self, exc: Exception) -> None:
        self.failure = exc
        self._terminate()

    def _terminate(self) -> None:
        self.state = LoopState.TERMINATED
        if self._tick_id is not None:
            self.window.after_cancel(self._tick_id)
            self._tick_id = None
        _LOG.debug("closing window %r", self.window.title())
        self.root.quit()
        self.window.destroy()

    def _teardown(self) -> None:
        for actor in self._actors:
            actor.stop()
        self._actors.clear()

        if self._owns_root:
            try:
                self.root.destroy()
            except tk.TclError:
                pass  # Already destroyed with the window

    def __repr__(self) -> str:
        return f"<TopFrame state={self.state.name} actors={len(self._actors)}>"


def top_frame(
    title: str,
    width: int,
    height: int,
    orientation: int,
    plan: PlanLike,
) -> None:
    """
    Create a top-level window, build plan inside it and run until closed.

    The sign of the orientation selects placement order, its magnitude the
    axis (HORIZONTAL or VERTICAL). Console logging is set up unless the
    application configured it already, so unconsumed events show up as
    "Got <event>" lines.
    """
    setup_logging()
    frame = TopFrame(title, width, height, orientation)
    frame.build(plan)
    frame.run()
