"""
Layout flags and defaults for composed widgets.

Orientation values are signed: a negative orientation places subordinates
in reverse order (right to left for HORIZONTAL, bottom to top for VERTICAL).

Sizer flags form a bitmask stored under the "flag" key of a context's
sizer flags:
- LEFT/RIGHT/TOP/BOTTOM: sides that receive the border padding
- EXPAND: fill the cross axis of the parent's sizer
- ALIGN_*: placement of the widget inside its slot
"""

from typing import Final, Tuple


class Flags:
    """Bit flags for sizer placement."""

    NONE: Final[int] = 0
    LEFT: Final[int] = 1 << 0
    RIGHT: Final[int] = 1 << 1
    TOP: Final[int] = 1 << 2
    BOTTOM: Final[int] = 1 << 3
    EXPAND: Final[int] = 1 << 4
    ALIGN_RIGHT: Final[int] = 1 << 5
    ALIGN_BOTTOM: Final[int] = 1 << 6
    ALIGN_CENTER_HORIZONTAL: Final[int] = 1 << 7
    ALIGN_CENTER_VERTICAL: Final[int] = 1 << 8

    # Compound flags
    ALL: Final[int] = LEFT | RIGHT | TOP | BOTTOM
    ALIGN_CENTER: Final[int] = ALIGN_CENTER_HORIZONTAL | ALIGN_CENTER_VERTICAL


HORIZONTAL: Final[int] = 1
VERTICAL: Final[int] = 2

# Widgets created without an explicit id
ID_ANY: Final[int] = -1

# Event kind emitted by buttons; other kinds are Tk event sequences
BUTTON_CLICKED: Final[str] = "command_button_clicked"

SizerFlags = Tuple[Tuple[str, int], ...]

DEFAULT_SIZER_FLAGS: Final[SizerFlags] = (
    ("proportion", 1),
    ("flag", Flags.NONE),
    ("border", 0),
)

# Used for the intermediate panels of a sequential composition
SEQUENCE_PANEL_FLAGS: Final[SizerFlags] = (
    ("flag", Flags.ALL | Flags.ALIGN_CENTER_VERTICAL),
    ("border", 0),
    ("proportion", 1),
)

POLL_INTERVAL_MS: Final[int] = 20     # Mailbox pump period of a top frame
ACTOR_STOP_TIMEOUT: Final[float] = 1.0  # Seconds to wait for an actor to exit


# Export individual flags at module level for convenience
LEFT = Flags.LEFT
RIGHT = Flags.RIGHT
TOP = Flags.TOP
BOTTOM = Flags.BOTTOM
ALL = Flags.ALL
EXPAND = Flags.EXPAND
ALIGN_RIGHT = Flags.ALIGN_RIGHT
ALIGN_BOTTOM = Flags.ALIGN_BOTTOM
ALIGN_CENTER_HORIZONTAL = Flags.ALIGN_CENTER_HORIZONTAL
ALIGN_CENTER_VERTICAL = Flags.ALIGN_CENTER_VERTICAL
ALIGN_CENTER = Flags.ALIGN_CENTER
