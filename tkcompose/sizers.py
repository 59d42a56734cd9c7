"""
Sizers: layout managers attached to Tk containers.

A sizer decides how a container places the children added to it:
- BoxSizer: a row or a column, using pack()
- GridSizer: a fixed number of columns with uniform cells, using grid()

Containers without a sizer place children at their origin.
"""

from __future__ import annotations

import tkinter as tk
from typing import Any, Dict, Iterable, Optional, Tuple

from .flags import ID_ANY, HORIZONTAL, Flags

_SIZER_ATTR = "_tkcompose_sizer"
_ID_ATTR = "_tkcompose_id"


def _flag_dict(flags: Iterable[Tuple[str, Any]]) -> Dict[str, Any]:
    """First occurrence of a key wins, as in an ordered option list."""
    result: Dict[str, Any] = {}
    for key, value in flags:
        result.setdefault(key, value)
    return result


def _padding(bits: int, border: int) -> Tuple[Tuple[int, int], Tuple[int, int]]:
    """Split a border into (padx, pady) for the sides selected in bits."""
    padx = (border if bits & Flags.LEFT else 0, border if bits & Flags.RIGHT else 0)
    pady = (border if bits & Flags.TOP else 0, border if bits & Flags.BOTTOM else 0)
    return padx, pady


class Sizer:
    """Base class for layout managers."""

    def __init__(self) -> None:
        self.count = 0

    def add(self, widget: tk.Misc, flags: Iterable[Tuple[str, Any]] = ()) -> None:
        self._place(widget, _flag_dict(flags))
        self.count += 1

    def _place(self, widget: tk.Misc, options: Dict[str, Any]) -> None:
        raise NotImplementedError


class BoxSizer(Sizer):
    """
    Lay children out along one axis.

    The proportion option grows a child along the main axis, EXPAND fills
    the cross axis and the ALIGN_* bits anchor the child inside its slot.
    """

    def __init__(self, orientation: int = HORIZONTAL):
        super().__init__()
        self.orientation = abs(orientation)

    @property
    def horizontal(self) -> bool:
        return self.orientation == HORIZONTAL

    def _place(self, widget: tk.Misc, options: Dict[str, Any]) -> None:
        bits = options.get("flag", Flags.NONE)
        proportion = options.get("proportion", 0)
        padx, pady = _padding(bits, options.get("border", 0))

        main = tk.X if self.horizontal else tk.Y
        if proportion > 0 and bits & Flags.EXPAND:
            fill = tk.BOTH
        elif proportion > 0:
            fill = main
        elif bits & Flags.EXPAND:
            fill = tk.Y if self.horizontal else tk.X
        else:
            fill = tk.NONE

        widget.pack(
            side=tk.LEFT if self.horizontal else tk.TOP,
            expand=proportion > 0,
            fill=fill,
            anchor=self._anchor(bits),
            padx=padx,
            pady=pady,
        )

    def _anchor(self, bits: int) -> str:
        # Only the cross axis matters: the slot spans it entirely.
        if self.horizontal:
            if bits & Flags.ALIGN_CENTER_VERTICAL:
                return tk.CENTER
            return tk.S if bits & Flags.ALIGN_BOTTOM else tk.N
        if bits & Flags.ALIGN_CENTER_HORIZONTAL:
            return tk.CENTER
        return tk.E if bits & Flags.ALIGN_RIGHT else tk.W

    def __repr__(self) -> str:
        return f"<BoxSizer horizontal={self.horizontal} count={self.count}>"


class GridSizer(Sizer):
    """
    Lay children out in a grid of equally sized cells.

    The number of columns is fixed; rows are added as children arrive.
    """

    def __init__(self, columns: int, container: Optional[tk.Misc] = None):
        super().__init__()
        if columns < 1:
            raise ValueError(f"GridSizer needs at least one column, got {columns}")
        self.columns = columns
        self.container = container

    def cell(self, index: int) -> Tuple[int, int]:
        """Return (row, column) of the index-th child."""
        return divmod(index, self.columns)

    def _place(self, widget: tk.Misc, options: Dict[str, Any]) -> None:
        bits = options.get("flag", Flags.NONE)
        padx, pady = _padding(bits, options.get("border", 0))
        row, column = self.cell(self.count)

        master = self.container if self.container is not None else widget.master
        master.grid_columnconfigure(column, weight=1, uniform="cells")
        master.grid_rowconfigure(row, weight=1, uniform="cells")

        widget.grid(
            row=row,
            column=column,
            sticky="nsew" if bits & Flags.EXPAND else "",
            padx=padx,
            pady=pady,
        )

    def __repr__(self) -> str:
        return f"<GridSizer columns={self.columns} count={self.count}>"


def set_sizer(container: tk.Misc, sizer: Sizer) -> Sizer:
    """Attach a sizer to a container."""
    if isinstance(sizer, GridSizer) and sizer.container is None:
        sizer.container = container
    setattr(container, _SIZER_ATTR, sizer)
    return sizer


def get_sizer(container: Optional[tk.Misc]) -> Optional[Sizer]:
    """Get the sizer of a container, or None."""
    if container is None:
        return None
    return getattr(container, _SIZER_ATTR, None)


def has_sizer(container: Optional[tk.Misc]) -> bool:
    return get_sizer(container) is not None


def set_widget_id(widget: tk.Misc, widget_id: int) -> None:
    setattr(widget, _ID_ATTR, widget_id)


def get_widget_id(widget: Optional[tk.Misc]) -> int:
    return getattr(widget, _ID_ATTR, ID_ANY)


def fit(widget: Optional[tk.Misc]) -> None:
    """Recompute the layout of a widget."""
    if widget is not None:
        widget.update_idletasks()


def add_self(parent: tk.Misc, widget: tk.Misc, flags: Iterable[Tuple[str, Any]] = ()) -> None:
    """
    Add a widget to its parent with respect to the parent's sizer.

    Without a sizer the widget is placed at the parent's origin. The parent
    is re-fitted afterwards.
    """
    sizer = get_sizer(parent)
    if sizer is not None:
        sizer.add(widget, flags)
    else:
        widget.place(x=0, y=0)
    fit(parent)
