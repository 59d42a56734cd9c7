"""
Click counter built from combinators.

Each click of "Add" goes through a map_state actor that counts clicks;
the running count is shown in the label next to the button. "Reset" is
placed in parallel and sends its own clicks through the same counter,
which treats them as a reset.

Run with: python examples/counter.py
"""

from tkcompose import (
    HORIZONTAL,
    VERTICAL,
    button,
    configure_logging,
    map_state,
    panel,
    text_label,
    top_frame,
)

ADD, RESET = 1, 2


def count(event, total):
    if event.id == RESET:
        return 0
    return total + 1


def main():
    configure_logging()
    top_frame("Counter", 320, 80, VERTICAL, (
        panel(HORIZONTAL, [button("Add", ADD), button("Reset", RESET)]),
        map_state(count, 0),
        text_label("Clicked {} times", "Not clicked yet"),
    ))


if __name__ == "__main__":
    main()
