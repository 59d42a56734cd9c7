"""
Numeric keypad: a grid of buttons feeding a display.

Digits are appended to the display, "C" clears it. Button ids carry the
key value; maybe() drops clicks on keys without a value.

Run with: python examples/keypad.py
"""

from tkcompose import (
    ALL,
    EXPAND,
    VERTICAL,
    Just,
    button,
    configure_logging,
    grid,
    map_state,
    maybe,
    mod_sizer_flags,
    text_label,
    top_frame,
)

CLEAR = 10
BLANK = 11


def key_value(event):
    if event.id == BLANK:
        return None
    return Just(event.id)


def type_key(key, display):
    if key == CLEAR:
        return ""
    return display + str(key)


def main():
    configure_logging()
    keys = [button(str(n), n) for n in range(1, 10)]
    keys += [button("C", CLEAR), button("0", 0), button("", BLANK)]

    top_frame("Keypad", 220, 260, -VERTICAL, (
        mod_sizer_flags({"flag": ALL | EXPAND, "border": 2}, grid(3, keys)),
        maybe(key_value),
        map_state(type_key, ""),
        text_label("{:>12}", ""),
    ))


if __name__ == "__main__":
    main()
