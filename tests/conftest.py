import tkinter as tk

import pytest


@pytest.fixture
def tk_root():
    """Create a hidden Tk root, skipping when no display is available."""
    try:
        root = tk.Tk()
    except tk.TclError as e:
        pytest.skip(f"Tk is not available: {e}")
    root.withdraw()
    yield root
    try:
        root.destroy()
    except tk.TclError:
        pass
