"""Game-wide settings and the shared input state."""

from __future__ import annotations

from dataclasses import dataclass, field

# Objects are positioned by their centre, windows by their top-left corner.
WINDOW_WIDTH = 800
WINDOW_HEIGHT = 800
SCREEN_FPS = 60
SCREEN_TICKS_PER_FRAME = 1000 // SCREEN_FPS

KEY_NAMES = ("up", "down", "left", "right", "j")
MOUSE_BUTTON_NAMES = ("left", "middle", "right")


def default_key_state() -> dict[str, bool]:
    """A fresh map of every tracked key, all released."""
    return {name: False for name in KEY_NAMES}


def default_mouse_state() -> dict[str, bool]:
    """A fresh map of every tracked mouse button, all released."""
    return {name: False for name in MOUSE_BUTTON_NAMES}


@dataclass
class InputState:
    """Pressed keys, pressed mouse buttons and the last known mouse position."""

    keys: dict[str, bool] = field(default_factory=default_key_state)
    mouse: dict[str, bool] = field(default_factory=default_mouse_state)
    mouse_x: int = 0
    mouse_y: int = 0

    def reset(self) -> None:
        """Release every key and button and move the mouse back to the origin."""
        self.keys = default_key_state()
        self.mouse = default_mouse_state()
        self.mouse_x = 0
        self.mouse_y = 0