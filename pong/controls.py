"""Polled input snapshot and the default keyboard bindings.

Hosts translate key presses into logical actions and set the matching flag;
the game reads the snapshot once per frame. Flags are not auto-cleared: a
held key stays True until the host sees the key go up. Edge-triggered
actions are cleared by whoever acts on them, via `consume`.
"""

from dataclasses import dataclass, field
from typing import Optional

# Logical actions
P1_UP = "p1_up"
P1_DOWN = "p1_down"
P2_UP = "p2_up"
P2_DOWN = "p2_down"
CONFIRM = "confirm"  # edge-triggered: launch / return to start
QUIT = "quit"        # read by hosts only

ACTIONS = (P1_UP, P1_DOWN, P2_UP, P2_DOWN, CONFIRM, QUIT)

# Key names as reported by pygame.key.name()
DEFAULT_KEY_BINDINGS = {
    "w": P1_UP,
    "s": P1_DOWN,
    "up": P2_UP,
    "down": P2_DOWN,
    "return": CONFIRM,
    "enter": CONFIRM,
    "space": CONFIRM,
    "escape": QUIT,
}


@dataclass
class InputState:
    """Action name -> is held."""
    held: dict = field(default_factory=dict)

    def press(self, action: str):
        self.held[action] = True

    def release(self, action: str):
        self.held[action] = False

    def is_held(self, action: str) -> bool:
        return self.held.get(action, False)

    def consume(self, action: str) -> bool:
        """Read an edge-triggered action and clear it in the same step."""
        pressed = self.held.get(action, False)
        self.held[action] = False
        return pressed

    def apply_key(self, key_name: str, down: bool, bindings: Optional[dict] = None) -> bool:
        """Update the flag bound to a key. Returns False for unbound keys.

        An empty mapping binds nothing; only None falls back to the defaults.
        """
        if bindings is None:
            bindings = DEFAULT_KEY_BINDINGS
        action = bindings.get(key_name)
        if action is None:
            return False
        if down:
            self.press(action)
        else:
            self.release(action)
        return True
