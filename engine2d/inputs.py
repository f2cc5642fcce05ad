"""Named inputs bound to one or more key codes, and their press states."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import FrozenSet


class PressState(IntEnum):
    """How an input is currently pressed, ordered so that ``>= PRESSED`` means down."""

    RELEASED = 0
    PRESSED = 1
    HELD = 2


class KeyAction(IntEnum):
    """The kind of key event reported by the windowing layer."""

    RELEASE = 0
    PRESS = 1
    REPEAT = 2


@dataclass
class Input:
    """A named input that is pressed when any of its key codes is pressed."""

    name: str
    keycodes: FrozenSet[int] = field(default_factory=frozenset)
    press_state: PressState = PressState.RELEASED

    def __post_init__(self) -> None:
        self.keycodes = frozenset(self.keycodes)

    def apply(self, key: int, action: int) -> bool:
        """Update the press state from a key event.

        Returns whether ``key`` belongs to this input; events for other keys
        leave the state untouched.
        """
        if key not in self.keycodes:
            return False
        if action == KeyAction.PRESS:
            self.press_state = PressState.PRESSED
        elif action == KeyAction.REPEAT:
            self.press_state = PressState.HELD
        else:
            self.press_state = PressState.RELEASED
        return True