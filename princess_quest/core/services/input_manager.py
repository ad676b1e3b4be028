"""
input_manager.py
----------------
Keyboard input sampled once per tick into an immutable InputState.

Provides:
- Action bindings (several keys per action)
- Edge detection (pressed vs held)
- InputState snapshots consumed by the simulation core
"""

from dataclasses import dataclass, field
from typing import FrozenSet

import pygame

from princess_quest.core.debug.debug_logger import DebugLogger


# ===========================================================
# Default Key Bindings
# ===========================================================

DEFAULT_KEY_BINDINGS = {
    "move_left": [pygame.K_LEFT, pygame.K_a],
    "move_right": [pygame.K_RIGHT, pygame.K_d],
    "jump": [pygame.K_UP, pygame.K_w, pygame.K_SPACE],
    "toggle_character": [pygame.K_t],
}


# ===========================================================
# Input Snapshot
# ===========================================================

@dataclass(frozen=True)
class InputState:
    """
    Actions active during one tick.

    held: actions whose keys are currently down
    pressed: actions whose keys went down this tick (rising edge)
    """
    held: FrozenSet[str] = field(default_factory=frozenset)
    pressed: FrozenSet[str] = field(default_factory=frozenset)

    @classmethod
    def of(cls, *held, pressed=()):
        """Build a state from action names. Pressed actions count as held."""
        return cls(frozenset(held) | frozenset(pressed), frozenset(pressed))

    def is_held(self, action: str) -> bool:
        return action in self.held

    def is_pressed(self, action: str) -> bool:
        return action in self.pressed


NO_INPUT = InputState()


# ===========================================================
# Input Manager
# ===========================================================

class InputManager:
    """
    Maps raw key state to gameplay actions.

    Usage:
        input_manager.update()             # once per frame
        game.tick(input_manager.state)
    """

    def __init__(self, key_bindings=None):
        """
        Args:
            key_bindings: {action: [key codes]} (uses DEFAULT_KEY_BINDINGS if None)
        """
        self.key_bindings = key_bindings or DEFAULT_KEY_BINDINGS
        self._prev_held = frozenset()
        self.state = NO_INPUT
        DebugLogger.init_entry("InputManager")

    def update(self, keys=None) -> InputState:
        """
        Poll the keyboard and rebuild the input snapshot.

        Args:
            keys: Indexable key state (defaults to pygame.key.get_pressed())
        """
        if keys is None:
            keys = pygame.key.get_pressed()

        held = frozenset(
            action for action, codes in self.key_bindings.items()
            if any(keys[code] for code in codes)
        )
        pressed = held - self._prev_held
        self._prev_held = held

        if pressed:
            DebugLogger.trace(f"Pressed: {sorted(pressed)}", category="input")

        self.state = InputState(held, pressed)
        return self.state

    def reset(self):
        """Forget held keys so the next update reports fresh edges."""
        self._prev_held = frozenset()
        self.state = NO_INPUT
