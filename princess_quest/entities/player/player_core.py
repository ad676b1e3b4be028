"""
player_core.py
--------------
Defines the Player entity and coordinates its per-tick components.
"""

import pygame

from princess_quest.core.runtime.game_settings import PlayerDefaults
from princess_quest.core.debug.debug_logger import DebugLogger
from princess_quest.entities.base_entity import BaseEntity
from princess_quest.entities.entity_state import Facing
from princess_quest.entities.entity_types import CharacterVariant
from .player_movement import update_movement
from .player_state import PlayerDamageState


class Player(BaseEntity):
    """Represents the controllable player entity."""

    def __init__(self, x=PlayerDefaults.SPAWN_X, y=PlayerDefaults.SPAWN_Y, events=None,
                 lives=PlayerDefaults.INITIAL_LIVES, character=CharacterVariant.HERO):
        """
        Args:
            x, y: Spawn position (top-left)
            events: EventManager receiving audio cues (optional)
            lives: Starting lives
            character: Initial character skin
        """
        super().__init__(x, y, PlayerDefaults.WIDTH, PlayerDefaults.HEIGHT)

        self.events = events

        # Movement
        self.is_jumping = False
        self.facing = Facing.RIGHT
        self.frame = 0
        self.frame_timer = 0
        self._saved_anim = None

        # Health
        self.max_health = PlayerDefaults.MAX_HEALTH
        self.health = self.max_health
        self.lives = lives
        self.invulnerable = False
        self.invulnerable_timer = 0
        self.invulnerable_duration = PlayerDefaults.INVULNERABLE_TICKS

        # Skin
        self.character = character
        self._toggle_held = False

        DebugLogger.trace(f"Player spawned at ({x:.1f}, {y:.1f})", category="entity")

    # ===========================================================
    # Frame Cycle
    # ===========================================================
    def advance(self, input_state, bounds_width, bounds_height):
        """Advance the player by one tick."""
        self._update_character(input_state)
        update_movement(self, input_state, bounds_width, bounds_height)
        self._update_walk_frame()
        self._update_invulnerability()

    def _update_character(self, input_state):
        """Swap skins on the rising edge of the toggle action."""
        held = input_state.is_held("toggle_character")
        if held and not self._toggle_held:
            self.character = self.character.toggled()
            DebugLogger.action(f"Character -> {self.character.value}", category="entity")
        self._toggle_held = held

    def _update_walk_frame(self):
        if self.frame_timer > PlayerDefaults.WALK_FRAME_DELAY:
            self.frame = (self.frame + 1) % PlayerDefaults.WALK_FRAME_COUNT
            self.frame_timer = 0

    def _update_invulnerability(self):
        if not self.invulnerable:
            return
        self.invulnerable_timer += 1
        if self.invulnerable_timer >= self.invulnerable_duration:
            self.invulnerable = False
            self.invulnerable_timer = 0

    # ===========================================================
    # State Queries
    # ===========================================================
    @property
    def damage_state(self) -> PlayerDamageState:
        if self.health <= 0:
            return PlayerDamageState.DEFEATED if self.lives > 1 else PlayerDamageState.OUT_OF_LIVES
        if self.invulnerable:
            return PlayerDamageState.INVULNERABLE
        return PlayerDamageState.HEALTHY

    @property
    def invulnerable_remaining(self) -> int:
        """Ticks left in the current invulnerability window."""
        if not self.invulnerable:
            return 0
        return self.invulnerable_duration - self.invulnerable_timer

    @property
    def blink_visible(self) -> bool:
        """Whether the renderer should draw the player this tick."""
        if not self.invulnerable:
            return True
        return (self.invulnerable_timer // PlayerDefaults.BLINK_INTERVAL) % 2 == 1

    # ===========================================================
    # Lifecycle
    # ===========================================================
    def reset(self, x, y):
        """Move to (x, y), stop, and refill health. Lives are untouched."""
        self.pos.update(x, y)
        self.velocity.update(0, 0)
        self.health = self.max_health
        self.is_jumping = False
        if self.paused:
            self._saved_velocity = pygame.Vector2(0, 0)

    def pause(self):
        """Freeze velocity and the walk animation."""
        if self.paused:
            return
        self._saved_anim = (self.frame_timer, self.frame)
        self.frame_timer = 0
        super().pause()

    def resume(self):
        """Restore velocity and the walk animation."""
        if not self.paused:
            return
        super().resume()
        if self._saved_anim is not None:
            self.frame_timer, self.frame = self._saved_anim
            self._saved_anim = None
