"""
collectible.py
--------------
Static floating coin. Collecting only flips a flag; the object stays in
its level's collection so repeated checks are harmless.
"""

from princess_quest.core.runtime.game_settings import CollectibleDefaults
from princess_quest.entities.base_entity import BaseEntity


class Collectible(BaseEntity):
    """Coin worth a fixed score."""

    __slots__ = ('collected', 'frame', 'frame_timer')

    def __init__(self, x=0.0, y=0.0):
        super().__init__(x, y, CollectibleDefaults.WIDTH, CollectibleDefaults.HEIGHT)
        self.collected = False
        self.frame = 0
        self.frame_timer = 0

    def advance(self):
        """Spin animation. Collected coins stay frozen."""
        if self.collected or self.paused:
            return
        self.frame_timer += 1
        if self.frame_timer > CollectibleDefaults.FRAME_DELAY:
            self.frame = (self.frame + 1) % CollectibleDefaults.FRAME_COUNT
            self.frame_timer = 0

    def collect(self) -> bool:
        """Mark collected. Returns False if it already was."""
        if self.collected:
            return False
        self.collected = True
        return True
