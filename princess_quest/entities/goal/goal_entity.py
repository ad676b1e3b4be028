"""
goal_entity.py
--------------
The final-level objective: a princess waiting inside a castle.

The castle is decoration, but its barrier rectangles are solid and are
registered with the level's platforms by the generator.
"""

from princess_quest.core.runtime.game_settings import Combat, GoalDefaults
from princess_quest.entities.base_entity import BaseEntity
from princess_quest.entities.environment.platform import Platform


class Castle:
    """Decorative structure around the goal."""

    __slots__ = ('x', 'y', 'width', 'height', 'barriers')

    def __init__(self, x, y, size=GoalDefaults.CASTLE_SIZE):
        self.x = x
        self.y = y
        self.width = size
        self.height = size
        self.barriers = (
            Platform(x - 32, y + 32, 32, 8),            # left ledge
            Platform(x + size, y + 32, 32, 8),          # right ledge
            Platform(x - 32, y - 16, 8, 48),            # left post
            Platform(x + size + 24, y - 16, 8, 48),     # right post
        )


class GoalEntity(BaseEntity):
    """Princess to rescue. Reachable only once every enemy is defeated."""

    __slots__ = ('is_reached', 'can_be_reached', 'castle', 'anim_frame', 'anim_timer')

    def __init__(self, anchor_x=GoalDefaults.ANCHOR_X, anchor_y=GoalDefaults.ANCHOR_Y):
        """
        Args:
            anchor_x, anchor_y: Placement anchor; the princess stands above it
                inside the castle.
        """
        castle_offset = GoalDefaults.CASTLE_SIZE // 2
        super().__init__(anchor_x, anchor_y - castle_offset, GoalDefaults.WIDTH, GoalDefaults.HEIGHT)
        self.castle = Castle(anchor_x - GoalDefaults.WIDTH, anchor_y - castle_offset)
        self.is_reached = False
        self.can_be_reached = False
        self.anim_frame = 0
        self.anim_timer = 0

    @property
    def barriers(self):
        return self.castle.barriers

    def advance(self):
        """Idle animation until rescued."""
        if self.is_reached or self.paused:
            return
        self.anim_timer += 1
        if self.anim_timer >= GoalDefaults.ANIM_FRAME_TICKS:
            self.anim_frame = 1 - self.anim_frame
            self.anim_timer = 0

    def reach(self, particles) -> bool:
        """
        Mark the goal reached and celebrate.

        Returns:
            bool: False if it was already reached or is still locked
        """
        if self.is_reached or not self.can_be_reached:
            return False
        self.is_reached = True
        cx, cy = self.center
        particles.create_explosion(cx, cy, preset="rescue")
        particles.create_score_popup(cx, self.y, Combat.GOAL_SCORE)
        return True
