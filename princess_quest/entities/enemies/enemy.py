"""
enemy.py
--------
Defines the patrolling enemy entity.

Responsibilities
----------------
- Walk horizontally at a fixed speed, turning around at the playfield edges.
- Cycle a two-frame walk animation.
- Freeze and restore its exact speed across pause/resume.
"""

from princess_quest.core.runtime.game_settings import EnemyDefaults
from princess_quest.entities.base_entity import BaseEntity
from princess_quest.entities.entity_types import EnemyVariant


class Enemy(BaseEntity):
    """Ground patroller defeated by a stomp from above."""

    __slots__ = ('speed', 'direction', 'variant', 'anim_frame', 'anim_timer', '_saved_speed')

    def __init__(self, x, y, width=EnemyDefaults.WIDTH, height=EnemyDefaults.HEIGHT,
                 speed=EnemyDefaults.SPEED, variant=EnemyVariant.GOOMBA, direction=1):
        """
        Args:
            x, y: Top-left position
            width, height: Bounding box
            speed: Pixels per tick
            variant: EnemyVariant consumed by the renderer
            direction: -1 (left) or +1 (right)
        """
        super().__init__(x, y, width, height)
        if direction not in (-1, 1):
            raise ValueError(f"Enemy direction must be -1 or 1, got {direction}")

        self.speed = speed
        self.direction = direction
        self.variant = variant
        self.anim_frame = 0
        self.anim_timer = 0
        self._saved_speed = None

        self._sync_velocity()

    def _sync_velocity(self):
        self.velocity.update(self.speed * self.direction, 0)

    # ===========================================================
    # Frame Cycle
    # ===========================================================
    def advance(self, bounds_width):
        """Walk one tick, bouncing off the playfield edges."""
        if self.paused:
            return

        self.pos.x += self.speed * self.direction

        if self.pos.x <= 0 or self.pos.x + self.width >= bounds_width:
            self.direction *= -1
        self._sync_velocity()

        self.anim_timer += 1
        if self.anim_timer >= EnemyDefaults.ANIM_FRAME_TICKS:
            self.anim_frame = 1 - self.anim_frame
            self.anim_timer = 0

    # ===========================================================
    # Pause Contract
    # ===========================================================
    def pause(self):
        """Freeze in place, remembering the walking speed."""
        if self.paused:
            return
        self._saved_speed = self.speed
        super().pause()
        self.speed = 0

    def resume(self):
        """Walk on at exactly the speed held before pause()."""
        if not self.paused:
            return
        if self._saved_speed is not None:
            self.speed = self._saved_speed
            self._saved_speed = None
        super().resume()
