"""
base_entity.py
--------------
Foundational class for all moving in-game entities (Player, Enemy, Collectible, Goal).

Coordinate System
-----------------
All entities use top-left coordinates in playfield pixels:
- self.pos is the top-left corner of the bounding box
- width/height never change after construction
- collisions are axis-aligned bounding-box (AABB) tests on these bounds

Pause Contract
--------------
pause() stores the current velocity and zeroes it; resume() puts the stored
vector back unchanged. Subclasses extend this for extra motion state.
"""

import pygame

from princess_quest.core.debug.debug_logger import DebugLogger


class BaseEntity:
    """
    Base class for all game entities.

    Subclassed by Player, Enemy, Collectible and GoalEntity.
    """

    __slots__ = (
        'pos', 'width', 'height', 'velocity',
        'paused', '_saved_velocity',
    )

    # ===================================================================
    # Initialization
    # ===================================================================

    def __init__(self, x: float, y: float, width: float, height: float):
        """
        Args:
            x: Left edge
            y: Top edge
            width: Bounding box width (must be positive)
            height: Bounding box height (must be positive)
        """
        if width <= 0 or height <= 0:
            raise ValueError(
                f"{type(self).__name__}: size must be positive, got ({width}, {height})"
            )

        self.pos = pygame.Vector2(x, y)
        self.width = width
        self.height = height
        self.velocity = pygame.Vector2(0, 0)

        self.paused = False
        self._saved_velocity = None

    # ===================================================================
    # Bounds
    # ===================================================================

    @property
    def x(self) -> float:
        return self.pos.x

    @property
    def y(self) -> float:
        return self.pos.y

    @property
    def left(self) -> float:
        return self.pos.x

    @property
    def right(self) -> float:
        return self.pos.x + self.width

    @property
    def top(self) -> float:
        return self.pos.y

    @property
    def bottom(self) -> float:
        return self.pos.y + self.height

    @property
    def center(self) -> tuple:
        return (self.pos.x + self.width / 2, self.pos.y + self.height / 2)

    @property
    def rect(self) -> pygame.Rect:
        """Integer rect for drawing. Collision code uses the float bounds."""
        return pygame.Rect(int(self.pos.x), int(self.pos.y), int(self.width), int(self.height))

    def overlaps(self, other) -> bool:
        """Strict AABB overlap test (touching edges do not overlap)."""
        return (
            self.right > other.left and
            self.left < other.right and
            self.bottom > other.top and
            self.top < other.bottom
        )

    # ===================================================================
    # Pause Contract
    # ===================================================================

    def pause(self):
        """Freeze motion, remembering the exact velocity."""
        if self.paused:
            return
        self.paused = True
        self._saved_velocity = pygame.Vector2(self.velocity)
        self.velocity.update(0, 0)
        DebugLogger.trace(f"{type(self).__name__} paused", category="entity")

    def resume(self):
        """Restore the velocity captured by pause()."""
        if not self.paused:
            return
        self.paused = False
        if self._saved_velocity is not None:
            self.velocity.update(self._saved_velocity)
            self._saved_velocity = None
        DebugLogger.trace(f"{type(self).__name__} resumed", category="entity")

    # ===================================================================
    # Utilities
    # ===================================================================

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__} "
            f"pos=({self.pos.x:.1f}, {self.pos.y:.1f}) "
            f"size=({self.width}, {self.height})>"
        )
