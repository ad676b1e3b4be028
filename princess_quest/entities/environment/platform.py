"""
platform.py
-----------
Static axis-aligned rectangles the player can stand on or bump into.
"""

from dataclasses import dataclass

import pygame


@dataclass(frozen=True)
class Platform:
    """Immutable platform rectangle (top-left origin)."""
    x: float
    y: float
    width: float
    height: float

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def rect(self) -> pygame.Rect:
        return pygame.Rect(int(self.x), int(self.y), int(self.width), int(self.height))

    def contains(self, other) -> bool:
        """True when another box overlaps this platform's interior."""
        return (
            other.right > self.left and
            other.left < self.right and
            other.bottom > self.top and
            other.top < self.bottom
        )
