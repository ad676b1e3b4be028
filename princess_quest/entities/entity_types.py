"""Entity types."""

from enum import Enum


class EnemyVariant(Enum):
    """Enemy kinds. The renderer maps each to its own sprite."""
    GOOMBA = "goomba"
    KOOPA = "koopa"
    GHOST = "ghost"


class CharacterVariant(Enum):
    """Playable character skins."""
    HERO = "hero"
    FROG = "frog"

    def toggled(self) -> "CharacterVariant":
        return CharacterVariant.FROG if self is CharacterVariant.HERO else CharacterVariant.HERO
