"""
game_settings.py
----------------
Centralized constants for all simulation systems.

All time values are measured in ticks (one simulation step per frame).
"""


# ===========================================================
# Display & Timing
# ===========================================================

class Display:
    """Playfield and window configuration."""
    WIDTH: int = 800
    HEIGHT: int = 480
    FPS: int = 60
    CAPTION: str = "Princess Quest"


class Timing:
    """Tick-counted windows for state transitions."""
    PAUSE_DEBOUNCE_TICKS: int = 18      # ~300 ms at 60 FPS
    PAUSE_TRANSITION_TICKS: int = 6     # ~100 ms at 60 FPS


# ===========================================================
# Physics
# ===========================================================

class Physics:
    """Per-tick movement constants."""
    GRAVITY: float = 0.5
    JUMP_FORCE: float = -15.0
    MOVEMENT_SPEED: float = 5.0
    FRICTION: float = 0.8
    MAX_FALL_SPEED: float = 15.0


# ===========================================================
# Player Defaults
# ===========================================================

class PlayerDefaults:
    """Player configuration defaults."""
    WIDTH: int = 32
    HEIGHT: int = 32
    MAX_HEALTH: int = 100
    INITIAL_LIVES: int = 3
    INVULNERABLE_TICKS: int = 60
    BLINK_INTERVAL: int = 6
    SPAWN_X: float = 100
    SPAWN_Y: float = 300
    WALK_FRAME_COUNT: int = 3
    WALK_FRAME_DELAY: int = 5


# ===========================================================
# Combat & Scoring
# ===========================================================

class Combat:
    """Damage, stomp and scoring rules."""
    ENEMY_DAMAGE: int = 25
    STOMP_TOLERANCE: float = 10
    STOMP_BOUNCE: float = Physics.JUMP_FORCE / 1.5
    STOMP_SCORE: int = 20
    COLLECTIBLE_SCORE: int = 10
    GOAL_SCORE: int = 100


# ===========================================================
# Entities
# ===========================================================

class EnemyDefaults:
    WIDTH: int = 32
    HEIGHT: int = 32
    SPEED: float = 2
    ANIM_FRAME_TICKS: int = 10


class CollectibleDefaults:
    WIDTH: int = 16
    HEIGHT: int = 16
    FRAME_COUNT: int = 4
    FRAME_DELAY: int = 8


class GoalDefaults:
    WIDTH: int = 32
    HEIGHT: int = 32
    CASTLE_SIZE: int = 96
    ANCHOR_X: float = 700
    ANCHOR_Y: float = 400
    ANIM_FRAME_TICKS: int = 15


# ===========================================================
# Levels
# ===========================================================

class Levels:
    """Level progression bounds."""
    FIRST: int = 1
    LAST: int = 5


class Credits:
    """Victory credits scroll, consumed by the renderer."""
    START_POSITION: float = 300
    SPEED: float = 1.5


# ===========================================================
# Rendering
# ===========================================================

class Palette:
    """Fallback colors used when sprites are missing."""
    SKY = (92, 148, 252)
    PLATFORM = (139, 69, 19)
    COIN = (255, 215, 0)
    ENEMY = (255, 0, 0)
    PRINCESS = (255, 105, 180)
    HERO = (255, 192, 203)
    FROG = (119, 178, 85)
    HEALTH = (0, 255, 0)
    TEXT = (255, 255, 255)
    SHADOW = (0, 0, 0)


# ===========================================================
# Sound Cues
# ===========================================================

class Sounds:
    """Names of the audio cues the simulation requests."""
    JUMP = "jump"
    COIN = "coin"
    DAMAGE = "damage"
    GAME_OVER = "game_over"
    LEVEL_COMPLETE = "level_complete"
    GAME_COMPLETE = "game_complete"
    BACKGROUND_MUSIC = "background_music"
