"""
player_state.py
---------------
Defines player-exclusive damage states.

Responsibilities
----------------
- Name the stages of the damage lifecycle (healthy, invulnerable, defeated, out of lives)
- Player-exclusive constants only
"""

from enum import IntEnum


class PlayerDamageState(IntEnum):
    """
    Damage lifecycle of the player.

      HEALTHY       -> takes damage normally
      INVULNERABLE  -> recently hit, further damage is suppressed
      DEFEATED      -> health depleted, a life will be spent on respawn
      OUT_OF_LIVES  -> health depleted with no lives left, session over
    """
    HEALTHY = 0
    INVULNERABLE = 1
    DEFEATED = 2
    OUT_OF_LIVES = 3
