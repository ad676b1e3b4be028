"""
player_logic.py
---------------
The single damage path for the player.

apply_damage() is the only function allowed to lower player health. It
applies the hit, starts the invulnerability window, and resolves the
death branch (respawn with one life fewer, or end the session).
"""

from princess_quest.core.debug.debug_logger import DebugLogger
from princess_quest.core.runtime.game_settings import PlayerDefaults, Sounds
from princess_quest.core.services.event_manager import GameOverEvent, PlayerDamagedEvent


def apply_damage(state, events, amount):
    """
    Damage the session's player.

    Flow:
        - Skip entirely while invulnerable
        - Lower health, start invulnerability, request the damage cue
        - Health depleted with lives > 1: spend a life and respawn at spawn
        - Health depleted on the last life: lives = 0 and the session is over

    Args:
        state: GameState owning the player
        events: EventManager for cues and notifications
        amount: Damage to apply

    Returns:
        bool: True if damage was applied
    """
    player = state.player

    if player.invulnerable:
        DebugLogger.trace("Player invulnerable - damage blocked", category="collision")
        return False

    prev_health = player.health
    player.health = max(0, player.health - amount)
    player.invulnerable = True
    player.invulnerable_timer = 0
    events.play(Sounds.DAMAGE)

    DebugLogger.action(
        f"Player took {amount} damage ({prev_health} → {player.health})",
        category="collision"
    )

    if player.health <= 0:
        _on_health_depleted(state, events)

    events.dispatch(PlayerDamagedEvent(amount=amount, health=player.health, lives=player.lives))
    return True


def _on_health_depleted(state, events):
    """Spend a life or end the session."""
    player = state.player

    if player.lives > 1:
        player.lives -= 1
        player.reset(PlayerDefaults.SPAWN_X, PlayerDefaults.SPAWN_Y)
        DebugLogger.state(f"Life lost - {player.lives} remaining, respawning")
        return

    player.lives = 0
    state.over = True
    state.running = False
    state.victory = False
    events.stop(Sounds.BACKGROUND_MUSIC)
    events.play(Sounds.GAME_OVER)
    events.dispatch(GameOverEvent(score=state.score, victory=False))
    DebugLogger.state(f"Out of lives - game over (score {state.score})")
