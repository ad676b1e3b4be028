"""
collision_manager.py
--------------------
Per-tick AABB collision resolution between the player and the level.

Responsibilities
----------------
- Resolve the player against static platforms (minimum-translation push).
- Stomp or take damage from enemies.
- Collect coins.
- Gate and trigger the final-level goal (victory transition).

All functions take the session's GameState and EventManager explicitly;
nothing here holds state between ticks.
"""

from princess_quest.core.debug.debug_logger import DebugLogger
from princess_quest.core.runtime.game_settings import Combat, Credits, Sounds
from princess_quest.core.services.event_manager import (
    CollectibleCollectedEvent,
    EnemyDefeatedEvent,
    GameOverEvent,
)
from princess_quest.entities.player.player_logic import apply_damage


REJECTION_MESSAGE = "Defeat all enemies first!"
UNLOCK_MESSAGE = "Princess can now be rescued!"
REJECTION_COLOR = (255, 0, 0)
UNLOCK_COLOR = (0, 255, 0)


def resolve_collisions(state, events):
    """
    Run every resolution pass for one tick, in fixed order.

    Stops early once the session ends so a defeated player is not
    resolved against the remaining entities.
    """
    resolve_platforms(state.player, state.platforms)
    resolve_enemies(state, events)
    if state.over:
        return
    resolve_goal(state, events)
    if state.over:
        return
    resolve_collectibles(state, events)


# ===========================================================
# Platforms
# ===========================================================

def resolve_platforms(player, platforms):
    """
    Push the player out of every overlapping platform.

    Platforms are checked in generation order. Each overlap is resolved on
    the axis with the smaller penetration.

    Returns:
        bool: True if the player ended the pass standing on something
    """
    grounded = False

    for platform in platforms:
        overlap_x = min(player.right, platform.right) - max(player.left, platform.left)
        overlap_y = min(player.bottom, platform.bottom) - max(player.top, platform.top)

        if overlap_x <= 0 or overlap_y <= 0:
            continue

        if overlap_x < overlap_y:
            if player.x < platform.x:
                player.pos.x = platform.left - player.width
            else:
                player.pos.x = platform.right
            player.velocity.x = 0
        elif player.y < platform.y:
            player.pos.y = platform.top - player.height
            player.velocity.y = 0
            player.is_jumping = False
            grounded = True
        else:
            # Head bump
            player.pos.y = platform.bottom
            player.velocity.y = 0

    if not grounded:
        player.is_jumping = True

    return grounded


# ===========================================================
# Enemies
# ===========================================================

def is_stomp(player, enemy):
    """Falling onto the enemy with the feet near its top edge."""
    return (
        player.velocity.y > 0 and
        player.bottom - Combat.STOMP_TOLERANCE <= enemy.top
    )


def resolve_enemies(state, events):
    """Stomp overlapping enemies from above, take damage from the side."""
    player = state.player

    for enemy in list(state.enemies):
        if state.over:
            break
        if not player.overlaps(enemy):
            continue

        if is_stomp(player, enemy):
            _stomp(state, events, enemy)
        elif not player.invulnerable:
            apply_damage(state, events, Combat.ENEMY_DAMAGE)


def _stomp(state, events, enemy):
    player = state.player
    particles = state.particles
    cx, cy = enemy.center

    particles.create_explosion(cx, cy, preset="stomp")
    particles.create_score_popup(cx, enemy.top, Combat.STOMP_SCORE)

    state.enemies.remove(enemy)
    player.velocity.y = Combat.STOMP_BOUNCE
    state.add_score(Combat.STOMP_SCORE)

    remaining = len(state.enemies)
    DebugLogger.action(
        f"Stomped {enemy.variant.name} ({remaining} remaining)",
        category="collision"
    )

    if remaining == 0 and state.goal is not None:
        goal = state.goal
        goal.can_be_reached = True
        particles.create_score_popup(goal.center[0], goal.top - 20, UNLOCK_MESSAGE, UNLOCK_COLOR)
        DebugLogger.state("All enemies defeated - goal unlocked")

    events.play(Sounds.DAMAGE)
    events.play(Sounds.COIN)
    events.dispatch(EnemyDefeatedEvent(
        position=(cx, cy),
        variant=enemy.variant.value,
        remaining=remaining,
    ))


# ===========================================================
# Collectibles
# ===========================================================

def resolve_collectibles(state, events):
    """Collect every uncollected coin the player touches."""
    player = state.player

    for item in state.collectibles:
        if item.collected or not player.overlaps(item):
            continue
        item.collect()
        state.add_score(Combat.COLLECTIBLE_SCORE)
        events.play(Sounds.COIN)
        events.dispatch(CollectibleCollectedEvent(position=item.center, score=state.score))


# ===========================================================
# Goal
# ===========================================================

def resolve_goal(state, events):
    """
    Reach the goal if it is unlocked, otherwise show the rejection popup.

    The rejection is re-evaluated on every overlapping tick.

    Returns:
        bool: True if this call produced the victory
    """
    goal = state.goal
    if goal is None or goal.is_reached or not state.player.overlaps(goal):
        return False

    if not goal.can_be_reached or state.enemies:
        state.particles.create_score_popup(
            goal.center[0], goal.top - 20, REJECTION_MESSAGE, REJECTION_COLOR
        )
        DebugLogger.trace("Goal touched while locked", category="collision")
        return False

    goal.reach(state.particles)
    _enter_victory(state, events)
    return True


def _enter_victory(state, events):
    """Terminal win: stop play, start the credits scroll."""
    state.add_score(Combat.GOAL_SCORE)
    state.victory = True
    state.over = True
    state.running = False
    state.credits_position = 0
    state.credits_speed = Credits.SPEED
    state.credits_paused = False

    events.stop(Sounds.BACKGROUND_MUSIC)
    events.play(Sounds.GAME_COMPLETE)
    events.dispatch(GameOverEvent(score=state.score, victory=True))
    DebugLogger.state(f"Victory! Final score {state.score}")
