"""
test_collision_manager.py
-------------------------
Platform push-out, stomps, contact damage, coins and the goal gate.
"""

import pytest

from princess_quest.core.runtime.game_settings import Combat, Sounds
from princess_quest.core.services.event_manager import EnemyDefeatedEvent, GameOverEvent
from princess_quest.entities.enemies.enemy import Enemy
from princess_quest.entities.environment.platform import Platform
from princess_quest.entities.goal.goal_entity import GoalEntity
from princess_quest.entities.items.collectible import Collectible
from princess_quest.entities.player.player_core import Player
from princess_quest.systems.collision.collision_manager import (
    REJECTION_MESSAGE,
    is_stomp,
    resolve_collectibles,
    resolve_collisions,
    resolve_enemies,
    resolve_goal,
    resolve_platforms,
)


# ===========================================================
# Platforms
# ===========================================================

def test_landing_snaps_on_top(arena):
    player = arena.player
    player.pos.update(200, 420)
    player.velocity.y = 6
    player.is_jumping = True

    assert resolve_platforms(player, arena.platforms)
    assert player.bottom == 450
    assert player.velocity.y == 0
    assert not player.is_jumping


def test_head_bump_snaps_below():
    ceiling = Platform(100, 100, 200, 20)
    player = Player(150, 115)
    player.velocity.y = -8

    assert not resolve_platforms(player, [ceiling])
    assert player.top == ceiling.bottom
    assert player.velocity.y == 0
    assert player.is_jumping


def test_side_push_to_nearest_edge(arena):
    wall = Platform(300, 300, 20, 150)
    player = arena.player
    player.pos.update(275, 350)
    player.velocity.x = 5

    resolve_platforms(player, [wall])
    assert player.right == wall.left
    assert player.velocity.x == 0

    player.pos.update(318, 350)
    resolve_platforms(player, [wall])
    assert player.left == wall.right


def test_resolution_is_idempotent(arena):
    player = arena.player
    player.pos.update(200, 430)
    resolve_platforms(player, arena.platforms)
    settled = tuple(player.pos)

    resolve_platforms(player, arena.platforms)
    assert tuple(player.pos) == settled


def test_no_ground_means_airborne(arena):
    player = arena.player
    player.pos.update(200, 100)
    player.is_jumping = False
    assert not resolve_platforms(player, arena.platforms)
    assert player.is_jumping


# ===========================================================
# Enemies
# ===========================================================

def test_stomp_rule_uses_tolerance(arena):
    enemy = Enemy(200, 418)
    player = arena.player
    player.velocity.y = 3

    player.pos.y = enemy.top - player.height + Combat.STOMP_TOLERANCE
    assert is_stomp(player, enemy)

    player.pos.y += 1
    assert not is_stomp(player, enemy)

    player.pos.y = enemy.top - player.height + 1
    player.velocity.y = 0
    assert not is_stomp(player, enemy)


def test_stomp_removes_enemy_and_rewards(arena, events, recorder):
    enemy = Enemy(200, 418)
    other = Enemy(600, 418)
    arena.enemies = [enemy, other]
    player = arena.player
    player.pos.update(200, 390)
    player.velocity.y = 4

    resolve_enemies(arena, events)

    assert arena.enemies == [other]
    assert player.velocity.y == Combat.STOMP_BOUNCE
    assert arena.score == Combat.STOMP_SCORE
    assert arena.particles.particle_count > 0
    assert arena.particles.popups[0].text == f"+{Combat.STOMP_SCORE}"
    assert recorder.of_type(EnemyDefeatedEvent)[0].remaining == 1


def test_last_stomp_unlocks_goal(arena, events):
    arena.goal = GoalEntity()
    arena.enemies = [Enemy(200, 418)]
    arena.player.pos.update(200, 390)
    arena.player.velocity.y = 4

    resolve_enemies(arena, events)

    assert arena.goal.can_be_reached
    assert any(p.text == "Princess can now be rescued!" for p in arena.particles.popups)


def test_side_contact_damages(arena, events, recorder):
    arena.enemies = [Enemy(220, 418)]
    resolve_enemies(arena, events)
    assert arena.player.health == 100 - Combat.ENEMY_DAMAGE
    assert len(arena.enemies) == 1
    assert arena.score == 0
    assert recorder.cues == [Sounds.DAMAGE]


def test_invulnerable_contact_is_ignored(arena, events):
    arena.enemies = [Enemy(220, 418)]
    arena.player.invulnerable = True
    resolve_enemies(arena, events)
    assert arena.player.health == 100


# ===========================================================
# Collectibles
# ===========================================================

def test_coin_collected_once(arena, events, recorder):
    coin = Collectible(210, 430)
    arena.collectibles = [coin]

    resolve_collectibles(arena, events)
    resolve_collectibles(arena, events)

    assert coin.collected
    assert arena.score == Combat.COLLECTIBLE_SCORE
    assert recorder.cues == [Sounds.COIN]


def test_coin_out_of_reach_untouched(arena, events):
    coin = Collectible(600, 100)
    arena.collectibles = [coin]
    resolve_collectibles(arena, events)
    assert not coin.collected


# ===========================================================
# Goal
# ===========================================================

@pytest.fixture
def goal_arena(arena):
    arena.goal = GoalEntity()
    arena.player.pos.update(arena.goal.x, arena.goal.y)
    return arena


def test_locked_goal_rejects_on_every_overlapping_tick(goal_arena, events):
    assert not resolve_goal(goal_arena, events)
    assert not resolve_goal(goal_arena, events)
    texts = [p.text for p in goal_arena.particles.popups]
    assert texts == [REJECTION_MESSAGE, REJECTION_MESSAGE]
    assert not goal_arena.victory


def test_unlocked_goal_with_enemies_still_rejects(goal_arena, events):
    goal_arena.goal.can_be_reached = True
    goal_arena.enemies = [Enemy(20, 418)]
    assert not resolve_goal(goal_arena, events)
    assert not goal_arena.goal.is_reached


def test_reaching_goal_is_victory(goal_arena, events, recorder):
    goal_arena.goal.can_be_reached = True
    goal_arena.credits_position = 300

    assert resolve_goal(goal_arena, events)

    assert goal_arena.victory and goal_arena.over
    assert not goal_arena.running
    assert goal_arena.goal.is_reached
    assert goal_arena.credits_position == 0
    assert goal_arena.score == Combat.GOAL_SCORE
    assert Sounds.GAME_COMPLETE in recorder.cues
    assert Sounds.BACKGROUND_MUSIC in recorder.stopped
    assert recorder.of_type(GameOverEvent)[0].victory


def test_full_pass_stops_after_game_over(arena, events):
    arena.player.lives = 1
    arena.player.health = Combat.ENEMY_DAMAGE
    coin = Collectible(210, 430)
    arena.collectibles = [coin]
    arena.enemies = [Enemy(220, 418)]

    resolve_collisions(arena, events)

    assert arena.over
    assert not coin.collected
