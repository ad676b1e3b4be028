"""
test_player_damage.py
---------------------
The single damage path: invulnerability, life loss and game over.
"""

from princess_quest.core.runtime.game_settings import PlayerDefaults, Sounds
from princess_quest.core.services.event_manager import GameOverEvent, PlayerDamagedEvent
from princess_quest.entities.player.player_logic import apply_damage
from princess_quest.entities.player.player_state import PlayerDamageState


def test_damage_lowers_health_and_starts_invulnerability(arena, events, recorder):
    assert apply_damage(arena, events, 25)
    player = arena.player
    assert player.health == 75
    assert player.invulnerable
    assert player.invulnerable_timer == 0
    assert player.damage_state is PlayerDamageState.INVULNERABLE
    assert recorder.cues == [Sounds.DAMAGE]
    assert recorder.of_type(PlayerDamagedEvent)[0].health == 75


def test_invulnerability_blocks_damage_entirely(arena, events):
    apply_damage(arena, events, 25)
    assert not apply_damage(arena, events, 25)
    assert arena.player.health == 75


def test_overkill_damage_still_respawns(arena, events):
    arena.player.lives = 3
    arena.player.health = 10
    apply_damage(arena, events, 25)
    assert arena.player.health == PlayerDefaults.MAX_HEALTH  # respawned
    assert arena.player.lives == 2


def test_depleted_with_lives_left_respawns(arena, events):
    player = arena.player
    player.lives = 2
    player.health = 25
    player.pos.update(500, 100)

    apply_damage(arena, events, 25)

    assert player.lives == 1
    assert not arena.over
    assert tuple(player.pos) == (PlayerDefaults.SPAWN_X, PlayerDefaults.SPAWN_Y)
    assert player.health == PlayerDefaults.MAX_HEALTH
    assert player.invulnerable


def test_depleted_on_last_life_ends_session(arena, events, recorder):
    player = arena.player
    player.lives = 1
    player.health = 25
    player.pos.update(500, 100)

    apply_damage(arena, events, 25)

    assert arena.over
    assert not arena.running
    assert not arena.victory
    assert player.lives == 0
    assert tuple(player.pos) == (500, 100)
    assert player.damage_state is PlayerDamageState.OUT_OF_LIVES
    assert Sounds.GAME_OVER in recorder.cues
    assert Sounds.BACKGROUND_MUSIC in recorder.stopped
    assert recorder.of_type(GameOverEvent) == [GameOverEvent(score=0, victory=False)]
