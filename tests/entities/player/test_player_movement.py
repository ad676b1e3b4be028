"""
test_player_movement.py
-----------------------
Per-tick player physics: input, friction, jump, gravity, clamping, skins.
"""

import pytest

from princess_quest.core.runtime.game_settings import Physics, PlayerDefaults, Sounds
from princess_quest.core.services.input_manager import InputState, NO_INPUT
from princess_quest.entities.entity_state import Facing
from princess_quest.entities.entity_types import CharacterVariant
from princess_quest.entities.player.player_core import Player


W, H = 800, 480


@pytest.fixture
def player(events):
    p = Player(100, 100, events=events)
    p.is_jumping = False
    return p


def test_move_right_sets_speed_and_facing(player):
    player.advance(InputState.of("move_right"), W, H)
    assert player.velocity.x == Physics.MOVEMENT_SPEED
    assert player.x == 100 + Physics.MOVEMENT_SPEED
    assert player.facing == Facing.RIGHT


def test_move_left_sets_speed_and_facing(player):
    player.advance(InputState.of("move_left"), W, H)
    assert player.velocity.x == -Physics.MOVEMENT_SPEED
    assert player.facing == Facing.LEFT


def test_friction_decays_horizontal_speed(player):
    player.velocity.x = 5.0
    player.advance(NO_INPUT, W, H)
    assert player.velocity.x == pytest.approx(5.0 * Physics.FRICTION)
    player.advance(NO_INPUT, W, H)
    assert player.velocity.x == pytest.approx(5.0 * Physics.FRICTION ** 2)


def test_jump_applies_impulse_and_cue(player, recorder):
    player.advance(InputState.of("jump"), W, H)
    assert player.is_jumping
    assert player.velocity.y == Physics.JUMP_FORCE + Physics.GRAVITY
    assert recorder.cues == [Sounds.JUMP]


def test_no_double_jump_while_airborne(player, recorder):
    player.advance(InputState.of("jump"), W, H)
    vy = player.velocity.y
    player.advance(InputState.of("jump"), W, H)
    assert player.velocity.y == vy + Physics.GRAVITY
    assert recorder.cues == [Sounds.JUMP]


def test_fall_speed_is_capped(player):
    player.velocity.y = Physics.MAX_FALL_SPEED
    player.advance(NO_INPUT, W, 10_000)
    assert player.velocity.y == Physics.MAX_FALL_SPEED


def test_clamped_to_horizontal_bounds(player):
    player.pos.x = 2
    player.advance(InputState.of("move_left"), W, H)
    assert player.x == 0

    player.pos.x = W - player.width - 1
    player.advance(InputState.of("move_right"), W, H)
    assert player.right == W


def test_bottom_of_playfield_acts_as_floor(player):
    player.pos.y = H - player.height - 1
    player.velocity.y = 10
    player.is_jumping = True
    player.advance(NO_INPUT, W, H)
    assert player.bottom == H
    assert player.velocity.y == 0
    assert not player.is_jumping


def test_invulnerability_clears_after_duration(player):
    player.invulnerable = True
    player.invulnerable_timer = 0
    for _ in range(PlayerDefaults.INVULNERABLE_TICKS - 1):
        player.advance(NO_INPUT, W, H)
    assert player.invulnerable
    player.advance(NO_INPUT, W, H)
    assert not player.invulnerable
    assert player.invulnerable_remaining == 0


def test_character_toggles_on_rising_edge_only(player):
    toggle = InputState.of("toggle_character")
    player.advance(toggle, W, H)
    assert player.character is CharacterVariant.FROG
    player.advance(toggle, W, H)
    assert player.character is CharacterVariant.FROG
    player.advance(NO_INPUT, W, H)
    player.advance(toggle, W, H)
    assert player.character is CharacterVariant.HERO


def test_pause_freezes_walk_animation(player):
    for _ in range(3):
        player.advance(InputState.of("move_right"), W, H)
    frame_timer, frame = player.frame_timer, player.frame
    player.pause()
    assert player.frame_timer == 0
    player.resume()
    assert (player.frame_timer, player.frame) == (frame_timer, frame)


def test_reset_while_paused_resumes_at_rest(player):
    player.velocity.update(4, -3)
    player.pause()
    player.reset(PlayerDefaults.SPAWN_X, PlayerDefaults.SPAWN_Y)
    player.resume()
    assert tuple(player.velocity) == (0, 0)
    assert tuple(player.pos) == (PlayerDefaults.SPAWN_X, PlayerDefaults.SPAWN_Y)
