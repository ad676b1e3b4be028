"""
player_movement.py
------------------
Per-tick player physics: input-driven horizontal speed, jump impulse,
gravity, integration and playfield clamping.

Responsibilities
----------------
- Turn an InputState into velocity changes
- Integrate position once per tick
- Keep the player inside the playfield
"""

from princess_quest.core.runtime.game_settings import Physics, Sounds
from princess_quest.entities.entity_state import Facing


def update_movement(player, input_state, bounds_width, bounds_height):
    """
    Advance player physics by one tick.

    Args:
        player: Player entity
        input_state: InputState sampled this tick
        bounds_width: Playfield width
        bounds_height: Playfield height
    """
    vel = player.velocity

    # -------------------------------------------------------
    # Horizontal input
    # -------------------------------------------------------
    if input_state.is_held("move_left"):
        vel.x = -Physics.MOVEMENT_SPEED
        player.facing = Facing.LEFT
        player.frame_timer += 1
    elif input_state.is_held("move_right"):
        vel.x = Physics.MOVEMENT_SPEED
        player.facing = Facing.RIGHT
        player.frame_timer += 1
    else:
        vel.x *= Physics.FRICTION
        player.frame_timer = 0
        player.frame = 0

    # -------------------------------------------------------
    # Jump impulse (grounded only)
    # -------------------------------------------------------
    if input_state.is_held("jump") and not player.is_jumping:
        vel.y = Physics.JUMP_FORCE
        player.is_jumping = True
        if player.events is not None:
            player.events.play(Sounds.JUMP)

    # -------------------------------------------------------
    # Gravity and integration
    # -------------------------------------------------------
    vel.y = min(vel.y + Physics.GRAVITY, Physics.MAX_FALL_SPEED)
    player.pos += vel

    _clamp_to_bounds(player, bounds_width, bounds_height)


def _clamp_to_bounds(player, bounds_width, bounds_height):
    """Keep the player inside the playfield; the bottom edge acts as a floor."""
    if player.pos.x < 0:
        player.pos.x = 0
    elif player.pos.x + player.width > bounds_width:
        player.pos.x = bounds_width - player.width

    if player.pos.y + player.height > bounds_height:
        player.pos.y = bounds_height - player.height
        player.velocity.y = 0
        player.is_jumping = False
