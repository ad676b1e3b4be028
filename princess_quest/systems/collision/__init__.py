from .collision_manager import (
    is_stomp,
    resolve_collectibles,
    resolve_collisions,
    resolve_enemies,
    resolve_goal,
    resolve_platforms,
)
