"""
snapshot.py
-----------
Read-only views of the session handed to the renderer each tick.

The renderer never touches live entities; it draws from these frozen
copies, so nothing it does can feed back into the simulation.
"""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class RectView:
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class PlayerView:
    x: float
    y: float
    width: float
    height: float
    facing: int
    frame: int
    is_jumping: bool
    character: str
    health: int
    max_health: int
    lives: int
    invulnerable: bool
    visible: bool


@dataclass(frozen=True)
class EnemyView:
    x: float
    y: float
    width: float
    height: float
    variant: str
    direction: int
    frame: int


@dataclass(frozen=True)
class CollectibleView:
    x: float
    y: float
    width: float
    height: float
    frame: int


@dataclass(frozen=True)
class GoalView:
    x: float
    y: float
    width: float
    height: float
    frame: int
    is_reached: bool
    can_be_reached: bool
    castle: RectView
    barriers: Tuple[RectView, ...]


@dataclass(frozen=True)
class ParticleView:
    x: float
    y: float
    size: float
    color: tuple
    alpha: float


@dataclass(frozen=True)
class PopupView:
    x: float
    y: float
    text: str
    color: tuple
    alpha: float


@dataclass(frozen=True)
class GameSnapshot:
    """Everything the renderer may read for one frame."""
    frame: int
    loaded: bool
    started: bool
    running: bool
    paused: bool
    over: bool
    victory: bool
    muted: bool
    level: int
    score: int
    high_score: int
    credits_position: float
    player: Optional[PlayerView]
    platforms: Tuple[RectView, ...]
    enemies: Tuple[EnemyView, ...]
    collectibles: Tuple[CollectibleView, ...]
    goal: Optional[GoalView]
    particles: Tuple[ParticleView, ...]
    popups: Tuple[PopupView, ...]


def _rect(obj) -> RectView:
    return RectView(obj.x, obj.y, obj.width, obj.height)


def take_snapshot(state) -> GameSnapshot:
    """Copy the renderable parts of a GameState."""
    player = state.player
    player_view = None
    if player is not None:
        player_view = PlayerView(
            player.x, player.y, player.width, player.height,
            facing=int(player.facing),
            frame=player.frame,
            is_jumping=player.is_jumping,
            character=player.character.value,
            health=player.health,
            max_health=player.max_health,
            lives=player.lives,
            invulnerable=player.invulnerable,
            visible=player.blink_visible,
        )

    goal = state.goal
    goal_view = None
    if goal is not None:
        castle = goal.castle
        goal_view = GoalView(
            goal.x, goal.y, goal.width, goal.height,
            frame=goal.anim_frame,
            is_reached=goal.is_reached,
            can_be_reached=goal.can_be_reached,
            castle=_rect(castle),
            barriers=tuple(_rect(b) for b in castle.barriers),
        )

    particles = state.particles
    particle_views = ()
    popup_views = ()
    if particles is not None:
        particle_views = tuple(
            ParticleView(p.x, p.y, p.size, p.color, p.alpha) for p in particles.particles
        )
        popup_views = tuple(
            PopupView(p.x, p.y, p.text, p.color, p.alpha) for p in particles.popups
        )

    return GameSnapshot(
        frame=state.frame,
        loaded=state.loaded,
        started=state.started,
        running=state.running,
        paused=state.paused,
        over=state.over,
        victory=state.victory,
        muted=state.muted,
        level=state.current_level,
        score=state.score,
        high_score=state.high_score,
        credits_position=state.credits_position,
        player=player_view,
        platforms=tuple(_rect(p) for p in state.platforms),
        enemies=tuple(
            EnemyView(e.x, e.y, e.width, e.height, e.variant.value, e.direction, e.anim_frame)
            for e in state.enemies
        ),
        collectibles=tuple(
            CollectibleView(c.x, c.y, c.width, c.height, c.frame)
            for c in state.collectibles if not c.collected
        ),
        goal=goal_view,
        particles=particle_views,
        popups=popup_views,
    )
