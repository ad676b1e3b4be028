"""
level_generator.py
------------------
Procedural construction of a level's platforms, enemies and coins.

Guarantees
----------
- A ground platform spans the full width at a fixed height.
- BASE_PLATFORMS + level extra platforms with random width, x and y.
- min(level, MAX_ENEMIES) enemies, each standing on a platform wide enough
  to hold it with a safety margin on both sides (the first on the ground).
- The final level adds the goal, whose castle barriers are appended to the
  platform list before anything is placed.
- COLLECTIBLE_BASE + level * COLLECTIBLE_PER_LEVEL coins, each clear of every
  platform and within jump reach of one, or at a deterministic fallback spot
  above the ground when the retry budget runs out.

The generator owns its random.Random. No other system draws from it, so a
seed fully determines every layout.
"""

import random
from dataclasses import dataclass, field, fields
from typing import List, Optional, Tuple

from princess_quest.core.debug.debug_logger import DebugLogger
from princess_quest.core.runtime.game_settings import (
    CollectibleDefaults,
    Display,
    EnemyDefaults,
    Levels,
)
from princess_quest.core.services.config_manager import load_config
from princess_quest.entities.enemies.enemy import Enemy
from princess_quest.entities.entity_types import EnemyVariant
from princess_quest.entities.environment.platform import Platform
from princess_quest.entities.goal.goal_entity import GoalEntity
from princess_quest.entities.items.collectible import Collectible


# ===========================================================
# Configuration
# ===========================================================

@dataclass
class GeneratorConfig:
    """Tuning values for level generation (overridable via generator.json)."""
    ground_y: float = 450
    ground_height: float = 30
    base_platforms: int = 3
    platform_width_range: Tuple[float, float] = (100, 300)
    platform_y_range: Tuple[float, float] = (150, 400)
    platform_height: float = 20
    max_enemies: int = 5
    enemy_margin: float = 20
    collectible_base: int = 5
    collectible_per_level: int = 2
    max_jump_height: float = 225
    reach_margin: float = 30
    lift_above_platform: float = 5
    spawn_top_margin: float = 50
    spawn_bottom_margin: float = 100
    max_placement_attempts: int = 50
    fallback_start_x: float = 50
    fallback_spacing: float = 60

    @classmethod
    def from_config(cls, filename="generator.json"):
        """Build a config from the JSON file, falling back to the defaults above."""
        defaults = {f.name: getattr(cls, f.name) for f in fields(cls)}
        data = load_config(filename, default_dict=defaults)
        known = {f.name for f in fields(cls)}
        values = {}
        for key, value in data.items():
            if key not in known:
                DebugLogger.warn(f"Unknown generator setting '{key}' ignored", category="level")
                continue
            values[key] = tuple(value) if isinstance(value, list) else value
        return cls(**values)


@dataclass
class LevelLayout:
    """Everything generate() produces for one level."""
    level: int
    platforms: List[Platform] = field(default_factory=list)
    enemies: List[Enemy] = field(default_factory=list)
    collectibles: List[Collectible] = field(default_factory=list)
    goal: Optional[GoalEntity] = None
    fallback_count: int = 0

    @property
    def ground(self) -> Platform:
        return self.platforms[0]


# ===========================================================
# Generator
# ===========================================================

class LevelGenerator:
    """Builds level layouts from a seeded random source."""

    def __init__(self, seed=None, config=None, width=Display.WIDTH, height=Display.HEIGHT,
                 final_level=Levels.LAST):
        self.rng = random.Random(seed)
        self.config = config or GeneratorConfig.from_config()
        self.width = width
        self.height = height
        self.final_level = final_level
        DebugLogger.init_sub(f"LevelGenerator ready (seed={seed})")

    # ===========================================================
    # Public API
    # ===========================================================

    def generate(self, level: int) -> LevelLayout:
        """Create a fresh layout for the given level number."""
        if level < Levels.FIRST:
            raise ValueError(f"Level must be >= {Levels.FIRST}, got {level}")

        layout = LevelLayout(level=level)
        layout.platforms.append(self._make_ground())
        layout.platforms.extend(self._make_platforms(self.config.base_platforms + level))

        if level == self.final_level:
            layout.goal = GoalEntity()
            layout.platforms.extend(layout.goal.barriers)

        layout.enemies = self._place_enemies(layout.platforms, min(level, self.config.max_enemies))
        layout.collectibles = self._place_collectibles(layout, self._collectible_count(level))

        DebugLogger.action(
            f"Level {level}: {len(layout.platforms)} platforms, "
            f"{len(layout.enemies)} enemies, {len(layout.collectibles)} coins "
            f"({layout.fallback_count} fallback)",
            category="level"
        )
        return layout

    def populate(self, state, level: int) -> LevelLayout:
        """Generate a level and install it into the session state."""
        layout = self.generate(level)
        state.current_level = level
        state.platforms = layout.platforms
        state.enemies = layout.enemies
        state.collectibles = layout.collectibles
        state.goal = layout.goal
        return layout

    def is_reachable(self, item, platforms) -> bool:
        """Within jump height above, and roughly over, at least one platform."""
        cfg = self.config
        for p in platforms:
            if (item.right > p.left - cfg.reach_margin and
                    item.left < p.right + cfg.reach_margin and
                    p.top - cfg.max_jump_height < item.y < p.top):
                return True
        return False

    def fallback_position(self, index: int, ground: Platform) -> Tuple[float, float]:
        """Deterministic spot just above the ground for the index-th coin."""
        cfg = self.config
        span = max(1.0, self.width - CollectibleDefaults.WIDTH - cfg.fallback_start_x)
        x = cfg.fallback_start_x + (index * cfg.fallback_spacing) % span
        y = ground.top - CollectibleDefaults.HEIGHT - cfg.lift_above_platform
        return x, y

    # ===========================================================
    # Platforms
    # ===========================================================

    def _make_ground(self) -> Platform:
        return Platform(0, self.config.ground_y, self.width, self.config.ground_height)

    def _make_platforms(self, count: int) -> List[Platform]:
        cfg = self.config
        rng = self.rng
        platforms = []
        for _ in range(count):
            width = rng.uniform(*cfg.platform_width_range)
            x = rng.uniform(0, max(0.0, self.width - width))
            y = rng.uniform(*cfg.platform_y_range)
            platforms.append(Platform(x, y, width, cfg.platform_height))
        return platforms

    # ===========================================================
    # Enemies
    # ===========================================================

    def _can_hold_enemy(self, platform: Platform) -> bool:
        return platform.width > EnemyDefaults.WIDTH + 2 * self.config.enemy_margin

    def _place_enemies(self, platforms, count: int) -> List[Enemy]:
        """First enemy on the ground, the rest on random eligible platforms."""
        margin = self.config.enemy_margin
        eligible = [p for p in platforms if self._can_hold_enemy(p)]
        if not eligible:
            DebugLogger.warn("No platform wide enough for enemies", category="level")
            return []

        variants = list(EnemyVariant)
        enemies = []
        for i in range(count):
            platform = eligible[0] if i == 0 else self.rng.choice(eligible)
            available = platform.width - EnemyDefaults.WIDTH - 2 * margin
            x = platform.left + margin + self.rng.uniform(0, available)
            y = platform.top - EnemyDefaults.HEIGHT
            enemies.append(Enemy(x, y, variant=variants[i % len(variants)]))
        return enemies

    # ===========================================================
    # Collectibles
    # ===========================================================

    def _collectible_count(self, level: int) -> int:
        return self.config.collectible_base + level * self.config.collectible_per_level

    def _place_collectibles(self, layout: LevelLayout, count: int) -> List[Collectible]:
        items = []
        for i in range(count):
            item = Collectible()
            if not self._try_place(item, layout.platforms):
                item.pos.update(self.fallback_position(i, layout.ground))
                layout.fallback_count += 1
                DebugLogger.trace(f"Coin {i} placed at fallback {tuple(item.pos)}", category="level")
            items.append(item)
        return items

    def _try_place(self, item, platforms) -> bool:
        """Sample positions until one is clear of every platform and reachable."""
        cfg = self.config
        rng = self.rng
        max_x = self.width - item.width
        max_y = self.height - cfg.spawn_bottom_margin - item.height

        for _ in range(cfg.max_placement_attempts):
            item.pos.update(
                rng.uniform(0, max_x),
                rng.uniform(cfg.spawn_top_margin, max_y),
            )

            # Inside a platform: rest just above it instead
            for p in platforms:
                if p.contains(item):
                    item.pos.y = p.top - item.height - cfg.lift_above_platform
                    break

            if any(p.contains(item) for p in platforms):
                continue
            if self.is_reachable(item, platforms):
                return True

        return False
