"""
particle_manager.py
-------------------
Transient visual feedback: explosion particles and floating score popups.

Usage:
    particles = ParticleSystem()
    particles.create_explosion(x, y, preset="stomp")
    particles.create_score_popup(x, y, 20)
    particles.update()      # once per tick

Pause Contract
--------------
pause() records every particle's and popup's velocity by index and zeroes
them; resume() writes the recorded values back unchanged. update() is a
no-op while paused, so lifetimes freeze along with motion.
"""

import math
import random

from princess_quest.core.debug.debug_logger import DebugLogger
from princess_quest.core.services.config_manager import load_config


# ===========================================================
# Load Presets from JSON
# ===========================================================

_DEFAULT_BURST = {
    "count": 20,
    "colors": [(255, 0, 0), (255, 119, 0), (255, 255, 0)],
    "speed_range": (1.0, 4.0),
    "size_range": (3.0, 6.0),
    "life_range": (20, 40),
    "gravity": 0.1,
    "shrink": 0.97,
}

DEFAULT_PRESETS = {
    "explosion": dict(_DEFAULT_BURST),
    "stomp": dict(_DEFAULT_BURST, count=30),
    "rescue": dict(_DEFAULT_BURST, count=30),
    "popup": {"life": 40, "velocity_y": -1.0, "color": (255, 255, 255)},
}

PARTICLE_ALPHA_LIFE = 30


def _load_presets():
    """Load particle presets from config, convert lists to tuples."""
    data = load_config("particles.json", default_dict=DEFAULT_PRESETS)

    # JSON can't store tuples
    for preset in data.values():
        if "colors" in preset:
            preset["colors"] = [tuple(c) for c in preset["colors"]]
        for key in ("speed_range", "size_range", "life_range", "color"):
            if key in preset:
                preset[key] = tuple(preset[key])

    return data


PARTICLE_PRESETS = _load_presets()


# ===========================================================
# Single Particle
# ===========================================================

class Particle:
    """Explosion fragment with gravity, shrink and a tick lifetime."""

    __slots__ = ("x", "y", "vx", "vy", "size", "color", "life", "gravity", "shrink")

    def __init__(self, x, y, vx, vy, size, color, life, gravity=0.1, shrink=0.97):
        self.x = x
        self.y = y
        self.vx = vx
        self.vy = vy
        self.size = size
        self.color = color
        self.life = life
        self.gravity = gravity
        self.shrink = shrink

    def update(self):
        """Advance one tick. Returns False once the particle has expired."""
        self.x += self.vx
        self.y += self.vy
        self.vy += self.gravity
        self.life -= 1
        self.size *= self.shrink
        return self.life > 0

    @property
    def alpha(self):
        return max(0.0, min(1.0, self.life / PARTICLE_ALPHA_LIFE))

    @property
    def alive(self):
        return self.life > 0


# ===========================================================
# Score Popup
# ===========================================================

class ScorePopup:
    """Floating text that drifts upward and fades out."""

    __slots__ = ("x", "y", "value", "color", "vy", "life", "max_life")

    def __init__(self, x, y, value, color=(255, 255, 255), life=40, vy=-1.0):
        self.x = x
        self.y = y
        self.value = value
        self.color = color
        self.vy = vy
        self.life = life
        self.max_life = life

    def update(self):
        self.y += self.vy
        self.life -= 1
        return self.life > 0

    @property
    def text(self):
        """Numbers render as '+N', messages as-is."""
        if isinstance(self.value, (int, float)):
            return f"+{self.value}"
        return str(self.value)

    @property
    def alpha(self):
        return max(0.0, min(1.0, self.life / self.max_life))


# ===========================================================
# Particle System
# ===========================================================

class ParticleSystem:
    """
    Owns all live particles and popups for one session.

    Randomness comes from a private random.Random so effects never disturb
    the level generator's sequence.
    """

    def __init__(self, rng=None, presets=None):
        """
        Args:
            rng: Optional random.Random (tests pass a seeded one)
            presets: Optional preset table, defaults to particles.json
        """
        self.rng = rng or random.Random()
        self.presets = presets or PARTICLE_PRESETS
        self.particles = []
        self.popups = []
        self.paused = False
        self._saved_particles = None
        self._saved_popups = None

    # ===========================================================
    # Emission
    # ===========================================================

    def create_explosion(self, x, y, count=None, colors=None, preset="explosion"):
        """
        Emit a radial burst at (x, y).

        Args:
            count: Override the preset's particle count
            colors: Override the preset's color list
            preset: Key into the preset table
        """
        cfg = self.presets.get(preset) or self.presets["explosion"]
        count = cfg["count"] if count is None else count
        colors = colors or cfg["colors"]
        rng = self.rng

        for _ in range(count):
            angle = rng.uniform(0, math.tau)
            speed = rng.uniform(*cfg["speed_range"])
            self.particles.append(Particle(
                x, y,
                math.cos(angle) * speed,
                math.sin(angle) * speed,
                size=rng.uniform(*cfg["size_range"]),
                color=rng.choice(colors),
                life=rng.randint(*cfg["life_range"]),
                gravity=cfg.get("gravity", 0.1),
                shrink=cfg.get("shrink", 0.97),
            ))

        DebugLogger.trace(f"Explosion '{preset}' x{count} at ({x:.0f}, {y:.0f})", category="particles")

    def create_score_popup(self, x, y, value, color=None):
        """Float a score value or short message upward from (x, y)."""
        cfg = self.presets.get("popup", DEFAULT_PRESETS["popup"])
        self.popups.append(ScorePopup(
            x, y, value,
            color=tuple(color) if color else cfg["color"],
            life=cfg["life"],
            vy=cfg["velocity_y"],
        ))

    # ===========================================================
    # Update
    # ===========================================================

    def update(self):
        """Advance every effect one tick and drop expired ones."""
        if self.paused:
            return
        self.particles = [p for p in self.particles if p.update()]
        self.popups = [p for p in self.popups if p.update()]

    # ===========================================================
    # Pause Contract
    # ===========================================================

    def pause(self):
        """Freeze all effects, remembering each velocity by index."""
        if self.paused:
            return
        self.paused = True
        self._saved_particles = [(p.vx, p.vy) for p in self.particles]
        self._saved_popups = [p.vy for p in self.popups]
        for p in self.particles:
            p.vx = 0
            p.vy = 0
        for p in self.popups:
            p.vy = 0
        DebugLogger.trace(f"Particles paused ({len(self.particles)} live)", category="particles")

    def resume(self):
        """Restore the velocities recorded by pause()."""
        if not self.paused:
            return
        self.paused = False
        if self._saved_particles is not None:
            for p, (vx, vy) in zip(self.particles, self._saved_particles):
                p.vx = vx
                p.vy = vy
        if self._saved_popups is not None:
            for p, vy in zip(self.popups, self._saved_popups):
                p.vy = vy
        self._saved_particles = None
        self._saved_popups = None

    # ===========================================================
    # Lifecycle
    # ===========================================================

    def clear(self):
        """Drop every effect (used on restart)."""
        self.particles.clear()
        self.popups.clear()
        self.paused = False
        self._saved_particles = None
        self._saved_popups = None

    @property
    def particle_count(self):
        return len(self.particles)

    @property
    def popup_count(self):
        return len(self.popups)
