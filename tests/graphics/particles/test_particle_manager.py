"""
test_particle_manager.py
------------------------
Explosions, score popups, lifetimes and the pause contract.
"""

import random

import pytest

from princess_quest.graphics.particles.particle_manager import (
    PARTICLE_PRESETS,
    Particle,
    ParticleSystem,
    ScorePopup,
)
from princess_quest.systems.level.level_generator import GeneratorConfig, LevelGenerator


def test_presets_loaded_with_tuples():
    assert {"explosion", "stomp", "rescue", "popup"} <= set(PARTICLE_PRESETS)
    assert all(isinstance(c, tuple) for c in PARTICLE_PRESETS["stomp"]["colors"])
    assert isinstance(PARTICLE_PRESETS["popup"]["color"], tuple)


def test_explosion_uses_preset_count(particles):
    particles.create_explosion(100, 100)
    assert particles.particle_count == PARTICLE_PRESETS["explosion"]["count"]


def test_explosion_overrides(particles):
    particles.create_explosion(100, 100, count=5, colors=[(1, 2, 3)])
    assert particles.particle_count == 5
    assert all(p.color == (1, 2, 3) for p in particles.particles)


def test_unknown_preset_falls_back_to_explosion(particles):
    particles.create_explosion(0, 0, preset="does-not-exist")
    assert particles.particle_count == PARTICLE_PRESETS["explosion"]["count"]


def test_particle_physics_and_alpha():
    p = Particle(0, 0, 1.0, -2.0, size=4.0, color=(255, 0, 0), life=30, gravity=0.1, shrink=0.5)
    assert p.alpha == 1.0
    assert p.update()
    assert (p.x, p.y) == (1.0, -2.0)
    assert p.vy == pytest.approx(-1.9)
    assert p.size == 2.0
    assert p.alpha == pytest.approx(29 / 30)


def test_particles_expire(particles):
    particles.create_explosion(0, 0, count=10)
    for _ in range(max(PARTICLE_PRESETS["explosion"]["life_range"])):
        particles.update()
    assert particles.particle_count == 0


def test_popup_drifts_up_and_expires(particles):
    particles.create_score_popup(50, 100, 20)
    popup = particles.popups[0]
    assert popup.text == "+20"
    particles.update()
    assert popup.y == 99
    for _ in range(39):
        particles.update()
    assert particles.popup_count == 0


def test_popup_message_text():
    popup = ScorePopup(0, 0, "Defeat all enemies first!", color=(255, 0, 0))
    assert popup.text == "Defeat all enemies first!"
    assert popup.alpha == 1.0


def test_pause_freezes_and_resume_restores_each_velocity(particles):
    particles.create_explosion(10, 10, count=8)
    particles.create_score_popup(10, 10, 20)
    before = [(p.x, p.y, p.vx, p.vy, p.life) for p in particles.particles]
    popup_vy = particles.popups[0].vy

    particles.pause()
    assert all(p.vx == 0 and p.vy == 0 for p in particles.particles)
    assert particles.popups[0].vy == 0

    for _ in range(5):
        particles.update()
    assert [(p.x, p.y, p.life) for p in particles.particles] == [(b[0], b[1], b[4]) for b in before]

    particles.resume()
    assert [(p.vx, p.vy) for p in particles.particles] == [(b[2], b[3]) for b in before]
    assert particles.popups[0].vy == popup_vy


def test_clear_drops_everything_and_unpauses(particles):
    particles.create_explosion(0, 0, count=3)
    particles.pause()
    particles.clear()
    assert particles.particle_count == 0
    assert not particles.paused


def test_effects_do_not_consume_generator_randomness():
    config = GeneratorConfig()
    quiet = LevelGenerator(seed=99, config=config)
    noisy = LevelGenerator(seed=99, config=config)
    effects = ParticleSystem(rng=random.Random(1))

    first = quiet.generate(2)
    effects.create_explosion(0, 0, count=50)
    second = noisy.generate(2)

    assert first.platforms == second.platforms
