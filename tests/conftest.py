"""
conftest.py
-----------
Shared pytest configuration and fixtures for Princess Quest tests.

Contains:
- Headless SDL setup so pygame imports without a window or sound card
- Event, generator and controller fixtures
- Helpers for building hand-made levels and stepping the simulation
"""

import os
import random
import sys

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

# Make the package importable without installing it
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from princess_quest.core.debug.debug_logger import LoggerConfig
from princess_quest.core.runtime.game_controller import GameController
from princess_quest.core.runtime.game_state import GameState
from princess_quest.core.services.event_manager import (
    CollectibleCollectedEvent,
    EnemyDefeatedEvent,
    EventManager,
    GameOverEvent,
    LevelStartedEvent,
    MusicEvent,
    MuteEvent,
    PlayerDamagedEvent,
    SoundEvent,
)
from princess_quest.core.services.input_manager import NO_INPUT
from princess_quest.entities.enemies.enemy import Enemy
from princess_quest.entities.environment.platform import Platform
from princess_quest.entities.items.collectible import Collectible
from princess_quest.entities.player.player_core import Player
from princess_quest.graphics.particles.particle_manager import ParticleSystem
from princess_quest.systems.level.level_generator import GeneratorConfig, LevelGenerator


GROUND = Platform(0, 450, 800, 30)

RECORDED_EVENTS = (
    SoundEvent, MusicEvent, MuteEvent, EnemyDefeatedEvent, CollectibleCollectedEvent,
    PlayerDamagedEvent, LevelStartedEvent, GameOverEvent,
)


# ===========================================================
# Event Recording
# ===========================================================

class EventRecorder:
    """Subscribes to every event type and keeps them in order."""

    def __init__(self, events):
        self.received = []
        for event_type in RECORDED_EVENTS:
            events.subscribe(event_type, self.received.append)

    @property
    def cues(self):
        """Names of sounds requested to play."""
        return [e.name for e in self.received if isinstance(e, SoundEvent) and not e.stop]

    @property
    def stopped(self):
        return [e.name for e in self.received if isinstance(e, SoundEvent) and e.stop]

    def of_type(self, event_type):
        return [e for e in self.received if isinstance(e, event_type)]

    def clear(self):
        self.received.clear()


# ===========================================================
# Fixtures
# ===========================================================

@pytest.fixture(autouse=True)
def quiet_logger():
    """Keep test output readable."""
    previous = LoggerConfig.ENABLE_LOGGING
    LoggerConfig.ENABLE_LOGGING = False
    yield
    LoggerConfig.ENABLE_LOGGING = previous


@pytest.fixture
def events():
    return EventManager()


@pytest.fixture
def recorder(events):
    return EventRecorder(events)


@pytest.fixture
def generator_config():
    return GeneratorConfig()


@pytest.fixture
def generator(generator_config):
    return LevelGenerator(seed=1234, config=generator_config)


@pytest.fixture
def particles():
    return ParticleSystem(rng=random.Random(7))


@pytest.fixture
def controller(events, generator, particles):
    """Loaded but not started."""
    game = GameController(events=events, generator=generator, particles=particles)
    game.mark_loaded()
    return game


@pytest.fixture
def running(controller):
    controller.start()
    return controller


@pytest.fixture
def arena(events, particles):
    """Bare session state: player resting on the ground, nothing else."""
    state = GameState()
    state.player = Player(200, GROUND.top - 32, events=events)
    state.platforms = [GROUND]
    state.particles = particles
    state.running = True
    state.started = True
    return state


# ===========================================================
# Helpers
# ===========================================================

def install_level(controller, enemies=None, collectibles=None, platforms=None, goal=None):
    """
    Replace the generated level with a hand-made one.

    Omitted enemies or coins are replaced by a single parked one far from
    the action, so the level does not complete on its own.
    """
    state = controller.state
    if enemies is None:
        enemies = [Enemy(600, 60, speed=0)]
    state.platforms = list(platforms) if platforms is not None else [GROUND]
    state.enemies = list(enemies)
    if collectibles is None:
        collectibles = [Collectible(20, 60)]
    state.collectibles = list(collectibles)
    state.goal = goal
    return state


def tick_n(controller, n, input_state=NO_INPUT):
    for _ in range(n):
        controller.tick(input_state)


# Pytest configuration
def pytest_configure(config):
    """Custom pytest configuration."""
    config.addinivalue_line("markers", "integration: end-to-end scenarios through GameController")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")


def pytest_collection_modifyitems(config, items):
    """Mark everything outside the scenario module as a unit test."""
    for item in items:
        if "scenario" not in item.nodeid:
            item.add_marker(pytest.mark.unit)
