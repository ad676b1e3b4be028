"""
game_controller.py
------------------
The game state machine.

States
------
Loading -> Idle -> Running <-> Paused -> {GameOver | Victory} -> restart -> Running

GameController owns one GameState and is the only public way to change it.
Adapters (game loop, renderer, audio) observe through read-only properties,
snapshots and events.

Per-tick order
--------------
tick() advances the frame counter and tick-counted timers, then calls
update(), which (only while running) advances every entity, resolves
collisions and checks for level completion, in that order.
"""

from princess_quest.core.debug.debug_logger import DebugLogger
from princess_quest.core.runtime.game_settings import (
    Display,
    Levels,
    PlayerDefaults,
    Sounds,
    Timing,
)
from princess_quest.core.runtime.game_state import GameState
from princess_quest.core.runtime.snapshot import take_snapshot
from princess_quest.core.services.event_manager import (
    EventManager,
    LevelStartedEvent,
    MusicEvent,
    MuteEvent,
)
from princess_quest.core.services.input_manager import NO_INPUT
from princess_quest.entities.player.player_core import Player
from princess_quest.graphics.particles.particle_manager import ParticleSystem
from princess_quest.systems.collision.collision_manager import resolve_collisions
from princess_quest.systems.level.level_generator import LevelGenerator


QUIT_PROMPT = "Are you sure you want to quit? Your progress will be lost."


def _confirm_without_prompt(message):
    return True


class GameController:
    """Owns the session state and drives its lifecycle transitions."""

    def __init__(self, events=None, generator=None, confirm=None, particles=None,
                 width=Display.WIDTH, height=Display.HEIGHT, seed=None):
        """
        Args:
            events: EventManager for cues and notifications (one is created if omitted)
            generator: LevelGenerator (one seeded with `seed` is created if omitted)
            confirm: callable(message) -> bool used by quit()
            particles: ParticleSystem to own (tests inject a seeded one)
            width, height: Playfield bounds
            seed: Seed for the default generator
        """
        self.events = events or EventManager()
        self.generator = generator or LevelGenerator(seed=seed, width=width, height=height)
        self.confirm = confirm or _confirm_without_prompt
        self.width = width
        self.height = height

        self.state = GameState()
        self.state.particles = particles or ParticleSystem()

        DebugLogger.init_entry("GameController")

    # ===========================================================
    # Read-only Accessors
    # ===========================================================
    @property
    def is_loaded(self) -> bool:
        return self.state.loaded

    @property
    def is_started(self) -> bool:
        return self.state.started

    @property
    def is_running(self) -> bool:
        return self.state.running

    @property
    def is_paused(self) -> bool:
        return self.state.paused

    @property
    def is_over(self) -> bool:
        return self.state.over

    @property
    def is_victory(self) -> bool:
        return self.state.victory

    @property
    def is_muted(self) -> bool:
        return self.state.muted

    @property
    def score(self) -> int:
        return self.state.score

    @property
    def level(self) -> int:
        return self.state.current_level

    def snapshot(self):
        """Frozen view of the session for the renderer."""
        return take_snapshot(self.state)

    # ===========================================================
    # Loading & Setup
    # ===========================================================
    def mark_loaded(self):
        """Asset loader completion callback."""
        if self.state.loaded:
            return
        self.state.loaded = True
        DebugLogger.state("Assets loaded - ready to start")

    def setup(self):
        """Build a fresh player and the first level. Progress is reset."""
        state = self.state
        state.reset_progress()
        state.player = Player(events=self.events)
        state.particles.clear()
        self._load_level(Levels.FIRST)

    def _load_level(self, level):
        state = self.state
        state.player.reset(PlayerDefaults.SPAWN_X, PlayerDefaults.SPAWN_Y)
        self.generator.populate(state, level)
        self.events.dispatch(LevelStartedEvent(level=level, is_final=state.is_final_level))
        DebugLogger.state(f"Level {level} loaded")

    # ===========================================================
    # Lifecycle Transitions
    # ===========================================================
    def start(self, skip_to_final=False):
        """Enter Running. Ignored until assets are loaded."""
        state = self.state
        if not state.loaded:
            DebugLogger.trace("start() ignored - assets not loaded", category="game_state")
            return False

        if state.player is None:
            self.setup()

        state.started = True
        state.running = True
        state.paused = False
        state.over = False
        state.victory = False
        self.events.play(Sounds.BACKGROUND_MUSIC)

        if skip_to_final:
            self._load_level(Levels.LAST)

        DebugLogger.state(f"Game started on level {state.current_level}")
        return True

    def toggle_pause(self):
        """
        Pause or resume, freezing every moving entity.

        Ignored before start, after the session ends, while a previous
        toggle is still settling, or within the debounce window.

        Returns:
            bool: True if the pause state changed
        """
        state = self.state
        if not state.started or state.over or state.pause_transitioning:
            return False
        if state.frame - state.last_pause_change <= Timing.PAUSE_DEBOUNCE_TICKS:
            DebugLogger.trace("toggle_pause() debounced", category="game_state")
            return False

        state.pause_transitioning = True
        state.pause_transition_started = state.frame
        state.last_pause_change = state.frame
        state.paused = not state.paused
        state.running = not state.paused

        if state.paused:
            self.events.dispatch(MusicEvent(paused=True))
            state.player.pause()
            for enemy in state.enemies:
                enemy.pause()
            state.particles.pause()
        else:
            self.events.dispatch(MusicEvent(paused=False))
            state.player.resume()
            for enemy in state.enemies:
                enemy.resume()
            state.particles.resume()

        DebugLogger.state("Paused" if state.paused else "Resumed")
        return True

    def restart(self):
        """Back to level one with a fresh session, straight into Running."""
        state = self.state
        self.events.stop(Sounds.BACKGROUND_MUSIC)
        state.paused = False
        state.pause_transitioning = False
        self.setup()

        state.started = True
        state.running = True
        self.events.play(Sounds.BACKGROUND_MUSIC)
        DebugLogger.state("Game restarted")

    def quit(self):
        """
        Ask for confirmation, then return to Idle or carry on unchanged.

        Returns:
            bool: True if the session was abandoned
        """
        state = self.state
        if not state.started or state.over:
            return False

        was_paused = state.paused
        if not was_paused:
            state.paused = True
            state.running = False
            self.events.dispatch(MusicEvent(paused=True))

        if self.confirm(QUIT_PROMPT):
            self.events.stop(Sounds.BACKGROUND_MUSIC)
            self._reset_to_idle()
            DebugLogger.state("Quit confirmed - back to title")
            return True

        if not was_paused:
            state.paused = False
            state.running = True
            self.events.dispatch(MusicEvent(paused=False))
        DebugLogger.trace("Quit cancelled", category="game_state")
        return False

    def _reset_to_idle(self):
        state = self.state
        self.setup()
        state.started = False
        state.running = False
        state.paused = False
        state.pause_transitioning = False

    def toggle_credits(self):
        """Hold or continue the victory credits scroll. Victory only."""
        state = self.state
        if not state.victory:
            DebugLogger.trace("toggle_credits() ignored - no victory", category="game_state")
            return False
        state.credits_paused = not state.credits_paused
        DebugLogger.action("Credits held" if state.credits_paused else "Credits rolling", category="game_state")
        return True

    def toggle_mute(self):
        self.set_muted(not self.state.muted)

    def set_muted(self, muted):
        self.state.muted = bool(muted)
        self.events.dispatch(MuteEvent(muted=self.state.muted))

    # ===========================================================
    # Frame Cycle
    # ===========================================================
    def tick(self, input_state=NO_INPUT):
        """One external frame: timers first, then the simulation step."""
        state = self.state
        state.frame += 1

        if (state.pause_transitioning and
                state.frame - state.pause_transition_started >= Timing.PAUSE_TRANSITION_TICKS):
            state.pause_transitioning = False

        if state.victory and not state.credits_paused:
            state.credits_position += state.credits_speed

        self.update(input_state)

    def update(self, input_state=NO_INPUT):
        """Advance entities, resolve collisions, check completion. Running only."""
        state = self.state
        if not state.running or state.paused or state.over:
            return

        state.player.advance(input_state, self.width, self.height)
        for enemy in state.enemies:
            enemy.advance(self.width)
        for item in state.collectibles:
            item.advance()
        if state.goal is not None:
            state.goal.advance()
        state.particles.update()

        resolve_collisions(state, self.events)
        self.check_level_complete()

    def check_level_complete(self):
        """
        Advance when every coin is collected or every enemy is defeated.

        The final level never advances; it ends through the goal.
        """
        state = self.state
        if state.over or state.is_final_level:
            return False
        if not (state.all_collected or not state.enemies):
            return False

        self.events.play(Sounds.LEVEL_COMPLETE)
        self._load_level(state.current_level + 1)
        return True
