"""
game_state.py
-------------
Mutable container for one simulation session.

Only GameController (and the systems it passes the state to) mutate it.
There is no module-level instance; each controller owns its own.
"""

from princess_quest.core.runtime.game_settings import Credits, Levels


class GameState:
    """Flags, counters and entity collections for one session."""

    def __init__(self):
        # Lifecycle flags
        self.loaded = False
        self.started = False
        self.running = False
        self.paused = False
        self.over = False
        self.victory = False
        self.muted = False

        # Pause bookkeeping (tick indices)
        self.pause_transitioning = False
        self.pause_transition_started = 0
        self.last_pause_change = -10 ** 9

        # Progress
        self.frame = 0
        self.current_level = Levels.FIRST
        self.score = 0
        self.high_score = 0

        # Entities
        self.player = None
        self.platforms = []
        self.enemies = []
        self.collectibles = []
        self.goal = None
        self.particles = None

        # Credits scroll (victory screen)
        self.credits_position = Credits.START_POSITION
        self.credits_speed = Credits.SPEED
        self.credits_paused = False

    # ===========================================================
    # Score
    # ===========================================================
    def add_score(self, amount: int):
        """Add to current score and update high score."""
        self.score += amount
        if self.score > self.high_score:
            self.high_score = self.score

    # ===========================================================
    # Queries
    # ===========================================================
    @property
    def is_final_level(self) -> bool:
        return self.current_level >= Levels.LAST

    @property
    def all_collected(self) -> bool:
        return all(item.collected for item in self.collectibles)

    def reset_progress(self):
        """Back to level one with no score. Entities are rebuilt by the caller."""
        self.score = 0
        self.current_level = Levels.FIRST
        self.over = False
        self.victory = False
        self.platforms = []
        self.enemies = []
        self.collectibles = []
        self.goal = None
        self.credits_position = Credits.START_POSITION
        self.credits_paused = False
