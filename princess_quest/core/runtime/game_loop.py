"""
game_loop.py
------------
Defines the GameLoop class that wires pygame to the simulation.

Responsibilities
----------------
- Initialize pygame, the window and every adapter (audio, assets, input, renderer)
- Translate one-shot key presses into controller commands
- Sample held input once per frame and tick the controller
- Provide the modal yes/no prompt used when quitting a run
"""

import pygame

from princess_quest.audio.sound_manager import SoundManager
from princess_quest.core.debug.debug_logger import DebugLogger
from princess_quest.core.runtime.game_controller import GameController
from princess_quest.core.runtime.game_settings import Display, Palette
from princess_quest.core.services.asset_loader import AssetLoader
from princess_quest.core.services.event_manager import EventManager
from princess_quest.core.services.input_manager import InputManager
from princess_quest.graphics.renderer import Renderer


YES_KEYS = (pygame.K_y, pygame.K_RETURN)
NO_KEYS = (pygame.K_n, pygame.K_ESCAPE)


class GameLoop:
    """Core runtime controller that manages the main loop."""

    def __init__(self, seed=None):
        DebugLogger.section("Initializing GameLoop")

        pygame.init()
        pygame.font.init()
        pygame.display.set_caption(Display.CAPTION)
        self.screen = pygame.display.set_mode((Display.WIDTH, Display.HEIGHT))
        self.clock = pygame.time.Clock()
        DebugLogger.init_entry("Pygame")

        self.events = EventManager()
        self.sound = SoundManager(self.events)
        self.input_manager = InputManager()
        self.assets = AssetLoader()
        self.controller = GameController(events=self.events, confirm=self.confirm, seed=seed)
        self.renderer = Renderer(self.screen, self.assets)

        self.assets.load_all(on_complete=self.controller.mark_loaded)
        self.running = True

    # ===========================================================
    # Core Runtime Loop
    # ===========================================================
    def run(self):
        """Event -> tick -> render, once per frame, until the window closes."""
        DebugLogger.section("Game Loop")

        while self.running:
            self._handle_events()
            if not self.running:
                break
            self.controller.tick(self.input_manager.update())
            self._draw()
            self.clock.tick(Display.FPS)

        pygame.quit()
        DebugLogger.system("Pygame terminated")

    # ===========================================================
    # Event Handling
    # ===========================================================
    def _handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                DebugLogger.action("Quit signal received")
                return
            if event.type == pygame.KEYDOWN:
                self._handle_key(event)

    def _handle_key(self, event):
        controller = self.controller
        key = event.key

        if key == pygame.K_RETURN:
            if not controller.is_started:
                controller.start(skip_to_final=bool(event.mod & pygame.KMOD_SHIFT))
            elif controller.is_over:
                controller.restart()
        elif key in (pygame.K_p, pygame.K_ESCAPE):
            if controller.is_victory:
                controller.toggle_credits()
            else:
                controller.toggle_pause()
        elif key == pygame.K_q:
            if controller.quit():
                self.input_manager.reset()
        elif key == pygame.K_r:
            if controller.is_over:
                controller.restart()
        elif key == pygame.K_m:
            controller.toggle_mute()

    # ===========================================================
    # Confirmation Prompt
    # ===========================================================
    def confirm(self, message):
        """Block on a yes/no overlay. Closing the window counts as no."""
        backdrop = self.screen.copy()
        shade = pygame.Surface(self.screen.get_size(), pygame.SRCALPHA)
        shade.fill((0, 0, 0, 160))
        font = pygame.font.Font(None, 28)
        lines = (message, "[Y] Yes    [N] No")

        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                    return False
                if event.type == pygame.KEYDOWN:
                    if event.key in YES_KEYS:
                        return True
                    if event.key in NO_KEYS:
                        return False

            self.screen.blit(backdrop, (0, 0))
            self.screen.blit(shade, (0, 0))
            for i, line in enumerate(lines):
                text = font.render(line, True, Palette.TEXT)
                self.screen.blit(text, text.get_rect(center=(Display.WIDTH // 2, Display.HEIGHT // 2 + i * 36)))
            pygame.display.flip()
            self.clock.tick(Display.FPS)

    # ===========================================================
    # Rendering
    # ===========================================================
    def _draw(self):
        self.renderer.draw(self.controller.snapshot())
        pygame.display.flip()
