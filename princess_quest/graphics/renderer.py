"""
renderer.py
-----------
Draws a GameSnapshot onto a pygame surface.

Sprites are used when the asset loader has them; otherwise every entity is
drawn as a filled rectangle in its Palette color. Nothing here reads or
writes live simulation state.
"""

import pygame

from princess_quest.core.debug.debug_logger import DebugLogger
from princess_quest.core.runtime.game_settings import Display, Palette


CREDITS = (
    "Congratulations!",
    "The princess has been rescued.",
    "",
    "Thanks for playing Princess Quest",
    "",
    "Press R to play again",
)

ENEMY_SPRITE_ROW = {"goomba": 0, "koopa": 1, "ghost": 2}


class Renderer:
    """Immediate-mode drawing of one snapshot per frame."""

    def __init__(self, surface, assets=None, font=None):
        self.surface = surface
        self.assets = assets
        if not pygame.font.get_init():
            pygame.font.init()
        self.font = font or pygame.font.Font(None, 24)
        self.big_font = pygame.font.Font(None, 48)
        DebugLogger.init_entry("Renderer")

    # ===========================================================
    # Frame
    # ===========================================================
    def draw(self, snap):
        surface = self.surface
        surface.fill(Palette.SKY)

        for p in snap.platforms:
            pygame.draw.rect(surface, Palette.PLATFORM, self._rect(p))

        for c in snap.collectibles:
            pygame.draw.ellipse(surface, Palette.COIN, self._rect(c))

        for e in snap.enemies:
            self._draw_enemy(e)

        if snap.goal is not None:
            self._draw_goal(snap.goal)

        if snap.player is not None and snap.player.visible:
            self._draw_player(snap.player)

        self._draw_particles(snap)
        self._draw_hud(snap)
        self._draw_overlay(snap)

    # ===========================================================
    # Entities
    # ===========================================================
    def _sprite(self, name):
        return self.assets.get(name) if self.assets is not None else None

    def _draw_player(self, p):
        sheet = self._sprite(p.character)
        rect = self._rect(p)
        if sheet is None:
            color = Palette.FROG if p.character == "frog" else Palette.HERO
            pygame.draw.rect(self.surface, color, rect)
            return
        frame = sheet.subsurface(self._frame_area(sheet, p.frame, 0, p.width, p.height))
        if p.facing < 0:
            frame = pygame.transform.flip(frame, True, False)
        self.surface.blit(frame, rect)

    def _draw_enemy(self, e):
        sheet = self._sprite("enemies_sprite")
        rect = self._rect(e)
        if sheet is None:
            pygame.draw.rect(self.surface, Palette.ENEMY, rect)
            return
        row = ENEMY_SPRITE_ROW.get(e.variant, 0)
        self.surface.blit(sheet.subsurface(self._frame_area(sheet, e.frame, row, e.width, e.height)), rect)

    def _draw_goal(self, g):
        castle = self._sprite("castle")
        castle_rect = self._rect(g.castle)
        if castle is None:
            pygame.draw.rect(self.surface, Palette.PLATFORM, castle_rect, width=3)
        else:
            self.surface.blit(pygame.transform.scale(castle, castle_rect.size), castle_rect)
        for b in g.barriers:
            pygame.draw.rect(self.surface, Palette.PLATFORM, self._rect(b))

        sheet = self._sprite("princess_sprite")
        if sheet is None:
            pygame.draw.rect(self.surface, Palette.PRINCESS, self._rect(g))
        else:
            self.surface.blit(sheet.subsurface(self._frame_area(sheet, g.frame, 0, g.width, g.height)), self._rect(g))

    def _draw_particles(self, snap):
        for p in snap.particles:
            radius = max(1, int(p.size))
            dot = pygame.Surface((radius * 2, radius * 2), pygame.SRCALPHA)
            pygame.draw.circle(dot, (*p.color, int(255 * p.alpha)), (radius, radius), radius)
            self.surface.blit(dot, (int(p.x) - radius, int(p.y) - radius))

        for p in snap.popups:
            text = self.font.render(p.text, True, p.color)
            text.set_alpha(int(255 * p.alpha))
            self.surface.blit(text, text.get_rect(center=(int(p.x), int(p.y))))

    # ===========================================================
    # HUD & Overlays
    # ===========================================================
    def _draw_hud(self, snap):
        if not snap.started:
            return
        self._text(f"Score: {snap.score}", (10, 10))
        self._text(f"Level: {snap.level}", (10, 34))
        if snap.player is not None:
            self._text(f"Lives: {snap.player.lives}", (10, 58))
            bar = pygame.Rect(Display.WIDTH - 160, 10, 150, 14)
            fill = bar.copy()
            fill.width = int(bar.width * snap.player.health / snap.player.max_health)
            pygame.draw.rect(self.surface, Palette.SHADOW, bar)
            pygame.draw.rect(self.surface, Palette.HEALTH, fill)
        if snap.muted:
            self._text("Muted", (Display.WIDTH - 70, 30))

    def _draw_overlay(self, snap):
        center_x = Display.WIDTH // 2
        center_y = Display.HEIGHT // 2

        if not snap.loaded:
            self._title("Loading...", (center_x, center_y))
        elif not snap.started:
            self._title("Princess Quest", (center_x, center_y - 40))
            self._text("Press ENTER to start", (center_x, center_y + 10), center=True)
        elif snap.victory:
            for i, line in enumerate(CREDITS):
                y = Display.HEIGHT - snap.credits_position + i * 32
                self._text(line, (center_x, y), center=True)
        elif snap.over:
            self._title("GAME OVER", (center_x, center_y - 20))
            self._text(f"Final score: {snap.score}  -  Press R to restart", (center_x, center_y + 20), center=True)
        elif snap.paused:
            self._title("PAUSED", (center_x, center_y))

    def _text(self, message, pos, center=False):
        shadow = self.font.render(message, True, Palette.SHADOW)
        text = self.font.render(message, True, Palette.TEXT)
        rect = text.get_rect(center=pos) if center else text.get_rect(topleft=pos)
        self.surface.blit(shadow, rect.move(2, 2))
        self.surface.blit(text, rect)

    def _title(self, message, pos):
        text = self.big_font.render(message, True, Palette.TEXT)
        self.surface.blit(text, text.get_rect(center=pos))

    # ===========================================================
    # Helpers
    # ===========================================================
    @staticmethod
    def _rect(obj):
        return pygame.Rect(int(obj.x), int(obj.y), int(obj.width), int(obj.height))

    @staticmethod
    def _frame_area(sheet, column, row, width, height):
        """Clamp a sprite-sheet cell to the sheet bounds."""
        sheet_w, sheet_h = sheet.get_size()
        x = min(column * width, max(0, sheet_w - width))
        y = min(row * height, max(0, sheet_h - height))
        return pygame.Rect(x, y, min(width, sheet_w), min(height, sheet_h))
