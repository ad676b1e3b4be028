"""
asset_loader.py
---------------
Loads sprite images and reports completion to the game controller.

A missing or unreadable image is replaced by a 1x1 transparent placeholder
and still counts as loaded; the renderer then falls back to plain shapes.
"""

import os

import pygame

from princess_quest.core.debug.debug_logger import DebugLogger


IMAGE_ROOT = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(__file__))), "assets", "images")

IMAGES = {
    "hero": "sprites/hero.png",
    "frog": "sprites/frog.png",
    "enemies_sprite": "sprites/enemies.png",
    "princess_sprite": "sprites/princess.png",
    "castle": "png/castle.png",
}


class AssetLoader:
    """Image cache with an all-loaded flag and completion callback."""

    def __init__(self, image_root=IMAGE_ROOT, images=None):
        self.image_root = image_root
        self.manifest = dict(images or IMAGES)
        self.images = {}
        self.placeholders = set()
        self.loaded = 0
        self.total = len(self.manifest)

    @property
    def all_loaded(self) -> bool:
        return self.loaded >= self.total

    def load_all(self, on_complete=None):
        """
        Load every image in the manifest.

        Args:
            on_complete: Called once with no arguments after the last image
        """
        for name, route in self.manifest.items():
            self.images[name] = self._load(name, os.path.join(self.image_root, route))
            self.loaded += 1

        DebugLogger.init_sub(f"Images: {self.total - len(self.placeholders)}/{self.total} loaded")
        if on_complete is not None:
            on_complete()

    def get(self, name):
        """Loaded surface, or None when only a placeholder exists."""
        if name in self.placeholders:
            return None
        return self.images.get(name)

    def _load(self, name, path):
        try:
            image = pygame.image.load(path)
        except (pygame.error, FileNotFoundError, OSError) as e:
            DebugLogger.warn(f"Failed to load image '{name}': {e}", category="loading")
            self.placeholders.add(name)
            placeholder = pygame.Surface((1, 1), pygame.SRCALPHA)
            placeholder.fill((0, 0, 0, 0))
            return placeholder

        if pygame.display.get_surface() is not None:
            image = image.convert_alpha()
        return image
