import os
import logging

import pygame

from constants import ASSET_DIR

logger = logging.getLogger(__name__)


class AssetLibrary:
    """Image lookup that never fails: missing art becomes a flat coloured block."""

    def __init__(self, asset_dir=ASSET_DIR):
        self.asset_dir = asset_dir
        self.cache = {}
        self.missing = set()

    def path_for(self, name):
        for folder in (self.asset_dir, os.path.join(self.asset_dir, "images")):
            path = os.path.join(folder, name + ".png")
            if os.path.exists(path):
                return path
        return None

    def image(self, name, size, fallback_color=(255, 165, 0)):
        key = (name, tuple(size))
        if key in self.cache:
            return self.cache[key]

        surface = None
        path = self.path_for(name)
        if path is not None:
            try:
                surface = pygame.transform.smoothscale(pygame.image.load(path), size)
            except (pygame.error, ValueError) as e:
                logger.warning("Could not load image '%s': %s", path, e)

        if surface is None:
            if name not in self.missing:
                self.missing.add(name)
                logger.warning("Image '%s' not found, using fallback", name)
            surface = pygame.Surface(size)
            surface.fill(fallback_color)

        self.cache[key] = surface
        return surface

    def has(self, name):
        return self.path_for(name) is not None
