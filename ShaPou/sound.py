import os
import logging

import pygame

from constants import ASSET_DIR, MUSIC_VOLUME

logger = logging.getLogger(__name__)

MUSIC_EXTENSIONS = (".mp3", ".ogg", ".wav")


class SoundManager:
    """Background music service with a safe no-op fallback.

    Only the presentation layer talks to this; the engine never does.

    Intended behavior:
      - Attempt mixer init and mark `enabled` accordingly
      - `play(track, looped)` starts a track unless that track is already playing
      - `stop()` and `set_volume()` are always safe, even in headless tests
      - `last_played` records the most recent request for diagnostics
    """
    def __init__(self, asset_dir=ASSET_DIR, volume=MUSIC_VOLUME):
        self.asset_dir = asset_dir
        self.volume = max(0.0, min(1.0, volume))
        self.enabled = False
        self.current_track = None
        self.last_played = None
        try:
            pygame.mixer.init()
            self.enabled = True
        except pygame.error as e:
            logger.warning("Audio disabled, mixer init failed: %s", e)

    def find_track(self, track):
        """Try the asset root, then a sounds/ subfolder, for each known extension."""
        for folder in (self.asset_dir, os.path.join(self.asset_dir, "sounds")):
            for ext in MUSIC_EXTENSIONS:
                path = os.path.join(folder, track + ext)
                if os.path.exists(path):
                    return path
        return None

    def play(self, track, looped=True):
        self.last_played = track
        if self.current_track == track:
            logger.debug("Track '%s' already playing", track)
            return
        if not self.enabled:
            return

        path = self.find_track(track)
        if path is None:
            logger.warning("Could not find music file '%s' in %s", track, self.asset_dir)
            return
        try:
            pygame.mixer.music.load(path)
            pygame.mixer.music.set_volume(self.volume)
            pygame.mixer.music.play(-1 if looped else 0)
            self.current_track = track
            logger.info("Playing '%s' (looped=%s)", path, looped)
        except pygame.error as e:
            logger.warning("Failed to play '%s': %s", path, e)

    def stop(self):
        self.current_track = None
        if not self.enabled:
            return
        pygame.mixer.music.stop()

    def set_volume(self, volume):
        self.volume = max(0.0, min(1.0, volume))
        if self.enabled:
            pygame.mixer.music.set_volume(self.volume)

    def is_playing(self):
        return self.enabled and self.current_track is not None and pygame.mixer.music.get_busy()
