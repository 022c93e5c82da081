import os
import wave

os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame

from sound import SoundManager


def write_silence(path, seconds=0.2, rate=22050):
    with wave.open(str(path), "wb") as w:
        w.setnchannels(1)
        w.setsampwidth(2)
        w.setframerate(rate)
        w.writeframes(b"\x00\x00" * int(seconds * rate))


def test_missing_track_is_a_noop(tmp_path):
    sounds = SoundManager(asset_dir=str(tmp_path))
    sounds.play("music-game")
    assert sounds.last_played == "music-game"
    assert sounds.current_track is None
    sounds.stop()


def test_finds_track_in_sounds_folder(tmp_path):
    (tmp_path / "sounds").mkdir()
    write_silence(tmp_path / "sounds" / "music-game.wav")
    sounds = SoundManager(asset_dir=str(tmp_path))
    assert sounds.find_track("music-game").endswith("music-game.wav")


def test_play_twice_keeps_current_track(tmp_path):
    write_silence(tmp_path / "music-game.wav")
    sounds = SoundManager(asset_dir=str(tmp_path))
    sounds.play("music-game", looped=True)
    if sounds.enabled:
        assert sounds.current_track == "music-game"
    sounds.play("music-game", looped=True)
    assert sounds.last_played == "music-game"
    sounds.stop()
    assert sounds.current_track is None


def test_volume_is_clamped(tmp_path):
    sounds = SoundManager(asset_dir=str(tmp_path), volume=3.0)
    assert sounds.volume == 1.0
    sounds.set_volume(-1)
    assert sounds.volume == 0.0
    sounds.set_volume(0.25)
    assert sounds.volume == 0.25
    pygame.mixer.quit()
