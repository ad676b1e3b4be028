"""
sound_manager.py
----------------
pygame.mixer backend for the audio cues the simulation requests.

The core never calls this directly; it dispatches SoundEvent / MusicEvent /
MuteEvent and the manager subscribes. Every mixer failure (missing file,
no audio device) is logged and swallowed so gameplay continues silently.
"""

import os

import pygame

from princess_quest.core.debug.debug_logger import DebugLogger
from princess_quest.core.runtime.game_settings import Sounds
from princess_quest.core.services.event_manager import MusicEvent, MuteEvent, SoundEvent


AUDIO_ROOT = os.path.join(os.path.dirname(os.path.dirname(__file__)), "assets", "audio")


class SoundManager:
    ASSET_PATHS = {
        "bgm": {
            Sounds.BACKGROUND_MUSIC: "bgm/background_music.ogg",
        },
        "sfx": {
            Sounds.JUMP: "sfx/jump.wav",
            Sounds.COIN: "sfx/coin.wav",
            Sounds.DAMAGE: "sfx/damage.wav",
            Sounds.GAME_OVER: "sfx/game_over.wav",
            Sounds.LEVEL_COMPLETE: "sfx/level_complete.wav",
            Sounds.GAME_COMPLETE: "sfx/game_complete.wav",
        },
    }

    def __init__(self, events=None, audio_root=AUDIO_ROOT):
        self.audio_root = audio_root
        self.sfx = {}
        self.bgm = {}
        self.muted = False

        self.current_bgm_id = None
        self.bgm_paused = False

        self.enabled = self._init_mixer()
        if self.enabled:
            self.load_assets()

        if events is not None:
            self.bind(events)

    def _init_mixer(self):
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init()
        except pygame.error as e:
            DebugLogger.warn(f"Audio disabled: {e}", category="audio")
            return False
        return True

    def bind(self, events):
        """Subscribe to the session's audio events."""
        events.subscribe(SoundEvent, self.on_sound)
        events.subscribe(MusicEvent, self.on_music)
        events.subscribe(MuteEvent, self.on_mute)

    # ===========================================================
    # Loading
    # ===========================================================
    def load_assets(self):
        for name, route in self.ASSET_PATHS["bgm"].items():
            self.load_bgm(name, os.path.join(self.audio_root, route))
        for name, route in self.ASSET_PATHS["sfx"].items():
            self.load_sfx(name, os.path.join(self.audio_root, route))
        DebugLogger.init_sub(f"Audio: {len(self.sfx)} sfx, {len(self.bgm)} bgm")

    def load_sfx(self, name, route):
        try:
            sound = pygame.mixer.Sound(route)
        except (pygame.error, OSError, FileNotFoundError) as e:
            DebugLogger.warn(f"Sound '{name}' unavailable: {e}", category="audio")
            return
        sound.set_volume(self._volume())
        self.sfx[name] = sound

    def load_bgm(self, name, route):
        if not os.path.exists(route):
            DebugLogger.warn(f"Music '{name}' missing at {route}", category="audio")
            return
        self.bgm[name] = route

    # ===========================================================
    # Event Handlers
    # ===========================================================
    def on_sound(self, event):
        if event.stop:
            self.stop(event.name)
        else:
            self.play(event.name)

    def on_music(self, event):
        if event.paused:
            self.pause_music()
        else:
            self.resume_music()

    def on_mute(self, event):
        self.set_muted(event.muted)

    # ===========================================================
    # Playback
    # ===========================================================
    def play(self, name):
        """Play a cue by name. Unknown or failing cues are skipped."""
        if not self.enabled:
            return
        if name in self.bgm:
            self.play_bgm(name)
            return
        sound = self.sfx.get(name)
        if sound is None:
            DebugLogger.trace(f"No sound loaded for '{name}'", category="audio")
            return
        try:
            sound.play()
        except pygame.error as e:
            DebugLogger.warn(f"Failed to play '{name}': {e}", category="audio")

    def stop(self, name):
        if not self.enabled:
            return
        if name in self.bgm:
            self.stop_bgm()
        elif name in self.sfx:
            self.sfx[name].stop()

    def play_bgm(self, name, loop=-1):
        if self.current_bgm_id == name and not self.bgm_paused:
            return
        try:
            pygame.mixer.music.load(self.bgm[name])
            pygame.mixer.music.set_volume(self._volume())
            pygame.mixer.music.play(loops=loop)
        except pygame.error as e:
            DebugLogger.warn(f"Failed to start music '{name}': {e}", category="audio")
            return
        self.current_bgm_id = name
        self.bgm_paused = False

    def stop_bgm(self):
        try:
            pygame.mixer.music.stop()
        except pygame.error as e:
            DebugLogger.warn(f"Failed to stop music: {e}", category="audio")
        self.current_bgm_id = None
        self.bgm_paused = False

    def pause_music(self):
        if not self.enabled or self.current_bgm_id is None:
            return
        pygame.mixer.music.pause()
        self.bgm_paused = True

    def resume_music(self):
        if not self.enabled or self.current_bgm_id is None:
            return
        pygame.mixer.music.unpause()
        self.bgm_paused = False

    # ===========================================================
    # Volume
    # ===========================================================
    def set_muted(self, muted):
        self.muted = bool(muted)
        self._apply_volume()
        DebugLogger.action("Muted" if self.muted else "Unmuted", category="audio")

    def _volume(self):
        return 0.0 if self.muted else 1.0

    def _apply_volume(self):
        if not self.enabled:
            return
        volume = self._volume()
        for sound in self.sfx.values():
            sound.set_volume(volume)
        pygame.mixer.music.set_volume(volume)
