"""Sound effects and the on-screen sound toggle."""

from __future__ import annotations

from pathlib import Path

import pygame

from .core import ASSET_DIR, Sprite

POS_X = 330
POS_Y = 267

BREATH_FILE = "sfx_breath.wav"
HIT_FILE = "duck-sound.wav"
POWER_UP_FILE = "sound-effect.wav"
ICON_FILE = "sound.png"


class SoundBoard:
    """Plays the game's sound effects and draws the sound on/off button.

    The icon image holds the "on" picture in its top half and the "muted"
    picture in its bottom half.
    """

    def __init__(self, asset_dir=ASSET_DIR) -> None:
        self.asset_dir = Path(asset_dir)
        self.enabled = False
        self.breath = None
        self.hit = None
        self.power_up = None
        self.sprite = Sprite()
        self.errors: list[str] = []

    def _load_sound(self, name: str):
        try:
            return pygame.mixer.Sound(str(self.asset_dir / name))
        except (pygame.error, OSError, FileNotFoundError) as exc:
            self.errors.append(f"failed to load sound {name}: {exc}")
            return None

    def load(self) -> SoundBoard:
        """Open the mixer, load the sounds and the icon, then enable sound.

        Sounds that cannot be loaded are left silent and reported in
        ``errors``; an icon that cannot be loaded raises OSError and leaves
        sound disabled.
        """
        self.errors = []
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init(22050, -16, 2, 2048)
        except pygame.error as exc:
            self.errors.append(f"mixer could not initialize: {exc}")
        else:
            self.breath = self._load_sound(BREATH_FILE)
            self.hit = self._load_sound(HIT_FILE)
            self.power_up = self._load_sound(POWER_UP_FILE)

        self.sprite.load(self.asset_dir / ICON_FILE)
        self.enabled = True
        return self

    @property
    def active_clip(self) -> pygame.Rect:
        return pygame.Rect(0, 0, self.sprite.width, self.sprite.height // 2)

    @property
    def mute_clip(self) -> pygame.Rect:
        half = self.sprite.height // 2
        return pygame.Rect(0, half, self.sprite.width, half)

    def _play(self, sound) -> None:
        if self.enabled and sound is not None:
            sound.play()

    def play_breath(self) -> None:
        self._play(self.breath)

    def play_hit(self) -> None:
        self._play(self.hit)

    def play_power_up(self) -> None:
        self._play(self.power_up)

    def check_sound(self, x: int, y: int) -> bool:
        """Toggle sound when (x, y) lies on the button; return whether it did."""
        if (POS_X < x < POS_X + self.sprite.width
                and POS_Y < y < POS_Y + self.sprite.height):
            self.enabled = not self.enabled
            return True
        return False

    def render(self, target: pygame.Surface) -> None:
        clip = self.active_clip if self.enabled else self.mute_clip
        self.sprite.render(target, POS_X, POS_Y, 0, clip)

    def close(self) -> None:
        """Release the sounds and the icon."""
        self.sprite.free()
        self.breath = None
        self.hit = None
        self.power_up = None