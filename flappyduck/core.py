"""Shared constants, world state and sprite handling."""

from __future__ import annotations

from dataclasses import dataclass

import pygame

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600
PIPE_SPACE = 160
TOTAL_PIPE = 4
PIPE_DISTANCE = 300
LAND_HEIGHT = 60
DUCK_WIDTH = 50
DUCK_HEIGHT = 35

ASSET_DIR = "anh_amthanh"
COLOR_KEY = (0, 255, 255)


@dataclass
class Position:
    """A point on the screen in pixels."""

    x: int = 0
    y: int = 0


@dataclass
class WorldState:
    """State shared by every object in a running game."""

    quit: bool = False
    die: bool = True
    score: int = 0


class Sprite:
    """An image that can be loaded from disk, scaled and drawn."""

    def __init__(self, surface: pygame.Surface | None = None) -> None:
        self.surface = surface

    @property
    def loaded(self) -> bool:
        return self.surface is not None

    @property
    def width(self) -> int:
        return self.surface.get_width() if self.surface is not None else 0

    @property
    def height(self) -> int:
        return self.surface.get_height() if self.surface is not None else 0

    def load(self, path, scale: float = 1.0) -> Sprite:
        """Load an image, make the colour key transparent and scale it.

        Raises OSError when the image cannot be read; the sprite is then empty.
        """
        self.free()
        try:
            image = pygame.image.load(str(path))
        except (OSError, pygame.error) as exc:
            raise OSError(f"unable to load image {path}: {exc}") from exc

        image.set_colorkey(COLOR_KEY)
        surface = pygame.Surface(image.get_size(), pygame.SRCALPHA)
        surface.fill((0, 0, 0, 0))
        surface.blit(image, (0, 0))

        size = (int(image.get_width() * scale), int(image.get_height() * scale))
        if size != surface.get_size():
            surface = pygame.transform.scale(surface, size)
        self.surface = surface
        return self

    def free(self) -> None:
        self.surface = None

    def render(self, target: pygame.Surface, x: int, y: int, angle: float = 0,
               clip=None) -> None:
        """Draw at (x, y), rotated clockwise by ``angle`` degrees about the centre."""
        if self.surface is None:
            return
        image = self.surface
        if clip is not None:
            area = pygame.Rect(clip).clip(image.get_rect())
            image = image.subsurface(area)
        if angle:
            width, height = image.get_size()
            rotated = pygame.transform.rotate(image, -angle)
            rect = rotated.get_rect(center=(x + width / 2, y + height / 2))
            target.blit(rotated, rect)
        else:
            target.blit(image, (x, y))