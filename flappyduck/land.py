"""The scrolling ground strip at the bottom of the screen."""

from __future__ import annotations

import pygame

from .core import LAND_HEIGHT, SCREEN_HEIGHT, SCREEN_WIDTH, Position, Sprite


class Land:
    """Ground tiles that scroll left by three pixels a frame."""

    def __init__(self, tile_width: int = SCREEN_WIDTH) -> None:
        if tile_width <= 0:
            raise ValueError("tile width must be positive")
        self.tile_width = tile_width
        self.pos = Position(0, SCREEN_HEIGHT - LAND_HEIGHT)

    def update(self) -> None:
        self.pos.x -= 3

    def tile_positions(self) -> list[tuple[int, int]]:
        """Top-left corners of the tiles that cover the screen width."""
        width = self.tile_width
        count = SCREEN_WIDTH // width + 2
        offset = self.pos.x % width
        if offset > 0:
            offset -= width
        return [(offset + index * width, self.pos.y) for index in range(count)]

    def render(self, target: pygame.Surface, sprite: Sprite) -> None:
        for x, y in self.tile_positions():
            sprite.render(target, x, y)