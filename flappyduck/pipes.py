"""The row of scrolling pipes the duck has to fly through."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

import pygame

from .core import (
    LAND_HEIGHT,
    PIPE_DISTANCE,
    PIPE_SPACE,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    TOTAL_PIPE,
    Position,
    Sprite,
    WorldState,
)

PIPE_WIDTH = 52
PIPE_HEIGHT = 373

RAND_MIN = -373 + 30
RAND_MAX = SCREEN_HEIGHT - LAND_HEIGHT - 373 - PIPE_DISTANCE - 30

WHITE = (255, 255, 255)

AVAILABLE_COLORS = (
    (255, 255, 255),
    (255, 100, 100),
    (100, 255, 100),
    (100, 100, 255),
    (75, 0, 130),
    (148, 0, 211),
    (255, 165, 0),
    (255, 255, 0),
    (0, 255, 255),
    (255, 0, 255),
)


@dataclass
class PipeInfo:
    """One pipe pair: the top pipe's position and its tint."""

    pos: Position = field(default_factory=Position)
    color: tuple = WHITE


def colored_surface(surface: pygame.Surface, color) -> pygame.Surface:
    """Return ``surface`` tinted by ``color``; white returns it unchanged."""
    rgb = tuple(color)[:3]
    if rgb == WHITE:
        return surface
    tinted = surface.copy()
    tinted.fill(rgb, special_flags=pygame.BLEND_RGB_MULT)
    return tinted


class PipeField:
    """The pipes moving from right to left, recycled when off screen."""

    def __init__(self, world: WorldState, rng: random.Random | None = None,
                 width: int = PIPE_WIDTH, height: int = PIPE_HEIGHT) -> None:
        self.world = world
        self.rng = rng if rng is not None else random.Random()
        self.width = width
        self.height = height
        self.pipes: list[PipeInfo] = []
        self.reset()

    def _random_gap(self) -> int:
        return self.rng.randint(RAND_MIN, RAND_MAX)

    def random_color(self) -> tuple:
        return self.rng.choice(AVAILABLE_COLORS)

    def reset(self) -> None:
        """Place a fresh set of pipes just beyond the right edge."""
        self.pipes = []
        for index in range(TOTAL_PIPE):
            x = SCREEN_WIDTH + index * PIPE_DISTANCE + 150
            y = self._random_gap()
            self.pipes.append(PipeInfo(Position(x, y), self.random_color()))

    def update(self, speed_up: bool = False) -> None:
        if self.world.die:
            return
        speed = 6 if speed_up else 3
        for index, pipe in enumerate(self.pipes):
            if pipe.pos.x < -self.width:
                pipe.pos.y = self._random_gap()
                pipe.pos.x = self.pipes[index - 1].pos.x + PIPE_DISTANCE
                pipe.color = self.random_color()
            else:
                pipe.pos.x -= speed

    def render(self, target: pygame.Surface, sprite: Sprite) -> None:
        """Draw every visible pipe pair, the bottom pipe turned upside down."""
        if sprite.surface is None:
            return
        for pipe in self.pipes:
            if -sprite.width < pipe.pos.x <= SCREEN_WIDTH:
                tinted = Sprite(colored_surface(sprite.surface, pipe.color))
                tinted.render(target, pipe.pos.x, pipe.pos.y)
                tinted.render(target, pipe.pos.x,
                              pipe.pos.y + sprite.height + PIPE_SPACE, 180)