"""The player's duck: its flight, falling and collisions."""

from __future__ import annotations

from collections.abc import Sequence

import pygame

from .core import (
    ASSET_DIR,
    DUCK_HEIGHT,
    DUCK_WIDTH,
    LAND_HEIGHT,
    PIPE_SPACE,
    SCREEN_HEIGHT,
    Position,
    Sprite,
    WorldState,
)
from .pipes import PipeInfo

START_X = 150
START_Y = SCREEN_HEIGHT // 2 - 10
GROUND_LIMIT = SCREEN_HEIGHT - LAND_HEIGHT - DUCK_HEIGHT - 5


def duck_image_path(dark: bool) -> str:
    """Path of the duck image for the light or dark theme."""
    name = "Duck-02.png" if dark else "duck-01.png"
    return f"{ASSET_DIR}/{name}"


class Duck:
    """The duck, flying in a parabola restarted by every flap."""

    width = DUCK_WIDTH
    height = DUCK_HEIGHT

    def __init__(self, world: WorldState) -> None:
        self.world = world
        self.pos = Position(START_X, START_Y)
        self.angle = 0
        self.time = 0
        self.x0 = self.pos.y
        self.ahead = 0
        self.image_path = ""

    @property
    def x(self) -> int:
        return self.pos.x

    @property
    def y(self) -> int:
        return self.pos.y

    def set_theme(self, dark: bool) -> bool:
        """Choose the theme; return True when its image must be (re)loaded.

        Choosing the theme already in use puts the duck back at its start.
        """
        path = duck_image_path(dark)
        if path == self.image_path:
            self.pos = Position(START_X, START_Y)
            self.ahead = 0
            self.angle = 0
            return False
        self.image_path = path
        return True

    def reset_time(self) -> None:
        """Start a new flap."""
        self.time = 0

    def _advance(self) -> None:
        if self.time == 0:
            self.x0 = self.pos.y
            self.angle = -25
        elif self.angle < 70 and self.time > 30:
            self.angle += 3
        if self.time >= 0:
            self.pos.y = int(self.x0 + self.time * self.time * 0.18 - 7.3 * self.time)
            self.time += 1

    def fall(self) -> None:
        """Let a dead duck drop until it reaches the ground."""
        if self.world.die and self.pos.y < GROUND_LIMIT:
            self._advance()

    def update(self, pipes: Sequence[PipeInfo], pipe_width: int, pipe_height: int,
               ghost_active: bool = False) -> None:
        """Move one frame, then check the pipe ahead and the screen bounds."""
        if self.world.die:
            return
        self._advance()

        pipe = pipes[self.ahead].pos
        hits_pipe = (
            self.pos.x + self.width > pipe.x + 5
            and self.pos.x + 5 < pipe.x + pipe_width
            and (
                self.pos.y + 5 < pipe.y + pipe_height
                or self.pos.y + self.height > pipe.y + pipe_height + PIPE_SPACE + 5
            )
        )
        if not ghost_active and hits_pipe:
            self.world.die = True
        elif self.pos.x > pipe.x + pipe_width:
            self.ahead = (self.ahead + 1) % len(pipes)
            self.world.score += 1

        if self.pos.y > GROUND_LIMIT or self.pos.y < -10:
            self.world.die = True

    def render(self, target: pygame.Surface, sprite: Sprite) -> None:
        sprite.render(target, self.pos.x, self.pos.y, self.angle)