"""Mystery boxes that grant a speed boost or let the duck pass through pipes."""

from __future__ import annotations

import enum
import random
from collections.abc import Mapping
from dataclasses import dataclass, field

import pygame

from .core import LAND_HEIGHT, SCREEN_HEIGHT, SCREEN_WIDTH, Position, Sprite, WorldState
from .pipes import PIPE_WIDTH, PipeField

MIN_SPAWN_TIME = 180
MAX_SPAWN_TIME = 360
EFFECT_FRAMES = 180
POWER_UP_SIZE = 32
SAFE_DISTANCE = 20
MAX_ATTEMPTS = 10
SCROLL_SPEED = 3

SPAWN_Y_MIN = 100
SPAWN_Y_MAX = SCREEN_HEIGHT - LAND_HEIGHT - POWER_UP_SIZE - 1
FALLBACK_Y = SCREEN_HEIGHT // 3


class PowerUpType(enum.Enum):
    SPEED_UP = 0
    GHOST = 1


@dataclass
class PowerUpInfo:
    """A power-up box on screen."""

    pos: Position = field(default_factory=Position)
    active: bool = True
    kind: PowerUpType = PowerUpType.SPEED_UP


class PowerUpManager:
    """Spawns, scrolls and collects power-ups and counts down their effects."""

    def __init__(self, world: WorldState, pipe_field: PipeField,
                 rng: random.Random | None = None) -> None:
        self.world = world
        self.pipe_field = pipe_field
        self.rng = rng if rng is not None else random.Random()
        self.power_ups: list[PowerUpInfo] = []
        self.spawn_timer = 0
        self.next_spawn_time = MIN_SPAWN_TIME
        self.speed_up_timer = 0
        self.ghost_timer = 0
        self.reset()

    @property
    def speed_up_active(self) -> bool:
        return self.speed_up_timer > 0

    @property
    def ghost_active(self) -> bool:
        return self.ghost_timer > 0

    def _next_spawn_delay(self) -> int:
        return self.rng.randint(MIN_SPAWN_TIME, MAX_SPAWN_TIME)

    def reset(self) -> None:
        """Remove every power-up and end all running effects."""
        self.power_ups = []
        self.spawn_timer = 0
        self.next_spawn_time = self._next_spawn_delay()
        self.speed_up_timer = 0
        self.ghost_timer = 0

    def _near_pipe(self, x: int, width: int) -> bool:
        return any(
            x + width + SAFE_DISTANCE > pipe.pos.x
            and x - SAFE_DISTANCE < pipe.pos.x + PIPE_WIDTH
            for pipe in self.pipe_field.pipes
        )

    def find_safe_position(self) -> Position:
        """Pick a spawn point at the right edge that keeps clear of the pipes."""
        for _ in range(MAX_ATTEMPTS):
            pos = Position(SCREEN_WIDTH, self.rng.randint(SPAWN_Y_MIN, SPAWN_Y_MAX))
            if not self._near_pipe(pos.x, POWER_UP_SIZE):
                return pos
        return Position(SCREEN_WIDTH, FALLBACK_Y)

    def update(self) -> None:
        """Advance one frame: scroll, maybe spawn, and count down effects."""
        if self.world.die:
            return
        for power_up in self.power_ups:
            if power_up.active:
                power_up.pos.x -= SCROLL_SPEED
                if power_up.pos.x < -POWER_UP_SIZE:
                    power_up.active = False

        self.spawn_timer += 1
        if self.spawn_timer >= self.next_spawn_time:
            self.power_ups = [p for p in self.power_ups if p.active]
            self.power_ups.append(PowerUpInfo(
                pos=self.find_safe_position(),
                active=True,
                kind=self.rng.choice(list(PowerUpType)),
            ))
            self.spawn_timer = 0
            self.next_spawn_time = self._next_spawn_delay()

        if self.speed_up_timer > 0:
            self.speed_up_timer -= 1
        if self.ghost_timer > 0:
            self.ghost_timer -= 1

    def check_collision(self, x: int, y: int, width: int, height: int) -> bool:
        """Collect the first active power-up overlapping the given box."""
        for power_up in self.power_ups:
            if not power_up.active:
                continue
            if (x < power_up.pos.x + POWER_UP_SIZE
                    and x + width > power_up.pos.x
                    and y < power_up.pos.y + POWER_UP_SIZE
                    and y + height > power_up.pos.y):
                self.activate_effect(power_up.kind)
                power_up.active = False
                return True
        return False

    def activate_effect(self, kind: PowerUpType) -> None:
        if kind is PowerUpType.SPEED_UP:
            self.speed_up_timer = EFFECT_FRAMES
        elif kind is PowerUpType.GHOST:
            self.ghost_timer = EFFECT_FRAMES

    def render(self, target: pygame.Surface, sprites: Mapping[PowerUpType, Sprite]) -> None:
        """Draw every active power-up with the sprite for its kind."""
        for power_up in self.power_ups:
            if not power_up.active:
                continue
            sprite = sprites.get(power_up.kind)
            if sprite is not None:
                sprite.render(target, power_up.pos.x, power_up.pos.y)