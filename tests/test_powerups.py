import random

import pygame
import pytest

from flappyduck.core import SCREEN_HEIGHT, SCREEN_WIDTH, Position, Sprite, WorldState
from flappyduck.pipes import PipeField
from flappyduck.powerups import (
    EFFECT_FRAMES,
    FALLBACK_Y,
    MAX_SPAWN_TIME,
    MIN_SPAWN_TIME,
    SPAWN_Y_MAX,
    SPAWN_Y_MIN,
    PowerUpInfo,
    PowerUpManager,
    PowerUpType,
)


@pytest.fixture
def world():
    return WorldState(die=False)


@pytest.fixture
def manager(world):
    field = PipeField(world, rng=random.Random(3))
    return PowerUpManager(world, field, rng=random.Random(7))


def test_reset_clears_state(manager):
    manager.power_ups.append(PowerUpInfo(Position(10, 10)))
    manager.speed_up_timer = 5
    manager.ghost_timer = 9
    manager.spawn_timer = 40
    manager.reset()
    assert manager.power_ups == []
    assert manager.spawn_timer == 0
    assert (manager.speed_up_timer, manager.ghost_timer) == (0, 0)
    assert MIN_SPAWN_TIME <= manager.next_spawn_time <= MAX_SPAWN_TIME


def test_activate_effects(manager):
    manager.activate_effect(PowerUpType.SPEED_UP)
    assert manager.speed_up_timer == EFFECT_FRAMES
    assert manager.speed_up_active
    assert not manager.ghost_active
    manager.activate_effect(PowerUpType.GHOST)
    assert manager.ghost_timer == EFFECT_FRAMES
    assert manager.ghost_active


def test_collision_collects_once(manager):
    manager.power_ups.append(PowerUpInfo(Position(150, 290), True, PowerUpType.GHOST))
    assert manager.check_collision(150, 290, 50, 35) is True
    assert manager.ghost_active
    assert manager.power_ups[0].active is False
    assert manager.check_collision(150, 290, 50, 35) is False


def test_no_collision_when_apart(manager):
    manager.power_ups.append(PowerUpInfo(Position(400, 100), True, PowerUpType.SPEED_UP))
    assert manager.check_collision(150, 290, 50, 35) is False
    assert not manager.speed_up_active
    assert manager.power_ups[0].active


def test_update_does_nothing_when_dead(manager, world):
    world.die = True
    manager.power_ups.append(PowerUpInfo(Position(300, 100)))
    manager.speed_up_timer = 10
    manager.update()
    assert manager.power_ups[0].pos.x == 300
    assert manager.speed_up_timer == 10


def test_update_scrolls_and_deactivates(manager):
    manager.next_spawn_time = 1000
    manager.power_ups.append(PowerUpInfo(Position(300, 100)))
    manager.power_ups.append(PowerUpInfo(Position(-31, 100)))
    manager.update()
    assert manager.power_ups[0].pos.x == 297
    assert manager.power_ups[0].active
    assert manager.power_ups[1].active is False


def test_update_counts_down_effects(manager):
    manager.next_spawn_time = 1000
    manager.activate_effect(PowerUpType.SPEED_UP)
    manager.update()
    assert manager.speed_up_timer == EFFECT_FRAMES - 1
    assert manager.ghost_timer == 0


def test_spawn_replaces_inactive(manager):
    manager.power_ups.append(PowerUpInfo(Position(300, 100), active=False))
    manager.spawn_timer = 0
    manager.next_spawn_time = 1
    manager.update()
    assert len(manager.power_ups) == 1
    spawned = manager.power_ups[0]
    assert spawned.active
    assert spawned.pos.x == SCREEN_WIDTH
    assert SPAWN_Y_MIN <= spawned.pos.y <= SPAWN_Y_MAX
    assert manager.spawn_timer == 0
    assert MIN_SPAWN_TIME <= manager.next_spawn_time <= MAX_SPAWN_TIME


def test_safe_position_clear_of_pipes(manager):
    for pipe in manager.pipe_field.pipes:
        pipe.pos.x = -1000
    pos = manager.find_safe_position()
    assert pos.x == SCREEN_WIDTH
    assert SPAWN_Y_MIN <= pos.y <= SPAWN_Y_MAX


def test_safe_position_falls_back(manager):
    for pipe in manager.pipe_field.pipes:
        pipe.pos.x = SCREEN_WIDTH
    pos = manager.find_safe_position()
    assert (pos.x, pos.y) == (SCREEN_WIDTH, FALLBACK_Y)
    assert FALLBACK_Y == SCREEN_HEIGHT // 3


def test_render_uses_sprite_per_kind(manager):
    red = pygame.Surface((32, 32))
    red.fill((255, 0, 0))
    blue = pygame.Surface((32, 32))
    blue.fill((0, 0, 255))
    sprites = {PowerUpType.SPEED_UP: Sprite(red), PowerUpType.GHOST: Sprite(blue)}
    manager.power_ups = [
        PowerUpInfo(Position(10, 10), True, PowerUpType.SPEED_UP),
        PowerUpInfo(Position(100, 10), True, PowerUpType.GHOST),
        PowerUpInfo(Position(200, 10), False, PowerUpType.GHOST),
    ]
    target = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT))
    target.fill((0, 0, 0))
    manager.render(target, sprites)
    assert target.get_at((15, 15))[:3] == (255, 0, 0)
    assert target.get_at((105, 15))[:3] == (0, 0, 255)
    assert target.get_at((205, 15))[:3] == (0, 0, 0)