import pygame
import pytest

from flappyduck.audio import POS_X, POS_Y, SoundBoard
from flappyduck.core import Sprite


class FakeSound:
    def __init__(self):
        self.plays = 0

    def play(self):
        self.plays += 1


def _icon(width=40, height=60):
    surface = pygame.Surface((width, height))
    surface.fill((255, 0, 0), pygame.Rect(0, 0, width, height // 2))
    surface.fill((0, 0, 255), pygame.Rect(0, height // 2, width, height // 2))
    return surface


@pytest.fixture
def board():
    board = SoundBoard()
    board.sprite = Sprite(_icon())
    board.enabled = True
    return board


def test_starts_disabled():
    assert SoundBoard().enabled is False


def test_play_when_enabled_until_toggled_off(board):
    breath, hit, power = FakeSound(), FakeSound(), FakeSound()
    board.breath, board.hit, board.power_up = breath, hit, power
    board.play_breath()
    board.play_hit()
    board.play_hit()
    board.play_power_up()
    assert (breath.plays, hit.plays, power.plays) == (1, 2, 1)
    assert board.check_sound(POS_X + 10, POS_Y + 10) is True
    board.play_breath()
    board.play_hit()
    assert board.enabled is False
    assert (breath.plays, hit.plays) == (1, 2)


def test_silent_when_disabled(board):
    breath = FakeSound()
    board.breath = breath
    board.enabled = False
    board.play_breath()
    assert breath.plays == 0


def test_check_sound_toggles_inside(board):
    assert board.check_sound(POS_X + 10, POS_Y + 10) is True
    assert board.enabled is False
    assert board.check_sound(POS_X + 10, POS_Y + 10) is True
    assert board.enabled is True


@pytest.mark.parametrize("x, y", [(POS_X, POS_Y + 10), (POS_X + 40, POS_Y + 10),
                                  (POS_X + 10, POS_Y + 60), (0, 0)])
def test_check_sound_outside(board, x, y):
    assert board.check_sound(x, y) is False
    assert board.enabled is True


def test_clips_split_icon(board):
    assert board.active_clip == pygame.Rect(0, 0, 40, 30)
    assert board.mute_clip == pygame.Rect(0, 30, 40, 30)


def test_render_shows_state(board):
    target = pygame.Surface((800, 600))
    board.render(target)
    assert target.get_at((POS_X + 5, POS_Y + 5))[:3] == (255, 0, 0)
    board.enabled = False
    board.render(target)
    assert target.get_at((POS_X + 5, POS_Y + 5))[:3] == (0, 0, 255)


def test_load_missing_icon_raises(tmp_path, monkeypatch):
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    board = SoundBoard(tmp_path)
    with pytest.raises(OSError):
        board.load()
    assert board.enabled is False


def test_load_enables_with_icon(tmp_path, monkeypatch):
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    pygame.image.save(_icon(), str(tmp_path / "sound.png"))
    board = SoundBoard(tmp_path)
    board.load()
    assert board.enabled is True
    assert (board.sprite.width, board.sprite.height) == (40, 60)
    assert board.breath is None
    assert board.hit is None
    assert board.errors
    board.close()
    assert board.sprite.loaded is False