"""Game state, player input and the screens drawn around the play field."""

from __future__ import annotations

import enum
import random
from collections.abc import Callable, Iterable
from pathlib import Path

import pygame

from .audio import SoundBoard
from .core import ASSET_DIR, SCREEN_HEIGHT, SCREEN_WIDTH, Sprite, WorldState
from .duck import Duck, duck_image_path
from .land import Land
from .pipes import PipeField, colored_surface
from .powerups import PowerUpManager, PowerUpType

SMALL_DIGIT_SCALE = 0.75
TIMER_SCALE = 0.5
THEME_PREVIEW_SCALE = 0.8
LARGE_SCORE_Y = 100
SMALL_SCORE_Y = 268
BEST_SCORE_Y = 315
CLEAR_COLOR = (255, 255, 255)
BEST_SCORE_FILE = "bestScore.txt"


class InputType(enum.Enum):
    """What the player asked for during the last frame."""

    QUIT = enum.auto()
    PLAY = enum.auto()
    NONE = enum.auto()
    PAUSE = enum.auto()


def digit_image_paths(score: int, small: bool = False) -> list[str]:
    """Image paths for the digits of ``score``, most significant first."""
    if score < 0:
        raise ValueError("score cannot be negative")
    paths = []
    for char in str(score):
        digit = int(char)
        if small:
            name = "number.png" if digit == 0 else f"{digit}{digit}.png"
        else:
            name = f"{digit}.png"
        paths.append(f"{ASSET_DIR}/{name}")
    return paths


def medal_for_score(score: int) -> str:
    """Image path of the medal earned with ``score``."""
    if score > 50:
        name = "gold-medal-demo.png"
    elif score > 20:
        name = "silver-medal-demo.png"
    else:
        name = "bronze-medal-demo.png"
    return f"{ASSET_DIR}/{name}"


def theme_button_hit(x: int, y: int) -> bool:
    """Whether (x, y) lies on one of the two theme arrows of the pause menu."""
    on_arrow = 370 < x < 370 + 13 or 310 < x < 310 + 13
    return on_arrow and 322 < y < 322 + 16


def replay_button_hit(x: int, y: int) -> bool:
    """Whether (x, y) lies on the replay button."""
    return (SCREEN_WIDTH - 100) / 2 < x < (SCREEN_WIDTH + 100) / 2 and 380 < y < 380 + 60


class BestScoreStore:
    """The best score kept in a small text file."""

    def __init__(self, path) -> None:
        self.path = Path(path)

    def load(self) -> int:
        """The stored best score, or 0 when there is none readable."""
        try:
            words = self.path.read_text().split()
        except OSError:
            return 0
        if not words:
            return 0
        try:
            return int(words[0])
        except ValueError:
            return 0

    def update(self, score: int) -> int:
        """Store the better of ``score`` and the saved best, and return it."""
        best = max(self.load(), score)
        try:
            self.path.write_text(str(best))
        except OSError:
            pass
        return best


class Game:
    """Everything in play: the world, its objects, their images and sounds."""

    def __init__(self, screen: pygame.Surface | None = None, asset_dir=ASSET_DIR,
                 rng: random.Random | None = None, best_score_path=None,
                 event_source: Callable[[], Iterable] | None = None) -> None:
        self.asset_dir = Path(asset_dir)
        self._owns_display = screen is None
        if screen is None:
            pygame.init()
            screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
            pygame.display.set_caption("Flappy Duck")
        self.screen = screen
        self.rng = rng if rng is not None else random.Random()
        self.event_source = event_source
        self.errors: list[str] = []
        self.world = WorldState()
        self.user_input = InputType.NONE
        self.mouse_pos = (0, 0)
        self._images: dict[tuple[str, float], Sprite] = {}

        self.background_day = self._load_background("bg.png")
        self.background_night = self._load_background("background-night.png")

        self.pipe_sprite = self._load_sprite("pipe.png")
        if self.pipe_sprite.loaded:
            self.pipe_field = PipeField(self.world, self.rng, self.pipe_sprite.width,
                                        self.pipe_sprite.height)
        else:
            self.pipe_field = PipeField(self.world, self.rng)

        self.duck = Duck(self.world)
        self.duck_sprite = Sprite()

        self.land_sprite = self._load_sprite("land.png")
        self.land = Land(self.land_sprite.width or SCREEN_WIDTH)

        self.sound = SoundBoard(self.asset_dir)
        try:
            self.sound.load()
        except OSError as exc:
            self.errors.append(str(exc))
        self.errors.extend(self.sound.errors)

        self.power_ups = PowerUpManager(self.world, self.pipe_field, self.rng)
        self.power_up_sprites = self._load_power_up_sprites()

        if best_score_path is None:
            best_score_path = self.asset_dir / BEST_SCORE_FILE
        self.best_scores = BestScoreStore(best_score_path)

    def __enter__(self) -> Game:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _load_sprite(self, name: str, scale: float = 1.0) -> Sprite:
        try:
            return Sprite().load(self.asset_dir / name, scale)
        except OSError as exc:
            self.errors.append(str(exc))
            return Sprite()

    def _load_background(self, name: str) -> Sprite:
        sprite = self._load_sprite(name)
        if sprite.surface is not None:
            sprite.surface = pygame.transform.scale(sprite.surface,
                                                    (SCREEN_WIDTH, SCREEN_HEIGHT))
        return sprite

    def _load_power_up_sprites(self) -> dict[PowerUpType, Sprite]:
        base = self._load_sprite("boxmys.png")
        if not base.loaded:
            return {}
        speed = self._load_sprite("blackbox.png")
        if not speed.loaded:
            speed = Sprite(colored_surface(base.surface, (255, 0, 0)))
        return {PowerUpType.SPEED_UP: speed, PowerUpType.GHOST: base}

    def _image(self, name: str, scale: float = 1.0) -> Sprite:
        key = (name, scale)
        if key not in self._images:
            self._images[key] = self._load_sprite(name, scale)
        return self._images[key]

    @property
    def pipe_width(self) -> int:
        return self.pipe_field.width

    @property
    def pipe_height(self) -> int:
        return self.pipe_field.height

    def init_duck(self, dark: bool) -> bool:
        """Set the duck's theme, loading its image when needed."""
        if self.duck.set_theme(dark) or not self.duck_sprite.loaded:
            self.duck_sprite = self._load_sprite(Path(duck_image_path(dark)).name)
            return self.duck_sprite.loaded
        return False

    def take_input(self) -> InputType:
        """Read pending events and record what the player asked for."""
        if self.event_source is not None:
            events = self.event_source()
        else:
            events = pygame.event.get()
        for event in events:
            if event.type == pygame.QUIT:
                self.user_input = InputType.QUIT
                self.world.quit = True
            elif event.type == pygame.MOUSEMOTION:
                self.mouse_pos = tuple(event.pos)
            elif event.type == pygame.MOUSEBUTTONDOWN:
                self.mouse_pos = tuple(getattr(event, "pos", self.mouse_pos))
                self.user_input = InputType.PLAY
            elif event.type == pygame.KEYDOWN and not getattr(event, "repeat", False):
                if event.key in (pygame.K_SPACE, pygame.K_UP):
                    self.user_input = InputType.PLAY
                elif event.key == pygame.K_ESCAPE:
                    self.user_input = InputType.PAUSE
        return self.user_input

    def restart(self) -> None:
        """Begin a new round."""
        self.world.die = False
        self.world.score = 0
        self.duck.reset_time()
        self.power_ups.reset()

    def check_power_up_collision(self) -> bool:
        """Collect a power-up the living duck touches; return whether it did."""
        if self.world.die:
            return False
        duck = self.duck
        if self.power_ups.check_collision(duck.x, duck.y, duck.width, duck.height):
            self.sound.play_power_up()
            return True
        return False

    def render_image(self, name: str, x, y, scale: float = 1.0) -> Sprite:
        """Draw the named asset at (x, y) and return its sprite."""
        sprite = self._image(name, scale)
        sprite.render(self.screen, int(x), int(y))
        return sprite

    def _render_centered(self, name: str, y: int, scale: float = 1.0) -> Sprite:
        sprite = self._image(name, scale)
        sprite.render(self.screen, (SCREEN_WIDTH - sprite.width) // 2, y)
        return sprite

    def _render_small_number(self, value: int, y: int) -> None:
        paths = digit_image_paths(value, small=True)
        for back, path in enumerate(reversed(paths)):
            sprite = self._image(Path(path).name, SMALL_DIGIT_SCALE)
            x = SCREEN_WIDTH / 2 + 70 - sprite.width * back * 0.75 - 5 * back
            sprite.render(self.screen, int(x), y)

    def render_background(self, dark: bool = False) -> None:
        sprite = self.background_night if dark else self.background_day
        sprite.render(self.screen, 0, 0)

    def render_score_small(self) -> None:
        self._render_small_number(self.world.score, SMALL_SCORE_Y)

    def render_score_large(self) -> None:
        paths = digit_image_paths(self.world.score)
        count = len(paths)
        for index, path in enumerate(paths):
            sprite = self._image(Path(path).name)
            left = int((SCREEN_WIDTH - (sprite.width * count + (count - 1) * 10)) / 2)
            sprite.render(self.screen, left + index * (sprite.width + 5), LARGE_SCORE_Y)

    def render_best_score(self) -> int:
        """Save the best score, draw it and return it."""
        best = self.best_scores.update(self.world.score)
        self._render_small_number(best, BEST_SCORE_Y)
        return best

    def render_effect_timers(self) -> None:
        """Draw the icon and remaining seconds of each running effect."""
        effects = (
            (self.power_ups.speed_up_active, self.power_ups.speed_up_timer, "speedrun.png", 50),
            (self.power_ups.ghost_active, self.power_ups.ghost_timer, "ghostbaby.png", 90),
        )
        for active, timer, icon, y in effects:
            if active:
                self.render_image(icon, 50, y, TIMER_SCALE)
                self.render_image(f"{timer // 60 + 1}.png", 80, y, TIMER_SCALE)

    def render_message(self) -> None:
        self._render_centered("duck-ready.png", 180)

    def render_game_over(self) -> None:
        self._render_centered("gameOver.png", 150)

    def render_medal(self) -> None:
        name = Path(medal_for_score(self.world.score)).name
        self.render_image(name, SCREEN_WIDTH / 2 - 100 - 14, 265, SMALL_DIGIT_SCALE)

    def render_replay(self) -> None:
        self._render_centered("replay.png", 380)

    def render_pause_button(self) -> None:
        self.render_image("pause.png", SCREEN_WIDTH - 50, 20)

    def render_resume_button(self) -> None:
        self.render_image("resume.png", SCREEN_WIDTH - 50, 20)

    def render_pause_tab(self) -> None:
        self._render_centered("pauseTab.png", 230)

    def render_theme_preview(self, dark: bool) -> None:
        if dark:
            self.render_image("Duck-02.png", 325, 315, THEME_PREVIEW_SCALE)
        else:
            self.render_image("duck-01.png", 330, 310, THEME_PREVIEW_SCALE)

    def render_next_buttons(self) -> None:
        self.render_image("nextRight.png", 370, 322)
        self.render_image("nextLeft.png", 310, 322)

    def render_scenery(self, dark: bool) -> None:
        """Background, pipes and ground."""
        self.render_background(dark)
        self.pipe_field.render(self.screen, self.pipe_sprite)
        self.land.render(self.screen, self.land_sprite)

    def display(self) -> None:
        """Show the finished frame and clear the screen for the next one."""
        if self._owns_display:
            pygame.display.flip()
        self.screen.fill(CLEAR_COLOR)

    def close(self) -> None:
        """Release images and sounds, and the window when this game opened it."""
        self.sound.close()
        self._images.clear()
        for sprite in (self.background_day, self.background_night, self.pipe_sprite,
                       self.duck_sprite, self.land_sprite, *self.power_up_sprites.values()):
            sprite.free()
        if self._owns_display:
            pygame.quit()
            self._owns_display = False