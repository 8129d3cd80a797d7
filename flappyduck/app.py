"""The main loop: ready screen, play, pause menu and game-over screen."""

from __future__ import annotations

import pygame

from .game import Game, InputType, replay_button_hit, theme_button_hit

FPS = 60


class Session:
    """One run of the game, advanced a frame at a time."""

    def __init__(self, game: Game) -> None:
        self.game = game
        self.game_over = False
        self.paused = False
        self.sound_on = True
        self.dark = False
        self._on_dead_screen = False

    def step(self) -> bool:
        """Run one frame; return False once the player has quit."""
        if self.game.world.die:
            self._dead_step()
        else:
            self._play_step()
        return not self.game.world.quit

    def _dead_step(self) -> None:
        game = self.game
        if not self._on_dead_screen:
            self._on_dead_screen = True
            if self.game_over:
                game.sound.play_hit()
                game.duck.render(game.screen, game.duck_sprite)
            game.user_input = InputType.NONE

        game.take_input()
        if self.game_over and game.user_input is InputType.PLAY:
            if replay_button_hit(*game.mouse_pos):
                self.game_over = False
            game.user_input = InputType.NONE

        game.render_scenery(self.dark)
        if self.game_over:
            game.duck.render(game.screen, game.duck_sprite)
            game.duck.fall()
            game.render_game_over()
            game.render_medal()
            game.render_score_small()
            game.render_best_score()
            game.render_replay()
        else:
            game.pipe_field.reset()
            game.init_duck(self.dark)
            game.power_ups.reset()
            game.duck.render(game.screen, game.duck_sprite)
            game.render_message()
            if game.user_input is InputType.PLAY:
                game.restart()
                self.game_over = True
                game.user_input = InputType.NONE
            game.land.update()
        game.display()

        if not game.world.die or game.world.quit:
            self._on_dead_screen = False
            game.pipe_field.reset()
            game.power_ups.reset()

    def _play_step(self) -> None:
        game = self.game
        game.take_input()

        if game.user_input is InputType.PAUSE:
            self.paused = not self.paused
            game.user_input = InputType.NONE

        if not self.paused and game.user_input is InputType.PLAY:
            if self.sound_on:
                game.sound.play_breath()
            game.duck.reset_time()
            game.user_input = InputType.NONE

        game.render_background(self.dark)
        game.pipe_field.render(game.screen, game.pipe_sprite)
        game.power_ups.render(game.screen, game.power_up_sprites)
        game.land.render(game.screen, game.land_sprite)
        game.duck.render(game.screen, game.duck_sprite)
        game.render_score_large()
        game.render_effect_timers()

        if not self.paused:
            game.check_power_up_collision()
            game.duck.update(game.pipe_field.pipes, game.pipe_width, game.pipe_height,
                             game.power_ups.ghost_active)
            game.pipe_field.update(game.power_ups.speed_up_active)
            game.power_ups.update()
            game.land.update()
            game.render_pause_button()
        else:
            self._pause_menu()
        game.display()

    def _pause_menu(self) -> None:
        game = self.game
        game.render_resume_button()
        game.render_pause_tab()
        game.render_score_small()
        game.render_best_score()
        game.render_replay()
        game.sound.render(game.screen)
        game.render_theme_preview(self.dark)
        game.render_next_buttons()
        if game.user_input is InputType.PLAY:
            x, y = game.mouse_pos
            if replay_button_hit(x, y):
                self.paused = False
            elif game.sound.check_sound(x, y):
                self.sound_on = not self.sound_on
            elif theme_button_hit(x, y):
                self.dark = not self.dark
                game.init_duck(self.dark)
            game.user_input = InputType.NONE


def main(argv=None) -> int:
    """Open the game window and play until it is closed."""
    game = Game()
    session = Session(game)
    clock = pygame.time.Clock()
    try:
        while session.step():
            clock.tick(FPS)
    finally:
        game.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())