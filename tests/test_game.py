import pygame
import pytest

from unionjumpers.game import FrameInput, Game, GameState, new_game
from unionjumpers.levels import StageLoader, load_stage3
from unionjumpers.world import (
    BLUE_COLOR,
    GOAL_COLOR,
    GROUND_COLOR,
    RED_COLOR,
    SPEED,
    Platform,
    Stage,
    Unit,
)


def _goal_stage():
    return Stage(
        [
            Platform(0, 550, 800, 50, (100, 100, 100, 255), False),
            Platform(350, 530, 100, 20, (255, 255, 0, 255), True),
        ]
    )


def _game():
    blue = Unit(x=100, y=100, vx=SPEED, direction=1, color=BLUE_COLOR)
    red = Unit(x=600, y=100, vx=-SPEED, direction=-1, color=RED_COLOR)
    return Game(blue_unit=blue, red_unit=red, stage=_goal_stage())


def _set(unit, x, y, on_ground, stopped):
    unit.x, unit.y, unit.on_ground, unit.stopped = x, y, on_ground, stopped


class _RecordingFont:
    def __init__(self):
        self.texts = []

    def render(self, text, antialias, color):
        self.texts.append(text)
        return pygame.Surface((1, 1))


def _surface():
    return pygame.Surface((800, 600), 0, 32)


def test_not_cleared_when_neither_on_goal():
    game = _game()
    _set(game.blue_unit, 100, 530, True, False)
    _set(game.red_unit, 600, 530, True, False)
    assert game.check_cleared() is False


def test_not_cleared_when_only_one_on_goal():
    game = _game()
    _set(game.blue_unit, 375, 535, True, True)
    _set(game.red_unit, 600, 530, True, False)
    assert game.check_cleared() is False


def test_cleared_when_both_on_goal():
    game = _game()
    _set(game.blue_unit, 360, 535, True, True)
    _set(game.red_unit, 380, 535, True, True)
    assert game.check_cleared() is True


def test_not_cleared_when_not_on_ground():
    game = _game()
    _set(game.blue_unit, 360, 500, False, False)
    _set(game.red_unit, 380, 500, False, False)
    assert game.check_cleared() is False


def test_cleared_state_survives_update_without_input():
    game = _game()
    _set(game.blue_unit, 360, 535, True, True)
    _set(game.red_unit, 380, 535, True, True)
    if game.check_cleared():
        game.state = GameState.CLEARED
    game.update(FrameInput())
    assert game.state is GameState.CLEARED


def test_game_over_when_a_unit_is_below_screen():
    game = _game()
    game.red_unit.y = 601
    assert game.check_game_over() is True
    game.red_unit.y = 600
    assert game.check_game_over() is False


def test_touch_on_left_half_jumps_blue_only():
    game = _game()
    _set(game.blue_unit, 100, 530, True, False)
    _set(game.red_unit, 600, 530, True, False)
    game.update(FrameInput(touches=(100.0,)))
    assert game.blue_unit.vy == pytest.approx(-12.65)
    assert game.blue_unit.on_ground is False
    assert game.red_unit.vy == 0.0
    assert game.red_unit.on_ground is True
    assert game.state is GameState.PLAYING


def test_touch_on_right_half_jumps_red_only():
    game = _game()
    _set(game.blue_unit, 100, 530, True, False)
    _set(game.red_unit, 600, 530, True, False)
    game.update(FrameInput(touches=(400.0,)))
    assert game.red_unit.vy == pytest.approx(-12.65)
    assert game.blue_unit.vy == 0.0


def test_key_jump_for_each_unit():
    game = _game()
    _set(game.blue_unit, 100, 530, True, False)
    _set(game.red_unit, 600, 530, True, False)
    game.update(FrameInput(blue_jump=True, red_jump=True))
    assert game.blue_unit.vy == pytest.approx(-12.65)
    assert game.red_unit.vy == pytest.approx(-12.65)


def test_playing_update_reaches_cleared():
    game = _game()
    _set(game.blue_unit, 360, 530, True, False)
    _set(game.red_unit, 380, 530, True, False)
    game.update(FrameInput())
    assert game.state is GameState.CLEARED


def test_confirm_after_game_over_resets():
    game = _game()
    game.stage_loader = StageLoader(current_stage_index=3)
    game.state = GameState.GAME_OVER
    _set(game.blue_unit, 250, 700, True, True)
    game.update(FrameInput(confirm=True))
    assert game.state is GameState.PLAYING
    blue, red = game.blue_unit, game.red_unit
    assert (blue.x, blue.y, blue.vx, blue.vy, blue.direction) == (100, 100, SPEED, 0, 1)
    assert (red.x, red.y, red.vx, red.vy, red.direction) == (600, 100, -SPEED, 0, -1)
    assert blue.stopped is False and blue.on_ground is False
    assert game.stage == load_stage3()
    assert game.stage_loader.current_stage_index == 3


def test_touch_after_game_over_resets():
    game = _game()
    game.state = GameState.GAME_OVER
    game.update(FrameInput(touches=(10.0,)))
    assert game.state is GameState.PLAYING


def test_game_over_ignores_jump_keys():
    game = _game()
    game.state = GameState.GAME_OVER
    game.update(FrameInput(blue_jump=True, red_jump=True))
    assert game.state is GameState.GAME_OVER


def test_confirm_after_clear_advances_stage():
    game = _game()
    game.stage_loader = StageLoader(current_stage_index=2)
    game.state = GameState.CLEARED
    game.update(FrameInput(confirm=True))
    assert game.stage_loader.current_stage_index == 3
    assert game.state is GameState.PLAYING
    assert game.stage == load_stage3()


def test_clearing_last_stage_restarts_from_first():
    game = _game()
    game.stage_loader = StageLoader(current_stage_index=10)
    game.state = GameState.CLEARED
    game.advance_to_next_stage_or_restart()
    assert game.stage_loader.current_stage_index == 1
    assert game.stage == StageLoader().load_stage(1)


def test_new_game_starts_at_stage_one():
    game = new_game()
    assert game.state is GameState.PLAYING
    assert game.stage_loader.current_stage_index == 1
    assert game.stage == StageLoader().load_stage(1)
    assert (game.blue_unit.x, game.blue_unit.direction) == (100, 1)
    assert (game.red_unit.x, game.red_unit.direction) == (600, -1)
    assert game.blue_unit.color == BLUE_COLOR
    assert game.red_unit.color == RED_COLOR


def test_draw_playing_shows_platforms_units_and_stage_label():
    game = new_game()
    surface = _surface()
    font = _RecordingFont()
    game.draw(surface, font)
    assert tuple(surface.get_at((5, 590)))[:3] == GROUND_COLOR[:3]
    assert tuple(surface.get_at((330, 525)))[:3] == GOAL_COLOR[:3]
    assert tuple(surface.get_at((105, 105)))[:3] == BLUE_COLOR[:3]
    assert tuple(surface.get_at((605, 105)))[:3] == RED_COLOR[:3]
    assert font.texts == ["Stage 1"]


def test_draw_game_over_dims_screen_and_shows_retry():
    game = new_game()
    game.state = GameState.GAME_OVER
    surface = _surface()
    font = _RecordingFont()
    game.draw(surface, font)
    assert tuple(surface.get_at((105, 105)))[:3] != BLUE_COLOR[:3]
    assert font.texts == ["GAME OVER", "Press SPACE to retry"]


def test_draw_cleared_offers_next_stage_or_restart():
    game = new_game()
    game.state = GameState.CLEARED
    font = _RecordingFont()
    game.draw(_surface(), font)
    assert font.texts == ["STAGE CLEARED!", "Press SPACE for next stage"]

    game.stage_loader.current_stage_index = 10
    font = _RecordingFont()
    game.draw(_surface(), font)
    assert font.texts == ["STAGE CLEARED!", "Press SPACE to restart"]