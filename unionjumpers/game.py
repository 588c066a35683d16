"""Game state, per-frame update rules, drawing and the window loop."""

from __future__ import annotations

import argparse
import enum
from collections.abc import Sequence
from dataclasses import dataclass, field

import pygame

from unionjumpers.levels import StageLoader
from unionjumpers.world import (
    BLUE_COLOR,
    GOAL_COLOR,
    RED_COLOR,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    SPEED,
    UNIT_SIZE,
    WHITE_COLOR,
    Stage,
    Unit,
)

WINDOW_TITLE = "UNION JUMPERS"
FRAMES_PER_SECOND = 60
FONT_SIZE = 32

STAGE_TEXT_POS = (10, 30)
OVERLAY_COLOR = (0, 0, 0, 150)

BLUE_START = (100.0, 100.0, 1)
RED_START = (600.0, 100.0, -1)


class GameState(enum.Enum):
    """What the game is doing this frame."""

    PLAYING = enum.auto()
    GAME_OVER = enum.auto()
    CLEARED = enum.auto()


@dataclass(frozen=True)
class FrameInput:
    """Input events that began during one frame.

    ``touches`` holds the x coordinate, in screen pixels, of every touch
    that started this frame.
    """

    blue_jump: bool = False
    red_jump: bool = False
    confirm: bool = False
    touches: tuple[float, ...] = ()


def _place(unit: Unit, start: tuple[float, float, int]) -> None:
    x, y, direction = start
    unit.x = x
    unit.y = y
    unit.vx = SPEED * direction
    unit.vy = 0.0
    unit.direction = direction
    unit.on_ground = False
    unit.stopped = False


def _starting_unit(start: tuple[float, float, int], color) -> Unit:
    unit = Unit(x=0.0, y=0.0, color=color)
    _place(unit, start)
    return unit


@dataclass
class Game:
    """Two jumpers on one stage, and the progress through the stages."""

    blue_unit: Unit
    red_unit: Unit
    stage: Stage
    state: GameState = GameState.PLAYING
    stage_loader: StageLoader = field(default_factory=StageLoader)

    def check_game_over(self) -> bool:
        """Whether either unit has fallen below the screen."""
        return self.blue_unit.y > SCREEN_HEIGHT or self.red_unit.y > SCREEN_HEIGHT

    def check_cleared(self) -> bool:
        """Whether both units stand on some goal platform."""
        goals = [p for p in self.stage.platforms if p.is_goal]
        blue_on_goal = any(
            self.blue_unit.collides_with(p) and self.blue_unit.on_ground for p in goals
        )
        red_on_goal = any(
            self.red_unit.collides_with(p) and self.red_unit.on_ground for p in goals
        )
        return blue_on_goal and red_on_goal

    def reset_game(self) -> None:
        """Put both units back at the start and reload the current stage."""
        _place(self.blue_unit, BLUE_START)
        _place(self.red_unit, RED_START)
        self.stage = self.stage_loader.current_stage()
        self.state = GameState.PLAYING

    def advance_to_next_stage_or_restart(self) -> None:
        """Move on to the next stage, or back to the first after the last."""
        if not self.stage_loader.next_stage():
            self.stage_loader.reset_to_first_stage()
        self.reset_game()

    def update(self, frame_input: FrameInput) -> None:
        """Advance the game by one frame."""
        if self.state is GameState.PLAYING:
            if frame_input.blue_jump:
                self.blue_unit.jump()
            if frame_input.red_jump:
                self.red_unit.jump()
            for x in frame_input.touches:
                if x < SCREEN_WIDTH // 2:
                    self.blue_unit.jump()
                else:
                    self.red_unit.jump()

            self.blue_unit.update_physics(self.stage)
            self.red_unit.update_physics(self.stage)

            if self.check_game_over():
                self.state = GameState.GAME_OVER
            elif self.check_cleared():
                self.state = GameState.CLEARED

        elif self.state is GameState.GAME_OVER:
            if frame_input.confirm:
                self.reset_game()
            if frame_input.touches:
                self.reset_game()

        elif self.state is GameState.CLEARED:
            if frame_input.confirm:
                self.advance_to_next_stage_or_restart()
            if frame_input.touches:
                self.advance_to_next_stage_or_restart()

    def draw(self, surface, font) -> None:
        """Render the frame onto a pygame surface using the given font."""
        surface.fill((0, 0, 0))

        for platform in self.stage.platforms:
            color = GOAL_COLOR if platform.is_goal else platform.color
            pygame.draw.rect(
                surface,
                color,
                pygame.Rect(
                    int(platform.x),
                    int(platform.y),
                    int(platform.width),
                    int(platform.height),
                ),
            )

        for unit in (self.blue_unit, self.red_unit):
            pygame.draw.rect(
                surface,
                unit.color,
                pygame.Rect(int(unit.x), int(unit.y), UNIT_SIZE, UNIT_SIZE),
            )

        if self.state is GameState.PLAYING:
            label = f"Stage {self.stage_loader.current_stage_index}"
            surface.blit(font.render(label, True, WHITE_COLOR), STAGE_TEXT_POS)
            return

        overlay = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT), pygame.SRCALPHA)
        overlay.fill(OVERLAY_COLOR)
        surface.blit(overlay, (0, 0))

        cx, cy = SCREEN_WIDTH // 2, SCREEN_HEIGHT // 2
        if self.state is GameState.GAME_OVER:
            lines = [
                ("GAME OVER", (cx - 80, cy - 30)),
                ("Press SPACE to retry", (cx - 120, cy + 10)),
            ]
        else:
            loader = self.stage_loader
            if loader.current_stage_index < loader.total_stages:
                second = ("Press SPACE for next stage", (cx - 140, cy + 10))
            else:
                second = ("Press SPACE to restart", (cx - 120, cy + 10))
            lines = [("STAGE CLEARED!", (cx - 100, cy - 30)), second]

        for text, pos in lines:
            surface.blit(font.render(text, True, WHITE_COLOR), pos)


def new_game() -> Game:
    """A game at the start of stage 1."""
    loader = StageLoader()
    return Game(
        blue_unit=_starting_unit(BLUE_START, BLUE_COLOR),
        red_unit=_starting_unit(RED_START, RED_COLOR),
        stage=loader.current_stage(),
        state=GameState.PLAYING,
        stage_loader=loader,
    )


def _collect_input(events, surface_width: int) -> tuple[FrameInput, bool]:
    blue_jump = red_jump = confirm = False
    touches: list[float] = []
    quit_requested = False
    for event in events:
        if event.type == pygame.QUIT:
            quit_requested = True
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_f:
                blue_jump = True
            elif event.key == pygame.K_j:
                red_jump = True
            elif event.key == pygame.K_SPACE:
                confirm = True
        elif event.type == pygame.FINGERDOWN:
            touches.append(event.x * surface_width)
    return FrameInput(blue_jump, red_jump, confirm, tuple(touches)), quit_requested


def main(argv: Sequence[str] | None = None) -> int:
    """Open the game window and run until it is closed."""
    parser = argparse.ArgumentParser(
        prog="unionjumpers",
        description="Guide two jumpers to the goal: F jumps blue, J jumps red.",
    )
    parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode(
            (SCREEN_WIDTH, SCREEN_HEIGHT), pygame.SCALED | pygame.RESIZABLE
        )
        pygame.display.set_caption(WINDOW_TITLE)
        font = pygame.font.Font(None, FONT_SIZE)
        clock = pygame.time.Clock()
        game = new_game()

        while True:
            frame_input, quit_requested = _collect_input(
                pygame.event.get(), SCREEN_WIDTH
            )
            if quit_requested:
                break
            game.update(frame_input)
            game.draw(screen, font)
            pygame.display.flip()
            clock.tick(FRAMES_PER_SECOND)
    finally:
        pygame.quit()
    return 0