"""The built-in stages and the loader that steps through them."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from unionjumpers.world import (
    Stage,
    create_goal_platform,
    create_grid_goal_platform,
    create_grid_ground_platform,
    create_grid_platform,
    create_ground_platform,
    create_platform,
)


def load_stage1() -> Stage:
    """Tutorial: a simple symmetric layout laid out on the grid."""
    return Stage(
        [
            create_grid_ground_platform(),
            create_grid_platform(7, 22, 5, 1),
            create_grid_platform(27, 22, 5, 1),
            create_grid_platform(10, 17, 5, 1),
            create_grid_platform(25, 17, 5, 1),
            create_grid_goal_platform(16, 26, 3, 1),
            create_grid_goal_platform(21, 26, 3, 1),
        ]
    )


def load_stage2() -> Stage:
    """Tutorial: a symmetric layout with more platforms."""
    return Stage(
        [
            create_ground_platform(),
            create_platform(100, 480, 80, 15),
            create_platform(620, 480, 80, 15),
            create_platform(180, 400, 80, 15),
            create_platform(540, 400, 80, 15),
            create_platform(120, 320, 80, 15),
            create_platform(600, 320, 80, 15),
            create_platform(200, 240, 80, 15),
            create_platform(520, 240, 80, 15),
            create_platform(300, 380, 60, 15),
            create_platform(440, 380, 60, 15),
            create_goal_platform(350, 180, 50, 15),
            create_goal_platform(400, 180, 50, 15),
        ]
    )


def load_stage3() -> Stage:
    """Tutorial: an advanced symmetric layout laid out on the grid."""
    return Stage(
        [
            create_grid_ground_platform(),
            create_grid_platform(2, 22, 5, 1),
            create_grid_platform(32, 22, 5, 1),
            create_grid_platform(9, 21, 3, 1),
            create_grid_platform(28, 21, 3, 1),
            create_grid_platform(6, 18, 3, 1),
            create_grid_platform(30, 18, 3, 1),
            create_grid_platform(11, 15, 3, 1),
            create_grid_platform(25, 15, 3, 1),
            create_grid_platform(8, 12, 4, 1),
            create_grid_platform(28, 12, 4, 1),
            create_grid_platform(13, 10, 3, 1),
            create_grid_platform(23, 10, 3, 1),
            create_grid_platform(17, 8, 2, 1),
            create_grid_platform(20, 8, 2, 1),
            create_grid_goal_platform(18, 6, 3, 1),
        ]
    )


def load_stage4() -> Stage:
    """Asymmetric: each jumper gets its own route."""
    return Stage(
        [
            create_ground_platform(),
            create_platform(50, 450, 100, 20),
            create_platform(180, 400, 80, 20),
            create_platform(100, 320, 120, 20),
            create_platform(250, 260, 90, 20),
            create_platform(650, 460, 100, 20),
            create_platform(580, 380, 70, 20),
            create_platform(620, 300, 100, 20),
            create_platform(540, 220, 80, 20),
            create_platform(320, 350, 80, 20),
            create_platform(420, 280, 70, 20),
            create_platform(360, 180, 80, 20),
            create_goal_platform(340, 140, 50, 15),
            create_goal_platform(410, 140, 50, 15),
        ]
    )


def load_stage5() -> Stage:
    """Asymmetric: more complex separate paths."""
    return Stage(
        [
            create_ground_platform(),
            create_platform(80, 480, 60, 15),
            create_platform(200, 440, 50, 15),
            create_platform(120, 380, 70, 15),
            create_platform(250, 340, 60, 15),
            create_platform(160, 280, 80, 15),
            create_platform(280, 220, 50, 15),
            create_platform(620, 470, 100, 15),
            create_platform(580, 420, 80, 15),
            create_platform(640, 370, 60, 15),
            create_platform(560, 320, 90, 15),
            create_platform(600, 270, 70, 15),
            create_platform(540, 200, 80, 15),
            create_platform(350, 300, 50, 15),
            create_platform(420, 260, 40, 15),
            create_platform(380, 200, 60, 15),
            create_platform(340, 160, 40, 15),
            create_platform(420, 160, 40, 15),
            create_goal_platform(370, 120, 60, 20),
        ]
    )


def load_stage6() -> Stage:
    """Asymmetric: a timing challenge."""
    return Stage(
        [
            create_ground_platform(),
            create_platform(60, 460, 80, 20),
            create_platform(220, 400, 60, 15),
            create_platform(140, 340, 50, 15),
            create_platform(280, 280, 70, 15),
            create_platform(180, 220, 60, 15),
            create_platform(660, 470, 80, 15),
            create_platform(600, 430, 40, 15),
            create_platform(640, 390, 35, 15),
            create_platform(580, 350, 45, 15),
            create_platform(620, 310, 40, 15),
            create_platform(560, 270, 50, 15),
            create_platform(600, 230, 45, 15),
            create_platform(320, 360, 80, 15),
            create_platform(440, 320, 60, 15),
            create_platform(380, 260, 50, 15),
            create_platform(300, 180, 45, 15),
            create_platform(360, 160, 40, 15),
            create_platform(420, 180, 45, 15),
            create_goal_platform(330, 120, 40, 15),
            create_goal_platform(430, 120, 40, 15),
        ]
    )


def load_stage7() -> Stage:
    """Asymmetric: the master challenge."""
    return Stage(
        [
            create_ground_platform(),
            create_platform(50, 480, 70, 15),
            create_platform(160, 450, 40, 15),
            create_platform(80, 410, 60, 15),
            create_platform(180, 380, 50, 15),
            create_platform(120, 340, 45, 15),
            create_platform(200, 300, 55, 15),
            create_platform(140, 260, 50, 15),
            create_platform(220, 220, 45, 15),
            create_platform(160, 180, 60, 15),
            create_platform(650, 480, 100, 15),
            create_platform(700, 440, 50, 15),
            create_platform(620, 400, 60, 15),
            create_platform(680, 360, 45, 15),
            create_platform(600, 320, 70, 15),
            create_platform(660, 280, 50, 15),
            create_platform(580, 240, 60, 15),
            create_platform(640, 200, 55, 15),
            create_platform(570, 160, 80, 15),
            create_platform(280, 400, 30, 15),
            create_platform(340, 380, 25, 15),
            create_platform(300, 340, 35, 15),
            create_platform(360, 320, 30, 15),
            create_platform(320, 280, 40, 15),
            create_platform(380, 260, 35, 15),
            create_platform(340, 220, 30, 15),
            create_platform(400, 200, 40, 15),
            create_platform(280, 140, 50, 15),
            create_platform(370, 120, 60, 15),
            create_platform(470, 140, 50, 15),
            create_goal_platform(385, 80, 50, 20),
        ]
    )


def load_stage8() -> Stage:
    """Role reversal: the jumpers must cross over to reach their goals."""
    return Stage(
        [
            create_ground_platform(),
            create_platform(650, 470, 100, 20),
            create_platform(50, 470, 100, 20),
            create_platform(580, 420, 60, 15),
            create_platform(120, 420, 60, 15),
            create_platform(500, 370, 70, 15),
            create_platform(200, 370, 70, 15),
            create_platform(420, 320, 80, 15),
            create_platform(280, 320, 80, 15),
            create_platform(340, 270, 40, 15),
            create_platform(420, 270, 40, 15),
            create_platform(200, 220, 70, 15),
            create_platform(500, 220, 70, 15),
            create_platform(120, 170, 60, 15),
            create_platform(580, 170, 60, 15),
            create_platform(300, 130, 80, 15),
            create_platform(420, 130, 80, 15),
            create_goal_platform(150, 90, 50, 15),
            create_goal_platform(600, 90, 50, 15),
        ]
    )


def load_stage9() -> Stage:
    """Role reversal: several crossings and three goals."""
    return Stage(
        [
            create_ground_platform(),
            create_platform(400, 480, 80, 15),
            create_platform(200, 460, 60, 15),
            create_platform(600, 460, 60, 15),
            create_platform(120, 420, 50, 15),
            create_platform(680, 420, 50, 15),
            create_platform(180, 380, 40, 15),
            create_platform(620, 380, 40, 15),
            create_platform(280, 360, 30, 15),
            create_platform(520, 360, 30, 15),
            create_platform(320, 320, 35, 15),
            create_platform(480, 320, 35, 15),
            create_platform(260, 280, 40, 15),
            create_platform(540, 280, 40, 15),
            create_platform(360, 240, 25, 15),
            create_platform(440, 240, 25, 15),
            create_platform(400, 220, 30, 15),
            create_platform(180, 200, 80, 15),
            create_platform(580, 180, 60, 15),
            create_platform(100, 160, 50, 15),
            create_platform(650, 140, 70, 15),
            create_platform(200, 120, 40, 15),
            create_platform(560, 100, 45, 15),
            create_goal_platform(50, 80, 40, 15),
            create_goal_platform(380, 60, 40, 15),
            create_goal_platform(710, 80, 40, 15),
        ]
    )


def load_stage10() -> Stage:
    """The final challenge: one goal at the very top."""
    return Stage(
        [
            create_ground_platform(),
            create_platform(100, 480, 50, 15),
            create_platform(375, 480, 50, 15),
            create_platform(650, 480, 50, 15),
            create_platform(50, 440, 40, 15),
            create_platform(380, 440, 40, 15),
            create_platform(700, 440, 40, 15),
            create_platform(120, 400, 30, 15),
            create_platform(200, 380, 25, 15),
            create_platform(280, 360, 35, 15),
            create_platform(360, 340, 30, 15),
            create_platform(440, 360, 35, 15),
            create_platform(520, 380, 25, 15),
            create_platform(600, 400, 30, 15),
            create_platform(680, 420, 35, 15),
            create_platform(160, 320, 40, 15),
            create_platform(240, 300, 30, 15),
            create_platform(320, 280, 35, 15),
            create_platform(400, 260, 40, 15),
            create_platform(480, 280, 35, 15),
            create_platform(560, 300, 30, 15),
            create_platform(640, 320, 40, 15),
            create_platform(100, 240, 25, 15),
            create_platform(180, 220, 20, 15),
            create_platform(260, 200, 30, 15),
            create_platform(340, 180, 25, 15),
            create_platform(420, 160, 35, 15),
            create_platform(500, 180, 25, 15),
            create_platform(580, 200, 30, 15),
            create_platform(660, 220, 20, 15),
            create_platform(720, 240, 25, 15),
            create_platform(200, 140, 50, 15),
            create_platform(300, 120, 40, 15),
            create_platform(380, 100, 40, 15),
            create_platform(460, 120, 40, 15),
            create_platform(550, 140, 50, 15),
            create_goal_platform(375, 60, 50, 20),
        ]
    )


STAGES: tuple[Callable[[], Stage], ...] = (
    load_stage1,
    load_stage2,
    load_stage3,
    load_stage4,
    load_stage5,
    load_stage6,
    load_stage7,
    load_stage8,
    load_stage9,
    load_stage10,
)


@dataclass
class StageLoader:
    """Tracks which stage is being played; stages are numbered from 1."""

    current_stage_index: int = 1
    total_stages: int = 10

    def load_stage(self, stage_index: int) -> Stage:
        """Build a fresh copy of the given stage, falling back to stage 1."""
        if 1 <= stage_index <= len(STAGES):
            return STAGES[stage_index - 1]()
        return load_stage1()

    def current_stage(self) -> Stage:
        """Build a fresh copy of the current stage."""
        return self.load_stage(self.current_stage_index)

    def next_stage(self) -> bool:
        """Advance one stage; return False if already on the last."""
        if self.current_stage_index < self.total_stages:
            self.current_stage_index += 1
            return True
        return False

    def previous_stage(self) -> bool:
        """Go back one stage; return False if already on the first."""
        if self.current_stage_index > 1:
            self.current_stage_index -= 1
            return True
        return False

    def reset_to_first_stage(self) -> None:
        """Return to stage 1."""
        self.current_stage_index = 1