"""Geometry, platforms and unit physics for the two-jumper puzzle game."""

from __future__ import annotations

from dataclasses import dataclass, field

Color = tuple[int, int, int, int]

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600

SPEED = 1.0
GRAVITY = 0.35
JUMP_STRENGTH = 13.0

UNIT_SIZE = 20

CELL_SIZE = 20
GRID_WIDTH = SCREEN_WIDTH // CELL_SIZE
GRID_HEIGHT = SCREEN_HEIGHT // CELL_SIZE

GROUND_COLOR: Color = (100, 100, 100, 255)
PLATFORM_COLOR: Color = (150, 150, 150, 255)
GOAL_COLOR: Color = (255, 255, 0, 255)
BLUE_COLOR: Color = (0, 100, 255, 255)
RED_COLOR: Color = (255, 100, 100, 255)
WHITE_COLOR: Color = (255, 255, 255, 255)


@dataclass(frozen=True)
class Platform:
    """A solid rectangle in pixel coordinates; goal platforms are not solid."""

    x: float
    y: float
    width: float
    height: float
    color: Color = PLATFORM_COLOR
    is_goal: bool = False

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.height


@dataclass(frozen=True)
class GridPosition:
    """A position in grid cells."""

    x: int
    y: int


@dataclass(frozen=True)
class GridSize:
    """A size in grid cells."""

    width: int
    height: int


@dataclass(frozen=True)
class GridPlatform:
    """A platform expressed in grid cells."""

    position: GridPosition
    size: GridSize
    is_goal: bool = False


@dataclass
class Stage:
    """A level: the set of platforms the units move among."""

    platforms: list[Platform] = field(default_factory=list)


@dataclass
class Unit:
    """A jumper that walks on its own and jumps on command."""

    x: float
    y: float
    vx: float = 0.0
    vy: float = 0.0
    direction: int = 1
    color: Color = BLUE_COLOR
    on_ground: bool = False
    stopped: bool = False

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + UNIT_SIZE

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + UNIT_SIZE

    def collides_with(self, platform: Platform) -> bool:
        """Whether the unit's box overlaps the platform's box."""
        return (
            self.right > platform.left
            and self.left < platform.right
            and self.bottom > platform.top
            and self.top < platform.bottom
        )

    def _is_inside(self, platform: Platform) -> bool:
        return (
            self.left >= platform.left
            and self.right <= platform.right
            and self.top >= platform.top
            and self.bottom <= platform.bottom
        )

    def update_physics(self, stage: Stage) -> None:
        """Advance the unit by one frame."""
        self.vy += GRAVITY

        if self.stopped:
            self.vx = 0.0
        else:
            self.vx = SPEED * self.direction
            self.x += self.vx
            if self.x <= 0:
                self.x = 0.0
                self.direction = 1
            elif self.x >= SCREEN_WIDTH - UNIT_SIZE:
                self.x = float(SCREEN_WIDTH - UNIT_SIZE)
                self.direction = -1

        self.y += self.vy

        self.on_ground = False
        for platform in stage.platforms:
            if platform.is_goal:
                continue
            overlapping = self.right > platform.left and self.left < platform.right
            if (
                overlapping
                and self.vy > 0
                and self.bottom > platform.top
                and self.top < platform.top
            ):
                self.y = platform.top - UNIT_SIZE
                self.vy = 0.0
                self.on_ground = True

        if self.y > SCREEN_HEIGHT:
            self.y = float(SCREEN_HEIGHT - UNIT_SIZE)
            self.on_ground = True
            self.vy = 0.0

        if self.on_ground and any(
            platform.is_goal and self._is_inside(platform)
            for platform in stage.platforms
        ):
            self.stopped = True

    def jump(self) -> None:
        """Jump if standing on something."""
        if self.on_ground:
            self.vy = -JUMP_STRENGTH
            self.on_ground = False


def grid_to_pixel_x(grid_x: int) -> float:
    """Convert a grid column to a pixel x coordinate."""
    return float(grid_x * CELL_SIZE)


def grid_to_pixel_y(grid_y: int) -> float:
    """Convert a grid row to a pixel y coordinate."""
    return float(grid_y * CELL_SIZE)


def grid_to_pixel_size(grid_size: int) -> float:
    """Convert a length in cells to pixels."""
    return float(grid_size * CELL_SIZE)


def pixel_to_grid_x(pixel_x: float) -> int:
    """Convert a pixel x coordinate to a grid column, truncating toward zero."""
    return int(pixel_x / CELL_SIZE)


def pixel_to_grid_y(pixel_y: float) -> int:
    """Convert a pixel y coordinate to a grid row, truncating toward zero."""
    return int(pixel_y / CELL_SIZE)


def grid_platform_to_platform(grid_platform: GridPlatform, color: Color) -> Platform:
    """Turn a grid platform into a pixel platform of the given colour."""
    return Platform(
        x=grid_to_pixel_x(grid_platform.position.x),
        y=grid_to_pixel_y(grid_platform.position.y),
        width=grid_to_pixel_size(grid_platform.size.width),
        height=grid_to_pixel_size(grid_platform.size.height),
        color=color,
        is_goal=grid_platform.is_goal,
    )


def create_ground_platform() -> Platform:
    """The full-width ground, 50 pixels high."""
    return Platform(
        x=0.0,
        y=float(SCREEN_HEIGHT - 50),
        width=float(SCREEN_WIDTH),
        height=50.0,
        color=GROUND_COLOR,
    )


def create_platform(x: float, y: float, width: float, height: float) -> Platform:
    """An ordinary solid platform."""
    return Platform(float(x), float(y), float(width), float(height), PLATFORM_COLOR)


def create_goal_platform(x: float, y: float, width: float, height: float) -> Platform:
    """A goal zone."""
    return Platform(
        float(x), float(y), float(width), float(height), GOAL_COLOR, is_goal=True
    )


def create_grid_ground_platform() -> Platform:
    """The full-width ground, three cells high."""
    return grid_platform_to_platform(
        GridPlatform(GridPosition(0, GRID_HEIGHT - 3), GridSize(GRID_WIDTH, 3)),
        GROUND_COLOR,
    )


def create_grid_platform(x: int, y: int, width: int, height: int) -> Platform:
    """An ordinary solid platform given in grid cells."""
    return grid_platform_to_platform(
        GridPlatform(GridPosition(x, y), GridSize(width, height)), PLATFORM_COLOR
    )


def create_grid_goal_platform(x: int, y: int, width: int, height: int) -> Platform:
    """A goal zone given in grid cells."""
    return grid_platform_to_platform(
        GridPlatform(GridPosition(x, y), GridSize(width, height), is_goal=True),
        GOAL_COLOR,
    )