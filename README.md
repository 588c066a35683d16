# Union Jumpers

Union Jumpers is a small cooperative arcade platformer. There are two runners, one blue and one red.
They walk across the screen on their own and turn around when they reach its left or right edge.
You make them jump at the right moments. The goal is for **both** of them to end up standing
on the yellow goal platforms. If either runner falls below the bottom of the screen, the game
is over.

There are ten stages. The first three are symmetric tutorials. The middle stages give each
runner its own route, and in the last stages the runners have to swap sides.

## Installing

```
pip install .
```

This installs the game and its one dependency, pygame.

## Playing

Start the game with:

```
unionjumpers
```

This opens an 800×600 window that can be resized. The current stage number is shown in the
top-left corner.

| Input                       | Action                                  |
|-----------------------------|-----------------------------------------|
| `F`                         | blue runner jumps                       |
| `J`                         | red runner jumps                        |
| touch, left half of screen  | blue runner jumps                       |
| touch, right half of screen | red runner jumps                        |
| `Space` or any touch        | retry after a game over                 |
| `Space` or any touch        | go on to the next stage once cleared    |

To quit, close the window.

A runner can only jump while it stands on something. Goal platforms are not solid. A runner
that lands fully inside a goal area stops there and waits for its partner. Once the last stage
has been cleared, play starts again from stage 1.

## Driving the game from code

The game logic does not need a window:

```python
from unionjumpers.game import FrameInput, GameState, new_game

game = new_game()
for _ in range(120):
    game.update(FrameInput(blue_jump=False, red_jump=False))
print(game.state is GameState.PLAYING)
```

- `unionjumpers.game` has these parts:
  - `Game`, with `update`, `check_cleared`, `check_game_over`, `reset_game`,
    `advance_to_next_stage_or_restart` and `draw`, which draws onto a pygame surface with a
    pygame font.
  - `FrameInput`, which holds the input for one frame: `blue_jump`, `red_jump`, `confirm` and
    `touches`. `touches` holds the x coordinates of the touches that started in that frame.
  - `GameState`, `new_game()` and `main()`.
- `unionjumpers.levels` has `load_stage1()` to `load_stage10()` and `StageLoader`, with
  `load_stage`, `current_stage`, `next_stage`, `previous_stage` and `reset_to_first_stage`.
  An unknown stage number loads stage 1.
- `unionjumpers.world` has `Platform`, `Unit` (with `update_physics`, `jump` and
  `collides_with`) and `Stage`. It also has the grid types `GridPosition`, `GridSize` and
  `GridPlatform`, the grid/pixel conversion helpers, and the `create_*platform` helpers.

## What it does not do

The game has no sound. It has no menu or stage selection, and `previous_stage` is not bound to
any key. It does not save progress, so every run starts at stage 1. Mouse clicks are not read
as input; only keys and touches are.

## Running the tests

```
pip install .[test]
pytest
```