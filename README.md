# dangame

The building blocks of a small vertical-scrolling aircraft game on pygame: a
scene graph of nodes with transforms, category-addressed commands, a stack of
screens with deferred changes, a resource holder, and a scrolling world with
the player's aircraft.

## Installing

```
pip install .
```

The game reads its media from a `Media` directory in the working directory:

- `Media/Sansation.ttf` – the main font
- `Media/Textures/TitleScreen.png` – the title background
- `Media/Textures/Eagle.png`, `Media/Textures/Raptor.png`,
  `Media/Textures/Desert.png` – used by `dangame.world.World`

A file that cannot be loaded raises `dangame.resources.ResourceError`.

## Running

```
dangame
```

This opens a 640×480 window titled "DanGame", loads the font and the title
texture, and shows the title screen (`TitleState`) with a prompt, "Press any
key to start", that blinks every half second. The loop runs at a fixed step of
1/60 second and closes when the window is closed or the stack of screens
becomes empty. `dangame` takes no options besides `--help`; on a normal exit it
prints `Exiting NORMALLY`.

## What it does not do

The command does not yet run a playable game. `GameApp` registers only the
title screen and the pause screen (`PauseState`). Pressing a key on the title
screen requests `StateID.GAME`, for which no screen is registered, so the stack
raises `KeyError`. There is no menu screen, no screen wraps `World`, and
`PlayerBase` is an abstract class with no concrete player, so no keyboard
input steers the aircraft. `LoadingState` exists but is not registered, and
its `ParallelTask` is given no work, so it finishes at once.

## The pieces

- `dangame.identifiers` – `Category` (bit flags `ROOT`, `SCENE`,
  `PLAYER_AIRCRAFT`, `ALLIED_AIRCRAFT`, `ENEMY_AIRCRAFT`), `StateID`,
  `TextureID` and `FontID`.
- `dangame.scene` – `Transform`, a 2D affine transform; `SceneNode`, with
  `attach_child`, `detach_child` (raises `ValueError` for a node that is not a
  child), recursive `update` and `draw`, `world_transform`, `world_position`,
  `on_command` and `scene_graph_lines` / `print_scene_graph`; `Entity`, a node
  moved by its `velocity` each update; `SpriteNode`, which draws a texture or a
  tiled sub-rectangle of it.
- `dangame.command` – `Command` (an action and a category), `CommandQueue`
  (first in, first out; `pop` on an empty queue raises `IndexError`) and
  `derived_action`, which wraps a function so it raises `TypeError` for nodes
  of the wrong type.
- `dangame.resources` – `ResourceHolder`, which loads a resource once per
  identifier with a loader callable. Loading an identifier twice, a loader
  that raises, or one that returns `None` or `False` all raise `ResourceError`;
  `get` of an unknown identifier raises `KeyError`.
- `dangame.state` – `Context`, the abstract `State` and `StateStack`. Pushes,
  pops and clears are applied after each `update` or `handle_event` pass;
  updates and events go from the top screen down until one returns `False`,
  and drawing goes from the bottom up.
- `dangame.parallel_task` – `ParallelTask`, which runs work on a background
  thread and reports `completion()` and `is_finished()`.
- `dangame.application` – `Application`, the fixed-step loop with an
  `FPS = …` counter, and `PlayerBase` / `PlayerAction` for input handlers.
- `dangame.world` – `World`, which builds background and air layers, places
  the player `Aircraft` at the bottom of a 10000-pixel-tall desert, scrolls the
  view up at 40 pixels per second, scales diagonal speed by 1/√2 and keeps the
  aircraft 40 pixels inside the view.
- Screens: `DefaultState`, `TitleState`, `PauseState` (Escape pops it,
  Backspace clears every screen) and `LoadingState`.

Registering screens on a stack:

```python
from dangame.identifiers import StateID
from dangame.state import Context, StateStack
from dangame.title_state import TitleState
from dangame.pause_state import PauseState

stack = StateStack(Context())
stack.register_state(StateID.TITLE, TitleState)
stack.register_state(StateID.PAUSE, PauseState)
stack.push_state(StateID.TITLE)
```

Sending a command to the player's aircraft:

```python
from dangame.aircraft import Aircraft
from dangame.command import Command, derived_action
from dangame.identifiers import Category

command = Command(
    action=derived_action(Aircraft, lambda aircraft, dt: aircraft.accelerate(-200.0, 0.0)),
    category=Category.PLAYER_AIRCRAFT,
)
world.command_queue().push(command)
```

## Running the tests

```
pip install .[test]
pytest
```