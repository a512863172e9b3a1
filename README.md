# flapbird

A Flappy Bird style arcade game. Guide the bird through the gaps between
the pipes. Each pipe passed scores a point, and touching a pipe or the
ground ends the round. The game-over board shows the round's score and
the best score of the session.

## Installing

```
pip install .
```

The game uses pygame for its window, graphics, input and sound.

## Playing

```
flapbird
flapbird --assets DIR
```

The game loads its images from `res/sprites/` and its sounds from
`res/audio/`. Without `--assets` these are looked up relative to the
working directory; with `--assets DIR` they are looked up under `DIR`,
so `DIR` is the directory that holds `res/`.

Controls:

- **Space** or a **mouse click** (left or right button) starts a round
  and makes the bird flap. A held key or button counts once.
- After a crash, click the restart button or press **Space** to play
  again.
- Close the window to quit.

The window is 500 × 650 pixels and runs at 60 frames per second. The
score is shown with three digits.

## What it does not do

- The images and sounds are not part of the package; they must be
  supplied under `res/`. A missing image stops the game with
  `flapbird.engine.sprite.AssetError`; a missing sound is logged as a
  warning and the game goes on.
- The best score is kept only while the game runs; nothing is saved
  between sessions.

## Layout

- `flapbird.game` holds `Game` and the `main(argv=None)` entry point.
  `Game(root=None, engine=None)` builds every object; `Game.run()` plays
  until the window closes and `Game.step()` runs a single frame.
- `flapbird.objects` holds the game's objects: `Bird`, `Pipe`,
  `PipeManager`, `Base`, `Background`, `Score`, `Board`, `Number` and
  `RestartButton`.
- `flapbird.engine` is the small engine underneath: `Engine` and
  `init_engine` in `core`, `GameObj`, `GameObjManager` and `Component` in
  `gameobj`, the components `Transform`/`Position`, `Sprite`, `Animator`
  and `Collider`, and `Window`, `Input`/`Key`, `Sound` and `Button`.
- `flapbird.settings` holds the tuning values, the asset names,
  `asset_path(name, root=None)` and the `GameState` enum.

## Tests

```
pip install .[test]
pytest
```