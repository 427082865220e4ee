# cwars

A small real-time strategy prototype built on pygame. It opens an
800×600 window showing two red worker units. You can scroll the view with
the keyboard and drag a selection box over units with the mouse.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Playing

```
cwars
```

The command takes no options other than `--help`.

Controls:

- **W / A / S / D**: scroll the camera up, left, down and right. Holding
  two keys scrolls diagonally at the same speed (500 pixels per second).
- **Left mouse button**: press, drag and release to draw a selection box.
  While dragging, the box is drawn in green. On release, every unit whose
  square overlaps the box is printed as `Collided with unit:<id>`.
- **Escape**, closing the window, or **Ctrl+C**: quit.

The game runs at a fixed 30 frames per second.

## What it does not do

This is an early prototype. Units that fall inside a selection box are
reported, but they are not kept as a selection, highlighted, or given
orders. Units do not move on their own, there is no map, no resources, no
opponent and no way to save or load a game.

## Using it as a library

The building blocks are separate modules:

- `cwars.geometry`: `Vector`, an immutable 2D vector with `+`, `-`,
  component-wise or scalar `*` and `/`, `magnitude()` and `normalize()`
  (the zero vector stays zero); and `Rect`, a float rectangle with `x`,
  `y`, `w`, `h` and `position` / `size` properties.
- `cwars.collision`: the abstract `CollisionShape` and the axis-aligned
  `CollisionShapeSquare`, whose `collides_with()` is a strict overlap test:
  boxes that only touch edges do not collide.
- `cwars.camera`: `Camera`, with `move(direction)` to set its direction and
  `update(dt)` to advance it by `speed` pixels per second.
- `cwars.entities`: the abstract `Entity`, `Unit` (a 32×32 square with a
  collision box, owned by a named player) and `Worker`.
- `cwars.selection`: `Selection`, the drag box. `start()`, `move()` and
  `end()` track the drag; `rect()` gives the box in whole pixels, and the
  `on_selection` callback receives it when the drag ends.
- `cwars.player`: `Player`, whose `scan_entities(rect, entities)` prints and
  returns the units overlapping a rectangle.
- `cwars.controls`: `Controls`, which turns pygame events (through
  `input()` or `handle_event()`) into `on_stop`, `on_move_camera` and
  `on_selection` callbacks.
- `cwars.game`: `Game`, which opens the window, holds the entities and
  runs the fixed-rate loop (`run()`, `stop()`, `close()`; usable as a
  context manager), and `main()`, the command's entry point.

```python
from cwars.geometry import Vector
from cwars.collision import CollisionShapeSquare

a = CollisionShapeSquare(Vector(0, 0), Vector(32, 32))
b = CollisionShapeSquare(Vector(16, 16), Vector(32, 32))
assert a.collides_with(b)
```