# engine2d

A small 2D engine built around a fixed-timestep game loop, a scene of named
children, and OpenGL-drawn shapes (through pyglet). It also contains the plain
building blocks it is made of: vectors, bounding boxes, transforms, colours,
a result wrapper, a key/value pair and a chainable dynamic array.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Trying the demo

```
engine2d-demo
```

This opens a 400 × 400 window titled "2D Engine" with two grids, the world
axes, a player square, a cursor marker and markers at the four edges of the
world. The command takes no options besides `--help`, and exits with status
1 if the window cannot be created or the shaders cannot be built.

| Key        | Action                                  |
|------------|-----------------------------------------|
| W A S D    | move the player                         |
| Left Shift | move twice as fast                      |
| R          | put the player back at the origin       |
| Tab        | resize the window to 170 × 170          |
| Escape     | quit                                    |

The player turns blue while the mouse is over it; the key markers in the
top-left corner light up while their key is pressed. The engine prints the
frame rate about once a second and "Quitting..." when the loop ends.

## Using the pieces

### Math (`engine2d.vec`, `engine2d.bounds`, `engine2d.transform`)

```python
from engine2d.vec import Vec2, Vec3
from engine2d.bounds import Bounds
from engine2d.transform import Transform

a = Vec2(1.0, 2.0)
b = Vec2.of(3.0)           # Vec2(x=3.0, y=3.0)
print(a + b, a * 2.0)      # element-wise with a vector, or with a scalar

# Window pixel -> world coordinates, for a 400x400 window showing [-1, 1]
print(Vec2.to_world(Vec2(200.0, 100.0), 400.0, 400.0, 1.0, 1.0))  # Vec2(x=0.0, y=0.5)

box = Bounds.from_point(Vec2(0.0, 0.0), Vec2(2.0, 2.0), True)
print(box.contains(Vec2(0.5, 0.5)))     # True
print(box.intersects(Bounds.zero()))    # True

t = Transform.from_scale(0.25, 0.25)
t.update_bounds()                       # recompute t.bounds from position and scale
```

`Vec2`, `Vec3`, `Vec4` and `Bounds` support `+ - * /` with a value of the
same type or with a number. `Transform.from_pos`, `from_scale` and
`from_rotation` accept a vector, a single number, or each component.

### Colours (`engine2d.color`)

```python
from engine2d.color import RGBAColor, RED

red = RGBAColor.from_hex(0xFF0000FF)        # 0xRRGGBBAA
teal = RGBAColor.from_bytes(0, 128, 128)    # alpha defaults to 255
print(red.rgba())                            # (1.0, 0.0, 0.0, 1.0)
print(red == RED)                            # True
```

Named colours: `RED`, `ORANGE`, `YELLOW`, `GREEN`, `BLUE`, `PURPLE`, `PINK`,
`WHITE`, `LIGHT_GRAY`, `GRAY`, `BLACK`.

### Utilities

- `engine2d.result.Result` wraps either a value (`Result.success(...)`) or an
  error message (`Result.failure(...)`); check `ok()`, then read `value()`
  or `error()`. `value()` on a failure raises `ValueError`; `error()` on a
  success returns `"All good!"`.
- `engine2d.pair.Pair` holds a `key` and a `value`; `swap()` returns a pair
  with the two exchanged.
- `engine2d.vector.Vector` is a dynamic array whose editing methods work in
  place and return the vector so calls can be chained: `push_back`,
  `push_front`, `insert`, `erase`, `replace`, `filter`, `flood`, `merge`,
  `merge_front`, `sort`, `reverse`, `shuffle`, and the queries `slice`,
  `unique`, `index_of`, `indexes_of`, `some`, `most`, `every`. It tracks a
  capacity that doubles when full (`capacity`, `reserve`, `resize`,
  `shrink_to_fit`). Out-of-range indexes raise `IndexError`; a bad
  start/end range raises `ValueError`.

### Scenes and the engine

- `engine2d.engine.Engine.instance()` returns the single engine. Register
  named inputs with `add_input(Input(name, keycodes))` (from
  `engine2d.inputs`), set `title`, `scale_mode` (`ScaleMode.SCALE`,
  `STRETCH` or `KEEP`) and `default_scene`, then call `init()` and
  `start()`. `is_input_pressed` and `is_input_held` report input state only
  while the window has focus; `mouse_pos` holds the cursor in world
  coordinates and `world_bounds` the visible area.
- `engine2d.scene.Scene` keeps its children by name (`add_child`,
  `remove_child`, `get_child`) and is driven by the engine through
  `update(delta)`, `draw()` and `input()`, which subclasses override.
  `SceneItem` is the base for anything placed in a scene.
- `engine2d.shapes` has `QuadShape` for filled squares and `Grid` for grid
  lines every `interval` units (or the two axes when the interval is not
  positive). `Grid.line_vertices(bounds)` gives the line end points without
  touching OpenGL.
- `engine2d.demo.DemoScene` is a complete example scene, and
  `engine2d.demo.main` is what `engine2d-demo` runs.

## What is not included

The package does not ship any GLSL shader files. `ShaderProgram`
(`engine2d.shader`) reads them from disk, and the engine and shapes by
default look for `../src/shaders/basic/vertex.glsl` and
`../src/shaders/basic/fragment.glsl`, relative to the working directory.
Without those files `start()` raises `ShaderError` and the demo exits with
status 1. Supply your own: give the engine a `ShaderProgram` through its
`vp_shader` attribute and pass `shader=` to `QuadShape` and `Grid`. The
shaders are expected to take a `vec2` position at attribute 0 and a `vec4`
colour at attribute 1, with the uniforms `color_vec`, `trans_matrix` and
`projection_matrix`.