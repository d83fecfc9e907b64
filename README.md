# myengine

The engine-side core of a small 3D viewer: a scene graph of objects built
from model hierarchies, axis-aligned bounding boxes, transform and camera
maths, and a command console with argument completion and history.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Geometry and scene

- `myengine.bounds.Bounds`: an axis-aligned box that starts empty
  (`min` at +infinity, `max` at -infinity). `expand` grows it to enclose
  another `Bounds` or a single 3-component point; `center()` and
  `diagonal()` return numpy arrays.
- `myengine.transform`: quaternions are numpy arrays ordered `(w, x, y, z)`
  and matrices are 4x4 arrays acting on column vectors.
  - `quat_from_vectors(u, v)`: shortest rotation taking `u` onto `v`.
  - `quat_to_matrix(q)`: 4x4 rotation matrix of a unit quaternion.
  - `rotate_inverse(v, q)`: rotate `v` by the inverse of `q`.
  - `Transform`: `position`, `scale` and `rotation`, with
    `model_matrix()` (translate, rotate, scale), `view_matrix()` (scale,
    rotate, translate), the `front()`, `right()` and `up()` directions, and
    a three-line `str()` giving scale, rotation and position.
- `myengine.camera`: `perspective(fov, aspect, near, far)` builds a
  right-handed projection with clip depth -1..1 and `fov` in radians; it
  raises `ValueError` for a zero aspect or equal planes. `Camera` holds
  those values and a `Transform`, and returns `perspective_matrix()`.
- `myengine.mesh`: `Vertex` (position, normal, uv) and `Mesh`. Giving a
  `Mesh` its vertices and triangles computes its bounds;
  `set_vertices(vertices, tris, bounds)` stores geometry once and raises
  `MeshError` for empty data, triangles without 3 indices, indices out of
  range, or a second assignment. `triangle_count()` returns the number of
  triangles.
- `myengine.model.Model`: a named node holding meshes and sub-models;
  `add_mesh` and `add_submodel` grow its bounds.
- `myengine.scene_object.SceneObject`: a node of the scene tree, optionally
  carrying a mesh. `SceneObject.from_model` and `instantiate(model)` mirror
  a model hierarchy; `apply(fn)` calls `fn` on a node and goes into its
  children only when `fn` returns true; iterating a node walks it and all
  its descendants depth first; `cache_model_matrices(parent_matrix)` stores
  world matrices in `model_matrix`.
- `myengine.scene.Scene`: a camera, a `root_object` named `"root"` and the
  `highlighted` object. `update_highlighted(obj, look_dir)` highlights an
  object and places the camera to frame it from `look_dir` (by default
  `(0, 0, -1)`).

## Commands

`myengine.command_manager.CommandManager` holds the registered commands.
`execute` runs a command line and returns `True` if a command ran; missing
arguments are filled from their defaults, and when that is not enough the
command's help text is logged. `completions` proposes command names for
the first word and argument values after it:

```python
import math

from myengine.camera import Camera
from myengine.command_manager import CommandManager
from myengine.orient import Orient
from myengine.scene import Scene
from myengine.select import Select

scene = Scene(Camera(math.radians(90), 1.5, 0.1, 1000))
manager = CommandManager(scene)
manager.register(Select)
manager.register(Orient)

manager.execute("select root")
manager.execute("orient z-")
print(manager.completions("or"))        # ['orient']
print(manager.completions("orient x"))  # ['x', 'x+', 'x-']
```

The commands included:

- `select <target>` (`myengine.select.Select`): highlights the first scene
  object with that name; the target defaults to `root`. An unknown name is
  reported on standard error.
- `orient <orientation>` (`myengine.orient.Orient`): reframes the
  highlighted object from an axis such as `x`, `y+` or `z-`.
  `parse_orientation` turns such text into a unit vector and raises
  `ValueError` otherwise.

New commands subclass `myengine.command.Command`, list their arguments as
`myengine.arg.Arg` values (with an `ArgType` that drives completion), and
implement `execute(manager, args)`, where `args[0]` is the command name.

`manager.log(fmt, *args)` appends printf-style text to the log buffer, and
`process_log()` moves the buffered text into `manager.logs`, one entry per
line.

## Console

`myengine.console.Console` keeps the state of a console front end:

- `submit(text)` trims spaces and runs a non-empty line through
  `exec_command`, which echoes it to the log as `> line`, moves it to the
  end of the history and executes it.
- `history_step("up" | "down", current)` browses the history and returns
  what the input line should now hold.
- `refresh_completions(text)`, `select_next()`, `select_previous()` and
  `complete(buffer, cursor)` manage completion; `complete` replaces the
  word before the cursor with the selected proposal and a space.
- `filtered_logs(pattern)` returns log lines passing a filter of
  comma-separated, case-insensitive include terms and `-`-prefixed exclude
  terms, such as `"incl,-excl"`; `clear()` empties the logs.

## What this package does not do

It opens no window and draws nothing: there is no GPU rendering, no
shader or texture handling, no on-screen console or hierarchy browser, and
no reading of model or image files. Meshes and models are built from data
you supply, and the console is driven by calling its methods.