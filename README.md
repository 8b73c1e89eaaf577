# catalyst

Building blocks for a small game engine, written in Python:

- **Configuration** (`catalyst.config`): a `Config` read from an XML
  document of categories and typed values (`int`, `float`, `bool`,
  `string`, `vector2`, `vector3`, `vector4`, `color`). Values are looked up
  with `get`, `has` and `require`; `require` raises `InvalidValueError`
  when a value is missing. `parse_type` maps a type name to a `ValueType`.
- **Window state** (`catalyst.screen`): a `Screen` holding width, height,
  title, clear colour and vsync, loaded from a `Config`, with
  `begin_frame` / `end_frame` bookkeeping and `close_window` /
  `should_close`. Missing settings raise `ScreenError`.
- **Frame timing** (`catalyst.timing`): a `FrameClock` giving delta time
  (capped at 0.1 s), application time and frames per second. The clock
  function can be supplied, which makes it easy to drive in tests.
- **Debug gizmos** (`catalyst.gizmos`, `catalyst.rings`,
  `catalyst.spheres`, `catalyst.gizmos2d`): immediate-mode buffers of lines
  and triangles, each with a fixed capacity, for boxes, transforms, Hermite
  splines, cylinders, rings, disks, arcs, spheres, capsules and 2-D boxes
  and circles. `ortho` builds an orthographic projection matrix.
- **Editor helpers** (`catalyst.editor`): `generate_sphere` builds the
  positions, normals, UVs, tangents and bitangents of a unit UV sphere as a
  `SphereMesh`; `add_editor_grid` adds a 201 × 201 ground grid to a
  `Gizmos` buffer, with every tenth line highlighted.
- **Utilities**: string helpers (`catalyst.strings`), collection queries
  (`catalyst.linq`) and callbacks bound to an owner (`catalyst.callback`).

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

Reading configuration:

```python
from catalyst.config import Config

xml = """
<Config><Categories>
  <Category title="window">
    <Value name="width" type="int" value="1280"/>
    <Value name="clrCol" type="color" value="0.1,0.1,0.1,1"/>
  </Category>
</Categories></Config>
"""
config = Config(xml)
config.load()
config.get("window", "width", 0)      # 1280
config.get("window", "clrCol")        # (0.1, 0.1, 0.1, 1.0)
config.has("window", "height")        # False
```

A source that is not well-formed XML loads nothing; values with an unknown
type are skipped and a warning is logged.

Frame timing with a supplied clock:

```python
from catalyst.timing import FrameClock

readings = iter([0.0, 0.05, 0.5])
clock = FrameClock(lambda: next(readings))
clock.start()
clock.tick()
clock.delta_time                      # 0.05
clock.tick()
clock.delta_time                      # 0.1 (capped)
```

Debug gizmos:

```python
from catalyst.gizmos import Color, Gizmos
from catalyst.rings import add_disk

gizmos = Gizmos(1000, 1000, 100, 100)
gizmos.add_aabb((0, 0, 0), (1, 1, 1), Color(1, 0, 0, 1))
add_disk(gizmos, (0, 0, 0), 2.0, 16, Color(0, 1, 0, 0))
len(gizmos.lines)                     # 12 box edges + 16 disk outline segments
```

Triangles with an alpha below one go to `gizmos.transparent_tris`, opaque
ones to `gizmos.tris`. Once a buffer is full, further primitives are
dropped and `add_line` / `add_tri` return `False`. `clear` empties every
buffer.

Utilities:

```python
from catalyst.strings import split, replace_all
from catalyst.linq import first

split("1,2,3", ",", int)              # [1, 2, 3]
replace_all("a-b-c", "-", "+")        # "a+b+c"
first([1, 2, 3], lambda x: x > 1)     # 2
```

## What this package does not do

- It has no application loop, module system, actors or components; the
  pieces above are meant to be used by such code, not to replace it.
- `Screen` keeps window state and frame bookkeeping only. It does not create
  an operating-system window, and nothing here renders: the gizmo buffers
  and `SphereMesh` hold geometry for a renderer to draw.
- There is no command-line program.