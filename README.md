# polyshade

Pure-Python building blocks for a small 3D renderer. None of it talks to a
graphics API. It covers vector and rotation math, polyhedron meshes that are
flattened into vertex lists, and bookkeeping for shader uniforms.

## Modules

- `polyshade.vectors`
  - `Point2D` and `Point3D` are frozen dataclasses.
  - They support `+`, `-`, `*` and `/` with another point, component-wise, or
    with a number.
  - They support unary `-` and `+`, and provide `length2()`, `length()` and
    `normalize()`.
  - `dot()` is also available as `%`.
  - `Point3D` adds `cross()`, also available as `^`. It also iterates as
    `(x, y, z)`.
- `polyshade.angle`
  - `rotate_pair(pls, mns, cos, sin)` rotates one pair of coordinates.
  - `Angle3D` holds angles `x`, `y` and `z` with cached sines and cosines.
    Call `update_sin_cos()` after changing the angles.
  - `rotate_fore()` and `rotate_back()` rotate a `Point3D`. Given another
    `Angle3D`, they return the combined angle instead.
  - `Transformation3D` is a `pos` plus a `rot`. `to_floats()` returns the
    position, then the sines, cosines and angles, as one tuple of 12 floats.
- `polyshade.undex`
  - `Undex3D` is a triple of 32-bit unsigned integers. `+` and `-` wrap
    modulo 2**32.
  - `str()` gives `[x:y:z]`.
  - It has the box tests `in_box_inclusive(low, high)` and
    `in_box_exclusive(low, high)`.
  - `step_inclusive(low, high)` and `step_exclusive(low, high)` advance it
    like an odometer, `z` first. They return `False` once it wraps back to
    `low`. Each bound may be an `Undex3D` or a single integer.
- `polyshade.polyhedra`
  - `PolyHedra` holds `corners`, `face_indexes` and `face_textures`.
  - Build a mesh with `add_corner()` and with `add_face_color()` for a
    triangle in one `0xRRGGBB` colour.
  - `add_face3()` adds a triangle with a `TexCorner` texture coordinate at
    each corner. `add_face4()` adds a quad as the triangles (0, 1, 2) and
    (2, 1, 3).
  - `to_buffer_data()` expands each face into three `RenderPoint3D`
    vertices. The per-corner face data (colour or texture coordinate) goes in
    `normal`, and `texture` is left at zero.
  - `PolyHedra.cube(scale)` builds a cube centred on the origin with 12
    triangles.
- `polyshade.shaders`
  - `shader_type_for(path)` maps a `.vert`, `.geom` or `.frag` file name to a
    `ShaderType`. Its values are the GL enumerants.
  - For any other name it raises `InvalidFileExtensionError`.
  - `ShaderCompileError` and `ProgramLinkError` carry a build log for code
    that compiles shaders.
- `polyshade.uniforms`
  - `ShaderProgram` tracks which program is current. `use()` makes a program
    current and flushes its uniforms' pending values.
  - `find_uniform(name)` looks a name up in the `locations` given to the
    constructor and returns -1 when it is missing.
  - `upload()` records each upload in `uploads`. Override it to send the data
    somewhere real.
  - `FloatUniform.set()` uploads at once if its program is current.
    Otherwise the value is held until `update()`.
  - There are three ready-made uniforms:
    - `DepthUniform.value(near, far)`: 7 floats, from `depth_data`.
    - `ScaleUniform.value(width, height)`: 4 floats, from `scale_data`.
    - `TransformationUniform.value(trans)`: the first 9 floats of
      `Transformation3D.to_floats()`.

## Install

```
pip install .
```

## Example

```python
from polyshade.vectors import Point3D
from polyshade.polyhedra import PolyHedra
from polyshade.uniforms import ShaderProgram, DepthUniform, depth_data, scale_data

cube = PolyHedra.cube(1.0)
vertices = cube.to_buffer_data()   # 36 vertices, 3 per triangle
print(len(vertices), vertices[0].position)

print(Point3D(1, 0, 0) ^ Point3D(0, 1, 0))   # Point3D(x=0, y=0, z=1)
print(depth_data(0.1, 1000.0))               # near, far and derived terms
print(scale_data(640, 480))                  # (640, 480, 0.75, 1.0)

program = ShaderProgram(1, {"depthFactor": 0})
depth = DepthUniform(program, "depthFactor")
depth.value(0.1, 1000.0)   # held: program not current yet
program.use()              # now uploaded
print(program.uploads)
```

## What it does not do

There is no window, no rendering loop and no input handling. The package
never creates a GPU context. It does not read or compile shader files, and it
does not fill vertex buffers. `ShaderProgram.upload` only records values
until a subclass connects it to a graphics API.

## Tests

```
pip install .[test]
pytest
```