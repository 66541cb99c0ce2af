# ppgfx

A small computer graphics toolkit built on NumPy and Pillow. It covers the
classic building blocks of rendering, from a bare framebuffer up to a ray
tracer and a software rasterizer, plus the simulation model of a small
asteroid shooter.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `ppgfx.image`: `Image`, an RGB framebuffer of 8-bit channels addressed as
  (x, y) from the top left. `get_pixel`, `set_pixel` (channels 0..255),
  `set_pixel_float` (channels clamped to 0..1 and scaled by 255), `clear`,
  `to_bytes`, `from_raw`, `save_raw` / `load_raw` for packed RGB files and
  `save_bmp` / `load_bmp` for BMP files. Positions outside the image raise
  `IndexError`; channel values outside 0..255 raise `ValueError`.
- `ppgfx.transform`: vector helpers `normalize`, `lerp`, `reflect`, `refract`
  and 4x4 matrices for column vectors: `translate`, `scale`, `rotate`,
  `perspective`, `look_at`, `yaw_pitch_roll`, `orientate4`.
- `ppgfx.gradient`: `gradient(size)` returns a square image whose red channel
  grows down the rows and green channel across the columns.
- `ppgfx.filter`: `to_grayscale`, `brighten` and `apply_filter`, which returns
  a new image with the left half in grayscale and the right half brightened by
  1.5, saturating at 255.
- `ppgfx.bresenham`: `Point`, `draw_line` (draws white pixels from the start
  up to, but not including, the end and returns the points), `draw_polyline`
  and `star_points(size)`, the corners of a five-pointed star in one stroke.
- `ppgfx.bezier`: `bezier_point` evaluates a cubic curve by repeated
  interpolation; `bezier_shape` samples a chain of cubic curves that share end
  points, `count + 1` points per curve. `Q_CONTROL_POINTS` outlines the
  letter q.
- `ppgfx.raycast`: a ray caster with Phong lighting and shadows from point
  lights: `Ray`, `Material`, `Hit`, `Camera`, `Light`, `Sphere`, `World`
  (`cast`, `trace`, `render`), `random_dome` and `default_world`.
- `ppgfx.raytrace`: a recursive path tracer with diffuse, reflective and
  refractive materials lit by emissive surfaces: `Material`, `Hit`, `Sphere`,
  `World` (`cast`, `trace`, `render`) and `default_world`.
- `ppgfx.raster`: a software rasterizer. `Vertex`, `Face`, `lerp_vertex`
  (perspective-corrected texture coordinates), `Program` with
  `vertex_shader` and `fragment_shader`, `Rasterizer` with a depth buffer
  (`clear`, `render`), and `load_obj_faces`, which reads the triangles of the
  first shape in a Wavefront OBJ file, splitting polygons into fans.
- `ppgfx.shapes`: model matrices for animated shapes. `Shape` (the letter X)
  and `Cube`, `animate_shapes(first, second, t)`, `origin_cubes()` (three
  axes and a gray cube) and `animate_origin(cubes, t)`.
- The asteroid shooter model:
  - `ppgfx.camera.Camera`: perspective camera with `update` and `cast(u, v)`,
    which returns the world direction through a screen point.
  - `ppgfx.object.SceneObject`: base class with position, rotation, scale,
    `update`, `on_click` and `generate_model_matrix`.
  - `ppgfx.scene`: `Cursor` and `Scene`, whose `update` drops objects that
    return `False` and whose `intersect` picks objects along a ray.
  - `ppgfx.projectile.Projectile`, `ppgfx.explosion.Explosion`,
    `ppgfx.space.Space`, `ppgfx.asteroid.Asteroid`,
    `ppgfx.generator.Generator` and `ppgfx.player.Player`.
  - `ppgfx.game`: `SceneGame` builds the scene (`init_scene`), takes input
    through `on_key`, `on_cursor_pos` and `on_mouse_button`, and advances the
    simulation with `step(dt)`. `Key` lists the key codes it reacts to:
    `LEFT` / `RIGHT` move the player, `SPACE` fires, `R` restarts and `P`
    pauses.

## Example

```python
from ppgfx.image import Image
from ppgfx.bresenham import draw_polyline, star_points

image = Image(512, 512)
draw_polyline(image, star_points(512))
image.save_bmp("star.bmp")
```

```python
from ppgfx.image import Image
from ppgfx.raycast import default_world

image = Image(128, 128)
default_world().render(image, 2)
image.save_bmp("spheres.bmp")
```

```python
from ppgfx.game import PRESS, Key, SceneGame

game = SceneGame()
game.on_key(Key.SPACE, PRESS)
for _ in range(10):
    game.step(0.05)
print(len(game.scene.objects))
```

## Commands

Each command writes its result into the current directory unless given an
output path.

```
ppgfx-gradient [output] [--size N]                       # default raw1_gradient.raw
ppgfx-filter [input] [output] [--size N]                 # lena.raw -> result.raw
ppgfx-bresenham [output] [--size N]                      # default task2_bresenham.bmp
ppgfx-raycast [output] [--size N] [--samples N]          # default raw2_raycast.bmp
ppgfx-raytrace [output] [--size N] [--samples N] [--depth N]  # default raw3_raytrace.bmp, slow
ppgfx-raster [model] [texture] [output] [--size N]       # corsair.obj + corsair.bmp -> raw4_raster.bmp
```

The image size defaults to 512. `ppgfx-filter` reads and writes packed RGB
files of size x size pixels and returns status 1 when a file cannot be read or
written.

## What this package does not do

It opens no windows and draws nothing on screen. `ppgfx.shapes`,
`ppgfx.bezier` and the asteroid shooter compute geometry, matrices and
simulation state only; `SceneGame` has no event loop or display of its own and
reacts only to the events and time steps passed to it. There is no command for
the Bezier curves, the shapes or the game.