"""Software rasterizer with programmable vertex and fragment stages."""

from __future__ import annotations

import argparse
import math
from dataclasses import dataclass, field
from itertools import pairwise

import numpy as np

from ppgfx.image import Image
from ppgfx.transform import lerp, look_at, orientate4, perspective, scale, translate

SIZE = 512
CLEAR_COLOR = (128, 128, 128)
DEPTH_CLEAR = float(np.finfo(np.float32).max)

_WHITE = (1.0, 1.0, 1.0, 1.0)


def _array(values, size: int) -> np.ndarray:
    return np.array(values, dtype=np.float64).reshape(size)


@dataclass(eq=False)
class Vertex:
    """Per-vertex data: homogeneous position and normal, texture coordinate, colour."""

    position: np.ndarray
    normal: np.ndarray = (0.0, 0.0, 0.0, 0.0)
    tex_coord: np.ndarray = (0.0, 0.0)
    color: np.ndarray = _WHITE

    def __post_init__(self) -> None:
        self.position = _array(self.position, 4)
        self.normal = _array(self.normal, 4)
        self.tex_coord = _array(self.tex_coord, 2)
        self.color = _array(self.color, 4)


@dataclass(eq=False)
class Face:
    """Three vertices forming a triangle."""

    v0: Vertex
    v1: Vertex
    v2: Vertex


def lerp_vertex(v0, v1, t):
    """Interpolate two vertices; texture coordinates are perspective corrected."""
    with np.errstate(divide="ignore", invalid="ignore"):
        z0 = np.float64(v0.position[2])
        z1 = np.float64(v1.position[2])
        z = lerp(1.0 / z0, 1.0 / z1, t)
        tex_coord = lerp(v0.tex_coord / z0, v1.tex_coord / z1, t) / z
    return Vertex(
        lerp(v0.position, v1.position, t),
        lerp(v0.normal, v1.normal, t),
        tex_coord,
        lerp(v0.color, v1.color, t),
    )


@dataclass(eq=False)
class Program:
    """Shader program: a texture and the model, view and projection matrices."""

    texture: Image
    model_matrix: np.ndarray = field(default_factory=lambda: np.identity(4))
    view_matrix: np.ndarray = field(default_factory=lambda: np.identity(4))
    projection_matrix: np.ndarray = field(default_factory=lambda: np.identity(4))

    def vertex_shader(self, vertex):
        """Project the vertex to clip space and move its normal to world space."""
        world = self.model_matrix @ vertex.position
        screen = self.projection_matrix @ (self.view_matrix @ world)
        return Vertex(
            screen,
            self.model_matrix @ vertex.normal,
            vertex.tex_coord.copy(),
            vertex.color.copy(),
        )

    def fragment_shader(self, varying):
        """Return the fragment colour: vertex colour times the texture sample."""
        lighting = 1.0
        return varying.color * lighting * self._sample(varying.tex_coord)

    def _sample(self, tex_coord) -> np.ndarray:
        image = self.texture
        u, v = np.clip(np.nan_to_num(np.asarray(tex_coord, dtype=np.float64)), 0.0, 1.0)
        x = int(u * (image.width - 1))
        y = int(v * (image.height - 1))
        # Texture rows run bottom-up, so the row index is inverted.
        r, g, b = image.get_pixel(x, min(image.height - y, image.height - 1))
        return np.array([r / 255.0, g / 255.0, b / 255.0, 1.0])


def _offsets(start: float, end: float):
    """Yield 0, 1, 2, ... while start + offset <= end."""
    if not (math.isfinite(start) and math.isfinite(end)):
        return
    offset = 0
    while start + offset <= end:
        yield offset
        offset += 1


class Rasterizer:
    """Fills triangles into an image using a shader program and a depth buffer."""

    def __init__(self, image, program):
        self.image = image
        self.program = program
        self.depth_buffer = np.empty((image.height, image.width))
        self.clear()

    def clear(self):
        """Reset the depth buffer and fill the image with the background colour."""
        self.depth_buffer = np.full((self.image.height, self.image.width), DEPTH_CLEAR)
        self.image.clear(CLEAR_COLOR)

    def _to_viewport(self, vertex: Vertex) -> Vertex:
        width, height = self.image.width, self.image.height
        viewport = scale((width / 2.0, -height / 2.0, 1.0)) @ translate((1.0, -1.0, 0.0))
        with np.errstate(divide="ignore", invalid="ignore"):
            position = viewport @ (vertex.position / vertex.position[3])
        return Vertex(position, vertex.normal, vertex.tex_coord, vertex.color)

    def _set_fragment(self, varying: Vertex) -> None:
        px, py, depth = varying.position[:3]
        if not (math.isfinite(px) and math.isfinite(py)):
            return
        x, y = int(px), int(py)
        if x < 0 or y < 0 or x >= self.image.width or y >= self.image.height:
            return
        if self.depth_buffer[y, x] < depth:
            return
        self.depth_buffer[y, x] = depth
        color = np.clip(self.program.fragment_shader(varying), 0.0, 1.0)
        self.image.set_pixel_float(x, y, *color[:3])

    def _fill(self, top: Vertex, bottom: Vertex, left_edge, right_edge) -> None:
        y0, y1 = top.position[1], bottom.position[1]
        for dy in _offsets(y0, y1):
            yt = 0.0 if y0 >= y1 else dy / (y1 - y0)
            a = lerp_vertex(*left_edge, yt)
            b = lerp_vertex(*right_edge, yt)
            if a.position[0] > b.position[0]:
                a, b = b, a
            ax, bx = a.position[0], b.position[0]
            for dx in _offsets(ax, bx):
                xt = 0.0 if ax >= bx else dx / (bx - ax)
                self._set_fragment(lerp_vertex(a, b, xt))

    def render(self, face):
        """Shade, project and fill one triangle."""
        t0, t1, t2 = (
            self._to_viewport(self.program.vertex_shader(v))
            for v in (face.v0, face.v1, face.v2)
        )
        if t0.position[1] > t1.position[1]:
            t0, t1 = t1, t0
        if t0.position[1] > t2.position[1]:
            t0, t2 = t2, t0
        if t1.position[1] > t2.position[1]:
            t1, t2 = t2, t1

        y0, y1, y2 = t0.position[1], t1.position[1], t2.position[1]
        t = 0.0 if y0 >= y2 else (y1 - y0) / (y2 - y0)
        tm = lerp_vertex(t0, t2, t)

        self._fill(t0, t1, (t0, tm), (t0, t1))
        self._fill(t1, t2, (t1, t2), (tm, t2))


def _resolve(token: str, items: list, kind: str) -> int:
    index = int(token)
    if index > 0:
        resolved = index - 1
    elif index < 0:
        resolved = len(items) + index
    else:
        raise ValueError(f"{kind} index 0 is not valid")
    if not 0 <= resolved < len(items):
        raise ValueError(f"{kind} index {index} is out of range")
    return resolved


def _corner(token: str, positions: list, texcoords: list, normals: list) -> Vertex:
    parts = token.split("/")
    position = positions[_resolve(parts[0], positions, "position")]
    tex_coord = (0.0, 0.0)
    normal = (0.0, 0.0, 0.0, 1.0)
    if len(parts) > 1 and parts[1]:
        tex_coord = texcoords[_resolve(parts[1], texcoords, "texture coordinate")]
    if len(parts) > 2 and parts[2]:
        normal = normals[_resolve(parts[2], normals, "normal")]
    return Vertex(position, normal, tex_coord, _WHITE)


def load_obj_faces(path):
    """Read the triangles of the first shape in a Wavefront OBJ file.

    Polygons are split into fans of triangles.
    """
    positions: list = []
    normals: list = []
    texcoords: list = []
    faces: list = []
    with open(path, encoding="utf-8") as stream:
        for line in stream:
            fields = line.split()
            if not fields or fields[0].startswith("#"):
                continue
            kind, args = fields[0], fields[1:]
            if kind == "v":
                positions.append((*map(float, args[:3]), 1.0))
            elif kind == "vn":
                normals.append((*map(float, args[:3]), 1.0))
            elif kind == "vt":
                coords = [float(a) for a in args[:2]]
                coords += [0.0] * (2 - len(coords))
                texcoords.append(tuple(coords))
            elif kind in ("o", "g"):
                if faces:
                    break
            elif kind == "f":
                corners = [_corner(t, positions, texcoords, normals) for t in args]
                if len(corners) < 3:
                    raise ValueError(f"face with {len(corners)} corners in {path}")
                faces.extend(Face(corners[0], a, b) for a, b in pairwise(corners[1:]))
    if not faces:
        raise ValueError(f"{path} holds no faces")
    return faces


def main(argv=None):
    parser = argparse.ArgumentParser(description="Rasterize a textured OBJ model.")
    parser.add_argument("model", nargs="?", default="corsair.obj")
    parser.add_argument("texture", nargs="?", default="corsair.bmp")
    parser.add_argument("output", nargs="?", default="raw4_raster.bmp")
    parser.add_argument("--size", type=int, default=SIZE)
    args = parser.parse_args(argv)

    image = Image(args.size, args.size)
    faces = load_obj_faces(args.model)
    texture = Image.load_bmp(args.texture)
    program = Program(
        texture,
        model_matrix=orientate4((0.0, 0.4, 0.8)),
        view_matrix=look_at((0.0, 0.7, 0.7), (0.0, 0.0, 0.0), (0.5, 0.5, 0.0)),
        projection_matrix=perspective(
            math.radians(60.0), image.width / image.height, 1.0, 15.0
        ),
    )
    rasterizer = Rasterizer(image, program)
    for face in faces:
        rasterizer.render(face)

    image.save_bmp(args.output)
    print("Done.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())