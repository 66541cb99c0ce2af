"""Bresenham line drawing and a star made of connected lines."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from itertools import pairwise

from ppgfx.image import Image

SIZE = 512
WHITE = (255, 255, 255)


@dataclass(frozen=True)
class Point:
    """An integer pixel position."""

    x: int
    y: int


def _line_points(start: Point, end: Point):
    x0, y0, x1, y1 = start.x, start.y, end.x, end.y
    dx = abs(x1 - x0)
    dy = abs(y1 - y0)
    p = 2 * dy - dx
    x, y = x0, y0
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1

    if dx > dy:
        while x != x1:
            yield Point(x, y)
            x += sx
            if p >= 0:
                y += sy
                p += 2 * (dy - dx)
            else:
                p += 2 * dy
    else:
        while y != y1:
            yield Point(x, y)
            y += sy
            if p >= 0:
                x += sx
                p += 2 * (dx - dy)
            else:
                p += 2 * dx


def draw_line(image, start, end):
    """Draw a white line from start up to, but not including, end.

    Returns the points of the line; those outside the image are not drawn.
    """
    points = list(_line_points(start, end))
    for point in points:
        if 0 <= point.x < image.width and 0 <= point.y < image.height:
            image.set_pixel(point.x, point.y, *WHITE)
    return points


def draw_polyline(image, points):
    """Draw lines joining each point to the next."""
    return [point for a, b in pairwise(points) for point in draw_line(image, a, b)]


def star_points(size=SIZE):
    """Return the corners of a five-pointed star drawn in one stroke."""
    return [
        Point(size // 2, 0),
        Point(0, size),
        Point(size, size // 3),
        Point(0, size // 3),
        Point(size, size),
        Point(size // 2, 0),
    ]


def main(argv=None):
    parser = argparse.ArgumentParser(description="Draw a star with Bresenham lines.")
    parser.add_argument("output", nargs="?", default="task2_bresenham.bmp")
    parser.add_argument("--size", type=int, default=SIZE)
    args = parser.parse_args(argv)

    framebuffer = Image(args.size, args.size)
    draw_polyline(framebuffer, star_points(args.size))

    print(f"Generating {args.output} file ...")
    framebuffer.save_bmp(args.output)
    print("Done.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())