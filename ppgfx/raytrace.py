"""Path tracing of reflective and refractive spheres lit by emissive surfaces."""

from __future__ import annotations

import argparse
import random
from dataclasses import dataclass, field

import numpy as np

from ppgfx.image import Image
from ppgfx.raycast import (
    DELTA,
    INF,
    Camera,
    Ray,
    _sphere_intersection,
    _vec3,
    random_dome,
)
from ppgfx.transform import lerp, normalize, reflect, refract

SIZE = 512
SAMPLES = 32
DEPTH = 5

_WHITE = np.ones(3)


@dataclass(eq=False)
class Material:
    """Emission, diffuse colour, reflectivity, transparency and refraction index."""

    emission: np.ndarray = (0.0, 0.0, 0.0)
    diffuse: np.ndarray = (0.0, 0.0, 0.0)
    reflectivity: float = 0.0
    transparency: float = 0.0
    refraction_index: float = 0.0

    def __post_init__(self) -> None:
        self.emission = _vec3(self.emission)
        self.diffuse = _vec3(self.diffuse)


@dataclass(eq=False)
class Hit:
    """A ray to surface collision."""

    distance: float
    point: np.ndarray
    normal: np.ndarray
    material: Material


NO_HIT = Hit(INF, np.zeros(3), np.zeros(3), Material())


@dataclass(eq=False)
class Sphere:
    """A sphere given by radius, centre and material."""

    radius: float
    center: np.ndarray
    material: Material

    def __post_init__(self) -> None:
        self.center = _vec3(self.center)

    def hit(self, ray):
        """Return the nearest collision of the ray with the sphere, or NO_HIT."""
        t = _sphere_intersection(self.center, self.radius, ray)
        if t is None:
            return NO_HIT
        point = ray.point(t)
        return Hit(t, point, normalize(point - self.center), self.material)


@dataclass(eq=False)
class World:
    """A camera and the spheres it looks at."""

    camera: Camera
    spheres: list = field(default_factory=list)

    def cast(self, ray):
        """Return the nearest collision of the ray with any sphere."""
        hit = NO_HIT
        for sphere in self.spheres:
            candidate = sphere.hit(ray)
            if candidate.distance < hit.distance:
                hit = candidate
        return hit

    def trace(self, ray, depth):
        """Return the light gathered along the ray over up to depth bounces."""
        if depth == 0:
            return np.zeros(3)

        hit = self.cast(ray)
        if hit.distance >= INF:
            return np.zeros(3)

        material = hit.material
        color = material.emission.copy()

        if random.random() < material.transparency:
            entering = float(np.dot(ray.direction, hit.normal)) < 0
            normal = hit.normal if entering else -hit.normal
            r_index = 1.0 / material.refraction_index if entering else material.refraction_index

            refraction = refract(ray.direction, normal, r_index)
            refraction_ray = Ray(hit.point - normal * DELTA, refraction)
            refraction_color = lerp(material.diffuse, _WHITE, material.transparency)
            color += refraction_color * self.trace(refraction_ray, depth - 1)
        else:
            diffuse = random_dome(hit.normal)
            reflection = reflect(ray.direction, hit.normal)
            reflected_ray = Ray(
                hit.point + hit.normal * DELTA,
                lerp(diffuse, reflection, material.reflectivity),
            )
            reflection_color = lerp(material.diffuse, _WHITE, material.reflectivity)
            color += reflection_color * self.trace(reflected_ray, depth - 1)

        return color

    def render(self, image, samples, depth):
        """Render the world into image averaging samples paths per pixel."""
        if samples < 1:
            raise ValueError(f"samples must be at least 1, got {samples}")
        for y in range(image.height):
            for x in range(image.width):
                color = np.zeros(3)
                for _ in range(samples):
                    ray = self.camera.generate_ray(x, y, image.width, image.height)
                    color += self.trace(ray, depth)
                color /= samples
                image.set_pixel_float(x, y, *color)
        return image


def default_world():
    """Return the demonstration room lit by its ceiling."""
    return World(
        camera=Camera((0, 0, 25), (0, 0, 1), (0, 0.5, 0), (0.5, 0, 0)),
        spheres=[
            Sphere(10000, (0, -10010, 0), Material((0, 0, 0), (0.8, 0.8, 0.8))),
            Sphere(10000, (-10010, 0, 0), Material((0, 0, 0), (1, 0, 0))),
            Sphere(10000, (10010, 0, 0), Material((0, 0, 0), (0, 1, 0))),
            Sphere(10000, (0, 0, -10010), Material((0, 0, 0), (0.8, 0.8, 0))),
            Sphere(10000, (0, 0, 10030), Material((0, 0, 0), (0, 0.8, 0.8))),
            Sphere(10000, (0, 10010, 0), Material((1, 1, 1), (0.8, 0.8, 0.8))),
            Sphere(2, (-5, -8, 3), Material((0, 0, 0), (0.7, 0.7, 0), 1, 0.95, 1.52)),
            Sphere(4, (0, -6, 0), Material((0, 0, 0), (0.7, 0.5, 0.1), 1, 0, 0)),
            Sphere(10, (10, 10, -10), Material((0, 0, 0), (0, 0, 1), 0, 0, 1.54)),
        ],
    )


def main(argv=None):
    parser = argparse.ArgumentParser(description="Path trace a scene of spheres.")
    parser.add_argument("output", nargs="?", default="raw3_raytrace.bmp")
    parser.add_argument("--size", type=int, default=SIZE)
    parser.add_argument("--samples", type=int, default=SAMPLES)
    parser.add_argument("--depth", type=int, default=DEPTH)
    args = parser.parse_args(argv)

    print("This will take a while ...")
    image = Image(args.size, args.size)
    default_world().render(image, args.samples, args.depth)
    image.save_bmp(args.output)
    print("Done.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())