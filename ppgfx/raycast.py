"""Ray casting of spheres lit by point lights with Phong shading."""

from __future__ import annotations

import argparse
import math
import random
import sys
from dataclasses import dataclass, field

import numpy as np

from ppgfx.image import Image
from ppgfx.transform import normalize, reflect

INF = sys.float_info.max
EPS = sys.float_info.epsilon
DELTA = math.sqrt(EPS)

AMBIENT = (0.1, 0.1, 0.1)
SIZE = 512
SAMPLES = 4


def _vec3(v) -> np.ndarray:
    return np.array(v, dtype=np.float64).reshape(3)


@dataclass(eq=False)
class Ray:
    """A half line given by its origin and direction."""

    origin: np.ndarray
    direction: np.ndarray

    def __post_init__(self) -> None:
        self.origin = _vec3(self.origin)
        self.direction = _vec3(self.direction)

    def point(self, t):
        """Return the point at distance t along the ray."""
        return self.origin + self.direction * t


@dataclass(eq=False)
class Material:
    """Surface emission, diffuse colour and specular shininess."""

    emission: np.ndarray = (0.0, 0.0, 0.0)
    diffuse: np.ndarray = (0.0, 0.0, 0.0)
    shininess: float = 0.0

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


def _sphere_intersection(center: np.ndarray, radius: float, ray: Ray) -> float | None:
    """Return the nearest positive distance at which the ray meets the sphere."""
    oc = ray.origin - center
    a = float(np.dot(ray.direction, ray.direction))
    b = float(np.dot(oc, ray.direction))
    c = float(np.dot(oc, oc)) - radius * radius
    discriminant = b * b - a * c
    if discriminant > 0:
        e = math.sqrt(discriminant)
        for t in ((-b - e) / a, (-b + e) / a):
            if t > EPS:
                return t
    return None


@dataclass(eq=False)
class Camera:
    """A pinhole camera described by position and back, up and right vectors."""

    position: np.ndarray
    back: np.ndarray
    up: np.ndarray
    right: np.ndarray

    def __post_init__(self) -> None:
        self.position = _vec3(self.position)
        self.back = _vec3(self.back)
        self.up = _vec3(self.up)
        self.right = _vec3(self.right)

    def generate_ray(self, x, y, width, height):
        """Return a ray through pixel (x, y) jittered randomly inside the pixel."""
        vdu = 2.0 * self.right / width
        vdv = 2.0 * -self.up / height
        direction = (
            -self.back
            + vdu * ((-(width // 2) + x) + random.random())
            + vdv * ((-(height // 2) + y) + random.random())
        )
        return Ray(self.position.copy(), normalize(direction))


@dataclass(eq=False)
class Light:
    """A point light with constant, linear and quadratic attenuation."""

    position: np.ndarray
    color: np.ndarray
    att_const: float = 1.0
    att_linear: float = 0.0
    att_quad: float = 0.0

    def __post_init__(self) -> None:
        self.position = _vec3(self.position)
        self.color = _vec3(self.color)


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


def _spherical_rand() -> np.ndarray:
    while True:
        v = np.array([random.gauss(0.0, 1.0) for _ in range(3)])
        length = float(np.linalg.norm(v))
        if length > 0.0:
            return v / length


def random_dome(normal):
    """Return a random unit vector on the half sphere facing along normal."""
    n = _vec3(normal)
    while True:
        p = _spherical_rand()
        if float(np.dot(p, n)) >= 0:
            return p


@dataclass(eq=False)
class World:
    """A camera, point lights and spheres to render."""

    camera: Camera
    lights: list = field(default_factory=list)
    spheres: list = field(default_factory=list)

    def cast(self, ray):
        """Return the nearest collision of the ray with any sphere."""
        hit = NO_HIT
        for sphere in self.spheres:
            candidate = sphere.hit(ray)
            if candidate.distance < hit.distance:
                hit = candidate
        return hit

    def trace(self, ray):
        """Return the Phong-lit colour seen along the ray."""
        hit = self.cast(ray)
        if hit.distance >= INF:
            return np.zeros(3)

        diffuse = np.zeros(3)
        specular = np.zeros(3)
        for light in self.lights:
            to_light = light.position - hit.point
            light_distance = float(np.linalg.norm(to_light))
            light_ray = Ray(hit.point + hit.normal * DELTA, normalize(to_light))

            if self.cast(light_ray).distance < light_distance:
                continue

            attenuation = 1.0 / (
                light.att_const
                + light.att_linear * light_distance
                + light.att_quad * light_distance * light_distance
            )
            dif = min(max(float(np.dot(light_ray.direction, hit.normal)), 0.0), 1.0)
            diffuse += hit.material.diffuse * attenuation * light.color * dif

            spec = float(np.dot(reflect(ray.direction, hit.normal), light_ray.direction))
            spec = min(max(spec, 0.0), 1.0)
            specular += light.color * attenuation * spec**hit.material.shininess

        return np.array(AMBIENT) + hit.material.emission + diffuse + specular

    def render(self, image, samples):
        """Render the world into image averaging samples rays per pixel."""
        if samples < 1:
            raise ValueError(f"samples must be at least 1, got {samples}")
        for y in range(image.height):
            for x in range(image.width):
                color = np.zeros(3)
                for _ in range(samples):
                    ray = self.camera.generate_ray(x, y, image.width, image.height)
                    color += self.trace(ray)
                color /= samples
                image.set_pixel_float(x, y, *color)
        return image


def default_world():
    """Return the demonstration room with three spheres and two lights."""
    return World(
        camera=Camera((0, 0, 25), (0, 0, 1), (0, 0.5, 0), (0.5, 0, 0)),
        lights=[
            Light((-5, 5, 9), (1, 1, 1), 1, 0.1, 0),
            Light((5, 0, 15), (0.2, 0.5, 0.2), 1, 0.1, 0.01),
        ],
        spheres=[
            Sphere(10000, (0, -10010, 0), Material((0, 0, 0), (0.8, 0.8, 0.8), 1)),
            Sphere(10000, (-10010, 0, 0), Material((0, 0, 0), (1, 0, 0), 1)),
            Sphere(10000, (10010, 0, 0), Material((0, 0, 0), (0, 1, 0), 1)),
            Sphere(10000, (0, 0, -10010), Material((0, 0, 0), (0.8, 0.8, 0), 1)),
            Sphere(10000, (0, 10010, 0), Material((0.3, 0.3, 0.3), (0.8, 0.8, 0.8), 1)),
            Sphere(2, (-5, -8, 3), Material((0, 0, 0), (0.7, 0.7, 0), 3)),
            Sphere(4, (0, -6, 0), Material((0, 0, 0), (0.7, 0.5, 0.1), 5)),
            Sphere(10, (10, 10, -10), Material((0, 0, 0), (0, 0, 1), 30)),
        ],
    )


def main(argv=None):
    parser = argparse.ArgumentParser(description="Ray cast a scene of spheres.")
    parser.add_argument("output", nargs="?", default="raw2_raycast.bmp")
    parser.add_argument("--size", type=int, default=SIZE)
    parser.add_argument("--samples", type=int, default=SAMPLES)
    args = parser.parse_args(argv)

    image = Image(args.size, args.size)
    default_world().render(image, args.samples)
    image.save_bmp(args.output)
    print("Done.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())