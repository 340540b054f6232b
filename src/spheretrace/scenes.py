# scenes.py
from typing import List

import numpy as np

from spheretrace.camera.camera import Camera
from spheretrace.core.vector import Vector3
from spheretrace.geometry.sphere import Sphere
from spheretrace.materials.lambertian import Lambertian
from spheretrace.materials.metal import Metal
from spheretrace.materials.presets import ColorPresets, DielectricPresets, MetalPresets


def ground_sphere() -> Sphere:
    return Sphere(Vector3(0, -1000, 0), 1000, ColorPresets.matte(ColorPresets.GRAY))


def ground_scene() -> List[Sphere]:
    """A single huge gray sphere acting as the ground plane."""
    return [ground_sphere()]


def random_scene(rng: np.random.Generator) -> List[Sphere]:
    """
    The grid of small random spheres around three large ones: glass in the
    middle, brown matte on the left, a mirror on the right.
    """
    world = [ground_sphere()]
    glass = DielectricPresets.glass()
    avoid = Vector3(4, 0.2, 0)

    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = rng.random()
            center = Vector3(a + 0.9 * rng.random(), 0.2, b + 0.9 * rng.random())
            if (center - avoid).length() <= 0.9:
                continue

            if choose_mat < 0.8:
                albedo = Vector3(rng.random() * rng.random(),
                                 rng.random() * rng.random(),
                                 rng.random() * rng.random())
                material = Lambertian(albedo)
            elif choose_mat < 0.95:
                albedo = Vector3(0.5 * (1 + rng.random()),
                                 0.5 * (1 + rng.random()),
                                 0.5 * (1 + rng.random()))
                material = Metal(albedo, 0.1)
            else:
                material = glass
            world.append(Sphere(center, 0.2, material))

    world.append(Sphere(Vector3(0, 1, 0), 1.0, glass))
    world.append(Sphere(Vector3(-4, 1, 0), 1.0, ColorPresets.matte(ColorPresets.BROWN)))
    world.append(Sphere(Vector3(4, 1, 0), 1.0, MetalPresets.bronze_mirror()))
    return world


def default_camera(aspect_ratio: float) -> Camera:
    return Camera(
        look_from=Vector3(13, 2, 3),
        look_at=Vector3(0, 0, 0),
        view_up=Vector3(0, 1, 0),
        vfov=20,
        aspect_ratio=aspect_ratio,
        aperture=0.1,
        focus_dist=10.0,
    )
