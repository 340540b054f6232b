# renderer/integrator.py
import math

import numpy as np

from spheretrace.core.ray import Ray
from spheretrace.core.vector import Vector3

MAX_BOUNCES = 50
# Lower bound of the hit interval; keeps scattered rays from re-hitting the
# surface they start on.
T_MIN = 0.001

WHITE = Vector3(1.0, 1.0, 1.0)
SKY_BLUE = Vector3(0.5, 0.7, 1.0)


def sky_color(direction: Vector3) -> Vector3:
    """Vertical gradient from white at the horizon to blue at the zenith."""
    unit_direction = direction.normalize()
    t = 0.5 * (unit_direction.y + 1.0)
    return WHITE * (1.0 - t) + SKY_BLUE * t


def ray_color(ray: Ray, world, rng: np.random.Generator,
              max_bounces: int = MAX_BOUNCES) -> Vector3:
    """
    Traces ``ray`` through ``world`` and returns the light it carries back.

    Iterates instead of recursing. Stops on absorption, on escaping to the
    sky, or after ``max_bounces`` scatters, in which case the path adds no
    further light.
    """
    color = Vector3(0.0, 0.0, 0.0)
    attenuation = Vector3(1.0, 1.0, 1.0)
    current_ray = ray

    for _ in range(max_bounces):
        rec = world.hit(current_ray, T_MIN, math.inf)
        if rec is None:
            return color + attenuation * sky_color(current_ray.direction)

        scattered = rec.material.scatter(current_ray, rec, rng)
        if scattered is None:
            return color

        current_ray, tint = scattered
        attenuation = attenuation * tint

    return color
