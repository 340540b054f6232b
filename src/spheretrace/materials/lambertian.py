# materials/lambertian.py
from typing import Tuple

import numpy as np

from spheretrace.core.ray import Ray
from spheretrace.core.utils import random_in_unit_sphere
from spheretrace.core.vector import Vector3
from spheretrace.geometry.hittable import HitRecord
from spheretrace.materials.material import Material


class Lambertian(Material):
    """
    Lambertian diffuse material. Never absorbs: every hit scatters, tinted
    by the albedo.
    """

    def __init__(self, albedo: Vector3):
        self.albedo = albedo

    def scatter(self, ray_in: Ray, rec: HitRecord,
                rng: np.random.Generator) -> Tuple[Ray, Vector3]:
        # Pick a random scatter direction by adding a random point in the
        # unit ball to the normal.
        scatter_direction = rec.normal + random_in_unit_sphere(rng)

        # A zero-length direction would make the next intersection divide by zero.
        if scatter_direction.length_squared() < 1e-16:
            scatter_direction = rec.normal

        return Ray(rec.p, scatter_direction), self.albedo

    def __repr__(self) -> str:
        return f"Lambertian({self.albedo!r})"
