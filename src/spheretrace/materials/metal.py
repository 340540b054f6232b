# materials/metal.py
from typing import Optional, Tuple

import numpy as np

from spheretrace.core.ray import Ray
from spheretrace.core.utils import random_in_unit_sphere, reflect
from spheretrace.core.vector import Vector3
from spheretrace.geometry.hittable import HitRecord
from spheretrace.materials.material import Material


class Metal(Material):
    """
    Metal material with mirror reflection blurred by ``fuzz`` (clamped to [0, 1]).
    """
    def __init__(self, albedo: Vector3, fuzz: float = 0.0):
        self.albedo = albedo
        self.fuzz = max(0.0, min(fuzz, 1.0))

    def scatter(self, ray_in: Ray, rec: HitRecord,
                rng: np.random.Generator) -> Optional[Tuple[Ray, Vector3]]:
        reflected = reflect(ray_in.direction.normalize(), rec.normal)
        scattered = Ray(rec.p, reflected + random_in_unit_sphere(rng) * self.fuzz)

        if scattered.direction.dot(rec.normal) > 0:
            return scattered, self.albedo

        return None  # Absorb the ray if it does not scatter forward

    def __repr__(self) -> str:
        return f"Metal({self.albedo!r}, fuzz={self.fuzz})"
