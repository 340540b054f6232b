# materials/dielectric.py
from typing import Tuple

import numpy as np

from spheretrace.core.ray import Ray
from spheretrace.core.utils import reflect, refract, schlick
from spheretrace.core.vector import Vector3
from spheretrace.geometry.hittable import HitRecord
from spheretrace.materials.material import Material

WHITE = Vector3(1.0, 1.0, 1.0)


class Dielectric(Material):
    """
    Clear dielectric (glass, water). Always scatters: either reflects or
    refracts, chosen with Schlick's reflectance as the probability.
    """
    def __init__(self, ref_idx: float):
        self.ref_idx = ref_idx

    def scatter(self, ray_in: Ray, rec: HitRecord,
                rng: np.random.Generator) -> Tuple[Ray, Vector3]:
        direction = ray_in.direction
        reflected = reflect(direction, rec.normal)
        d_dot_n = direction.dot(rec.normal)

        # The sphere normal points outward, so a positive dot product means
        # the ray is leaving the material.
        if d_dot_n > 0:
            outward_normal = -rec.normal
            ni_over_nt = self.ref_idx
            cosine = self.ref_idx * d_dot_n / direction.length()
        else:
            outward_normal = rec.normal
            ni_over_nt = 1.0 / self.ref_idx
            cosine = -d_dot_n / direction.length()

        refracted = refract(direction, outward_normal, ni_over_nt)
        if refracted is None:
            # Total internal reflection
            reflect_prob = 1.0
        else:
            reflect_prob = schlick(cosine, self.ref_idx)

        if rng.random() < reflect_prob:
            return Ray(rec.p, reflected), WHITE
        return Ray(rec.p, refracted), WHITE

    def __repr__(self) -> str:
        return f"Dielectric({self.ref_idx})"
