# materials/material.py
from typing import Optional, Tuple

import numpy as np

from spheretrace.core.ray import Ray
from spheretrace.core.vector import Vector3
from spheretrace.geometry.hittable import HitRecord


class Material:
    """
    Abstract material class. Subclasses must implement scatter().
    Materials are immutable and may be shared between primitives and threads;
    their only side effect is drawing from the generator they are given.
    """
    def scatter(self, ray_in: Ray, rec: HitRecord,
                rng: np.random.Generator) -> Optional[Tuple[Ray, Vector3]]:
        """
        Computes the scattered ray and attenuation.
        Returns a tuple (scattered_ray, attenuation) or None if the ray is absorbed.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")
