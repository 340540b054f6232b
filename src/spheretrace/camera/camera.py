# camera/camera.py
import math

import numpy as np

from spheretrace.core.ray import Ray
from spheretrace.core.utils import random_in_unit_disk
from spheretrace.core.vector import Vector3


class Camera:
    """
    Thin-lens perspective camera.

    The viewport sits on the focal plane, ``focus_dist`` in front of the lens,
    so every ray generated for a given (s, t) converges on the same point of
    that plane. Larger apertures blur everything off the plane.
    """
    def __init__(self, look_from: Vector3, look_at: Vector3, view_up: Vector3,
                 vfov: float, aspect_ratio: float, aperture: float = 0.0,
                 focus_dist: float = 1.0):
        # vfov is the top to bottom field of view in degrees.
        self.lens_radius = aperture / 2.0
        theta = math.radians(vfov)
        half_height = math.tan(theta / 2)
        half_width = aspect_ratio * half_height

        self.origin = look_from
        self.w = (look_from - look_at).normalize()
        self.u = view_up.cross(self.w).normalize()
        self.v = self.w.cross(self.u)

        self.lower_left_corner = (self.origin
                                  - self.u * (half_width * focus_dist)
                                  - self.v * (half_height * focus_dist)
                                  - self.w * focus_dist)
        self.horizontal = self.u * (2 * half_width * focus_dist)
        self.vertical = self.v * (2 * half_height * focus_dist)

    def get_ray(self, s: float, t: float, rng: np.random.Generator) -> Ray:
        """Generates a ray through viewport coordinates (s, t) in [0, 1]."""
        target = self.lower_left_corner + self.horizontal * s + self.vertical * t
        if self.lens_radius <= 0:
            return Ray(self.origin, target - self.origin)

        # Generate random point on lens
        rd = random_in_unit_disk(rng) * self.lens_radius
        offset = self.u * rd.x + self.v * rd.y
        return Ray(self.origin + offset, target - self.origin - offset)
