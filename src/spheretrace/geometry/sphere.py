# geometry/sphere.py
import math
from typing import Optional

from spheretrace.core.aabb import AABB
from spheretrace.core.ray import Ray
from spheretrace.core.vector import Vector3
from spheretrace.geometry.hittable import Hittable, HitRecord


class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.
    Materials may be shared between many spheres.
    """
    def __init__(self, center: Vector3, radius: float, material=None):
        self.center = center
        self.radius = radius
        self.material = material
        offset = Vector3(radius, radius, radius)
        self._box = AABB(center - offset, center + offset)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        oc = ray.origin - self.center
        a = ray.direction.dot(ray.direction)
        b = oc.dot(ray.direction)
        c = oc.dot(oc) - self.radius * self.radius
        discriminant = b * b - a * c

        if discriminant <= 0:
            return None

        sqrt_disc = math.sqrt(discriminant)
        # Nearer root first, then the farther one.
        for root in ((-b - sqrt_disc) / a, (-b + sqrt_disc) / a):
            if t_min < root < t_max:
                p = ray.at(root)
                return HitRecord(root, p, (p - self.center) / self.radius, self.material)
        return None

    def bounding_box(self) -> AABB:
        # The bounding box of a sphere is center ± radius
        return self._box

    def __repr__(self) -> str:
        return f"Sphere({self.center!r}, {self.radius})"
