# geometry/hittable.py
from typing import Optional

from spheretrace.core.aabb import AABB
from spheretrace.core.ray import Ray
from spheretrace.core.vector import Vector3


class HitRecord:
    """
    Records details of a ray-object intersection.

    The normal is the geometric outward normal. It is not flipped to face
    the incoming ray; Dielectric uses its orientation to tell whether the
    ray is entering or leaving.
    """
    def __init__(self, t: float, p: Vector3, normal: Vector3, material=None):
        self.t = t              # Ray parameter at intersection
        self.p = p              # Intersection point
        self.normal = normal    # Unit outward normal
        self.material = material

    def __repr__(self) -> str:
        return f"HitRecord(t={self.t}, p={self.p!r}, normal={self.normal!r})"


class Hittable:
    """
    Abstract class for objects that can be hit by a ray.
    """
    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        raise NotImplementedError("hit() must be implemented by subclasses.")

    def bounding_box(self) -> AABB:
        raise NotImplementedError("bounding_box() must be implemented by subclasses.")
