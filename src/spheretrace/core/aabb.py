# core/aabb.py
import math

from spheretrace.core.vector import Vector3


class AABB:
    """
    Axis-aligned bounding box. Only used as acceleration metadata for the
    BVH; it is never rendered.
    """
    def __init__(self, minimum: Vector3, maximum: Vector3):
        self.minimum = minimum
        self.maximum = maximum

    def hit(self, ray, t_min: float, t_max: float) -> bool:
        # Slab method: for each axis, shrink [t_min, t_max] to the interval
        # where the ray is between the two planes.
        for axis in range(3):
            d = ray.direction[axis]
            # A zero component yields a signed infinity, as IEEE division
            # would. The resulting nan/inf slab bounds are relied upon.
            inv_d = 1.0 / d if d != 0 else math.copysign(math.inf, d)
            t0 = (self.minimum[axis] - ray.origin[axis]) * inv_d
            t1 = (self.maximum[axis] - ray.origin[axis]) * inv_d
            if inv_d < 0:
                t0, t1 = t1, t0
            t_min = t0 if t0 > t_min else t_min
            t_max = t1 if t1 < t_max else t_max
            if t_max <= t_min:
                return False
        return True

    def contains(self, point: Vector3) -> bool:
        return all(self.minimum[a] <= point[a] <= self.maximum[a] for a in range(3))

    @staticmethod
    def surrounding_box(box0: "AABB", box1: "AABB") -> "AABB":
        small = Vector3(
            min(box0.minimum.x, box1.minimum.x),
            min(box0.minimum.y, box1.minimum.y),
            min(box0.minimum.z, box1.minimum.z)
        )
        big = Vector3(
            max(box0.maximum.x, box1.maximum.x),
            max(box0.maximum.y, box1.maximum.y),
            max(box0.maximum.z, box1.maximum.z)
        )
        return AABB(small, big)

    def __repr__(self) -> str:
        return f"AABB({self.minimum!r}, {self.maximum!r})"
