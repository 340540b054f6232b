# geometry/bvh.py
from typing import Optional, Sequence

import numpy as np

from spheretrace.core.aabb import AABB
from spheretrace.core.ray import Ray
from spheretrace.geometry.hittable import Hittable, HitRecord


class BVHNode(Hittable):
    """
    Internal node of a bounding volume hierarchy.

    Built by a median split of ``objects[start:end]`` along an axis drawn at
    random for every node. The slice is sorted in place, so the caller must
    hand over a list it no longer needs in its original order.
    """
    def __init__(self, objects: list, start: int, end: int, rng: np.random.Generator):
        axis = int(rng.integers(3))

        def key(obj):
            return obj.bounding_box().minimum[axis]

        object_span = end - start

        if object_span == 1:
            # Degenerate leaf: both children are the same primitive.
            self.left = self.right = objects[start]
        elif object_span == 2:
            if key(objects[start]) < key(objects[start + 1]):
                self.left, self.right = objects[start], objects[start + 1]
            else:
                self.left, self.right = objects[start + 1], objects[start]
        else:
            objects[start:end] = sorted(objects[start:end], key=key)
            mid = start + object_span // 2
            self.left = BVHNode(objects, start, mid, rng)
            self.right = BVHNode(objects, mid, end, rng)

        self.box = AABB.surrounding_box(self.left.bounding_box(), self.right.bounding_box())

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        if not self.box.hit(ray, t_min, t_max):
            return None

        hit_left = self.left.hit(ray, t_min, t_max)

        # The right subtree only needs to report hits closer than the left one.
        if hit_left is not None:
            t_max = hit_left.t

        hit_right = self.right.hit(ray, t_min, t_max)
        return hit_right if hit_right is not None else hit_left

    def bounding_box(self) -> AABB:
        return self.box

    def depth(self) -> int:
        """Number of node levels below and including this one."""
        left = self.left.depth() if isinstance(self.left, BVHNode) else 0
        right = self.right.depth() if isinstance(self.right, BVHNode) else 0
        return 1 + max(left, right)


def build_bvh(objects: Sequence[Hittable], rng: np.random.Generator) -> BVHNode:
    """Builds a tree over a private copy of ``objects``."""
    working = list(objects)
    return BVHNode(working, 0, len(working), rng)
