# geometry/world.py
import logging
from typing import Iterable, List, Optional

import numpy as np

from spheretrace.core.aabb import AABB
from spheretrace.core.errors import InvalidSceneError
from spheretrace.core.ray import Ray
from spheretrace.geometry.bvh import BVHNode, build_bvh
from spheretrace.geometry.hittable import Hittable, HitRecord

logger = logging.getLogger(__name__)


class HittableList(Hittable):
    """
    A plain list of Hittable objects, intersected by linear scan.
    Serves as the reference that BVH results are checked against.
    """
    def __init__(self, objects: Optional[Iterable[Hittable]] = None):
        self.objects: List[Hittable] = list(objects) if objects is not None else []

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        hit_record = None
        closest_so_far = t_max
        for obj in self.objects:
            rec = obj.hit(ray, t_min, closest_so_far)
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record

    def bounding_box(self) -> AABB:
        if not self.objects:
            raise InvalidSceneError("An empty list has no bounding box")
        box = self.objects[0].bounding_box()
        for obj in self.objects[1:]:
            box = AABB.surrounding_box(box, obj.bounding_box())
        return box

    def __len__(self) -> int:
        return len(self.objects)


class Scene(Hittable):
    """
    Holds the BVH root over every primitive. Read-only once built, so many
    render threads may intersect it concurrently.
    """
    def __init__(self, root: BVHNode, primitive_count: int):
        self.root = root
        self.primitive_count = primitive_count

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        return self.root.hit(ray, t_min, t_max)

    def bounding_box(self) -> AABB:
        return self.root.bounding_box()


def build_scene(primitives: Iterable[Hittable], rng: Optional[np.random.Generator] = None) -> Scene:
    """
    Builds a Scene over ``primitives``. Each primitive carries its own
    material reference.

    Raises:
        InvalidSceneError: If ``primitives`` is empty.
    """
    objects = list(primitives)
    if not objects:
        raise InvalidSceneError("A scene needs at least one primitive")
    if rng is None:
        rng = np.random.default_rng()

    root = build_bvh(objects, rng)
    logger.info("Built BVH over %d primitives (depth %d)", len(objects), root.depth())
    return Scene(root, len(objects))
