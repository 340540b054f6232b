from spheretrace.geometry.hittable import HitRecord, Hittable
from spheretrace.geometry.sphere import Sphere
from spheretrace.geometry.bvh import BVHNode
from spheretrace.geometry.world import HittableList, Scene, build_scene

__all__ = [
    "HitRecord",
    "Hittable",
    "Sphere",
    "BVHNode",
    "HittableList",
    "Scene",
    "build_scene",
]
