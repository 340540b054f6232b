# materials/presets.py
from spheretrace.core.vector import Vector3
from spheretrace.materials.dielectric import Dielectric
from spheretrace.materials.lambertian import Lambertian
from spheretrace.materials.metal import Metal


class MetalPresets:
    """Predefined metal materials."""

    @staticmethod
    def bronze_mirror() -> Metal:
        return Metal(Vector3(0.7, 0.6, 0.5), fuzz=0.0)


class DielectricPresets:
    """Predefined dielectric materials with their refractive indices."""

    @staticmethod
    def glass() -> Dielectric:
        return Dielectric(1.5)


class ColorPresets:
    """Common colors and matte materials."""
    GRAY = Vector3(0.5, 0.5, 0.5)
    BROWN = Vector3(0.4, 0.2, 0.1)

    @staticmethod
    def matte(color: Vector3) -> Lambertian:
        return Lambertian(color)
