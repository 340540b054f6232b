from spheretrace.materials.material import Material
from spheretrace.materials.lambertian import Lambertian
from spheretrace.materials.metal import Metal
from spheretrace.materials.dielectric import Dielectric

__all__ = ["Material", "Lambertian", "Metal", "Dielectric"]
