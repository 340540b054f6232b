"""Pytest configuration for spheretrace tests.

Shared fixtures: a seeded generator and a few small scenes that render
quickly in pure Python.
"""

import numpy as np
import pytest

from spheretrace.core.vector import Vector3
from spheretrace.geometry.sphere import Sphere
from spheretrace.materials.dielectric import Dielectric
from spheretrace.materials.lambertian import Lambertian
from spheretrace.materials.metal import Metal


@pytest.fixture
def rng():
    """Seeded generator so random draws are reproducible per test."""
    return np.random.default_rng(1234)


@pytest.fixture
def gray():
    return Lambertian(Vector3(0.5, 0.5, 0.5))


@pytest.fixture
def mixed_spheres(rng):
    """A few dozen spheres with all three materials, scattered in a box."""
    materials = [
        Lambertian(Vector3(0.8, 0.3, 0.3)),
        Metal(Vector3(0.8, 0.8, 0.8), 0.2),
        Dielectric(1.5),
    ]
    spheres = []
    for i in range(40):
        center = Vector3(rng.uniform(-10, 10), rng.uniform(-10, 10), rng.uniform(-10, 10))
        spheres.append(Sphere(center, rng.uniform(0.2, 1.5), materials[i % 3]))
    return spheres
