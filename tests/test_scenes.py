"""Tests for the bundled scenes."""

import numpy as np

from spheretrace.materials.dielectric import Dielectric
from spheretrace.scenes import default_camera, ground_scene, random_scene


class TestRandomScene:
    def test_layout(self):
        spheres = random_scene(np.random.default_rng(0))
        ground, *small, glass, matte, mirror = spheres
        assert ground.radius == 1000
        assert all(s.radius == 0.2 for s in small)
        assert 400 < len(small) <= 22 * 22
        assert isinstance(glass.material, Dielectric)
        assert matte.center.x == -4
        assert mirror.center.x == 4

    def test_glass_material_is_shared(self):
        spheres = random_scene(np.random.default_rng(1))
        glass = [s.material for s in spheres if isinstance(s.material, Dielectric)]
        assert len({id(m) for m in glass}) == 1

    def test_seeded(self):
        a = random_scene(np.random.default_rng(7))
        b = random_scene(np.random.default_rng(7))
        assert [s.center for s in a] == [s.center for s in b]


def test_ground_scene():
    (ground,) = ground_scene()
    assert ground.center.y == -1000


def test_default_camera_looks_at_origin():
    cam = default_camera(1.6)
    assert cam.lens_radius == 0.05
    assert cam.w.dot(cam.origin) > 0
