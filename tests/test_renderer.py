"""Tests for the parallel frame renderer.

Tests cover:
- Argument validation
- Row band partitioning
- Seeded renders are identical for any thread count
- Cancellation keeps completed rows and reports the cancel
- A worker exception propagates and stops the other workers
- End-to-end: sky above the horizon, gray ground below
- Tone mapping and progress reporting
"""

import threading

import numpy as np
import pytest

from spheretrace.camera.camera import Camera
from spheretrace.core.errors import InvalidRenderSettingsError
from spheretrace.core.vector import Vector3
from spheretrace.geometry.world import build_scene
from spheretrace.renderer.progress import ProgressReporter, RowCounter
from spheretrace.renderer.raytracer import Renderer, render_frame, split_rows
from spheretrace.renderer.tone_mapping import gamma_tone_mapping, reinhard_tone_mapping, tone_map
from spheretrace.scenes import ground_scene


def horizon_camera(width, height):
    """Camera one unit above the ground looking along -Z."""
    return Camera(Vector3(0, 1, 0), Vector3(0, 1, -1), Vector3(0, 1, 0),
                  vfov=90, aspect_ratio=width / height, aperture=0.0, focus_dist=1.0)


class HitCountingWorld:
    """Wraps a world and sets an event after a number of intersection queries."""

    def __init__(self, world, event, limit):
        self.world = world
        self.event = event
        self.limit = limit
        self.calls = 0

    def hit(self, ray, t_min, t_max):
        self.calls += 1
        if self.calls == self.limit:
            self.event.set()
        return self.world.hit(ray, t_min, t_max)


class FailingWorld:
    """Wraps a world and raises once a number of intersection queries is reached."""

    def __init__(self, world, limit):
        self.world = world
        self.limit = limit
        self.calls = 0
        self.lock = threading.Lock()

    def hit(self, ray, t_min, t_max):
        with self.lock:
            self.calls += 1
            calls = self.calls
        if calls >= self.limit:
            raise RuntimeError("intersection failed")
        return self.world.hit(ray, t_min, t_max)


class TestRendererSettings:
    @pytest.mark.parametrize("kwargs", [
        {"width": 0, "height": 10},
        {"width": 10, "height": -1},
        {"width": 10, "height": 10, "samples_per_pixel": 0},
        {"width": 10, "height": 10, "max_bounces": 0},
        {"width": 10, "height": 10, "threads": 0},
        {"width": 10, "height": 10, "tone_map": "sepia"},
    ])
    def test_invalid_settings(self, kwargs):
        with pytest.raises(InvalidRenderSettingsError):
            Renderer(**kwargs)

    def test_invalid_settings_are_value_errors(self):
        with pytest.raises(ValueError):
            Renderer(0, 0)


class TestSplitRows:
    def test_covers_all_rows(self):
        bands = split_rows(10, 3)
        assert bands == [(0, 4), (4, 7), (7, 10)]

    def test_more_bands_than_rows(self):
        bands = split_rows(3, 8)
        assert bands == [(0, 1), (1, 2), (2, 3)]


class TestDeterminism:
    def test_thread_count_does_not_change_pixels(self, mixed_spheres):
        camera = Camera(Vector3(0, 0, 25), Vector3(0, 0, 0), Vector3(0, 1, 0), 60, 1.25, 0.2, 25)
        frames = []
        for threads in (1, 3):
            scene = build_scene(mixed_spheres, np.random.default_rng(99))
            frames.append(render_frame(scene, camera, 10, 8, samples_per_pixel=2,
                                       max_bounces=8, threads=threads, seed=2024))
        assert np.array_equal(frames[0].pixels, frames[1].pixels)
        assert not frames[0].cancelled
        assert frames[0].rows_completed == 8

    def test_different_seeds_differ(self, mixed_spheres):
        camera = Camera(Vector3(0, 0, 25), Vector3(0, 0, 0), Vector3(0, 1, 0), 60, 1.25, 0.2, 25)
        scene = build_scene(mixed_spheres, np.random.default_rng(99))
        a = render_frame(scene, camera, 10, 8, samples_per_pixel=2, max_bounces=8, seed=1)
        b = render_frame(scene, camera, 10, 8, samples_per_pixel=2, max_bounces=8, seed=2)
        assert not np.array_equal(a.pixels, b.pixels)


class TestCancellation:
    def test_cancelled_before_start(self):
        scene = build_scene(ground_scene())
        event = threading.Event()
        event.set()
        frame = render_frame(scene, horizon_camera(8, 6), 8, 6, samples_per_pixel=1,
                             cancel_event=event, threads=2)
        assert frame.cancelled
        assert frame.rows_completed == 0
        assert not frame.pixels.any()

    def test_completed_rows_survive_cancel(self):
        scene = build_scene(ground_scene(), np.random.default_rng(0))
        camera = horizon_camera(8, 6)
        full = render_frame(scene, camera, 8, 6, samples_per_pixel=1, threads=1, seed=5)

        event = threading.Event()
        # The top rows see only sky, one query per pixel: row 0 completes,
        # row 1 is interrupted.
        world = HitCountingWorld(scene, event, limit=12)
        frame = render_frame(world, camera, 8, 6, samples_per_pixel=1,
                             cancel_event=event, threads=1, seed=5)
        assert frame.cancelled
        k = frame.rows_completed
        assert 1 <= k < 6
        assert np.array_equal(frame.pixels[:k], full.pixels[:k])
        assert not frame.pixels[k:].any()


class TestWorkerFailure:
    def test_exception_propagates_and_cancels(self):
        scene = build_scene(ground_scene(), np.random.default_rng(0))
        world = FailingWorld(scene, limit=5)
        event = threading.Event()
        with pytest.raises(RuntimeError, match="intersection failed"):
            render_frame(world, horizon_camera(8, 8), 8, 8, samples_per_pixel=1,
                         cancel_event=event, threads=2, seed=3)
        assert event.is_set()
        # Past the limit every band fails on its first query, so no band
        # renders more than a pixel. A full render needs 64 queries.
        assert world.calls <= 4 + 8


class TestEndToEnd:
    def test_ground_scene(self):
        width, height = 16, 12
        scene = build_scene(ground_scene(), np.random.default_rng(3))
        frame = render_frame(scene, horizon_camera(width, height), width, height,
                             samples_per_pixel=10, threads=2, seed=11)
        pixels = frame.pixels.astype(int)
        assert frame.pixels.dtype == np.uint8
        assert frame.pixels.shape == (height, width, 3)

        top = pixels[0]
        bottom = pixels[-1]
        # Sky: blue dominates red.
        assert (top[:, 2] >= top[:, 0]).all()
        assert (top[:, 2] == 255).all()
        # Ground: darker than the sky and roughly uniform.
        assert bottom[:, 2].mean() < top[:, 2].mean()
        assert bottom.std(axis=0).max() < 30
        assert bottom.min() > 0


class TestToneMapping:
    def test_gamma_encoding(self):
        linear = np.array([[0.0, 0.25, 1.0], [4.0, -1.0, 0.5]])
        out = gamma_tone_mapping(linear)
        assert out.dtype == np.uint8
        assert out.tolist() == [[0, 127, 255], [255, 0, 181]]

    def test_reinhard_is_bounded_and_monotonic(self):
        linear = np.array([0.0, 0.5, 1.0, 10.0, 1000.0])
        out = reinhard_tone_mapping(linear)
        assert out[0] == 0
        assert out[2] == 181
        assert (np.diff(out.astype(int)) >= 0).all()
        assert out.max() <= 255

    def test_unknown_tone_map(self):
        with pytest.raises(ValueError):
            tone_map(np.zeros((1, 3)), "sepia")


class TestProgress:
    def test_reporter_shows_counter(self):
        counter = RowCounter()
        with ProgressReporter(counter, total_rows=5, interval=0.01) as reporter:
            for _ in range(5):
                counter.increment()
        assert counter.value == 5
        assert reporter._bar.n == 5

    def test_render_with_progress(self):
        scene = build_scene(ground_scene())
        frame = render_frame(scene, horizon_camera(4, 3), 4, 3, samples_per_pixel=1, progress=True)
        assert frame.rows_completed == 3
