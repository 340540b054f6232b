# renderer/raytracer.py
import logging
import os
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from spheretrace.core.errors import InvalidRenderSettingsError
from spheretrace.renderer.integrator import MAX_BOUNCES, ray_color
from spheretrace.renderer.progress import ProgressReporter, RowCounter
from spheretrace.renderer.tone_mapping import TONE_MAPS, tone_map

logger = logging.getLogger(__name__)

# Row bands submitted per worker thread.
BANDS_PER_WORKER = 4


@dataclass
class Frame:
    """Result of a render. ``pixels`` has shape (height, width, 3), top row first."""
    pixels: np.ndarray
    cancelled: bool
    rows_completed: int
    elapsed: float


def split_rows(height: int, bands: int) -> List[Tuple[int, int]]:
    """Split ``range(height)`` into at most ``bands`` contiguous [start, end) ranges."""
    bands = max(1, min(bands, height))
    size, extra = divmod(height, bands)
    ranges = []
    start = 0
    for i in range(bands):
        end = start + size + (1 if i < extra else 0)
        ranges.append((start, end))
        start = end
    return ranges


class Renderer:
    """
    Renders frames on a pool of worker threads, one row band per task.

    Every row draws its samples from its own generator, derived from the
    frame seed and the row index, so a seeded render gives identical pixels
    for any number of threads.
    """

    def __init__(self, width: int, height: int, samples_per_pixel: int = 10,
                 max_bounces: int = MAX_BOUNCES, threads: Optional[int] = None,
                 seed: Optional[int] = None, tone_map: str = "gamma"):
        if width <= 0 or height <= 0:
            raise InvalidRenderSettingsError(f"Image size must be positive, got {width}x{height}")
        if samples_per_pixel < 1:
            raise InvalidRenderSettingsError(f"samples_per_pixel must be >= 1, got {samples_per_pixel}")
        if max_bounces < 1:
            raise InvalidRenderSettingsError(f"max_bounces must be >= 1, got {max_bounces}")
        if threads is not None and threads < 1:
            raise InvalidRenderSettingsError(f"threads must be >= 1, got {threads}")
        if tone_map not in TONE_MAPS:
            raise InvalidRenderSettingsError(f"Unknown tone map {tone_map!r}, expected one of {TONE_MAPS}")

        self.width = width
        self.height = height
        self.samples_per_pixel = samples_per_pixel
        self.max_bounces = max_bounces
        self.threads = threads or os.cpu_count() or 1
        self.seed = seed
        self.tone_map = tone_map

    def render_frame(self, world, camera, cancel_event: Optional[threading.Event] = None,
                     progress: bool = False) -> Frame:
        """
        Renders one frame of ``world`` seen through ``camera``.

        If ``cancel_event`` is set during the render, workers stop before the
        next pixel and the returned frame has ``cancelled=True``. Rows that
        were completed are left intact; the rest stay black.
        """
        if cancel_event is None:
            cancel_event = threading.Event()

        pixels = np.zeros((self.height, self.width, 3), dtype=np.uint8)
        counter = RowCounter()
        root = np.random.SeedSequence(self.seed)
        bands = split_rows(self.height, self.threads * BANDS_PER_WORKER)

        logger.info("Rendering %dx%d, %d samples/pixel, %d threads",
                    self.width, self.height, self.samples_per_pixel, self.threads)
        start = time.perf_counter()

        reporter = ProgressReporter(counter, self.height).start() if progress else None
        try:
            with ThreadPoolExecutor(max_workers=self.threads, thread_name_prefix="render") as pool:
                futures = [
                    pool.submit(self._render_band, world, camera, pixels, band,
                                root.entropy, counter, cancel_event)
                    for band in bands
                ]
                try:
                    for future in futures:
                        future.result()
                except BaseException:
                    # Stop the remaining workers before the pool joins them.
                    cancel_event.set()
                    raise
        finally:
            if reporter is not None:
                reporter.stop()

        elapsed = time.perf_counter() - start
        cancelled = counter.value < self.height
        if cancelled:
            logger.warning("Render cancelled after %d of %d rows", counter.value, self.height)
        else:
            logger.info("Rendered %d rows in %.2fs", self.height, elapsed)
        return Frame(pixels, cancelled, counter.value, elapsed)

    def _render_band(self, world, camera, pixels: np.ndarray, band: Tuple[int, int],
                     entropy, counter: RowCounter, cancel_event: threading.Event) -> None:
        logger.debug("Band %s started on %s", band, threading.current_thread().name)
        for row in range(*band):
            rng = np.random.default_rng(np.random.SeedSequence(entropy, spawn_key=(row,)))
            linear = self._render_row(world, camera, row, rng, cancel_event)
            if linear is None:
                return
            pixels[row] = tone_map(linear, self.tone_map)
            counter.increment()

    def _render_row(self, world, camera, row: int, rng: np.random.Generator,
                    cancel_event: threading.Event) -> Optional[np.ndarray]:
        width, height = self.width, self.height
        samples = self.samples_per_pixel
        # Image rows run top to bottom, viewport t runs bottom to top.
        j = height - 1 - row
        linear = np.empty((width, 3), dtype=np.float64)
        for i in range(width):
            if cancel_event.is_set():
                return None
            r = g = b = 0.0
            for _ in range(samples):
                u = (i + rng.random()) / width
                v = (j + rng.random()) / height
                col = ray_color(camera.get_ray(u, v, rng), world, rng, self.max_bounces)
                r += col.x
                g += col.y
                b += col.z
            linear[i] = (r / samples, g / samples, b / samples)
        return linear


def render_frame(scene, camera, width: int, height: int, samples_per_pixel: int = 10,
                 max_bounces: int = MAX_BOUNCES, cancel_event: Optional[threading.Event] = None,
                 **options) -> Frame:
    """
    Convenience wrapper around :class:`Renderer`. ``options`` are passed to
    the Renderer (threads, seed, tone_map) except ``progress``.
    """
    progress = options.pop("progress", False)
    renderer = Renderer(width, height, samples_per_pixel, max_bounces, **options)
    return renderer.render_frame(scene, camera, cancel_event=cancel_event, progress=progress)
