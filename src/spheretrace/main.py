# main.py
import argparse
import logging
import sys
import threading
from dataclasses import replace
from typing import List, Optional

import numpy as np

from spheretrace.config import QUALITY_LEVELS, SCENES, RenderSettings
from spheretrace.core.errors import InvalidRenderSettingsError
from spheretrace.geometry.world import build_scene
from spheretrace.renderer.image_io import save_image
from spheretrace.renderer.raytracer import Renderer
from spheretrace.renderer.tone_mapping import TONE_MAPS
from spheretrace.scenes import default_camera, ground_scene, random_scene

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    defaults = RenderSettings()
    parser = argparse.ArgumentParser(prog="spheretrace", description="Path trace a scene of spheres.")
    parser.add_argument("--width", type=int, default=defaults.width)
    parser.add_argument("--height", type=int, default=defaults.height)
    # None means "not given", so a --quality preset can fill these in.
    parser.add_argument("--samples", type=int, default=None,
                        help=f"samples per pixel (default {defaults.samples})")
    parser.add_argument("--max-bounces", type=int, default=None,
                        help=f"bounce cap per path (default {defaults.max_bounces})")
    parser.add_argument("--threads", type=int, default=defaults.threads)
    parser.add_argument("--seed", type=int, default=None, help="seed for a reproducible render")
    parser.add_argument("--quality", choices=sorted(QUALITY_LEVELS),
                        help="preset for samples and bounces, also scaling --width/--height; "
                             "explicit --samples and --max-bounces take precedence")
    parser.add_argument("--scene", choices=SCENES, default=defaults.scene)
    parser.add_argument("--tone-map", choices=TONE_MAPS, default=defaults.tone_map)
    parser.add_argument("--timeout", type=float, default=None,
                        help="cancel the render after this many seconds")
    parser.add_argument("--no-progress", action="store_true", help="hide the progress bar")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("-o", "--output", default=defaults.output,
                        help="output image (.ppm, or any format Pillow can write)")
    return parser


def settings_from_args(args: argparse.Namespace) -> RenderSettings:
    settings = RenderSettings(
        width=args.width,
        height=args.height,
        threads=args.threads,
        seed=args.seed,
        tone_map=args.tone_map,
        scene=args.scene,
        output=args.output,
        timeout=args.timeout,
    )
    if args.quality:
        settings = settings.with_quality(args.quality)

    overrides = {}
    if args.samples is not None:
        overrides["samples"] = args.samples
    if args.max_bounces is not None:
        overrides["max_bounces"] = args.max_bounces
    if args.quality and overrides:
        logger.info("Quality %r: keeping explicit %s", args.quality, ", ".join(sorted(overrides)))
    return replace(settings, **overrides).validate()


def run(settings: RenderSettings, cancel_event: threading.Event, progress: bool = True) -> bool:
    """Build the scene, render it and save the image. Returns False if cancelled."""
    rng = np.random.default_rng(settings.seed)
    if settings.scene == "random":
        primitives = random_scene(rng)
    else:
        primitives = ground_scene()
    world = build_scene(primitives, rng)
    camera = default_camera(settings.aspect_ratio)

    renderer = Renderer(
        settings.width,
        settings.height,
        samples_per_pixel=settings.samples,
        max_bounces=settings.max_bounces,
        threads=settings.threads,
        seed=settings.seed,
        tone_map=settings.tone_map,
    )

    timer = None
    if settings.timeout is not None:
        timer = threading.Timer(settings.timeout, cancel_event.set)
        timer.daemon = True
        timer.start()
    try:
        frame = renderer.render_frame(world, camera, cancel_event=cancel_event, progress=progress)
    finally:
        if timer is not None:
            timer.cancel()

    if frame.cancelled:
        logger.warning("Render cancelled, %s not written", settings.output)
        return False

    logger.info("Execution time: %.2fs", frame.elapsed)
    save_image(settings.output, frame.pixels)
    return True


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        settings = settings_from_args(args)
    except InvalidRenderSettingsError as e:
        parser.error(str(e))

    cancel_event = threading.Event()
    try:
        completed = run(settings, cancel_event, progress=not args.no_progress)
    except KeyboardInterrupt:
        cancel_event.set()
        logger.warning("Interrupted")
        return 1
    return 0 if completed else 1


if __name__ == "__main__":
    sys.exit(main())
