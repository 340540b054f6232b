# config.py
import os
from dataclasses import dataclass, replace
from typing import Optional

from spheretrace.core.errors import InvalidRenderSettingsError
from spheretrace.renderer.tone_mapping import TONE_MAPS

SCENES = ("random", "ground")

# Render quality presets: samples per pixel, bounce cap and resolution scale.
QUALITY_LEVELS = {
    "preview": {"samples": 1, "bounces": 8, "scale": 0.25},
    "balanced": {"samples": 4, "bounces": 20, "scale": 0.5},
    "final": {"samples": 10, "bounces": 50, "scale": 1.0},
}


@dataclass(frozen=True)
class RenderSettings:
    width: int = 1280
    height: int = 800
    samples: int = 10
    max_bounces: int = 50
    threads: int = os.cpu_count() or 1
    seed: Optional[int] = None
    tone_map: str = "gamma"
    scene: str = "random"
    output: str = "output.ppm"
    timeout: Optional[float] = None

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height

    def with_quality(self, name: str) -> "RenderSettings":
        """Return a copy with the samples, bounces and scale of a quality preset."""
        try:
            level = QUALITY_LEVELS[name]
        except KeyError:
            raise InvalidRenderSettingsError(
                f"Unknown quality level {name!r}, expected one of {sorted(QUALITY_LEVELS)}") from None
        return replace(
            self,
            samples=level["samples"],
            max_bounces=level["bounces"],
            width=max(1, int(self.width * level["scale"])),
            height=max(1, int(self.height * level["scale"])),
        )

    def validate(self) -> "RenderSettings":
        if self.width <= 0 or self.height <= 0:
            raise InvalidRenderSettingsError(f"Image size must be positive, got {self.width}x{self.height}")
        if self.samples < 1:
            raise InvalidRenderSettingsError(f"samples must be >= 1, got {self.samples}")
        if self.max_bounces < 1:
            raise InvalidRenderSettingsError(f"max_bounces must be >= 1, got {self.max_bounces}")
        if self.threads < 1:
            raise InvalidRenderSettingsError(f"threads must be >= 1, got {self.threads}")
        if self.tone_map not in TONE_MAPS:
            raise InvalidRenderSettingsError(f"Unknown tone map {self.tone_map!r}")
        if self.scene not in SCENES:
            raise InvalidRenderSettingsError(f"Unknown scene {self.scene!r}")
        if self.timeout is not None and self.timeout <= 0:
            raise InvalidRenderSettingsError(f"timeout must be positive, got {self.timeout}")
        return self
