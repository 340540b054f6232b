from spheretrace.renderer.integrator import ray_color, sky_color
from spheretrace.renderer.raytracer import Frame, Renderer, render_frame

__all__ = ["ray_color", "sky_color", "Frame", "Renderer", "render_frame"]
