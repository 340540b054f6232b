"""Offline path tracer for sphere scenes."""

__version__ = "0.1.0"
