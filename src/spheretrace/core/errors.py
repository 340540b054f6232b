# core/errors.py


class SpheretraceError(Exception):
    """Base class for renderer errors."""


class InvalidSceneError(SpheretraceError):
    """Raised when a scene cannot be built from the given primitives."""


class InvalidRenderSettingsError(SpheretraceError, ValueError):
    """Raised for out-of-range image size, sample count or worker count."""
