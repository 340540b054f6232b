# renderer/tone_mapping.py
import numpy as np

TONE_MAPS = ("gamma", "reinhard")


def gamma_tone_mapping(linear: np.ndarray) -> np.ndarray:
    """
    Gamma-2 encode a linear image (square root per channel) and quantise
    to 8 bits with 255.99 scaling and truncation.
    Out-of-range values are clamped to [0, 255].
    """
    encoded = np.sqrt(np.maximum(linear, 0.0)) * 255.99
    return np.clip(encoded, 0, 255).astype(np.uint8)


def reinhard_tone_mapping(linear: np.ndarray, exposure=1.0, white_point=1.0, gamma=2.0) -> np.ndarray:
    """
    Apply Reinhard tone mapping to a linear radiance image.
    """
    scaled = np.maximum(linear, 0.0) * exposure
    mapped = scaled / (1.0 + scaled / white_point)
    mapped = mapped ** (1.0 / gamma)
    return np.clip(mapped * 255.99, 0, 255).astype(np.uint8)


def tone_map(linear: np.ndarray, method: str = "gamma") -> np.ndarray:
    if method == "gamma":
        return gamma_tone_mapping(linear)
    if method == "reinhard":
        return reinhard_tone_mapping(linear)
    raise ValueError(f"Unknown tone map: {method!r}")
