"""Exposure and tone mapping of XYZ before display encoding."""

import numpy as np

MIDDLE_GRAY = 0.18


def apply_exposure_and_tonemap(xyz_linear: np.ndarray) -> np.ndarray:
    """Apply automatic exposure and Reinhard tone mapping to XYZ.

    Args:
        xyz_linear: Linear XYZ tristimulus values

    Returns:
        np.ndarray: Tone-mapped XYZ values in [0, 1) range
    """
    xyz_linear = np.asarray(xyz_linear, dtype=np.float64)
    Y = xyz_linear[1]

    if Y <= 0:
        return np.zeros(3)

    xyz_exposed = xyz_linear * _compute_auto_exposure(Y)

    return _reinhard_tonemap(np.clip(xyz_exposed, 0.0, None))


def _compute_auto_exposure(Y: float) -> float:
    """Exposure factor that maps luminance Y to middle gray."""
    if Y <= 0:
        return 1.0

    return MIDDLE_GRAY / Y


def _reinhard_tonemap(xyz: np.ndarray) -> np.ndarray:
    """Reinhard operator f(x) = x / (1 + x), same mapping on every channel."""
    return xyz / (1.0 + xyz)
