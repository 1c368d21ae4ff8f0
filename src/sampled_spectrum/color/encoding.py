"""Display encoding of linear RGB for swatch output."""

import numpy as np


def linear_rgb_to_srgb(linear_rgb: np.ndarray) -> np.ndarray:
    """Encode linear RGB with the sRGB transfer function.

    Negative (out-of-gamut) components are clipped to zero before encoding.

    Args:
        linear_rgb: Linear RGB values, nominally in [0, 1]

    Returns:
        np.ndarray: Gamma-encoded sRGB values in [0, 1] range
    """
    clipped = np.clip(np.asarray(linear_rgb, dtype=np.float64), 0.0, None)
    return _apply_srgb_gamma(clipped)


def _apply_srgb_gamma(linear_srgb: np.ndarray) -> np.ndarray:
    """Apply sRGB gamma encoding.

    sRGB transfer function (IEC 61966-2-1:1999):
    - If linear_sRGB <= 0.0031308: 12.92 * linear_sRGB
    - Otherwise: 1.055 * linear_sRGB^(1/2.4) - 0.055

    Args:
        linear_srgb: Non-negative linear sRGB values

    Returns:
        np.ndarray: Gamma-encoded sRGB values
    """
    threshold = 0.0031308
    a = 12.92
    b = 1.055
    c = 1.0 / 2.4
    d = 0.055

    result = np.where(
        linear_srgb <= threshold, a * linear_srgb, b * np.power(linear_srgb, c) - d
    )

    return np.clip(result, 0.0, 1.0)


def linear_to_srgb_8bit(srgb_normalized: np.ndarray) -> np.ndarray:
    """Convert normalized sRGB values to 8-bit integer range.

    Args:
        srgb_normalized: sRGB values in [0, 1] range

    Returns:
        np.ndarray: sRGB values scaled to 8-bit range [0, 255]
    """
    return np.clip(srgb_normalized * 255.0 + 0.5, 0, 255).astype(np.uint8)
