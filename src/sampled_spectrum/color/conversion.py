"""Sampled spectrum to CIE XYZ and linear RGB conversion."""

import math
from typing import Optional

import numpy as np

from ..cie.reference import ReferenceCurveCache, default_cache
from ..errors import DatasetError
from ..models.spectrum import (
    SPECTRAL_SAMPLE_COUNT,
    WAVELENGTH_BEGIN,
    WAVELENGTH_END,
    SampledSpectrum,
)


# XYZ to linear RGB transformation matrix (sRGB primaries, D65 white)
XYZ_TO_RGB_MATRIX = np.array(
    [
        [3.240479, -1.537150, -0.498535],
        [-0.969256, 1.875991, 0.041556],
        [0.055648, -0.204043, 1.057311],
    ]
)


def spectrum_to_xyz(
    spectrum: SampledSpectrum, cache: Optional[ReferenceCurveCache] = None
) -> np.ndarray:
    """Convert a sampled spectrum to CIE XYZ tristimulus values.

    Riemann sum of the spectrum against the resampled colour-matching
    curves, normalized by the raw ȳ integral so the result does not depend on
    the sample spacing of the source table.

    Args:
        spectrum: Spectrum to convert
        cache: Reference curves to use (default: the process-wide CIE 1931 cache)

    Returns:
        np.ndarray: XYZ tristimulus values [X, Y, Z]

    Raises:
        DatasetError: If the ȳ integral is not a positive finite number
    """
    if cache is None:
        cache = default_cache()

    samples = spectrum.samples
    x = float(np.dot(cache.X().samples, samples))
    y = float(np.dot(cache.Y().samples, samples))
    z = float(np.dot(cache.Z().samples, samples))

    return np.array([x, y, z]) * _xyz_scale(cache)


def _xyz_scale(cache: ReferenceCurveCache) -> float:
    y_integral = cache.y_integral()
    if not math.isfinite(y_integral) or y_integral <= 0.0:
        raise DatasetError(f"ȳ integral must be positive, got {y_integral}")
    return (WAVELENGTH_END - WAVELENGTH_BEGIN) / (SPECTRAL_SAMPLE_COUNT * y_integral)


def xyz_to_rgb(xyz: np.ndarray) -> np.ndarray:
    """Convert XYZ to linear RGB.

    No gamma encoding and no clamping: out-of-gamut colours come back with
    negative components.

    Args:
        xyz: XYZ tristimulus values

    Returns:
        np.ndarray: Linear RGB values
    """
    return XYZ_TO_RGB_MATRIX @ np.asarray(xyz, dtype=np.float64)


def spectrum_to_rgb(
    spectrum: SampledSpectrum, cache: Optional[ReferenceCurveCache] = None
) -> np.ndarray:
    """Convert a sampled spectrum to linear RGB.

    Args:
        spectrum: Spectrum to convert
        cache: Reference curves to use (default: the process-wide CIE 1931 cache)

    Returns:
        np.ndarray: Linear RGB values [R, G, B]
    """
    return xyz_to_rgb(spectrum_to_xyz(spectrum, cache))
