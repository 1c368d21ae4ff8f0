"""Fixed-resolution spectral power distributions and their conversion to XYZ and RGB."""

__version__ = "0.1.0"

from .cie import ReferenceCurveCache, X, Y, Z, y_integral
from .color import spectrum_to_rgb, spectrum_to_xyz
from .errors import SpectrumError
from .models import (
    SPECTRAL_SAMPLE_COUNT,
    WAVELENGTH_BEGIN,
    WAVELENGTH_END,
    CIEDataset,
    FixedSpectralContainer,
    SampledSpectrum,
    TabulatedSpectrum,
)
from .resampling import average_samples, from_samples

__all__ = [
    "__version__",
    "SampledSpectrum",
    "FixedSpectralContainer",
    "TabulatedSpectrum",
    "CIEDataset",
    "ReferenceCurveCache",
    "SpectrumError",
    "WAVELENGTH_BEGIN",
    "WAVELENGTH_END",
    "SPECTRAL_SAMPLE_COUNT",
    "from_samples",
    "average_samples",
    "spectrum_to_xyz",
    "spectrum_to_rgb",
    "X",
    "Y",
    "Z",
    "y_integral",
]
