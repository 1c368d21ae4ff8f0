from .container import FixedSpectralContainer
from .spectrum import (
    SPECTRAL_SAMPLE_COUNT,
    WAVELENGTH_BEGIN,
    WAVELENGTH_END,
    SampledSpectrum,
    bin_bounds,
    bin_centers,
    bin_edges,
    bin_wavelength,
)
from .swatch import Swatch
from .tabulated import CIEDataset, TabulatedSpectrum

__all__ = [
    "FixedSpectralContainer",
    "SampledSpectrum",
    "TabulatedSpectrum",
    "CIEDataset",
    "Swatch",
    "WAVELENGTH_BEGIN",
    "WAVELENGTH_END",
    "SPECTRAL_SAMPLE_COUNT",
    "bin_wavelength",
    "bin_bounds",
    "bin_edges",
    "bin_centers",
]
