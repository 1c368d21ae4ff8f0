"""Resampling of tabulated spectra onto the fixed 60-bin grid.

The input spectrum is treated as piecewise linear between its breakpoints.
Each output bin receives the average of that function over the bin's
wavelength interval, integrated with the trapezoidal rule segment by segment.

Boundary policy:
- A single-sample input is a flat spectrum.
- An interval entirely below (above) the table takes the first (last) value.
- The part of an interval that straddles the end of the table contributes
  nothing; it is not extrapolated from the edge values.
"""

from typing import Sequence

import numpy as np

from ..errors import DegenerateIntervalError, EmptySpectrumError, LengthMismatchError
from ..models.spectrum import SPECTRAL_SAMPLE_COUNT, SampledSpectrum, bin_bounds
from ..models.tabulated import TabulatedSpectrum


def from_samples(
    wavelengths: Sequence[float],
    values: Sequence[float],
    count: int | None = None,
) -> SampledSpectrum:
    """Resample a tabulated spectrum onto the fixed bins.

    Args:
        wavelengths: Strictly increasing sample wavelengths in nm
        values: Intensity at each wavelength
        count: Number of samples; must equal both sequence lengths when given

    Returns:
        SampledSpectrum holding the per-bin averages

    Raises:
        LengthMismatchError: If the lengths or count disagree
        EmptySpectrumError: If there are no samples
        NonIncreasingWavelengthsError: If wavelengths are not strictly increasing
    """
    tabulated = _tabulate(wavelengths, values, count)
    return resample(tabulated)


def resample(tabulated: TabulatedSpectrum) -> SampledSpectrum:
    """Resample an already validated tabulated spectrum onto the fixed bins."""
    result = SampledSpectrum()
    for i in range(SPECTRAL_SAMPLE_COUNT):
        l_begin, l_end = bin_bounds(i)
        result[i] = _average(tabulated.wavelengths, tabulated.values, l_begin, l_end)
    return result


def average_samples(
    wavelengths: Sequence[float],
    values: Sequence[float],
    count: int | None,
    l_begin: float,
    l_end: float,
) -> float:
    """Average a tabulated spectrum over ``[l_begin, l_end]``.

    Args:
        wavelengths: Strictly increasing sample wavelengths in nm
        values: Intensity at each wavelength
        count: Number of samples (None uses the sequence length)
        l_begin: Start of the interval in nm
        l_end: End of the interval in nm, strictly greater than l_begin

    Returns:
        float: Average intensity over the interval

    Raises:
        DegenerateIntervalError: If l_end <= l_begin
    """
    if not l_end > l_begin:
        raise DegenerateIntervalError(l_begin, l_end)
    tabulated = _tabulate(wavelengths, values, count)
    return _average(tabulated.wavelengths, tabulated.values, l_begin, l_end)


def _tabulate(
    wavelengths: Sequence[float], values: Sequence[float], count: int | None
) -> TabulatedSpectrum:
    if count is not None:
        if count <= 0:
            raise EmptySpectrumError()
        if len(wavelengths) != count or len(values) != count:
            raise LengthMismatchError(len(wavelengths), len(values), count)
    return TabulatedSpectrum(wavelengths=wavelengths, values=values)


def _average(
    wavelengths: np.ndarray, values: np.ndarray, l_begin: float, l_end: float
) -> float:
    """Trapezoidal average over one interval; inputs are assumed validated."""
    count = len(wavelengths)

    if count == 1:
        return float(values[0])

    if l_end <= wavelengths[0]:
        return float(values[0])

    if l_begin >= wavelengths[count - 1]:
        return float(values[count - 1])

    # First segment whose upper breakpoint reaches l_begin
    i = max(int(np.searchsorted(wavelengths, l_begin, side="left")) - 1, 0)

    def interpolate(wavelength: float, segment: int) -> float:
        w0 = wavelengths[segment]
        w1 = wavelengths[segment + 1]
        t = (wavelength - w0) / (w1 - w0)
        return values[segment] * (1.0 - t) + values[segment + 1] * t

    area = 0.0
    while i + 1 < count and l_end >= wavelengths[i]:
        l0 = max(l_begin, wavelengths[i])
        l1 = min(l_end, wavelengths[i + 1])
        area += 0.5 * (interpolate(l0, i) + interpolate(l1, i)) * (l1 - l0)
        i += 1

    return float(area / (l_end - l_begin))
