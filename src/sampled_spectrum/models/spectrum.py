"""Discretized spectrum over the fixed working wavelength domain."""

from typing import Iterator, Sequence

import numpy as np

from ..errors import SampleCountError
from .container import FixedSpectralContainer

WAVELENGTH_BEGIN = 400.0
WAVELENGTH_END = 700.0
SPECTRAL_SAMPLE_COUNT = 60


def bin_wavelength(i: int) -> float:
    """Return the lower wavelength boundary of bin ``i`` in nm.

    ``bin_wavelength(SPECTRAL_SAMPLE_COUNT)`` is the upper end of the domain.
    """
    if i < 0 or i > SPECTRAL_SAMPLE_COUNT:
        raise ValueError(
            f"Bin boundary index {i} outside [0, {SPECTRAL_SAMPLE_COUNT}]"
        )
    return (
        WAVELENGTH_BEGIN
        + (WAVELENGTH_END - WAVELENGTH_BEGIN) * i / SPECTRAL_SAMPLE_COUNT
    )


def bin_bounds(i: int) -> tuple[float, float]:
    """Return the ``[begin, end)`` wavelength interval covered by bin ``i``."""
    return bin_wavelength(i), bin_wavelength(i + 1)


def bin_edges() -> np.ndarray:
    """Return all ``SPECTRAL_SAMPLE_COUNT + 1`` bin boundaries."""
    return np.array([bin_wavelength(i) for i in range(SPECTRAL_SAMPLE_COUNT + 1)])


def bin_centers() -> np.ndarray:
    edges = bin_edges()
    return 0.5 * (edges[:-1] + edges[1:])


class SampledSpectrum:
    """Spectral power distribution averaged over 60 equal bins in 400-700 nm.

    Sample ``i`` is the average intensity over ``bin_bounds(i)``. Bin
    boundaries are derived from the module constants and never stored.
    """

    __slots__ = ("_container",)

    SAMPLE_COUNT = SPECTRAL_SAMPLE_COUNT

    def __init__(self, fill: float = 0.0):
        self._container = FixedSpectralContainer(SPECTRAL_SAMPLE_COUNT, fill)

    @classmethod
    def from_array(cls, values: Sequence[float]) -> "SampledSpectrum":
        """Build a spectrum from exactly 60 bin values."""
        array = np.asarray(values, dtype=np.float64)
        if array.shape != (SPECTRAL_SAMPLE_COUNT,):
            raise SampleCountError(SPECTRAL_SAMPLE_COUNT, array.size)
        container = FixedSpectralContainer.from_array(array)
        spectrum = cls()
        spectrum._container = container
        return spectrum

    @staticmethod
    def from_samples(
        wavelengths: Sequence[float],
        values: Sequence[float],
        count: int | None = None,
    ) -> "SampledSpectrum":
        from ..resampling.resampler import from_samples

        return from_samples(wavelengths, values, count)

    @staticmethod
    def average_samples(
        wavelengths: Sequence[float],
        values: Sequence[float],
        count: int,
        l_begin: float,
        l_end: float,
    ) -> float:
        from ..resampling.resampler import average_samples

        return average_samples(wavelengths, values, count, l_begin, l_end)

    @staticmethod
    def X() -> "SampledSpectrum":
        from ..cie import reference

        return reference.X()

    @staticmethod
    def Y() -> "SampledSpectrum":
        from ..cie import reference

        return reference.Y()

    @staticmethod
    def Z() -> "SampledSpectrum":
        from ..cie import reference

        return reference.Z()

    @staticmethod
    def y_integral() -> float:
        from ..cie import reference

        return reference.y_integral()

    def to_xyz(self) -> np.ndarray:
        """Convert to CIE XYZ using the shared reference curves."""
        from ..color.conversion import spectrum_to_xyz

        return spectrum_to_xyz(self)

    def to_rgb(self) -> np.ndarray:
        """Convert to linear RGB (unclamped, no gamma)."""
        from ..color.conversion import spectrum_to_rgb

        return spectrum_to_rgb(self)

    def __getitem__(self, index) -> float:
        return self._container[index]

    def __setitem__(self, index, value: float) -> None:
        self._container[index] = value

    def __len__(self) -> int:
        return SPECTRAL_SAMPLE_COUNT

    def __iter__(self) -> Iterator[float]:
        return iter(self._container)

    def __eq__(self, other) -> bool:
        if not isinstance(other, SampledSpectrum):
            return NotImplemented
        return self._container == other._container

    def __repr__(self) -> str:
        return f"SampledSpectrum({WAVELENGTH_BEGIN:g}-{WAVELENGTH_END:g} nm, {SPECTRAL_SAMPLE_COUNT} bins)"

    @property
    def samples(self) -> np.ndarray:
        """Read-only view of the 60 bin values."""
        return self._container.samples

    @property
    def frozen(self) -> bool:
        return self._container.frozen

    def freeze(self) -> "SampledSpectrum":
        """Make this spectrum read-only and return it."""
        self._container.freeze()
        return self

    def copy(self) -> "SampledSpectrum":
        spectrum = SampledSpectrum()
        spectrum._container = self._container.copy()
        return spectrum

    def __copy__(self) -> "SampledSpectrum":
        return self.copy()

    def __deepcopy__(self, memo) -> "SampledSpectrum":
        return self.copy()

    def to_array(self) -> np.ndarray:
        return self._container.to_array()

    def _combine(self, other, op) -> "SampledSpectrum":
        if isinstance(other, SampledSpectrum):
            return SampledSpectrum.from_array(op(self.samples, other.samples))
        if isinstance(other, (int, float, np.floating, np.integer)):
            return SampledSpectrum.from_array(op(self.samples, float(other)))
        return NotImplemented

    def __add__(self, other):
        return self._combine(other, np.add)

    __radd__ = __add__

    def __sub__(self, other):
        return self._combine(other, np.subtract)

    def __rsub__(self, other):
        return self._combine(other, lambda a, b: np.subtract(b, a))

    def __mul__(self, other):
        return self._combine(other, np.multiply)

    __rmul__ = __mul__

    def __truediv__(self, other):
        return self._combine(other, np.divide)

    def __neg__(self) -> "SampledSpectrum":
        return SampledSpectrum.from_array(-self.samples)
