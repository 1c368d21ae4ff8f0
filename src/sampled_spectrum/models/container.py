"""Fixed-length container of spectral intensities."""

import operator
from typing import Iterator

import numpy as np

from ..errors import FrozenSpectrumError, NonFiniteSampleError, SampleIndexError


def _check_finite(values) -> None:
    bad = np.flatnonzero(~np.isfinite(values))
    if len(bad):
        raise NonFiniteSampleError(float(np.ravel(values)[bad[0]]))


class FixedSpectralContainer:
    """Ordered sequence of exactly ``size`` float intensities.

    The length is fixed at construction. Indexing is bounds-checked against
    ``[0, size)``; negative indices and slices are rejected rather than
    wrapped.
    """

    __slots__ = ("_samples",)

    def __init__(self, size: int, fill: float = 0.0):
        if size <= 0:
            raise ValueError("Container size must be positive")
        _check_finite(np.array([fill], dtype=np.float64))
        self._samples = np.full(size, fill, dtype=np.float64)

    @classmethod
    def from_array(cls, values) -> "FixedSpectralContainer":
        """Build a container holding a copy of ``values``."""
        array = np.array(values, dtype=np.float64)
        if array.ndim != 1:
            raise ValueError("Container values must be one-dimensional")
        _check_finite(array)
        container = cls(len(array))
        container._samples[:] = array
        return container

    def _check_index(self, index) -> int:
        try:
            i = operator.index(index)
        except TypeError:
            raise SampleIndexError(index, len(self._samples)) from None
        if i < 0 or i >= len(self._samples):
            raise SampleIndexError(index, len(self._samples))
        return i

    def __getitem__(self, index) -> float:
        return float(self._samples[self._check_index(index)])

    def __setitem__(self, index, value: float) -> None:
        i = self._check_index(index)
        if self.frozen:
            raise FrozenSpectrumError()
        _check_finite(np.array([value], dtype=np.float64))
        self._samples[i] = value

    def __len__(self) -> int:
        return len(self._samples)

    def __iter__(self) -> Iterator[float]:
        return (float(v) for v in self._samples)

    def __eq__(self, other) -> bool:
        if not isinstance(other, FixedSpectralContainer):
            return NotImplemented
        return np.array_equal(self._samples, other._samples)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={len(self)})"

    @property
    def frozen(self) -> bool:
        return not self._samples.flags.writeable

    def freeze(self) -> None:
        """Make the container read-only."""
        self._samples.flags.writeable = False

    def copy(self) -> "FixedSpectralContainer":
        """Return a writable copy."""
        return FixedSpectralContainer.from_array(self._samples)

    def __copy__(self) -> "FixedSpectralContainer":
        return self.copy()

    def __deepcopy__(self, memo) -> "FixedSpectralContainer":
        return self.copy()

    def to_array(self) -> np.ndarray:
        """Return the samples as a new numpy array."""
        return self._samples.copy()

    @property
    def samples(self) -> np.ndarray:
        """Read-only view of the samples."""
        view = self._samples.view()
        view.flags.writeable = False
        return view
