"""Lazily computed colour-matching curves on the fixed 60-bin grid.

Each cached value (the dataset, the three resampled curves and the ȳ
integral) is computed at most once per cache, under its own lock, and the
same object is returned to every caller afterwards. Cached spectra are frozen.
"""

import threading
from typing import Callable, Optional

import numpy as np

from ..models.spectrum import SampledSpectrum
from ..models.tabulated import CIEDataset
from ..resampling.resampler import resample
from .dataset import load_cie_1931


class _Once:
    """Holds a value computed on first access, guarded by a lock."""

    _UNSET = object()

    def __init__(self, compute: Callable[[], object]):
        self._compute = compute
        self._value = self._UNSET
        self._lock = threading.Lock()

    def get(self):
        value = self._value
        if value is not self._UNSET:
            return value
        with self._lock:
            if self._value is self._UNSET:
                self._value = self._compute()
            return self._value

    @property
    def ready(self) -> bool:
        return self._value is not self._UNSET


class ReferenceCurveCache:
    """Resampled CIE curves and normalization constant, computed on demand."""

    def __init__(self, dataset_factory: Callable[[], CIEDataset] = load_cie_1931):
        """Initialize with the source of the colour-matching dataset.

        Args:
            dataset_factory: Called once, on first use, to obtain the dataset
        """
        self._dataset = _Once(dataset_factory)
        self._x = _Once(lambda: self._resample("x"))
        self._y = _Once(lambda: self._resample("y"))
        self._z = _Once(lambda: self._resample("z"))
        self._y_integral = _Once(self._sum_y)

    def _resample(self, component: str) -> SampledSpectrum:
        return resample(self.dataset().tabulated(component)).freeze()

    def _sum_y(self) -> float:
        return float(np.sum(self.dataset().y_bar))

    def dataset(self) -> CIEDataset:
        return self._dataset.get()

    def X(self) -> SampledSpectrum:
        return self._x.get()

    def Y(self) -> SampledSpectrum:
        return self._y.get()

    def Z(self) -> SampledSpectrum:
        return self._z.get()

    def y_integral(self) -> float:
        """Sum of the raw, unresampled ȳ table values."""
        return self._y_integral.get()

    @property
    def warmed(self) -> bool:
        return all(
            once.ready for once in (self._x, self._y, self._z, self._y_integral)
        )


_default_cache: Optional[ReferenceCurveCache] = None
_default_lock = threading.Lock()


def default_cache() -> ReferenceCurveCache:
    """Return the process-wide cache backed by the CIE 1931 observer."""
    global _default_cache
    if _default_cache is None:
        with _default_lock:
            if _default_cache is None:
                _default_cache = ReferenceCurveCache()
    return _default_cache


def X() -> SampledSpectrum:
    return default_cache().X()


def Y() -> SampledSpectrum:
    return default_cache().Y()


def Z() -> SampledSpectrum:
    return default_cache().Z()


def y_integral() -> float:
    return default_cache().y_integral()
