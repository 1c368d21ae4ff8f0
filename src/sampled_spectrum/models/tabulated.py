from dataclasses import dataclass

import numpy as np

from ..errors import (
    ContractViolationError,
    DatasetError,
    EmptySpectrumError,
    LengthMismatchError,
    NonIncreasingWavelengthsError,
)


def _read_only(values) -> np.ndarray:
    array = np.array(values, dtype=np.float64).reshape(-1)
    array.flags.writeable = False
    return array


def _check_increasing(wavelengths: np.ndarray) -> None:
    steps = np.diff(wavelengths)
    bad = np.flatnonzero(~(steps > 0))
    if len(bad):
        i = int(bad[0]) + 1
        raise NonIncreasingWavelengthsError(
            i, float(wavelengths[i - 1]), float(wavelengths[i])
        )


@dataclass(frozen=True)
class TabulatedSpectrum:
    """Spectrum given as (wavelength, value) pairs at arbitrary spacing."""

    wavelengths: np.ndarray
    values: np.ndarray

    def __post_init__(self):
        wavelengths = _read_only(self.wavelengths)
        values = _read_only(self.values)
        if len(wavelengths) != len(values):
            raise LengthMismatchError(len(wavelengths), len(values))
        if len(wavelengths) == 0:
            raise EmptySpectrumError()
        if not np.all(np.isfinite(wavelengths)):
            raise ContractViolationError("Wavelengths must be finite")
        if not np.all(np.isfinite(values)):
            raise ContractViolationError("Spectrum values must be finite")
        _check_increasing(wavelengths)
        object.__setattr__(self, "wavelengths", wavelengths)
        object.__setattr__(self, "values", values)

    def __len__(self) -> int:
        return len(self.wavelengths)


@dataclass(frozen=True)
class CIEDataset:
    """Colour-matching functions tabulated on one shared wavelength grid."""

    wavelengths: np.ndarray
    x_bar: np.ndarray
    y_bar: np.ndarray
    z_bar: np.ndarray
    name: str = "custom"

    def __post_init__(self):
        wavelengths = _read_only(self.wavelengths)
        curves = [_read_only(c) for c in (self.x_bar, self.y_bar, self.z_bar)]
        for curve in curves:
            if len(curve) != len(wavelengths):
                raise LengthMismatchError(len(wavelengths), len(curve))
        if len(wavelengths) < 2:
            raise DatasetError(
                f"{self.name} has {len(wavelengths)} rows, at least 2 are required"
            )
        _check_increasing(wavelengths)
        object.__setattr__(self, "wavelengths", wavelengths)
        object.__setattr__(self, "x_bar", curves[0])
        object.__setattr__(self, "y_bar", curves[1])
        object.__setattr__(self, "z_bar", curves[2])

    def __len__(self) -> int:
        return len(self.wavelengths)

    def tabulated(self, component: str) -> TabulatedSpectrum:
        """Return one of ``"x"``, ``"y"``, ``"z"`` as a tabulated spectrum."""
        curves = {"x": self.x_bar, "y": self.y_bar, "z": self.z_bar}
        if component not in curves:
            raise ValueError(f"Unknown colour-matching component: {component}")
        return TabulatedSpectrum(wavelengths=self.wavelengths, values=curves[component])
