"""Tests for resampling tabulated spectra onto the fixed bins."""

import numpy as np
import pytest

from sampled_spectrum.errors import (
    DegenerateIntervalError,
    EmptySpectrumError,
    LengthMismatchError,
    NonIncreasingWavelengthsError,
)
from sampled_spectrum.models import SampledSpectrum, TabulatedSpectrum, bin_centers
from sampled_spectrum.resampling import average_samples, from_samples, resample


class TestAverageSamples:
    def test_single_sample_is_flat(self):
        """One sample means the same value everywhere."""
        assert average_samples([550.0], [3.0], 1, 400.0, 410.0) == 3.0
        assert average_samples([550.0], [3.0], 1, 800.0, 900.0) == 3.0

    def test_interval_below_table_clamps_to_first_value(self):
        wavelengths = [500.0, 600.0]
        values = [2.0, 4.0]
        assert average_samples(wavelengths, values, 2, 400.0, 450.0) == 2.0
        assert average_samples(wavelengths, values, 2, 450.0, 500.0) == 2.0

    def test_interval_above_table_clamps_to_last_value(self):
        wavelengths = [500.0, 600.0]
        values = [2.0, 4.0]
        assert average_samples(wavelengths, values, 2, 600.0, 650.0) == 4.0
        assert average_samples(wavelengths, values, 2, 650.0, 700.0) == 4.0

    def test_linear_segment_average_is_midpoint_value(self):
        """The average of a linear function is its value at the midpoint."""
        result = average_samples([500.0, 600.0], [0.0, 100.0], 2, 520.0, 540.0)
        assert result == pytest.approx(30.0)

    def test_multiple_segments(self):
        """Trapezoids from every overlapped segment are summed."""
        result = average_samples(
            [400.0, 500.0, 600.0], [0.0, 10.0, 0.0], 3, 450.0, 550.0
        )
        assert result == pytest.approx(7.5)

    def test_interval_aligned_to_breakpoints(self):
        result = average_samples(
            [400.0, 500.0, 600.0], [0.0, 10.0, 0.0], 3, 500.0, 600.0
        )
        assert result == pytest.approx(5.0)

    def test_portion_outside_table_contributes_zero(self):
        """No extrapolation: the part of the interval below the table adds nothing."""
        result = average_samples([500.0, 600.0], [1.0, 1.0], 2, 490.0, 510.0)
        assert result == pytest.approx(0.5)

        result = average_samples([500.0, 600.0], [1.0, 1.0], 2, 590.0, 610.0)
        assert result == pytest.approx(0.5)

    def test_zero_width_interval_rejected(self):
        with pytest.raises(DegenerateIntervalError):
            average_samples([500.0, 600.0], [1.0, 1.0], 2, 550.0, 550.0)

    def test_reversed_interval_rejected(self):
        with pytest.raises(DegenerateIntervalError):
            average_samples([500.0], [1.0], 1, 560.0, 550.0)

    def test_degenerate_interval_is_value_error(self):
        with pytest.raises(ValueError):
            average_samples([500.0, 600.0], [1.0, 1.0], 2, 550.0, 540.0)

    def test_zero_count_rejected(self):
        with pytest.raises(EmptySpectrumError):
            average_samples([], [], 0, 400.0, 405.0)

    def test_count_must_match_lengths(self):
        with pytest.raises(LengthMismatchError):
            average_samples([500.0, 600.0], [1.0, 1.0], 1, 400.0, 405.0)

    def test_count_none_uses_length(self):
        result = average_samples([500.0, 600.0], [1.0, 3.0], None, 540.0, 560.0)
        assert result == pytest.approx(2.0)


class TestFromSamples:
    def test_flat_spectrum_inside_domain(self):
        """Flat input over [500, 600] gives 1.0 in every bin."""
        spectrum = from_samples([500.0, 600.0], [1.0, 1.0], 2)

        assert isinstance(spectrum, SampledSpectrum)
        assert len(spectrum) == 60
        assert np.allclose(spectrum.to_array(), 1.0, atol=1e-5)

    def test_single_sample_fills_every_bin(self):
        spectrum = from_samples([620.0], [0.75], 1)
        assert np.all(spectrum.to_array() == 0.75)

    def test_flat_spectrum_wider_than_domain(self):
        spectrum = from_samples([300.0, 900.0], [2.0, 2.0])
        assert np.allclose(spectrum.to_array(), 2.0)

    def test_ramp_averages_to_bin_centers(self):
        """A ramp equal to its wavelength averages to each bin's center."""
        spectrum = from_samples([400.0, 700.0], [400.0, 700.0])
        assert np.allclose(spectrum.to_array(), bin_centers())

    def test_irregular_spacing(self):
        wavelengths = [380.0, 401.0, 455.5, 512.0, 640.0, 720.0]
        values = [0.0, 1.0, 1.0, 1.0, 1.0, 1.0]
        spectrum = from_samples(wavelengths, values)

        assert np.allclose(spectrum.to_array()[1:], 1.0)
        assert 0.9 < spectrum[0] < 1.0

    def test_non_increasing_wavelengths(self):
        with pytest.raises(NonIncreasingWavelengthsError):
            from_samples([500.0, 450.0, 600.0], [1.0, 1.0, 1.0], 3)

    def test_count_mismatch(self):
        with pytest.raises(LengthMismatchError):
            from_samples([500.0, 600.0], [1.0, 1.0], 3)

    def test_empty_input(self):
        with pytest.raises(EmptySpectrumError):
            from_samples([], [])

    def test_static_method_delegates(self):
        spectrum = SampledSpectrum.from_samples([500.0, 600.0], [1.0, 1.0], 2)
        assert spectrum == from_samples([500.0, 600.0], [1.0, 1.0], 2)

        value = SampledSpectrum.average_samples(
            [500.0, 600.0], [0.0, 100.0], 2, 520.0, 540.0
        )
        assert value == pytest.approx(30.0)

    def test_resample_tabulated(self):
        tabulated = TabulatedSpectrum(wavelengths=[500.0, 600.0], values=[1.0, 1.0])
        assert resample(tabulated) == from_samples([500.0, 600.0], [1.0, 1.0])

    def test_numpy_inputs(self):
        wavelengths = np.linspace(360.0, 830.0, 471)
        values = np.full(471, 0.5)
        spectrum = from_samples(wavelengths, values, 471)
        assert np.allclose(spectrum.to_array(), 0.5)
