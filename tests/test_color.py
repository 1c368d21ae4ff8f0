"""Tests for Spectrum → Color Pipeline."""

import numpy as np
import pytest

from sampled_spectrum.cie import ReferenceCurveCache
from sampled_spectrum.color import (
    XYZ_TO_RGB_MATRIX,
    apply_exposure_and_tonemap,
    linear_rgb_to_srgb,
    linear_to_srgb_8bit,
    spectrum_to_rgb,
    spectrum_to_xyz,
    xyz_to_rgb,
)
from sampled_spectrum.errors import DatasetError
from sampled_spectrum.models import CIEDataset, SampledSpectrum


def flat_dataset():
    return CIEDataset(
        wavelengths=[400.0, 700.0],
        x_bar=[1.0, 1.0],
        y_bar=[1.0, 1.0],
        z_bar=[1.0, 1.0],
        name="flat",
    )


def random_spectrum(seed: int) -> SampledSpectrum:
    rng = np.random.default_rng(seed)
    return SampledSpectrum.from_array(rng.random(60))


class TestSpectrumToXYZ:
    def test_zero_spectrum_black(self):
        """Zero spectrum → exactly black."""
        spectrum = SampledSpectrum()

        assert np.all(spectrum_to_xyz(spectrum) == 0.0)
        assert np.all(spectrum_to_rgb(spectrum) == 0.0)
        assert np.all(spectrum.to_rgb() == 0.0)

    def test_energy_luminance(self):
        """More energy → higher luminance."""
        low_xyz = spectrum_to_xyz(SampledSpectrum(0.1))
        high_xyz = spectrum_to_xyz(SampledSpectrum(1.0))

        assert high_xyz[1] > low_xyz[1], "Higher energy should produce higher luminance"

    def test_equal_energy_luminance_near_one(self):
        """Unit flat spectrum has Y close to 1 with ȳ normalization."""
        xyz = SampledSpectrum(1.0).to_xyz()

        assert 0.98 < xyz[1] < 1.01
        assert np.all(xyz > 0.9)

    def test_additivity(self):
        s1 = random_spectrum(1)
        s2 = random_spectrum(2)

        assert np.allclose(
            spectrum_to_xyz(s1 + s2), spectrum_to_xyz(s1) + spectrum_to_xyz(s2)
        )
        assert np.allclose(
            spectrum_to_rgb(s1 + s2), spectrum_to_rgb(s1) + spectrum_to_rgb(s2)
        )

    def test_homogeneity(self):
        s1 = random_spectrum(3)
        k = 2.75

        assert np.allclose(spectrum_to_xyz(k * s1), k * spectrum_to_xyz(s1))
        assert np.allclose(spectrum_to_rgb(k * s1), k * spectrum_to_rgb(s1))

    def test_hue_ordering(self):
        """Narrow bands in blue and red produce distinct colours."""
        blue = SampledSpectrum()
        blue[10] = 1.0  # 450-455 nm
        red = SampledSpectrum()
        red[40] = 1.0  # 600-605 nm

        xyz_blue = spectrum_to_xyz(blue)
        xyz_red = spectrum_to_xyz(red)

        assert xyz_blue[2] > xyz_red[2]
        assert xyz_red[0] > xyz_blue[0]

    def test_synthetic_cache(self):
        """Flat unit curves: XYZ = 60 * 300 / (60 * 2) = 150."""
        cache = ReferenceCurveCache(flat_dataset)

        xyz = spectrum_to_xyz(SampledSpectrum(1.0), cache)

        assert np.allclose(xyz, [150.0, 150.0, 150.0])
        assert np.allclose(
            spectrum_to_rgb(SampledSpectrum(1.0), cache),
            XYZ_TO_RGB_MATRIX @ np.array([150.0, 150.0, 150.0]),
        )

    def test_zero_y_integral_rejected(self):
        def dark_dataset():
            return CIEDataset(
                wavelengths=[400.0, 700.0],
                x_bar=[1.0, 1.0],
                y_bar=[0.0, 0.0],
                z_bar=[1.0, 1.0],
            )

        cache = ReferenceCurveCache(dark_dataset)

        with pytest.raises(DatasetError):
            spectrum_to_xyz(SampledSpectrum(1.0), cache)


class TestXYZToRGB:
    def test_d65_white_maps_to_unit_rgb(self):
        rgb = xyz_to_rgb(np.array([0.95047, 1.0, 1.08883]))

        assert np.allclose(rgb, 1.0, atol=1e-3)

    def test_out_of_gamut_not_clamped(self):
        """Monochromatic cyan is outside the RGB gamut: red goes negative."""
        cyan = SampledSpectrum()
        cyan[20] = 1.0  # 500-505 nm

        rgb = cyan.to_rgb()

        assert rgb[0] < 0.0
        assert rgb[1] > 0.0

    def test_matrix_coefficients(self):
        assert XYZ_TO_RGB_MATRIX[0, 0] == 3.240479
        assert XYZ_TO_RGB_MATRIX[1, 1] == 1.875991
        assert XYZ_TO_RGB_MATRIX[2, 2] == 1.057311


class TestToneMapping:
    def test_tonemapping_hue_preservation(self):
        """Tone mapping preserves hue ordering."""
        xyz_blue = np.array([0.1, 0.1, 0.3])
        xyz_red = np.array([0.3, 0.1, 0.1])

        tonemapped_blue = apply_exposure_and_tonemap(xyz_blue)
        tonemapped_red = apply_exposure_and_tonemap(xyz_red)

        assert tonemapped_blue[2] > tonemapped_red[2], "Blue hue should be preserved"
        assert tonemapped_red[0] > tonemapped_blue[0], "Red hue should be preserved"

    def test_zero_luminance_black(self):
        """Zero luminance remains black after tone mapping."""
        tonemapped = apply_exposure_and_tonemap(np.array([0.0, 0.0, 0.0]))

        assert np.allclose(tonemapped, 0.0), "Zero luminance should remain black"

    def test_high_values_compressed(self):
        """High values are brought into [0, 1] range."""
        tonemapped = apply_exposure_and_tonemap(np.array([10.0, 10.0, 10.0]))

        assert np.all(tonemapped >= 0.0), "Tone-mapped values should be non-negative"
        assert np.all(tonemapped <= 1.0), "Tone-mapped values should be ≤ 1.0"


class TestSrgbEncoding:
    def test_range(self):
        srgb = linear_rgb_to_srgb(np.array([0.5, 2.0, 0.0]))

        assert np.all(srgb >= 0.0), "sRGB values should be non-negative"
        assert np.all(srgb <= 1.0), "sRGB values should be ≤ 1.0"

    def test_gamma_encoding(self):
        """Linear 0.5 encodes to roughly 0.735."""
        srgb = linear_rgb_to_srgb(np.array([0.5, 0.5, 0.5]))

        assert np.allclose(srgb, 0.7354, atol=1e-3)

    def test_negative_clipped(self):
        srgb = linear_rgb_to_srgb(np.array([-0.2, 0.0, 0.001]))

        assert srgb[0] == 0.0
        assert srgb[1] == 0.0
        assert srgb[2] == pytest.approx(0.01292)


class TestQuantization:
    def test_8bit_scaling(self):
        srgb_8bit = linear_to_srgb_8bit(np.array([0.0, 0.5, 1.0]))

        expected = np.array([0, 128, 255], dtype=np.uint8)

        assert np.allclose(srgb_8bit, expected, atol=1), (
            "8-bit scaling should be correct"
        )
        assert srgb_8bit.dtype == np.uint8
