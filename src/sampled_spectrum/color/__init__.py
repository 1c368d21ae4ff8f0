from .conversion import XYZ_TO_RGB_MATRIX, spectrum_to_rgb, spectrum_to_xyz, xyz_to_rgb
from .encoding import (
    linear_rgb_to_srgb,
    linear_to_srgb_8bit,
)
from .tonemapping import apply_exposure_and_tonemap

__all__ = [
    "XYZ_TO_RGB_MATRIX",
    "spectrum_to_xyz",
    "spectrum_to_rgb",
    "xyz_to_rgb",
    "apply_exposure_and_tonemap",
    "linear_rgb_to_srgb",
    "linear_to_srgb_8bit",
]
