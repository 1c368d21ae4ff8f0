import argparse
import sys
from pathlib import Path

import numpy as np

from . import __version__
from .color import (
    apply_exposure_and_tonemap,
    linear_rgb_to_srgb,
    linear_to_srgb_8bit,
    spectrum_to_rgb,
    spectrum_to_xyz,
    xyz_to_rgb,
)
from .cie.reference import default_cache
from .errors import SpectrumError, handle_error
from .models import SampledSpectrum, Swatch, bin_bounds
from .resampling import from_samples
from .swatch import write_swatch


def parse_float_list(text: str) -> list[float]:
    """Parse a comma-separated list of floats.

    Args:
        text: Input such as ``"400,550,700"``

    Returns:
        List of parsed floats
    """
    items = [item.strip() for item in text.split(",") if item.strip()]
    try:
        return [float(item) for item in items]
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"expected comma-separated numbers, got '{text}'"
        ) from None


def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Resample a tabulated spectrum onto 60 bins (400-700 nm) and convert it to XYZ and RGB."
    )
    parser.add_argument(
        "--wavelengths",
        type=parse_float_list,
        default=None,
        help="Comma-separated, strictly increasing wavelengths in nm",
    )
    parser.add_argument(
        "--values",
        type=parse_float_list,
        default=None,
        help="Comma-separated intensities, one per wavelength",
    )
    parser.add_argument(
        "--constant",
        type=float,
        default=None,
        help="Use a flat spectrum with this intensity instead of --wavelengths/--values",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Write a PNG colour swatch to this path",
    )
    parser.add_argument(
        "--samples",
        action="store_true",
        help="Print the 60 resampled bin values",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Print reference curve details",
    )
    return parser.parse_args(argv)


def build_spectrum(
    wavelengths: list[float] | None,
    values: list[float] | None,
    constant: float | None,
) -> tuple[SampledSpectrum, str]:
    """Build the spectrum described by the command-line options.

    Returns:
        The spectrum and a short description of where it came from
    """
    if constant is not None:
        if wavelengths is not None or values is not None:
            raise SpectrumError(
                "--constant cannot be combined with --wavelengths/--values",
                suggestions=["Pass either a flat spectrum or a tabulated one"],
            )
        return SampledSpectrum(constant), f"constant {constant:g}"

    if wavelengths is None or values is None:
        raise SpectrumError(
            "No spectrum given",
            suggestions=[
                "Pass --wavelengths and --values together",
                "Or pass --constant for a flat spectrum",
            ],
        )

    spectrum = from_samples(wavelengths, values)
    return spectrum, f"tabulated {len(wavelengths)} samples"


def make_swatch(spectrum: SampledSpectrum, source: str) -> Swatch:
    """Compute display colour for a spectrum."""
    xyz = spectrum_to_xyz(spectrum)
    rgb_linear = spectrum_to_rgb(spectrum)

    xyz_tonemapped = apply_exposure_and_tonemap(xyz)
    srgb = linear_rgb_to_srgb(xyz_to_rgb(xyz_tonemapped))
    srgb_8bit = linear_to_srgb_8bit(srgb)

    return Swatch(
        source=source,
        xyz=tuple(float(v) for v in xyz),
        rgb_linear=tuple(float(v) for v in rgb_linear),
        srgb_8bit=tuple(int(v) for v in srgb_8bit),
        generator_id=f"sampled-spectrum-{__version__}",
    )


def print_verbose_info(spectrum: SampledSpectrum) -> None:
    """Print reference curve details for verbose output."""
    cache = default_cache()
    dataset = cache.dataset()

    print("=== VERBOSE: Reference Curves ===")
    print(f"  Dataset: {dataset.name}")
    print(
        f"  Rows: {len(dataset)} ({dataset.wavelengths[0]:g}-{dataset.wavelengths[-1]:g} nm)"
    )
    print(f"  ȳ integral: {cache.y_integral():.6f}")
    print(f"  Spectrum energy: {float(np.sum(spectrum.samples)):.6f}")
    print("=== END VERBOSE ===")
    print()


def print_samples(spectrum: SampledSpectrum) -> None:
    for i, value in enumerate(spectrum):
        l_begin, l_end = bin_bounds(i)
        print(f"  [{l_begin:6.1f}, {l_end:6.1f}) nm: {value:.6f}")
    print()


def run(
    wavelengths: list[float] | None = None,
    values: list[float] | None = None,
    constant: float | None = None,
    output_path: str | None = None,
    print_bins: bool = False,
    verbose: bool = False,
) -> int:
    """Convert a spectrum, print its colour and optionally write a swatch.

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    try:
        spectrum, source = build_spectrum(wavelengths, values, constant)
    except SpectrumError as e:
        return handle_error(e, "building spectrum")

    try:
        if verbose:
            print_verbose_info(spectrum)

        if print_bins:
            print_samples(spectrum)

        swatch = make_swatch(spectrum, source)

        print(f"Spectrum: {source}")
        print(f"  XYZ: {swatch.xyz[0]:.6f}, {swatch.xyz[1]:.6f}, {swatch.xyz[2]:.6f}")
        print(
            f"  RGB (linear): {swatch.rgb_linear[0]:.6f}, {swatch.rgb_linear[1]:.6f}, {swatch.rgb_linear[2]:.6f}"
        )
        print(
            f"  sRGB (display): {swatch.srgb_8bit[0]}, {swatch.srgb_8bit[1]}, {swatch.srgb_8bit[2]}"
        )

        if output_path is not None:
            output_file = Path(output_path)
            output_file.parent.mkdir(parents=True, exist_ok=True)
            write_swatch(swatch, str(output_file))
            print(f"Swatch saved to: {output_file}")

        return 0

    except Exception as e:
        return handle_error(e, "converting spectrum")


def main():
    """CLI entry point."""
    args = parse_args()

    exit_code = run(
        wavelengths=args.wavelengths,
        values=args.values,
        constant=args.constant,
        output_path=args.output,
        print_bins=args.samples,
        verbose=args.verbose,
    )

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
